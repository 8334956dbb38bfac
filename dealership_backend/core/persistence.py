# core/persistence.py

"""
PERSISTENCE GATEWAY

Thin adapter between lifecycle services and the Django ORM.

Contract:
- load-by-id raises NotFoundError (never returns None)
- save/delete surface storage failures as PersistenceError (logged, never swallowed)
- IntegrityError is re-raised untouched: callers translate it into the
  matching domain error (duplicate offer / favorite, offer already claimed)

Offer exclusivity:
- lock_or_not_found() takes a row lock (SELECT ... FOR UPDATE) inside the
  caller's transaction.
- claim_available() is a conditional UPDATE (available = true -> false).
  Exactly one concurrent caller sees rowcount == 1, even on backends
  that ignore row locks.
"""

from __future__ import annotations

import logging

from django.db import DatabaseError, IntegrityError

from core.exceptions import NotFoundError, PersistenceError

logger = logging.getLogger("marketplace.persistence")


def get_or_not_found(model, pk, *, label: str, select_related=()):
    if pk is None:
        raise NotFoundError(f"{label} id is required")

    qs = model.objects.all()
    if select_related:
        qs = qs.select_related(*select_related)

    try:
        return qs.get(pk=pk)
    except (model.DoesNotExist, ValueError, TypeError) as exc:
        logger.warning("%s not found", label, extra={"pk": pk})
        raise NotFoundError(f"{label} with ID {pk} not found") from exc
    except DatabaseError as exc:
        logger.exception("Failed loading %s", label, extra={"pk": pk})
        raise PersistenceError(f"Could not load {label} with ID {pk}") from exc


def lock_or_not_found(model, pk, *, label: str, select_related=()):
    """
    Load a row with a write lock. MUST be called inside transaction.atomic().
    """
    if pk is None:
        raise NotFoundError(f"{label} id is required")

    qs = model.objects.select_for_update()
    if select_related:
        qs = qs.select_related(*select_related)

    try:
        return qs.get(pk=pk)
    except (model.DoesNotExist, ValueError, TypeError) as exc:
        logger.warning("%s not found", label, extra={"pk": pk})
        raise NotFoundError(f"{label} with ID {pk} not found") from exc
    except DatabaseError as exc:
        logger.exception("Failed locking %s", label, extra={"pk": pk})
        raise PersistenceError(f"Could not load {label} with ID {pk}") from exc


def save(instance, *, update_fields=None):
    try:
        if update_fields:
            instance.save(update_fields=list(update_fields))
        else:
            instance.save()
    except IntegrityError:
        raise
    except DatabaseError as exc:
        logger.exception(
            "Failed saving %s",
            type(instance).__name__,
            extra={"pk": getattr(instance, "pk", None)},
        )
        raise PersistenceError(f"Could not save {type(instance).__name__}") from exc
    return instance


def delete(instance) -> None:
    pk = instance.pk
    try:
        instance.delete()
    except IntegrityError:
        raise
    except DatabaseError as exc:
        logger.exception(
            "Failed deleting %s", type(instance).__name__, extra={"pk": pk}
        )
        raise PersistenceError(f"Could not delete {type(instance).__name__}") from exc


def claim_available(model, pk) -> bool:
    """
    Atomically flip `available` from True to False.
    Returns False when another transaction already holds the row.
    """
    try:
        updated = model.objects.filter(pk=pk, available=True).update(available=False)
    except DatabaseError as exc:
        logger.exception("Failed claiming %s", model.__name__, extra={"pk": pk})
        raise PersistenceError(f"Could not update {model.__name__} with ID {pk}") from exc
    return updated == 1
