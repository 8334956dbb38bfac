# core/api.py

"""
API ERROR NORMALIZATION

Controllers call lifecycle services and let domain errors propagate here.
Registered as REST_FRAMEWORK["EXCEPTION_HANDLER"].

Mapping:
- 400: ValidationError, BusinessRuleViolation, DuplicateOfferError, DuplicateFavoriteError
- 404: NotFoundError
- 409: InvalidTransitionError (state conflict)
- 500: PersistenceError / anything else marketplace-specific
"""

from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from core.exceptions import (
    BusinessRuleViolation,
    DuplicateFavoriteError,
    DuplicateOfferError,
    InvalidTransitionError,
    MarketplaceError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger("marketplace.api")

# Order matters: subclasses before their bases.
ERROR_MAP = (
    (InvalidTransitionError, "INVALID_STATE_TRANSITION", status.HTTP_409_CONFLICT),
    (ValidationError, "VALIDATION_ERROR", status.HTTP_400_BAD_REQUEST),
    (NotFoundError, "NOT_FOUND", status.HTTP_404_NOT_FOUND),
    (BusinessRuleViolation, "BUSINESS_RULE_VIOLATION", status.HTTP_400_BAD_REQUEST),
    (DuplicateOfferError, "DUPLICATE_OFFER", status.HTTP_400_BAD_REQUEST),
    (DuplicateFavoriteError, "DUPLICATE_FAVORITE", status.HTTP_400_BAD_REQUEST),
    (PersistenceError, "PERSISTENCE_ERROR", status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def error_response(*, code: str, message: str, http_status: int, field: str | None = None):
    """
    Canonical API error response.
    """
    body = {"code": code, "message": message}
    if field:
        body["field"] = field
    return Response({"error": body}, status=http_status)


def resolve_error(exc: MarketplaceError) -> tuple[str, int]:
    for exc_cls, code, http_status in ERROR_MAP:
        if isinstance(exc, exc_cls):
            return code, http_status
    return "MARKETPLACE_ERROR", status.HTTP_500_INTERNAL_SERVER_ERROR


def exception_handler(exc, context):
    if isinstance(exc, MarketplaceError):
        code, http_status = resolve_error(exc)
        if http_status >= 500:
            logger.error("Marketplace failure: %s", exc.message, exc_info=exc)
        else:
            logger.info("Request rejected: %s", exc.message, extra={"code": code})
        return error_response(
            code=code,
            message=exc.message,
            http_status=http_status,
            field=getattr(exc, "field", None),
        )

    return drf_exception_handler(exc, context)
