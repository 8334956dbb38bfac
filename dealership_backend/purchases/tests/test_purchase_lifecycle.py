# purchases/tests/test_purchase_lifecycle.py

from types import SimpleNamespace

from django.test import SimpleTestCase

from core.enums import PurchaseStatus
from core.exceptions import InvalidTransitionError
from purchases.services.purchase_lifecycle import (
    OFFER_EFFECTS,
    TERMINAL_STATES,
    can_transition,
    validate_transition,
)


class PurchaseLifecycleRuleTests(SimpleTestCase):
    """
    Tests for the pure transition table (no database).

    GUARANTEES:
    - PENDING -> CONFIRMED -> DELIVERED
    - CANCELLED reachable from PENDING and CONFIRMED
    - DELIVERED and CANCELLED are absorbing
    """

    def test_allowed_transitions(self):
        allowed = [
            (PurchaseStatus.PENDING, PurchaseStatus.CONFIRMED),
            (PurchaseStatus.PENDING, PurchaseStatus.CANCELLED),
            (PurchaseStatus.CONFIRMED, PurchaseStatus.DELIVERED),
            (PurchaseStatus.CONFIRMED, PurchaseStatus.CANCELLED),
            (PurchaseStatus.CONFIRMED, PurchaseStatus.PENDING),
        ]
        for from_status, to_status in allowed:
            with self.subTest(from_status=from_status, to_status=to_status):
                self.assertTrue(can_transition(from_status=from_status, to_status=to_status))

    def test_pending_cannot_skip_to_delivered(self):
        self.assertFalse(
            can_transition(
                from_status=PurchaseStatus.PENDING, to_status=PurchaseStatus.DELIVERED
            )
        )

    def test_redundant_transition_is_not_allowed(self):
        self.assertFalse(
            can_transition(
                from_status=PurchaseStatus.CONFIRMED, to_status=PurchaseStatus.CONFIRMED
            )
        )

    def test_terminal_states_are_absorbing(self):
        for terminal in TERMINAL_STATES:
            for target in PurchaseStatus:
                with self.subTest(terminal=terminal, target=target):
                    self.assertFalse(can_transition(from_status=terminal, to_status=target))

    def test_validate_transition_raises_with_both_states(self):
        purchase = SimpleNamespace(pk=5, status=PurchaseStatus.DELIVERED)

        with self.assertRaises(InvalidTransitionError) as ctx:
            validate_transition(purchase=purchase, target_status=PurchaseStatus.CANCELLED)

        self.assertIn("DELIVERED", ctx.exception.message)
        self.assertIn("CANCELLED", ctx.exception.message)

    def test_offer_effects(self):
        self.assertIs(OFFER_EFFECTS[PurchaseStatus.CANCELLED], True)
        self.assertIs(OFFER_EFFECTS[PurchaseStatus.CONFIRMED], False)
        self.assertIs(OFFER_EFFECTS[PurchaseStatus.PENDING], False)
        self.assertIsNone(OFFER_EFFECTS[PurchaseStatus.DELIVERED])
