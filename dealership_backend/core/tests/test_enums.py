# core/tests/test_enums.py

from django.test import SimpleTestCase

from core.enums import FuelType, PaymentMethod, PurchaseStatus, parse_choice
from core.exceptions import ValidationError


class ParseChoiceTests(SimpleTestCase):
    def test_parse_is_case_insensitive_and_trims(self):
        self.assertEqual(
            parse_choice(PaymentMethod, " credit_card ", field="payment_method"),
            PaymentMethod.CREDIT_CARD,
        )

    def test_member_passes_through(self):
        self.assertIs(
            parse_choice(PurchaseStatus, PurchaseStatus.CONFIRMED, field="status"),
            PurchaseStatus.CONFIRMED,
        )

    def test_unknown_value_names_field_value_and_allowed_set(self):
        with self.assertRaises(ValidationError) as ctx:
            parse_choice(FuelType, "steam", field="fuel_type")

        self.assertEqual(ctx.exception.field, "fuel_type")
        self.assertIn("'steam'", ctx.exception.message)
        self.assertIn("GASOLINE", ctx.exception.message)

    def test_none_is_rejected(self):
        with self.assertRaises(ValidationError):
            parse_choice(PurchaseStatus, None, field="status")
