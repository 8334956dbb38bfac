# users/tests/test_user_services.py

from django.test import TestCase

from core.exceptions import BusinessRuleViolation, ValidationError
from core.tests.factories import make_buyer, make_dealership, make_offer, make_purchase
from users.models import Dealership
from users.services import buyer_service, dealership_service


class DealershipServiceTests(TestCase):
    def _create(self, **overrides):
        data = {
            "business_name": "Autos del Norte",
            "cuit": "30712345678",
            "email": "Ventas@AutosNorte.com",
            "phone": "3814567890",
            "city": "Tucuman",
            "province": "Tucuman",
        }
        data.update(overrides)
        return dealership_service.create_dealership(**data)

    def test_create_normalizes_email(self):
        dealership = self._create()
        self.assertEqual(dealership.email, "ventas@autosnorte.com")
        self.assertTrue(dealership.active)

    def test_duplicate_cuit_is_rejected(self):
        self._create()
        with self.assertRaisesMessage(ValidationError, "Dealership with CUIT 30712345678 already exists"):
            self._create(email="other@example.com")

    def test_cuit_must_be_eleven_digits(self):
        with self.assertRaises(ValidationError):
            self._create(cuit="1234")

    def test_activation_is_strict(self):
        dealership = self._create()

        with self.assertRaisesMessage(BusinessRuleViolation, "Dealership is already active"):
            dealership_service.activate_dealership(dealership.pk)

        dealership_service.deactivate_dealership(dealership.pk)
        with self.assertRaisesMessage(BusinessRuleViolation, "Dealership is already deactivated"):
            dealership_service.deactivate_dealership(dealership.pk)

        self.assertFalse(Dealership.objects.get(pk=dealership.pk).active)

    def test_search_only_returns_active(self):
        visible = make_dealership(city="Rosario")
        make_dealership(city="Rosario", active=False)

        self.assertEqual(list(dealership_service.search_dealerships(city="rosario")), [visible])

    def test_blank_search_filter_is_rejected(self):
        with self.assertRaises(ValidationError):
            dealership_service.search_dealerships(city="  ")

    def test_delete_blocked_by_purchases(self):
        offer = make_offer()
        make_purchase(offer=offer)

        with self.assertRaises(BusinessRuleViolation):
            dealership_service.delete_dealership(offer.dealership_id)


class BuyerServiceTests(TestCase):
    def test_create_buyer_validates_dni(self):
        with self.assertRaisesMessage(ValidationError, "DNI must contain 7 or 8 digits"):
            buyer_service.create_buyer(
                first_name="Juan",
                last_name="Perez",
                email="juan@example.com",
                address="Calle 1",
                dni="12AB",
            )

    def test_deactivate_then_activate(self):
        buyer = make_buyer()

        self.assertFalse(buyer_service.deactivate_buyer(buyer.pk).active)
        self.assertTrue(buyer_service.activate_buyer(buyer.pk).active)

        with self.assertRaises(BusinessRuleViolation):
            buyer_service.activate_buyer(buyer.pk)

    def test_duplicate_email_is_a_validation_error(self):
        make_buyer(email="dup@example.com")

        with self.assertRaises(ValidationError):
            buyer_service.create_buyer(
                first_name="Juan",
                last_name="Perez",
                email="dup@example.com",
                address="Calle 1",
                dni="12345678",
            )

    def test_buyer_with_purchases_cannot_be_deleted(self):
        buyer = make_buyer()
        make_purchase(offer=make_offer(), buyer=buyer)

        with self.assertRaises(BusinessRuleViolation):
            buyer_service.delete_buyer(buyer.pk)
