# purchases/tests/test_api.py

from __future__ import annotations

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from core.enums import PurchaseStatus
from core.tests.factories import make_buyer, make_offer, make_purchase, make_user, yesterday
from offers.models import CarOffer


class PurchaseApiTests(TestCase):
    """
    Thin controller checks: services do the work, core.api maps the errors.
    """

    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=make_user())
        self.offer = make_offer()
        self.buyer = make_buyer()

    def _payload(self, **overrides):
        data = {
            "buyer_id": self.buyer.pk,
            "car_offer_id": self.offer.pk,
            "final_price": "25000.00",
            "purchase_date": yesterday().isoformat(),
            "payment_method": "CASH",
        }
        data.update(overrides)
        return data

    def test_requires_authentication(self):
        res = APIClient().get(reverse("purchases-list"))
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_create_purchase(self):
        res = self.client.post(reverse("purchases-list"), self._payload(), format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["status"], PurchaseStatus.PENDING)
        self.assertFalse(CarOffer.objects.get(pk=self.offer.pk).available)

    def test_validation_error_is_400_with_message(self):
        res = self.client.post(
            reverse("purchases-list"), self._payload(final_price="0"), format="json"
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["code"], "VALIDATION_ERROR")
        self.assertEqual(res.data["error"]["message"], "Final price must be greater than zero")

    def test_unavailable_offer_is_400_business_rule(self):
        make_purchase(offer=self.offer)

        res = self.client.post(reverse("purchases-list"), self._payload(), format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["code"], "BUSINESS_RULE_VIOLATION")
        self.assertEqual(
            res.data["error"]["message"], "Car offer is not available for purchase"
        )

    def test_missing_offer_is_404(self):
        res = self.client.post(
            reverse("purchases-list"), self._payload(car_offer_id=9999), format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_transition_endpoints(self):
        purchase = make_purchase(offer=self.offer, buyer=self.buyer)

        res = self.client.post(reverse("purchases-confirm", args=[purchase.pk]))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], PurchaseStatus.CONFIRMED)

        res = self.client.post(reverse("purchases-deliver", args=[purchase.pk]))
        self.assertEqual(res.data["status"], PurchaseStatus.DELIVERED)

    def test_invalid_transition_is_409(self):
        purchase = make_purchase(offer=self.offer, status=PurchaseStatus.CANCELLED)

        res = self.client.post(reverse("purchases-confirm", args=[purchase.pk]))

        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(res.data["error"]["code"], "INVALID_STATE_TRANSITION")

    def test_cancel_releases_offer(self):
        purchase = make_purchase(offer=self.offer)

        res = self.client.post(reverse("purchases-cancel", args=[purchase.pk]))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertTrue(CarOffer.objects.get(pk=self.offer.pk).available)

    def test_patch_update(self):
        purchase = make_purchase(offer=self.offer)

        res = self.client.patch(
            reverse("purchases-detail", args=[purchase.pk]),
            {"observations": "Paid in two installments"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["observations"], "Paid in two installments")

    def test_delete_restores_offer(self):
        purchase = make_purchase(offer=self.offer)

        res = self.client.delete(reverse("purchases-detail", args=[purchase.pk]))

        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)
        self.assertTrue(CarOffer.objects.get(pk=self.offer.pk).available)

    def test_list_filters_by_status(self):
        make_purchase(offer=self.offer)
        make_purchase(offer=make_offer(), status=PurchaseStatus.DELIVERED)

        res = self.client.get(reverse("purchases-list"), {"status": "DELIVERED"})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["count"], 1)
        self.assertEqual(res.data["results"][0]["status"], PurchaseStatus.DELIVERED)

    def test_details_endpoint(self):
        purchase = make_purchase(offer=self.offer)

        res = self.client.get(reverse("purchases-details", args=[purchase.pk]))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["purchase_id"], purchase.pk)
        self.assertEqual(res.data["final_price"], "25000.00")
