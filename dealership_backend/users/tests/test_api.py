# users/tests/test_api.py

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from core.tests.factories import make_dealership, make_user


class DealershipApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=make_user())

    def test_create_and_search(self):
        res = self.client.post(
            reverse("dealerships-list"),
            {
                "business_name": "Autos del Oeste",
                "cuit": "30799999991",
                "email": "oeste@example.com",
                "phone": "2614567890",
                "city": "Mendoza",
                "province": "Mendoza",
            },
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

        res = self.client.get(reverse("dealerships-list"), {"city": "mendoza"})
        self.assertEqual(res.data["count"], 1)
        self.assertEqual(res.data["results"][0]["full_address"], "Mendoza, Mendoza")

    def test_redundant_activation_is_400(self):
        dealership = make_dealership()

        res = self.client.post(reverse("dealerships-activate", args=[dealership.pk]))

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["message"], "Dealership is already active")


class BuyerApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=make_user())

    def test_create_buyer_and_deactivate(self):
        res = self.client.post(
            reverse("buyers-list"),
            {
                "first_name": "Lucia",
                "last_name": "Fernandez",
                "email": "lucia@example.com",
                "address": "San Martin 100",
                "dni": "40123456",
            },
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

        res = self.client.post(reverse("buyers-deactivate", args=[res.data["id"]]))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertFalse(res.data["active"])
