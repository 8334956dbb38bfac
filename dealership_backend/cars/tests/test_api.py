# cars/tests/test_api.py

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from core.tests.factories import make_car, make_user


class CarApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=make_user())

    def test_create_car(self):
        res = self.client.post(
            reverse("cars-list"),
            {
                "brand": "Renault",
                "model": "Sandero",
                "year": 2021,
                "color": "Grey",
                "fuel_type": "gnc",
                "images": ["https://cdn.example.com/sandero.jpg"],
            },
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["fuel_type"], "GNC")
        self.assertEqual(res.data["full_name"], "Renault Sandero 2021")

    def test_search_by_keyword(self):
        make_car(brand="Fiat", model="Cronos")
        make_car(brand="Toyota", model="Hilux")

        res = self.client.get(reverse("cars-list"), {"keyword": "hilux"})

        self.assertEqual(res.data["count"], 1)

    def test_invalid_transmission_is_400(self):
        car = make_car()

        res = self.client.patch(
            reverse("cars-detail", args=[car.pk]), {"transmission": "CVT"}, format="json"
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["field"], "transmission")
