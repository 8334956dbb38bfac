# purchases/tests/test_concurrency.py

"""
Two buyers racing for the same offer on separate connections.
Exactly one purchase is created; the other buyer gets a business error.
"""

from __future__ import annotations

import threading

from django.db import connection
from django.test import TransactionTestCase

from core.exceptions import BusinessRuleViolation
from core.tests.factories import make_buyer, make_offer, yesterday
from offers.models import CarOffer
from purchases.models import Purchase
from purchases.services import purchase_service


class ConcurrentPurchaseTests(TransactionTestCase):

    def setUp(self):
        self.offer = make_offer()
        self.buyers = [make_buyer(), make_buyer()]

    def _race(self):
        barrier = threading.Barrier(len(self.buyers))
        outcomes = []
        lock = threading.Lock()

        def buy(buyer):
            try:
                barrier.wait(timeout=10)
                purchase_service.create_purchase(
                    buyer_id=buyer.pk,
                    car_offer_id=self.offer.pk,
                    final_price="25000.00",
                    purchase_date=yesterday(),
                    payment_method="CASH",
                )
                result = "created"
            except BusinessRuleViolation as exc:
                result = str(exc)
            except Exception as exc:  # surfaced through the assertion below
                result = f"{type(exc).__name__}: {exc}"
            finally:
                connection.close()
            with lock:
                outcomes.append(result)

        threads = [threading.Thread(target=buy, args=(b,)) for b in self.buyers]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=60)
        return outcomes

    def test_exactly_one_buyer_wins(self):
        outcomes = self._race()

        self.assertEqual(
            sorted(outcomes),
            ["Car offer is not available for purchase", "created"],
        )
        self.assertEqual(Purchase.objects.filter(car_offer=self.offer).count(), 1)
        self.assertFalse(CarOffer.objects.get(pk=self.offer.pk).available)
