# favorites/tests/test_favorite_service.py

from datetime import datetime
from datetime import timezone as dt_timezone

from django.test import TestCase

from core.exceptions import DuplicateFavoriteError, NotFoundError, ValidationError
from core.tests.factories import make_buyer, make_car
from favorites.models import FavoriteCar
from favorites.services import favorite_service


class SaveFavoriteTests(TestCase):
    def setUp(self):
        self.buyer = make_buyer()
        self.car = make_car()

    def test_save_favorite_defaults(self):
        favorite = favorite_service.save_favorite(buyer_id=self.buyer.pk, car_id=self.car.pk)

        self.assertIsNone(favorite.rating)
        self.assertIsNone(favorite.comment)
        self.assertFalse(favorite.price_notifications)
        self.assertIsNotNone(favorite.date_added)
        self.assertFalse(favorite_service.is_reviewed(favorite))

    def test_favoriting_twice_is_rejected(self):
        favorite_service.save_favorite(buyer_id=self.buyer.pk, car_id=self.car.pk)

        with self.assertRaises(DuplicateFavoriteError) as ctx:
            favorite_service.save_favorite(buyer_id=self.buyer.pk, car_id=self.car.pk)

        self.assertIn("already in favorites", ctx.exception.message)
        self.assertEqual(FavoriteCar.objects.count(), 1)

    def test_rating_out_of_range_on_create(self):
        with self.assertRaisesMessage(ValidationError, "Rating must be between 0 and 10"):
            favorite_service.save_favorite(buyer_id=self.buyer.pk, car_id=self.car.pk, rating=-1)
        self.assertFalse(FavoriteCar.objects.exists())

    def test_date_added_before_2000_is_rejected(self):
        with self.assertRaises(ValidationError):
            favorite_service.save_favorite(
                buyer_id=self.buyer.pk,
                car_id=self.car.pk,
                date_added=datetime(1999, 1, 1, tzinfo=dt_timezone.utc),
            )

    def test_missing_car_is_not_found(self):
        with self.assertRaises(NotFoundError):
            favorite_service.save_favorite(buyer_id=self.buyer.pk, car_id=9999)


class ReviewTests(TestCase):
    def setUp(self):
        self.favorite = favorite_service.save_favorite(
            buyer_id=make_buyer().pk, car_id=make_car().pk, rating=7, comment="Nice"
        )

    def test_out_of_range_rating_leaves_stored_rating(self):
        with self.assertRaisesMessage(ValidationError, "Rating must be between 0 and 10"):
            favorite_service.update_review(
                self.favorite.pk, favorite_service.ReviewUpdate(rating=11)
            )

        self.favorite.refresh_from_db()
        self.assertEqual(self.favorite.rating, 7)

    def test_partial_review_update(self):
        favorite_service.update_review(
            self.favorite.pk, favorite_service.ReviewUpdate(comment="Great value")
        )

        self.favorite.refresh_from_db()
        self.assertEqual(self.favorite.rating, 7)
        self.assertEqual(self.favorite.comment, "Great value")

    def test_blank_comment_clears_comment(self):
        favorite_service.update_review(self.favorite.pk, favorite_service.ReviewUpdate(comment=" "))

        self.favorite.refresh_from_db()
        self.assertIsNone(self.favorite.comment)

    def test_long_comment_is_rejected(self):
        with self.assertRaisesMessage(ValidationError, "Comment cannot exceed 1000 characters"):
            favorite_service.update_review(
                self.favorite.pk, favorite_service.ReviewUpdate(comment="c" * 1001)
            )


class NotificationTests(TestCase):
    def setUp(self):
        self.favorite = favorite_service.save_favorite(
            buyer_id=make_buyer().pk, car_id=make_car().pk
        )

    def test_enable_disable_toggle(self):
        self.assertTrue(favorite_service.enable_notifications(self.favorite.pk).price_notifications)
        self.assertFalse(favorite_service.disable_notifications(self.favorite.pk).price_notifications)
        self.assertTrue(favorite_service.toggle_notifications(self.favorite.pk).price_notifications)

        self.favorite.refresh_from_db()
        self.assertTrue(self.favorite.price_notifications)

    def test_delete_favorite(self):
        favorite_service.delete_favorite(self.favorite.pk)

        with self.assertRaises(NotFoundError):
            favorite_service.find_favorite(self.favorite.pk)


class FinderTests(TestCase):
    def test_find_by_buyer_and_car(self):
        buyer = make_buyer()
        car = make_car()
        favorite = favorite_service.save_favorite(buyer_id=buyer.pk, car_id=car.pk)
        favorite_service.save_favorite(buyer_id=make_buyer().pk, car_id=make_car().pk)

        self.assertEqual(list(favorite_service.find_favorites_by_buyer(buyer.pk)), [favorite])
        self.assertEqual(list(favorite_service.find_favorites_by_car(car.pk)), [favorite])
