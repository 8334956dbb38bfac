# core/tests/test_api.py

from django.test import SimpleTestCase
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated

from core.api import exception_handler
from core.exceptions import (
    BusinessRuleViolation,
    DuplicateFavoriteError,
    DuplicateOfferError,
    InvalidTransitionError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


class ExceptionHandlerTests(SimpleTestCase):
    """
    Domain error -> HTTP mapping is centralized in one handler.
    """

    def _handle(self, exc):
        return exception_handler(exc, {})

    def test_status_mapping(self):
        cases = [
            (ValidationError("bad"), status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR"),
            (BusinessRuleViolation("no"), status.HTTP_400_BAD_REQUEST, "BUSINESS_RULE_VIOLATION"),
            (DuplicateOfferError("dup"), status.HTTP_400_BAD_REQUEST, "DUPLICATE_OFFER"),
            (DuplicateFavoriteError("dup"), status.HTTP_400_BAD_REQUEST, "DUPLICATE_FAVORITE"),
            (NotFoundError("missing"), status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
            (InvalidTransitionError("state"), status.HTTP_409_CONFLICT, "INVALID_STATE_TRANSITION"),
            (PersistenceError("db"), status.HTTP_500_INTERNAL_SERVER_ERROR, "PERSISTENCE_ERROR"),
        ]
        for exc, expected_status, expected_code in cases:
            with self.subTest(exc=type(exc).__name__):
                response = self._handle(exc)
                self.assertEqual(response.status_code, expected_status)
                self.assertEqual(response.data["error"]["code"], expected_code)
                self.assertEqual(response.data["error"]["message"], exc.message)

    def test_validation_error_carries_field(self):
        response = self._handle(ValidationError("Rating must be between 0 and 10", field="rating"))
        self.assertEqual(response.data["error"]["field"], "rating")

    def test_non_domain_errors_fall_back_to_drf(self):
        response = self._handle(NotAuthenticated())
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
