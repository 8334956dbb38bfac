# core/validation.py

"""
ENTITY VALIDATION RULES

Pure functions: no database access, no side effects.
Every lifecycle operation runs the SAME validator on create and on update,
so a field can never be accepted by one path and rejected by the other.

Numeric rules:
- Money is Decimal end to end (floats are converted through str()).
- Scale is compared exactly. 10.005 is rejected, never rounded.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from datetime import timezone as dt_timezone
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime as _parse_iso_datetime

from core.eligibility import is_eligible
from core.enums import FuelType, PaymentMethod, PurchaseStatus, Transmission, parse_choice
from core.exceptions import ValidationError

# ============================================================
# BOUNDS
# ============================================================

OFFER_MAX_PRICE = Decimal("99999999.99")
PURCHASE_MAX_PRICE = Decimal("99999999999999.99")
MONEY_DECIMAL_PLACES = 2

MAX_TEXT_LENGTH = 1000

MIN_DATE = datetime(2000, 1, 1, tzinfo=dt_timezone.utc)
MIN_CAR_YEAR = 1900

RATING_MIN = 0
RATING_MAX = 10

DNI_LENGTHS = (7, 8)
CUIT_LENGTH = 11
MIN_PHONE_LENGTH = 10


def offer_date_tolerance() -> timedelta:
    return getattr(settings, "MARKETPLACE_OFFER_DATE_TOLERANCE", timedelta(minutes=5))


# ============================================================
# COERCION
# ============================================================


def parse_decimal(value, *, field: str, label: str = "Price") -> Decimal:
    if value is None or value == "":
        raise ValidationError(f"{label} is required", field=field)

    if isinstance(value, bool):
        raise ValidationError(f"{label} must be a decimal number", field=field)

    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(
            f"{label} must be a decimal number, got '{value}'", field=field
        ) from exc

    if not result.is_finite():
        raise ValidationError(f"{label} must be a finite number", field=field)

    return result


def parse_datetime(value, *, field: str, label: str = "Date") -> datetime:
    """
    Normalize datetime / date / ISO-8601 string into an aware datetime.
    Naive values are interpreted in the current time zone.
    """
    if value is None or value == "":
        raise ValidationError(f"{label} must be specified", field=field)

    if isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        result = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        raw = value.strip()
        try:
            result = _parse_iso_datetime(raw)
            if result is None:
                parsed_day = parse_date(raw)
                result = (
                    datetime(parsed_day.year, parsed_day.month, parsed_day.day)
                    if parsed_day
                    else None
                )
        except ValueError:
            result = None
        if result is None:
            raise ValidationError(
                f"{label} must be an ISO-8601 date, got '{value}'", field=field
            )
    else:
        raise ValidationError(f"{label} must be a date, got '{value}'", field=field)

    if timezone.is_naive(result):
        result = timezone.make_aware(result)
    return result


def parse_int(value, *, field: str, label: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{label} must be an integer", field=field)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"{label} must be an integer, got '{value}'", field=field
        ) from exc


def normalize_optional_text(value):
    """Blank / whitespace-only text means 'no text' (None), never ''."""
    if value is None:
        return None
    value = str(value)
    return value if value.strip() else None


# ============================================================
# PRIMITIVE RULES
# ============================================================


def require(condition: bool, message: str, *, field: str | None = None) -> None:
    if not condition:
        raise ValidationError(message, field=field)


def require_non_blank(value, message: str, *, field: str) -> None:
    require(bool(str(value or "").strip()), message, field=field)


def require_max_length(value, limit: int, message: str, *, field: str) -> None:
    if value is None:
        return
    require(len(value) <= limit, message, field=field)


def require_scale(value: Decimal, places: int, message: str, *, field: str) -> None:
    exponent = value.as_tuple().exponent
    require(exponent >= 0 or -exponent <= places, message, field=field)


def require_price_in_range(
    value: Decimal, maximum: Decimal, *, positive_message: str, max_message: str, field: str
) -> None:
    require(value > 0, positive_message, field=field)
    require(value <= maximum, max_message, field=field)


def require_int_range(value: int, low, high, message: str, *, field: str) -> None:
    """Inclusive bounds. A None bound is open."""
    require(
        (low is None or value >= low) and (high is None or value <= high),
        message,
        field=field,
    )


def require_after(value: datetime, bound: datetime, message: str, *, field: str) -> None:
    require(value > bound, message, field=field)


def require_not_future(
    value: datetime,
    now: datetime,
    message: str,
    *,
    field: str,
    tolerance: timedelta = timedelta(0),
) -> None:
    require(value <= now + tolerance, message, field=field)


def require_in_past(value: datetime, now: datetime, message: str, *, field: str) -> None:
    require(value < now, message, field=field)


def require_digits(value, lengths, message: str, *, field: str) -> None:
    raw = str(value or "")
    require(raw.isdigit() and len(raw) in lengths, message, field=field)


def require_url_list(urls, *, field: str = "images") -> None:
    for url in urls or []:
        require(
            isinstance(url, str) and url.startswith(("http://", "https://")),
            "Image URL must start with http:// or https://",
            field=field,
        )


def require_email(value, *, field: str = "email") -> None:
    require_non_blank(value, "Email cannot be empty", field=field)
    try:
        validate_email(str(value).strip())
    except DjangoValidationError as exc:
        raise ValidationError("Invalid email format", field=field) from exc


# ============================================================
# PER-ENTITY VALIDATORS
# ============================================================


def validate_car(car) -> None:
    require_non_blank(car.brand, "Brand cannot be empty", field="brand")
    require_non_blank(car.model, "Model cannot be empty", field="model")

    year = parse_int(car.year, field="year", label="Year")
    require_int_range(year, MIN_CAR_YEAR + 1, None, "Year must be greater than 1900", field="year")
    require_int_range(
        year,
        None,
        timezone.localdate().year + 1,
        "Year cannot be too far in the future",
        field="year",
    )

    require_non_blank(car.color, "Color cannot be empty", field="color")

    mileage = parse_int(car.mileage or 0, field="mileage", label="Mileage")
    require_int_range(mileage, 0, None, "Mileage cannot be negative", field="mileage")

    parse_choice(FuelType, car.fuel_type, field="fuel_type")
    parse_choice(Transmission, car.transmission, field="transmission")

    require_max_length(
        car.description,
        MAX_TEXT_LENGTH,
        "Description cannot exceed 1000 characters",
        field="description",
    )
    require_url_list(car.images)


def validate_offer_price(price) -> Decimal:
    price = parse_decimal(price, field="price", label="Price")
    require_price_in_range(
        price,
        OFFER_MAX_PRICE,
        positive_message="Price must be greater than zero",
        max_message="Price cannot exceed 99,999,999.99",
        field="price",
    )
    require_scale(
        price,
        MONEY_DECIMAL_PLACES,
        "Price cannot have more than 2 decimal places",
        field="price",
    )
    return price


def validate_car_offer(offer, *, now: datetime | None = None) -> None:
    now = now or timezone.now()

    validate_offer_price(offer.price)

    require(offer.car_id is not None, "Car must have a valid ID", field="car_id")
    require(
        offer.dealership_id is not None,
        "Dealership must have a valid ID",
        field="dealership_id",
    )
    require(
        is_eligible(offer.dealership),
        f"Cannot create offer for inactive dealership (ID: {offer.dealership_id})",
        field="dealership_id",
    )

    require(offer.offer_date is not None, "Offer date must be specified", field="offer_date")
    offer_date = parse_datetime(offer.offer_date, field="offer_date", label="Offer date")
    require_not_future(
        offer_date,
        now,
        "Offer date cannot be in the future",
        field="offer_date",
        tolerance=offer_date_tolerance(),
    )

    require_max_length(
        offer.dealership_notes,
        MAX_TEXT_LENGTH,
        "Dealership notes cannot exceed 1000 characters",
        field="dealership_notes",
    )


def validate_final_price(final_price) -> Decimal:
    price = parse_decimal(final_price, field="final_price", label="Final price")
    require_price_in_range(
        price,
        PURCHASE_MAX_PRICE,
        positive_message="Final price must be greater than zero",
        max_message="Final price exceeds maximum allowed value",
        field="final_price",
    )
    require_scale(
        price,
        MONEY_DECIMAL_PLACES,
        "Final price cannot have more than 2 decimal places",
        field="final_price",
    )
    return price


def validate_purchase(purchase, *, now: datetime | None = None) -> None:
    now = now or timezone.now()

    validate_final_price(purchase.final_price)

    purchase_date = parse_datetime(
        purchase.purchase_date, field="purchase_date", label="Purchase date"
    )
    require_in_past(
        purchase_date, now, "Purchase date has to be in the past", field="purchase_date"
    )
    require_after(
        purchase_date,
        MIN_DATE,
        "Purchase date must be after January 1, 2000",
        field="purchase_date",
    )

    parse_choice(PurchaseStatus, purchase.status, field="status")
    parse_choice(PaymentMethod, purchase.payment_method, field="payment_method")

    require_max_length(
        purchase.observations,
        MAX_TEXT_LENGTH,
        "Observations cannot exceed 1000 characters",
        field="observations",
    )


def validate_rating(rating) -> None:
    if rating is None:
        return
    rating = parse_int(rating, field="rating", label="Rating")
    require_int_range(
        rating, RATING_MIN, RATING_MAX, "Rating must be between 0 and 10", field="rating"
    )


def validate_favorite(favorite) -> None:
    validate_rating(favorite.rating)
    require_max_length(
        favorite.comment,
        MAX_TEXT_LENGTH,
        "Comment cannot exceed 1000 characters",
        field="comment",
    )

    date_added = parse_datetime(favorite.date_added, field="date_added", label="Date added")
    require_after(
        date_added,
        MIN_DATE,
        "Date added must be after January 1, 2000",
        field="date_added",
    )


def validate_buyer(buyer) -> None:
    require_non_blank(buyer.first_name, "First name cannot be empty", field="first_name")
    require_non_blank(buyer.last_name, "Last name cannot be empty", field="last_name")
    require_email(buyer.email)
    require_non_blank(buyer.address, "Address cannot be empty", field="address")
    require_digits(buyer.dni, DNI_LENGTHS, "DNI must contain 7 or 8 digits", field="dni")


def validate_dealership(dealership) -> None:
    require_non_blank(
        dealership.business_name, "Business name cannot be empty", field="business_name"
    )
    require_non_blank(dealership.cuit, "CUIT cannot be empty", field="cuit")
    require(
        len(str(dealership.cuit)) == CUIT_LENGTH,
        "CUIT must be exactly 11 characters",
        field="cuit",
    )
    require(str(dealership.cuit).isdigit(), "CUIT must contain only digits", field="cuit")
    require_email(dealership.email)

    require_non_blank(dealership.phone, "Phone cannot be empty", field="phone")
    require(
        len(str(dealership.phone).strip()) >= MIN_PHONE_LENGTH,
        "Phone must be at least 10 characters",
        field="phone",
    )
    require_max_length(
        dealership.description,
        MAX_TEXT_LENGTH,
        "Description cannot exceed 1000 characters",
        field="description",
    )
