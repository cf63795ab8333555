"""
Shared Validators Module.

Common validation utilities used by serializers and services.
"""
import base64
import re
from datetime import date
from decimal import Decimal
from typing import Optional

from django.core.exceptions import ValidationError


MAX_RECEIPT_IMAGE_BYTES = 2 * 1024 * 1024
MIN_YEAR_OF_MANUFACTURE = 1900


# =============================================================================
# DATE VALIDATORS
# =============================================================================

def validate_date_order(
    start_date: Optional[date],
    end_date: Optional[date],
    message: str = "End date must be after start date"
) -> None:
    """
    Validate that an interval does not end before it starts.

    An open end (None) is always valid. Equal dates describe a one-day interval.
    """
    if start_date and end_date and start_date > end_date:
        raise ValidationError(message)


def validate_year_of_manufacture(value: int, today: Optional[date] = None) -> int:
    """Validate a manufacture year between 1900 and next year."""
    today = today or date.today()
    max_year = today.year + 1
    if value is None or value < MIN_YEAR_OF_MANUFACTURE or value > max_year:
        raise ValidationError(
            f"Invalid year. Must be between {MIN_YEAR_OF_MANUFACTURE} and {max_year}"
        )
    return value


# =============================================================================
# STRING VALIDATORS
# =============================================================================

def validate_email(value: str, field_name: str = "email") -> str:
    """Validate email format."""
    pattern = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'
    if not value or not re.match(pattern, value):
        raise ValidationError(f"Invalid {field_name} format")
    return value


def validate_tail_number(value: str, field_name: str = "tail number") -> str:
    """Normalize an aircraft tail number."""
    cleaned = (value or '').upper().strip()
    if not cleaned:
        raise ValidationError(f"{field_name.capitalize()} is required")
    return cleaned


def validate_airport_code(value: str, field_name: str = "airport code") -> str:
    """Normalize an ICAO/IATA airport code to upper case."""
    cleaned = (value or '').upper().strip()
    if not cleaned:
        raise ValidationError(f"{field_name.capitalize()} is required")
    if not cleaned.isalnum():
        raise ValidationError(f"Invalid {field_name} format")
    return cleaned


# =============================================================================
# NUMERIC VALIDATORS
# =============================================================================

def validate_positive_decimal(
    value: Decimal,
    allow_zero: bool = False,
    field_name: str = "value"
) -> Decimal:
    """Validate a positive (or non-negative) decimal value."""
    if not isinstance(value, (Decimal, int, float)):
        raise ValidationError(f"{field_name} must be a number")

    value = Decimal(str(value))

    if value < 0 or (value == 0 and not allow_zero):
        qualifier = "zero or positive" if allow_zero else "greater than zero"
        raise ValidationError(f"{field_name} must be {qualifier}")

    return value


# =============================================================================
# FILE VALIDATORS
# =============================================================================

def validate_receipt_image(value: str, max_bytes: int = MAX_RECEIPT_IMAGE_BYTES) -> str:
    """
    Validate the size of a receipt image.

    Accepts either a plain URL or a base64 ``data:`` URL. For data URLs the
    decoded payload size is checked against the limit.
    """
    if not value:
        return value

    if value.startswith('data:'):
        header, _, payload = value.partition(',')
        if ';base64' not in header:
            raise ValidationError("Receipt image must be base64 encoded")
        try:
            size = len(base64.b64decode(payload, validate=True))
        except (ValueError, TypeError):
            raise ValidationError("Receipt image is not valid base64 data")
    else:
        size = len(value.encode('utf-8'))

    if size > max_bytes:
        raise ValidationError("Image must be less than 2MB")

    return value
