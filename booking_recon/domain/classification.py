"""Booking-number classification."""
from __future__ import annotations

import re

from .models import BookingCategory

_NUMERIC_LITERAL = re.compile(
    r"""
    [+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
    | [+-]?Infinity
    | 0[xX][0-9a-fA-F]+
    | 0[bB][01]+
    | 0[oO][0-7]+
    """,
    re.VERBOSE | re.ASCII,
)

# Checked in order after the numeric test; first hit wins.
KEYWORD_CATEGORIES = (
    ("daily", BookingCategory.DAILY),
    ("monthly", BookingCategory.MONTHLY),
    ("leasing", BookingCategory.LEASING),
)


def is_numeric(value: str | None) -> bool:
    if value is None:
        return False
    stripped = value.strip()
    return bool(stripped) and _NUMERIC_LITERAL.fullmatch(stripped) is not None


def classify(booking_number: str | None) -> BookingCategory:
    if booking_number is None or not booking_number.strip():
        return BookingCategory.EMPTY
    if is_numeric(booking_number):
        return BookingCategory.NUMERIC
    lowered = booking_number.lower()
    for keyword, category in KEYWORD_CATEGORIES:
        if keyword in lowered:
            return category
    return BookingCategory.OTHER


def other_bucket(booking_number: str | None) -> str:
    """Reporting key for an ``OTHER`` booking number."""
    return (booking_number or "").lower()
