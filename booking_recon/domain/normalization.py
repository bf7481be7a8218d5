"""Canonical forms used for every comparison in the domain layer."""
from __future__ import annotations

import re
from datetime import date, datetime

_WHITESPACE = re.compile(r"\s+")


def normalize(value: object) -> str:
    """Lower-case ``value`` and drop all whitespace, internal runs included.

    ``None`` becomes the empty string. The result is stable under repeated
    application.
    """
    if value is None:
        return ""
    return _WHITESPACE.sub("", str(value).lower()).strip()


def _pad(segment: str) -> str:
    return segment.rjust(2, "0") if segment else "00"


def normalize_date(raw: str | None) -> str | None:
    """Return a ``YYYY-MM-DD`` key for a pickup date, or ``None``.

    A leading four character segment is read as year-month-day, anything else
    as day-month-year. Any time part after whitespace is ignored and ``/`` is
    accepted in place of ``-``. Segments are not checked against the calendar.
    """
    if not raw:
        return None
    tokens = str(raw).split()
    if not tokens:
        return None
    parts = tokens[0].replace("/", "-").split("-")
    if len(parts) < 3:
        return None
    if len(parts[0]) == 4:
        year, month, day = parts[:3]
    else:
        day, month, year = parts[:3]
    return f"{year}-{_pad(month)}-{_pad(day)}"


def date_key(selected: date | str) -> str:
    if isinstance(selected, datetime):
        selected = selected.date()
    if isinstance(selected, date):
        return selected.isoformat()
    return str(selected).strip()
