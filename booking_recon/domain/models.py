"""Domain models for the booking reconciliation pipeline.

Records are immutable snapshots of one source row. Every field is an optional
string; absent values stay ``None`` and are treated as empty by the
comparison rules.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Mapping

from booking_recon.config import SETTINGS, Settings


class BookingCategory(str, Enum):
    NUMERIC = "numeric"
    DAILY = "daily"
    MONTHLY = "monthly"
    LEASING = "leasing"
    OTHER = "other"
    EMPTY = "empty"


class RowStatus(str, Enum):
    READY = "ready"
    MISMATCH = "mismatch"
    NONE = ""


@dataclass(frozen=True)
class AssignmentRecord:
    """One row of the assignment/fleet export."""

    contract_number: str | None = None
    booking_number: str | None = None
    customer: str | None = None
    pickup_branch: str | None = None
    ejar_id: str | None = None
    ejar_model: str | None = None
    invygo_id: str | None = None
    invygo_model: str | None = None
    pickup_date: str | None = None
    raw: Mapping[str, str | None] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_row(cls, row: Mapping[str, str | None], settings: Settings | None = None) -> "AssignmentRecord":
        columns = (settings or SETTINGS).assignment_columns
        values = {name: _cell(row.get(header)) for name, header in columns.items()}
        return cls(**values, raw=dict(row))

    def field_values(self) -> tuple[str | None, ...]:
        """Values searched by full-text search: the whole source row when known."""
        if self.raw:
            return tuple(_cell(value) for value in self.raw.values())
        return tuple(getattr(self, f.name) for f in fields(self) if f.name != "raw")

    def record_key(self) -> str:
        """Stable identity independent of the row position."""
        payload = f"{self.contract_number or ''}\x1f{self.booking_number or ''}"
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class MaintenanceRecord:
    vehicle_id: str | None = None
    date_in: str | None = None
    date_out: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, str | None], settings: Settings | None = None) -> "MaintenanceRecord":
        columns = (settings or SETTINGS).maintenance_columns
        return cls(**{name: _cell(row.get(header)) for name, header in columns.items()})

    def is_closing(self) -> bool:
        """Repair work is recorded as completed."""
        return bool(self.date_in)


@dataclass(frozen=True)
class ClassificationResult:
    booking_category: BookingCategory
    is_mismatch: bool = False
    is_ready_to_switch_back: bool = False
    is_duplicate_booking: bool = False

    @property
    def status(self) -> RowStatus:
        if self.is_ready_to_switch_back:
            return RowStatus.READY
        if self.is_mismatch:
            return RowStatus.MISMATCH
        return RowStatus.NONE


@dataclass(frozen=True)
class ReconciledRecord:
    """An assignment row paired with its derived classification.

    ``position`` is the index within the ingested collection and is only
    meaningful until the next ingestion.
    """

    position: int
    record: AssignmentRecord
    result: ClassificationResult


def _cell(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
