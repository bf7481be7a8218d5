"""Domain-level results for booking analytics."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence


@dataclass(frozen=True)
class AnalyticsSummary:
    # ``total`` and the ``view_*`` counters follow the filtered view; the
    # rest always cover the full dataset.
    total: int
    numeric_count: int
    daily_count: int
    monthly_count: int
    leasing_count: int
    other_types: Mapping[str, int]
    mismatch_count: int
    ready_count: int
    view_mismatch_count: int = 0
    view_ready_count: int = 0


@dataclass(frozen=True)
class BookedVehicle:
    model: str
    plate_number: str


@dataclass(frozen=True)
class DailyReport:
    selected_date: str
    model_counts: Mapping[str, int] = field(default_factory=dict)
    booked: Sequence[BookedVehicle] = field(default_factory=tuple)

    @property
    def total_cars(self) -> int:
        return sum(self.model_counts.values())
