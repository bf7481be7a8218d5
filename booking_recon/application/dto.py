"""Application-level DTOs for the booking dashboard."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from booking_recon.domain.models import ReconciledRecord
from booking_recon.domain.results import AnalyticsSummary, DailyReport


@dataclass(slots=True, frozen=True)
class DashboardView:
    dataset: Sequence[ReconciledRecord]
    view: Sequence[ReconciledRecord]
    summary: AnalyticsSummary
    facet_options: Mapping[str, Sequence[str]]
    daily_report: DailyReport | None = None
