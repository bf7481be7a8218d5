"""Summary counters and the daily booking report."""
from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Sequence

from booking_recon.config import SETTINGS, Settings

from .classification import other_bucket
from .models import BookingCategory, ReconciledRecord
from .normalization import date_key, normalize_date
from .results import AnalyticsSummary, BookedVehicle, DailyReport


class AnalyticsAggregator:
    def summarize(
        self,
        dataset: Sequence[ReconciledRecord],
        view: Sequence[ReconciledRecord] | None = None,
    ) -> AnalyticsSummary:
        if view is None:
            view = dataset
        categories = Counter(item.result.booking_category for item in dataset)
        other_types: dict[str, int] = {}
        for item in dataset:
            if item.result.booking_category is BookingCategory.OTHER:
                key = other_bucket(item.record.booking_number)
                other_types[key] = other_types.get(key, 0) + 1

        return AnalyticsSummary(
            total=len(view),
            numeric_count=categories[BookingCategory.NUMERIC],
            daily_count=categories[BookingCategory.DAILY],
            monthly_count=categories[BookingCategory.MONTHLY],
            leasing_count=categories[BookingCategory.LEASING],
            other_types=other_types,
            mismatch_count=sum(1 for item in dataset if item.result.is_mismatch),
            ready_count=sum(1 for item in dataset if item.result.is_ready_to_switch_back),
            view_mismatch_count=sum(1 for item in view if item.result.is_mismatch),
            view_ready_count=sum(1 for item in view if item.result.is_ready_to_switch_back),
        )


class DailyReportAggregator:
    """Fleet-model totals plus the vehicles booked on one pickup date."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or SETTINGS

    def canonical_model(self, model: str | None) -> str:
        if not model:
            return self._settings.unspecified_model
        if self._settings.model_synonym_match in model.lower():
            return self._settings.model_synonym_name
        return model

    def model_counts(self, dataset: Sequence[ReconciledRecord]) -> dict[str, int]:
        counts: dict[str, int] = {}
        for item in dataset:
            if item.result.booking_category is not BookingCategory.NUMERIC:
                continue
            model = self.canonical_model(item.record.invygo_model)
            counts[model] = counts.get(model, 0) + 1
        return counts

    @staticmethod
    def booked_on(dataset: Sequence[ReconciledRecord], selected: str) -> tuple[BookedVehicle, ...]:
        return tuple(
            BookedVehicle(model=item.record.invygo_model or "", plate_number=item.record.invygo_id or "")
            for item in dataset
            if normalize_date(item.record.pickup_date) == selected
        )

    def build(self, dataset: Sequence[ReconciledRecord], selected_date: date | str) -> DailyReport:
        selected = date_key(selected_date)
        return DailyReport(
            selected_date=selected,
            model_counts=self.model_counts(dataset),
            booked=self.booked_on(dataset, selected),
        )


def aggregate(
    dataset: Sequence[ReconciledRecord],
    view: Sequence[ReconciledRecord] | None = None,
) -> AnalyticsSummary:
    return AnalyticsAggregator().summarize(dataset, view)


def daily_report(dataset: Sequence[ReconciledRecord], selected_date: date | str) -> DailyReport:
    return DailyReportAggregator().build(dataset, selected_date)
