"""Application services orchestrating the reconciliation workflow."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from booking_recon.application.dto import DashboardView
from booking_recon.domain.analytics import AnalyticsAggregator, DailyReportAggregator
from booking_recon.domain.filters import FilterEngine, FilterState, facet_options
from booking_recon.domain.models import AssignmentRecord, MaintenanceRecord, ReconciledRecord
from booking_recon.domain.repositories import AssignmentRepository, MaintenanceRepository
from booking_recon.domain.services import DuplicateDetector, ReconciliationEngine

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BookingReconContext:
    assignment_repository: AssignmentRepository
    maintenance_repository: MaintenanceRepository
    filter_engine: FilterEngine
    analytics: AnalyticsAggregator
    daily_reports: DailyReportAggregator


class ReconcileBookingsUseCase:
    """Loads both ledgers once, then derives a fresh view per filter state."""

    def __init__(self, context: BookingReconContext) -> None:
        self._context = context
        self._assignments: Sequence[AssignmentRecord] | None = None
        self._maintenance: Sequence[MaintenanceRecord] | None = None

    def ingest(self) -> None:
        # Replaces both collections wholesale.
        assignments = tuple(self._context.assignment_repository.list_assignments())
        maintenance = tuple(self._context.maintenance_repository.list_maintenance())
        self._assignments, self._maintenance = assignments, maintenance
        logger.info("Ingested %d assignments and %d maintenance rows", len(assignments), len(maintenance))

    def reconciled(self) -> tuple[ReconciledRecord, ...]:
        if self._assignments is None or self._maintenance is None:
            self.ingest()
        return ReconciliationEngine(self._maintenance).reconcile(self._assignments)

    def execute(self, state: FilterState | None = None) -> DashboardView:
        state = state or FilterState()
        dataset = self.reconciled()
        view = DuplicateDetector().flag(self._context.filter_engine.apply(dataset, state))
        summary = self._context.analytics.summarize(dataset, view)
        report = None
        if state.selected_date is not None:
            report = self._context.daily_reports.build(dataset, state.selected_date)
        logger.info(
            "View has %d of %d rows (%d mismatched, %d ready)",
            len(view),
            len(dataset),
            summary.view_mismatch_count,
            summary.view_ready_count,
        )
        return DashboardView(
            dataset=dataset,
            view=view,
            summary=summary,
            facet_options=facet_options(dataset),
            daily_report=report,
        )
