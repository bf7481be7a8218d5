"""Booking reconciliation toolkit for the assignment and fleet ledgers."""
from booking_recon.application.use_cases import BookingReconContext, ReconcileBookingsUseCase
from booking_recon.domain.analytics import aggregate, daily_report
from booking_recon.domain.classification import classify
from booking_recon.domain.filters import FilterState, facet_options, filter_records
from booking_recon.domain.models import (
    AssignmentRecord,
    BookingCategory,
    ClassificationResult,
    MaintenanceRecord,
    ReconciledRecord,
)
from booking_recon.domain.normalization import normalize, normalize_date
from booking_recon.domain.services import reconcile

__all__ = [
    "BookingReconContext",
    "ReconcileBookingsUseCase",
    "aggregate",
    "daily_report",
    "classify",
    "FilterState",
    "facet_options",
    "filter_records",
    "AssignmentRecord",
    "BookingCategory",
    "ClassificationResult",
    "MaintenanceRecord",
    "ReconciledRecord",
    "normalize",
    "normalize_date",
    "reconcile",
]
