"""Domain services implementing the reconciliation rules."""
from __future__ import annotations

from collections import Counter
from dataclasses import replace
from typing import Iterable, Mapping, Sequence

from .classification import classify
from .models import (
    AssignmentRecord,
    BookingCategory,
    ClassificationResult,
    MaintenanceRecord,
    ReconciledRecord,
)
from .normalization import normalize


class ReconciliationEngine:
    """Compares the assignment and fleet identifiers of each booking.

    Mismatch detection compares *normalized* identifiers, while the
    maintenance join matches the raw fleet identifier exactly. When several
    maintenance rows share a vehicle, the first one in ingestion order wins.
    """

    def __init__(self, maintenance: Sequence[MaintenanceRecord]) -> None:
        self._maintenance = self._index(maintenance)

    def classify(self, record: AssignmentRecord) -> ClassificationResult:
        category = classify(record.booking_number)
        ejar = normalize(record.ejar_id)
        invygo = normalize(record.invygo_id)
        is_mismatch = (
            category is BookingCategory.NUMERIC
            and ejar != ""
            and invygo != ""
            and ejar != invygo
        )
        return ClassificationResult(
            booking_category=category,
            is_mismatch=is_mismatch,
            is_ready_to_switch_back=is_mismatch and self.is_repaired(record.invygo_id),
        )

    def is_repaired(self, vehicle_id: str | None) -> bool:
        match = self._maintenance.get(vehicle_id)
        return match is not None and match.is_closing()

    def reconcile(self, assignments: Iterable[AssignmentRecord]) -> tuple[ReconciledRecord, ...]:
        return tuple(
            ReconciledRecord(position=idx, record=record, result=self.classify(record))
            for idx, record in enumerate(assignments)
        )

    @staticmethod
    def _index(maintenance: Sequence[MaintenanceRecord]) -> Mapping[str | None, MaintenanceRecord]:
        index: dict[str | None, MaintenanceRecord] = {}
        for item in maintenance:
            index.setdefault(item.vehicle_id, item)
        return index


class DuplicateDetector:
    """Flags numeric booking numbers that repeat within the records in view."""

    def flag(self, view: Sequence[ReconciledRecord]) -> tuple[ReconciledRecord, ...]:
        counts = self._count(view)
        return tuple(
            replace(item, result=replace(item.result, is_duplicate_booking=self._is_duplicate(item, counts)))
            for item in view
        )

    @staticmethod
    def _count(view: Sequence[ReconciledRecord]) -> Counter[str]:
        return Counter(
            item.record.booking_number
            for item in view
            if item.result.booking_category is BookingCategory.NUMERIC
        )

    @staticmethod
    def _is_duplicate(item: ReconciledRecord, counts: Counter[str]) -> bool:
        if item.result.booking_category is not BookingCategory.NUMERIC:
            return False
        return counts[item.record.booking_number] > 1


def reconcile(
    assignments: Sequence[AssignmentRecord],
    maintenance: Sequence[MaintenanceRecord],
) -> tuple[ReconciledRecord, ...]:
    """Classify every assignment; duplicates are flagged across ``assignments``."""
    reconciled = ReconciliationEngine(maintenance).reconcile(assignments)
    return DuplicateDetector().flag(reconciled)
