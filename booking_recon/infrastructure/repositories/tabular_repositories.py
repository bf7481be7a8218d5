"""CSV/Excel-backed repositories for the two ledgers."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Sequence

from booking_recon.config import SETTINGS, Settings
from booking_recon.domain.models import AssignmentRecord, MaintenanceRecord
from booking_recon.domain.repositories import (
    AssignmentRepository,
    MaintenanceRepository,
)
from booking_recon.infrastructure.parsing.utils import ensure_bytes, load_rows


class TabularAssignmentRepository(AssignmentRepository):
    def __init__(self, source: BytesIO | Path | str | bytes, settings: Settings | None = None) -> None:
        self._source = ensure_bytes(source)
        self._settings = settings or SETTINGS

    def list_assignments(self) -> Sequence[AssignmentRecord]:
        rows = load_rows(self._source, label="assignments")
        return [AssignmentRecord.from_row(row, self._settings) for row in rows]


class TabularMaintenanceRepository(MaintenanceRepository):
    def __init__(self, source: BytesIO | Path | str | bytes, settings: Settings | None = None) -> None:
        self._source = ensure_bytes(source)
        self._settings = settings or SETTINGS

    def list_maintenance(self) -> Sequence[MaintenanceRecord]:
        rows = load_rows(self._source, label="maintenance")
        return [MaintenanceRecord.from_row(row, self._settings) for row in rows]
