"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Protocol, Sequence

from .models import AssignmentRecord, MaintenanceRecord


class AssignmentRepository(Protocol):
    """Provides the assignment/fleet ledger rows."""

    def list_assignments(self) -> Sequence[AssignmentRecord]:
        ...


class MaintenanceRepository(Protocol):
    """Provides the maintenance log rows."""

    def list_maintenance(self) -> Sequence[MaintenanceRecord]:
        ...
