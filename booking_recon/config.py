"""Central configuration for the booking reconciliation package."""
from __future__ import annotations

from dataclasses import dataclass

# Column headers as they appear in the assignment/fleet export.
ASSIGNMENT_COLUMNS = {
    "contract_number": "Contract No.",
    "booking_number": "Booking Number",
    "customer": "Customer",
    "pickup_branch": "Pick-up Branch",
    "ejar_id": "EJAR",
    "ejar_model": "Model ( Ejar )",
    "invygo_id": "INVYGO",
    "invygo_model": "Model",
    "pickup_date": "Pick-up Date",
}

MAINTENANCE_COLUMNS = {
    "vehicle_id": "Vehicle",
    "date_in": "Date IN",
    "date_out": "Date OUT",
}

FACET_FIELDS = (
    "pickup_branch",
    "ejar_model",
    "invygo_model",
    "customer",
)


@dataclass(slots=True, frozen=True)
class Settings:
    assignment_columns: dict[str, str]
    maintenance_columns: dict[str, str]
    facet_fields: tuple[str, ...]
    model_synonym_match: str
    model_synonym_name: str
    unspecified_model: str


SETTINGS = Settings(
    assignment_columns=dict(ASSIGNMENT_COLUMNS),
    maintenance_columns=dict(MAINTENANCE_COLUMNS),
    facet_fields=FACET_FIELDS,
    model_synonym_match="tiggo 4 pro",
    model_synonym_name="Tiggo 4 2025",
    unspecified_model="غير محدد",
)
