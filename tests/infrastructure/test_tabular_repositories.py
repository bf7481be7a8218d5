from io import BytesIO
from pathlib import Path

import pandas as pd
import pytest

from booking_recon.infrastructure.parsing.utils import ensure_bytes, is_excel, load_rows, rows_from_table
from booking_recon.infrastructure.repositories.tabular_repositories import (
    TabularAssignmentRepository,
    TabularMaintenanceRepository,
)

ASSIGNMENTS_CSV = (
    ",,,\n"
    "Contract No., Booking Number ,EJAR,INVYGO,Model,Pick-up Date\n"
    "C-1,4521,ABC 123,XYZ999,Sedan,5/1/2024 10:30\n"
    ",,,,,\n"
    "C-2,daily-7,abc123,ABC123,SUV,2024-01-06\n"
    "C-3,broken,row\n"
)


def test_rows_from_table_uses_first_non_blank_row_as_header():
    rows = rows_from_table([["", " "], [" A ", "B"], ["1", " 2 "], ["", ""], ["3"]])

    assert rows == [{"A": "1", "B": "2"}]


def test_rows_from_table_without_header():
    with pytest.raises(ValueError):
        rows_from_table([["", ""]], label="empty")


def test_assignment_repository_reads_csv_bytes():
    records = TabularAssignmentRepository(ASSIGNMENTS_CSV.encode("utf-8")).list_assignments()

    assert [r.booking_number for r in records] == ["4521", "daily-7"]
    first = records[0]
    assert first.contract_number == "C-1"
    assert first.ejar_id == "ABC 123"
    assert first.invygo_id == "XYZ999"
    assert first.invygo_model == "Sedan"
    assert first.pickup_date == "5/1/2024 10:30"
    assert first.customer is None


def test_maintenance_repository_reads_csv_file(tmp_path: Path):
    path = tmp_path / "maintenance.csv"
    path.write_text("\ufeffVehicle,Date IN,Date OUT\nXYZ999,2024-05-01,2024-04-20\nQQQ111,,2024-04-21\n", encoding="utf-8")

    records = TabularMaintenanceRepository(path).list_maintenance()

    assert [(r.vehicle_id, r.date_in) for r in records] == [("XYZ999", "2024-05-01"), ("QQQ111", "")]
    assert records[0].is_closing()
    assert not records[1].is_closing()


def test_excel_sources_are_detected_and_parsed(tmp_path: Path):
    path = tmp_path / "maintenance.xlsx"
    pd.DataFrame([["Vehicle", "Date IN"], ["XYZ999", "2024-05-01"]]).to_excel(
        path, header=False, index=False, engine="openpyxl"
    )
    data = path.read_bytes()

    assert is_excel(data)
    assert load_rows(data) == [{"Vehicle": "XYZ999", "Date IN": "2024-05-01"}]


def test_ensure_bytes_rejects_unknown_sources():
    assert ensure_bytes(BytesIO(b"abc")) == b"abc"
    with pytest.raises(TypeError):
        ensure_bytes(123)  # type: ignore[arg-type]
