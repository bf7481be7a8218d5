from booking_recon.domain.models import AssignmentRecord, MaintenanceRecord
from booking_recon.domain.results import DailyReport, BookedVehicle
from booking_recon.domain.services import reconcile
from booking_recon.presentation.table_report import (
    daily_report_rows,
    reconciled_to_rows,
    render_csv,
)


def test_rows_carry_dashboard_columns_and_status():
    records = reconcile(
        [
            AssignmentRecord(booking_number="1", ejar_id="A", invygo_id="B"),
            AssignmentRecord(booking_number="1", ejar_id="A", invygo_id="A", customer="Sara"),
        ],
        [MaintenanceRecord(vehicle_id="B", date_in="2024-01-01")],
    )

    rows = reconciled_to_rows(records)

    assert rows[0]["#"] == "1"
    assert rows[0]["Booking Number"] == "1"
    assert rows[0]["Status"] == "ready"
    assert rows[0]["Duplicate"] == "yes"
    assert rows[1]["Customer"] == "Sara"
    assert rows[1]["Status"] == ""
    assert rows[1]["Model"] == ""


def test_render_csv():
    records = reconcile([AssignmentRecord(booking_number="1", ejar_id="A", invygo_id="B")], [])

    lines = render_csv(records).decode("utf-8").splitlines()

    assert lines[0].startswith("#,Contract No.,Booking Number")
    assert lines[1].endswith(",mismatch,")
    assert render_csv(()) == b""


def test_daily_report_rows_append_total():
    report = DailyReport(
        selected_date="2024-01-05",
        model_counts={"Sedan": 2, "SUV": 1},
        booked=(BookedVehicle(model="Sedan", plate_number="P-1"),),
    )

    totals, booked = daily_report_rows(report)

    assert totals[-1] == {"Model": "TOTAL", "Total Cars": 3}
    assert booked == [{"Model": "Sedan", "Plate Number": "P-1"}]
