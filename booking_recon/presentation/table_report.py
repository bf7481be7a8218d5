"""Tabular renderings of reconciled bookings."""
from __future__ import annotations

import csv
import io
from typing import Sequence

from booking_recon.config import SETTINGS, Settings
from booking_recon.domain.models import ReconciledRecord
from booking_recon.domain.results import AnalyticsSummary, DailyReport


def reconciled_to_rows(
    records: Sequence[ReconciledRecord],
    settings: Settings | None = None,
) -> list[dict[str, str]]:
    columns = (settings or SETTINGS).assignment_columns
    rows: list[dict[str, str]] = []
    for idx, item in enumerate(records, start=1):
        row = {"#": str(idx)}
        for name, header in columns.items():
            value = getattr(item.record, name)
            row[header] = "" if value is None else value
        row["Status"] = item.result.status.value
        row["Duplicate"] = "yes" if item.result.is_duplicate_booking else ""
        rows.append(row)
    return rows


def render_csv(records: Sequence[ReconciledRecord]) -> bytes:
    rows = reconciled_to_rows(records)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()) if rows else [])
    if rows:
        writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def summary_lines(summary: AnalyticsSummary) -> list[str]:
    lines = [
        f"Total rows: {summary.total}",
        f"INVYGO: {summary.numeric_count}",
        f"Daily: {summary.daily_count}",
        f"Monthly + Sponsorship: {summary.monthly_count}",
        f"Leasing: {summary.leasing_count}",
        f"Mismatched: {summary.mismatch_count} (in view: {summary.view_mismatch_count})",
        f"Ready to switch back: {summary.ready_count} (in view: {summary.view_ready_count})",
    ]
    for booking, count in sorted(summary.other_types.items()):
        lines.append(f"Other '{booking}': {count}")
    return lines


def daily_report_rows(report: DailyReport) -> tuple[list[dict[str, object]], list[dict[str, str]]]:
    totals: list[dict[str, object]] = [
        {"Model": model, "Total Cars": count} for model, count in report.model_counts.items()
    ]
    totals.append({"Model": "TOTAL", "Total Cars": report.total_cars})
    booked = [{"Model": car.model, "Plate Number": car.plate_number} for car in report.booked]
    return totals, booked
