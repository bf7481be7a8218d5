"""Command-line entrypoint for booking reconciliation."""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

import pandas as pd

from booking_recon.application.use_cases import BookingReconContext, ReconcileBookingsUseCase
from booking_recon.domain.analytics import AnalyticsAggregator, DailyReportAggregator
from booking_recon.domain.filters import FilterEngine, FilterState, resolve_column
from booking_recon.infrastructure.repositories.tabular_repositories import (
    TabularAssignmentRepository,
    TabularMaintenanceRepository,
)
from booking_recon.presentation.table_report import (
    daily_report_rows,
    reconciled_to_rows,
    summary_lines,
)

logger = logging.getLogger(__name__)


def _facet(value: str) -> tuple[str, str]:
    column, sep, selected = value.partition("=")
    if not sep or not column.strip():
        raise argparse.ArgumentTypeError(f"expected COLUMN=VALUE, got {value!r}")
    try:
        return resolve_column(column), selected
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile assignment and fleet bookings against the maintenance log")
    parser.add_argument("assignments", type=str, help="Path to the assignment/fleet CSV or Excel export")
    parser.add_argument("maintenance", type=str, help="Path to the maintenance log CSV or Excel export")
    parser.add_argument("--search", type=str, help="Full-text search across all fields")
    parser.add_argument(
        "--facet",
        type=_facet,
        action="append",
        default=[],
        metavar="COLUMN=VALUE",
        help="Keep rows whose COLUMN matches VALUE; repeat to select more values",
    )
    parser.add_argument("--mismatch-only", action="store_true", help="Only mismatched bookings")
    parser.add_argument("--ready-only", action="store_true", help="Only bookings ready to switch back")
    parser.add_argument("--date", type=date.fromisoformat, help="Pickup date for the daily report (YYYY-MM-DD)")
    parser.add_argument("--show-rows", action="store_true", help="Print the filtered rows")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def build_state(args: argparse.Namespace) -> FilterState:
    state = FilterState(selected_date=args.date)
    if args.search is not None:
        return state.with_search(args.search)
    selections: dict[str, list[str]] = {}
    for column, value in args.facet:
        selections.setdefault(column, []).append(value)
    for column, values in selections.items():
        state = state.with_facet(column, values)
    return state.with_mismatch_only(args.mismatch_only).with_ready_only(args.ready_only)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        context = BookingReconContext(
            assignment_repository=TabularAssignmentRepository(args.assignments),
            maintenance_repository=TabularMaintenanceRepository(args.maintenance),
            filter_engine=FilterEngine(),
            analytics=AnalyticsAggregator(),
            daily_reports=DailyReportAggregator(),
        )
        dashboard = ReconcileBookingsUseCase(context).execute(build_state(args))
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Reconciliation failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print("Booking Summary")
    print("===============")
    for line in summary_lines(dashboard.summary):
        print(line)

    if dashboard.daily_report is not None:
        totals, booked = daily_report_rows(dashboard.daily_report)
        print("\nTotal of Cars")
        print(pd.DataFrame(totals).to_string(index=False))
        print(f"\nBooked Cars {dashboard.daily_report.selected_date}")
        if booked:
            print(pd.DataFrame(booked).to_string(index=False))
        else:
            print("No bookings on this date.")

    if args.show_rows:
        print()
        rows = reconciled_to_rows(dashboard.view)
        if rows:
            print(pd.DataFrame(rows).to_string(index=False))
        else:
            print("No rows match the current filters.")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
