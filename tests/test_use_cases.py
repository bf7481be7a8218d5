from datetime import date

from booking_recon.application.use_cases import BookingReconContext, ReconcileBookingsUseCase
from booking_recon.domain.analytics import AnalyticsAggregator, DailyReportAggregator
from booking_recon.domain.filters import FilterEngine, FilterState
from booking_recon.domain.models import AssignmentRecord, MaintenanceRecord


class InMemoryAssignments:
    def __init__(self, records):
        self.records = records
        self.calls = 0

    def list_assignments(self):
        self.calls += 1
        return list(self.records)


class InMemoryMaintenance:
    def __init__(self, records):
        self.records = records

    def list_maintenance(self):
        return list(self.records)


def make_use_case(assignments, maintenance):
    context = BookingReconContext(
        assignment_repository=assignments,
        maintenance_repository=maintenance,
        filter_engine=FilterEngine(),
        analytics=AnalyticsAggregator(),
        daily_reports=DailyReportAggregator(),
    )
    return ReconcileBookingsUseCase(context)


def sample_assignments():
    return InMemoryAssignments(
        [
            AssignmentRecord(booking_number="100", ejar_id="A1", invygo_id="B2", invygo_model="Sedan", pickup_date="2024-01-05"),
            AssignmentRecord(booking_number="100", ejar_id="A1", invygo_id="A1", invygo_model="Sedan"),
            AssignmentRecord(booking_number="daily-7", ejar_id="C3", invygo_id="D4", invygo_model="SUV"),
        ]
    )


def test_execute_builds_view_and_summary():
    use_case = make_use_case(sample_assignments(), InMemoryMaintenance([MaintenanceRecord(vehicle_id="B2", date_in="x")]))

    dashboard = use_case.execute()

    assert len(dashboard.view) == 3
    assert [item.result.is_duplicate_booking for item in dashboard.view] == [True, True, False]
    assert dashboard.summary.numeric_count == 2
    assert dashboard.summary.mismatch_count == 1
    assert dashboard.summary.ready_count == 1
    assert dashboard.facet_options["invygo_model"] == ["sedan", "suv"]
    assert dashboard.daily_report is None


def test_duplicates_follow_the_filtered_view():
    use_case = make_use_case(sample_assignments(), InMemoryMaintenance([]))

    dashboard = use_case.execute(FilterState().with_mismatch_only(True))

    assert len(dashboard.view) == 1
    assert not dashboard.view[0].result.is_duplicate_booking
    assert dashboard.summary.total == 1
    assert dashboard.summary.numeric_count == 2


def test_selected_date_produces_daily_report():
    use_case = make_use_case(sample_assignments(), InMemoryMaintenance([]))

    dashboard = use_case.execute(FilterState(selected_date=date(2024, 1, 5)))

    assert dashboard.daily_report is not None
    assert [car.plate_number for car in dashboard.daily_report.booked] == ["B2"]
    assert dashboard.daily_report.model_counts == {"Sedan": 2}


def test_sources_are_ingested_once_until_reingested():
    assignments = sample_assignments()
    use_case = make_use_case(assignments, InMemoryMaintenance([]))

    use_case.execute()
    use_case.execute(FilterState().with_search("suv"))
    assert assignments.calls == 1

    use_case.ingest()
    assert assignments.calls == 2
