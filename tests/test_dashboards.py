import asyncio
from datetime import date

import httpx
import pytest

from school_admin.config.settings import Settings
from school_admin.dashboards import service as dashboards
from school_admin.dashboards.schemas import ClassSummary, DashboardStats, GradeEntry
from school_admin.services.api_service import APIService, ResourceRequestError


def _service(settings, transport):
    return dashboards.DashboardService(APIService(settings, transport=transport), settings)


def test_students_come_from_the_dashboard_prefix(settings, recording_transport):
    transport = recording_transport(lambda request: httpx.Response(200, json=[
        {"id": 7, "name": "Nadia Islam", "email": "nadia@email.com", "class": "8-B", "status": "Active"},
    ]))

    students = asyncio.run(_service(settings, transport).students())

    assert transport.requests[0].url.path == "/api/students"
    assert [s.name for s in students] == ["Nadia Islam"]
    assert students[0].class_name == "8-B"


def test_attendance_sends_date_and_class(settings, recording_transport):
    transport = recording_transport(lambda request: httpx.Response(200, json=[]))

    asyncio.run(_service(settings, transport).attendance(date(2024, 3, 5), "10-A"))

    params = transport.requests[0].url.params
    assert params["date"] == "2024-03-05"
    assert params["class"] == "10-A"


def test_failed_fetch_falls_back_to_sample_data(settings, recording_transport):
    transport = recording_transport(lambda request: httpx.Response(502))
    service = _service(settings, transport)

    teachers = asyncio.run(service.teachers())
    stats = asyncio.run(service.stats())

    assert [t.name for t in teachers] == ["Dr. Sarah Wilson", "Mr. James Anderson", "Ms. Lisa Chen"]
    assert stats.total_students == 1247


def test_without_fallback_failures_propagate(recording_transport):
    settings = Settings(BACKEND_URL="http://testserver", USE_SAMPLE_DATA_FALLBACK=False)
    transport = recording_transport(lambda request: httpx.Response(502))

    with pytest.raises(ResourceRequestError):
        asyncio.run(_service(settings, transport).classes())


def test_without_fallback_unusable_bodies_are_empty(recording_transport):
    settings = Settings(BACKEND_URL="http://testserver", USE_SAMPLE_DATA_FALLBACK=False)
    transport = recording_transport(lambda request: httpx.Response(200, json={"unexpected": True}))

    assert asyncio.run(_service(settings, transport).grades()) == []


def test_wrapped_lists_are_accepted(settings, recording_transport):
    transport = recording_transport(lambda request: httpx.Response(200, json={"classes": [
        {"id": 1, "name": "Physics", "code": "PHY-101", "students": 15, "capacity": 20},
    ]}))

    classes = asyncio.run(_service(settings, transport).classes())

    assert [c.code for c in classes] == ["PHY-101"]
    assert classes[0].enrollment_percent == 75


def test_dashboards_against_mock_backend(settings, transport):
    service = _service(settings, transport)

    grades = asyncio.run(service.grades())
    attendance = asyncio.run(service.attendance(date(2024, 1, 15)))

    assert len(grades) == 3
    assert {r.date for r in attendance} == {"2024-01-15"}


def test_attendance_stats_counts_each_status():
    records = asyncio.run(_offline_service().attendance(date(2024, 1, 15)))

    stats = dashboards.attendance_stats(records)

    assert (stats.present, stats.absent, stats.late, stats.total) == (1, 1, 1, 3)
    assert [r.student_name for r in dashboards.ATTENDANCE_SEARCH.apply(records, "stu002")] == ["Bob Smith"]


def _offline_service():
    def refuse(request):
        raise httpx.ConnectError("offline", request=request)
    settings = Settings(BACKEND_URL="http://testserver", USE_SAMPLE_DATA_FALLBACK=True)
    return _service(settings, httpx.MockTransport(refuse))


def _grade(percentage):
    return GradeEntry(id=percentage, percentage=percentage)


def test_grade_stats():
    stats = dashboards.grade_stats([_grade(92), _grade(78), _grade(85)])

    assert (stats.average, stats.highest, stats.lowest, stats.total) == (85, 92, 78, 3)


def test_grade_stats_lowest_is_the_real_minimum():
    assert dashboards.grade_stats([_grade(65), _grade(70)]).lowest == 65


def test_grade_stats_of_nothing_is_zero():
    stats = dashboards.grade_stats([])

    assert (stats.average, stats.highest, stats.lowest, stats.total) == (0, 0, 0, 0)


def test_grade_average_rounds_halves_up():
    assert dashboards.grade_stats([_grade(80), _grade(85)]).average == 83


@pytest.mark.parametrize("percentage,band", [
    (100, "excellent"), (90, "excellent"), (89.9, "good"), (80, "good"),
    (70, "average"), (60, "fair"), (59, "poor"), (0, "poor"),
])
def test_grade_band(percentage, band):
    assert dashboards.grade_band(percentage) == band


def test_grade_search_covers_subject():
    grades = [GradeEntry(id=1, student_name="Alice Johnson", student_id="STU001", subject="Mathematics"),
              GradeEntry(id=2, student_name="Bob Smith", student_id="STU002", subject="Chemistry")]

    assert [g.id for g in dashboards.GRADE_SEARCH.apply(grades, "chem")] == [2]


def test_home_cards():
    cards = dashboards.home_cards(DashboardStats(total_students=1247, total_teachers=89, total_classes=42,
                                                 attendance_rate=94.2, average_grade=87.0, upcoming_events=8))

    assert [c.title for c in cards] == ["Total Students", "Total Teachers", "Active Classes",
                                        "Attendance Rate", "Average Grade", "Upcoming Events"]
    assert [c.value for c in cards] == ["1247", "89", "42", "94.2%", "87/100", "8"]
    assert cards[2].trend is None
    assert cards[0].trend.value == "12% from last month"


def test_empty_class_capacity_has_no_enrollment():
    assert ClassSummary(id=1, students=5, capacity=0).enrollment_percent == 0
