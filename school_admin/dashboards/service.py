import math
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from school_admin.config.settings import Settings
from school_admin.core.projection import Projection
from school_admin.dashboards import sample_data
from school_admin.dashboards.schemas import (
    AttendanceRecord,
    AttendanceStats,
    ClassSummary,
    DashboardCard,
    DashboardStats,
    GradeEntry,
    GradeStats,
    StudentSummary,
    TeacherSummary,
    Trend,
)
from school_admin.services.api_service import APIService, ResourceRequestError
from school_admin.utils.formatting import format_number
from school_admin.utils.logger import logger

STUDENT_SEARCH = Projection(("name", "email", "class_name"))
TEACHER_SEARCH = Projection(("name", "subject", "department"))
CLASS_SEARCH = Projection(("name", "code", "teacher"))
ATTENDANCE_SEARCH = Projection(("student_name", "student_id"))
GRADE_SEARCH = Projection(("student_name", "student_id", "subject"))


def _js_round(value: float) -> int:
    # Halves round up, as in the browser
    return int(math.floor(value + 0.5))


def attendance_stats(records: Iterable[AttendanceRecord]) -> AttendanceStats:
    records = list(records)
    return AttendanceStats(
        present=sum(1 for r in records if r.status == 'Present'),
        absent=sum(1 for r in records if r.status == 'Absent'),
        late=sum(1 for r in records if r.status == 'Late'),
        total=len(records),
    )


def grade_stats(entries: Iterable[GradeEntry]) -> GradeStats:
    percentages = [entry.percentage for entry in entries]
    if not percentages:
        return GradeStats(average=0, highest=0, lowest=0, total=0)
    return GradeStats(
        average=_js_round(sum(percentages) / len(percentages)),
        highest=max(percentages),
        lowest=min(percentages),
        total=len(percentages),
    )


def grade_band(percentage: float) -> str:
    if percentage >= 90:
        return 'excellent'
    if percentage >= 80:
        return 'good'
    if percentage >= 70:
        return 'average'
    if percentage >= 60:
        return 'fair'
    return 'poor'


def home_cards(stats: DashboardStats) -> List[DashboardCard]:
    return [
        DashboardCard(title="Total Students", description="Enrolled students", value=str(stats.total_students),
                      trend=Trend(value="12% from last month", is_positive=True)),
        DashboardCard(title="Total Teachers", description="Active faculty members", value=str(stats.total_teachers),
                      trend=Trend(value="3 new this month", is_positive=True)),
        DashboardCard(title="Active Classes", description="Current semester", value=str(stats.total_classes)),
        DashboardCard(title="Attendance Rate", description="This week", value=f"{format_number(stats.attendance_rate)}%",
                      trend=Trend(value="2.1% from last week", is_positive=True)),
        DashboardCard(title="Average Grade", description="School-wide average", value=f"{format_number(stats.average_grade)}/100",
                      trend=Trend(value="1.5 points improvement", is_positive=True)),
        DashboardCard(title="Upcoming Events", description="This month", value=str(stats.upcoming_events)),
    ]


def _as_list(data: Any, name: str) -> Optional[List[Dict[str, Any]]]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get(name), list):
        return data[name]
    return None


class DashboardService:
    """
    Read-only dashboards. Each one is a single GET under the dashboard prefix; when it
    fails or returns nothing usable, the demonstration data is shown instead (unless
    sample fallback is switched off, in which case the failure propagates).
    """

    def __init__(self, api: APIService, settings: Settings):
        self.api = api
        prefix = settings.DASHBOARD_API_PREFIX.strip("/")
        self.prefix = f"/{prefix}" if prefix else ""
        self.use_fallback = settings.USE_SAMPLE_DATA_FALLBACK

    async def _get(self, name: str, params: Optional[Dict[str, Any]] = None) -> Any:
        try:
            return await self.api.request("GET", f"{self.prefix}/{name}", params=params)
        except ResourceRequestError as e:
            if not self.use_fallback:
                raise
            logger.warning(f"Dashboard '{name}' unavailable, showing sample data: {e}")
            return None

    async def _get_list(self, name: str, fallback: List[Dict[str, Any]], params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        items = _as_list(await self._get(name, params), name)
        if items is None:
            if not self.use_fallback:
                return []
            return fallback
        return items

    async def students(self) -> List[StudentSummary]:
        items = await self._get_list("students", sample_data.SAMPLE_STUDENTS)
        return [StudentSummary.model_validate(item) for item in items]

    async def teachers(self) -> List[TeacherSummary]:
        items = await self._get_list("teachers", sample_data.SAMPLE_TEACHERS)
        return [TeacherSummary.model_validate(item) for item in items]

    async def classes(self) -> List[ClassSummary]:
        items = await self._get_list("classes", sample_data.SAMPLE_CLASSES)
        return [ClassSummary.model_validate(item) for item in items]

    async def attendance(self, day: Optional[date] = None, class_name: str = '') -> List[AttendanceRecord]:
        day = day or date.today()
        params = {"date": day.isoformat(), "class": class_name}
        items = await self._get_list("attendance", sample_data.sample_attendance(day), params)
        return [AttendanceRecord.model_validate(item) for item in items]

    async def grades(self, class_name: str = '', subject: str = '') -> List[GradeEntry]:
        params = {"class": class_name, "subject": subject}
        items = await self._get_list("grades", sample_data.SAMPLE_GRADES, params)
        return [GradeEntry.model_validate(item) for item in items]

    async def stats(self) -> DashboardStats:
        data = await self._get("dashboard")
        if not isinstance(data, dict):
            data = sample_data.SAMPLE_STATS if self.use_fallback else {}
        return DashboardStats.model_validate(data)
