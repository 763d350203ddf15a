from typing import List, Optional, Union
from pydantic import BaseModel, Field

from school_admin.core.models import SchoolModel


class StudentSummary(SchoolModel):
    id: Union[int, str]
    name: str = ''
    email: str = ''
    grade: str = ''
    class_name: str = Field('', alias='class')
    status: str = ''
    phone: str = ''
    enrollment_date: str = ''


class TeacherSummary(SchoolModel):
    id: Union[int, str]
    name: str = ''
    email: str = ''
    subject: str = ''
    department: str = ''
    experience: str = ''
    phone: str = ''
    status: str = ''
    classes: List[str] = Field(default_factory=list)


class ClassSummary(SchoolModel):
    id: Union[int, str]
    name: str = ''
    code: str = ''
    teacher: str = ''
    schedule: str = ''
    room: str = ''
    students: int = 0
    capacity: int = 0
    semester: str = ''
    status: str = ''

    @property
    def enrollment_percent(self) -> float:
        if not self.capacity:
            return 0.0
        return self.students / self.capacity * 100


class AttendanceRecord(SchoolModel):
    id: Union[int, str]
    student_name: str = ''
    student_id: str = ''
    class_name: str = Field('', alias='class')
    subject: str = ''
    status: str = ''
    time: str = ''
    date: str = ''


class GradeEntry(SchoolModel):
    id: Union[int, str]
    student_name: str = ''
    student_id: str = ''
    class_name: str = Field('', alias='class')
    subject: str = ''
    assignment: str = ''
    grade: float = 0
    max_grade: float = 100
    percentage: float = 0
    letter_grade: str = ''
    date: str = ''
    trend: str = 'stable'


class DashboardStats(SchoolModel):
    total_students: int = 0
    total_teachers: int = 0
    total_classes: int = 0
    attendance_rate: float = 0
    average_grade: float = 0
    upcoming_events: int = 0


class AttendanceStats(BaseModel):
    present: int
    absent: int
    late: int
    total: int


class GradeStats(BaseModel):
    average: int
    highest: float
    lowest: float
    total: int


class Trend(BaseModel):
    value: str
    is_positive: bool


class DashboardCard(BaseModel):
    title: str
    description: str
    value: str
    trend: Optional[Trend] = None
