"""
User records as returned by the user-verification endpoints.

There is a single definition of StudentData / StaffData: the shape the
verification screen reads and writes.
"""
from typing import Any, Dict, List, Literal, Optional
from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from school_admin.core.models import DraftModel, SchoolModel
from school_admin.utils.formatting import to_iso_date

Role = Literal['admin', 'staff', 'student']
ROLES = ('student', 'staff', 'admin')


class _ProfileModel(SchoolModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
        coerce_numbers_to_str=True, validate_assignment=True,
    )


class StudentData(_ProfileModel):
    student_id: str = ''
    name: str = ''
    class_name: str = Field('', alias='class')
    number: str = ''
    description: str = ''
    english_name: str = ''
    mother_name: str = ''
    father_name: str = ''
    email: str = ''
    blood_group: str = ''
    photo_url: str = ''
    name_bangla: str = ''
    name_english: str = ''
    academic_year: str = ''
    section: str = ''
    shift: str = ''


class StaffData(_ProfileModel):
    staff_id: str = ''
    name_bangla: str = ''
    name_english: str = ''
    subject: str = ''
    designation: str = ''
    joining_date: str = ''
    nid: str = ''
    mobile: str = ''
    salary: float = 0
    email: str = ''
    address: str = ''
    blood_group: str = ''
    working_days: int = 0
    photo_url: str = ''

    @field_validator('joining_date', mode='before')
    @classmethod
    def _normalize_joining_date(cls, value: Any) -> str:
        return to_iso_date(value)


class ExtendedUser(SchoolModel):
    id: str
    email: Optional[str] = None
    role: Role = 'student'
    verified: bool = False
    created_at: Any = None
    student_data: Optional[StudentData] = None
    staff_data: Optional[StaffData] = None
    uid: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    email_verified: Optional[bool] = None

    @property
    def profile_name(self) -> str:
        if self.student_data and self.student_data.name:
            return self.student_data.name
        if self.staff_data and (self.staff_data.name_bangla or self.staff_data.name_english):
            return self.staff_data.name_bangla or self.staff_data.name_english
        return 'N/A'


class UserDraft(DraftModel):
    """Edit draft: the profile block matching the role is the only one carried."""
    email: Optional[str] = None
    role: Role = 'student'
    verified: bool = False
    student_data: Optional[StudentData] = None
    staff_data: Optional[StaffData] = None

    def extra_problems(self) -> List[str]:
        if self.role == 'student':
            if self.student_data is None or self.staff_data is not None:
                return ['studentData (and only studentData) is required for students']
        elif self.staff_data is None or self.student_data is not None:
            return ['staffData (and only staffData) is required for staff and admins']
        return []

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        for key in ('studentData', 'staffData'):
            if payload.get(key) is None:
                payload.pop(key, None)
        return payload
