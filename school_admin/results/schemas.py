from typing import Dict
from pydantic import Field

from school_admin.core.models import DraftModel, SchoolModel
from school_admin.exams.schemas import CLASSES, EXAM_TYPES

# Results are entered for the written subjects only
RESULT_SUBJECTS = ['Mathematics', 'English', 'Science', 'Social Studies', 'Bangla', 'Religion']

__all__ = ['CLASSES', 'EXAM_TYPES', 'RESULT_SUBJECTS', 'ResultDraft', 'Result']


class ResultDraft(DraftModel):
    student_id: str = ''
    student_name: str = ''
    class_name: str = Field('', alias='class')
    exam: str = ''
    subjects: Dict[str, float] = Field(default_factory=dict)
    total: str = ''
    rank: str = ''

    required_fields = ('student_id', 'student_name', 'class_name', 'exam')


class Result(SchoolModel):
    id: str
    student_id: str = ''
    student_name: str = ''
    class_name: str = Field('', alias='class')
    exam: str = ''
    subjects: Dict[str, float] = Field(default_factory=dict)
    total: str = ''
    rank: str = ''
