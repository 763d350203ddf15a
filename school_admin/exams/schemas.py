from typing import List
from pydantic import Field

from school_admin.core.models import DraftModel, SchoolModel

CLASSES = ['Class 1', 'Class 2', 'Class 3', 'Class 4', 'Class 5', 'Class 6', 'Class 7', 'Class 8', 'Class 9', 'Class 10']
EXAM_TYPES = ['First Term', 'Mid Term', 'Final Term', 'Unit Test']
SUBJECTS = ['Mathematics', 'English', 'Science', 'Social Studies', 'Bangla', 'Religion', 'Physical Education']


class ExamConfigDraft(DraftModel):
    class_name: str = Field('', alias='class')
    exam: str = ''
    subjects: List[str] = Field(default_factory=list)

    required_fields = ('class_name', 'exam', 'subjects')


class ExamConfig(SchoolModel):
    id: str
    class_name: str = Field('', alias='class')
    exam: str = ''
    subjects: List[str] = Field(default_factory=list)
