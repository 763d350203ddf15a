from datetime import date
from typing import List
from pydantic import Field

from school_admin.core.models import DraftModel, SchoolModel

FEE_TYPES = ['Monthly Fee', 'Admission Fee', 'Exam Fee', 'Sports Fee', 'Library Fee', 'Transport Fee']
MONTHS = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
]
PAYMENT_METHODS = ['Cash', 'Bank Transfer', 'Mobile Banking', 'Card Payment', 'Cheque']


def year_options(today: date = None) -> List[str]:
    """Two years back to two years ahead of the current one."""
    current = (today or date.today()).year
    return [str(current - 2 + i) for i in range(5)]


# Fee settings

class FeeSettingDraft(DraftModel):
    fee_type: str = ''
    classes: List[str] = Field(default_factory=list)
    description: str = ''
    amount: float = 0
    active_from: str = ''
    active_to: str = ''
    can_override: bool = False

    required_fields = ('fee_type', 'description', 'amount', 'classes')


class FeeSetting(FeeSettingDraft):
    fee_id: str


# Fee collections

def _current_year() -> str:
    return str(date.today().year)


class FeeCollectionDraft(DraftModel):
    date: str = ''
    student_id: str = ''
    fee_id: str = ''
    month: str = ''
    year: str = Field(default_factory=_current_year)
    quantity: int = 1
    amount_paid: float = 0
    payment_method: str = ''
    description: str = ''

    required_fields = ('date', 'student_id', 'fee_id', 'amount_paid', 'payment_method')

    def extra_problems(self) -> List[str]:
        if self.quantity < 1:
            return ['quantity must be at least 1']
        return []


class FeeCollection(FeeCollectionDraft):
    collection_id: str
    year: str = ''


# Custom per-student fees

class CustomStudentFeeDraft(DraftModel):
    student_id: str = ''
    fee_id: str = ''
    new_amount: float = 0
    effective_from: str = ''
    active: bool = True
    reason: str = ''

    required_fields = ('student_id', 'fee_id', 'new_amount', 'effective_from')


class CustomStudentFee(SchoolModel):
    student_id: str
    fee_id: str
    new_amount: float = 0
    effective_from: str = ''
    active: bool = True
    reason: str = ''
