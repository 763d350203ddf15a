"""Registry of the administrative CRUD screens and how each one is shown as a table."""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple, Type

from school_admin.config.settings import Settings
from school_admin.core.crud_controller import CrudController, ScreenSpec
from school_admin.exams.schemas import CLASSES, EXAM_TYPES, SUBJECTS
from school_admin.exams.screen import EXAM_CONFIG_SCREEN
from school_admin.fees.schemas import FEE_TYPES, MONTHS, PAYMENT_METHODS, year_options
from school_admin.fees.screens import CUSTOM_FEE_SCREEN, FEE_COLLECTION_SCREEN, FEE_SETTING_SCREEN
from school_admin.results.schemas import RESULT_SUBJECTS
from school_admin.results.screen import RESULT_SCREEN, ResultController
from school_admin.users.schemas import ROLES
from school_admin.users.screen import STATUS_FILTERS, USER_SCREEN, UserController
from school_admin.utils.formatting import format_currency, format_number

Column = Tuple[str, Callable[[Any, Settings], str]]
OptionSource = Callable[[], List[str]]


@dataclass
class ScreenEntry:
    spec: ScreenSpec
    controller_class: Type[CrudController]
    columns: List[Column]
    # Choices offered for the draft fields, keyed by wire name
    options: Dict[str, OptionSource] = field(default_factory=dict)

    def choices(self) -> Dict[str, List[str]]:
        return {name: list(source()) for name, source in self.options.items()}


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


SCREENS = {
    "exams": ScreenEntry(EXAM_CONFIG_SCREEN, CrudController, [
        ("ID", lambda r, s: r.id),
        ("Class", lambda r, s: r.class_name),
        ("Exam", lambda r, s: r.exam),
        ("Subjects", lambda r, s: ", ".join(r.subjects)),
    ], {
        "class": lambda: CLASSES,
        "exam": lambda: EXAM_TYPES,
        "subjects": lambda: SUBJECTS,
    }),
    "fee-settings": ScreenEntry(FEE_SETTING_SCREEN, CrudController, [
        ("Fee ID", lambda r, s: r.fee_id),
        ("Type", lambda r, s: r.fee_type),
        ("Classes", lambda r, s: ", ".join(r.classes)),
        ("Amount", lambda r, s: format_currency(r.amount, s.CURRENCY_SYMBOL)),
        ("Active", lambda r, s: f"{r.active_from} - {r.active_to}"),
        ("Override", lambda r, s: _yes_no(r.can_override)),
    ], {
        "feeType": lambda: FEE_TYPES,
        "classes": lambda: CLASSES,
    }),
    "fee-collections": ScreenEntry(FEE_COLLECTION_SCREEN, CrudController, [
        ("ID", lambda r, s: r.collection_id),
        ("Date", lambda r, s: r.date),
        ("Student", lambda r, s: r.student_id),
        ("Fee", lambda r, s: r.fee_id),
        ("Period", lambda r, s: f"{r.month} {r.year}".strip()),
        ("Qty", lambda r, s: str(r.quantity)),
        ("Paid", lambda r, s: format_currency(r.amount_paid, s.CURRENCY_SYMBOL)),
        ("Method", lambda r, s: r.payment_method),
    ], {
        "month": lambda: MONTHS,
        "year": year_options,
        "paymentMethod": lambda: PAYMENT_METHODS,
    }),
    "custom-fees": ScreenEntry(CUSTOM_FEE_SCREEN, CrudController, [
        ("Student", lambda r, s: r.student_id),
        ("Fee", lambda r, s: r.fee_id),
        ("Amount", lambda r, s: format_currency(r.new_amount, s.CURRENCY_SYMBOL)),
        ("From", lambda r, s: r.effective_from),
        ("Active", lambda r, s: _yes_no(r.active)),
        ("Reason", lambda r, s: r.reason),
    ]),
    "results": ScreenEntry(RESULT_SCREEN, ResultController, [
        ("ID", lambda r, s: r.id),
        ("Student", lambda r, s: f"{r.student_name} ({r.student_id})"),
        ("Class", lambda r, s: r.class_name),
        ("Exam", lambda r, s: r.exam),
        ("Marks", lambda r, s: ", ".join(f"{k}: {format_number(v)}" for k, v in r.subjects.items())),
        ("Total", lambda r, s: r.total),
        ("Rank", lambda r, s: r.rank),
    ], {
        "class": lambda: CLASSES,
        "exam": lambda: EXAM_TYPES,
        "subjects": lambda: RESULT_SUBJECTS,
    }),
    "users": ScreenEntry(USER_SCREEN, UserController, [
        ("ID", lambda r, s: r.id),
        ("Name", lambda r, s: r.profile_name),
        ("Email", lambda r, s: r.email or ""),
        ("Role", lambda r, s: r.role),
        ("Status", lambda r, s: "Verified" if r.verified else "Unverified"),
    ], {
        "role": lambda: ["all", *ROLES],
        "status": lambda: list(STATUS_FILTERS),
    }),
}
