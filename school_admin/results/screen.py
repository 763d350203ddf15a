from school_admin.core.crud_controller import CrudController, ScreenSpec
from school_admin.results.schemas import Result, ResultDraft
from school_admin.utils.formatting import format_number

RESULT_SCREEN = ScreenSpec(
    title="Results",
    resource="results",
    list_key="results",
    record_model=Result,
    draft_model=ResultDraft,
    key_fields=("id",),
    noun="result",
    plural="results",
    search_fields=("student_name", "student_id"),
    filter_fields=("class_name", "exam"),
)


class ResultController(CrudController[Result, ResultDraft]):
    def set_mark(self, subject: str, mark: float) -> None:
        draft = self.form.draft
        draft.subjects = {**draft.subjects, subject: mark}

    def calculate_total(self) -> str:
        """
        Sum the per-subject marks into `total`.

        Only runs when asked: later mark changes leave `total` as it was until this is
        called again, and a stale total is saved as-is.
        """
        total = sum(mark or 0 for mark in self.form.draft.subjects.values())
        self.form.draft.total = format_number(total)
        return self.form.draft.total
