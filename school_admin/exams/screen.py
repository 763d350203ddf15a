from school_admin.core.crud_controller import ScreenSpec
from school_admin.exams.schemas import ExamConfig, ExamConfigDraft

EXAM_CONFIG_SCREEN = ScreenSpec(
    title="Exam Configurations",
    resource="exam-configs",
    list_key="configs",
    record_model=ExamConfig,
    draft_model=ExamConfigDraft,
    key_fields=("id",),
    noun="exam configuration",
    plural="exam configurations",
    search_fields=("id", "class_name", "exam"),
    filter_fields=("class_name", "exam"),
)
