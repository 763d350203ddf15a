from typing import Iterable

from school_admin.core.crud_controller import ScreenSpec
from school_admin.fees.schemas import (
    CustomStudentFee,
    CustomStudentFeeDraft,
    FeeCollection,
    FeeCollectionDraft,
    FeeSetting,
    FeeSettingDraft,
)

FEE_SETTING_SCREEN = ScreenSpec(
    title="Fee Settings",
    resource="fee-settings",
    list_key="feeSettings",
    record_model=FeeSetting,
    draft_model=FeeSettingDraft,
    key_fields=("fee_id",),
    noun="fee setting",
    plural="fee settings",
    search_fields=("fee_id", "fee_type", "description"),
    filter_fields=("fee_type",),
)

FEE_COLLECTION_SCREEN = ScreenSpec(
    title="Fee Collections",
    resource="fee-collections",
    list_key="collections",
    record_model=FeeCollection,
    draft_model=FeeCollectionDraft,
    key_fields=("collection_id",),
    noun="fee collection",
    plural="fee collections",
    search_fields=("student_id", "fee_id"),
    filter_fields=("month", "year", "payment_method"),
)

CUSTOM_FEE_SCREEN = ScreenSpec(
    title="Custom Student Fees",
    resource="custom-student-fees",
    list_key="customFees",
    record_model=CustomStudentFee,
    draft_model=CustomStudentFeeDraft,
    key_fields=("student_id", "fee_id"),
    noun="custom fee",
    plural="custom student fees",
    search_fields=("student_id", "fee_id", "reason"),
    filter_fields=("active",),
)


def total_amount(collections: Iterable[FeeCollection]) -> float:
    """Sum of amountPaid over the (usually filtered) collections."""
    return sum(collection.amount_paid for collection in collections)
