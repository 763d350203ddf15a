from typing import List, Optional

from school_admin.core.crud_controller import CrudController, ScreenSpec
from school_admin.services.api_service import ResourceRequestError
from school_admin.users.schemas import ROLES, ExtendedUser, StaffData, StudentData, UserDraft
from school_admin.utils.logger import logger

STATUS_FILTERS = {'all': None, 'verified': True, 'unverified': False}


def seed_user_draft(user: ExtendedUser) -> UserDraft:
    """Copy the profile block selected by the user's role, filling the usual defaults."""
    if user.role == 'student':
        data = user.student_data.model_copy(deep=True) if user.student_data else StudentData()
        data.student_id = data.student_id or user.id
        data.email = data.email or user.email or ''
        return UserDraft(email=user.email, role=user.role, verified=user.verified, student_data=data)

    data = user.staff_data.model_copy(deep=True) if user.staff_data else StaffData()
    data.staff_id = data.staff_id or user.id
    data.email = data.email or user.email or ''
    return UserDraft(email=user.email, role=user.role, verified=user.verified, staff_data=data)


USER_SCREEN = ScreenSpec(
    title="Users",
    resource="users",
    list_key="users",
    record_model=ExtendedUser,
    draft_model=UserDraft,
    key_fields=("id",),
    noun="user",
    plural="users",
    search_fields=("email", "student_data.name", "staff_data.name_bangla", "staff_data.name_english"),
    filter_fields=("role", "verified"),
    creatable=False,
    seed_draft=seed_user_draft,
)


class UserController(CrudController[ExtendedUser, UserDraft]):
    async def fetch_all(self) -> List[ExtendedUser]:
        users: List[ExtendedUser] = []
        for role in ROLES:
            raw = await self.client.list(params={'role': role})
            users.extend(ExtendedUser.model_validate(item) for item in raw)
        return users

    def visible(self, term: Optional[str] = None, role: str = 'all', status: str = 'all') -> List[ExtendedUser]:
        if status not in STATUS_FILTERS:
            raise ValueError(f"Unknown status filter '{status}'")
        return self.projection.apply(
            self.list_state.items,
            term,
            role=None if role == 'all' else role,
            verified=STATUS_FILTERS[status],
        )

    async def toggle_verified(self, user: ExtendedUser) -> bool:
        try:
            await self.client.update(user.id, {'verified': not user.verified})
        except ResourceRequestError as e:
            logger.error(f"Error verifying user {user.id}: {e}", exc_info=True)
            self.notifier.error("Failed to verify user")
            return False
        self.notifier.success(f"User {'unverified' if user.verified else 'verified'} successfully")
        await self.load()
        return True
