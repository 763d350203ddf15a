import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, List, Optional, Tuple, Type, TypeVar, Union
from pydantic import ValidationError

from school_admin.core.form_state import DraftValidationError, FormState
from school_admin.core.list_state import ListState
from school_admin.core.models import DraftModel, SchoolModel
from school_admin.core.notifications import Notifier
from school_admin.core.projection import Projection
from school_admin.services.api_service import APIService, ResourceClient, ResourceKey, ResourceRequestError
from school_admin.utils.logger import logger

T = TypeVar("T", bound=SchoolModel)
D = TypeVar("D", bound=DraftModel)

ConfirmCallback = Callable[[str], Union[bool, Awaitable[bool]]]


def _decline(message: str) -> bool:
    return False


@dataclass
class ScreenSpec(Generic[T, D]):
    """Everything that differs between two CRUD screens."""
    title: str
    resource: str
    list_key: str
    record_model: Type[T]
    draft_model: Type[D]
    key_fields: Tuple[str, ...]
    noun: str
    plural: str
    search_fields: Tuple[str, ...] = ()
    filter_fields: Tuple[str, ...] = ()
    creatable: bool = True
    new_draft: Optional[Callable[[], D]] = None
    seed_draft: Optional[Callable[[T], D]] = None

    def key_of(self, record: T) -> ResourceKey:
        values = tuple(getattr(record, name) for name in self.key_fields)
        return values if len(values) > 1 else values[0]

    def make_new_draft(self) -> D:
        if self.new_draft is not None:
            return self.new_draft()
        return self.draft_model()

    def make_seeded_draft(self, record: T) -> D:
        if self.seed_draft is not None:
            return self.seed_draft(record)
        return self.draft_model.model_validate(record.model_dump())


class CrudController(Generic[T, D]):
    """
    List / filter / create / update / delete flow of one screen.

    After every successful mutation the whole collection is fetched again; the
    client never merges its own draft into the list.
    """

    def __init__(
        self,
        spec: ScreenSpec[T, D],
        api: APIService,
        notifier: Optional[Notifier] = None,
        confirm: Optional[ConfirmCallback] = None,
    ):
        self.spec = spec
        self.client = ResourceClient(api, spec.resource, spec.list_key)
        self.notifier = notifier or Notifier()
        self.confirm = confirm or _decline
        self.list_state: ListState[T] = ListState(spec.resource)
        # Key fields that live inside the draft (composite keys) are read-only when editing
        locked = tuple(name for name in spec.key_fields if name in spec.draft_model.model_fields)
        self.form: FormState[D, T] = FormState(spec.make_new_draft, spec.make_seeded_draft, locked)
        self.projection = Projection(spec.search_fields, spec.filter_fields)

    @property
    def items(self) -> List[T]:
        return self.list_state.items

    @property
    def noun_title(self) -> str:
        return self.spec.noun[:1].upper() + self.spec.noun[1:]

    async def fetch_all(self) -> List[T]:
        raw = await self.client.list()
        return [self.spec.record_model.model_validate(item) for item in raw]

    async def load(self) -> bool:
        try:
            await self.list_state.refresh(self.fetch_all)
            return True
        except (ResourceRequestError, ValidationError) as e:
            logger.error(f"Error fetching {self.spec.plural}: {e}", exc_info=True)
            self.notifier.error(f"Failed to fetch {self.spec.plural}")
            return False

    def visible(self, term: Optional[str] = None, **filters: Any) -> List[T]:
        return self.projection.apply(self.list_state.items, term, **filters)

    def find(self, key: ResourceKey) -> Optional[T]:
        wanted = key if isinstance(key, tuple) else (key,)
        wanted = tuple(str(part) for part in wanted)
        for record in self.list_state.items:
            current = self.spec.key_of(record)
            current = current if isinstance(current, tuple) else (current,)
            if tuple(str(part) for part in current) == wanted:
                return record
        return None

    def open_for_create(self) -> D:
        return self.form.open_for_create()

    def open_for_edit(self, record: T) -> D:
        return self.form.open_for_edit(record)

    def cancel(self) -> None:
        self.form.close()

    async def submit(self) -> bool:
        if self.form.editing is None and not self.spec.creatable:
            self.notifier.error(f"New {self.spec.plural} cannot be created here")
            return False
        try:
            self.form.validate()
        except DraftValidationError as e:
            logger.warning(f"Rejected {self.spec.noun} draft: {e}")
            self.notifier.error("Please fill all required fields")
            return False

        payload = self.form.draft.to_payload()
        try:
            if self.form.editing is not None:
                await self.client.update(self.spec.key_of(self.form.editing), payload)
                self.notifier.success(f"{self.noun_title} updated successfully")
            else:
                await self.client.create(payload)
                self.notifier.success(f"{self.noun_title} created successfully")
        except ResourceRequestError as e:
            logger.error(f"Error saving {self.spec.noun}: {e}", exc_info=True)
            self.notifier.error(f"Failed to save {self.spec.noun}")
            return False

        await self.load()
        self.form.close()
        return True

    async def _confirmed(self, message: str) -> bool:
        answer = self.confirm(message)
        if inspect.isawaitable(answer):
            answer = await answer
        return bool(answer)

    async def delete(self, record: T) -> bool:
        if not await self._confirmed(f"Are you sure you want to delete this {self.spec.noun}?"):
            logger.info(f"Delete of {self.spec.noun} {self.spec.key_of(record)} not confirmed")
            return False
        try:
            await self.client.delete(self.spec.key_of(record))
        except ResourceRequestError as e:
            logger.error(f"Error deleting {self.spec.noun}: {e}", exc_info=True)
            self.notifier.error(f"Failed to delete {self.spec.noun}")
            return False
        self.notifier.success(f"{self.noun_title} deleted successfully")
        await self.load()
        return True
