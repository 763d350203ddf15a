from enum import Enum
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar
from school_admin.core.models import DraftModel, SchoolModel

D = TypeVar("D", bound=DraftModel)
R = TypeVar("R", bound=SchoolModel)


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class FieldLockedError(ValueError):
    """Raised when a key field is changed while editing an existing record."""


class DraftValidationError(ValueError):
    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__("; ".join(problems))


def toggled(values: Sequence[Any], value: Any) -> List[Any]:
    """Set-membership toggle: drop `value` if present, otherwise append it."""
    if value in values:
        return [v for v in values if v != value]
    return [*values, value]


class FormState(Generic[D, R]):
    """
    Scratch state behind a create/edit dialog.

    CREATE: no record selected, draft holds empty defaults.
    EDIT: `editing` is the selected record, draft is a copy of its editable fields.
    Fields listed in `locked_fields` are read-only while editing.
    """

    def __init__(
        self,
        new_draft: Callable[[], D],
        seed_draft: Callable[[R], D],
        locked_fields: Sequence[str] = (),
    ):
        self._new_draft = new_draft
        self._seed_draft = seed_draft
        self.locked_fields = tuple(locked_fields)
        self.draft: D = new_draft()
        self.editing: Optional[R] = None
        self.is_open = False

    @property
    def mode(self) -> FormMode:
        return FormMode.EDIT if self.editing is not None else FormMode.CREATE

    def open_for_create(self) -> D:
        self.reset()
        self.is_open = True
        return self.draft

    def open_for_edit(self, record: R) -> D:
        self.editing = record
        self.draft = self._seed_draft(record)
        self.is_open = True
        return self.draft

    def _target(self, path: str):
        """Return (owner, field_name) for a possibly dotted field path."""
        parts = path.split(".")
        owner: Any = self.draft
        for part in parts[:-1]:
            owner = getattr(owner, type(owner).field_name(part))
            if owner is None:
                raise KeyError(f"'{part}' is not set on this draft")
        return owner, type(owner).field_name(parts[-1])

    def _check_unlocked(self, owner: Any, name: str) -> None:
        if self.mode is FormMode.EDIT and owner is self.draft and name in self.locked_fields:
            raise FieldLockedError(f"'{name}' cannot be changed after creation")

    def set(self, path: str, value: Any) -> None:
        owner, name = self._target(path)
        self._check_unlocked(owner, name)
        setattr(owner, name, value)

    def toggle(self, path: str, value: Any) -> None:
        owner, name = self._target(path)
        self._check_unlocked(owner, name)
        setattr(owner, name, toggled(getattr(owner, name) or [], value))

    def validate(self) -> None:
        problems = self.draft.problems()
        if problems:
            raise DraftValidationError(problems)

    def reset(self) -> None:
        self.draft = self._new_draft()
        self.editing = None

    def close(self) -> None:
        self.reset()
        self.is_open = False
