from typing import Any, ClassVar, Dict, List, Tuple
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SchoolModel(BaseModel):
    """Base for every entity exchanged with the backend (camelCase on the wire)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")

    @classmethod
    def field_name(cls, name: str) -> str:
        """Accept either the python field name or its wire alias."""
        if name in cls.model_fields:
            return name
        for field_name, info in cls.model_fields.items():
            if info.alias == name:
                return field_name
        raise KeyError(f"{cls.__name__} has no field '{name}'")


def is_filled(value: Any) -> bool:
    # bool before int: a False checkbox is still an answer
    if value is None:
        return False
    if isinstance(value, bool):
        return True
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (int, float)):
        return value > 0
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) > 0
    return True


class DraftModel(SchoolModel):
    """
    Editable, possibly incomplete copy of an entity held by a form.

    Drafts accept partial state while being edited; `problems()` is the explicit check
    that runs before anything is sent to the backend.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore", coerce_numbers_to_str=True, validate_assignment=True)

    required_fields: ClassVar[Tuple[str, ...]] = ()

    def problems(self) -> List[str]:
        found = []
        for name in self.required_fields:
            if not is_filled(getattr(self, name)):
                alias = type(self).model_fields[name].alias or name
                found.append(f"{alias} is required")
        found.extend(self.extra_problems())
        return found

    def extra_problems(self) -> List[str]:
        return []
