from typing import Any, Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")

_MISSING = object()


def resolve_path(record: Any, path: str) -> Any:
    """Follow a dotted path through attributes or mapping keys; missing links yield _MISSING."""
    value = record
    for part in path.split("."):
        if value is None:
            return _MISSING
        if isinstance(value, dict):
            value = value.get(part, _MISSING)
        else:
            value = getattr(value, part, _MISSING)
        if value is _MISSING:
            return _MISSING
    return value


def matches_term(record: Any, fields: Sequence[str], term: Optional[str]) -> bool:
    if not term:
        return True
    needle = term.lower()
    for field in fields:
        value = resolve_path(record, field)
        if value is _MISSING or value is None:
            continue
        if needle in str(value).lower():
            return True
    return False


def matches_filters(record: Any, filters: dict) -> bool:
    for field, expected in filters.items():
        if expected is None or expected == "":
            continue
        if resolve_path(record, field) != expected:
            return False
    return True


class Projection:
    """
    Read-only view over a List State.

    Free-text search is a case-insensitive substring test over `search_fields`
    (any field may match). Categorical filters are exact equality; an empty value
    means no constraint.
    """

    def __init__(self, search_fields: Sequence[str] = (), filter_fields: Sequence[str] = ()):
        self.search_fields = tuple(search_fields)
        self.filter_fields = tuple(filter_fields)

    def apply(self, items: Iterable[T], term: Optional[str] = None, **filters: Any) -> List[T]:
        unknown = set(filters) - set(self.filter_fields)
        if unknown:
            raise ValueError(f"Unknown filter(s): {', '.join(sorted(unknown))}")
        return [
            item for item in items
            if matches_term(item, self.search_fields, term) and matches_filters(item, filters)
        ]
