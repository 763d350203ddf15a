from datetime import date, datetime, timezone
from typing import Any, Union

Number = Union[int, float]


def format_number(value: Number) -> str:
    """Render a number the way the screens show it: 1500.0 -> '1500', 12.5 -> '12.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_currency(amount: Number, symbol: str = "৳") -> str:
    return f"{symbol}{format_number(amount or 0)}"


def _from_epoch_seconds(seconds: float) -> str:
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc).date().isoformat()
    except (OverflowError, OSError) as e:
        raise ValueError(f"timestamp {seconds} is out of range") from e


def to_iso_date(value: Any) -> str:
    """
    Normalize a date-ish value to 'yyyy-mm-dd'.

    Strings are trusted as already formatted (only a trailing time part is cut off),
    datetimes/dates are formatted, epoch milliseconds are converted in UTC.
    Empty values become ''.
    """
    if value is None or value == "":
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (int, float)):
        return _from_epoch_seconds(value / 1000)
    if isinstance(value, dict) and "seconds" in value:
        # Firestore-style timestamp payloads
        return _from_epoch_seconds(value["seconds"])
    text = str(value)
    return text.split("T", 1)[0]
