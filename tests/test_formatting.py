from datetime import date, datetime

import pytest

from school_admin.core.notifications import Notifier
from school_admin.utils.formatting import format_currency, format_number, to_iso_date


@pytest.mark.parametrize("value,expected", [(1500.0, "1500"), (12.5, "12.5"), (0, "0"), (7, "7")])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_currency():
    assert format_currency(1500.0) == "৳1500"
    assert format_currency(None) == "৳0"
    assert format_currency(99.5, "$") == "$99.5"


def test_to_iso_date():
    assert to_iso_date(date(2024, 3, 5)) == "2024-03-05"
    assert to_iso_date(datetime(2024, 3, 5, 23, 59)) == "2024-03-05"
    assert to_iso_date("2024-03-05T10:00:00Z") == "2024-03-05"
    assert to_iso_date("") == ""


def test_notifier_forwards_and_remembers():
    seen = []
    notifier = Notifier(history_size=2)
    notifier.subscribe(seen.append)

    notifier.success("one")
    notifier.error("two")
    notifier.success("three")

    assert [n.description for n in seen] == ["one", "two", "three"]
    assert [n.description for n in notifier.history] == ["two", "three"]
    assert seen[1].is_error and seen[1].title == "Error"
    assert notifier.last.title == "Success"
