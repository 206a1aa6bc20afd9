# SPDX-License-Identifier: MIT

import pendulum
import pytest

from taskcsv.errors import TaskFormatError
from taskcsv.time import (
    completed_from_str,
    completed_to_str,
    due_date_from_str,
    due_date_to_str,
)


def test_due_date_parses_minute_precision() -> None:
    due_date = due_date_from_str("2024-01-01 10:00")
    assert due_date == pendulum.datetime(2024, 1, 1, 10, 0)
    assert due_date_to_str(due_date) == "2024-01-01 10:00"


@pytest.mark.parametrize(
    "text",
    [
        "2024-01-01",
        "2024-01-01T10:00",
        "tomorrow",
        "",
        "2024-13-01 10:00",
        "2024-1-1 9:00",
        "2024-01-01 9:00",
        "2024-01-01 10:00 ",
    ],
)
def test_due_date_rejects_other_formats(text: str) -> None:
    with pytest.raises(TaskFormatError):
        due_date_from_str(text)


def test_format_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="YYYY-MM-DD HH:mm"):
        due_date_from_str("soon")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("true", True),
        ("TRUE", True),
        ("True", True),
        ("false", False),
        ("yes", False),
        ("1", False),
        ("", False),
        (None, False),
    ],
)
def test_completed_parsing_is_lenient(text: str | None, expected: bool) -> None:
    assert completed_from_str(text) is expected


def test_completed_to_str() -> None:
    assert completed_to_str(True) == "true"
    assert completed_to_str(False) == "false"
