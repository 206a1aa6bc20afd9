# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum

from taskcsv.errors import TaskFormatError

DUE_DATE_FORMAT = "YYYY-MM-DD HH:mm"
DUE_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}", re.ASCII)


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def due_date_from_str(due_date: str) -> pendulum.DateTime:
    """Parse a `YYYY-MM-DD HH:mm` string; anything else is a TaskFormatError."""
    message = f"Invalid due date '{due_date}', expected format {DUE_DATE_FORMAT}"
    # Fields must be zero padded
    if not DUE_DATE_PATTERN.fullmatch(due_date):
        raise TaskFormatError(message)
    try:
        return pendulum.from_format(due_date, DUE_DATE_FORMAT)
    except ValueError as e:
        raise TaskFormatError(message) from e


def due_date_to_str(due_date: pendulum.DateTime) -> str:
    return due_date.format(DUE_DATE_FORMAT)


def completed_from_str(completed: Optional[str]) -> bool:
    # Lenient: only a case-insensitive "true" is truthy, never an error
    if completed is None:
        return False
    return completed.lower() == "true"


def completed_to_str(completed: bool) -> str:
    return "true" if completed else "false"
