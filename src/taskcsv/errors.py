# SPDX-License-Identifier: MIT


class TaskFormatError(ValueError):
    """Raised when user supplied task fields cannot be parsed."""


class TaskFileError(ValueError):
    """Raised when a line of the task file cannot be parsed."""

    def __init__(self, path: str, line_number: int, reason: str) -> None:
        super().__init__(f"{path}:{line_number}: {reason}")
        self.path = path
        self.line_number = line_number
        self.reason = reason
