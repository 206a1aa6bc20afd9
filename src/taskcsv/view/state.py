"""Per-run view settings held in context variables."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Context variable for rendering the task list as a rich table
# Default is False (plain " | " separated lines)
_show_table_var: ContextVar[bool] = ContextVar("show_table", default=False)


def set_show_table(value: bool) -> None:
    """Set whether the task list should be rendered as a table.

    Args:
        value: True for a table, False for plain lines
    """
    _show_table_var.set(value)


def get_show_table() -> bool:
    return _show_table_var.get()
