# SPDX-License-Identifier: MIT

import typer
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from taskcsv.color import COMPLETED_TASK_COLOR, DUE_DATE_COLOR, HEADER_COLOR
from taskcsv.model.task import Task
from taskcsv.time import completed_to_str, due_date_to_str

COLUMN_CHARACTER = " | "
COLUMNS = ["ID", "Title", "Description", "Due Date", "Completed"]
COLUMN_HEADER = COLUMN_CHARACTER.join(COLUMNS)


def task_row(task: Task) -> list[str]:
    return [
        str(task["id"]),
        task["title"],
        task["description"],
        due_date_to_str(task["due_date"]),
        completed_to_str(task["completed"]),
    ]


def format_task_line(task: Task) -> str:
    return COLUMN_CHARACTER.join(task_row(task))


def tasks_view(tasks: list[Task]) -> None:
    """Print the header line and one `" | "` separated line per task."""
    # Free text is printed verbatim
    typer.echo(COLUMN_HEADER)
    for task in tasks:
        typer.echo(format_task_line(task))


def tasks_table_view(tasks: list[Task]) -> None:
    tasks_table = Table(box=box.SIMPLE, header_style=f"bold {HEADER_COLOR}")
    for column in COLUMNS:
        tasks_table.add_column(column)

    for task in tasks:
        row = [Text(value) for value in task_row(task)]
        if task["completed"]:
            for cell in row:
                cell.stylize(COMPLETED_TASK_COLOR)
        else:
            row[3].stylize(DUE_DATE_COLOR)
        tasks_table.add_row(*row)

    console = Console()
    console.print(tasks_table)
