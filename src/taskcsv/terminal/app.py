# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.text import Text

from taskcsv.errors import TaskFileError, TaskFormatError
from taskcsv.logging_setup import setup_logging
from taskcsv.repository.configuration import ConfigurationRepository
from taskcsv.repository.task_file import TaskFileRepository
from taskcsv.service.store import TaskStore
from taskcsv.terminal.custom_typer import (
    InvalidCommandTyperGroup,
    print_invalid_command,
)
from taskcsv.view import state as view_state
from taskcsv.view.task import tasks_table_view, tasks_view

err_console = Console(stderr=True)

DUE_DATE_HELP = "valid input: YYYY-MM-DD HH:mm"

# Dash-prefixed values such as negative ids are read as arguments
POSITIONAL_CONTEXT_SETTINGS = {"ignore_unknown_options": True}

app = typer.Typer(
    cls=InvalidCommandTyperGroup,
    help="taskcsv - a personal task list kept in a flat csv file",
    no_args_is_help=False,
    add_completion=False,
    context_settings={"ignore_unknown_options": True},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    file: Annotated[
        Optional[Path],
        typer.Option(
            "--file",
            "-f",
            envvar="TASKCSV_FILE",
            help="Task file to read and rewrite (default: tasks.csv)",
        ),
    ] = None,
    quoted: Annotated[
        Optional[bool],
        typer.Option(
            "--quoted/--plain",
            help="Quote fields so titles and descriptions may contain commas",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output"),
    ] = False,
) -> None:
    """
    taskcsv - a personal task list kept in a flat csv file

    Loads the task file before every command; mutating commands rewrite it.
    """
    config = ConfigurationRepository().get_config()
    setup_logging(logging.DEBUG if verbose else config["log_level"])
    view_state.set_show_table(config["show_table"])

    repository = TaskFileRepository(
        file if file is not None else Path(config["tasks_path"]),
        quoted=quoted if quoted is not None else config["quoted_fields"],
    )
    try:
        ctx.obj = TaskStore.load(repository)
    except TaskFileError as e:
        err_console.print(Text(f"error: {e}", style="red"))
        raise typer.Exit(code=1)

    if ctx.invoked_subcommand is None:
        print_invalid_command()


@app.command(
    "create", no_args_is_help=False, context_settings=POSITIONAL_CONTEXT_SETTINGS
)
def create(
    ctx: typer.Context,
    title: str,
    description: str,
    due_date: Annotated[str, typer.Argument(help=DUE_DATE_HELP)],
) -> None:
    store: TaskStore = ctx.obj
    try:
        store.create_task(title, description, due_date)
    except TaskFormatError as e:
        raise typer.BadParameter(str(e), param_hint="'DUE_DATE'")


@app.command(
    "update", no_args_is_help=False, context_settings=POSITIONAL_CONTEXT_SETTINGS
)
def update(
    ctx: typer.Context,
    id: int,
    title: str,
    description: str,
    due_date: Annotated[str, typer.Argument(help=DUE_DATE_HELP)],
    completed: Annotated[
        str, typer.Argument(help="'true' (any case) marks complete, anything else not")
    ],
) -> None:
    store: TaskStore = ctx.obj
    try:
        store.update_task(id, title, description, due_date, completed)
    except TaskFormatError as e:
        raise typer.BadParameter(str(e), param_hint="'DUE_DATE'")


@app.command("list")
def list_tasks(
    ctx: typer.Context,
    table: Annotated[
        Optional[bool],
        typer.Option("--table/--no-table", help="Render the tasks as a table"),
    ] = None,
) -> None:
    store: TaskStore = ctx.obj
    tasks = store.get_all_tasks()

    show_table = table if table is not None else view_state.get_show_table()
    if show_table:
        tasks_table_view(tasks)
    else:
        tasks_view(tasks)


@app.command(
    "delete", no_args_is_help=False, context_settings=POSITIONAL_CONTEXT_SETTINGS
)
def delete(ctx: typer.Context, id: int) -> None:
    store: TaskStore = ctx.obj
    store.delete_task(id)


def run() -> None:
    app()
