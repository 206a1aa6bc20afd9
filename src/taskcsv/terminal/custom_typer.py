# SPDX-License-Identifier: MIT

from typing import Optional

import click
import typer.core
from rich.console import Console

INVALID_COMMAND_MESSAGE = "Invalid command"


def print_invalid_command(*args: object, **kwargs: object) -> None:
    Console(markup=False, highlight=False).print(INVALID_COMMAND_MESSAGE)


def _invalid_command(cmd_name: str) -> click.Command:
    """A stand-in command that swallows its arguments and reports them as invalid"""
    return click.Command(
        cmd_name,
        callback=print_invalid_command,
        context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
        add_help_option=False,
        hidden=True,
    )


class InvalidCommandTyperGroup(typer.core.TyperGroup):
    """Custom TyperGroup that treats unknown commands as a normal, successful outcome"""

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Override to resolve unknown names to the invalid command"""
        cmd = super().get_command(ctx, cmd_name)
        if cmd is None:
            return _invalid_command(cmd_name)
        return cmd

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return commands in the order they read in the usage line"""
        desired_order = ["create", "update", "list", "delete"]

        result = [cmd_name for cmd_name in desired_order if cmd_name in self.commands]
        for cmd_name in self.commands.keys():
            if cmd_name not in result:
                result.append(cmd_name)

        return result
