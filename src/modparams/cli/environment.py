"""Environment lookup command."""

from typing import List

import typer

from ..environ import getenv_int, getenv_str


def env_command(
    names: List[str] = typer.Argument(..., help="Environment variable names"),
    as_int: bool = typer.Option(False, "--int", help="Convert values to integers (best effort)"),
):
    """Print environment variables, noting those that are unset."""
    for name in names:
        value = getenv_int(name) if as_int else getenv_str(name)
        if value is None:
            typer.echo(f"{name} not found")
        else:
            typer.echo(f"{name} = {value}")
