"""Demo command: declare a handful of parameters, parse argv, print them."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from typer.models import ArgumentInfo, OptionInfo

from ..errors import ParamError
from ..registry import ParameterRegistry
from ..storage import ArrayBuffer, Ref, StringBuffer
from ..driver import parse_args
from .config import default_args

logger = logging.getLogger(__name__)

USAGE = "usage: modparams demo [test=int] [btest[=bool]] [latest=int array] [strtest=string]"


def _normalize_option_value(value):
    """Support calling the Typer command functions directly in tests."""
    return value.default if isinstance(value, (OptionInfo, ArgumentInfo)) else value


def build_demo_registry():
    """Declare the demo parameters.

    Returns:
        Tuple of (registry, storage dict keyed by parameter name)
    """
    storage = {
        "test": Ref(0),
        "btest": Ref(True),
        "latest_num": Ref(0),
        "strtest": StringBuffer(10),
    }
    storage["latest"] = ArrayBuffer("long", 10, count=storage["latest_num"])

    registry = ParameterRegistry(10)
    registry.declare_scalar("test", "int", storage["test"])
    registry.declare_bool("btest", storage["btest"])
    registry.declare_array("latest", storage["latest"])
    registry.declare_string("strtest", storage["strtest"])
    return registry, storage


def demo_command(
    args: Optional[List[str]] = typer.Argument(None, help="Parameters as name or name=value"),
    project_root: Optional[str] = typer.Option(
        None, "--project-root", help="Directory holding pyproject.toml defaults (default: cwd)"
    ),
    no_defaults: bool = typer.Option(False, "--no-defaults", help="Ignore [tool.modparams] defaults"),
):
    """Parse demo parameters and print their values."""
    args = _normalize_option_value(args) or []
    project_root = _normalize_option_value(project_root)
    no_defaults = _normalize_option_value(no_defaults)

    argv: List[str] = []
    if not no_defaults:
        try:
            argv.extend(default_args(Path(project_root) if project_root else None))
        except ValueError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1)
        if argv:
            logger.info(f"Using {len(argv)} default argument(s) from pyproject.toml")
    argv.extend(args)

    registry, _ = build_demo_registry()
    try:
        parse_args(registry, argv)
    except ParamError as exc:
        typer.echo(f"Error: {exc}", err=True)
        typer.echo(USAGE, err=True)
        raise typer.Exit(1)

    for name, text in registry.report_all():
        typer.echo(f"{name} = {text}")
