"""modparams CLI entry point.

Provides a demo of argument parsing and environment lookups.
"""

import logging
import sys

import typer

from .demo import demo_command
from .environment import env_command

# Create the main app
app = typer.Typer(
    name="modparams",
    help="Typed name=value parameter parsing",
    invoke_without_command=True,
)

# Demo arguments look like options sometimes (e.g. "my-opt"), so pass them through
app.command("demo", context_settings={"ignore_unknown_options": True})(demo_command)
app.command("env")(env_command)


@app.command("version")
def version():
    """Show version information."""
    from .. import __version__
    typer.echo(f"modparams version {__version__}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output")
):
    """Typed name=value parameter parsing."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        typer.echo("\nError: Missing command.", err=True)
        raise typer.Exit(1)


def cli_main():
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("\nAborted", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
