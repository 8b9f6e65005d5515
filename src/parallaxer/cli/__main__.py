"""Parallaxer CLI entry point.

Provides commands for declaring, checking and sampling transform chains.
"""

import logging
import sys

import typer

from .chains import add_command, check_command, list_command
from .sample import sample_command

# Create the main app
app = typer.Typer(
    name="px",
    help="Parallaxer CLI for declaring and sampling transform chains",
    invoke_without_command=True,
)

# Create subcommands
chains_app = typer.Typer(help="Manage named chains in pyproject.toml")

app.add_typer(chains_app, name="chains")

# Register chain commands directly from implementation modules
chains_app.command("list")(list_command)
chains_app.command("check")(check_command)
chains_app.command("add")(add_command)

app.command("sample")(sample_command)


@app.command("version")
def version():
    """Show version information."""
    from .. import __version__
    typer.echo(f"Parallaxer CLI version {__version__}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output")
):
    """Parallaxer CLI for declaring and sampling transform chains."""
    if verbose:
        logging.basicConfig(level=logging.INFO)

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
