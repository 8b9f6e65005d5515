"""Chain management commands: list, check and add named chains."""

import logging
from pathlib import Path
from typing import List, Optional

import typer

from ..chain import Chain, parse_interval, parse_step
from ..errors import ChainConfigError
from .config import load_chains, read_chain_file, read_pyproject, validate_config, write_chain_config

logger = logging.getLogger(__name__)


def _read_config(file: Optional[Path]):
    try:
        return read_chain_file(file) if file is not None else read_pyproject()
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def list_command(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Chain file (default: pyproject.toml)"),
):
    """List configured chains."""
    config = _read_config(file)

    try:
        chains = load_chains(config)
    except ChainConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not chains:
        typer.echo("No chains configured")
        return

    typer.echo(f"Chains ({len(chains)}):")
    for name, chain in sorted(chains.items()):
        typer.echo(f"  • {name}: {chain.describe()}")


def check_command(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Chain file (default: pyproject.toml)"),
):
    """Validate every configured chain."""
    config = _read_config(file)
    errors = validate_config(config)

    if errors:
        typer.echo(f"✗ {len(errors)} problem(s) found:", err=True)
        for message in errors:
            typer.echo(f"  - {message}", err=True)
        raise typer.Exit(1)

    n_chains = len(config.get("chain", {}))
    typer.echo(f"✓ {n_chains} chain(s) valid")


def add_command(
    name: str = typer.Argument(..., help="Chain name"),
    over: str = typer.Option(..., "--over", help="Initial interval, e.g. 0:600 or 2,2:4,4"),
    steps: Optional[List[str]] = typer.Option(
        None,
        "--step",
        "-s",
        help="Step in order: refocus=A:B, rescale=A:B or reshape=CURVE (repeatable)",
    ),
):
    """Add or replace a chain in pyproject.toml."""
    try:
        chain = Chain(parse_interval(over), tuple(parse_step(s) for s in steps or []), name)
    except (ChainConfigError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    path = write_chain_config(chain)
    logger.info(f"Wrote chain '{name}' to {path}")
    typer.echo(f"✓ Wrote chain '{name}' to {path.name}")
    typer.echo(f"  {chain.describe()}")
