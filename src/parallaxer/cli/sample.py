"""Sample command: tabulate a chain over a range of inputs."""

import logging
from pathlib import Path
from typing import Optional

import typer

from ..constants import DEFAULT_SAMPLE_POINTS
from ..sampling import sample_chain
from ..utils.text import default_output_path
from .config import load_chain

logger = logging.getLogger(__name__)


def sample_command(
    name: str = typer.Argument(..., help="Chain name"),
    start: Optional[float] = typer.Option(None, "--start", help="First input (default: chain start)"),
    stop: Optional[float] = typer.Option(None, "--stop", help="Last input (default: chain end)"),
    points: int = typer.Option(DEFAULT_SAMPLE_POINTS, "--points", "-n", help="Number of evenly spaced inputs"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Chain file (default: pyproject.toml)"),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output .csv or .parquet file (defaults to <name>.csv)",
    ),
    show: bool = typer.Option(False, "--show", help="Print the table"),
):
    """Evaluate a chain over evenly spaced inputs and write the table."""
    try:
        chain = load_chain(name, file)
    except KeyError as e:
        typer.echo(f"Error: {e.args[0]}", err=True)
        raise typer.Exit(1)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    start = chain.over.start if start is None else start
    stop = chain.over.end if stop is None else stop

    output_path = Path(output) if output else default_output_path(name, ".csv")
    if output is None:
        typer.echo(f"[info]Using default output path {output_path.name} (set --output to override)")
    if output_path.suffix not in (".csv", ".parquet"):
        typer.echo(f"Error: unsupported output format '{output_path.suffix}' (use .csv or .parquet)", err=True)
        raise typer.Exit(1)

    try:
        table = sample_chain(chain, start, stop, points)
    except (TypeError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if output_path.suffix == ".parquet":
        table.write_parquet(output_path)
    else:
        table.write_csv(output_path)
    logger.info(f"Wrote {table.height} rows to {output_path}")

    typer.echo(f"✓ Sampled chain '{name}' at {table.height} inputs in [{start}, {stop}]")
    typer.echo(f"  Chain  : {chain.describe()}")
    typer.echo(f"  Output : {output_path}")
    if show:
        typer.echo(str(table))
