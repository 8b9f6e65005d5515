"""Tabulate a chain over evenly spaced scalar inputs."""

import numbers
from typing import Dict, List

import numpy as np
import polars as pl

from .chain import Chain
from .constants import DEFAULT_SAMPLE_POINTS, INPUT_COL, POSITION_COL_PREFIX, VALUE_COL
from .domains import Point, ScalarDomain


def sample_inputs(start: float, stop: float, n_points: int = DEFAULT_SAMPLE_POINTS) -> np.ndarray:
    """Evenly spaced inputs from ``start`` to ``stop`` inclusive."""
    if n_points < 2:
        raise ValueError(f"n_points must be at least 2, got {n_points}")
    return np.linspace(start, stop, n_points)


def sample_chain(
    chain: Chain,
    start: float,
    stop: float,
    n_points: int = DEFAULT_SAMPLE_POINTS,
) -> pl.DataFrame:
    """Evaluate ``chain`` over a grid of inputs.

    Args:
        chain: Chain whose initial interval is scalar
        start: First input
        stop: Last input
        n_points: Number of evenly spaced inputs

    Returns:
        DataFrame with one row per input: ``input``, ``position_<k>`` for the
        bound transform (k=0) and after each step, and ``value`` (or
        ``value_x``/``value_y`` for point outputs)

    Raises:
        TypeError: If the chain is not over scalars or its output cannot be tabulated
    """
    if not isinstance(chain.over.domain, ScalarDomain):
        raise TypeError(f"Sampling requires a scalar input interval, got {chain.over!r}")

    inputs = sample_inputs(start, stop, n_points)
    columns: Dict[str, List[float]] = {INPUT_COL: inputs.tolist()}
    for k in range(len(chain.steps) + 1):
        columns[f"{POSITION_COL_PREFIX}{k}"] = []
    values: List = []

    for x in inputs:
        trace = chain.trace(float(x))
        for k, transform in enumerate(trace):
            columns[f"{POSITION_COL_PREFIX}{k}"].append(transform.position)
        values.append(trace[-1].materialize())

    if all(isinstance(v, Point) for v in values):
        columns[f"{VALUE_COL}_x"] = [v.x for v in values]
        columns[f"{VALUE_COL}_y"] = [v.y for v in values]
    elif all(isinstance(v, numbers.Real) for v in values):
        columns[VALUE_COL] = [float(v) for v in values]
    else:
        raise TypeError(
            f"Cannot tabulate chain output of type {type(values[0]).__name__}"
        )

    return pl.DataFrame(columns)
