"""Real scalar domain (int, float and numpy real scalars)."""

import numbers
from dataclasses import dataclass

from .base import domain_for


@dataclass(frozen=True)
class ScalarDomain:
    """Linear interpolation over real numbers.

    Values are converted to float, so integer intervals produce float values.
    """

    def unit_position(self, value: float, start: float, end: float) -> float:
        """(value - start) / (end - start)."""
        start = float(start)
        return (float(value) - start) / (float(end) - start)

    def value_at_unit_position(self, position: float, start: float, end: float) -> float:
        """start * (1 - p) + end * p, exact at p = 0 and p = 1."""
        position = float(position)
        return float(start) * (1.0 - position) + float(end) * position


SCALAR = ScalarDomain()


@domain_for.register(numbers.Real)
def _scalar_domain(value) -> ScalarDomain:
    return SCALAR


@domain_for.register(bool)
def _reject_bool(value):
    # bool is an int subclass but has no meaningful interpolation
    raise TypeError("Parallax intervals require numeric values, got bool")
