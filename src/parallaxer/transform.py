"""Transform: one step in a composed progress-mapping chain.

A Transform pairs an interval with a position on it. Three composition
operators each preserve exactly one aspect of the receiver:

- rescale(interval):    position preserved, interval (and domain) replaced
- reshape(curve):       interval preserved, position reshaped by the curve
- refocus(subinterval): materialized value preserved, position re-anchored

``materialize()`` converts a transform back to a value on its interval.
Operators never mutate the receiver and never clamp unless asked to with
``Curve.clamp_to_unit_interval()``.

Example (refocus on [2, 4], then rescale to [0, 100]):

    [0           4]   interval          [2     4]   subinterval
     0   (1)  2  3  4   value 1     ->    -0.5      position
                                     ->  -50         value on [0, 100]
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from .curves import Curve
from .interval import Interval

V = TypeVar("V")
W = TypeVar("W")


@dataclass(frozen=True)
class Transform(Generic[V]):
    """Immutable (interval, position) pair.

    Attributes:
        interval: Interval the position refers to
        position: Position on ``interval``; 0 is its start, 1 its end, and
            values outside [0, 1] lie before the start or past the end
    """
    interval: Interval[V]
    position: float

    @classmethod
    def from_value(cls, interval: Interval[V], value: V) -> "Transform[V]":
        """Transform whose position refers to ``value`` on ``interval``."""
        return cls(interval, interval.unit_position(value))

    def materialize(self) -> V:
        """Value on ``interval`` at ``position``."""
        return self.interval.value_at_unit_position(self.position)

    def rescale(self, interval: Interval[W]) -> "Transform[W]":
        """Relate the receiver's progress to ``interval``.

        The position is unchanged; the materialized value becomes the value at
        that position on ``interval``, which may belong to another domain.
        """
        return Transform(interval, self.position)

    def reshape(self, curve: Curve) -> "Transform[V]":
        """Reshape the position with ``curve``; the interval is unchanged."""
        return Transform(self.interval, curve.apply(self.position))

    def refocus(self, subinterval: Interval[V]) -> "Transform[V]":
        """Re-anchor onto ``subinterval`` while preserving the materialized value.

        ``subinterval`` need not lie within ``interval``; supersets and disjoint
        ranges produce extrapolated positions.
        """
        value = self.materialize()
        return Transform(subinterval, subinterval.unit_position(value))

    def __repr__(self) -> str:
        return (
            f"Transform(interval={self.interval!r}, position={self.position!r}, "
            f"value={self.materialize()!r})"
        )
