"""Interval: a bidirectional mapping between a value range and the unit interval.

An interval ``[start, end]`` over a parallaxable domain converts values to
unit positions and back:

    position 0  <->  start
    position 1  <->  end

Positions are never clamped; values before ``start`` or beyond ``end`` map to
negative positions or positions greater than 1. Backward intervals
(``start > end``) are allowed.

Construction is the only place where an interval can fail: equal boundaries
raise ZeroLengthIntervalError. Every other operation is total.
"""

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from .domains import Parallaxable, ScalarDomain, domain_for
from .errors import ZeroLengthIntervalError

V = TypeVar("V")


@dataclass(frozen=True)
class Interval(Generic[V]):
    """Immutable interval ``[start, end]`` with ``start != end``.

    Attributes:
        start: Value at position 0
        end: Value at position 1
        domain: Domain used for conversions (resolved from ``start`` if omitted)

    Example:
        >>> interval = Interval(0, 4)
        >>> interval.unit_position(1)
        0.25
        >>> interval.value_at_unit_position(1.5)
        6.0
    """
    start: V
    end: V
    domain: Optional[Parallaxable] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        """Resolve the domain and reject zero-length intervals."""
        if self.domain is None:
            domain = domain_for(self.start)
            end_domain = domain_for(self.end)
            if end_domain != domain:
                raise TypeError(
                    f"Interval boundaries must share a domain, got "
                    f"{type(self.start).__name__} and {type(self.end).__name__}"
                )
            object.__setattr__(self, "domain", domain)

        if self.start == self.end:
            raise ZeroLengthIntervalError(self.start, self.end)

    @classmethod
    def unit(cls) -> "Interval[float]":
        """The unit interval [0, 1]."""
        return cls(0.0, 1.0)

    @property
    def is_unit(self) -> bool:
        """Whether this is structurally the unit interval [0, 1]."""
        return isinstance(self.domain, ScalarDomain) and self.start == 0 and self.end == 1

    def unit_position(self, value: V) -> float:
        """Position of ``value`` relative to this interval (unbounded)."""
        return self.domain.unit_position(value, self.start, self.end)

    def value_at_unit_position(self, position: float) -> V:
        """Value at ``position`` on this interval (extrapolates outside [0, 1])."""
        return self.domain.value_at_unit_position(position, self.start, self.end)

    def reversed(self) -> "Interval[V]":
        """Same interval traversed from ``end`` to ``start``."""
        return Interval(self.end, self.start, domain=self.domain)

    def __repr__(self) -> str:
        return f"Interval({self.start!r}, {self.end!r})"
