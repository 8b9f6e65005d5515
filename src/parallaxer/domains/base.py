"""Parallaxable capability: how a value domain maps to the unit interval.

A domain describes two mutually inverse affine maps between values on the
line through ``start`` and ``end`` and positions on the unit interval, where
position 0 refers to ``start`` and position 1 refers to ``end``. Positions
outside [0, 1] extrapolate beyond the boundaries.

Domains are resolved from a value's type with :func:`domain_for`, which is a
``functools.singledispatch`` function. Consumers add support for their own
value types (colors, transforms, ...) with :func:`register_domain`.
"""

from functools import singledispatch
from typing import Any, Protocol, Type


class Parallaxable(Protocol):
    """Protocol for value domains that can take part in a parallax chain."""

    def unit_position(self, value: Any, start: Any, end: Any) -> float:
        """Convert ``value`` to a position relative to [start, end].

        Args:
            value: Value in the domain
            start: Interval start (position 0)
            end: Interval end (position 1)

        Returns:
            Position along the interval, not bounded to [0, 1]
        """
        ...

    def value_at_unit_position(self, position: float, start: Any, end: Any) -> Any:
        """Convert ``position`` back to a value relative to [start, end].

        Args:
            position: Position along the interval, may be outside [0, 1]
            start: Interval start (position 0)
            end: Interval end (position 1)

        Returns:
            Value in the domain
        """
        ...


@singledispatch
def domain_for(value: Any) -> Parallaxable:
    """Resolve the domain for ``value`` from its type.

    Raises:
        TypeError: If no domain is registered for the value's type
    """
    raise TypeError(
        f"No parallax domain registered for {type(value).__name__}; "
        f"use register_domain() or pass domain= explicitly"
    )


def register_domain(value_type: Type, domain: Parallaxable) -> None:
    """Register ``domain`` for values of ``value_type`` (and its subclasses).

    Example:
        >>> register_domain(Color, ColorDomain())
        >>> Interval(Color.black(), Color.white()).value_at_unit_position(0.5)
    """
    if not (hasattr(domain, "unit_position") and hasattr(domain, "value_at_unit_position")):
        raise TypeError(
            f"Domain for {value_type.__name__} must implement Parallaxable protocol "
            f"(unit_position, value_at_unit_position methods)"
        )
    domain_for.register(value_type)(lambda value: domain)
