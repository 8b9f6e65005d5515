"""Curves reshape a position before it is materialized.

A curve is a pure function ``position -> position``. The set of curves is
closed (see CurveKind) with a ``custom`` escape hatch holding any callable.
Curves are evaluated for every real position, including positions outside
[0, 1]; only ``clamp_to_unit_interval`` bounds its output.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union


class CurveKind(str, Enum):
    """Variants of Curve."""
    LINEAR = "linear"
    EASE_IN_OUT = "ease_in_out"
    CLAMP_TO_UNIT_INTERVAL = "clamp_to_unit_interval"
    OSCILLATE = "oscillate"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Curve:
    """Immutable position-reshaping function.

    Use the named constructors rather than building instances directly:

        >>> Curve.clamp_to_unit_interval()(1.5)
        1.0
        >>> Curve.oscillate(2)(0.25)
        1.0

    Attributes:
        kind: Which curve this is
        number_of_times: Full oscillations across [0, 1] (OSCILLATE only)
        function: Caller-supplied function (CUSTOM only)
    """
    kind: CurveKind
    number_of_times: Optional[float] = None
    function: Optional[Callable[[float], float]] = None

    def __post_init__(self):
        """Validate variant payloads."""
        object.__setattr__(self, "kind", CurveKind(self.kind))

        if self.kind is CurveKind.OSCILLATE:
            if self.number_of_times is None:
                raise ValueError("oscillate curve requires number_of_times")
            object.__setattr__(self, "number_of_times", float(self.number_of_times))
        elif self.number_of_times is not None:
            raise ValueError(f"number_of_times only applies to oscillate, not {self.kind.value}")

        if self.kind is CurveKind.CUSTOM:
            if not callable(self.function):
                raise TypeError("custom curve requires a callable function")
        elif self.function is not None:
            raise ValueError(f"function only applies to custom, not {self.kind.value}")

    @classmethod
    def linear(cls) -> "Curve":
        """Position is unchanged."""
        return cls(CurveKind.LINEAR)

    @classmethod
    def ease_in_out(cls) -> "Curve":
        """Slow at both ends of the unit interval; periodic outside it."""
        return cls(CurveKind.EASE_IN_OUT)

    @classmethod
    def clamp_to_unit_interval(cls) -> "Curve":
        """Position is clamped to [0, 1]."""
        return cls(CurveKind.CLAMP_TO_UNIT_INTERVAL)

    @classmethod
    def oscillate(cls, number_of_times: float) -> "Curve":
        """Position oscillates between 0 and 1, ``number_of_times`` times over [0, 1]."""
        return cls(CurveKind.OSCILLATE, number_of_times=number_of_times)

    @classmethod
    def custom(cls, function: Callable[[float], float]) -> "Curve":
        """Position is reshaped by ``function``; its range is not checked."""
        return cls(CurveKind.CUSTOM, function=function)

    def apply(self, position: float) -> float:
        """Reshape ``position``."""
        if self.kind is CurveKind.LINEAR:
            return position
        if self.kind is CurveKind.EASE_IN_OUT:
            return 0.5 * (1.0 - math.cos(position * math.pi))
        if self.kind is CurveKind.CLAMP_TO_UNIT_INTERVAL:
            return min(1.0, max(0.0, position))
        if self.kind is CurveKind.OSCILLATE:
            return 0.5 * (1.0 - math.cos(position * 2.0 * self.number_of_times * math.pi))
        return self.function(position)

    def __call__(self, position: float) -> float:
        return self.apply(position)

    def to_config(self) -> Union[str, Dict[str, Any]]:
        """Serialize to a config value.

        Returns:
            The curve name, or ``{"curve": "oscillate", "times": n}``

        Raises:
            ValueError: For custom curves, which hold arbitrary code
        """
        if self.kind is CurveKind.CUSTOM:
            raise ValueError("custom curves cannot be serialized")
        if self.kind is CurveKind.OSCILLATE:
            return {"curve": self.kind.value, "times": self.number_of_times}
        return self.kind.value

    @classmethod
    def from_config(cls, value: Union[str, Dict[str, Any]]) -> "Curve":
        """Inverse of :meth:`to_config`.

        Accepts a curve name (``"ease_in_out"``), ``"oscillate:2"``, or a
        mapping with ``curve`` and optional ``times`` keys.
        """
        if isinstance(value, str):
            name, _, times = value.partition(":")
            payload: Dict[str, Any] = {"curve": name}
            if times:
                payload["times"] = float(times)
        elif isinstance(value, dict):
            payload = value
        else:
            raise ValueError(f"Curve config must be a name or mapping, got {type(value).__name__}")

        try:
            kind = CurveKind(payload.get("curve"))
        except ValueError:
            known = [k.value for k in CurveKind if k is not CurveKind.CUSTOM]
            raise ValueError(f"Unknown curve {payload.get('curve')!r}. Available: {known}") from None

        if kind is CurveKind.CUSTOM:
            raise ValueError("custom curves cannot be loaded from config")
        if kind is CurveKind.OSCILLATE:
            if "times" not in payload:
                raise ValueError("oscillate curve requires 'times'")
            return cls.oscillate(payload["times"])
        return cls(kind)

    def __repr__(self) -> str:
        if self.kind is CurveKind.OSCILLATE:
            return f"Curve.oscillate({self.number_of_times:g})"
        if self.kind is CurveKind.CUSTOM:
            name = getattr(self.function, "__name__", "function")
            return f"Curve.custom({name})"
        return f"Curve.{self.kind.value}()"
