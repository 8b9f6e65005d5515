"""Declarative transform chains.

A Chain is pure data: an initial interval plus an ordered tuple of steps
(rescale, reshape, refocus). It evaluates a raw value by binding it over the
initial interval and applying each step in turn, and it round-trips through
plain config values so chains can be declared in TOML:

    [tool.parallaxer.chain.header]
    over = [0, 4]
    steps = [
      { op = "refocus", interval = [2, 4] },
      { op = "reshape", curve = "clamp_to_unit_interval" },
      { op = "rescale", interval = [0, 100] },
    ]

Point intervals are written as ``[[x, y], [x, y]]``.
"""

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .curves import Curve
from .domains import Point, PointDomain, ScalarDomain
from .errors import ChainConfigError
from .interval import Interval
from .transform import Transform


class Operation(str, Enum):
    """Composition operators available as chain steps."""
    RESCALE = "rescale"
    RESHAPE = "reshape"
    REFOCUS = "refocus"


@dataclass(frozen=True)
class ChainStep:
    """One composition step.

    Attributes:
        op: Operator to apply
        interval: Target interval (rescale) or subinterval (refocus)
        curve: Curve to apply (reshape)
    """
    op: Operation
    interval: Optional[Interval] = None
    curve: Optional[Curve] = None

    def __post_init__(self):
        """Validate that the payload matches the operator."""
        object.__setattr__(self, "op", Operation(self.op))

        if self.op is Operation.RESHAPE:
            if self.curve is None or self.interval is not None:
                raise ValueError("reshape step requires a curve and no interval")
        elif self.interval is None or self.curve is not None:
            raise ValueError(f"{self.op.value} step requires an interval and no curve")

    def apply(self, transform: Transform) -> Transform:
        """Apply this step to ``transform``."""
        if self.op is Operation.RESCALE:
            return transform.rescale(self.interval)
        if self.op is Operation.REFOCUS:
            return transform.refocus(self.interval)
        return transform.reshape(self.curve)

    def to_config(self) -> Dict[str, Any]:
        """Export as a serializable mapping."""
        if self.op is Operation.RESHAPE:
            curve = self.curve.to_config()
            payload = curve if isinstance(curve, dict) else {"curve": curve}
            return {"op": self.op.value, **payload}
        return {"op": self.op.value, "interval": interval_to_config(self.interval)}

    @classmethod
    def from_config(cls, data: Mapping[str, Any]) -> "ChainStep":
        """Inverse of :meth:`to_config`."""
        if not isinstance(data, Mapping):
            raise ValueError(f"Step must be a table, got {data!r}")
        try:
            op = Operation(data.get("op"))
        except ValueError:
            known = [o.value for o in Operation]
            raise ValueError(f"Unknown step op {data.get('op')!r}. Available: {known}") from None

        if op is Operation.RESHAPE:
            curve_data = {k: data[k] for k in ("curve", "times") if k in data}
            return cls(op, curve=Curve.from_config(curve_data))
        if "interval" not in data:
            raise ValueError(f"{op.value} step requires 'interval'")
        return cls(op, interval=interval_from_config(data["interval"]))

    def __str__(self) -> str:
        if self.op is Operation.RESHAPE:
            return f"{self.op.value}({self.curve!r})"
        return f"{self.op.value}([{self.interval.start}, {self.interval.end}])"


@dataclass(frozen=True)
class Chain:
    """Immutable chain: initial interval plus ordered composition steps.

    Chains are built fluently; each call returns a new chain:

        >>> chain = (Chain(Interval(0, 4))
        ...          .refocus(Interval(2, 4))
        ...          .reshape(Curve.clamp_to_unit_interval())
        ...          .rescale(Interval(0, 100)))
        >>> [chain.evaluate(v) for v in [1, 2, 3, 4, 5]]
        [0.0, 0.0, 50.0, 100.0, 100.0]

    Attributes:
        over: Interval raw values are bound over
        steps: Steps applied in order
        name: Optional identifier (the config table name)
    """
    over: Interval
    steps: Tuple[ChainStep, ...] = ()
    name: str = ""

    def __post_init__(self):
        """Freeze steps and check refocus steps stay in the current domain."""
        object.__setattr__(self, "steps", tuple(self.steps))

        domain = self.over.domain
        for i, step in enumerate(self.steps):
            if step.op is Operation.REFOCUS and step.interval.domain != domain:
                raise ValueError(
                    f"Step {i} refocuses onto {step.interval!r}, which is not in the "
                    f"current domain ({type(domain).__name__}); use rescale to change domains"
                )
            if step.op is Operation.RESCALE:
                domain = step.interval.domain

    def then(self, step: ChainStep) -> "Chain":
        """New chain with ``step`` appended."""
        return Chain(self.over, self.steps + (step,), self.name)

    def rescale(self, interval: Interval) -> "Chain":
        return self.then(ChainStep(Operation.RESCALE, interval=interval))

    def reshape(self, curve: Curve) -> "Chain":
        return self.then(ChainStep(Operation.RESHAPE, curve=curve))

    def refocus(self, subinterval: Interval) -> "Chain":
        return self.then(ChainStep(Operation.REFOCUS, interval=subinterval))

    def trace(self, value: Any) -> List[Transform]:
        """Every intermediate transform, starting with the bound value."""
        transform = Transform.from_value(self.over, value)
        transforms = [transform]
        for step in self.steps:
            transform = step.apply(transform)
            transforms.append(transform)
        return transforms

    def transform(self, value: Any) -> Transform:
        """Final transform for ``value``."""
        return self.trace(value)[-1]

    def evaluate(self, value: Any) -> Any:
        """Materialized output for ``value``."""
        return self.transform(value).materialize()

    @property
    def output_interval(self) -> Interval:
        """Interval of the final transform (fixes the output domain)."""
        for step in reversed(self.steps):
            if step.op is not Operation.RESHAPE:
                return step.interval
        return self.over

    def describe(self) -> str:
        """One-line human readable summary."""
        parts = [f"[{self.over.start}, {self.over.end}]"] + [str(step) for step in self.steps]
        return " -> ".join(parts)

    def to_config(self) -> Dict[str, Any]:
        """Export as a serializable mapping (name not included)."""
        return {
            "over": interval_to_config(self.over),
            "steps": [step.to_config() for step in self.steps],
        }

    @classmethod
    def from_config(cls, data: Mapping[str, Any], name: str = "") -> "Chain":
        """Build a chain from a config mapping.

        Raises:
            ChainConfigError: If the mapping is malformed
        """
        label = f"'{name}'" if name else "definition"
        if not isinstance(data, Mapping):
            raise ChainConfigError(f"Chain {label} must be a table, got {type(data).__name__}")
        if "over" not in data:
            raise ChainConfigError(f"Chain {label} is missing 'over'")

        try:
            over = interval_from_config(data["over"])
            steps = [ChainStep.from_config(step) for step in data.get("steps", [])]
            return cls(over, tuple(steps), name)
        except (TypeError, ValueError) as e:
            raise ChainConfigError(f"Invalid chain {label}: {e}") from e


def interval_to_config(interval: Interval) -> List[Any]:
    """Export an interval as ``[start, end]`` (points as ``[x, y]`` pairs)."""
    if isinstance(interval.domain, PointDomain):
        return [list(interval.start.as_tuple()), list(interval.end.as_tuple())]
    if isinstance(interval.domain, ScalarDomain):
        return [interval.start, interval.end]
    raise ValueError(f"Cannot serialize interval over {type(interval.domain).__name__}")


def interval_from_config(data: Sequence[Any]) -> Interval:
    """Inverse of :func:`interval_to_config`."""
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence) or len(data) != 2:
        raise ValueError(f"Interval must be a [start, end] pair, got {data!r}")
    return Interval(*(_bound_from_config(bound) for bound in data))


def _bound_from_config(bound: Any) -> Any:
    if isinstance(bound, numbers.Real) and not isinstance(bound, bool):
        return bound
    if isinstance(bound, Sequence) and not isinstance(bound, (str, bytes)):
        return Point.from_sequence(bound)
    raise ValueError(f"Interval bound must be a number or [x, y] pair, got {bound!r}")


def parse_interval(text: str) -> Interval:
    """Parse ``"start:end"``; points are written ``"x,y:x,y"``.

    Raises:
        ChainConfigError: If the text is malformed
    """
    parts = text.split(":")
    if len(parts) != 2:
        raise ChainConfigError(f"Interval must look like 'start:end', got {text!r}")
    try:
        bounds = [
            Point.from_sequence([float(c) for c in part.split(",")]) if "," in part else float(part)
            for part in parts
        ]
        return Interval(*bounds)
    except (TypeError, ValueError) as e:
        raise ChainConfigError(f"Invalid interval {text!r}: {e}") from e


def parse_step(text: str) -> ChainStep:
    """Parse a CLI step such as ``refocus=2:4``, ``reshape=oscillate:2`` or ``rescale=0:100``.

    Raises:
        ChainConfigError: If the text is malformed
    """
    op, sep, argument = text.partition("=")
    if not sep or not argument:
        raise ChainConfigError(f"Step must look like 'op=argument', got {text!r}")
    try:
        operation = Operation(op.strip())
    except ValueError:
        known = [o.value for o in Operation]
        raise ChainConfigError(f"Unknown step op {op!r}. Available: {known}") from None

    if operation is Operation.RESHAPE:
        try:
            return ChainStep(operation, curve=Curve.from_config(argument.strip()))
        except (TypeError, ValueError) as e:
            raise ChainConfigError(f"Invalid curve in step {text!r}: {e}") from e
    return ChainStep(operation, interval=parse_interval(argument.strip()))
