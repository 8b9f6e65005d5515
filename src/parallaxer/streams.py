"""Reactive bindings: drive transform chains from observable streams.

Values, intervals, curves and subintervals may all change over time. Every
join between two streams uses combine-latest: whenever either side emits,
the operator recomputes with the latest value of both. (Pairing by index, as
zip does, would combine snapshots taken at different times.)

    offsets = Subject()
    opacity = streams.bind(offsets, Interval(0.0, 600.0)).pipe(
        streams.refocus(Interval(0.0, 300.0)),
        streams.reshape(Curve.clamp_to_unit_interval()),
        streams.rescale(Interval(1.0, 0.0)),
        streams.materialize(),
    )

Auxiliary arguments accept either an Observable or a plain value, which is
treated as a stream emitting that single value. Interval construction
failures terminate the stream with ZeroLengthIntervalError through
``on_error``; no values follow.
"""

import logging
from typing import Any, Callable, TypeVar, Union

import reactivex as rx
from reactivex import Observable
from reactivex import operators as ops

from .chain import Chain
from .curves import Curve
from .interval import Interval
from .transform import Transform

logger = logging.getLogger(__name__)

T = TypeVar("T")

Operator = Callable[[Observable], Observable]


def _as_observable(value: Union[Observable, T]) -> Observable:
    return value if isinstance(value, Observable) else rx.just(value)


def _log_terminal_error(error: Exception) -> None:
    logger.debug(f"Parallax stream terminated: {error}")


def interval(start: Union[Observable, Any], end: Union[Observable, Any]) -> Observable:
    """Stream of intervals built from the latest ``start`` and ``end``.

    Raises (via on_error):
        ZeroLengthIntervalError: When the latest bounds are equal
    """
    return rx.combine_latest(_as_observable(start), _as_observable(end)).pipe(
        ops.map(lambda bounds: Interval(bounds[0], bounds[1])),
        ops.do_action(on_error=_log_terminal_error),
    )


def bind(values: Observable, intervals: Union[Observable, Interval]) -> Observable:
    """Bind a stream of raw values over a stream of intervals.

    Emits a Transform for the latest (interval, value) pair whenever either
    stream emits.
    """
    # Auxiliary source first: plain values subscribed ahead of the main stream
    return rx.combine_latest(_as_observable(intervals), values).pipe(
        ops.map(lambda latest: Transform.from_value(latest[0], latest[1])),
    )


def rescale(intervals: Union[Observable, Interval]) -> Operator:
    """Operator: rescale each transform to the latest interval (position preserved)."""
    aux = _as_observable(intervals)

    def _rescale(source: Observable) -> Observable:
        return rx.combine_latest(aux, source).pipe(
            ops.map(lambda latest: latest[1].rescale(latest[0])),
        )

    return _rescale


def reshape(curves: Union[Observable, Curve]) -> Operator:
    """Operator: reshape each transform's position with the latest curve."""
    aux = _as_observable(curves)

    def _reshape(source: Observable) -> Observable:
        return rx.combine_latest(aux, source).pipe(
            ops.map(lambda latest: latest[1].reshape(latest[0])),
        )

    return _reshape


def refocus(subintervals: Union[Observable, Interval]) -> Operator:
    """Operator: refocus each transform onto the latest subinterval (value preserved)."""
    aux = _as_observable(subintervals)

    def _refocus(source: Observable) -> Observable:
        return rx.combine_latest(aux, source).pipe(
            ops.map(lambda latest: latest[1].refocus(latest[0])),
        )

    return _refocus


def materialize() -> Operator:
    """Operator: convert transforms to their materialized values."""
    return ops.map(lambda transform: transform.materialize())


def apply_chain(chain: Chain) -> Operator:
    """Operator: evaluate a declarative chain for every raw value."""
    return ops.map(chain.evaluate)
