"""Parallax effect trees: push-based fan-out of one seed value.

A root ParallaxEffect converts a seed value into a position over its interval
and hands that position down to nested effects. Each nested effect is attached
under an optional subinterval of the unit interval; the parent's position is
re-expressed relative to that subinterval, optionally clamped, reshaped by the
child's curve, and then used by the child to express a value on its own
interval.

    root = ParallaxEffect(Interval(0.0, 600.0))            # scroll offset
    fade = ParallaxEffect(Interval(1.0, 0.0), on_change=set_opacity)
    root.add_effect(fade, subinterval=Interval(0.0, 0.5))  # first half only
    root.seed(150.0)                                       # opacity 0.5

Propagation is synchronous and depth-first along each root-to-leaf path.
The order in which siblings receive a position is not part of the contract.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

from .curves import Curve
from .domains import ScalarDomain
from .interval import Interval

logger = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass(eq=False)
class ParallaxEffect(Generic[V]):
    """A node in a parallax tree.

    Attributes:
        interval: Interval over which this effect expresses values
        curve: How inherited position is reshaped (not applied to the root's
            own seed position)
        clamped: Whether inherited position is clamped to [0, 1] before the
            curve is applied
        on_change: Called with the expressed value whenever position arrives
    """
    interval: Interval[V]
    curve: Curve = field(default_factory=Curve.linear)
    clamped: bool = False
    on_change: Optional[Callable[[V], None]] = None
    _edges: List[Tuple[Optional[Interval[float]], "ParallaxEffect"]] = field(
        default_factory=list, init=False, repr=False
    )
    _parent: Optional["ParallaxEffect"] = field(default=None, init=False, repr=False)

    def add_effect(
        self,
        effect: "ParallaxEffect",
        subinterval: Optional[Interval[float]] = None,
    ) -> "ParallaxEffect":
        """Nest ``effect`` so it inherits position from this effect.

        Args:
            effect: The nested effect
            subinterval: Portion of the unit interval over which ``effect``
                inherits position; None means the whole unit interval

        Returns:
            ``effect``, for building deeper trees inline

        Raises:
            TypeError: If ``subinterval`` is not a scalar interval
            ValueError: If ``effect`` already has a parent or nesting it forms a cycle
        """
        if subinterval is not None and not isinstance(subinterval.domain, ScalarDomain):
            raise TypeError(f"Subinterval must be a scalar interval, got {subinterval!r}")
        if effect is self or self in effect._descendants():
            raise ValueError("Nesting this effect would create a cycle")
        if effect._parent is not None:
            raise ValueError("Effect is already nested under another effect")

        if subinterval is not None and subinterval.is_unit:
            subinterval = None
        self._edges.append((subinterval, effect))
        effect._parent = self
        return effect

    @property
    def children(self) -> Tuple["ParallaxEffect", ...]:
        """Directly nested effects."""
        return tuple(child for _, child in self._edges)

    def seed(self, value: V) -> None:
        """Seed the tree rooted at this effect with ``value``.

        Fires ``on_change`` on this effect and every reachable descendant
        exactly once before returning.
        """
        position = self.interval.unit_position(value)
        logger.debug(f"Seeding {self.interval!r} with {value!r} (position={position})")
        self._set_position(position)

    def _set_position(self, position: float) -> None:
        if self.on_change is not None:
            self.on_change(self.interval.value_at_unit_position(position))
        for subinterval, child in self._edges:
            translated = position if subinterval is None else subinterval.unit_position(position)
            child._inherit_position(translated)

    def _inherit_position(self, position: float) -> None:
        if self.clamped:
            position = min(1.0, max(0.0, position))
        self._set_position(self.curve.apply(position))

    def _descendants(self) -> List["ParallaxEffect"]:
        found: List[ParallaxEffect] = []
        stack = list(self.children)
        while stack:
            node = stack.pop()
            found.append(node)
            stack.extend(node.children)
        return found
