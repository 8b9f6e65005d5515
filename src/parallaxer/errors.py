"""Error types raised by parallaxer.

Interval construction is the single checked boundary of the core: once an
Interval exists, position/value conversion and every Transform operator are
total. Configuration errors are raised while reading chain declarations.
"""


class ParallaxError(Exception):
    """Base class for all parallaxer errors."""


class ZeroLengthIntervalError(ParallaxError, ValueError):
    """Raised when an interval is built with equal boundaries.

    Position conversion divides by the interval's extent, so a zero-length
    interval has no meaningful unit position.
    """

    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(
            f"Interval boundaries must differ, got start={start!r} and end={end!r}"
        )


class ChainConfigError(ParallaxError, ValueError):
    """Raised when a chain declaration cannot be parsed."""
