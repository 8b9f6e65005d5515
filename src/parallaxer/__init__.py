"""Parallaxer: composable, reversible interval transforms for parallax effects.

A changing input value (a scroll offset, a drag distance) is bound over an
interval, and the resulting transform is rescaled, reshaped and refocused to
drive any number of dependent output values.
"""

# Export the public API
from .api import *  # noqa: F403, F401
from .api import __all__, __version__  # noqa: F401
