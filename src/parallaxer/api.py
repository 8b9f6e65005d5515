"""Public API for parallaxer.

This module provides the complete public API: value domains, intervals,
curves, transforms, effect trees, declarative chains, sampling and the
reactive stream bindings.
"""

# Domains
from .domains import (
    Parallaxable,
    domain_for,
    register_domain,
    ScalarDomain,
    Point,
    PointDomain,
)

# Core algebra
from .interval import Interval
from .curves import Curve, CurveKind
from .transform import Transform

# Effect trees
from .effect import ParallaxEffect

# Declarative chains
from .chain import (
    Chain,
    ChainStep,
    Operation,
    parse_interval,
    parse_step,
)

# Sampling
from .sampling import sample_chain

# Reactive bindings (used as ``streams.bind(...)``, ``streams.rescale(...)``)
from . import streams

# Errors
from .errors import ParallaxError, ZeroLengthIntervalError, ChainConfigError

# Version
try:
    from importlib.metadata import PackageNotFoundError, version
    __version__ = version("parallaxer")
except PackageNotFoundError:
    __version__ = "0.1.0"

# Public API Export List
__all__ = [
    # Domains
    "Parallaxable",
    "domain_for",
    "register_domain",
    "ScalarDomain",
    "Point",
    "PointDomain",

    # Core algebra
    "Interval",
    "Curve",
    "CurveKind",
    "Transform",

    # Effect trees
    "ParallaxEffect",

    # Chains
    "Chain",
    "ChainStep",
    "Operation",
    "parse_interval",
    "parse_step",

    # Sampling
    "sample_chain",

    # Streams
    "streams",

    # Errors
    "ParallaxError",
    "ZeroLengthIntervalError",
    "ChainConfigError",

    # Version
    "__version__",
]
