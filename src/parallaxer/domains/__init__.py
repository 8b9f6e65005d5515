"""Value domains for parallax intervals.

Importing this package registers the built-in scalar and point domains.
"""

from .base import Parallaxable, domain_for, register_domain
from .scalar import ScalarDomain, SCALAR
from .point import Point, PointDomain, POINT

__all__ = [
    # Protocol and resolution
    "Parallaxable",
    "domain_for",
    "register_domain",
    # Built-in domains
    "ScalarDomain",
    "SCALAR",
    "Point",
    "PointDomain",
    "POINT",
]
