"""Utility helpers shared across parallaxer."""

from .text import default_output_path, slugify

__all__ = ["default_output_path", "slugify"]
