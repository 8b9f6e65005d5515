"""Command line interface for parallaxer (``px``)."""
