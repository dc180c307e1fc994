"""Geometry, bezier, easing and caching helpers for vector animation, Typst-to-SVG
compilation, and an examples-website builder."""

__version__ = "0.1.0"
__all__ = [
    "bezier",
    "build_examples",
    "geometry",
    "math",
    "rate_functions",
    "refresh",
    "typst",
]