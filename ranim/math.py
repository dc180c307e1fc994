"""Small vector-math helpers: 2D cross products, line intersection, rectangles."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

import numpy as np

__all__ = ["cross2d", "intersection", "Rect", "interpolate_usize"]

_EPSILON = sys.float_info.epsilon


def _vec(values) -> np.ndarray:
    return np.asarray(values, dtype=float)


def cross2d(a, b) -> float:
    """Return the z component of the cross product of two 2D vectors."""
    return float(a[0] * b[1] - b[0] * a[1])


def intersection(p1, v1, p2, v2) -> np.ndarray | None:
    """Intersect the lines ``p1 + t*v1`` and ``p2 + s*v2`` in 3D.

    Returns ``None`` for parallel, coincident or skew lines.
    """
    p1, v1, p2, v2 = (_vec(x) for x in (p1, v1, p2, v2))
    cross = np.cross(v1, v2)
    denom = float(np.dot(cross, cross))
    if denom < _EPSILON:
        return None

    diff = p2 - p1
    t = float(np.dot(np.cross(diff, v2), cross)) / denom
    s = float(np.dot(np.cross(diff, v1), cross)) / denom

    point1 = p1 + v1 * t
    point2 = p2 + v2 * s
    gap = point1 - point2
    if float(np.dot(gap, gap)) < _EPSILON:
        return point1
    return None


@dataclass(frozen=True, eq=False)
class Rect:
    """An axis-aligned rectangle in 2D space."""

    min: np.ndarray
    max: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", _vec(self.min))
        object.__setattr__(self, "max", _vec(self.max))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return bool(np.array_equal(self.min, other.min) and np.array_equal(self.max, other.max))

    def union(self, other: Rect) -> Rect:
        return Rect(np.minimum(self.min, other.min), np.maximum(self.max, other.max))

    def intersection(self, other: Rect) -> Rect:
        return Rect(np.maximum(self.min, other.min), np.minimum(self.max, other.max))

    def center(self) -> np.ndarray:
        return (self.min + self.max) / 2.0

    def point(self, edge) -> np.ndarray:
        """Return the point of the rectangle selected by ``edge``.

        Each component of ``edge`` is -1, 0 or 1, picking the minimum,
        centre or maximum. Both components select from the y range.
        """
        center = self.center()
        choices = {-1: self.min[1], 0: center[1], 1: self.max[1]}
        ex, ey = edge
        try:
            return _vec([choices[ex], choices[ey]])
        except KeyError:
            raise ValueError(f"edge components must be -1, 0 or 1, got {tuple(edge)!r}") from None


def interpolate_usize(a: int, b: int, t: float) -> tuple[int, float]:
    """Interpolate between two non-negative integers.

    Returns the integer reached and the progress towards the next one.
    """
    if b < a:
        raise ValueError(f"b ({b}) must not be less than a ({a})")
    t = min(max(t, 0.0), 1.0)
    p = (b - a) * t
    whole = math.floor(p)
    return a + whole, p - whole