"""Quadratic and cubic bezier helpers and a path builder made of quadratic segments."""

from __future__ import annotations

import math
import sys
from typing import Any, Sequence

import numpy as np

from ranim.math import cross2d, intersection

__all__ = [
    "PathBuilder",
    "split_cubic_bezier",
    "split_quad_bezier",
    "trim_quad_bezier",
    "trim_cubic_bezier",
    "get_subpath_closed_flag",
    "point_on_quadratic_bezier",
    "partial_quadratic_bezier",
    "cubic_bezier_eval",
    "quad_bezier_eval",
    "approx_cubic_with_quadratic",
]

_EPSILON = sys.float_info.epsilon
_CLOSED_TOLERANCE = 0.0001

Quad = tuple[np.ndarray, np.ndarray, np.ndarray]
Cubic = tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]


def _vec(values) -> np.ndarray:
    return np.asarray(values, dtype=float)


def _lerp(a, b, t: float):
    return a * (1.0 - t) + b * t


def _clamp01(t: float) -> float:
    return min(max(t, 0.0), 1.0)


def _distance_squared(a: np.ndarray, b: np.ndarray) -> float:
    d = a - b
    return float(np.dot(d, d))


def _as_value(x: Any):
    if isinstance(x, (int, float)):
        return float(x)
    return np.asarray(x, dtype=float)


class PathBuilder:
    """Builds a path as a flat list of quadratic bezier points.

    Consecutive segments share their end points; a new subpath starts with a
    repeated point followed by its start point.
    """

    def __init__(self) -> None:
        self._start_point: np.ndarray | None = None
        self._points: list[np.ndarray] = []

    def __len__(self) -> int:
        return len(self._points)

    def is_empty(self) -> bool:
        return not self._points

    def move_to(self, point) -> PathBuilder:
        """Start a new subpath at ``point``."""
        point = _vec(point)
        self._start_point = point
        if self._points:
            self._points.extend([self._points[-1], point])
        else:
            self._points.append(point)
        return self

    def _current(self) -> np.ndarray:
        if self._start_point is None or not self._points:
            raise ValueError("a path has to start with move_to")
        return self._points[-1]

    def line_to(self, p) -> PathBuilder:
        """Append a straight segment, stored as a quadratic with a midpoint handle."""
        p = _vec(p)
        mid = (self._current() + p) / 2.0
        self._points.extend([mid, p])
        return self

    def quad_to(self, h, p) -> PathBuilder:
        """Append a quadratic bezier with handle ``h`` ending at ``p``."""
        h, p = _vec(h), _vec(p)
        cur = self._current()
        if _distance_squared(cur, h) < _EPSILON or _distance_squared(h, p) < _EPSILON:
            return self.line_to(p)
        self._points.extend([h, p])
        return self

    def cubic_to(self, h1, h2, p) -> PathBuilder:
        """Append a cubic bezier, approximated by quadratic segments."""
        h1, h2, p = _vec(h1), _vec(h2), _vec(p)
        cur = self._current()
        if _distance_squared(cur, h1) < _EPSILON or _distance_squared(h1, h2) < _EPSILON:
            return self.quad_to(h2, p)
        if _distance_squared(h2, p) < _EPSILON:
            return self.quad_to(h1, p)
        for _, handle, end in approx_cubic_with_quadratic((cur, h1, h2, p)):
            self.quad_to(handle, end)
        return self

    def close_path(self) -> PathBuilder:
        """Close the current subpath with a line back to its start, if needed."""
        cur = self._current()
        if np.array_equal(cur, self._start_point):
            return self
        return self.line_to(self._start_point)

    def vpoints(self) -> list[np.ndarray]:
        return list(self._points)


def cubic_bezier_eval(bezier: Sequence, t: float) -> np.ndarray:
    """Evaluate a cubic bezier at ``t`` (clamped to [0, 1])."""
    t = _clamp01(t)
    b0, b1, b2, b3 = (_vec(x) for x in bezier)
    p0 = _lerp(b0, b1, t)
    p1 = _lerp(b1, b2, t)
    p2 = _lerp(b2, b3, t)
    p0 = _lerp(p0, p1, t)
    p1 = _lerp(p1, p2, t)
    return _lerp(p0, p1, t)


def quad_bezier_eval(bezier: Sequence, t: float) -> np.ndarray:
    """Evaluate a quadratic bezier at ``t`` (clamped to [0, 1])."""
    t = _clamp01(t)
    b0, b1, b2 = (_vec(x) for x in bezier)
    p0 = _lerp(b0, b1, t)
    p1 = _lerp(b1, b2, t)
    return _lerp(p0, p1, t)


def split_cubic_bezier(bezier: Sequence, t: float) -> tuple[Cubic, Cubic]:
    """Split a cubic bezier at ``t`` into two cubic beziers."""
    p0, h0, h1, p1 = (_vec(x) for x in bezier)
    split_point = cubic_bezier_eval((p0, h0, h1, p1), t)

    h00 = _lerp(p0, h0, t)
    h01 = _lerp(_lerp(p0, h0, t), _lerp(h0, h1, t), t)
    h10 = _lerp(_lerp(h0, h1, t), _lerp(h1, p1, t), t)
    h11 = _lerp(h1, p1, t)

    return (p0, h00, h01, split_point), (split_point, h10, h11, p1)


def split_quad_bezier(bezier: Sequence, t: float) -> tuple[Quad, Quad]:
    """Split a quadratic bezier at ``t`` into two quadratic beziers."""
    p0, h, p1 = (_vec(x) for x in bezier)
    split_point = quad_bezier_eval((p0, h, p1), t)
    h0 = _lerp(p0, h, t)
    h1 = _lerp(h, p1, t)
    return (p0, h0, split_point), (split_point, h1, p1)


def _ordered(a: float, b: float) -> tuple[float, float]:
    a, b = (b, a) if a > b else (a, b)
    return (a / b if b else 0.0), b


def trim_quad_bezier(bezier: Sequence, a: float, b: float) -> Quad:
    """Return the part of a quadratic bezier between parameters ``a`` and ``b``."""
    a, b = _ordered(a, b)
    end_on_b = split_quad_bezier(bezier, b)[0]
    return split_quad_bezier(end_on_b, a)[1]


def trim_cubic_bezier(bezier: Sequence, a: float, b: float) -> Cubic:
    """Return the part of a cubic bezier between parameters ``a`` and ``b``."""
    a, b = _ordered(a, b)
    end_on_b = split_cubic_bezier(bezier, b)[0]
    return split_cubic_bezier(end_on_b, a)[1]


def get_subpath_closed_flag(path: Sequence) -> tuple[int, bool] | None:
    """Find where the first subpath of ``path`` ends and whether it is closed.

    Returns ``None`` for paths with fewer than three points.
    """
    if len(path) < 3:
        return None
    points = [_vec(x) for x in path]
    for i in range(2, len(points), 2):
        if i + 1 >= len(points) or np.array_equal(points[i], points[i + 1]):
            closed = _distance_squared(points[i], points[0]) <= _CLOSED_TOLERANCE
            return i, closed
    raise ValueError("path does not end a subpath at an even position")


def point_on_quadratic_bezier(points: Sequence, t: float):
    """Return the point on a quadratic bezier at ``t`` (clamped to [0, 1])."""
    t = _clamp01(t)
    p0, p1, p2 = (_as_value(x) for x in points)
    return _lerp(_lerp(p0, p1, t), _lerp(p1, p2, t), t)


def partial_quadratic_bezier(points: Sequence, a: float, b: float) -> tuple:
    """Return the control points of the part of a quadratic bezier between ``a`` and ``b``."""
    a = _clamp01(a)
    b = _clamp01(b)
    values = [_as_value(x) for x in points]

    h0 = point_on_quadratic_bezier(values, a)
    h2 = point_on_quadratic_bezier(values, b)

    h1_prime = _lerp(values[1], values[2], a)
    end_prop = (b - a) / (1.0 - a) if a != 1.0 else 0.0
    h1 = _lerp(h0, h1_prime, end_prop)
    return h0, h1, h2


def _cut(cubic: Cubic, root: float) -> tuple[np.ndarray, np.ndarray]:
    p1, h1, h2, p2 = cubic
    cut_point = cubic_bezier_eval(cubic, root)
    cut_tangent = quad_bezier_eval((h1 - p1, h2 - h1, p2 - h2), root)
    return cut_point, cut_tangent


def approx_cubic_with_quadratic(cubic: Sequence) -> list[Quad]:
    """Approximate a cubic bezier ``(p1, h1, h2, p2)`` with two quadratic beziers."""
    p1, h1, h2, p2 = (_vec(x) for x in cubic)
    cubic = (p1, h1, h2, p2)

    p = h1 - p1
    q = h2 - 2.0 * h1 + p1
    r = p2 - 3.0 * h2 + 3.0 * h1 - p1

    a = cross2d(q[:2], r[:2])
    b = cross2d(p[:2], r[:2])
    c = cross2d(p[:2], q[:2])
    disc = b * b - 4.0 * a * c

    if (a == 0.0 and b == 0.0) or (a != 0.0 and disc < 0.0):
        root = 0.5
    elif a == 0.0:
        root = _clamp01(-c / b)
    else:
        sqrt_disc = math.sqrt(disc) if disc >= 0.0 else math.nan
        root = (-b + sqrt_disc) / (2.0 * a)
        if root <= 0.0 or root >= 1.0:
            root = (b + sqrt_disc) / (-2.0 * a)
        if root <= 0.0 or root >= 1.0:
            root = 0.5
    if root == 0.0 or root == 1.0:
        root = 0.5

    p1_tangent = h1 - p1
    p2_tangent = p2 - h2

    cut_point, cut_tangent = _cut(cubic, root)
    i1 = intersection(p1, p1_tangent, cut_point, cut_tangent)
    i2 = intersection(p2, p2_tangent, cut_point, cut_tangent)

    if i1 is None or i2 is None:
        # The tangent at the cut can coincide with an end tangent; cut elsewhere.
        root = root / 2.0 if root > 0.5 else 0.5 + (1.0 - root) / 2.0
        cut_point, cut_tangent = _cut(cubic, root)
        i1 = intersection(p1, p1_tangent, cut_point, cut_tangent)
        if i1 is None:
            i1 = (p1 + cut_point) / 2.0
        i2 = intersection(p2, p2_tangent, cut_point, cut_tangent)
        if i2 is None:
            i2 = (cut_point + p2) / 2.0

    return [(p1, i1, cut_point), (cut_point, i2, p2)]