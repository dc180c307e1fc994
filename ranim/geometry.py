"""Identifiers, subpath widths and 3D helpers for planes and rotations."""

from __future__ import annotations

import enum
import math
import uuid
from dataclasses import dataclass, field
from typing import Sequence, TypeVar

import numpy as np

__all__ = [
    "Id",
    "SubpathKind",
    "SubpathWidth",
    "project",
    "generate_basis",
    "convert_to_2d",
    "convert_to_3d",
    "rotation_between_vectors",
    "angle_between_vectors",
    "resize_preserving_order",
    "extend_with_last",
]

T = TypeVar("T")

_EPSILON = float(np.finfo(np.float32).eps)


def _vec(values) -> np.ndarray:
    return np.asarray(values, dtype=float)


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


@dataclass(frozen=True, order=True)
class Id:
    """A random 128-bit identifier."""

    value: int = field(default_factory=lambda: uuid.uuid4().int)


class SubpathKind(enum.Enum):
    INNER = "inner"
    OUTER = "outer"
    MIDDLE = "middle"


@dataclass(frozen=True)
class SubpathWidth:
    """Stroke width of a subpath and which side of the path it lies on."""

    kind: SubpathKind = SubpathKind.MIDDLE
    width: float = 1.0


def project(p, unit_normal) -> np.ndarray:
    """Project a point onto the plane through the origin with the given unit normal."""
    p, n = _vec(p), _vec(unit_normal)
    return p - n * float(np.dot(n, p))


def generate_basis(unit_normal) -> tuple[np.ndarray, np.ndarray]:
    """Return two orthonormal vectors spanning the plane normal to ``unit_normal``."""
    n = _vec(unit_normal)
    if n[0] != 0.0 or n[1] != 0.0:
        u = np.array([-n[1], n[0], 0.0])
    else:
        u = np.array([1.0, 0.0, 0.0])
    u = _normalize(u)
    v = _normalize(np.cross(n, u))
    return u, v


def convert_to_2d(p, origin, basis) -> np.ndarray:
    local = _vec(p) - _vec(origin)
    u, v = basis
    return np.array([float(np.dot(u, local)), float(np.dot(v, local))])


def convert_to_3d(p, origin, basis) -> np.ndarray:
    u, v = basis
    return _vec(origin) + _vec(u) * p[0] + _vec(v) * p[1]


def _axis_angle_matrix(axis: np.ndarray, angle: float) -> np.ndarray:
    x, y, z = _normalize(axis)
    c, s = math.cos(angle), math.sin(angle)
    k = 1.0 - c
    return np.array(
        [
            [c + x * x * k, x * y * k - z * s, x * z * k + y * s],
            [y * x * k + z * s, c + y * y * k, y * z * k - x * s],
            [z * x * k - y * s, z * y * k + x * s, c + z * z * k],
        ]
    )


def rotation_between_vectors(v1, v2) -> np.ndarray:
    """Return a 3x3 rotation matrix turning the direction of ``v1`` into that of ``v2``."""
    v1, v2 = _vec(v1), _vec(v2)
    if np.linalg.norm(v2 - v1) < _EPSILON:
        return np.eye(3)
    axis = np.cross(v1, v2)
    if np.linalg.norm(axis) < _EPSILON:
        axis = np.cross(v1, [0.0, 1.0, 0.0])
    if np.linalg.norm(axis) < _EPSILON:
        axis = np.cross(v1, [0.0, 0.0, 1.0])
    return _axis_angle_matrix(axis, angle_between_vectors(v1, v2))


def angle_between_vectors(v1, v2) -> float:
    """Return the angle between two vectors, or 0 if either is zero."""
    v1, v2 = _vec(v1), _vec(v2)
    n1, n2 = float(np.linalg.norm(v1)), float(np.linalg.norm(v2))
    if n1 == 0.0 or n2 == 0.0:
        return 0.0
    cos = float(np.dot(v1, v2)) / (n1 * n2)
    return math.acos(min(max(cos, -1.0), 1.0))


def resize_preserving_order(seq: Sequence[T], new_len: int) -> list[T]:
    """Resample ``seq`` to ``new_len`` items, repeating or dropping in order."""
    return [seq[i * len(seq) // new_len] for i in range(new_len)]


def extend_with_last(items: list[T], new_len: int, default: T) -> None:
    """Pad ``items`` in place to ``new_len`` with its last item, or ``default`` if empty."""
    if new_len < len(items):
        raise ValueError(f"new length {new_len} is shorter than current length {len(items)}")
    fill = items[-1] if items else default
    items.extend([fill] * (new_len - len(items)))