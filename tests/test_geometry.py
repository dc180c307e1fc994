import math

import numpy as np
import pytest

from ranim.geometry import (
    Id,
    SubpathKind,
    SubpathWidth,
    angle_between_vectors,
    convert_to_2d,
    convert_to_3d,
    extend_with_last,
    generate_basis,
    project,
    resize_preserving_order,
    rotation_between_vectors,
)

NORMALS = [
    [0.0, 0.0, 1.0],
    [1.0, 0.0, 0.0],
    [0.0, 1.0, 0.0],
    list(np.array([1.0, 2.0, 3.0]) / np.linalg.norm([1.0, 2.0, 3.0])),
]


def test_ids_are_unique_and_ordered():
    a, b = Id(), Id()
    assert a != b
    assert (a < b) != (b < a)
    assert Id(5) == Id(5)


def test_subpath_width_default():
    width = SubpathWidth()
    assert width.kind is SubpathKind.MIDDLE
    assert width.width == 1.0


@pytest.mark.parametrize("normal", NORMALS)
def test_project_lies_in_plane(normal):
    p = [3.0, -2.0, 5.0]
    projected = project(p, normal)
    assert float(np.dot(projected, normal)) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("normal", NORMALS)
def test_generate_basis_is_orthonormal(normal):
    u, v = generate_basis(normal)
    assert np.linalg.norm(u) == pytest.approx(1.0)
    assert np.linalg.norm(v) == pytest.approx(1.0)
    assert float(np.dot(u, v)) == pytest.approx(0.0, abs=1e-12)
    assert float(np.dot(u, normal)) == pytest.approx(0.0, abs=1e-12)
    assert float(np.dot(v, normal)) == pytest.approx(0.0, abs=1e-12)


def test_generate_basis_for_z_normal():
    u, v = generate_basis([0.0, 0.0, 1.0])
    assert np.array_equal(u, [1.0, 0.0, 0.0])
    assert np.allclose(v, [0.0, 1.0, 0.0])


@pytest.mark.parametrize("normal", NORMALS)
def test_convert_round_trip(normal):
    basis = generate_basis(normal)
    origin = np.array([1.0, 1.0, 1.0])
    p2 = np.array([0.7, -1.3])
    p3 = convert_to_3d(p2, origin, basis)
    assert np.allclose(convert_to_2d(p3, origin, basis), p2)


@pytest.mark.parametrize(
    "v1, v2",
    [
        ([1.0, 0.0, 0.0], [0.0, 1.0, 0.0]),
        ([1.0, 2.0, 3.0], [-2.0, 0.5, 1.0]),
        ([0.0, 0.0, 2.0], [0.0, 0.0, -1.0]),
        ([1.0, 0.0, 0.0], [-1.0, 0.0, 0.0]),
    ],
)
def test_rotation_maps_direction(v1, v2):
    m = rotation_between_vectors(v1, v2)
    rotated = m @ np.array(v1)
    expected = np.array(v2) / np.linalg.norm(v2) * np.linalg.norm(v1)
    assert np.allclose(rotated, expected, atol=1e-9)
    assert np.allclose(m @ m.T, np.eye(3))


def test_rotation_same_vector_is_identity():
    assert np.array_equal(rotation_between_vectors([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]), np.eye(3))


def test_angle_between_vectors():
    assert angle_between_vectors([1.0, 0.0, 0.0], [0.0, 1.0, 0.0]) == pytest.approx(math.pi / 2)
    assert angle_between_vectors([1.0, 0.0, 0.0], [-3.0, 0.0, 0.0]) == pytest.approx(math.pi)
    assert angle_between_vectors([0.0, 0.0, 0.0], [1.0, 0.0, 0.0]) == 0.0


def test_resize_preserving_order():
    assert resize_preserving_order([1, 2, 3, 4], 2) == [1, 3]
    assert resize_preserving_order([1, 2], 4) == [1, 1, 2, 2]
    assert resize_preserving_order([1, 2, 3], 0) == []


def test_resize_keeps_order_invariant():
    seq = list(range(7))
    resized = resize_preserving_order(seq, 13)
    assert len(resized) == 13
    assert resized == sorted(resized)
    assert set(resized) == set(seq)


def test_extend_with_last():
    items = [1, 2]
    extend_with_last(items, 4, 0)
    assert items == [1, 2, 2, 2]


def test_extend_with_last_empty_uses_default():
    items: list[str] = []
    extend_with_last(items, 2, "x")
    assert items == ["x", "x"]


def test_extend_with_last_rejects_shrinking():
    with pytest.raises(ValueError):
        extend_with_last([1, 2, 3], 1, 0)