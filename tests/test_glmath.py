import math

import numpy as np
import pytest

from winterplat.glmath import (
    look_at,
    normalize,
    perspective,
    quat_from_euler,
    quat_multiply,
    quat_normalize,
    quat_to_euler,
    quat_to_matrix,
    scale_matrix,
    translation_matrix,
)


def test_normalize_unit_length_and_direction():
    v = np.array([3.0, -4.0, 12.0])
    n = normalize(v)
    assert np.linalg.norm(n) == pytest.approx(1.0)
    assert np.allclose(np.cross(n, v), 0.0)
    assert np.dot(n, v) > 0


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        normalize([0.0, 0.0, 0.0])


def test_look_at_maps_eye_to_origin_and_center_ahead():
    eye = np.array([1.0, 2.0, 3.0])
    center = np.array([4.0, 0.0, -2.0])
    m = look_at(eye, center, [0.0, 1.0, 0.0])
    assert np.allclose(m @ np.append(eye, 1.0), [0.0, 0.0, 0.0, 1.0])
    c = m @ np.append(center, 1.0)
    dist = np.linalg.norm(center - eye)
    assert np.allclose(c[:3], [0.0, 0.0, -dist])


def test_look_at_rotation_is_orthonormal():
    m = look_at([0.0, 0.0, 5.0], [1.0, 1.0, 0.0], [0.0, 1.0, 0.0])
    r = m[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))


def test_perspective_depth_range():
    near, far = 0.5, 50.0
    p = perspective(math.radians(60.0), 1.5, near, far)
    n = p @ np.array([0.0, 0.0, -near, 1.0])
    f = p @ np.array([0.0, 0.0, -far, 1.0])
    assert n[2] / n[3] == pytest.approx(-1.0)
    assert f[2] / f[3] == pytest.approx(1.0)


def test_perspective_aspect_scales_x():
    wide = perspective(1.0, 2.0, 0.1, 10.0)
    square = perspective(1.0, 1.0, 0.1, 10.0)
    assert wide[0, 0] * 2.0 == pytest.approx(square[0, 0])
    assert wide[1, 1] == pytest.approx(square[1, 1])


def test_perspective_zero_aspect_raises():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 10.0)


def test_translation_matrix_moves_point():
    offset = np.array([1.5, -2.0, 7.0])
    point = np.array([0.25, 0.5, -1.0])
    moved = translation_matrix(offset) @ np.append(point, 1.0)
    assert np.allclose(moved[:3], point + offset)


def test_scale_matrix_scales_point():
    factors = np.array([2.0, 3.0, 0.5])
    point = np.array([1.0, -1.0, 4.0])
    scaled = scale_matrix(factors) @ np.append(point, 1.0)
    assert np.allclose(scaled[:3], point * factors)


def test_quat_from_zero_euler_is_identity():
    assert np.allclose(quat_from_euler([0.0, 0.0, 0.0]), [1.0, 0.0, 0.0, 0.0])


def test_quat_rotation_about_z():
    q = quat_from_euler([0.0, 0.0, math.pi / 2])
    rotated = quat_to_matrix(q) @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(rotated[:3], [0.0, 1.0, 0.0])


def test_quat_matrix_is_rotation():
    q = quat_from_euler([0.3, -0.7, 1.1])
    r = quat_to_matrix(q)[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))
    assert np.linalg.det(r) == pytest.approx(1.0)


def test_quat_multiply_matches_matrix_product():
    a = quat_from_euler([0.2, 0.4, -0.1])
    b = quat_from_euler([-0.5, 0.3, 0.8])
    assert np.allclose(
        quat_to_matrix(quat_multiply(a, b)), quat_to_matrix(a) @ quat_to_matrix(b)
    )


def test_quat_normalize():
    q = quat_normalize([2.0, 1.0, -2.0, 4.0])
    assert np.linalg.norm(q) == pytest.approx(1.0)
    assert np.allclose(quat_normalize([0.0, 0.0, 0.0, 0.0]), [1.0, 0.0, 0.0, 0.0])


@pytest.mark.parametrize(
    "angles", [[0.1, 0.2, 0.3], [-0.5, 0.4, 1.2], [1.0, -1.0, -2.0], [0.0, 0.0, 0.0]]
)
def test_euler_round_trip(angles):
    assert np.allclose(quat_to_euler(quat_from_euler(angles)), angles)