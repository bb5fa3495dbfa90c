import numpy as np
import pytest

from winterplat.glmath import quat_to_matrix, scale_matrix, translation_matrix
from winterplat.transform import Transform


def test_default_matrix_is_identity():
    assert np.allclose(Transform().matrix(), np.identity(4))


def test_translate_accumulates():
    t = Transform()
    t.translate([1.0, 2.0, 3.0])
    t.translate([0.5, -2.0, 1.0])
    assert np.allclose(t.position, np.array([1.0, 2.0, 3.0]) + [0.5, -2.0, 1.0])


def test_euler_round_trip():
    t = Transform()
    angles = [20.0, -35.0, 50.0]
    t.set_euler_rotation(angles)
    assert np.allclose(t.euler_rotation(), angles)
    assert np.linalg.norm(t.rotation) == pytest.approx(1.0)


def test_rotate_composes():
    stepped = Transform()
    stepped.rotate([0.0, 30.0, 0.0])
    stepped.rotate([0.0, 30.0, 0.0])
    direct = Transform()
    direct.set_euler_rotation([0.0, 60.0, 0.0])
    assert np.allclose(stepped.matrix(), direct.matrix())
    assert np.linalg.norm(stepped.rotation) == pytest.approx(1.0)


def test_matrix_order_scale_rotate_translate():
    t = Transform(position=[1.0, -2.0, 0.5], scale=[2.0, 1.0, 3.0])
    t.set_euler_rotation([10.0, 20.0, 30.0])
    expected = (
        translation_matrix(t.position)
        @ quat_to_matrix(t.rotation)
        @ scale_matrix(t.scale)
    )
    assert np.allclose(t.matrix(), expected)


def test_matrix_moves_origin_to_position():
    t = Transform(position=[4.0, 5.0, 6.0])
    t.set_euler_rotation([45.0, 10.0, 0.0])
    out = t.matrix() @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(out[:3], t.position)