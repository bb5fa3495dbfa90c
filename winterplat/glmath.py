"""Small vector, matrix and quaternion helpers for rendering and physics.

Matrices are 4x4 numpy arrays that act on column vectors (``m @ v``).
Quaternions are numpy arrays laid out as ``(w, x, y, z)``.
"""

from __future__ import annotations

import math

import numpy as np

_EPSILON = float(np.finfo(float).eps)


def _vec(v, size: int) -> np.ndarray:
    arr = np.asarray(v, dtype=float)
    if arr.shape != (size,):
        raise ValueError(f"expected a vector of length {size}, got shape {arr.shape}")
    return arr


def normalize(v) -> np.ndarray:
    """Return ``v`` scaled to unit length."""
    arr = np.asarray(v, dtype=float)
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return arr / length


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = _vec(eye, 3)
    center = _vec(center, 3)
    up = _vec(up, 3)
    f = normalize(center - eye)
    s = normalize(np.cross(f, up))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -float(np.dot(s, eye))
    m[1, 3] = -float(np.dot(u, eye))
    m[2, 3] = float(np.dot(f, eye))
    return m


def perspective(fovy, aspect, near, far) -> np.ndarray:
    """Right-handed perspective projection with clip depth in [-1, 1].

    ``fovy`` is the vertical field of view in radians.
    """
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def translation_matrix(offset) -> np.ndarray:
    """Matrix that moves points by ``offset``."""
    m = np.identity(4)
    m[:3, 3] = _vec(offset, 3)
    return m


def scale_matrix(factors) -> np.ndarray:
    """Matrix that scales points along each axis by ``factors``."""
    m = np.identity(4)
    m[:3, :3] = np.diag(_vec(factors, 3))
    return m


def quat_from_euler(angles) -> np.ndarray:
    """Quaternion from Euler angles (pitch, yaw, roll) in radians."""
    half = _vec(angles, 3) * 0.5
    c = np.cos(half)
    s = np.sin(half)
    return np.array(
        [
            c[0] * c[1] * c[2] + s[0] * s[1] * s[2],
            s[0] * c[1] * c[2] - c[0] * s[1] * s[2],
            c[0] * s[1] * c[2] + s[0] * c[1] * s[2],
            c[0] * c[1] * s[2] - s[0] * s[1] * c[2],
        ]
    )


def quat_multiply(a, b) -> np.ndarray:
    """Hamilton product ``a * b``: rotation ``b`` followed by ``a``."""
    aw, ax, ay, az = _vec(a, 4)
    bw, bx, by, bz = _vec(b, 4)
    return np.array(
        [
            aw * bw - ax * bx - ay * by - az * bz,
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by + ay * bw + az * bx - ax * bz,
            aw * bz + az * bw + ax * by - ay * bx,
        ]
    )


def quat_normalize(q) -> np.ndarray:
    """Unit quaternion in the direction of ``q``; identity for a zero quaternion."""
    q = _vec(q, 4)
    length = float(np.linalg.norm(q))
    if length <= 0.0:
        return np.array([1.0, 0.0, 0.0, 0.0])
    return q / length


def quat_to_matrix(q) -> np.ndarray:
    """4x4 rotation matrix for the quaternion ``q``."""
    w, x, y, z = _vec(q, 4)
    m = np.identity(4)
    m[0, 0] = 1.0 - 2.0 * (y * y + z * z)
    m[0, 1] = 2.0 * (x * y - w * z)
    m[0, 2] = 2.0 * (x * z + w * y)
    m[1, 0] = 2.0 * (x * y + w * z)
    m[1, 1] = 1.0 - 2.0 * (x * x + z * z)
    m[1, 2] = 2.0 * (y * z - w * x)
    m[2, 0] = 2.0 * (x * z - w * y)
    m[2, 1] = 2.0 * (y * z + w * x)
    m[2, 2] = 1.0 - 2.0 * (x * x + y * y)
    return m


def quat_to_euler(q) -> np.ndarray:
    """Euler angles (pitch, yaw, roll) in radians for the quaternion ``q``."""
    w, x, y, z = _vec(q, 4)
    roll = math.atan2(2.0 * (x * y + w * z), w * w + x * x - y * y - z * z)
    py = 2.0 * (y * z + w * x)
    px = w * w - x * x - y * y + z * z
    if abs(py) <= _EPSILON and abs(px) <= _EPSILON:
        pitch = 2.0 * math.atan2(x, w)
    else:
        pitch = math.atan2(py, px)
    yaw = math.asin(min(max(-2.0 * (x * z - w * y), -1.0), 1.0))
    return np.array([pitch, yaw, roll])