"""Position, rotation and scale of an object."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from winterplat.glmath import (
    quat_from_euler,
    quat_multiply,
    quat_normalize,
    quat_to_euler,
    quat_to_matrix,
    scale_matrix,
    translation_matrix,
)


@dataclass(eq=False)
class Transform:
    """Object placement; rotation is a (w, x, y, z) quaternion."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(
        default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0])
    )
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=float)
        self.rotation = np.array(self.rotation, dtype=float)
        self.scale = np.array(self.scale, dtype=float)

    def matrix(self) -> np.ndarray:
        """Model matrix: scale, then rotate, then translate."""
        return (
            translation_matrix(self.position)
            @ quat_to_matrix(self.rotation)
            @ scale_matrix(self.scale)
        )

    def set_euler_rotation(self, euler_degrees) -> None:
        """Set the rotation from Euler angles in degrees."""
        self.rotation = quat_from_euler(np.radians(np.asarray(euler_degrees, float)))

    def euler_rotation(self) -> np.ndarray:
        """Current rotation as Euler angles in degrees."""
        return np.degrees(quat_to_euler(self.rotation))

    def translate(self, delta) -> None:
        """Move by ``delta``."""
        self.position = self.position + np.asarray(delta, dtype=float)

    def rotate(self, euler_delta_degrees) -> None:
        """Apply an extra rotation given as Euler angles in degrees."""
        delta = quat_from_euler(np.radians(np.asarray(euler_delta_degrees, float)))
        self.rotation = quat_normalize(quat_multiply(delta, self.rotation))