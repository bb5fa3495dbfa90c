"""Simple rigid-body motion."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from winterplat.glmath import quat_from_euler, quat_multiply, quat_normalize
from winterplat.transform import Transform


@dataclass(eq=False)
class PhysicsObject:
    """Object with linear and angular velocity (angular in degrees per second)."""

    transform: Transform = field(default_factory=Transform)
    linear_velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    angular_velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    mass: float = 1.0

    def __post_init__(self) -> None:
        self.linear_velocity = np.array(self.linear_velocity, dtype=float)
        self.angular_velocity = np.array(self.angular_velocity, dtype=float)

    def update(self, delta_time: float) -> None:
        """Advance position and rotation by ``delta_time`` seconds."""
        self.transform.position = (
            self.transform.position + self.linear_velocity * delta_time
        )
        delta = quat_from_euler(np.radians(self.angular_velocity * delta_time))
        self.transform.rotation = quat_normalize(
            quat_multiply(delta, self.transform.rotation)
        )

    def apply_impulse(self, impulse) -> None:
        """Change velocity by ``impulse / mass``; ignored for non-positive mass."""
        if self.mass > 0.0:
            self.linear_velocity = (
                self.linear_velocity + np.asarray(impulse, dtype=float) / self.mass
            )

    def apply_force(self, force, delta_time: float) -> None:
        """Accelerate by ``force / mass`` for ``delta_time``; ignored for non-positive mass."""
        if self.mass > 0.0:
            acceleration = np.asarray(force, dtype=float) / self.mass
            self.linear_velocity = self.linear_velocity + acceleration * delta_time