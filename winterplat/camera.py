"""Fly-through camera driven by Euler angles."""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

from winterplat.glmath import look_at, normalize, perspective

YAW = -90.0
PITCH = 0.0
SPEED = 2.5
SENSITIVITY = 0.1
ZOOM = 45.0
ASPECT = 4.0 / 3.0
NEAR = 0.01
FAR = 100.0


class CameraMovement(Enum):
    """Keyboard-independent movement directions."""

    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"


class Camera:
    """Camera that turns input into view and projection matrices."""

    def __init__(
        self,
        position=(0.0, 0.0, 0.0),
        up=(0.0, 1.0, 0.0),
        yaw=YAW,
        pitch=PITCH,
        near=NEAR,
        far=FAR,
    ):
        self.position = np.array(position, dtype=float)
        self.world_up = np.array(up, dtype=float)
        self.front = np.array([0.0, 0.0, -1.0])
        self.right = np.zeros(3)
        self.up = np.zeros(3)
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.movement_speed = SPEED
        self.mouse_sensitivity = SENSITIVITY
        self.zoom = ZOOM
        self.aspect = ASPECT
        self.near = float(near)
        self.far = float(far)
        self._update_vectors()

    def view_matrix(self) -> np.ndarray:
        """View matrix looking along the camera's front vector."""
        return look_at(self.position, self.position + self.front, self.up)

    def projection_matrix(self) -> np.ndarray:
        """Perspective matrix using the zoom value as field of view."""
        return perspective(self.zoom, self.aspect, self.near, self.far)

    def process_keyboard(self, direction: CameraMovement, delta_time: float) -> None:
        """Move the camera in ``direction`` for ``delta_time`` seconds."""
        velocity = self.movement_speed * delta_time
        if direction is CameraMovement.FORWARD:
            self.position = self.position + self.front * velocity
        elif direction is CameraMovement.BACKWARD:
            self.position = self.position - self.front * velocity
        elif direction is CameraMovement.LEFT:
            self.position = self.position - self.right * velocity
        elif direction is CameraMovement.RIGHT:
            self.position = self.position + self.right * velocity

    def process_mouse_movement(
        self, xoffset: float, yoffset: float, constrain_pitch: bool = True
    ) -> None:
        """Turn the camera by a mouse offset."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -89.0), 89.0)
        self._update_vectors()

    def process_mouse_scroll(self, yoffset: float) -> None:
        """Zoom by a scroll-wheel offset, kept within [1, 45]."""
        self.zoom = min(max(self.zoom - yoffset, 1.0), 45.0)

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = normalize(front)
        self.right = normalize(np.cross(self.front, self.world_up))
        self.up = normalize(np.cross(self.right, self.front))