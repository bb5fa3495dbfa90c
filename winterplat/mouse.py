"""Mouse buttons and cursor tracking."""

from __future__ import annotations

from enum import IntEnum


class MouseButton(IntEnum):
    """Mouse button codes."""

    BUTTON_1 = 0
    BUTTON_2 = 1
    BUTTON_3 = 2
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7
    LAST = 0
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Mouse:
    """Tracks the cursor position and its movement between updates.

    ``window`` must offer ``set_mouse_position(x, y)``.
    """

    def __init__(self, window):
        self._window = window
        self.delta = (0.0, 0.0)
        self.position = (0.0, 0.0)
        self.need_enter_window = True

    def set_position(self, x, y) -> None:
        """Move the cursor inside the attached window."""
        self._window.set_mouse_position(x, y)

    def update(self, x, y) -> None:
        """Record a new cursor position; y movement is reported upwards-positive."""
        x = float(x)
        y = float(y)
        if self.need_enter_window:
            self.position = (x, y)
            self.need_enter_window = False
        old_x, old_y = self.position
        self.delta = (x - old_x, old_y - y)
        self.position = (x, y)