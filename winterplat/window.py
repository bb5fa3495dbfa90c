"""Application window with a fixed-step game loop."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum

from winterplat.gametime import GameTime, Timer


class CursorMode(Enum):
    """How the cursor behaves inside the window."""

    NORMAL = "normal"
    HIDDEN = "hidden"
    DISABLED = "disabled"


@dataclass
class WindowHints:
    """Settings used when opening a window."""

    title: str
    flags: dict = field(default_factory=dict)
    height: int = 720
    width: int = 1080

    @classmethod
    def default(cls) -> "WindowHints":
        """An OpenGL 4.6 window of 1080x720 that starts hidden."""
        return cls(
            "GLFW Window",
            {
                "major_version": 4,
                "minor_version": 6,
                "forward_compatible": True,
                "visible": False,
            },
            720,
            1080,
        )


_PYGLET_BUTTONS = {0: 1, 1: 4, 2: 2, 3: 8, 4: 16}


class _PygletWindow:
    """Native window backed by pyglet."""

    def __init__(self, hints: WindowHints):
        try:
            import pyglet

            options = dict(hints.flags)
            visible = bool(options.pop("visible", True))
            config = pyglet.gl.Config(double_buffer=True, depth_size=24, **options)
            self._window = pyglet.window.Window(
                width=hints.width,
                height=hints.height,
                caption=hints.title,
                visible=visible,
                config=config,
            )
        except Exception as exc:
            raise RuntimeError(f"window creation failed: {exc}") from exc
        self._gl = pyglet.gl
        self._keys: set = set()
        self._buttons: set = set()
        self._cursor = (0.0, 0.0)
        self._cursor_mode = CursorMode.NORMAL
        self._should_close = False
        self._resize_callback = None
        self._window.push_handlers(
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_mouse_press=self._on_mouse_press,
            on_mouse_release=self._on_mouse_release,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
            on_close=self._on_close,
            on_resize=self._on_resize,
        )

    def _on_key_press(self, symbol, modifiers):
        self._keys.add(symbol)
        return True

    def _on_key_release(self, symbol, modifiers):
        self._keys.discard(symbol)
        return True

    def _on_mouse_press(self, x, y, button, modifiers):
        self._buttons.add(button)

    def _on_mouse_release(self, x, y, button, modifiers):
        self._buttons.discard(button)

    def _on_mouse_motion(self, x, y, dx, dy):
        self._cursor = (float(x), float(self._window.height - y))

    def _on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        self._cursor = (float(x), float(self._window.height - y))

    def _on_close(self):
        self._should_close = True
        return True

    def _on_resize(self, width, height):
        if self._resize_callback is not None:
            self._resize_callback(*self._window.get_framebuffer_size())
        return True

    def set_resize_callback(self, callback) -> None:
        self._resize_callback = callback

    def poll_events(self) -> None:
        self._window.dispatch_events()

    def swap_buffers(self) -> None:
        self._window.flip()

    def should_close(self) -> bool:
        return self._should_close

    def set_should_close(self, value: bool) -> None:
        self._should_close = bool(value)

    def set_cursor_mode(self, mode: CursorMode) -> None:
        self._window.set_exclusive_mouse(mode is CursorMode.DISABLED)
        self._window.set_mouse_visible(mode is CursorMode.NORMAL)
        self._cursor_mode = mode

    def cursor_mode(self) -> CursorMode:
        return self._cursor_mode

    def set_window_size(self, width: int, height: int) -> None:
        self._window.set_size(width, height)

    def window_size(self) -> tuple:
        return tuple(self._window.get_size())

    def set_visible(self, visible: bool) -> None:
        self._window.set_visible(visible)

    def key_pressed(self, key: int) -> bool:
        return key in self._keys

    def mouse_button_pressed(self, button: int) -> bool:
        return _PYGLET_BUTTONS.get(int(button)) in self._buttons

    def cursor_pos(self) -> tuple:
        return self._cursor

    def set_mouse_position(self, x, y) -> None:
        self._window.set_mouse_position(int(x), int(self._window.height - y))

    def set_viewport(self, width: int, height: int) -> None:
        self._gl.glViewport(0, 0, width, height)

    def close(self) -> None:
        self._window.close()


class WindowBase:
    """A window with an OpenGL context and basic input queries."""

    def __init__(self, hints=None):
        self._hints = hints if hints is not None else WindowHints.default()
        self._native = self._open_native(self._hints)

    def _open_native(self, hints: WindowHints):
        return _PygletWindow(hints)

    @property
    def hints(self) -> WindowHints:
        return self._hints

    @property
    def _window(self):
        if self._native is None:
            raise RuntimeError("window is closed")
        return self._native

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def poll_events(self) -> None:
        self._window.poll_events()

    def swap_buffers(self) -> None:
        self._window.swap_buffers()

    def set_should_close(self, value) -> None:
        self._window.set_should_close(bool(value))

    def set_cursor_mode(self, mode: CursorMode) -> None:
        self._window.set_cursor_mode(CursorMode(mode))

    def cursor_mode(self) -> CursorMode:
        return self._window.cursor_mode()

    def set_window_size(self, width: int, height: int) -> None:
        self._window.set_window_size(width, height)

    def set_mouse_position(self, x, y) -> None:
        """Move the cursor to window coordinates (origin at the top left)."""
        self._window.set_mouse_position(x, y)

    def set_viewport(self, width: int, height: int) -> None:
        """Render into the rectangle from the origin to ``(width, height)``."""
        self._window.set_viewport(width, height)

    def show(self) -> None:
        self._window.set_visible(True)

    def hide(self) -> None:
        self._window.set_visible(False)

    def get_key(self, key: int) -> bool:
        """Whether ``key`` is held down."""
        return self._window.key_pressed(key)

    def get_mouse_button(self, button: int) -> bool:
        """Whether mouse ``button`` is held down."""
        return self._window.mouse_button_pressed(button)

    def cursor_pos(self) -> tuple:
        return self._window.cursor_pos()

    def window_size(self) -> tuple:
        return self._window.window_size()

    def should_close(self) -> bool:
        return self._window.should_close()

    def close(self) -> None:
        """Destroy the window; calling it again does nothing."""
        if self._native is not None:
            self._native.close()
            self._native = None


class Window(WindowBase):
    """A window that runs the game loop and calls overridable hooks."""

    def __init__(self, hints=None, clock=None):
        super().__init__(hints)
        self.timer = Timer(clock if clock is not None else time.perf_counter)

    def on_init(self) -> None:
        """Called once before the loop starts."""

    def on_update(self, gt: GameTime) -> None:
        """Called every frame after input handling."""

    def process_input(self, gt: GameTime) -> None:
        """Called every frame with the frame's timing."""

    def on_render(self) -> None:
        """Called every frame to draw."""

    def on_input(self) -> None:
        """Called every frame after events are polled."""

    def on_resize(self, width: int, height: int) -> None:
        """Called when the framebuffer changes size."""

    def _set_callbacks(self) -> None:
        self._window.set_resize_callback(self.on_resize)

    def run(self) -> None:
        """Initialise, show the window and loop until it should close."""
        self.on_init()
        self._set_callbacks()
        self.show()
        while not self.should_close():
            self.poll_events()
            self.on_input()
            gametime = self.timer.tick()
            self.process_input(gametime)
            self.on_update(gametime)
            self.on_render()
            self.swap_buffers()