"""A demo game: one triangle and a camera moved with WASD."""

from __future__ import annotations

import sys

import numpy as np

from winterplat.camera import Camera
from winterplat.gametime import GameTime
from winterplat.glmath import normalize
from winterplat.shader import Shader
from winterplat.window import Window

# Key symbols as reported by the windowing layer.
_KEY_ESCAPE = 0xFF1B
_KEY_W = 0x77
_KEY_A = 0x61
_KEY_S = 0x73
_KEY_D = 0x64

_VERTICES = (0.0, 0.5, 0.0, -0.5, -0.5, 0.0, 0.5, -0.5, 0.0)


class _Triangle:
    """A vertex array holding one triangle."""

    def __init__(self, vertices):
        from pyglet import gl
        from pyglet.graphics.vertexarray import VertexArray
        from pyglet.graphics.vertexbuffer import BufferObject

        self._gl = gl
        data = np.asarray(vertices, dtype=np.float32).tobytes()
        self.vao = VertexArray()
        self.vao.bind()
        self.vbo = BufferObject(len(data), usage=gl.GL_STATIC_DRAW)
        self.vbo.set_data(data)
        self.vbo.bind()
        stride = 3 * np.dtype(np.float32).itemsize
        gl.glVertexAttribPointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, 0)
        gl.glEnableVertexAttribArray(0)

    def draw(self) -> None:
        self.vao.bind()
        self._gl.glDrawArrays(self._gl.GL_TRIANGLES, 0, 3)

    def delete(self) -> None:
        self.vbo.delete()
        self.vao.delete()


class MyGame(Window):
    """Draws a triangle and flies the camera with WASD; Escape quits."""

    def __init__(self, hints=None, clock=None):
        super().__init__(hints, clock)
        self.shader = None
        self.camera = Camera()
        self._mesh = None

    def on_init(self) -> None:
        from pyglet import gl

        gl.glClearColor(0.1, 0.2, 0.3, 1.0)
        print("Initialized MyGame window")
        self._mesh = _Triangle(_VERTICES)
        self.shader = Shader("Shaders/test.vert", "Shaders/test.frag")
        self.camera = Camera()
        self.set_window_size(self.hints.width - 1, self.hints.height)
        self.set_window_size(self.hints.width, self.hints.height)

    def on_update(self, gt: GameTime) -> None:
        """Nothing changes over time in this scene."""

    def on_render(self) -> None:
        from pyglet import gl

        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        self.shader.use()
        self.shader.set_mat4("model", np.identity(4))
        self.shader.set_mat4("view", self.camera.view_matrix())
        self.shader.set_mat4("projection", self.camera.projection_matrix())
        self._mesh.draw()

    def on_input(self) -> None:
        if self.get_key(_KEY_ESCAPE):
            self.set_should_close(True)

    def process_input(self, gt: GameTime) -> None:
        camera = self.camera
        dt = gt.delta
        if self.get_key(_KEY_W):
            camera.position = camera.position + camera.movement_speed * camera.front * dt
        if self.get_key(_KEY_S):
            camera.position = camera.position - camera.movement_speed * camera.front * dt
        sideways = normalize(np.cross(camera.front, camera.up)) * camera.movement_speed * dt
        if self.get_key(_KEY_A):
            camera.position = camera.position - sideways
        if self.get_key(_KEY_D):
            camera.position = camera.position + sideways

    def on_resize(self, width: int, height: int) -> None:
        if height != 0:
            self.camera.aspect = width / height
        self.set_viewport(width, height)

    def close(self) -> None:
        if self._mesh is not None and self._native is not None:
            self._mesh.delete()
            self._mesh = None
        self.shader = None
        super().close()


def main(argv=None) -> int:
    """Run the game; report a fatal error and return 1 on failure."""
    try:
        with MyGame() as game:
            game.run()
    except Exception as exc:
        print(f"Fatal error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())