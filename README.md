# winterplat

A small framework for OpenGL games built on pyglet and numpy. It provides
a window that runs a game loop, a fly-through camera, transforms, simple
rigid-body motion, mouse tracking and shader programs loaded from files.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Running the demo

    winterplat

This opens a window and draws one triangle. Use W, A, S and D to move the
camera and Escape to quit. The shader sources are read from
`Shaders/test.vert` and `Shaders/test.frag`, relative to the directory you
start from. If anything fails, the command prints `Fatal error: ...` to
standard error and exits with status 1.

## Writing a game

Subclass `winterplat.window.Window` and override the hooks you need.
`run()` calls `on_init()` once, installs the resize callback, shows the
window and then, until `should_close()` is true, does the following on each
frame: poll events, `on_input()`, `process_input(gt)`, `on_update(gt)`,
`on_render()` and a buffer swap. `on_resize(width, height)` is called when
the framebuffer changes size.

`gt` is a `winterplat.gametime.GameTime`. It carries `delta`, the number of
seconds since the previous frame, and `total`, the number of seconds since
the window's `Timer` was created. Pass `clock=` to `Window` to supply your
own clock function. The default is `time.perf_counter`.

```python
from winterplat.camera import Camera, CameraMovement
from winterplat.window import Window


class Demo(Window):
    def on_init(self):
        self.camera = Camera()

    def process_input(self, gt):
        self.camera.process_keyboard(CameraMovement.FORWARD, gt.delta)

    def on_resize(self, width, height):
        self.camera.aspect = width / height


with Demo() as demo:
    demo.run()
```

`WindowHints.default()` describes a hidden 1080x720 window that requests an
OpenGL 4.6 forward-compatible context. Windows can be used as context
managers, and `close()` destroys the window. `get_key(key)` takes a pyglet
key symbol and `get_mouse_button(button)` takes a
`winterplat.mouse.MouseButton`. Both return whether the key or button is
held down. The window also provides `cursor_pos()`, `window_size()`,
`set_window_size()`, `set_cursor_mode()` and `cursor_mode()` (see
`CursorMode`), `show()`, `hide()` and `set_should_close()`.

## Other modules

- `winterplat.camera.Camera` turns keyboard, mouse-movement and scroll input
  into `view_matrix()` and `projection_matrix()`. Pitch is clamped to ±89
  degrees and zoom to the range [1, 45].
- `winterplat.transform.Transform` holds a position, a rotation stored as a
  `(w, x, y, z)` quaternion, and a scale. `matrix()` returns the model
  matrix. Rotations can be set, read and applied as Euler angles in degrees.
- `winterplat.physics.PhysicsObject` moves a transform by its linear
  velocity and by its angular velocity, which is given in degrees per
  second. `apply_force` and `apply_impulse` change the velocity. Both are
  ignored when the mass is not positive.
- `winterplat.mouse.Mouse` tracks the cursor position and reports the
  movement since the last update. Upward movement gives a positive y delta.
- `winterplat.glmath` provides the vector, matrix and quaternion helpers
  the other modules use: `normalize`, `look_at`, `perspective`,
  `translation_matrix`, `scale_matrix` and the `quat_*` functions. Matrices
  are 4x4 numpy arrays that act on column vectors.
- `winterplat.shader.Shader` compiles and links a program from vertex,
  fragment and optional geometry source files, and sets uniforms with
  `set_bool`, `set_int`, `set_float`, `set_vec2`, `set_vec3`, `set_vec4` and
  `set_mat2`, `set_mat3` and `set_mat4`. An unreadable file, a compile error
  or a link error raises `ShaderError`.

## What it does not do

The package contains no game content beyond the one-triangle demo. It has
no levels, sprites, collision detection or audio. Physics covers only
velocity, forces and impulses on a single object.