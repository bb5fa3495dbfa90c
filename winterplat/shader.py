"""GLSL shader programs built from source files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

_LOG_SIZE = 1024
_SEPARATOR = "\n -- --------------------------------------------------- -- "


class ShaderError(RuntimeError):
    """Raised when shader sources cannot be read, compiled or linked."""


def read_source(path) -> str:
    """Return the text of the shader file at ``path``."""
    try:
        return Path(path).read_text()
    except (OSError, UnicodeDecodeError) as exc:
        raise ShaderError(f"ERROR::SHADER::FILE_NOT_SUCCESSFULLY_READ: {exc}") from exc


@dataclass
class _Handle:
    """A shader stage or program as seen by the backend."""

    kind: str = "PROGRAM"
    obj: object = None
    log: str = ""
    parts: list = field(default_factory=list)


class _PygletGL:
    """The subset of OpenGL that shaders need, built on pyglet's shader objects."""

    def __init__(self):
        from pyglet.graphics import shader as pyglet_shader

        self._module = pyglet_shader
        self._errors = (pyglet_shader.ShaderException, KeyError)
        self._kinds = {
            "VERTEX": "vertex",
            "FRAGMENT": "fragment",
            "GEOMETRY": "geometry",
        }

    def create_shader(self, kind: str) -> _Handle:
        return _Handle(kind=kind)

    def compile_shader(self, shader: _Handle, code: str) -> None:
        try:
            shader.obj = self._module.Shader(code, self._kinds[shader.kind])
        except self._module.ShaderException as exc:
            shader.obj = None
            shader.log = str(exc)[: _LOG_SIZE - 1]

    def compile_status(self, shader: _Handle) -> bool:
        return shader.obj is not None

    def shader_log(self, shader: _Handle) -> str:
        return shader.log

    def create_program(self) -> _Handle:
        return _Handle()

    def attach_shader(self, program: _Handle, shader: _Handle) -> None:
        program.parts.append(shader.obj)

    def link_program(self, program: _Handle) -> None:
        try:
            program.obj = self._module.ShaderProgram(*program.parts)
        except self._module.ShaderException as exc:
            program.obj = None
            program.log = str(exc)[: _LOG_SIZE - 1]

    def link_status(self, program: _Handle) -> bool:
        return program.obj is not None

    def program_log(self, program: _Handle) -> str:
        return program.log

    def delete_shader(self, shader: _Handle) -> None:
        if shader.obj is not None:
            shader.obj.delete()
            shader.obj = None

    def use_program(self, program: _Handle) -> None:
        program.obj.use()

    def uniform_location(self, program: _Handle, name: str):
        return (program, name)

    def _assign(self, location, value) -> None:
        program, name = location
        try:
            program.obj[name] = value
        except self._errors:
            # An unknown uniform is ignored, as OpenGL does for location -1.
            pass

    def uniform_int(self, location, value: int) -> None:
        self._assign(location, value)

    def uniform_float(self, location, *values: float) -> None:
        self._assign(location, values[0] if len(values) == 1 else tuple(values))

    def uniform_matrix(self, size: int, location, values: list) -> None:
        self._assign(location, tuple(values))


def _check_compile(gl, shader, kind: str) -> None:
    if not gl.compile_status(shader):
        log = gl.shader_log(shader)
        raise ShaderError(
            f"ERROR::SHADER_COMPILATION_ERROR of type: {kind}\n{log}{_SEPARATOR}"
        )


def _check_link(gl, program) -> None:
    if not gl.link_status(program):
        log = gl.program_log(program)
        raise ShaderError(
            f"ERROR::PROGRAM_LINKING_ERROR of type: PROGRAM\n{log}{_SEPARATOR}"
        )


def _build_program(gl, vertex_code: str, fragment_code: str, geometry_code=None):
    """Compile the stages, link them into a program and return it."""
    stages = [("VERTEX", vertex_code), ("FRAGMENT", fragment_code)]
    if geometry_code is not None:
        stages.append(("GEOMETRY", geometry_code))
    shaders = []
    try:
        for kind, code in stages:
            shader = gl.create_shader(kind)
            shaders.append(shader)
            gl.compile_shader(shader, code)
            _check_compile(gl, shader, kind)
        program = gl.create_program()
        for shader in shaders:
            gl.attach_shader(program, shader)
        gl.link_program(program)
        _check_link(gl, program)
        return program
    finally:
        for shader in shaders:
            gl.delete_shader(shader)


def _vector(args: tuple, size: int) -> list:
    values = np.asarray(args[0] if len(args) == 1 else args, dtype=float).ravel()
    if values.shape != (size,):
        raise ValueError(f"expected {size} components, got {values.size}")
    return [float(v) for v in values]


class Shader:
    """A linked shader program with helpers for setting uniforms."""

    def __init__(self, vertex_path, fragment_path, geometry_path=None):
        vertex_code = read_source(vertex_path)
        fragment_code = read_source(fragment_path)
        geometry_code = read_source(geometry_path) if geometry_path is not None else None
        self._gl = _PygletGL()
        self.id = _build_program(self._gl, vertex_code, fragment_code, geometry_code)

    @classmethod
    def _from_program(cls, gl, program) -> "Shader":
        shader = cls.__new__(cls)
        shader._gl = gl
        shader.id = program
        return shader

    def _location(self, name: str):
        return self._gl.uniform_location(self.id, name)

    def use(self) -> None:
        """Make this program current."""
        self._gl.use_program(self.id)

    def set_bool(self, name: str, value) -> None:
        self._gl.uniform_int(self._location(name), int(bool(value)))

    def set_int(self, name: str, value) -> None:
        self._gl.uniform_int(self._location(name), int(value))

    def set_float(self, name: str, value) -> None:
        self._gl.uniform_float(self._location(name), float(value))

    def set_vec2(self, name: str, *args) -> None:
        """Set a vec2 from one sequence or two numbers."""
        self._gl.uniform_float(self._location(name), *_vector(args, 2))

    def set_vec3(self, name: str, *args) -> None:
        """Set a vec3 from one sequence or three numbers."""
        self._gl.uniform_float(self._location(name), *_vector(args, 3))

    def set_vec4(self, name: str, *args) -> None:
        """Set a vec4 from one sequence or four numbers."""
        self._gl.uniform_float(self._location(name), *_vector(args, 4))

    def _set_matrix(self, name: str, mat, size: int) -> None:
        m = np.asarray(mat, dtype=float)
        if m.shape != (size, size):
            raise ValueError(f"expected a {size}x{size} matrix, got shape {m.shape}")
        values = [float(v) for v in m.flatten(order="F")]
        self._gl.uniform_matrix(size, self._location(name), values)

    def set_mat2(self, name: str, mat) -> None:
        self._set_matrix(name, mat, 2)

    def set_mat3(self, name: str, mat) -> None:
        self._set_matrix(name, mat, 3)

    def set_mat4(self, name: str, mat) -> None:
        self._set_matrix(name, mat, 4)