"""Shader programs and the uniform variables sent to them."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from numbers import Integral, Real

GL_FRAGMENT_SHADER = 0x8B30
GL_VERTEX_SHADER = 0x8B31
GL_GEOMETRY_SHADER = 0x8DD9

_SHADER_FILES = {
    GL_VERTEX_SHADER: "vertex.glsl",
    GL_GEOMETRY_SHADER: "geometry.glsl",
    GL_FRAGMENT_SHADER: "fragment.glsl",
}

_STAGE_NAMES = {
    GL_VERTEX_SHADER: "vertex",
    GL_GEOMETRY_SHADER: "geometry",
    GL_FRAGMENT_SHADER: "fragment",
}

_INT_RANGE = (-(2**31), 2**31 - 1)
_UINT_RANGE = (0, 2**32 - 1)

# Driver logs start with "ERROR: 0"; the error message drops that prefix.
_LOG_PREFIX_LENGTH = len("ERROR: 0")


class ShaderError(RuntimeError):
    """A shader failed to compile or a program failed to link."""


class UniformKind(Enum):
    """GLSL uniform types, described by scalar suffix and component count."""

    INT = ("i", 1)
    UINT = ("ui", 1)
    FLOAT = ("f", 1)
    VEC2 = ("f", 2)
    VEC3 = ("f", 3)
    VEC4 = ("f", 4)
    IVEC2 = ("i", 2)
    IVEC3 = ("i", 3)
    IVEC4 = ("i", 4)
    UVEC2 = ("ui", 2)
    UVEC3 = ("ui", 3)
    UVEC4 = ("ui", 4)

    @property
    def scalar(self) -> str:
        return self.value[0]

    @property
    def components(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class UniformValue:
    """A typed value for a uniform variable."""

    kind: UniformKind
    data: tuple

    def __post_init__(self) -> None:
        values = tuple(self.data)
        if len(values) != self.kind.components:
            raise ValueError(
                f"{self.kind.name} needs {self.kind.components} components, got {len(values)}"
            )
        if self.kind.scalar == "f":
            for v in values:
                if not isinstance(v, Real):
                    raise TypeError(f"{self.kind.name} components must be numbers, got {v!r}")
            values = tuple(float(v) for v in values)
        else:
            low, high = _INT_RANGE if self.kind.scalar == "i" else _UINT_RANGE
            for v in values:
                if isinstance(v, bool) or not isinstance(v, Integral):
                    raise TypeError(f"{self.kind.name} components must be integers, got {v!r}")
                if not low <= v <= high:
                    raise ValueError(f"{self.kind.name} component {v} out of range")
            values = tuple(int(v) for v in values)
        object.__setattr__(self, "data", values)

    @staticmethod
    def int(value: int) -> UniformValue:
        return UniformValue(UniformKind.INT, (value,))

    @staticmethod
    def float(value: float) -> UniformValue:
        return UniformValue(UniformKind.FLOAT, (value,))

    @staticmethod
    def ivec2(values: Sequence[int]) -> UniformValue:
        return UniformValue(UniformKind.IVEC2, tuple(values))


def _uniform_argument(value: UniformValue):
    """The value in the form a program's uniform setter takes: scalar or tuple."""
    return value.data[0] if value.kind.components == 1 else value.data


@dataclass
class _UniformVariable:
    name: str
    location: int
    value: UniformValue
    update: bool


class UniformTable:
    """Ordered uniform variables with their locations and send flags."""

    def __init__(self) -> None:
        self._variables: list[_UniformVariable] = []

    def __len__(self) -> int:
        return len(self._variables)

    def add_var(self, name: str, location: int, value: UniformValue, send: bool) -> int:
        """Register a variable and return its index."""
        self._variables.append(_UniformVariable(name, location, value, send))
        return len(self._variables) - 1

    def set_var(self, index: int, value: UniformValue) -> None:
        """Replace the value at ``index`` and mark it to be sent."""
        if not 0 <= index < len(self._variables):
            raise IndexError(f"no uniform variable at index {index}")
        variable = self._variables[index]
        variable.value = value
        variable.update = True

    def _pending_variables(self) -> Iterator[_UniformVariable]:
        return (variable for variable in self._variables if variable.update)

    def pending(self) -> Iterator[tuple[int, UniformValue]]:
        """Yield ``(location, value)`` for every variable marked to be sent."""
        for variable in self._pending_variables():
            yield variable.location, variable.value


def _compile_error(shader_type: int, log: str) -> ShaderError:
    try:
        file_name = _SHADER_FILES[shader_type]
    except KeyError:
        return ShaderError(f"Unknown shader type: {shader_type}")
    return ShaderError(f"\nShader Error: {file_name}{log[_LOG_PREFIX_LENGTH:]}")


def _driver_log(message: str) -> str:
    """The driver's log within a compile failure message, starting at its first error."""
    start = message.find("ERROR: ")
    if start >= 0:
        return message[start:]
    return " " * _LOG_PREFIX_LENGTH + message


class Shader:
    """A linked GL program built from vertex and fragment sources."""

    def __init__(self, vertex: str, fragment: str) -> None:
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        self.uniforms = UniformTable()
        stages = [
            self._compile(vertex, GL_VERTEX_SHADER),
            self._compile(fragment, GL_FRAGMENT_SHADER),
        ]
        try:
            self._program = ShaderProgram(*stages)
        except ShaderException as exc:
            raise ShaderError(f"Failed to compile shader!\n{exc}") from exc
        finally:
            for stage in stages:
                stage.delete()

    @staticmethod
    def _compile(source: str, shader_type: int):
        from pyglet.graphics.shader import Shader as ShaderStage
        from pyglet.graphics.shader import ShaderException

        if "\0" in source:
            raise ValueError("shader source contains a NUL byte")
        if shader_type not in _STAGE_NAMES:
            raise _compile_error(shader_type, "")
        try:
            return ShaderStage(source, _STAGE_NAMES[shader_type])
        except ShaderException as exc:
            raise _compile_error(shader_type, _driver_log(str(exc))) from exc

    def _location(self, name: str) -> int:
        info = self._program.uniforms.get(name)
        if info is None:
            return -1
        if isinstance(info, dict):
            return info.get("location", -1)
        return getattr(info, "location", -1)

    def add_var(self, name: str, value: UniformValue, send: bool = True) -> int:
        """Look up the uniform ``name`` and register it; return its index."""
        return self.uniforms.add_var(name, self._location(name), value, send)

    def set_var(self, index: int, value: UniformValue) -> None:
        self.uniforms.set_var(index, value)

    def update(self) -> None:
        """Activate the program and upload every variable marked to be sent."""
        program = self._program
        program.use()
        for variable in self.uniforms._pending_variables():
            if variable.location == -1:
                # Inactive uniforms are ignored, as GL does for location -1.
                continue
            program[variable.name] = _uniform_argument(variable.value)

    def delete(self) -> None:
        """Release the GL program; safe to call more than once."""
        if self._program is not None:
            self._program.delete()
            self._program = None