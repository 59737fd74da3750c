"""Typed shader uniform uploads."""

from __future__ import annotations

import enum
from typing import Iterable

import numpy as np

from fivednine import log
from fivednine.log import LogZone


class UniformType(enum.Enum):
    """Kinds of uniform value that can be sent to a shader."""

    INT = enum.auto()
    IVEC2 = enum.auto()
    IVEC4 = enum.auto()
    FLOAT = enum.auto()
    VEC2 = enum.auto()
    VEC3 = enum.auto()
    QUAT = enum.auto()
    MAT4 = enum.auto()

    @property
    def components(self) -> int:
        """Number of scalars in one value of this type."""
        return _LAYOUT[self][0]

    @property
    def is_integer(self) -> bool:
        return _LAYOUT[self][1]


_LAYOUT = {
    UniformType.INT: (1, True),
    UniformType.IVEC2: (2, True),
    UniformType.IVEC4: (4, True),
    UniformType.FLOAT: (1, False),
    UniformType.VEC2: (2, False),
    UniformType.VEC3: (3, False),
    UniformType.QUAT: (4, False),
    UniformType.MAT4: (16, False),
}

_GL_FUNCTIONS = {
    UniformType.INT: "glUniform1iv",
    UniformType.IVEC2: "glUniform2iv",
    UniformType.IVEC4: "glUniform4iv",
    UniformType.FLOAT: "glUniform1fv",
    UniformType.VEC2: "glUniform2fv",
    UniformType.VEC3: "glUniform3fv",
    UniformType.QUAT: "glUniform4fv",
}


def _require_type(uniform_type) -> UniformType:
    if not isinstance(uniform_type, UniformType):
        log.log_line_and_fail(LogZone.RENDER, "Unexpected uniform type!")
    return uniform_type


def pack_uniform_values(uniform_type: UniformType, values: Iterable) -> list:
    """Flatten ``values`` into the scalar sequence GL expects.

    Matrices are 4x4 in mathematical row-major layout and are emitted
    column-major; quaternions are given as (x, y, z, w).
    """
    uniform_type = _require_type(uniform_type)
    packed: list = []
    for value in values:
        if uniform_type is UniformType.MAT4:
            matrix = np.asarray(value, dtype=float)
            if matrix.shape != (4, 4):
                raise ValueError(f"mat4 uniform needs a 4x4 matrix, got shape {matrix.shape}")
            flat = matrix.T.ravel()
        else:
            flat = np.atleast_1d(np.asarray(value)).ravel()
            if flat.size != uniform_type.components:
                raise ValueError(
                    f"{uniform_type.name} uniform needs {uniform_type.components} "
                    f"components, got {flat.size}"
                )
        if uniform_type.is_integer:
            packed.extend(int(x) for x in flat)
        else:
            packed.extend(float(x) for x in flat)
    return packed


def set_uniform_array(location: int, uniform_type: UniformType, values) -> None:
    """Upload a sequence of values of one type to the uniform at ``location``."""
    values = list(values)
    data = pack_uniform_values(uniform_type, values)

    from pyglet import gl

    element = gl.GLint if uniform_type.is_integer else gl.GLfloat
    array = (element * len(data))(*data)
    if uniform_type is UniformType.MAT4:
        gl.glUniformMatrix4fv(location, len(values), gl.GL_FALSE, array)
    else:
        getattr(gl, _GL_FUNCTIONS[uniform_type])(location, len(values), array)


def set_uniform(location: int, uniform_type: UniformType, value) -> None:
    """Upload a single value to the uniform at ``location``."""
    set_uniform_array(location, uniform_type, [value])