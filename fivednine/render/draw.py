"""Primitive draw calls."""

from __future__ import annotations

import enum

from fivednine.render.buffers import IndexBuffer


class DrawMode(enum.Enum):
    """How vertices are assembled into primitives."""

    POINTS = 1
    LINE_STRIP = 2
    LINE_LOOP = 3
    LINES = 4
    TRIANGLES = 5
    TRIANGLE_STRIP = 6
    TRIANGLE_FAN = 7


# Primitive enumerants fixed by the GL specification.
_GL_MODES = {
    DrawMode.POINTS: 0x0000,
    DrawMode.LINES: 0x0001,
    DrawMode.LINE_LOOP: 0x0002,
    DrawMode.LINE_STRIP: 0x0003,
    DrawMode.TRIANGLES: 0x0004,
    DrawMode.TRIANGLE_STRIP: 0x0005,
    DrawMode.TRIANGLE_FAN: 0x0006,
}


def gl_draw_mode(mode: DrawMode) -> int:
    """GL primitive enumerant for ``mode``; raises ValueError for anything else."""
    if not isinstance(mode, DrawMode):
        raise ValueError(f"invalid draw mode: {mode!r}")
    return _GL_MODES[mode]


def _require_count(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} cannot be negative: {value}")
    return value


def draw_elements(index_buffer: IndexBuffer, mode: DrawMode) -> None:
    """Draw the vertices named by ``index_buffer``."""
    gl_mode = gl_draw_mode(mode)
    from pyglet import gl

    handle = index_buffer.handle
    gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, handle)
    gl.glDrawElements(gl_mode, index_buffer.count, gl.GL_UNSIGNED_INT, None)
    gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, 0)


def draw_arrays(vertex_count: int, mode: DrawMode) -> None:
    """Draw the first ``vertex_count`` vertices in order."""
    gl_mode = gl_draw_mode(mode)
    _require_count(vertex_count, "vertex count")
    from pyglet import gl

    gl.glDrawArrays(gl_mode, 0, vertex_count)


def draw_elements_instanced(index_buffer: IndexBuffer, mode: DrawMode, instance_count: int) -> None:
    """Indexed draw repeated ``instance_count`` times."""
    gl_mode = gl_draw_mode(mode)
    _require_count(instance_count, "instance count")
    from pyglet import gl

    handle = index_buffer.handle
    gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, handle)
    gl.glDrawElementsInstanced(
        gl_mode, index_buffer.count, gl.GL_UNSIGNED_INT, None, instance_count
    )
    gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, 0)


def draw_arrays_instanced(vertex_count: int, mode: DrawMode, instance_count: int) -> None:
    """Array draw repeated ``instance_count`` times."""
    gl_mode = gl_draw_mode(mode)
    _require_count(vertex_count, "vertex count")
    _require_count(instance_count, "instance count")
    from pyglet import gl

    gl.glDrawArraysInstanced(gl_mode, 0, vertex_count, instance_count)