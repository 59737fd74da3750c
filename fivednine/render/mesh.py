"""Textured, indexed triangle meshes drawn with a shader."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np

from fivednine import log
from fivednine.log import LogVerbosity, LogZone
from fivednine.render.buffers import IndexBuffer, VertexAttribute
from fivednine.render.draw import DrawMode, draw_elements
from fivednine.render.shader import ShaderError
from fivednine.render.uniform import UniformType, set_uniform

MAX_MESHES = 8
MAX_VERTICES = 32
MAX_INDICES = 64
MAX_MESH_UNIFORMS = 8

_MAX_UNIFORM_NAME_LENGTH = 255
_POSITION_SLOT = 0
_TEXTURE_COORDINATE_SLOT = 1
_REQUIRED_UNIFORMS = ("model", "view", "projection", "sampler")
_MATRIX_UNIFORMS = ("model", "view", "projection")


@dataclass
class MeshUniformValue:
    """A named uniform value applied when the mesh is drawn.

    ``location`` caches the shader lookup for the name.
    """

    name: str
    uniform_type: UniformType
    value: Any
    location: int | None = None

    def __post_init__(self) -> None:
        self.name = self.name[:_MAX_UNIFORM_NAME_LENGTH]


class Mesh:
    """Vertex positions, texture coordinates and indices drawn as triangles."""

    def __init__(self, max_vertex_count: int = MAX_VERTICES, max_index_count: int = MAX_INDICES) -> None:
        if max_vertex_count < 0 or max_index_count < 0:
            raise ValueError("mesh capacities cannot be negative")
        self.max_vertex_count = max_vertex_count
        self.max_index_count = max_index_count

        self._positions = VertexAttribute(3)
        self._texture_coordinates = VertexAttribute(2)
        self._indices = IndexBuffer()
        self._vertex_array: int | None = None

        self._uniform_values: list[MeshUniformValue] = []
        self._shader = None
        self._locations: dict[str, int] = {}

        self.model_matrix = np.identity(4)
        self.texture = None
        self.visible = True
        self._dirty = True

    @property
    def positions(self) -> np.ndarray:
        return self._positions.data

    @property
    def texture_coordinates(self) -> np.ndarray:
        return self._texture_coordinates.data

    @property
    def indices(self) -> np.ndarray:
        return self._indices.data

    @property
    def shader(self):
        return self._shader

    @property
    def uniform_values(self) -> tuple[MeshUniformValue, ...]:
        return tuple(self._uniform_values)

    @property
    def is_dirty(self) -> bool:
        """True while the GPU copy of the vertex data needs refreshing."""
        return self._dirty

    def set_positions(self, positions) -> None:
        self._positions.set(positions)
        self._dirty = True

    def set_texture_coordinates(self, uvs) -> None:
        self._texture_coordinates.set(uvs)
        self._dirty = True

    def set_indices(self, indices) -> None:
        self._indices.set(indices)
        self._dirty = True

    def set_shader(self, shader) -> None:
        """Use ``shader``; raises ShaderError if it lacks a required uniform.

        The shader is kept even when a uniform is missing; drawing then
        proceeds only if the model, view and projection uniforms were found.
        """
        if shader is None:
            raise ShaderError("A mesh requires a shader")
        self._shader = shader
        self._locations = {}
        for name in _REQUIRED_UNIFORMS:
            location = shader.get_uniform(name)
            if location is None:
                raise ShaderError(
                    f"Could not retrieve expected uniform '{name}' from shader '{shader.name}'"
                )
            self._locations[name] = location

    def set_mesh_uniforms(self, values: Iterable[MeshUniformValue]) -> None:
        """Replace the uniform values applied on each draw with copies of ``values``."""
        self._uniform_values = [dataclasses.replace(value) for value in values]

    def mark_dirty(self) -> None:
        """Force the vertex data to be uploaded again on the next draw."""
        self._dirty = True

    def copy(self) -> "Mesh":
        """An independent mesh with the same data, shader, texture and settings."""
        other = Mesh(self.max_vertex_count, self.max_index_count)
        other.set_positions(self.positions)
        other.set_texture_coordinates(self.texture_coordinates)
        other.set_indices(self.indices)
        other.set_mesh_uniforms(self._uniform_values)
        other._shader = self._shader
        other._locations = dict(self._locations)
        other.model_matrix = np.array(self.model_matrix, dtype=float, copy=True)
        other.texture = self.texture
        other.visible = self.visible
        other._dirty = True
        return other

    def _ensure_vertex_array(self) -> int:
        from pyglet import gl

        if self._vertex_array is None:
            name = gl.GLuint()
            gl.glGenVertexArrays(1, name)
            self._vertex_array = int(name.value)
        return self._vertex_array

    def _apply_uniform_values(self) -> None:
        for uniform_value in self._uniform_values:
            if uniform_value.location is None:
                uniform_value.location = self._shader.get_uniform(uniform_value.name)
            if uniform_value.location is not None:
                set_uniform(uniform_value.location, uniform_value.uniform_type, uniform_value.value)
            else:
                log.log_line(
                    LogZone.RENDER,
                    LogVerbosity.ERROR,
                    "Failed to retrieve a location for uniform named '%s' in shader '%s'",
                    uniform_value.name,
                    self._shader.name,
                )

    def draw(self, projection, view) -> None:
        """Draw with the given projection and view matrices, if visible."""
        if not self.visible:
            return

        shader = self._shader
        if shader is None or any(self._locations.get(name) is None for name in _MATRIX_UNIFORMS):
            log.log_line(
                LogZone.RENDER,
                LogVerbosity.WARNING,
                "Attempting to render mesh with an improper or invalid shader.",
            )
            return

        from pyglet import gl

        shader.bind()
        self._apply_uniform_values()
        set_uniform(self._locations["model"], UniformType.MAT4, self.model_matrix)
        set_uniform(self._locations["view"], UniformType.MAT4, view)
        set_uniform(self._locations["projection"], UniformType.MAT4, projection)

        texture = self.texture
        if texture is not None:
            sampler = self._locations.get("sampler")
            if sampler is not None:
                set_uniform(sampler, UniformType.INT, 0)
            texture.bind()

        gl.glBindVertexArray(self._ensure_vertex_array())

        if self._dirty:
            self._positions.set(self._positions.data)
            self._texture_coordinates.set(self._texture_coordinates.data)
            self._indices.set(self._indices.data)
            self._dirty = False

        self._positions.bind_to(_POSITION_SLOT)
        self._texture_coordinates.bind_to(_TEXTURE_COORDINATE_SLOT)

        draw_elements(self._indices, DrawMode.TRIANGLES)

        self._positions.unbind_from(_POSITION_SLOT)
        self._texture_coordinates.unbind_from(_TEXTURE_COORDINATE_SLOT)

        shader.unbind()
        gl.glBindVertexArray(0)

        if texture is not None:
            texture.unbind()