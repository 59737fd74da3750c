"""A selectable game shown as a textured quad."""

from __future__ import annotations

import numpy as np

from fivednine import log
from fivednine.log import LogVerbosity, LogZone
from fivednine.render.mesh import Mesh, MeshUniformValue
from fivednine.render.shader import ShaderError
from fivednine.render.uniform import UniformType

# 3---2
# |   |
# 0---1
_VERTICES = ((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0))
_UVS = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))
# Counter-clockwise winding.
_INDICES = (0, 1, 2, 0, 2, 3)

_MAX_VERTICES = 4
_MAX_INDICES = 6


class GameCard:
    """A unit quad scaled, placed and textured to show one game."""

    def __init__(self, shader, mesh: Mesh | None = None) -> None:
        self._mesh = mesh if mesh is not None else Mesh(_MAX_VERTICES, _MAX_INDICES)
        self._mesh.model_matrix = np.identity(4)
        try:
            self._mesh.set_shader(shader)
        except ShaderError as exc:
            log.log_line(LogZone.RENDER, LogVerbosity.ERROR, "%s", str(exc))
        self._mesh.set_positions(_VERTICES)
        self._mesh.set_texture_coordinates(_UVS)
        self._mesh.set_indices(_INDICES)
        self._uniform_values: list[MeshUniformValue] = []

    @property
    def mesh(self) -> Mesh:
        return self._mesh

    @property
    def uniform_values(self) -> tuple[MeshUniformValue, ...]:
        return tuple(self._uniform_values)

    def draw(self, projection, view) -> None:
        self._mesh.set_mesh_uniforms(self._uniform_values)
        self._mesh.draw(projection, view)

    @property
    def position(self) -> np.ndarray:
        return np.array(self._mesh.model_matrix[:3, 3], dtype=float)

    def set_position(self, x: float, y: float, z: float) -> None:
        self._mesh.model_matrix[:3, 3] = (x, y, z)
        self._mesh.model_matrix[3, 3] = 1.0

    def set_dimensions(self, width: float, height: float) -> None:
        """Scale the quad's x and y axes by ``width`` and ``height``."""
        self._mesh.model_matrix[0, 0] *= width
        self._mesh.model_matrix[1, 1] *= height

    @property
    def texture(self):
        return self._mesh.texture

    @texture.setter
    def texture(self, texture) -> None:
        self._mesh.texture = texture

    def set_uniform_value(self, name: str, value: float) -> None:
        """Set a float uniform applied on every draw, adding it if new."""
        existing = next((u for u in self._uniform_values if u.name == name), None)
        if existing is None:
            self._uniform_values.append(MeshUniformValue(name, UniformType.FLOAT, value))
        else:
            existing.value = value