"""A translating camera and the view/projection matrix helpers it needs.

Matrices are 4x4 numpy arrays in row-major mathematical layout, applied to
column vectors as ``matrix @ vector``.
"""

from __future__ import annotations

import numpy as np

_TRANSLATION_SPEED = 0.01


def _vec3(value) -> np.ndarray:
    return np.array(value, dtype=float).reshape(3)


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye, center, up = _vec3(eye), _vec3(center), _vec3(up)
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    matrix = np.identity(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -np.dot(s, eye)
    matrix[1, 3] = -np.dot(u, eye)
    matrix[2, 3] = np.dot(f, eye)
    return matrix


def ortho(left, right, bottom, top, near, far) -> np.ndarray:
    """Orthographic projection onto the [-1, 1] clip cube."""
    matrix = np.identity(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (far - near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(far + near) / (far - near)
    return matrix


class Camera:
    """Camera that drifts its translation towards a target on each tick."""

    def __init__(self, translation=None, forward_direction=None, up_direction=None) -> None:
        self._translation = _vec3((0.0, 0.0, 0.0) if translation is None else translation)
        self._forward = _vec3((0.0, 0.0, -1.0) if forward_direction is None else forward_direction)
        self._up = _vec3((0.0, 1.0, 0.0) if up_direction is None else up_direction)
        self._target = self._translation.copy()

    @property
    def translation(self) -> np.ndarray:
        return self._translation.copy()

    @property
    def translation_target(self) -> np.ndarray:
        return self._target.copy()

    def set_translation(self, translation) -> None:
        """Jump to ``translation`` and make it the target as well."""
        self._translation = _vec3(translation)
        self._target = self._translation.copy()

    def translate(self, delta) -> None:
        self._translation = self._translation + _vec3(delta)

    def set_translation_target(self, target) -> None:
        self._target = _vec3(target)

    def view_matrix(self) -> np.ndarray:
        return look_at(self._translation, self._translation + self._forward, self._up)

    def tick(self, dt_seconds: float) -> None:
        """Move a fraction of the way towards the target."""
        delta = self._target - self._translation
        self._translation = self._translation + _TRANSLATION_SPEED * delta * dt_seconds