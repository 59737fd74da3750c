"""Vertex attribute and index buffers backed by GL buffer objects.

Data is kept on the CPU side and sent to the GPU lazily: the GL buffer is
created, and changed data uploaded, the first time the buffer's ``handle``
is needed in a GL context.
"""

from __future__ import annotations

import numpy as np

_VALID_COMPONENTS = {False: (1, 2, 3, 4), True: (1, 2, 4)}
_MAX_INDEX = 0xFFFFFFFF


class _GLBuffer:
    """A GL buffer object mirroring one numpy array."""

    _target = "GL_ARRAY_BUFFER"

    def __init__(self, data: np.ndarray) -> None:
        self._data = data
        self._handle: int | None = None
        self._pending = True

    @property
    def data(self) -> np.ndarray:
        """A copy of the buffer contents."""
        return self._data.copy()

    @property
    def count(self) -> int:
        """Number of elements last set."""
        return len(self._data)

    @property
    def handle(self) -> int:
        """GL buffer name; creates the buffer and uploads changed data first."""
        from pyglet import gl

        if self._handle is None:
            names = (gl.GLuint * 1)()
            gl.glGenBuffers(1, names)
            self._handle = int(names[0])
            self._pending = True
        if self._pending:
            target = getattr(gl, self._target)
            data = np.ascontiguousarray(self._data)
            payload = data.tobytes() if data.size else None
            gl.glBindBuffer(target, self._handle)
            gl.glBufferData(target, data.nbytes, payload, gl.GL_STATIC_DRAW)
            gl.glBindBuffer(target, 0)
            self._pending = False
        return self._handle

    def _replace(self, data: np.ndarray) -> None:
        self._data = data
        self._pending = True

    def _release(self) -> None:
        if self._handle is not None:
            from pyglet import gl

            gl.glDeleteBuffers(1, (gl.GLuint * 1)(self._handle))
            self._handle = None
        self._pending = True


class VertexAttribute(_GLBuffer):
    """Per-vertex values of 1-4 float components, or 1, 2 or 4 integer components."""

    _target = "GL_ARRAY_BUFFER"

    def __init__(self, components: int = 3, integer: bool = False) -> None:
        integer = bool(integer)
        if components not in _VALID_COMPONENTS[integer]:
            kind = "integer" if integer else "float"
            raise ValueError(f"unsupported {kind} attribute width: {components}")
        self.components = components
        self.integer = integer
        self._dtype = np.int32 if integer else np.float32
        super().__init__(np.zeros((0, components), dtype=self._dtype))

    def set(self, values) -> None:
        """Replace the contents with ``values``, one entry per vertex."""
        array = np.array(values, dtype=self._dtype)
        if array.size == 0:
            array = array.reshape(0, self.components)
        elif self.components == 1 and array.ndim == 1:
            array = array.reshape(-1, 1)
        if array.ndim != 2 or array.shape[1] != self.components:
            raise ValueError(
                f"expected values with {self.components} components, got shape {array.shape}"
            )
        self._replace(array)

    def bind_to(self, slot: int, stride: int = 0) -> None:
        """Point vertex attribute ``slot`` at this buffer and enable it."""
        from pyglet import gl

        handle = self.handle
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, handle)
        if self.integer:
            gl.glVertexAttribIPointer(slot, self.components, gl.GL_INT, stride, None)
        else:
            gl.glVertexAttribPointer(
                slot, self.components, gl.GL_FLOAT, gl.GL_FALSE, stride, None
            )
        gl.glEnableVertexAttribArray(slot)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)

    def unbind_from(self, slot: int) -> None:
        from pyglet import gl

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.handle)
        gl.glDisableVertexAttribArray(slot)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)

    def set_instance_divisor(self, slot: int, divisor: int) -> None:
        from pyglet import gl

        gl.glVertexAttribDivisor(slot, divisor)

    def delete(self) -> None:
        """Free the GL buffer; the data stays and is uploaded again if needed."""
        self._release()


class IndexBuffer(_GLBuffer):
    """Unsigned 32-bit vertex indices for indexed drawing."""

    _target = "GL_ELEMENT_ARRAY_BUFFER"

    def __init__(self) -> None:
        super().__init__(np.zeros(0, dtype=np.uint32))

    def set(self, indices) -> None:
        """Replace the contents with ``indices``; each must fit in 32 unsigned bits."""
        array = np.array(indices, dtype=np.int64).reshape(-1)
        if array.size and (array.min() < 0 or array.max() > _MAX_INDEX):
            raise ValueError("indices must lie between 0 and 2**32 - 1")
        self._replace(array.astype(np.uint32))

    def delete(self) -> None:
        """Free the GL buffer; the indices stay and are uploaded again if needed."""
        self._release()