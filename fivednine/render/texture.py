"""GPU textures and a named texture store."""

from __future__ import annotations

from dataclasses import dataclass

from fivednine import log
from fivednine.log import LogVerbosity, LogZone


def is_power_of_two(value: int) -> bool:
    return value == 1 or (value > 1 and (value - 1) & value == 0)


@dataclass(frozen=True)
class ImageData:
    """Decoded pixels: ``depth`` bytes per pixel, rows top to bottom."""

    width: int
    height: int
    depth: int
    pixels: bytes


def load_image_data(path) -> ImageData:
    """Decode an image file into RGBA if it has alpha, RGB otherwise.

    Raises OSError if the file cannot be read as an image.
    """
    from PIL import Image

    with Image.open(path) as image:
        has_alpha = "A" in image.getbands() or "transparency" in image.info
        converted = image.convert("RGBA" if has_alpha else "RGB")
        depth = 4 if has_alpha else 3
        return ImageData(converted.width, converted.height, depth, converted.tobytes())


@dataclass(frozen=True)
class Texture:
    """A named texture living on the GPU."""

    name: str
    handle: int
    width: int
    height: int
    channels: int

    def bind(self) -> None:
        from pyglet import gl

        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.handle)

    def unbind(self) -> None:
        from pyglet import gl

        gl.glBindTexture(gl.GL_TEXTURE_2D, 0)

    def delete(self) -> None:
        """Unbind and free the GPU texture."""
        from pyglet import gl

        self.unbind()
        gl.glDeleteTextures(1, (gl.GLuint * 1)(self.handle))


class GLTextureUploader:
    """Creates 2D textures in the current GL context."""

    def upload(self, image_data: ImageData) -> int:
        """Upload pixels and return the new texture handle."""
        from pyglet import gl

        gl.glActiveTexture(gl.GL_TEXTURE0)
        ids = (gl.GLuint * 1)()
        gl.glGenTextures(1, ids)
        handle = int(ids[0])
        gl.glBindTexture(gl.GL_TEXTURE_2D, handle)

        gl.glPixelStorei(gl.GL_PACK_ALIGNMENT, 1)
        gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)

        for parameter, value in (
            (gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE),
            (gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE),
            (gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR),
            (gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR),
            (gl.GL_TEXTURE_BASE_LEVEL, 0),
        ):
            gl.glTexParameteri(gl.GL_TEXTURE_2D, parameter, value)

        pixel_format = gl.GL_RGBA if image_data.depth == 4 else gl.GL_RGB
        pixels = image_data.pixels
        buffer = (gl.GLubyte * len(pixels)).from_buffer_copy(pixels) if pixels else None
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D,
            0,
            pixel_format,
            image_data.width,
            image_data.height,
            0,
            pixel_format,
            gl.GL_UNSIGNED_BYTE,
            buffer,
        )
        return handle


class TextureStorage:
    """Uploads textures and keeps them by unique name."""

    def __init__(self, uploader=None) -> None:
        self._uploader = uploader if uploader is not None else GLTextureUploader()
        self._textures: list[Texture] = []

    def add_texture_from_image_path(self, path, name: str) -> Texture:
        """Load an image file and store it as ``name``."""
        return self.add_texture(load_image_data(path), name)

    def add_texture(self, image_data: ImageData, name: str) -> Texture:
        """Upload ``image_data`` as ``name``; raises ValueError if the name is taken."""
        if self.find_texture_by_name(name) is not None:
            raise ValueError(f"Failed to add texture {name} to storage: already exists.")

        if not (is_power_of_two(image_data.width) and is_power_of_two(image_data.height)):
            log.log_line(
                LogZone.RENDER,
                LogVerbosity.WARNING,
                "Texture named '%s' has dimensions which are not a power of two.",
                name,
            )

        handle = self._uploader.upload(image_data)
        texture = Texture(name, handle, image_data.width, image_data.height, image_data.depth)
        self._textures.append(texture)
        log.log_line(LogZone.RENDER, LogVerbosity.INFO, "Added texture to storage: %s", name)
        return texture

    def find_texture_by_name(self, name: str) -> Texture | None:
        return next((texture for texture in self._textures if texture.name == name), None)