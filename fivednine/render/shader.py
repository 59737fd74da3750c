"""Shader programs and a named store that compiles and keeps them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, NamedTuple


class ShaderError(Exception):
    """Raised when a shader program cannot be built or stored."""


@dataclass(frozen=True)
class ShaderAttribute:
    name: str
    location: int


@dataclass(frozen=True)
class ShaderUniform:
    name: str
    location: int


class CompiledProgram(NamedTuple):
    """Result of compiling and linking a program."""

    handle: int
    attributes: list
    uniforms: list
    release: Callable[[], None] | None = None


class Shader:
    """A linked program with name-to-location lookups."""

    def __init__(
        self,
        handle: int,
        attributes: Iterable[ShaderAttribute],
        uniforms: Iterable[ShaderUniform],
        name: str,
    ) -> None:
        self.handle = handle
        self.name = name
        self._attributes: dict[str, int] = {}
        for attribute in attributes:
            self._attributes.setdefault(attribute.name, attribute.location)
        self._uniforms: dict[str, int] = {}
        for uniform in uniforms:
            self._uniforms.setdefault(uniform.name, uniform.location)
        self._release: Callable[[], None] | None = None

    def __repr__(self) -> str:
        return f"Shader(name={self.name!r}, handle={self.handle})"

    def bind(self) -> None:
        from pyglet import gl

        gl.glUseProgram(self.handle)

    def unbind(self) -> None:
        from pyglet import gl

        gl.glUseProgram(0)

    def get_attribute(self, name: str) -> int | None:
        """Location of the attribute called ``name``, or None."""
        return self._attributes.get(name)

    def get_uniform(self, name: str) -> int | None:
        """Location of the uniform called ``name``, or None."""
        return self._uniforms.get(name)

    def delete(self) -> None:
        """Free the GPU program."""
        if self._release is not None:
            self._release()
            self._release = None
            return
        from pyglet import gl

        gl.glDeleteProgram(self.handle)


def _uniforms_from_introspection(info: dict) -> list[ShaderUniform]:
    uniforms: list[ShaderUniform] = []
    seen: set[str] = set()
    for name, details in info.items():
        location = details["location"]
        if location < 0:
            continue
        names = [name]
        if "[" in name:
            names.append(name[: name.index("[")])
        for entry in names:
            if entry not in seen:
                seen.add(entry)
                uniforms.append(ShaderUniform(entry, location))
    return uniforms


class GLShaderCompiler:
    """Compiles and links vertex/fragment programs in the current GL context."""

    def compile(self, vertex_source: str, fragment_source: str) -> CompiledProgram:
        from pyglet.graphics.shader import Shader as _GLShader
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        try:
            vertex = _GLShader(vertex_source, "vertex")
            fragment = _GLShader(fragment_source, "fragment")
            program = ShaderProgram(vertex, fragment)
        except ShaderException as exc:
            raise ShaderError(f"Shader compilation failed: {exc}") from exc

        attributes = [
            ShaderAttribute(name, details["location"])
            for name, details in program.attributes.items()
            if details["location"] >= 0
        ]
        uniforms = _uniforms_from_introspection(program.uniforms)
        return CompiledProgram(program.id, attributes, uniforms, program.delete)


def _source_text(text: str) -> str:
    return text.split("\0", 1)[0]


class ShaderStorage:
    """Builds shader programs and keeps them by unique name."""

    def __init__(self, compiler=None) -> None:
        self._compiler = compiler if compiler is not None else GLShaderCompiler()
        self._shaders: list[Shader] = []

    def add_shader(self, vertex_text: str, fragment_text: str, name: str) -> Shader:
        """Compile and store a program; raises ShaderError on failure or duplicate name."""
        vertex_source = _source_text(vertex_text)
        if not vertex_source:
            raise ShaderError(f"Could not load vertex shader for {name}")
        fragment_source = _source_text(fragment_text)
        if not fragment_source:
            raise ShaderError(f"Could not load fragment shader for {name}")

        compiled = self._compiler.compile(vertex_source, fragment_source)
        shader = Shader(compiled.handle, compiled.attributes, compiled.uniforms, name)
        shader._release = compiled.release

        if self.find_shader_by_name(name) is not None:
            if compiled.release is not None:
                compiled.release()
            raise ShaderError(f"Attempted to add duplicate shader: {name}")

        self._shaders.append(shader)
        return shader

    def find_shader_by_name(self, name: str) -> Shader | None:
        return next((shader for shader in self._shaders if shader.name == name), None)