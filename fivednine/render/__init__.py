"""Rendering: window, colours, camera, shaders, textures, uniforms, buffers, meshes and draw calls."""