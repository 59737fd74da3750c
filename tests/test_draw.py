import pytest

from fivednine.render.buffers import IndexBuffer
from fivednine.render.draw import (
    DrawMode,
    draw_arrays,
    draw_arrays_instanced,
    draw_elements,
    draw_elements_instanced,
    gl_draw_mode,
)


def test_triangles_maps_to_gl_triangles():
    assert gl_draw_mode(DrawMode.TRIANGLES) == 4


def test_points_maps_to_gl_points():
    assert gl_draw_mode(DrawMode.POINTS) == 0


def test_every_mode_maps_to_a_distinct_primitive():
    values = {gl_draw_mode(mode) for mode in DrawMode}
    assert values == set(range(7))


@pytest.mark.parametrize("mode", [None, "triangles", 5])
def test_invalid_mode_raises(mode):
    with pytest.raises(ValueError):
        gl_draw_mode(mode)


def test_draw_arrays_rejects_invalid_mode():
    with pytest.raises(ValueError):
        draw_arrays(3, "points")


def test_draw_arrays_rejects_negative_count():
    with pytest.raises(ValueError):
        draw_arrays(-1, DrawMode.TRIANGLES)


def test_draw_elements_rejects_invalid_mode():
    with pytest.raises(ValueError):
        draw_elements(IndexBuffer(), None)


def test_instanced_draws_reject_negative_instances():
    with pytest.raises(ValueError):
        draw_arrays_instanced(3, DrawMode.TRIANGLES, -2)
    with pytest.raises(ValueError):
        draw_elements_instanced(IndexBuffer(), DrawMode.TRIANGLES, -1)