import numpy as np
import pytest

from fivednine.render.buffers import IndexBuffer, VertexAttribute


def test_vertex_attribute_round_trip():
    attribute = VertexAttribute(3)
    positions = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)]
    attribute.set(positions)
    assert attribute.count == len(positions)
    np.testing.assert_array_equal(attribute.data, np.array(positions, dtype=np.float32))


def test_single_component_accepts_flat_values():
    attribute = VertexAttribute(1)
    attribute.set([0.5, 1.5, 2.5])
    assert attribute.data.shape == (3, 1)
    assert attribute.count == 3


def test_integer_attribute_keeps_integers():
    attribute = VertexAttribute(2, integer=True)
    attribute.set([(1, 2), (3, 4)])
    assert attribute.data.dtype == np.int32
    np.testing.assert_array_equal(attribute.data, [[1, 2], [3, 4]])


@pytest.mark.parametrize("components, integer", [(0, False), (5, False), (3, True)])
def test_unsupported_widths_raise(components, integer):
    with pytest.raises(ValueError):
        VertexAttribute(components, integer)


def test_wrong_width_values_raise():
    attribute = VertexAttribute(2)
    with pytest.raises(ValueError):
        attribute.set([(1.0, 2.0, 3.0)])


def test_set_replaces_previous_contents():
    attribute = VertexAttribute(2)
    attribute.set([(0.0, 0.0), (1.0, 1.0)])
    attribute.set([])
    assert attribute.count == 0
    assert attribute.data.shape == (0, 2)


def test_data_is_a_copy():
    attribute = VertexAttribute(2)
    attribute.set([(0.0, 1.0)])
    snapshot = attribute.data
    snapshot[0, 0] = 9.0
    assert attribute.data[0, 0] == 0.0


def test_index_buffer_round_trip():
    buffer = IndexBuffer()
    indices = [0, 1, 2, 0, 2, 3]
    buffer.set(indices)
    assert buffer.count == len(indices)
    assert buffer.data.dtype == np.uint32
    assert buffer.data.tolist() == indices


def test_index_buffer_starts_empty():
    assert IndexBuffer().count == 0


@pytest.mark.parametrize("bad", [[-1], [2**32]])
def test_index_buffer_rejects_out_of_range(bad):
    buffer = IndexBuffer()
    with pytest.raises(ValueError):
        buffer.set(bad)
    assert buffer.count == 0