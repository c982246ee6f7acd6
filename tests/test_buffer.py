import numpy as np
import pytest

from instadraw.buffer import InstanceBuffer


def test_new_buffer_is_empty():
    buffer = InstanceBuffer()
    assert len(buffer) == 0
    assert buffer.shapes().shape == (0, 2)
    assert buffer.dests().shape == (0, 4)
    assert buffer.colors().shape == (0, 4)


def test_add_instance_stores_values():
    buffer = InstanceBuffer()
    buffer.add_instance([1.0, 0.5], [0.1, 0.2, 0.3, 0.4], [0.6, 0.2, 0.9, 0.7])
    assert len(buffer) == 1
    np.testing.assert_allclose(buffer.shapes()[0], [1.0, 0.5])
    np.testing.assert_allclose(buffer.dests()[0], [0.1, 0.2, 0.3, 0.4], rtol=1e-6)
    np.testing.assert_allclose(buffer.colors()[0], [0.6, 0.2, 0.9, 0.7], rtol=1e-6)
    assert buffer.shapes().dtype == np.float32


def test_capacity_grows_in_steps_of_ten():
    buffer = InstanceBuffer()
    assert buffer.capacity == 0
    buffer.add_instance([0, 0], [0, 0, 0, 0], [0, 0, 0, 0])
    assert buffer.capacity == 10
    for _ in range(10):
        buffer.add_instance([0, 0], [0, 0, 0, 0], [0, 0, 0, 0])
    assert buffer.capacity == 20
    assert len(buffer) == 11


def test_growth_keeps_earlier_instances():
    buffer = InstanceBuffer()
    for i in range(25):
        buffer.add_instance([i, -i], [i, i, i, i], [0, 0, 0, i])
    assert len(buffer) == 25
    np.testing.assert_array_equal(buffer.shapes()[:, 0], np.arange(25))
    np.testing.assert_array_equal(buffer.colors()[:, 3], np.arange(25))


def test_clear_resets_count_but_keeps_capacity():
    buffer = InstanceBuffer()
    for _ in range(12):
        buffer.add_instance([0, 0], [0, 0, 0, 0], [0, 0, 0, 0])
    capacity = buffer.capacity
    buffer.clear()
    assert len(buffer) == 0
    assert buffer.capacity == capacity
    buffer.add_instance([2, 3], [0, 0, 0, 0], [0, 0, 0, 0])
    np.testing.assert_array_equal(buffer.shapes(), [[2, 3]])


def test_views_are_read_only():
    buffer = InstanceBuffer()
    buffer.add_instance([0, 0], [0, 0, 0, 0], [0, 0, 0, 0])
    with pytest.raises(ValueError):
        buffer.dests()[0, 0] = 5.0


@pytest.mark.parametrize(
    "shape, dest, color",
    [
        ([0.0], [0, 0, 0, 0], [0, 0, 0, 0]),
        ([0.0, 0.0], [0, 0, 0], [0, 0, 0, 0]),
        ([0.0, 0.0], [0, 0, 0, 0], [0, 0, 0, 0, 0]),
    ],
)
def test_wrong_widths_rejected(shape, dest, color):
    buffer = InstanceBuffer()
    with pytest.raises(ValueError):
        buffer.add_instance(shape, dest, color)
    assert len(buffer) == 0