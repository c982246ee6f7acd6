"""CPU-side storage of per-instance quad attributes."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

_GROWTH = 10


def _row(values: Sequence[float], width: int, name: str) -> np.ndarray:
    row = np.asarray(values, dtype=np.float32)
    if row.shape != (width,):
        raise ValueError(f"{name} must have {width} components, got shape {row.shape}")
    return row


class InstanceBuffer:
    """Growable arrays of shape (2 floats), destination (4) and colour (4) per instance.

    Shape is ``[kind, a]``; destination is ``[x, y, w, h]``; the colour slot holds
    a colour for rectangles, circles and characters, and flip/rotation data for images.
    """

    def __init__(self) -> None:
        self._count = 0
        self._shapes = np.zeros((0, 2), dtype=np.float32)
        self._dests = np.zeros((0, 4), dtype=np.float32)
        self._colors = np.zeros((0, 4), dtype=np.float32)

    @property
    def capacity(self) -> int:
        return len(self._shapes)

    def _grow(self) -> None:
        size = self.capacity + _GROWTH
        self._shapes = np.resize(self._shapes, (size, 2))
        self._dests = np.resize(self._dests, (size, 4))
        self._colors = np.resize(self._colors, (size, 4))

    def add_instance(
        self,
        shape: Sequence[float],
        dest: Sequence[float],
        color: Sequence[float],
    ) -> None:
        shape_row = _row(shape, 2, "shape")
        dest_row = _row(dest, 4, "dest")
        color_row = _row(color, 4, "color")
        if self._count >= self.capacity:
            self._grow()
        self._shapes[self._count] = shape_row
        self._dests[self._count] = dest_row
        self._colors[self._count] = color_row
        self._count += 1

    def clear(self) -> None:
        """Forget all instances while keeping the allocated capacity."""
        self._count = 0

    def __len__(self) -> int:
        return self._count

    @staticmethod
    def _view(array: np.ndarray, count: int) -> np.ndarray:
        view = array[:count]
        view.flags.writeable = False
        return view

    def shapes(self) -> np.ndarray:
        return self._view(self._shapes, self._count)

    def dests(self) -> np.ndarray:
        return self._view(self._dests, self._count)

    def colors(self) -> np.ndarray:
        return self._view(self._colors, self._count)