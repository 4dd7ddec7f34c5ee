"""A dense three-dimensional grid of floats."""

from __future__ import annotations

import operator
from typing import Any


class Vec3D:
    """A fixed-size grid addressed by (depth, row, col), stored row-major."""

    __slots__ = ("_depth", "_rows", "_cols", "_data")

    def __init__(self, depth: int, rows: int, cols: int) -> None:
        dims = [operator.index(d) for d in (depth, rows, cols)]
        if any(d < 0 for d in dims):
            raise ValueError("dimensions must not be negative")
        self._depth, self._rows, self._cols = dims
        self._data = [0.0] * (self._depth * self._rows * self._cols)

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _offset(self, depth: Any, row: Any, col: Any) -> int:
        d, r, c = operator.index(depth), operator.index(row), operator.index(col)
        if not (0 <= d < self._depth and 0 <= r < self._rows and 0 <= c < self._cols):
            raise IndexError(
                f"index ({d}, {r}, {c}) out of bounds for shape "
                f"({self._depth}, {self._rows}, {self._cols})"
            )
        return d * self._rows * self._cols + r * self._cols + c

    def get(self, depth: int, row: int, col: int) -> float:
        return self._data[self._offset(depth, row, col)]

    def set(self, depth: int, row: int, col: int, value: float) -> None:
        self._data[self._offset(depth, row, col)] = float(value)

    @staticmethod
    def _unpack(index: Any) -> tuple[Any, Any, Any]:
        if not isinstance(index, tuple) or len(index) != 3:
            raise TypeError("Vec3D index must be a (depth, row, col) tuple")
        return index

    def __getitem__(self, index: tuple[int, int, int]) -> float:
        return self.get(*self._unpack(index))

    def __setitem__(self, index: tuple[int, int, int], value: float) -> None:
        self.set(*self._unpack(index), value)