"""A dense two-dimensional matrix of floats with basic linear-algebra helpers."""

from __future__ import annotations

import math
import operator
import random as _random
from collections.abc import Iterable, Iterator, Sequence
from typing import Any


def _sigmoid(x: float) -> float:
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


class Matrix:
    """A fixed-size row-major matrix of floats."""

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int, cols: int, values: Iterable[float] | None = None) -> None:
        rows, cols = operator.index(rows), operator.index(cols)
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must not be negative")
        size = rows * cols
        if values is None:
            data = [0.0] * size
        else:
            data = [float(v) for v in values]
            if len(data) != size:
                raise ValueError(
                    f"value count {len(data)} does not match matrix dimensions "
                    f"{rows}x{cols}"
                )
        self._rows = rows
        self._cols = cols
        self._data = data

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        return cls(rows, cols)

    @classmethod
    def random(cls, rows: int, cols: int, scale: float = 1.0) -> Matrix:
        """Fill a matrix with values drawn uniformly from [-1, 1) times ``scale``."""
        size = operator.index(rows) * operator.index(cols)
        return cls(rows, cols, ((_random.random() * 2.0 - 1.0) * scale for _ in range(size)))

    @classmethod
    def from_list(cls, values: Sequence[float], rows: int, cols: int) -> Matrix:
        """Build a matrix from a flat row-major sequence of ``rows * cols`` values."""
        return cls(rows, cols, values)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def flat_len(self) -> int:
        return self._rows * self._cols

    def _offset(self, row: Any, col: Any) -> int:
        r, c = operator.index(row), operator.index(col)
        if not (0 <= r < self._rows and 0 <= c < self._cols):
            raise IndexError(
                f"index ({r}, {c}) out of bounds for matrix {self._rows}x{self._cols}"
            )
        return r * self._cols + c

    def _row_start(self, row: Any) -> int:
        r = operator.index(row)
        if not 0 <= r < self._rows:
            raise IndexError(f"Index {r} out of bounds for matrix with {self._rows} rows")
        return r * self._cols

    def get(self, row: int, col: int) -> float:
        return self._data[self._offset(row, col)]

    def set(self, row: int, col: int, value: float) -> None:
        self._data[self._offset(row, col)] = float(value)

    def __getitem__(self, index: int | tuple[int, int]) -> Any:
        """``m[r, c]`` gives one element; ``m[r]`` gives a copy of row ``r``."""
        if isinstance(index, tuple):
            return self.get(*index)
        start = self._row_start(index)
        return self._data[start:start + self._cols]

    def __setitem__(self, index: int | tuple[int, int], value: Any) -> None:
        if isinstance(index, tuple):
            self.set(*index, value)
            return
        start = self._row_start(index)
        row = [float(v) for v in value]
        if len(row) != self._cols:
            raise ValueError(f"row must have {self._cols} values, got {len(row)}")
        self._data[start:start + self._cols] = row

    def _iter_rows(self) -> Iterator[list[float]]:
        for start in range(0, self._rows * self._cols, self._cols or 1):
            yield self._data[start:start + self._cols]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = [
            "[" + "".join(f"{self.get(r, c):.5f} " for c in range(self._cols)) + "]"
            for r in range(self._rows)
        ]
        return "[" + ", ".join(rows) + "]"

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mul(other)

    def to_list(self) -> list[float]:
        """Return the elements as a flat row-major list."""
        return list(self._data)

    def copy(self) -> Matrix:
        return Matrix(self._rows, self._cols, self._data)

    def clear(self) -> None:
        self._data = [0.0] * len(self._data)

    def scale(self, factor: float) -> None:
        self._data = [x * factor for x in self._data]

    def _require_same_shape(self, other: Matrix) -> None:
        if self._rows != other._rows:
            raise ValueError(f"rows do not match, {self._rows} to {other._rows}")
        if self._cols != other._cols:
            raise ValueError(f"cols do not match, {self._cols} to {other._cols}")

    def concat_horizontal(self, other: Matrix) -> Matrix:
        """Place ``other`` to the right of this matrix."""
        if self._rows != other._rows:
            raise ValueError(f"rows do not match, {self._rows} to {other._rows}")
        out = Matrix(self._rows, self._cols + other._cols)
        out._data = [
            value
            for r in range(self._rows)
            for value in self[r] + other[r]
        ]
        return out

    def hadamard(self, other: Matrix, out: Matrix) -> None:
        """Write the element-wise product of this matrix and ``other`` into ``out``."""
        self._require_same_shape(other)
        self._require_same_shape(out)
        out._data = [a * b for a, b in zip(self._data, other._data)]

    def hadamard_new(self, other: Matrix) -> Matrix:
        self._require_same_shape(other)
        return Matrix(self._rows, self._cols, (a * b for a, b in zip(self._data, other._data)))

    def mul(self, other: Matrix) -> Matrix:
        """Return the matrix product of this matrix and ``other``."""
        if self._cols != other._rows:
            raise ValueError(
                f"cannot multiply {self._rows}x{self._cols} by {other._rows}x{other._cols}"
            )
        columns = [other._data[c::other._cols] for c in range(other._cols)] if other._cols else []
        values = [
            float(sum(a * b for a, b in zip(row, column)))
            for row in self._iter_rows()
            for column in columns
        ] if self._rows and other._cols else []
        return Matrix(self._rows, other._cols, values)

    def sigmoid(self) -> Matrix:
        return Matrix(self._rows, self._cols, (_sigmoid(x) for x in self._data))

    def tanh(self) -> Matrix:
        return Matrix(self._rows, self._cols, (math.tanh(x) for x in self._data))

    def add_inplace_scaled(self, other: Matrix, scale: float) -> None:
        self._require_same_shape(other)
        self._data = [a + scale * b for a, b in zip(self._data, other._data)]

    def add_inplace(self, other: Matrix) -> None:
        self._require_same_shape(other)
        self._data = [a + b for a, b in zip(self._data, other._data)]

    def sub_inplace(self, other: Matrix) -> None:
        self._require_same_shape(other)
        self._data = [a - b for a, b in zip(self._data, other._data)]

    def add(self, other: Matrix) -> Matrix:
        self._require_same_shape(other)
        return Matrix(self._rows, self._cols, (a + b for a, b in zip(self._data, other._data)))

    def transpose(self) -> Matrix:
        values = [self._data[c::self._cols] for c in range(self._cols)] if self._rows else []
        return Matrix(self._cols, self._rows, (v for column in values for v in column))

    def clip(self, low: float, high: float) -> None:
        """Clamp every element into ``[low, high]``."""
        if math.isnan(low) or math.isnan(high) or low > high:
            raise ValueError(f"invalid clip range: {low} > {high}")
        self._data = [min(max(x, low), high) for x in self._data]

    def row_mul(self, row: Sequence[float]) -> list[float]:
        """Multiply the row vector ``row`` by this matrix."""
        if len(row) != self._rows:
            raise ValueError(f"row length {len(row)} does not match {self._rows} rows")
        return [
            float(sum(r * self._data[i * self._cols + j] for i, r in enumerate(row)))
            for j in range(self._cols)
        ]