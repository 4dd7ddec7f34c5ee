"""A sequence whose length is fixed when it is created."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any


class FixedVec:
    """A mutable sequence whose elements can change but whose length cannot."""

    __slots__ = ("_items",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)

    @staticmethod
    def _check_length(length: int) -> int:
        length = operator.index(length)
        if length <= 0:
            raise ValueError("length must be greater than 0")
        return length

    @classmethod
    def zeros(cls, length: int) -> FixedVec:
        """Create a vector of ``length`` zeros."""
        return cls([0] * cls._check_length(length))

    @classmethod
    def with_value(cls, length: int, value: Any) -> FixedVec:
        """Create a vector of ``length`` copies of ``value``."""
        return cls([value] * cls._check_length(length))

    @classmethod
    def default(cls, length: int, factory: Callable[[], Any]) -> FixedVec:
        """Create a vector whose elements each come from a call to ``factory``."""
        return cls(factory() for _ in range(cls._check_length(length)))

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def _position(self, index: Any) -> int:
        position = operator.index(index)
        if not 0 <= position < len(self._items):
            raise IndexError(
                f"Index out of bounds: the len is {len(self._items)} "
                f"but the index is {position}"
            )
        return position

    def __getitem__(self, index: int) -> Any:
        return self._items[self._position(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._position(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def _require_same_length(self, other: FixedVec) -> None:
        if len(self) != len(other):
            raise ValueError(
                f"FixedVecs must have the same length: {len(self)} and {len(other)}"
            )

    def __add__(self, other: object) -> FixedVec:
        if not isinstance(other, FixedVec):
            return NotImplemented
        self._require_same_length(other)
        return FixedVec(a + b for a, b in zip(self._items, other._items))

    def __iadd__(self, other: object) -> FixedVec:
        if not isinstance(other, FixedVec):
            return NotImplemented
        self._require_same_length(other)
        for position, value in enumerate(other._items):
            self._items[position] += value
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedVec):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FixedVec({self._items!r})"

    def copy(self) -> FixedVec:
        return FixedVec(self._items)

    def last(self) -> Any | None:
        """Return the last element, or None when the vector is empty."""
        return self._items[-1] if self._items else None

    def zero(self) -> None:
        """Reset every element to the default value of its own type."""
        self._items = [type(item)() for item in self._items]

    def to_list(self) -> list[Any]:
        return list(self._items)


def fixed_vec(*args: Any) -> FixedVec:
    """Build a FixedVec from the given elements; at least one is required."""
    if not args:
        raise TypeError("fixed_vec() needs at least one element")
    return FixedVec(args)