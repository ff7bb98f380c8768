"""A growable array of floats whose capacity is always a power of two."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _fmt(value: float) -> str:
    return f"{value:g}"


class Vector:
    """Sequence of floats with explicit, power-of-two capacity management."""

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._items: list[float] = [float(v) for v in values]
        self._cap: int = self.minpow2(len(self._items))

    @staticmethod
    def minpow2(x: int) -> int:
        """Return the smallest power of two that is >= x."""
        c = 1
        while c < x:
            c *= 2
        return c

    def reallocate(self, c: int) -> None:
        """Set the capacity to the smallest power of two >= c."""
        new_cap = self.minpow2(c)
        if new_cap == self._cap:
            return
        if new_cap < len(self._items):
            raise ValueError("capacity would be smaller than size")
        self._cap = new_cap

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("Bad Index")

    def push_back(self, val: float) -> None:
        if len(self._items) == self._cap:
            self.reallocate(self._cap * 2)
        self._items.append(float(val))

    def __getitem__(self, index: int) -> float:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, val: float) -> None:
        self._check_index(index)
        self._items[index] = float(val)

    def at(self, index: int) -> float:
        """Return the element at index; raise IndexError when out of range."""
        self._check_index(index)
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def capacity(self) -> int:
        return self._cap

    def isempty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Remove all elements; the capacity is kept."""
        self._items.clear()

    def front(self) -> float:
        if not self._items:
            raise IndexError("vector is empty")
        return self._items[0]

    def back(self) -> float:
        if not self._items:
            raise IndexError("vector is empty")
        return self._items[-1]

    def pop_back(self) -> None:
        if not self._items:
            raise IndexError("vector is empty")
        self._items.pop()

    def reserve(self, c: int) -> None:
        """Grow the capacity to the smallest power of two >= c, if needed."""
        if self._cap < c:
            self._cap = self.minpow2(c)

    def shrink(self) -> None:
        """Reduce the capacity to the smallest power of two that fits."""
        new_cap = self.minpow2(len(self._items))
        if new_cap < self._cap:
            self.reallocate(new_cap)

    def insert(self, i: int, val: float) -> None:
        """Insert val before position i (0 <= i <= size)."""
        if not 0 <= i <= len(self._items):
            raise IndexError("Bad Index")
        if len(self._items) == self._cap:
            self._cap *= 2
        self._items.insert(i, float(val))

    def erase(self, i: int) -> None:
        """Remove the element at position i."""
        self._check_index(i)
        del self._items[i]

    def __iter__(self) -> Iterator[float]:
        return iter(self._items)

    def __str__(self) -> str:
        return "[" + ", ".join(_fmt(v) for v in self._items) + "]"