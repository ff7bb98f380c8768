"""A double-ended queue built from doubly linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def _fmt(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class _Node:
    __slots__ = ("val", "prev", "next")

    def __init__(self, val: Any) -> None:
        self.val = val
        self.prev: _Node | None = None
        self.next: _Node | None = None


class Deque:
    """Deque with O(1) operations at both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._size = 0
        self._front: _Node | None = None
        self._back: _Node | None = None
        for v in values:
            self.push_back(v)

    def check_invariant(self) -> None:
        """Verify the links and the size; raise RuntimeError if broken."""
        if self._size == 0:
            if self._front is not None:
                raise RuntimeError("size == 0, but front is set")
            if self._back is not None:
                raise RuntimeError("size == 0, but back is set")
            return
        if self._front is None or self._back is None:
            raise RuntimeError("size > 0, but front or back is missing")
        if self._front.prev is not None:
            raise RuntimeError("prev of front is set")
        if self._back.next is not None:
            raise RuntimeError("next of back is set")
        truesize = 0
        p = self._front
        while p is not None:
            if p.next is not None:
                if p.next.prev is not p:
                    raise RuntimeError("prev or next is wrong")
            elif p is not self._back:
                raise RuntimeError("back is wrong")
            truesize += 1
            p = p.next
        if truesize != self._size:
            raise RuntimeError("size is wrong")

    def push_front(self, val: Any) -> None:
        node = _Node(val)
        if self._front is None:
            self._front = self._back = node
        else:
            node.next = self._front
            self._front.prev = node
            self._front = node
        self._size += 1

    def push_back(self, val: Any) -> None:
        node = _Node(val)
        if self._back is None:
            self._front = self._back = node
        else:
            node.prev = self._back
            self._back.next = node
            self._back = node
        self._size += 1

    def pop_front(self) -> None:
        if self._front is None:
            raise IndexError("pop from empty deque")
        nxt = self._front.next
        if nxt is None:
            self._front = self._back = None
        else:
            nxt.prev = None
            self._front = nxt
        self._size -= 1

    def pop_back(self) -> None:
        if self._back is None:
            raise IndexError("pop from empty deque")
        prv = self._back.prev
        if prv is None:
            self._front = self._back = None
        else:
            prv.next = None
            self._back = prv
        self._size -= 1

    def reset_front(self, s: int) -> None:
        """Remove elements from the front until at most s remain."""
        while self._size > s:
            self.pop_front()

    def reset_back(self, s: int) -> None:
        """Remove elements from the back until at most s remain."""
        while self._size > s:
            self.pop_back()

    def clear(self) -> None:
        self.reset_front(0)

    def front(self) -> Any:
        if self._front is None:
            raise IndexError("deque is empty")
        return self._front.val

    def back(self) -> Any:
        if self._back is None:
            raise IndexError("deque is empty")
        return self._back.val

    def assign(self, other: Deque) -> Deque:
        """Make this deque hold the elements of other, reusing nodes."""
        if other is self:
            return self
        mine, theirs = self._front, other._front
        while mine is not None and theirs is not None:
            mine.val = theirs.val
            mine, theirs = mine.next, theirs.next
        while theirs is not None:
            self.push_back(theirs.val)
            theirs = theirs.next
        self.reset_back(other._size)
        return self

    def copy(self) -> Deque:
        return Deque(self)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __iter__(self) -> Iterator[Any]:
        p = self._front
        while p is not None:
            yield p.val
            p = p.next

    def __str__(self) -> str:
        if self._size == 0:
            return "[ ]"
        return "[ " + ", ".join(_fmt(v) for v in self) + " ]"