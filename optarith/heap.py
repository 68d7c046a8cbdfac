"""A max-heap ordered by a three-way comparison function."""

from __future__ import annotations

from typing import Any, Callable

Comparator = Callable[[Any, Any], int]


class MaxHeap:
    """Priority queue returning the largest element first.

    ``cmp(a, b)`` returns a negative number if a < b, zero if equal and a
    positive number otherwise.
    """

    def __init__(self, cmp: Comparator) -> None:
        self._cmp = cmp
        self._elems: list[Any] = []

    def __len__(self) -> int:
        return len(self._elems)

    def empty(self) -> None:
        """Remove every element."""
        self._elems.clear()

    def get_max(self) -> Any:
        """Return the largest element without removing it."""
        if not self._elems:
            raise IndexError("get_max from an empty heap")
        return self._elems[0]

    def remove_max(self) -> Any:
        """Remove and return the largest element."""
        if not self._elems:
            raise IndexError("remove_max from an empty heap")
        top = self._elems[0]
        last = self._elems.pop()
        if self._elems:
            self._elems[0] = last
            self._sift_down(0)
        return top

    def add(self, elem: Any) -> None:
        """Insert an element."""
        self._elems.append(elem)
        self._sift_up(len(self._elems) - 1)

    def add_bounded(self, elem: Any, max_size: int) -> Any:
        """Insert an element, keeping at most ``max_size`` of the smallest.

        When the heap is full, the larger of ``elem`` and the current maximum
        is returned and left out; otherwise ``None`` is returned.
        """
        if len(self._elems) == max_size:
            if not self._elems or self._cmp(elem, self._elems[0]) >= 0:
                return elem
            evicted = self._elems[0]
            self._elems[0] = elem
            self._sift_down(0)
            return evicted
        self.add(elem)
        return None

    def _sift_up(self, i: int) -> None:
        elems, cmp = self._elems, self._cmp
        while i > 0:
            parent = (i - 1) >> 1
            if cmp(elems[i], elems[parent]) <= 0:
                return
            elems[i], elems[parent] = elems[parent], elems[i]
            i = parent

    def _sift_down(self, i: int) -> None:
        elems, cmp = self._elems, self._cmp
        size = len(elems)
        while True:
            left = 2 * i + 1
            right = left + 1
            if left >= size:
                return
            if right >= size:
                if cmp(elems[i], elems[left]) < 0:
                    elems[i], elems[left] = elems[left], elems[i]
                return
            lcmp = cmp(elems[i], elems[left])
            rcmp = cmp(elems[i], elems[right])
            if lcmp < 0 and rcmp < 0:
                child = left if cmp(elems[left], elems[right]) > 0 else right
            elif lcmp < 0:
                child = left
            elif rcmp < 0:
                child = right
            else:
                return
            elems[i], elems[child] = elems[child], elems[i]
            i = child