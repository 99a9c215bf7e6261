"""A power-of-two ring buffer usable from both ends."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class CircularBuffer:
    """A double-ended ring buffer.

    The storage is rounded up to a power of two; it holds ``capacity`` elements.
    Pushing onto a full buffer drops the element at the other end, unless
    ``boundary_check`` is switched off.
    """

    def __init__(self, capacity: int) -> None:
        self._data: list[Any] = []
        self._head = 0
        self._tail = 0
        self._mask = 0
        self.set_capacity(capacity)

    def __len__(self) -> int:
        return self._tail - self._head

    def __iter__(self) -> Iterator[Any]:
        return (self._data[i & self._mask] for i in range(self._head, self._tail))

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < len(self):
            raise IndexError("circular buffer index out of range")
        return self._data[(self._head + index) & self._mask]

    @property
    def capacity(self) -> int:
        return self._mask

    @property
    def is_empty(self) -> bool:
        return self._head == self._tail

    def set_capacity(self, capacity: int) -> None:
        """Resize the storage and empty the buffer."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        real_size = 1 << capacity.bit_length()
        self._data = [None] * real_size
        self._mask = real_size - 1
        self.clear()

    def clear(self) -> None:
        self._head = 0
        self._tail = 0

    def _require_items(self) -> None:
        if self.is_empty:
            raise IndexError("circular buffer is empty")

    def push_back(self, x: Any, boundary_check: bool = True) -> None:
        self._data[self._tail & self._mask] = x
        self._tail += 1
        if boundary_check and len(self) > self._mask:
            self._head += 1

    def pop_back(self) -> Any:
        self._require_items()
        self._tail -= 1
        return self._data[self._tail & self._mask]

    @property
    def back(self) -> Any:
        self._require_items()
        return self._data[(self._tail - 1) & self._mask]

    def push_front(self, x: Any, boundary_check: bool = True) -> None:
        self._head -= 1
        self._data[self._head & self._mask] = x
        if boundary_check and len(self) > self._mask:
            self._tail -= 1

    def pop_front(self) -> Any:
        self._require_items()
        value = self._data[self._head & self._mask]
        self._head += 1
        return value

    @property
    def front(self) -> Any:
        self._require_items()
        return self._data[self._head & self._mask]