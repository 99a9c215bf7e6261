"""Index bookkeeping for a single-producer, single-consumer ring buffer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FifoRange:
    """Up to two contiguous index blocks to read or write."""

    start_index1: int
    block_size1: int
    start_index2: int
    block_size2: int


class AbstractFifo:
    """Tracks read and write positions of a ring buffer that holds no data itself.

    One slot is always left empty, so at most ``capacity - 1`` elements are ready.
    """

    def __init__(self, capacity: int = 0) -> None:
        self._capacity = capacity
        self._head = 0
        self._tail = 0

    def set_capacity(self, capacity: int) -> None:
        """Change the capacity and empty the FIFO."""
        self._capacity = capacity
        self._head = 0
        self._tail = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def num_ready(self) -> int:
        """Number of elements that can be read."""
        if self._tail >= self._head:
            return self._tail - self._head
        return self._capacity - self._head + self._tail

    @property
    def num_free(self) -> int:
        """Number of elements that can be written."""
        if self._head > self._tail:
            return self._head - self._tail - 1
        return self._capacity - self._tail + self._head - 1

    def _range_from(self, start: int, count: int) -> FifoRange:
        first = min(count, self._capacity - start)
        second = count - first if count > first else 0
        return FifoRange(start, first, 0, second)

    def prepare_to_write(self, num_to_write: int) -> FifoRange:
        """Return the blocks where ``num_to_write`` elements should go."""
        return self._range_from(self._tail, num_to_write)

    def finish_write(self, num_written: int) -> None:
        """Mark ``num_written`` elements as written."""
        if num_written > 0:
            self._tail = (self._tail + num_written) % self._capacity

    def prepare_to_read(self, num_to_read: int) -> FifoRange:
        """Return the blocks where ``num_to_read`` elements can be read from."""
        return self._range_from(self._head, num_to_read)

    def finish_read(self, num_read: int) -> None:
        """Mark ``num_read`` elements as consumed."""
        if num_read > 0:
            self._head = (self._head + num_read) % self._capacity