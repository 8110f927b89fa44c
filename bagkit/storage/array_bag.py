"""
Bag backed by a contiguous buffer which doubles in size whenever it fills up.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from bagkit.interface.bag import Bag, CapacityExceeded, ElementT

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 25
MAX_CAPACITY = 10_000


class ArrayBag(Bag[ElementT]):
    """
    Bag whose elements occupy the prefix `[0, size)` of a fixed-length buffer.

    When the buffer is full it is reallocated with twice the capacity (clamped to `max_capacity`).
    Removal fills the freed slot with the last element, so the order of the remaining elements is
    only preserved up to that swap.
    """

    def __init__(
        self,
        values: Iterable[ElementT] = (),
        *,
        initial_capacity: Optional[int] = None,
        max_capacity: int = MAX_CAPACITY,
    ) -> None:
        if max_capacity <= 0:
            raise ValueError(f"Maximum capacity must be positive, got {max_capacity}")

        if initial_capacity is None:
            initial_capacity = min(DEFAULT_CAPACITY, max_capacity)
        elif initial_capacity < 0:
            raise ValueError(f"Initial capacity cannot be negative, got {initial_capacity}")
        if initial_capacity > max_capacity:
            raise CapacityExceeded(
                f"Requested capacity {initial_capacity} exceeds the maximum of {max_capacity}"
            )

        self._max_capacity = max_capacity
        self._buffer: List[Optional[ElementT]] = [None] * initial_capacity
        self._num_entries = 0

        self._add_all(values)

    @classmethod
    def with_capacity(cls, initial_capacity: int, **kwargs) -> ArrayBag[ElementT]:
        """Create an empty bag with room for `initial_capacity` elements before the first resize."""
        return cls(initial_capacity=initial_capacity, **kwargs)

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    def size(self) -> int:
        return self._num_entries

    def _is_full(self) -> bool:
        return self._num_entries >= len(self._buffer)

    def _grow(self) -> None:
        old_capacity = len(self._buffer)
        if old_capacity >= self._max_capacity:
            logger.warning(f"Cannot grow bag past its maximum capacity of {self._max_capacity}")
            raise CapacityExceeded(
                f"Bag is full at the maximum capacity of {self._max_capacity} elements"
            )

        new_capacity = min(max(2 * old_capacity, 1), self._max_capacity)
        logger.debug(f"Growing buffer from {old_capacity} to {new_capacity} slots")

        # Build the new buffer completely before swapping it in.
        self._buffer = self._buffer[: self._num_entries] + [None] * (
            new_capacity - self._num_entries
        )

    def add(self, item: ElementT) -> None:
        if self._is_full():
            self._grow()

        self._buffer[self._num_entries] = item
        self._num_entries += 1

    def remove_any(self) -> Optional[ElementT]:
        if self._num_entries == 0:
            return None

        return self._remove_at(self._num_entries - 1)

    def remove_one(self, item: ElementT) -> bool:
        index = self._index_of(item)
        if index < 0:
            return False

        self._remove_at(index)
        return True

    def _remove_at(self, index: int) -> Optional[ElementT]:
        last = self._num_entries - 1
        result = self._buffer[index]

        self._buffer[index] = self._buffer[last]
        self._buffer[last] = None
        self._num_entries -= 1

        return result

    def _index_of(self, item: ElementT) -> int:
        """Index of the first slot holding `item`, or -1 if there is none."""
        for index in range(self._num_entries):
            if self._buffer[index] == item:
                return index

        return -1

    def clear(self) -> None:
        for index in range(self._num_entries):
            self._buffer[index] = None
        self._num_entries = 0

    def frequency(self, item: ElementT) -> int:
        return sum(1 for index in range(self._num_entries) if self._buffer[index] == item)

    def contains(self, item: ElementT) -> bool:
        return self._index_of(item) >= 0

    def to_sequence(self) -> List[ElementT]:
        return self._buffer[: self._num_entries]  # type: ignore[return-value]

    def _empty_like(self) -> ArrayBag[ElementT]:
        return ArrayBag(max_capacity=self._max_capacity)
