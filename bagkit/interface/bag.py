from __future__ import annotations

import abc
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

ElementT = TypeVar("ElementT")


class CapacityExceeded(Exception):
    """Raised when a bag would need to hold more elements than its configured maximum."""


class Bag(abc.ABC, Generic[ElementT]):
    """Base class for a mutable multi-set (i.e. set where elements are allowed to repeat).

    Elements only need to support `==`; they are never hashed or sorted, so all lookups are linear
    in the size of the bag. Subclasses decide how the elements are stored, while the set-style
    combinators (`union`, `intersection`, `difference`) are implemented here once on top of the
    storage primitives.
    """

    @abc.abstractmethod
    def size(self) -> int:
        """Number of elements in the bag, counting repeats."""
        raise NotImplementedError

    def is_empty(self) -> bool:
        return self.size() == 0

    @abc.abstractmethod
    def add(self, item: ElementT) -> None:
        """Adds one occurrence of `item` to the bag."""
        raise NotImplementedError

    @abc.abstractmethod
    def remove_any(self) -> Optional[ElementT]:
        """Removes and returns an unspecified element, or returns `None` if the bag is empty."""
        raise NotImplementedError

    @abc.abstractmethod
    def remove_one(self, item: ElementT) -> bool:
        """Removes one occurrence of `item`, returning whether anything was removed."""
        raise NotImplementedError

    @abc.abstractmethod
    def clear(self) -> None:
        """Removes every element, leaving an empty bag."""
        raise NotImplementedError

    @abc.abstractmethod
    def frequency(self, item: ElementT) -> int:
        """Number of times `item` occurs in the bag."""
        raise NotImplementedError

    @abc.abstractmethod
    def contains(self, item: ElementT) -> bool:
        """Whether `item` occurs at least once; stops at the first match."""
        raise NotImplementedError

    @abc.abstractmethod
    def to_sequence(self) -> List[ElementT]:
        """Returns a newly allocated list with all the elements, in storage order."""
        raise NotImplementedError

    @abc.abstractmethod
    def _empty_like(self) -> Bag[ElementT]:
        """Returns a new empty bag of the same variant (and storage settings) as this one."""
        raise NotImplementedError

    def union(self, other: Bag[ElementT]) -> Bag[ElementT]:
        """Bag with every element of `self` followed by every element of `other`.

        The frequency of each element in the result is the sum of its frequencies in both inputs.
        """
        _check_is_bag(other)

        result = self._empty_like()
        for item in self.to_sequence():
            result.add(item)
        for item in other.to_sequence():
            result.add(item)

        return result

    def intersection(self, other: Bag[ElementT]) -> Bag[ElementT]:
        """Bag with the elements shared by `self` and `other`.

        Each distinct element of `self` appears `min(freq_self, freq_other)` times.
        """
        _check_is_bag(other)

        result = self._empty_like()
        for item in self.to_sequence():
            # Each distinct element is handled in full the first time it is seen.
            if result.contains(item):
                continue

            for _ in range(min(self.frequency(item), other.frequency(item))):
                result.add(item)

        return result

    def difference(self, other: Bag[ElementT]) -> Bag[ElementT]:
        """Bag with what is left of `self` after removing everything shared with `other`.

        Each distinct element of `self` appears `max(freq_self - freq_other, 0)` times.
        """
        _check_is_bag(other)

        result = self._empty_like()
        for item in self.to_sequence():
            if result.contains(item):
                continue

            for _ in range(max(self.frequency(item) - other.frequency(item), 0)):
                result.add(item)

        return result

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[ElementT]:
        # Iterate over a snapshot so that the bag can be modified while iterating.
        return iter(self.to_sequence())

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Bag):
            return False

        if self.size() != other.size():
            return False

        return all(self.frequency(item) == other.frequency(item) for item in self.to_sequence())

    # Bags are mutable, so they cannot be used as dictionary keys.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_sequence()!r})"

    def _add_all(self, values: Iterable[ElementT]) -> None:
        for value in values:
            self.add(value)


def _check_is_bag(other: Any) -> None:
    if not isinstance(other, Bag):
        raise TypeError(f"Expected a Bag, got {type(other).__name__}")
