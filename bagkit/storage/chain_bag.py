"""
Bag backed by a singly linked chain of nodes. The bag is never full.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, List, Optional

from bagkit.interface.bag import Bag, ElementT


@dataclass(eq=False)
class _Node(Generic[ElementT]):
    data: ElementT
    next: Optional[_Node[ElementT]] = None


class ChainBag(Bag[ElementT]):
    """
    Bag whose elements live in a chain of nodes. New elements are linked in at the head, so
    traversal (and `to_sequence`) yields the most recently added element first.

    Each node is referenced only by its predecessor (or by the bag itself for the head).
    """

    def __init__(self, values: Iterable[ElementT] = ()) -> None:
        self._head: Optional[_Node[ElementT]] = None
        self._num_entries = 0

        self._add_all(values)

    def _iter_nodes(self) -> Iterator[_Node[ElementT]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def size(self) -> int:
        return self._num_entries

    def add(self, item: ElementT) -> None:
        self._head = _Node(item, self._head)
        self._num_entries += 1

    def remove_any(self) -> Optional[ElementT]:
        if self._head is None:
            return None

        result = self._head.data
        self._head = self._head.next
        self._num_entries -= 1
        return result

    def remove_one(self, item: ElementT) -> bool:
        """
        Removes one occurrence of `item`.

        The matching node takes over the data of the head node, and then the head node is
        unlinked. This makes removal cheap but moves the head element to where `item` used to
        be, so the order of the remaining elements is not preserved.
        """
        node = self._find_node(item)
        if node is None:
            return False

        assert self._head is not None
        node.data = self._head.data
        self.remove_any()
        return True

    def _find_node(self, item: ElementT) -> Optional[_Node[ElementT]]:
        for node in self._iter_nodes():
            if node.data == item:
                return node

        return None

    def clear(self) -> None:
        # Dropping the head makes the whole chain unreachable.
        self._head = None
        self._num_entries = 0

    def frequency(self, item: ElementT) -> int:
        return sum(1 for node in self._iter_nodes() if node.data == item)

    def contains(self, item: ElementT) -> bool:
        return self._find_node(item) is not None

    def to_sequence(self) -> List[ElementT]:
        return [node.data for node in self._iter_nodes()]

    def _empty_like(self) -> ChainBag[ElementT]:
        return ChainBag()
