"""A fixed-capacity binary min-heap of city/cost pairs."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class NodeCost:
    """A city paired with the total cost of reaching it."""

    city_index: int = -1
    cost: float = math.inf

    def __lt__(self, other: NodeCost) -> bool:
        return self.cost < other.cost

    def __gt__(self, other: NodeCost) -> bool:
        return self.cost > other.cost


class MinHeap:
    """Binary min-heap ordered by cost, holding at most ``capacity`` entries.

    Inserting into a full heap leaves it unchanged.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[NodeCost] = []

    def __len__(self) -> int:
        return len(self._items)

    def empty(self) -> bool:
        """Return True when the heap holds nothing."""
        return not self._items

    def insert(self, node: NodeCost) -> bool:
        """Add ``node``; return False if the heap was full and it was dropped."""
        if len(self._items) >= self.capacity:
            return False
        self._items.append(node)
        self._sift_up(len(self._items) - 1)
        return True

    def extract_min(self) -> NodeCost:
        """Remove and return the entry with the lowest cost."""
        if not self._items:
            raise IndexError("extract_min from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return root

    def decrease_key(self, index: int, new_cost: float) -> None:
        """Set the cost of the entry at heap position ``index`` and restore order."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"heap index {index} out of range")
        self._items[index].cost = new_cost
        self._sift_up(index)

    def _sift_up(self, i: int) -> None:
        items = self._items
        while i > 0:
            parent = (i - 1) // 2
            if not items[parent] > items[i]:
                break
            items[i], items[parent] = items[parent], items[i]
            i = parent

    def _sift_down(self, i: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < size and items[child] < items[smallest]:
                    smallest = child
            if smallest == i:
                return
            items[i], items[smallest] = items[smallest], items[i]
            i = smallest