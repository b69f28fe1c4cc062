"""Sweep-line status structure.

An ordered set of segment indices kept as a skip list. The ordering predicate
is not part of the element type: every operation that has to compare receives
``less(a, b)`` explicitly, because the order between two segments is only
meaningful at the current sweep position.

Nodes are also reachable through a handle map (index -> node), so neighbour
queries and removals of a present element never consult the predicate. This
matters because by the time a segment ends the sweep has moved on from the x
at which it was inserted.
"""
from __future__ import annotations

import random
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .constants import MAX_LEVEL, LEVEL_PROBABILITY

Less = Callable[[int, int], bool]

__all__ = ['SweepStatus', 'StatusOrderError']


class StatusOrderError(RuntimeError):
    """Raised when adjacent status entries are found out of order."""


class _Node:
    __slots__ = ('index', 'next', 'prev')

    def __init__(self, index: Optional[int], level: int):
        self.index = index
        self.next: List[Optional['_Node']] = [None] * level
        self.prev: List[Optional['_Node']] = [None] * level


class SweepStatus:
    """Skip list of segment indices ordered bottom (lowest y) to top."""

    def __init__(self, seed: int = 0, max_level: int = MAX_LEVEL,
                 level_probability: float = LEVEL_PROBABILITY):
        self._rng = random.Random(seed)
        self._max_level = max_level
        self._p = level_probability
        self._head = _Node(None, max_level)
        self._level = 1
        self._nodes: Dict[int, _Node] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, index: int) -> bool:
        return index in self._nodes

    def __iter__(self) -> Iterator[int]:
        node = self._head.next[0]
        while node is not None:
            yield node.index
            node = node.next[0]

    def __repr__(self) -> str:
        return f"SweepStatus({list(self)!r})"

    def _random_level(self) -> int:
        lvl = 1
        while lvl < self._max_level and self._rng.random() < self._p:
            lvl += 1
        return lvl

    def _search(self, index: int, less: Less) -> List[_Node]:
        """Per level, the last node strictly below ``index``."""
        update = [self._head] * self._max_level
        node = self._head
        for lvl in range(self._level - 1, -1, -1):
            nxt = node.next[lvl]
            while nxt is not None and less(nxt.index, index):
                node = nxt
                nxt = node.next[lvl]
            update[lvl] = node
        return update

    def _index_of(self, node: Optional[_Node]) -> Optional[int]:
        if node is None or node is self._head:
            return None
        return node.index

    def locate(self, index: int, less: Less) -> Tuple[Optional[int], Optional[int]]:
        """Return ``(below, above)``: the neighbours ``index`` would get on insert.

        ``above`` is the lowest entry not below ``index`` (lower bound) and
        ``below`` the entry right under it. Either is None at the ends.
        """
        below = self._search(index, less)[0]
        return self._index_of(below), self._index_of(below.next[0])

    def insert(self, index: int, less: Less) -> None:
        """Insert ``index`` at its lower-bound position."""
        if index in self._nodes:
            raise KeyError(f"segment {index} is already in the sweep status")
        update = self._search(index, less)
        lvl = self._random_level()
        if lvl > self._level:
            self._level = lvl
        node = _Node(index, lvl)
        for i in range(lvl):
            left = update[i]
            right = left.next[i]
            node.prev[i] = left
            node.next[i] = right
            left.next[i] = node
            if right is not None:
                right.prev[i] = node
        self._nodes[index] = node

    def neighbors(self, index: int) -> Tuple[Optional[int], Optional[int]]:
        """Return ``(below, above)`` of an entry already in the structure."""
        node = self._nodes[index]
        return self._index_of(node.prev[0]), self._index_of(node.next[0])

    def remove(self, index: int) -> None:
        node = self._nodes.pop(index)
        for i in range(len(node.next)):
            left = node.prev[i]
            right = node.next[i]
            left.next[i] = right
            if right is not None:
                right.prev[i] = left
        while self._level > 1 and self._head.next[self._level - 1] is None:
            self._level -= 1

    def validate(self, less: Less) -> None:
        """Check that no entry is strictly below the one under it.

        Raises :class:`StatusOrderError` naming the first offending pair.
        """
        prev = None
        for idx in self:
            if prev is not None and less(idx, prev):
                raise StatusOrderError(
                    f"segment {idx} sorts below segment {prev} but sits above it"
                )
            prev = idx
