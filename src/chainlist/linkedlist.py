"""Persistent singly-linked list built from immutable nodes."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic

from chainlist.errors import IndexOutOfRangeError
from chainlist.types import NULL_REPR, T

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False, repr=False)
class Node(Generic[T]):
    """An immutable node in the singly-linked list."""

    value: T | None = None
    next: "Node[T] | None" = None

    def __repr__(self) -> str:
        # Avoid recursing into the rest of the chain
        return f"Node(value={self.value!r})"


def _format_value(value: object) -> str:
    return NULL_REPR if value is None else str(value)


class LinkedList(Generic[T]):
    """
    Singly-linked list that always holds at least one node.

    A list created without data is seeded with a single node holding
    ``None``, so ``size`` is never zero. Nodes are immutable: every
    mutation builds fresh nodes for the prefix in front of the affected
    position, reuses the rest of the chain, and swaps in the new head.
    Node references obtained earlier keep describing the chain as it was.
    """

    def __init__(self, data: T | None = None) -> None:
        """
        Initialize the list.

        Args:
            data: Value held by the seed node (None = empty sentinel)
        """
        self._head: Node[T] = Node(data)

    @property
    def head(self) -> Node[T]:
        """Return the first node."""
        return self._head

    @property
    def tail(self) -> Node[T]:
        """Return the last node. O(n)."""
        node = self._head
        while node.next is not None:
            node = node.next
        return node

    @property
    def size(self) -> int:
        """Return the number of nodes in the chain. O(n)."""
        return sum(1 for _ in self._walk())

    def append(self, value: T) -> None:
        """Add a node holding value to the end of the list. O(n)."""
        self._head = self._rebuild(self._values(), Node(value))
        logger.debug("Appended %r", value)

    def prepend(self, value: T) -> None:
        """Add a node holding value to the front of the list. O(1)."""
        self._head = Node(value, self._head)
        logger.debug("Prepended %r", value)

    def at(self, index: int) -> Node[T]:
        """
        Return the node at index.

        Raises:
            IndexOutOfRangeError: If index is negative or >= size
        """
        if index < 0:
            raise IndexOutOfRangeError("Index outside list")
        node: Node[T] | None = self._head
        for _ in range(index):
            if node is None:
                break
            node = node.next
        if node is None:
            raise IndexOutOfRangeError("Index outside list")
        return node

    def pop(self) -> Node[T]:
        """
        Remove and return the last node.

        Popping the only node leaves a fresh empty seed node behind.
        """
        return self.remove_at(self.size - 1)

    def contains(self, value: object) -> bool:
        """Return True if any node holds a value equal to value."""
        return self.find(value) is not None

    def find(self, value: object) -> int | None:
        """
        Return the index of the first node holding a value equal to value.

        Returns:
            The index if found, None otherwise
        """
        for index, node in enumerate(self._walk()):
            if node.value == value:
                return index
        return None

    def insert_at(self, index: int, value: T) -> None:
        """
        Insert a node holding value at index, shifting later nodes back.

        Inserting at index == size appends.

        Raises:
            IndexOutOfRangeError: If index is negative or > size
        """
        if not 0 <= index <= self.size:
            raise IndexOutOfRangeError("Index outside of list")
        prefix, rest = self._split(index)
        self._head = self._rebuild(prefix, Node(value, rest))
        logger.debug("Inserted %r at index %d", value, index)

    def remove_at(self, index: int) -> Node[T]:
        """
        Remove and return the node at index.

        Removing the only node leaves a fresh empty seed node behind.

        Raises:
            IndexOutOfRangeError: If index is negative or >= size
        """
        if not 0 <= index < self.size:
            raise IndexOutOfRangeError("Index outside of list")
        prefix, removed = self._split(index)
        if removed is None:
            raise RuntimeError("Unexpected end of chain after bounds check")

        rest = removed.next
        if rest is None:
            if not prefix:
                # Last remaining node: fall back to the empty seed
                self._head = Node()
                logger.debug("Removed %r; list reset to empty seed", removed.value)
                return removed
            rest = Node(prefix.pop())

        self._head = self._rebuild(prefix, rest)
        logger.debug("Removed %r at index %d", removed.value, index)
        return removed

    def to_string(self) -> str:
        """Return the list rendered as ``( v1 ) -> ( v2 ) -> null``."""
        parts = [f"( {_format_value(node.value)} )" for node in self._walk()]
        parts.append(NULL_REPR)
        return " -> ".join(parts)

    def _walk(self) -> Iterator[Node[T]]:
        node: Node[T] | None = self._head
        while node is not None:
            yield node
            node = node.next

    def _values(self) -> list[T | None]:
        return [node.value for node in self._walk()]

    def _split(self, index: int) -> tuple[list[T | None], Node[T] | None]:
        """Return the values of the first index nodes and the node at index."""
        prefix: list[T | None] = []
        node: Node[T] | None = self._head
        for _ in range(index):
            if node is None:
                break
            prefix.append(node.value)
            node = node.next
        return prefix, node

    @staticmethod
    def _rebuild(prefix: list[T | None], rest: Node[T]) -> Node[T]:
        """Build fresh nodes for prefix in front of rest."""
        node = rest
        for value in reversed(prefix):
            node = Node(value, node)
        return node

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self.size

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"LinkedList({self.to_string()})"
