"""Main LinkForge implementation."""

import logging
from collections.abc import AsyncIterable, Callable, Iterable, Iterator
from typing import Any, Generic

from linkforge.errors import CorruptListError, ListIndexError
from linkforge.node import Node
from linkforge.types import NEGATIVE_INDEX_POLICIES, Handle, NegativeIndexPolicy, R, T

logger = logging.getLogger(__name__)


class LinkForge(Generic[T]):
    """
    Doubly linked list whose nodes live in a handle table.

    Nodes never reference each other directly. Each one is stored in a dict
    keyed by an integer handle and points at its neighbours by handle. Handles
    come from a counter that only grows, so a handle is never reused during the
    lifetime of a list, even after its node is removed.
    """

    def __init__(
        self,
        data: Iterable[T] | None = None,
        *,
        negative_index: NegativeIndexPolicy = "from_tail",
    ) -> None:
        """
        Initialize the list.

        Args:
            data: Optional values pushed in order.
            negative_index: How at() resolves negative indices:
                - "from_tail": walk back from the tail counting 0, -1, -2, ...
                  so -1 is the element before the tail (default)
                - "python": -1 is the tail, as with built-in sequences

        Raises:
            ValueError: If negative_index is not a known policy
        """
        if negative_index not in NEGATIVE_INDEX_POLICIES:
            raise ValueError(f"Unknown negative index policy: {negative_index!r}")
        self._table: dict[Handle, Node[T]] = {}
        self._next_handle: Handle = 0
        self._head: Handle | None = None
        self._tail: Handle | None = None
        self._negative_index: NegativeIndexPolicy = negative_index
        if data is not None:
            self.extend(data)

    @classmethod
    def from_iterable(
        cls,
        data: Iterable[T],
        *,
        negative_index: NegativeIndexPolicy = "from_tail",
    ) -> "LinkForge[T]":
        """Build a list from a finite ordered source."""
        return cls(data, negative_index=negative_index)

    @classmethod
    async def from_async(
        cls,
        data: AsyncIterable[T],
        *,
        negative_index: NegativeIndexPolicy = "from_tail",
    ) -> "LinkForge[T]":
        """
        Build a list from an asynchronous source.

        Values are pushed in arrival order. The list is returned once the
        source is exhausted; errors raised by the source propagate unchanged.

        Args:
            data: Async iterable supplying the values
            negative_index: Policy for the new list (see __init__)

        Returns:
            The populated list
        """
        result = cls(negative_index=negative_index)
        async for item in data:
            result.push(item)
        logger.debug("Built list of %d items from async source", len(result))
        return result

    @property
    def length(self) -> int:
        """Number of nodes in the list."""
        return len(self._table)

    @property
    def negative_index(self) -> NegativeIndexPolicy:
        """Policy used by at() for negative indices."""
        return self._negative_index

    def _derive(self) -> "LinkForge[Any]":
        """Create an empty list with the same configuration."""
        return type(self)(negative_index=self._negative_index)

    def _nodes(self) -> Iterator[Node[T]]:
        """Yield nodes from head to tail."""
        node = self._table.get(self._head) if self._head is not None else None
        while node is not None:
            yield node
            node = self._table.get(node.next) if node.next is not None else None

    def _nodes_reversed(self) -> Iterator[Node[T]]:
        """Yield nodes from tail to head."""
        node = self._table.get(self._tail) if self._tail is not None else None
        while node is not None:
            yield node
            node = self._table.get(node.prev) if node.prev is not None else None

    def at(self, index: int) -> T | None:
        """
        Return the payload at a position, or None if there is none.

        Non-negative indices count from the head. Negative indices count back
        from the tail according to the list's negative_index policy.

        Args:
            index: Zero-based position

        Returns:
            The payload, or None when index is out of range
        """
        if index >= 0:
            for position, node in enumerate(self._nodes()):
                if position == index:
                    return node.data
            return None

        start = 0 if self._negative_index == "from_tail" else -1
        for position, node in enumerate(self._nodes_reversed()):
            if start - position == index:
                return node.data
        return None

    def push(self, value: T) -> "LinkForge[T]":
        """Append a value at the tail. O(1)."""
        handle = self._next_handle
        self._table[handle] = Node(value, prev=self._tail)
        if self._tail is not None:
            self._table[self._tail].next = handle
        self._tail = handle
        if self._head is None:
            self._head = handle
        self._next_handle += 1
        return self

    def unshift(self, value: T) -> "LinkForge[T]":
        """Prepend a value at the head. O(1)."""
        handle = self._next_handle
        self._table[handle] = Node(value, next=self._head)
        if self._head is not None:
            self._table[self._head].prev = handle
        self._head = handle
        if self._tail is None:
            self._tail = handle
        self._next_handle += 1
        return self

    def extend(self, values: Iterable[T]) -> "LinkForge[T]":
        """Append each value in order."""
        for value in values:
            self.push(value)
        return self

    def pop(self) -> T | None:
        """Remove and return the tail payload, or None if the list is empty. O(1)."""
        handle = self._tail
        if handle is None:
            return None

        node = self._table.pop(handle)
        if node.prev is not None:
            self._table[node.prev].next = None
        else:
            self._head = None
        self._tail = node.prev
        return node.data

    def shift(self) -> T | None:
        """Remove and return the head payload, or None if the list is empty. O(1)."""
        handle = self._head
        if handle is None:
            return None

        node = self._table.pop(handle)
        if node.next is not None:
            self._table[node.next].prev = None
        else:
            self._tail = None
        self._head = node.next
        return node.data

    def reverse(self) -> "LinkForge[T]":
        """Reverse the list in place in a single pass and return it."""
        handle = self._head
        while handle is not None:
            node = self._table[handle]
            node.next, node.prev = node.prev, node.next
            # The old next link is now stored in prev
            handle = node.prev
        self._head, self._tail = self._tail, self._head
        return self

    def to_list(self) -> list[T]:
        """Return the payloads from head to tail."""
        return [node.data for node in self._nodes()]

    def to_set(self) -> set[T]:
        """
        Return the distinct payloads.

        Raises:
            TypeError: If a payload is unhashable
        """
        result: set[T] = set()
        for node in self._nodes():
            result.add(node.data)
        return result

    def for_each(self, callback: Callable[[T, int], object]) -> None:
        """Call callback(payload, index) for each element from head to tail."""
        for index, node in enumerate(self._nodes()):
            callback(node.data, index)

    def map(self, callback: Callable[[T, int], R]) -> "LinkForge[R]":
        """Return a new list of callback(payload, index) for each element."""
        result: LinkForge[R] = self._derive()
        for index, node in enumerate(self._nodes()):
            result.push(callback(node.data, index))
        return result

    def filter(self, callback: Callable[[T, int], object]) -> "LinkForge[T]":
        """Return a new list of the elements for which callback(payload, index) is truthy."""
        result: LinkForge[T] = self._derive()
        for index, node in enumerate(self._nodes()):
            if callback(node.data, index):
                result.push(node.data)
        return result

    def reduce(
        self,
        callback: Callable[[R, T, int, "LinkForge[T]"], R],
        initial: R,
    ) -> R:
        """
        Fold the list from head to tail.

        Args:
            callback: Called as callback(accumulator, payload, index, self)
            initial: Starting accumulator

        Returns:
            The final accumulator
        """
        result = initial
        for index, node in enumerate(self._nodes()):
            result = callback(result, node.data, index, self)
        return result

    def concat(self, other: "LinkForge[T]") -> "LinkForge[T]":
        """Return a new list holding this list's elements followed by other's."""
        result: LinkForge[T] = self._derive()
        for node in self._nodes():
            result.push(node.data)
        for node in other._nodes():
            result.push(node.data)
        return result

    def check_integrity(self) -> None:
        """
        Verify the head/tail links and the handle table agree.

        Raises:
            CorruptListError: Describing the first inconsistency found
        """
        problem = self._find_corruption()
        if problem is not None:
            logger.debug("Integrity check failed: %s", problem)
            raise CorruptListError(problem)

    def _find_corruption(self) -> str | None:
        """Return a description of the first broken invariant, or None."""
        size = len(self._table)
        if (self._head is None) != (size == 0) or (self._tail is None) != (size == 0):
            return f"head={self._head!r}, tail={self._tail!r} with {size} nodes"
        if size == 0:
            return None

        for handle in self._table:
            if not 0 <= handle < self._next_handle:
                return f"handle {handle} was never issued (next handle {self._next_handle})"

        if self._head not in self._table or self._tail not in self._table:
            return f"head {self._head} or tail {self._tail} is not in the table"
        if self._table[self._head].prev is not None:
            return f"head {self._head} has a prev link"

        handle = self._head
        for _ in range(size - 1):
            node = self._table[handle]
            if node.next is None:
                return f"forward walk ended early at {handle}"
            if node.next not in self._table:
                return f"node {handle} links to missing handle {node.next}"
            if self._table[node.next].prev != handle:
                return f"node {node.next} does not link back to {handle}"
            handle = node.next
        if handle != self._tail:
            return f"forward walk reached {handle}, expected tail {self._tail}"
        if self._table[handle].next is not None:
            return f"tail {handle} has a next link"
        return None

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return len(self._table)

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return bool(self._table)

    def __iter__(self) -> Iterator[T]:
        """Iterate over payloads from the current head."""
        for node in self._nodes():
            yield node.data

    def __reversed__(self) -> Iterator[T]:
        """Iterate over payloads from the current tail."""
        for node in self._nodes_reversed():
            yield node.data

    def __contains__(self, value: object) -> bool:
        """Return True if any payload equals value."""
        return any(node.data == value for node in self._nodes())

    def __getitem__(self, index: int) -> T:
        """
        Return the payload at index using built-in sequence rules.

        Raises:
            TypeError: If index is not an int
            ListIndexError: If index is out of range
        """
        if not isinstance(index, int):
            raise TypeError(f"list indices must be integers, not {type(index).__name__}")
        size = len(self._table)
        position = index + size if index < 0 else index
        if not 0 <= position < size:
            raise ListIndexError(f"index {index} out of range for list of length {size}")
        if position < size // 2 + 1:
            nodes = self._nodes()
            steps = position
        else:
            nodes = self._nodes_reversed()
            steps = size - 1 - position
        for _ in range(steps):
            next(nodes)
        return next(nodes).data

    def __add__(self, other: object) -> "LinkForge[T]":
        """Concatenate with another LinkForge."""
        if not isinstance(other, LinkForge):
            return NotImplemented
        return self.concat(other)

    def __repr__(self) -> str:
        """Return a representation listing the payloads."""
        return f"{type(self).__name__}({self.to_list()!r})"
