"""Node record stored in a list's handle table."""

from dataclasses import dataclass
from typing import Generic

from linkforge.types import Handle, T


@dataclass
class Node(Generic[T]):
    """A payload plus the handles of its neighbours."""

    data: T
    next: Handle | None = None  # None at the tail
    prev: Handle | None = None  # None at the head
