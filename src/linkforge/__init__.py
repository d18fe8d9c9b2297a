"""linkforge - Doubly linked list backed by a table of integer handles."""

from collections.abc import Iterable

from linkforge.core import LinkForge
from linkforge.errors import CorruptListError, LinkForgeError, ListIndexError
from linkforge.node import Node
from linkforge.types import Handle, NegativeIndexPolicy, T

__version__ = "0.0.1"

__all__ = [
    "LinkForge",
    "Node",
    "forge",
    "LinkForgeError",
    "ListIndexError",
    "CorruptListError",
    "Handle",
    "NegativeIndexPolicy",
]


def forge(
    data: Iterable[T] | None = None,
    *,
    negative_index: NegativeIndexPolicy = "from_tail",
) -> LinkForge[T]:
    """Create a LinkForge, optionally filled from data."""
    return LinkForge(data, negative_index=negative_index)
