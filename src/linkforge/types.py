"""Type definitions for linkforge."""

from typing import Literal, TypeAlias, TypeVar

# Generic type variables for payloads and derived values
T = TypeVar("T")  # Payload type
R = TypeVar("R")  # Result type of map/reduce

# Integer key of a node in a list's table
Handle: TypeAlias = int

# How at() resolves negative indices
NegativeIndexPolicy: TypeAlias = Literal["from_tail", "python"]

NEGATIVE_INDEX_POLICIES: tuple[NegativeIndexPolicy, ...] = ("from_tail", "python")
