"""Tests for building lists from asynchronous sources."""

import asyncio
from collections.abc import AsyncIterator

import pytest

from linkforge import LinkForge


async def produce(values: list[int], delay: float = 0.0) -> AsyncIterator[int]:
    for value in values:
        await asyncio.sleep(delay)
        yield value


@pytest.mark.asyncio
async def test_from_async() -> None:
    """Test values are pushed in arrival order."""
    lst = await LinkForge.from_async(produce([3, 1, 2], delay=0.001))
    assert lst.to_list() == [3, 1, 2]
    lst.check_integrity()


@pytest.mark.asyncio
async def test_from_async_empty() -> None:
    """Test an exhausted source yields an empty list."""
    lst = await LinkForge.from_async(produce([]))
    assert len(lst) == 0
    assert lst.pop() is None


@pytest.mark.asyncio
async def test_from_async_policy() -> None:
    """Test the policy is passed through."""
    lst = await LinkForge.from_async(produce([1, 2]), negative_index="python")
    assert lst.at(-1) == 2


@pytest.mark.asyncio
async def test_from_async_source_error_propagates() -> None:
    """Test errors from the source reach the caller."""

    async def failing() -> AsyncIterator[int]:
        yield 1
        raise ValueError("source failed")

    with pytest.raises(ValueError, match="source failed"):
        await LinkForge.from_async(failing())


@pytest.mark.asyncio
async def test_from_async_concurrent_builders() -> None:
    """Test that interleaved builders keep separate tables."""
    a, b = await asyncio.gather(
        LinkForge.from_async(produce([1, 2, 3], delay=0.001)),
        LinkForge.from_async(produce([10, 20], delay=0.001)),
    )
    assert a.to_list() == [1, 2, 3]
    assert b.to_list() == [10, 20]
    assert a._next_handle == 3
    assert b._next_handle == 2
