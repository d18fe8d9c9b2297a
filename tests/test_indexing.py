"""Tests pinning how at() resolves indices."""

from linkforge import LinkForge


def test_at_negative_walks_from_tail() -> None:
    """Test that -1 is the element before the tail by default."""
    # The walk starts at the tail with count 0. Starting at the head and
    # following prev instead would return None for every negative index.
    lst = LinkForge(["a", "b", "c", "d"])
    assert lst.negative_index == "from_tail"
    assert lst.at(-1) == "c"
    assert lst.at(-2) == "b"
    assert lst.at(-3) == "a"
    assert lst.at(-4) is None


def test_at_negative_single_element() -> None:
    """Test that the tail is never reached by a negative index."""
    lst = LinkForge(["a"])
    assert lst.at(-1) is None
    assert lst.at(0) == "a"


def test_at_negative_python_policy() -> None:
    """Test that the python policy treats -1 as the tail."""
    lst = LinkForge(["a", "b", "c", "d"], negative_index="python")
    assert lst.at(-1) == "d"
    assert lst.at(-4) == "a"
    assert lst.at(-5) is None
    assert lst.at(0) == "a"


def test_at_empty_list() -> None:
    """Test at() on an empty list for both policies."""
    for policy in ("from_tail", "python"):
        lst = LinkForge[int](negative_index=policy)  # type: ignore[arg-type]
        assert lst.at(0) is None
        assert lst.at(-1) is None


def test_at_after_reverse() -> None:
    """Test at() follows the reversed links."""
    lst = LinkForge([1, 2, 3]).reverse()
    assert lst.at(0) == 3
    assert lst.at(2) == 1
    assert lst.at(-1) == 2


def test_at_does_not_mutate() -> None:
    """Test at() is a pure read."""
    lst = LinkForge([1, 2, 3])
    lst.at(1)
    lst.at(-1)
    lst.at(10)
    assert lst.to_list() == [1, 2, 3]


def test_getitem_ignores_policy() -> None:
    """Test subscripts always use built-in sequence rules."""
    lst = LinkForge([1, 2, 3], negative_index="from_tail")
    assert lst[-1] == 3
    assert lst.at(-1) == 2
