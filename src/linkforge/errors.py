"""Exception classes for linkforge."""


class LinkForgeError(Exception):
    """Base exception for all linkforge errors."""


class ListIndexError(LinkForgeError, IndexError):
    """Raised when subscripting a list with an index outside its bounds."""


class CorruptListError(LinkForgeError):
    """Raised when the handle table no longer matches the head/tail links."""
