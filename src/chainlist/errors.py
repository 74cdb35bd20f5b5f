"""Exception classes for chainlist."""


class ChainListError(Exception):
    """Base exception for all chainlist errors."""


class IndexOutOfRangeError(ChainListError, IndexError):
    """Raised when an index falls outside the valid bounds of the list."""
