"""Exception types raised by dsakit."""

from __future__ import annotations

import operator


class DsakitError(Exception):
    """Base class for dsakit errors."""


class InvalidIndexError(DsakitError, IndexError):
    """An element or node index falls outside its valid range."""

    def __init__(self, index: int, upper: int, what: str = "index") -> None:
        super().__init__(f"{what} {index} out of range [0, {upper})")
        self.index = index
        self.upper = upper


class InvalidWeightError(DsakitError, ValueError):
    """A negative or NaN edge weight was given to a shortest-path routine."""

    def __init__(self, source: int, target: int, weight) -> None:
        super().__init__(f"edge ({source}, {target}) has weight {weight}, expected a non-negative number")
        self.source = source
        self.target = target
        self.weight = weight


def check_index(index, upper: int, what: str = "index") -> int:
    """Return ``index`` as an ``int`` in ``[0, upper)`` or raise.

    Integer-like values such as NumPy integers are accepted. Floats and
    booleans raise ``TypeError``.
    """

    if isinstance(index, bool):
        raise TypeError(f"{what} must be an integer, not bool")
    index = operator.index(index)
    if not 0 <= index < upper:
        raise InvalidIndexError(index, upper, what)
    return index
