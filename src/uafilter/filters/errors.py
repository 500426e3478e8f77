"""
Error hierarchy for content filter construction and lookup.
"""

from __future__ import annotations


class FilterTreeError(Exception):
    """Base error for content filter failures."""


class EmptyFilterError(FilterTreeError):
    """Raised when a content filter is built from no elements."""

    def __init__(self) -> None:
        super().__init__("A content filter requires at least one element.")


class InvalidReferenceError(FilterTreeError):
    """Raised when an element operand points outside of its filter."""

    def __init__(self, position: int, operand_position: int, target: int, size: int, *, reason: str | None = None) -> None:
        self.position = position
        self.operand_position = operand_position
        self.target = target
        self.size = size
        detail = reason or f"valid positions are 0..{size - 1}"
        super().__init__(
            f"Element {position} operand {operand_position} references element {target}; {detail}."
        )


class IndexOutOfRangeError(FilterTreeError, IndexError):
    """Raised when looking up an element position that does not exist."""

    def __init__(self, position: int, size: int) -> None:
        self.position = position
        self.size = size
        super().__init__(f"Element position {position} is out of range for a filter of {size} elements.")
