"""
Content filter elements and the flat, position-indexed filter they form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, Tuple, Union, overload

from ..config import get_settings
from ..utils import get_logger
from .errors import EmptyFilterError, IndexOutOfRangeError, InvalidReferenceError
from .operands import ElementOperand, Operand, ensure_operand
from .operators import FilterOperator

if TYPE_CHECKING:
    from .algebra import FilterLike


logger = get_logger("filters")


@dataclass(frozen=True)
class ContentFilterElement:
    """
    One node of a content filter: an operator tag applied to an ordered operand list.
    """

    filter_operator: FilterOperator
    filter_operands: Tuple[Operand, ...] = ()

    def __init__(self, filter_operator: FilterOperator, filter_operands: Iterable[Operand] = ()) -> None:
        object.__setattr__(self, "filter_operator", FilterOperator(filter_operator))
        object.__setattr__(
            self, "filter_operands", tuple(ensure_operand(operand) for operand in filter_operands)
        )

    def element_references(self) -> Iterator[Tuple[int, int]]:
        """Yield ``(operand_position, target)`` for each element operand."""

        for operand_position, operand in enumerate(self.filter_operands):
            if isinstance(operand, ElementOperand):
                yield operand_position, operand.index

    # Operator sugar ----------------------------------------------------
    def __invert__(self) -> "ContentFilter":
        from .algebra import negate

        return negate(self)

    def __and__(self, other: "FilterLike") -> "ContentFilter":
        from .algebra import logical_and

        return logical_and(self, other)

    def __or__(self, other: "FilterLike") -> "ContentFilter":
        from .algebra import logical_or

        return logical_or(self, other)


class ContentFilter:
    """
    Ordered, non-empty sequence of filter elements with element 0 as the root.

    Element operands address other elements by position. Every reference is
    checked to be in range when the filter is built; instances are immutable
    afterwards and may be shared freely.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[ContentFilterElement], *, strict: bool | None = None) -> None:
        items = tuple(elements)
        for item in items:
            if not isinstance(item, ContentFilterElement):
                raise TypeError(f"Expected ContentFilterElement, got {type(item).__name__}")
        if strict is None:
            strict = get_settings().strict_references
        _validate_references(items, strict=strict)
        self._elements: Tuple[ContentFilterElement, ...] = items

    @classmethod
    def from_elements(cls, elements: Iterable[ContentFilterElement], *, strict: bool | None = None) -> "ContentFilter":
        return cls(elements, strict=strict)

    @classmethod
    def from_element(cls, element: ContentFilterElement) -> "ContentFilter":
        return cls((element,))

    @classmethod
    def _trusted(cls, elements: Tuple[ContentFilterElement, ...]) -> "ContentFilter":
        # Used by the combinators, whose output is valid by construction.
        instance = cls.__new__(cls)
        instance._elements = elements
        return instance

    # Accessors ---------------------------------------------------------
    @property
    def elements(self) -> Tuple[ContentFilterElement, ...]:
        return self._elements

    @property
    def root(self) -> ContentFilterElement:
        return self._elements[0]

    def element_count(self) -> int:
        return len(self._elements)

    def element(self, position: int) -> ContentFilterElement:
        if isinstance(position, bool) or not isinstance(position, int):
            raise TypeError(f"Element position must be an int, got {type(position).__name__}")
        if position < 0 or position >= len(self._elements):
            raise IndexOutOfRangeError(position, len(self._elements))
        return self._elements[position]

    @overload
    def __getitem__(self, position: int) -> ContentFilterElement: ...

    @overload
    def __getitem__(self, position: slice) -> Tuple[ContentFilterElement, ...]: ...

    def __getitem__(self, position):
        if isinstance(position, slice):
            return self._elements[position]
        return self.element(position)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[ContentFilterElement]:
        return iter(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentFilter):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash(self._elements)

    def __repr__(self) -> str:
        return f"ContentFilter({list(self._elements)!r})"

    # Operator sugar ----------------------------------------------------
    def __invert__(self) -> "ContentFilter":
        from .algebra import negate

        return negate(self)

    def __and__(self, other: "FilterLike") -> "ContentFilter":
        from .algebra import logical_and

        return logical_and(self, other)

    def __or__(self, other: "FilterLike") -> "ContentFilter":
        from .algebra import logical_or

        return logical_or(self, other)


def as_content_filter(value: Union[ContentFilter, ContentFilterElement]) -> ContentFilter:
    """Promote a single element to a one-element leaf filter."""

    if isinstance(value, ContentFilter):
        return value
    if isinstance(value, ContentFilterElement):
        return ContentFilter.from_element(value)
    raise TypeError(f"Expected ContentFilter or ContentFilterElement, got {type(value).__name__}")


def _validate_references(elements: Tuple[ContentFilterElement, ...], *, strict: bool) -> None:
    size = len(elements)
    if size == 0:
        logger.debug("Rejected content filter without elements")
        raise EmptyFilterError()

    for position, element in enumerate(elements):
        for operand_position, target in element.element_references():
            if target < 0 or target >= size:
                logger.debug(
                    "Rejected reference %s at element %s (size %s)", target, position, size
                )
                raise InvalidReferenceError(position, operand_position, target, size)
            if strict and target <= position:
                logger.debug(
                    "Rejected non-forward reference %s at element %s", target, position
                )
                raise InvalidReferenceError(
                    position,
                    operand_position,
                    target,
                    size,
                    reason="strict mode only allows references to later elements",
                )
