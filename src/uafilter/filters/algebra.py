"""
Combinators producing new content filters from existing ones.

Every combinator copies its inputs into a fresh filter whose root is
element 0 and shifts each copied element operand by the position its
source filter now starts at. Inputs are never modified.

Precondition: the combined size must fit the wire index width (UInt32, or the
lower ``UAFILTER_MAX_ELEMENTS`` limit). Exceeding it raises ``FilterTreeError``.
"""

from __future__ import annotations

from typing import Tuple, Union

from ..config import get_settings
from ..utils import get_logger
from .content_filter import ContentFilter, ContentFilterElement, as_content_filter
from .errors import FilterTreeError
from .operands import (
    AttributeOperand,
    ElementOperand,
    LiteralOperand,
    Operand,
    SimpleAttributeOperand,
)
from .operators import LOGICAL_CONNECTIVES, FilterOperator

FilterLike = Union[ContentFilter, ContentFilterElement]

logger = get_logger("filters.algebra")


def shift_operand(operand: Operand, offset: int) -> Operand:
    if isinstance(operand, ElementOperand):
        return ElementOperand(operand.index + offset)
    if isinstance(operand, (LiteralOperand, AttributeOperand, SimpleAttributeOperand)):
        return operand
    raise TypeError(f"Unsupported filter operand {operand!r}")


def shift_element(element: ContentFilterElement, offset: int) -> ContentFilterElement:
    if offset == 0:
        return element
    return ContentFilterElement(
        element.filter_operator,
        [shift_operand(operand, offset) for operand in element.filter_operands],
    )


def renumber(value: FilterLike, offset: int) -> Tuple[ContentFilterElement, ...]:
    """
    Copy the elements of a filter, adding ``offset`` to every element operand.

    The result is a bare element tuple rather than a ``ContentFilter``: the
    shifted references only resolve once ``offset`` leading elements are
    placed in front of it.
    """

    if offset < 0:
        raise ValueError(f"Renumbering offset must be non-negative, got {offset}")
    source = as_content_filter(value)
    return tuple(shift_element(element, offset) for element in source.elements)


def negate(value: FilterLike) -> ContentFilter:
    """Return ``[Not(Ref 1)] + value`` shifted by one position."""

    source = as_content_filter(value)
    size = 1 + source.element_count()
    _check_size(size)
    root = ContentFilterElement(FilterOperator.Not, [ElementOperand(1)])
    elements = (root, *renumber(source, 1))
    logger.debug("Negated filter of %s elements", source.element_count())
    return ContentFilter._trusted(elements)


def combine(lhs: FilterLike, rhs: FilterLike, operator: FilterOperator) -> ContentFilter:
    """
    Join two filters under a new ``And``/``Or`` root.

    ``lhs`` occupies positions ``1..n`` and ``rhs`` positions ``n+1..n+m`` of the
    result, so the root operands are ``Ref(1)`` and ``Ref(1 + n)``.
    """

    if operator not in LOGICAL_CONNECTIVES:
        raise ValueError(f"Filters can only be combined with And or Or, not {operator!r}")
    left = as_content_filter(lhs)
    right = as_content_filter(rhs)
    lhs_size = left.element_count()
    rhs_size = right.element_count()
    _check_size(1 + lhs_size + rhs_size)

    root = ContentFilterElement(
        FilterOperator(operator),
        [ElementOperand(1), ElementOperand(1 + lhs_size)],
    )
    elements: Tuple[ContentFilterElement, ...] = (
        root,
        *renumber(left, 1),
        *renumber(right, 1 + lhs_size),
    )
    logger.debug(
        "Combined filters of %s and %s elements with %s",
        lhs_size,
        rhs_size,
        FilterOperator(operator).name,
    )
    return ContentFilter._trusted(elements)


def logical_and(lhs: FilterLike, rhs: FilterLike) -> ContentFilter:
    return combine(lhs, rhs, FilterOperator.And)


def logical_or(lhs: FilterLike, rhs: FilterLike) -> ContentFilter:
    return combine(lhs, rhs, FilterOperator.Or)


def _check_size(size: int) -> None:
    limit = get_settings().max_elements
    if size > limit:
        raise FilterTreeError(
            f"Combined filter would hold {size} elements; the index width allows {limit}."
        )
