"""
Read-only helpers for examining content filters.
"""

from __future__ import annotations

from typing import Iterator, List, Set, Tuple

from .content_filter import ContentFilter, ContentFilterElement, as_content_filter
from .operands import (
    AttributeOperand,
    ElementOperand,
    LiteralOperand,
    Operand,
    SimpleAttributeOperand,
)
from .operators import FilterOperator

INFIX_OPERATORS = {
    FilterOperator.And: "AND",
    FilterOperator.Or: "OR",
}


def iter_element_references(value: ContentFilter | ContentFilterElement) -> Iterator[Tuple[int, int, int]]:
    """Yield ``(position, operand_position, target)`` for every element operand."""

    tree = as_content_filter(value)
    for position, element in enumerate(tree.elements):
        for operand_position, target in element.element_references():
            yield position, operand_position, target


def is_forward_only(value: ContentFilter | ContentFilterElement) -> bool:
    return all(target > position for position, _, target in iter_element_references(value))


def reachable_positions(value: ContentFilter | ContentFilterElement) -> Set[int]:
    tree = as_content_filter(value)
    seen: Set[int] = set()
    pending: List[int] = [0]
    while pending:
        position = pending.pop()
        if position in seen:
            continue
        seen.add(position)
        for _, target in tree.elements[position].element_references():
            if target not in seen:
                pending.append(target)
    return seen


class FilterFormatter:
    """
    Render a content filter as a readable expression, starting at the root.
    """

    def __init__(self, tree: ContentFilter | ContentFilterElement) -> None:
        self.tree = as_content_filter(tree)

    def format(self) -> str:
        return self._format_element(0, frozenset())

    # Helpers -----------------------------------------------------------
    def _format_element(self, position: int, visiting: frozenset) -> str:
        element = self.tree.elements[position]
        visiting = visiting | {position}
        args = [self._format_operand(operand, visiting) for operand in element.filter_operands]
        operator = element.filter_operator

        connector = INFIX_OPERATORS.get(operator)
        if connector is not None and args:
            return f" {connector} ".join(f"({arg})" for arg in args)
        if operator == FilterOperator.Not and len(args) == 1:
            return f"NOT ({args[0]})"
        return f"{operator.name}({', '.join(args)})"

    def _format_operand(self, operand: Operand, visiting: frozenset) -> str:
        if isinstance(operand, ElementOperand):
            if operand.index in visiting:
                return f"@{operand.index}"
            return self._format_element(operand.index, visiting)
        if isinstance(operand, LiteralOperand):
            return repr(operand.value)
        if isinstance(operand, SimpleAttributeOperand):
            return "/".join(str(step) for step in operand.browse_path) or operand.attribute_id.name
        if isinstance(operand, AttributeOperand):
            if operand.alias:
                return operand.alias
            return "/".join(str(step.target_name) for step in operand.browse_path) or operand.attribute_id.name
        raise TypeError(f"Unsupported filter operand {operand!r}")


def format_filter(value: ContentFilter | ContentFilterElement) -> str:
    return FilterFormatter(value).format()
