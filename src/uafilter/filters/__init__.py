"""
Content filter construction and combination APIs for uafilter.
"""

from .algebra import combine, logical_and, logical_or, negate, renumber
from .content_filter import ContentFilter, ContentFilterElement, as_content_filter
from .errors import EmptyFilterError, FilterTreeError, IndexOutOfRangeError, InvalidReferenceError
from .inspection import (
    FilterFormatter,
    format_filter,
    is_forward_only,
    iter_element_references,
    reachable_positions,
)
from .operands import (
    OPERAND_TYPES,
    AttributeOperand,
    ElementOperand,
    LiteralOperand,
    Operand,
    SimpleAttributeOperand,
)
from .operators import FilterOperator

__all__ = [
    "AttributeOperand",
    "ContentFilter",
    "ContentFilterElement",
    "ElementOperand",
    "EmptyFilterError",
    "FilterFormatter",
    "FilterOperator",
    "FilterTreeError",
    "IndexOutOfRangeError",
    "InvalidReferenceError",
    "LiteralOperand",
    "OPERAND_TYPES",
    "Operand",
    "SimpleAttributeOperand",
    "as_content_filter",
    "combine",
    "format_filter",
    "is_forward_only",
    "iter_element_references",
    "logical_and",
    "logical_or",
    "negate",
    "reachable_positions",
    "renumber",
]
