"""
uafilter public package initialization.

Build OPC UA content filters from elements, then combine them with
``negate``/``logical_and``/``logical_or`` or the ``~``/``&``/``|`` operators.
"""

from .config import ConfigurationError, FilterSettings, get_settings, reset_settings  # noqa: F401
from .core import AttributeId, NodeId, ObjectTypeId, QualifiedName, ReferenceTypeId, RelativePathElement  # noqa: F401
from .filters import (  # noqa: F401
    AttributeOperand,
    ContentFilter,
    ContentFilterElement,
    ElementOperand,
    EmptyFilterError,
    FilterOperator,
    FilterTreeError,
    IndexOutOfRangeError,
    InvalidReferenceError,
    LiteralOperand,
    SimpleAttributeOperand,
    combine,
    format_filter,
    logical_and,
    logical_or,
    negate,
)
from .monitoring import DataChangeFilter, EventFilter  # noqa: F401

__all__ = [
    "AttributeId",
    "AttributeOperand",
    "ConfigurationError",
    "ContentFilter",
    "ContentFilterElement",
    "DataChangeFilter",
    "ElementOperand",
    "EmptyFilterError",
    "EventFilter",
    "FilterOperator",
    "FilterSettings",
    "FilterTreeError",
    "IndexOutOfRangeError",
    "InvalidReferenceError",
    "LiteralOperand",
    "NodeId",
    "ObjectTypeId",
    "QualifiedName",
    "ReferenceTypeId",
    "RelativePathElement",
    "SimpleAttributeOperand",
    "combine",
    "format_filter",
    "get_settings",
    "logical_and",
    "logical_or",
    "negate",
    "reset_settings",
]
