"""
Protocol value types shared by the filter and monitoring packages.
"""

from .ids import (
    NULL_NODE_ID,
    AttributeId,
    NodeId,
    ObjectId,
    ObjectTypeId,
    QualifiedName,
    ReferenceTypeId,
    RelativePathElement,
)

__all__ = [
    "AttributeId",
    "NULL_NODE_ID",
    "NodeId",
    "ObjectId",
    "ObjectTypeId",
    "QualifiedName",
    "ReferenceTypeId",
    "RelativePathElement",
]
