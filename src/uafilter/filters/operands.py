"""
Operand variants that may appear inside a content filter element.

The set is closed: every consumer dispatches over exactly these four classes.
``ElementOperand`` holds a bare position so that references survive copying
a filter into a larger one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Tuple, Union

from ..core.ids import (
    NULL_NODE_ID,
    AttributeId,
    NodeId,
    NodeIdLike,
    QualifiedName,
    QualifiedNameLike,
    RelativePathElement,
)


@dataclass(frozen=True)
class ElementOperand:
    index: int

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError(f"Element operand index must be an int, got {type(self.index).__name__}")


@dataclass(frozen=True, eq=False)
class LiteralOperand:
    value: Any

    # Literals are typed protocol values: True, 1 and 1.0 are distinct.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LiteralOperand):
            return NotImplemented
        return type(self.value) is type(other.value) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self.value), self.value))


@dataclass(frozen=True)
class AttributeOperand:
    node_id: NodeId
    alias: str
    browse_path: Tuple[RelativePathElement, ...]
    attribute_id: AttributeId
    index_range: str = ""

    def __init__(
        self,
        node_id: NodeIdLike,
        alias: str,
        browse_path: Iterable[RelativePathElement],
        attribute_id: AttributeId,
        index_range: str = "",
    ) -> None:
        object.__setattr__(self, "node_id", NodeId.coerce(node_id))
        object.__setattr__(self, "alias", alias)
        object.__setattr__(self, "browse_path", tuple(browse_path))
        object.__setattr__(self, "attribute_id", AttributeId(attribute_id))
        object.__setattr__(self, "index_range", index_range)


@dataclass(frozen=True)
class SimpleAttributeOperand:
    type_definition_id: NodeId
    browse_path: Tuple[QualifiedName, ...]
    attribute_id: AttributeId
    index_range: str = ""

    def __init__(
        self,
        type_definition_id: NodeIdLike | None,
        browse_path: Iterable[QualifiedNameLike],
        attribute_id: AttributeId,
        index_range: str = "",
    ) -> None:
        type_id = NULL_NODE_ID if type_definition_id is None else NodeId.coerce(type_definition_id)
        object.__setattr__(self, "type_definition_id", type_id)
        object.__setattr__(
            self, "browse_path", tuple(QualifiedName.coerce(step) for step in browse_path)
        )
        object.__setattr__(self, "attribute_id", AttributeId(attribute_id))
        object.__setattr__(self, "index_range", index_range)


Operand = Union[ElementOperand, LiteralOperand, AttributeOperand, SimpleAttributeOperand]

OPERAND_TYPES = (ElementOperand, LiteralOperand, AttributeOperand, SimpleAttributeOperand)


def ensure_operand(value: object) -> Operand:
    if isinstance(value, OPERAND_TYPES):
        return value
    raise TypeError(f"Unsupported filter operand {value!r}")
