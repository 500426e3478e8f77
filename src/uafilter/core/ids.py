"""
Protocol value types consumed by filter operands.

These are plain immutable stand-ins for the OPC UA built-in types the filter
algebra carries around. They hold identity and naming data only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class AttributeId(IntEnum):
    NodeId = 1
    NodeClass = 2
    BrowseName = 3
    DisplayName = 4
    Description = 5
    WriteMask = 6
    UserWriteMask = 7
    IsAbstract = 8
    Symmetric = 9
    InverseName = 10
    ContainsNoLoops = 11
    EventNotifier = 12
    Value = 13
    DataType = 14
    ValueRank = 15
    ArrayDimensions = 16
    AccessLevel = 17
    UserAccessLevel = 18
    MinimumSamplingInterval = 19
    Historizing = 20
    Executable = 21
    UserExecutable = 22
    DataTypeDefinition = 23
    RolePermissions = 24
    UserRolePermissions = 25
    AccessRestrictions = 26
    AccessLevelEx = 27


class ObjectTypeId(IntEnum):
    BaseObjectType = 58
    FolderType = 61
    BaseEventType = 2041
    SystemEventType = 2130
    ConditionType = 2782
    AlarmConditionType = 2915


class ObjectId(IntEnum):
    AggregateFunction_Interpolative = 2341
    AggregateFunction_Average = 2342
    AggregateFunction_Minimum = 2346
    AggregateFunction_Maximum = 2347
    AggregateFunction_Count = 2352


class ReferenceTypeId(IntEnum):
    References = 31
    HierarchicalReferences = 33
    Organizes = 35
    HasEventSource = 36
    HasTypeDefinition = 40
    HasSubtype = 45
    HasProperty = 46
    HasComponent = 47


@dataclass(frozen=True)
class NodeId:
    """
    Node identifier made of a namespace index and a numeric, string or opaque identifier.
    """

    namespace_index: int
    identifier: Union[int, str, bytes]

    def __post_init__(self) -> None:
        if self.namespace_index < 0:
            raise ValueError("Namespace index must be non-negative.")

    @classmethod
    def coerce(cls, value: "NodeIdLike") -> "NodeId":
        """Accept a NodeId, a well-known id enum member or a bare numeric id in namespace 0."""

        if isinstance(value, NodeId):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(0, int(value))
        raise TypeError(f"Cannot convert {value!r} to NodeId")

    def is_null(self) -> bool:
        return self.namespace_index == 0 and self.identifier in (0, "", b"")

    def __str__(self) -> str:
        if isinstance(self.identifier, int):
            kind = "i"
        elif isinstance(self.identifier, str):
            kind = "s"
        else:
            kind = "b"
        return f"ns={self.namespace_index};{kind}={self.identifier}"


NodeIdLike = Union[NodeId, int]

NULL_NODE_ID = NodeId(0, 0)


@dataclass(frozen=True)
class QualifiedName:
    namespace_index: int
    name: str

    @classmethod
    def coerce(cls, value: "QualifiedNameLike") -> "QualifiedName":
        if isinstance(value, QualifiedName):
            return value
        if isinstance(value, str):
            return cls(0, value)
        if isinstance(value, tuple) and len(value) == 2:
            return cls(int(value[0]), str(value[1]))
        raise TypeError(f"Cannot convert {value!r} to QualifiedName")

    def __str__(self) -> str:
        if self.namespace_index:
            return f"{self.namespace_index}:{self.name}"
        return self.name


QualifiedNameLike = Union[QualifiedName, str, tuple]


@dataclass(frozen=True)
class RelativePathElement:
    """One step of a relative browse path."""

    reference_type_id: NodeId
    is_inverse: bool
    include_subtypes: bool
    target_name: QualifiedName

    def __post_init__(self) -> None:
        object.__setattr__(self, "reference_type_id", NodeId.coerce(self.reference_type_id))
        object.__setattr__(self, "target_name", QualifiedName.coerce(self.target_name))
