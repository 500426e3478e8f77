"""
Monitoring filters attached to monitored items.

An event filter pairs select clauses with an optional content filter used as
its where clause; data-change and aggregate filters only carry parameters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Iterable, Optional, Tuple, Union

from ..core.ids import NodeId, NodeIdLike
from ..filters.content_filter import ContentFilter, ContentFilterElement, as_content_filter
from ..filters.operands import SimpleAttributeOperand


class DataChangeTrigger(IntEnum):
    Status = 0
    StatusValue = 1
    StatusValueTimestamp = 2


class DeadbandType(IntEnum):
    None_ = 0
    Absolute = 1
    Percent = 2


@dataclass(frozen=True)
class DataChangeFilter:
    trigger: DataChangeTrigger = DataChangeTrigger.StatusValue
    deadband_type: DeadbandType = DeadbandType.None_
    deadband_value: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "trigger", DataChangeTrigger(self.trigger))
        object.__setattr__(self, "deadband_type", DeadbandType(self.deadband_type))
        if self.deadband_value < 0:
            raise ValueError("Deadband value must be non-negative.")
        if self.deadband_type == DeadbandType.Percent and self.deadband_value > 100:
            raise ValueError("Percent deadband must be between 0 and 100.")


@dataclass(frozen=True)
class EventFilter:
    select_clauses: Tuple[SimpleAttributeOperand, ...]
    where_clause: Optional[ContentFilter]

    def __init__(
        self,
        select_clauses: Iterable[SimpleAttributeOperand],
        where_clause: Union[ContentFilter, ContentFilterElement, None] = None,
    ) -> None:
        clauses = tuple(select_clauses)
        for clause in clauses:
            if not isinstance(clause, SimpleAttributeOperand):
                raise TypeError(f"Select clauses must be SimpleAttributeOperand, got {type(clause).__name__}")
        object.__setattr__(self, "select_clauses", clauses)
        object.__setattr__(
            self, "where_clause", None if where_clause is None else as_content_filter(where_clause)
        )

    def has_where_clause(self) -> bool:
        return self.where_clause is not None


@dataclass(frozen=True)
class AggregateConfiguration:
    use_server_capabilities_defaults: bool = True
    treat_uncertain_as_bad: bool = False
    percent_data_bad: int = 100
    percent_data_good: int = 100
    use_sloped_extrapolation: bool = False


@dataclass(frozen=True)
class AggregateFilter:
    start_time: datetime
    aggregate_type: NodeId
    processing_interval: float
    configuration: AggregateConfiguration = field(default_factory=AggregateConfiguration)

    def __init__(
        self,
        start_time: datetime,
        aggregate_type: NodeIdLike,
        processing_interval: float,
        configuration: AggregateConfiguration | None = None,
    ) -> None:
        if processing_interval < 0:
            raise ValueError("Processing interval must be non-negative.")
        object.__setattr__(self, "start_time", start_time)
        object.__setattr__(self, "aggregate_type", NodeId.coerce(aggregate_type))
        object.__setattr__(self, "processing_interval", float(processing_interval))
        object.__setattr__(self, "configuration", configuration or AggregateConfiguration())
