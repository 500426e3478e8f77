"""
Monitored item filters built on top of content filters.
"""

from .filters import (
    AggregateConfiguration,
    AggregateFilter,
    DataChangeFilter,
    DataChangeTrigger,
    DeadbandType,
    EventFilter,
)

__all__ = [
    "AggregateConfiguration",
    "AggregateFilter",
    "DataChangeFilter",
    "DataChangeTrigger",
    "DeadbandType",
    "EventFilter",
]
