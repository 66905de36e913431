"""
Flow graph model and providers.
"""

from .model import (
    Action,
    ActionDetail,
    Condition,
    Connector,
    CriteriaKind,
    Decision,
    DetailRow,
    ScheduledActionSection,
    TriggerType,
    WaitEventSummary,
    as_condition_list,
)
from .provider import FlowGraphError, FlowGraphProvider
from .memory_graph import InMemoryFlowGraph

__all__ = [
    'Action',
    'ActionDetail',
    'Condition',
    'Connector',
    'CriteriaKind',
    'Decision',
    'DetailRow',
    'ScheduledActionSection',
    'TriggerType',
    'WaitEventSummary',
    'as_condition_list',
    'FlowGraphError',
    'FlowGraphProvider',
    'InMemoryFlowGraph',
]
