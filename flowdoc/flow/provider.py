#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Flow Graph Provider Interface

Read-only queries over a parsed flow graph, consumed by the document
assembler.

Version: 1.0.0
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .model import (
    Action,
    ActionDetail,
    ActionList,
    CriteriaKind,
    Decision,
    DecisionList,
    SectionList,
    TriggerType,
)


class FlowGraphError(LookupError):
    """A node, formula or detail could not be resolved in the flow graph."""


class FlowGraphProvider(ABC):
    """
    Abstract base class for flow graph providers.

    Implementations must be safe for repeated synchronous queries and must
    not mutate the entities they return.
    """

    @abstractmethod
    def get_label(self) -> str:
        """Display label of the flow."""

    @abstractmethod
    def get_object_type(self) -> str:
        """Object the process runs on (e.g. "Opportunity")."""

    @abstractmethod
    def get_trigger_type(self) -> TriggerType:
        """When the process starts."""

    @abstractmethod
    def get_standard_decisions(self) -> DecisionList:
        """Decisions in traversal order."""

    @abstractmethod
    def get_action_execution_criteria(self, decision: Decision) -> CriteriaKind:
        """
        Criteria kind derived from the decision's raw shape.

        FORMULA implies the first condition's left value reference names
        the formula; a FORMULA decision without conditions renders an
        empty formula row.
        """

    @abstractmethod
    def get_formula_expression(self, name: str) -> str:
        """
        Expression text of a named formula.

        Raises:
            FlowGraphError: If no formula has that name
        """

    @abstractmethod
    def get_action_sequence(self, seen: List[str], start_name: str) -> Optional[ActionList]:
        """
        Ordered action chain starting at start_name.

        Args:
            seen: Names already visited; the chain stops on revisits
            start_name: First node of the chain

        Returns:
            Actions in chain order (possibly empty or None)
        """

    @abstractmethod
    def get_action_detail(self, action: Action) -> ActionDetail:
        """Detail rows and parameter fields of an action."""

    @abstractmethod
    def get_scheduled_action_sections(self, start_name: str) -> Optional[SectionList]:
        """Scheduled-action sections reachable from start_name (possibly empty or None)."""
