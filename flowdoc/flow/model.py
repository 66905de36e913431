"""
Flow Graph Data Model

Read-only entities describing an already-parsed automated process:

    Flow
     ├── Decision (ordered)  ── connector ──> Action chain
     │                                          └── last action ── connector ──> wait node
     │                                                                            └── ScheduledActionSection (ordered)
     │                                                                                 └── Action chain
     └── formulas (by name)

Entities are frozen; the rendering layer never mutates them.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union


# ============================================================================
# Enums
# ============================================================================

class TriggerType(Enum):
    """When the process starts."""
    ON_CREATE_ONLY = "onCreateOnly"
    ON_ALL_CHANGES = "onAllChanges"


class CriteriaKind(Enum):
    """
    Criteria for executing a decision's actions.

    The value is also the translation key of the human-readable label.
    """
    FORMULA = "FORMULA_EVALUATES_TO_TRUE"
    ALL_CONDITIONS_MET = "CONDITIONS_ARE_MET"
    NONE = "NO_CRITERIA"


# ============================================================================
# Graph Nodes
# ============================================================================

@dataclass(frozen=True)
class Connector:
    """Named reference to the next node in the graph."""
    target_reference: str


@dataclass(frozen=True)
class Condition:
    """A single (field, operator, typed value) rule."""
    left_value_reference: str
    operator: str
    right_value: Dict[str, Any]  # {type tag: literal}, e.g. {"stringValue": "Hot"}

    @property
    def value_type(self) -> str:
        """The type tag of the right-hand value."""
        return next(iter(self.right_value))

    @property
    def value(self) -> Any:
        """The literal of the right-hand value."""
        return next(iter(self.right_value.values()))


ConditionInput = Union[Condition, Sequence[Condition], None]


def as_condition_list(conditions: ConditionInput) -> List[Condition]:
    """Normalize a single condition, a sequence, or nothing to a list."""
    if conditions is None:
        return []
    if isinstance(conditions, Condition):
        return [conditions]
    return list(conditions)


@dataclass(frozen=True)
class Decision:
    """A branch point evaluated before its actions run."""
    name: str
    label: str
    conditions: ConditionInput = None
    condition_logic: Optional[str] = None  # "and", "or", "1 AND (2 OR 3)"
    connector: Optional[Connector] = None

    @property
    def condition_list(self) -> List[Condition]:
        return as_condition_list(self.conditions)


@dataclass(frozen=True)
class Action:
    """A single operation executed when a decision's criteria are satisfied."""
    name: str
    action_type: str  # e.g. RECORD_UPDATE, EMAIL_ALERT
    label: str
    connector: Optional[Connector] = None


@dataclass(frozen=True)
class DetailRow:
    """One displayable property of an action."""
    name: str  # field identifier, part of the translation key
    value: str


ParameterField = Tuple[str, str, str]
"""(field, type, value)"""


@dataclass(frozen=True)
class ActionDetail:
    """Displayable detail of an action."""
    rows: Tuple[DetailRow, ...] = ()
    fields: Optional[Tuple[ParameterField, ...]] = None


@dataclass(frozen=True)
class WaitEventSummary:
    """Time offset of a scheduled-action section."""
    offset: int
    unit: str  # "days" | "hours"
    is_after: bool = True
    field: Optional[str] = None  # None means "relative to now"


@dataclass(frozen=True)
class ScheduledActionSection:
    """Actions deferred by one time offset."""
    wait: WaitEventSummary
    actions: Tuple[Action, ...] = field(default_factory=tuple)


# ============================================================================
# Type Aliases
# ============================================================================

DecisionList = List[Decision]
ActionList = List[Action]
SectionList = List[ScheduledActionSection]
