"""
Pytest configuration and shared fixtures for flowdoc tests.
"""
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from flowdoc.flow.memory_graph import InMemoryFlowGraph
from flowdoc.flow.model import (
    Action,
    ActionDetail,
    Condition,
    Connector,
    Decision,
    DetailRow,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ============================================================================
# Fixtures: String Lookup
# ============================================================================

class IdentityLookup:
    """Deterministic lookup: every key translates to itself."""

    def __init__(self):
        self.requested: List[str] = []

    def translate(self, key: str, **params: Any) -> str:
        self.requested.append(key)
        return key


@pytest.fixture
def lookup() -> IdentityLookup:
    return IdentityLookup()


# ============================================================================
# Fixtures: Flow Data
# ============================================================================

@pytest.fixture
def sample_flow_path() -> Path:
    return FIXTURES_DIR / "sample_flow.json"


@pytest.fixture
def sample_flow_data(sample_flow_path: Path) -> Dict[str, Any]:
    with open(sample_flow_path, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def sample_graph(sample_flow_data: Dict[str, Any]) -> InMemoryFlowGraph:
    return InMemoryFlowGraph.from_dict(sample_flow_data)


@pytest.fixture
def minimal_flow_data() -> Dict[str, Any]:
    """Flow with one decision and no actions."""
    return {
        "label": "Lead Intake",
        "objectType": "Lead",
        "triggerType": "onCreateOnly",
        "decisions": [{"name": "d1", "label": "Any Lead"}],
    }


@pytest.fixture
def stage_condition() -> Condition:
    return Condition(
        left_value_reference="myVariable_current.StageName",
        operator="EqualTo",
        right_value={"stringValue": "Closed Won"},
    )


@pytest.fixture
def amount_condition() -> Condition:
    return Condition(
        left_value_reference="myVariable_current.Amount",
        operator="GreaterThan",
        right_value={"numberValue": 5000},
    )


@pytest.fixture
def won_decision(stage_condition, amount_condition) -> Decision:
    return Decision(
        name="myDecision",
        label="Is Won",
        conditions=[stage_condition, amount_condition],
        condition_logic="and",
        connector=Connector(target_reference="myRule_1_A1"),
    )


@pytest.fixture
def update_action() -> Action:
    return Action(
        name="myRule_1_A1",
        action_type="RECORD_UPDATE",
        label="Update Account Rating",
    )


@pytest.fixture
def update_detail() -> ActionDetail:
    return ActionDetail(
        rows=(
            DetailRow(name="RECORD", value="[Opportunity].Account"),
            DetailRow(name="CRITERIA", value="No criteria"),
        ),
        fields=(("Rating", "Picklist", "Hot"),),
    )
