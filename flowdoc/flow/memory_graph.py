#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
In-Memory Flow Graph

FlowGraphProvider over an already-parsed flow held as plain data
(a dict or a JSON file). Parsing the flow source format happens upstream.

Expected shape:

    {
      "label": "Opportunity Follow-up",
      "objectType": "Opportunity",
      "triggerType": "onAllChanges",
      "formulas": {"formula_1": "ISCHANGED([Opportunity].StageName)"},
      "decisions": [
        {"name": "myDecision", "label": "Is Won", "conditionLogic": "and",
         "conditions": [{"leftValueReference": "myVariable_current.StageName",
                         "operator": "EqualTo",
                         "rightValue": {"stringValue": "Closed Won"}}],
         "connector": "myRule_1_A1"}
      ],
      "actions": [
        {"name": "myRule_1_A1", "actionType": "RECORD_UPDATE", "label": "Update Account",
         "connector": "myWait_1", "details": {"RECORD": "[Opportunity].Account"},
         "fields": [["Rating", "Picklist", "Hot"]]}
      ],
      "waits": [
        {"name": "myWait_1",
         "events": [{"offset": 2, "unit": "days", "isAfter": true,
                     "field": null, "connector": "myRule_1_SA1"}]}
      ]
    }

"conditions" may be a single object or a list. A connector is either a node
name or {"targetReference": name}.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from .model import (
    Action,
    ActionDetail,
    ActionList,
    Condition,
    Connector,
    CriteriaKind,
    Decision,
    DecisionList,
    DetailRow,
    ScheduledActionSection,
    SectionList,
    TriggerType,
    WaitEventSummary,
)
from .provider import FlowGraphError, FlowGraphProvider

logger = logging.getLogger(__name__)


# Canonical detail-row order per action type. Every (type, field) pair
# needs an ACTION_DETAIL_{type}_{field} key in the locale catalogs.
ACTION_DETAIL_FIELDS: Dict[str, Tuple[str, ...]] = {
    "RECORD_CREATE": ("OBJECT",),
    "RECORD_UPDATE": ("RECORD", "CRITERIA", "FILTER"),
    "EMAIL_ALERT": ("EMAIL_ALERT",),
    "POST_TO_CHATTER": ("POST_TARGET", "MESSAGE"),
    "APEX": ("APEX_CLASS",),
    "FLOW": ("FLOW",),
    "SUBMIT_FOR_APPROVAL": ("RECORD", "APPROVAL_PROCESS", "SUBMITTER"),
    "QUICK_ACTION": ("QUICK_ACTION",),
}


def _parse_connector(raw: Union[str, Dict[str, Any], None]) -> Optional[Connector]:
    if not raw:
        return None
    if isinstance(raw, dict):
        return Connector(target_reference=raw["targetReference"])
    return Connector(target_reference=raw)


def _parse_condition(raw: Dict[str, Any]) -> Condition:
    return Condition(
        left_value_reference=raw["leftValueReference"],
        operator=raw["operator"],
        right_value=dict(raw["rightValue"]),
    )


def _parse_decision(raw: Dict[str, Any]) -> Decision:
    raw_conditions = raw.get("conditions")
    if isinstance(raw_conditions, dict):
        conditions = _parse_condition(raw_conditions)
    elif raw_conditions:
        conditions = [_parse_condition(c) for c in raw_conditions]
    else:
        conditions = None

    return Decision(
        name=raw["name"],
        label=raw.get("label", raw["name"]),
        conditions=conditions,
        condition_logic=raw.get("conditionLogic"),
        connector=_parse_connector(raw.get("connector")),
    )


class InMemoryFlowGraph(FlowGraphProvider):
    """
    Flow graph backed by plain parsed data.

    Usage:
        graph = InMemoryFlowGraph.from_json_file(Path("flow.json"))
        decisions = graph.get_standard_decisions()
    """

    def __init__(self, data: Dict[str, Any]):
        self._label = data.get("label", "")
        self._object_type = data.get("objectType", "")
        self._trigger_type = TriggerType(data.get("triggerType", TriggerType.ON_CREATE_ONLY.value))
        self._formulas: Dict[str, str] = dict(data.get("formulas", {}))
        self._decisions: DecisionList = [_parse_decision(d) for d in data.get("decisions", [])]

        self._actions: Dict[str, Action] = {}
        self._details: Dict[str, ActionDetail] = {}
        for raw in data.get("actions", []):
            action = Action(
                name=raw["name"],
                action_type=raw["actionType"],
                label=raw.get("label", raw["name"]),
                connector=_parse_connector(raw.get("connector")),
            )
            self._actions[action.name] = action
            self._details[action.name] = self._build_detail(action, raw)

        self._waits: Dict[str, List[Dict[str, Any]]] = {
            w["name"]: list(w.get("events", [])) for w in data.get("waits", [])
        }

        logger.debug(f"Loaded flow graph '{self._label}': "
                     f"{len(self._decisions)} decisions, {len(self._actions)} actions, "
                     f"{len(self._waits)} waits")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InMemoryFlowGraph":
        return cls(data)

    @classmethod
    def from_json_file(cls, path: Path) -> "InMemoryFlowGraph":
        """Load a parsed flow from a UTF-8 JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info(f"Loaded parsed flow from {path}")
        return cls(data)

    # ========================================================================
    # FlowGraphProvider
    # ========================================================================

    def get_label(self) -> str:
        return self._label

    def get_object_type(self) -> str:
        return self._object_type

    def get_trigger_type(self) -> TriggerType:
        return self._trigger_type

    def get_standard_decisions(self) -> DecisionList:
        return list(self._decisions)

    def get_action_execution_criteria(self, decision: Decision) -> CriteriaKind:
        conditions = decision.condition_list
        if not conditions:
            return CriteriaKind.NONE
        if len(conditions) == 1 and conditions[0].left_value_reference in self._formulas:
            return CriteriaKind.FORMULA
        return CriteriaKind.ALL_CONDITIONS_MET

    def get_formula_expression(self, name: str) -> str:
        try:
            return self._formulas[name]
        except KeyError:
            raise FlowGraphError(f"Unknown formula: {name}") from None

    def get_action_sequence(self, seen: List[str], start_name: str) -> ActionList:
        actions: ActionList = []
        name = start_name
        while name and name not in seen and name in self._actions:
            seen.append(name)
            action = self._actions[name]
            actions.append(action)
            name = action.connector.target_reference if action.connector else None
        return actions

    def get_action_detail(self, action: Action) -> ActionDetail:
        try:
            return self._details[action.name]
        except KeyError:
            raise FlowGraphError(f"Unknown action: {action.name}") from None

    def get_scheduled_action_sections(self, start_name: str) -> SectionList:
        events = self._waits.get(start_name)
        if not events:
            return []

        sections: SectionList = []
        for event in events:
            wait = WaitEventSummary(
                offset=int(event["offset"]),
                unit=event["unit"],
                is_after=bool(event.get("isAfter", True)),
                field=event.get("field"),
            )
            connector = _parse_connector(event.get("connector"))
            actions = self.get_action_sequence([], connector.target_reference) if connector else []
            sections.append(ScheduledActionSection(wait=wait, actions=tuple(actions)))
        return sections

    # ========================================================================
    # Helpers
    # ========================================================================

    @staticmethod
    def _build_detail(action: Action, raw: Dict[str, Any]) -> ActionDetail:
        """Order detail rows canonically; unknown fields keep their given order."""
        details: Dict[str, Any] = raw.get("details", {})
        known = ACTION_DETAIL_FIELDS.get(action.action_type, ())

        rows = [DetailRow(name=f, value=str(details[f])) for f in known if f in details]
        extra = [f for f in details if f not in known]
        if extra:
            logger.debug(f"Action {action.name}: non-canonical detail fields {extra}")
        rows.extend(DetailRow(name=f, value=str(details[f])) for f in extra)

        raw_fields = raw.get("fields")
        fields = tuple(tuple(str(v) for v in f) for f in raw_fields) if raw_fields else None

        return ActionDetail(rows=tuple(rows), fields=fields)
