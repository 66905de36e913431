"""
Unit Tests for InMemoryFlowGraph
"""

import json

import pytest

from flowdoc.flow.memory_graph import ACTION_DETAIL_FIELDS, InMemoryFlowGraph
from flowdoc.flow.model import (
    Action,
    Condition,
    CriteriaKind,
    Decision,
    TriggerType,
    as_condition_list,
)
from flowdoc.flow.provider import FlowGraphError


class TestLoading:

    def test_basic_properties(self, sample_graph):
        assert sample_graph.get_label() == "Opportunity Management"
        assert sample_graph.get_object_type() == "Opportunity"
        assert sample_graph.get_trigger_type() == TriggerType.ON_ALL_CHANGES

    def test_from_json_file(self, sample_flow_path):
        graph = InMemoryFlowGraph.from_json_file(sample_flow_path)
        assert len(graph.get_standard_decisions()) == 4

    def test_from_json_file_utf8(self, tmp_path, minimal_flow_data):
        minimal_flow_data["label"] = "商談管理"
        path = tmp_path / "flow.json"
        path.write_text(json.dumps(minimal_flow_data, ensure_ascii=False), encoding="utf-8")

        assert InMemoryFlowGraph.from_json_file(path).get_label() == "商談管理"

    def test_default_trigger(self):
        graph = InMemoryFlowGraph.from_dict({"label": "x"})
        assert graph.get_trigger_type() == TriggerType.ON_CREATE_ONLY
        assert graph.get_standard_decisions() == []

    def test_unknown_trigger_rejected(self):
        with pytest.raises(ValueError):
            InMemoryFlowGraph.from_dict({"triggerType": "sometimes"})

    def test_decisions_in_source_order(self, sample_graph):
        labels = [d.label for d in sample_graph.get_standard_decisions()]
        assert labels == ["Is Won", "High Value", "Always", "Stale"]

    def test_single_condition_kept_single(self, sample_graph):
        decision = sample_graph.get_standard_decisions()[1]
        assert isinstance(decision.conditions, Condition)
        assert decision.connector.target_reference == "myRule_2_A1"

    def test_decisions_list_is_a_copy(self, sample_graph):
        sample_graph.get_standard_decisions().clear()
        assert len(sample_graph.get_standard_decisions()) == 4


class TestCriteria:

    @pytest.mark.parametrize("index, expected", [
        (0, CriteriaKind.ALL_CONDITIONS_MET),
        (1, CriteriaKind.FORMULA),
        (2, CriteriaKind.NONE),
        (3, CriteriaKind.ALL_CONDITIONS_MET),
    ])
    def test_derived_from_shape(self, sample_graph, index, expected):
        decision = sample_graph.get_standard_decisions()[index]
        assert sample_graph.get_action_execution_criteria(decision) == expected

    def test_formula_expression(self, sample_graph):
        assert sample_graph.get_formula_expression("formula_high_value") == "%5BOpportunity%5D.Amount %3E 100000"

    def test_unknown_formula(self, sample_graph):
        with pytest.raises(FlowGraphError):
            sample_graph.get_formula_expression("nope")

    def test_flow_graph_error_is_lookup_error(self):
        assert issubclass(FlowGraphError, LookupError)


class TestActionSequence:

    def test_follows_connectors_until_non_action(self, sample_graph):
        actions = sample_graph.get_action_sequence([], "myRule_1_A1")
        assert [a.name for a in actions] == ["myRule_1_A1", "myRule_1_A2"]
        assert actions[-1].connector.target_reference == "myWait_1"

    def test_missing_start(self, sample_graph):
        assert sample_graph.get_action_sequence([], "nowhere") == []

    def test_seen_nodes_stop_chain(self, sample_graph):
        assert sample_graph.get_action_sequence(["myRule_1_A2"], "myRule_1_A1")[-1].name == "myRule_1_A1"

    def test_cycle_terminates(self):
        graph = InMemoryFlowGraph.from_dict({
            "actions": [
                {"name": "a", "actionType": "APEX", "connector": "b"},
                {"name": "b", "actionType": "APEX", "connector": "a"},
            ],
        })
        assert [a.name for a in graph.get_action_sequence([], "a")] == ["a", "b"]


class TestActionDetail:

    def test_canonical_row_order(self, sample_graph):
        action = sample_graph.get_action_sequence([], "myRule_1_SA1")[0]
        detail = sample_graph.get_action_detail(action)
        assert [r.name for r in detail.rows] == ["POST_TARGET", "MESSAGE"]
        assert detail.fields is None

    def test_fields(self, sample_graph):
        action = sample_graph.get_action_sequence([], "myRule_1_A1")[0]
        detail = sample_graph.get_action_detail(action)
        assert detail.fields == (("Rating", "Picklist", "Hot"), ("Description", "String", "Won opportunity"))

    def test_non_canonical_fields_appended(self):
        graph = InMemoryFlowGraph.from_dict({
            "actions": [{"name": "a", "actionType": "FLOW", "details": {"EXTRA": 1, "FLOW": "f"}}],
        })
        action = graph.get_action_sequence([], "a")[0]
        assert [(r.name, r.value) for r in graph.get_action_detail(action).rows] == [("FLOW", "f"), ("EXTRA", "1")]

    def test_unknown_action(self, sample_graph):
        with pytest.raises(FlowGraphError):
            sample_graph.get_action_detail(Action(name="ghost", action_type="APEX", label="Ghost"))

    def test_detail_field_table_covers_core_types(self):
        assert set(ACTION_DETAIL_FIELDS) >= {"RECORD_CREATE", "RECORD_UPDATE", "EMAIL_ALERT"}


class TestScheduledSections:

    def test_sections_in_order(self, sample_graph):
        sections = sample_graph.get_scheduled_action_sections("myWait_1")

        assert len(sections) == 2
        first, second = sections
        assert (first.wait.offset, first.wait.unit, first.wait.is_after, first.wait.field) == (2, "days", True, None)
        assert [a.name for a in first.actions] == ["myRule_1_SA1", "myRule_1_SA2"]
        assert (second.wait.is_after, second.wait.field) == (False, "CloseDate")
        assert [a.name for a in second.actions] == ["myRule_1_SA3"]

    def test_unknown_wait(self, sample_graph):
        assert sample_graph.get_scheduled_action_sections("myRule_2_A1") == []


class TestConditionNormalization:

    def test_none(self):
        assert as_condition_list(None) == []

    def test_single(self):
        c = Condition("f", "EqualTo", {"stringValue": "x"})
        assert as_condition_list(c) == [c]
        assert Decision(name="d", label="d", conditions=c).condition_list == [c]

    def test_tuple(self):
        c = Condition("f", "EqualTo", {"stringValue": "x"})
        assert as_condition_list((c, c)) == [c, c]

    def test_typed_value(self):
        c = Condition("f", "GreaterThan", {"numberValue": 3})
        assert c.value_type == "numberValue"
        assert c.value == 3
