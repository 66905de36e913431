"""
Document Assembler - Walks a flow graph into content blocks

Flow:
    FlowGraphProvider → DocumentAssembler → BlockList → DocDefinition

Traversal order (one pass, never revisits a node):
    title, overview
    for each decision:
        action group heading, decision table, [condition table]
        actions heading, action tables          (if the connector leads to actions)
        scheduled actions heading               (if the last action leads to sections)
            per section: summary, action tables

Scheduled-section actions are rendered one level deep; their own
connectors are not followed.
"""

from typing import List, Optional
import logging

from config.constants import AUTO_WIDTH, INTRO_MARGIN, KEY_COLUMN_WIDTH, TABLE_LAYOUT_LIGHT
from flowdoc.flow.model import Action, CriteriaKind, Decision, TriggerType
from flowdoc.flow.provider import FlowGraphProvider
from flowdoc.i18n.translator import StringLookup
from flowdoc.rendering.block_builders import (
    action_blocks,
    condition_table,
    decision_table,
    h2,
    h3,
    scheduled_action_summary,
    th,
)
from flowdoc.rendering.content_blocks import (
    Block,
    BlockList,
    Heading,
    HeadingLevel,
    Paragraph,
    make_table,
)

logger = logging.getLogger(__name__)


class DocumentAssembler:
    """
    Builds the document body of a flow.

    Usage:
        assembler = DocumentAssembler(graph, Translator("en"))
        blocks = assembler.build("Sales Ops")
    """

    def __init__(self, provider: FlowGraphProvider, lookup: StringLookup):
        self.provider = provider
        self.lookup = lookup

    def build(self, name: str) -> BlockList:
        """
        Build the ordered block sequence for the whole flow.

        Args:
            name: Display name shown under the title

        Returns:
            Fresh list of blocks; nothing is shared between calls
        """
        content: BlockList = []

        content.extend(self._title_blocks(name))
        content.extend(self._overview_blocks())

        decisions = self.provider.get_standard_decisions()
        for index, decision in enumerate(decisions, start=1):
            content.extend(self._decision_blocks(index, decision))

        logger.info(f"Built flow document '{self.provider.get_label()}': "
                    f"{len(content)} blocks, {len(decisions)} action groups")
        return content

    # ========================================================================
    # Sections
    # ========================================================================

    def _title_blocks(self, name: str) -> List[Block]:
        return [
            Heading(level=HeadingLevel.H1, text=self.provider.get_label()),
            Paragraph(text=name),
        ]

    def _overview_blocks(self) -> List[Block]:
        t = self.lookup.translate
        if self.provider.get_trigger_type() is TriggerType.ON_ALL_CHANGES:
            trigger = t("WHEN_A_RECORD_IS_CREATED_OR_EDITED")
        else:
            trigger = t("ONLY_WHEN_A_RECORD_IS_CREATED")

        overview = make_table(
            [
                [th(t("OBJECT")), self.provider.get_object_type()],
                [th(t("WHEN_THE_PROCESS_STARTS")), trigger],
            ],
            widths=(KEY_COLUMN_WIDTH, AUTO_WIDTH),
            layout=TABLE_LAYOUT_LIGHT,
        )
        return [
            Paragraph(text=t("THE_PROCESS_STARTS_WHEN"), margin=INTRO_MARGIN),
            overview,
        ]

    def _decision_blocks(self, index: int, decision: Decision) -> List[Block]:
        """Blocks for one action group; stops early where the graph ends."""
        blocks: List[Block] = [h2(f"{self.lookup.translate('ACTION_GROUP')} {index}")]

        criteria = self.provider.get_action_execution_criteria(decision)
        blocks.append(decision_table(
            decision,
            criteria,
            self.lookup,
            formula_expression=self._formula_for(decision, criteria),
        ))
        if criteria is CriteriaKind.ALL_CONDITIONS_MET:
            blocks.append(condition_table(decision.conditions, self.lookup))

        if decision.connector is None:
            logger.debug(f"Decision {decision.name}: no connector")
            return blocks

        actions = self.provider.get_action_sequence([], decision.connector.target_reference)
        if not actions:
            logger.debug(f"Decision {decision.name}: empty action chain")
            return blocks

        blocks.append(h3(self.lookup.translate("HEADER_ACTIONS")))
        for action in actions:
            blocks.extend(self._action_blocks(action))

        blocks.extend(self._scheduled_blocks(actions[-1]))
        return blocks

    def _scheduled_blocks(self, last_action: Action) -> List[Block]:
        if last_action.connector is None:
            return []

        sections = self.provider.get_scheduled_action_sections(last_action.connector.target_reference)
        if not sections:
            return []

        blocks: List[Block] = [h3(self.lookup.translate("HEADER_SCHEDULED_ACTIONS"))]
        for section in sections:
            blocks.append(scheduled_action_summary(section.wait, self.lookup))
            for action in section.actions:
                blocks.extend(self._action_blocks(action))
        return blocks

    # ========================================================================
    # Helpers
    # ========================================================================

    def _action_blocks(self, action: Action) -> List[Block]:
        detail = self.provider.get_action_detail(action)
        return action_blocks(action, detail, self.lookup)

    def _formula_for(self, decision: Decision, criteria: CriteriaKind) -> Optional[str]:
        """Formula expression named by the decision's first condition."""
        if criteria is not CriteriaKind.FORMULA:
            return None
        conditions = decision.condition_list
        if not conditions:
            logger.warning(f"Decision '{decision.name}' has formula criteria but no conditions")
            return None
        return self.provider.get_formula_expression(conditions[0].left_value_reference)


def build_flow_content(provider: FlowGraphProvider, lookup: StringLookup, name: str) -> BlockList:
    """Convenience wrapper around DocumentAssembler.build()."""
    return DocumentAssembler(provider, lookup).build(name)
