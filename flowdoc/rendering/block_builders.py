"""
Block Builders - flow entities to content blocks

Pure functions: each takes one entity plus a StringLookup and returns
fresh blocks. Every displayed label is requested from the lookup, never
hard-coded, so each action type / detail field maps to a catalog key:

    ACTION_TYPE_{action_type}
    ACTION_DETAIL_{action_type}_{field}
"""

import re
from typing import List, Optional

from config.constants import (
    ACTION_TABLE_MARGIN,
    AUTO_WIDTH,
    BOLD_STYLE,
    CONDITION_OPERATOR_WIDTH,
    CONDITION_TABLE_MARGIN,
    HEADING_MARGIN,
    KEY_COLUMN_WIDTH,
    PARAMETER_TABLE_MARGIN,
    SUMMARY_MARGIN,
    TABLE_LAYOUT_LIGHT,
)
from flowdoc.flow.model import (
    Action,
    ActionDetail,
    ConditionInput,
    CriteriaKind,
    Decision,
    WaitEventSummary,
    as_condition_list,
)
from flowdoc.i18n.translator import StringLookup
from flowdoc.rendering.content_blocks import (
    Block,
    Cell,
    Heading,
    HeadingLevel,
    Paragraph,
    Table,
    make_table,
)


# ============================================================================
# Primitives
# ============================================================================

def th(text: str) -> Cell:
    """Key/header cell."""
    return Cell(text=text, style=BOLD_STYLE)


def h2(text: str) -> Heading:
    return Heading(level=HeadingLevel.H2, text=text, margin=HEADING_MARGIN)


def h3(text: str) -> Heading:
    return Heading(level=HeadingLevel.H3, text=text, margin=HEADING_MARGIN)


# ============================================================================
# Decisions
# ============================================================================

# %uXXXX or %XX; %XX is a Latin-1 code point, not a UTF-8 byte
_ESCAPE_RE = re.compile(r"%u([0-9A-Fa-f]{4})|%([0-9A-Fa-f]{2})")


def _unescape(text: str) -> str:
    return _ESCAPE_RE.sub(lambda m: chr(int(m.group(1) or m.group(2), 16)), text)


def decision_table(
    decision: Decision,
    criteria: CriteriaKind,
    lookup: StringLookup,
    formula_expression: Optional[str] = None,
) -> Table:
    """
    Key/value table describing a decision.

    Rows:
        CONDITION_NAME                  decision label
        CRITERIA_FOR_EXECUTING_ACTIONS  translated criteria kind
        FORMULA                         unescaped expression (formula kind only)
        CONDITION_LOGIC                 upper-cased logic (all-conditions-met only)

    Args:
        decision: Decision to describe
        criteria: Criteria kind resolved by the flow graph provider
        lookup: String lookup for labels
        formula_expression: Raw expression text, required for the formula kind
    """
    t = lookup.translate
    rows = [
        [th(t("CONDITION_NAME")), decision.label],
        [th(t("CRITERIA_FOR_EXECUTING_ACTIONS")), t(criteria.value)],
    ]

    if criteria is CriteriaKind.FORMULA:
        rows.append([th(t("FORMULA")), _unescape(formula_expression or "")])
    elif criteria is CriteriaKind.ALL_CONDITIONS_MET:
        rows.append([th(t("CONDITION_LOGIC")), (decision.condition_logic or "").upper()])

    return make_table(
        rows,
        widths=(KEY_COLUMN_WIDTH, AUTO_WIDTH),
        unbreakable=True,
    )


def condition_table(conditions: ConditionInput, lookup: StringLookup) -> Table:
    """
    Four-column table of conditions with one header row.

    Accepts a single Condition or a sequence of them.
    """
    t = lookup.translate
    rows = [[t("FIELD"), t("OPERATOR"), t("TYPE"), t("VALUE")]]
    for c in as_condition_list(conditions):
        rows.append([c.left_value_reference, c.operator, c.value_type, c.value])

    return make_table(
        rows,
        widths=(AUTO_WIDTH, CONDITION_OPERATOR_WIDTH, AUTO_WIDTH, AUTO_WIDTH),
        header_rows=1,
        layout=TABLE_LAYOUT_LIGHT,
        unbreakable=True,
        margin=CONDITION_TABLE_MARGIN,
    )


# ============================================================================
# Actions
# ============================================================================

def action_blocks(action: Action, detail: ActionDetail, lookup: StringLookup) -> List[Block]:
    """
    Blocks describing one action.

    Returns:
        [primary table] or [primary table, parameter table] when the
        action has parameter fields
    """
    t = lookup.translate
    rows = [
        [th(t("ACTION_TYPE")), t(f"ACTION_TYPE_{action.action_type}")],
        [th(t("ACTION_NAME")), action.label],
    ]
    for d in detail.rows:
        rows.append([th(t(f"ACTION_DETAIL_{action.action_type}_{d.name}")), d.value])

    blocks: List[Block] = [
        make_table(rows, unbreakable=True, margin=ACTION_TABLE_MARGIN)
    ]

    if detail.fields:
        param_rows = [[th(t("FIELD")), th(t("TYPE")), th(t("VALUE"))]]
        param_rows.extend(list(f) for f in detail.fields)
        blocks.append(make_table(
            param_rows,
            layout=TABLE_LAYOUT_LIGHT,
            unbreakable=True,
            margin=PARAMETER_TABLE_MARGIN,
        ))

    return blocks


# ============================================================================
# Scheduled Actions
# ============================================================================

def scheduled_action_summary(wait: WaitEventSummary, lookup: StringLookup) -> Paragraph:
    """'{offset} {unit} {after|before} {field|now}', e.g. '2 days after CloseDate'."""
    t = lookup.translate
    direction = t("AFTER" if wait.is_after else "BEFORE")
    compare_to = wait.field if wait.field else t("NOW")
    unit = t(wait.unit.upper())
    return Paragraph(
        text=f"{wait.offset} {unit} {direction} {compare_to}",
        margin=SUMMARY_MARGIN,
    )
