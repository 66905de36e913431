"""
DOCX Adapter - Renders a DocDefinition with python-docx

Architecture:
    DocDefinition → render_docx() → .docx file

Mapping:
    Heading    → built-in "Heading 1/2/3" paragraph styles
    Paragraph  → body paragraph, margins as space before/after and indent
    Table      → Word table; bold-styled cells as bold runs, numeric
                 widths as fixed column widths, "auto" left to Word

Usage:
    from flowdoc.rendering.docx_adapter import render_docx

    definition = create_doc_definition(graph, Translator("en"), "Sales Ops")
    render_docx(definition, Path("process.docx"))
"""

import logging
from pathlib import Path
from typing import Optional

from docx import Document
from docx.shared import Pt, RGBColor

from config.constants import TABLE_LAYOUT_LIGHT
from flowdoc.rendering.content_blocks import (
    Block,
    Heading,
    Margin,
    Paragraph,
    Table,
    TextStyle,
)
from flowdoc.rendering.packager import DocDefinition

logger = logging.getLogger(__name__)

GRID_TABLE_STYLE = "Table Grid"


# ============================================================================
# Main Rendering Function
# ============================================================================

def render_docx(definition: DocDefinition, output_path: Path) -> Path:
    """
    Render a DocDefinition to DOCX format.

    Args:
        definition: The document definition to render
        output_path: Path where the DOCX file will be saved

    Returns:
        Path to created file

    Raises:
        IOError: If file cannot be written
    """
    logger.info(f"Rendering DOCX: {output_path} ({definition!r})")

    doc = Document()
    _setup_document(doc, definition)

    failed = 0
    for idx, block in enumerate(definition.content):
        try:
            _render_block(doc, block, definition)
        except Exception as e:
            failed += 1
            logger.error(f"Error rendering block {idx} ({block.block_type.value}): {e}")

    if failed:
        logger.warning(f"{failed} of {len(definition.content)} blocks could not be rendered")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        doc.save(str(output_path))
        logger.info(f"DOCX saved successfully: {output_path}")
    except Exception as e:
        logger.error(f"Failed to save DOCX: {e}")
        raise IOError(f"Cannot save DOCX to {output_path}: {e}")

    return output_path


# ============================================================================
# Document Setup
# ============================================================================

def _setup_document(doc, definition: DocDefinition) -> None:
    """Core properties and default font."""
    doc.core_properties.title = definition.title

    normal = doc.styles["Normal"]
    normal.font.name = definition.default_font
    normal.font.size = Pt(definition.styles.body_size)

    logger.debug(f"Document set up: title={definition.title}, font={definition.default_font}")


# ============================================================================
# Block Rendering Dispatch
# ============================================================================

def _render_block(doc, block: Block, definition: DocDefinition) -> None:
    if isinstance(block, Heading):
        _render_heading(doc, block, definition)
    elif isinstance(block, Paragraph):
        _render_paragraph(doc, block, definition)
    elif isinstance(block, Table):
        _render_table(doc, block, definition)
    else:
        logger.warning(f"Unknown block type: {type(block)}")


def _render_heading(doc, heading: Heading, definition: DocDefinition) -> None:
    """Render a heading with Word's built-in heading styles."""
    p = doc.add_paragraph(heading.text, style=f"Heading {heading.level.value}")
    style = definition.styles.get(heading.style_name)
    if style and p.runs:
        _apply_text_style(p.runs[0], style)
    _apply_margin(p, heading.margin)


def _render_paragraph(doc, para: Paragraph, definition: DocDefinition) -> None:
    p = doc.add_paragraph()
    run = p.add_run(para.text)
    style = definition.styles.get(para.style)
    if style:
        _apply_text_style(run, style)
    _apply_margin(p, para.margin)


def _render_table(doc, table: Table, definition: DocDefinition) -> None:
    """Render a table; unbreakable tables keep their rows together."""
    if not table.rows:
        return

    doc_table = doc.add_table(rows=len(table.rows), cols=table.column_count)
    if table.layout != TABLE_LAYOUT_LIGHT:
        doc_table.style = GRID_TABLE_STYLE

    for row_idx, row in enumerate(table.rows):
        doc_row = doc_table.rows[row_idx]
        for col_idx, cell in enumerate(row):
            doc_cell = doc_row.cells[col_idx]
            p = doc_cell.paragraphs[0]
            run = p.add_run(cell.text)
            style = definition.styles.get(cell.style)
            if style:
                _apply_text_style(run, style)
            if row_idx < table.header_rows:
                run.bold = True
            if table.unbreakable and row_idx < len(table.rows) - 1:
                p.paragraph_format.keep_with_next = True

    if table.widths:
        for col_idx, width in enumerate(table.widths[:table.column_count]):
            if isinstance(width, (int, float)):
                for doc_row in doc_table.rows:
                    doc_row.cells[col_idx].width = Pt(width)

    # Spacer paragraph carries the bottom margin; Word tables have none
    if table.margin and len(table.margin) == 4 and table.margin[3]:
        spacer = doc.add_paragraph()
        spacer.paragraph_format.space_after = Pt(table.margin[3])

    logger.debug(f"Rendered table: {len(table.rows)}x{table.column_count}")


# ============================================================================
# Style Application Helpers
# ============================================================================

def _apply_text_style(run, style: TextStyle) -> None:
    if style.font_size is not None:
        run.font.size = Pt(style.font_size)
    if style.bold:
        run.font.bold = True
    if style.italic:
        run.font.italic = True
    if style.color:
        try:
            hex_color = style.color
            r = int(hex_color[0:2], 16)
            g = int(hex_color[2:4], 16)
            b = int(hex_color[4:6], 16)
            run.font.color.rgb = RGBColor(r, g, b)
        except (ValueError, IndexError):
            logger.warning(f"Invalid color format: {style.color}")


def _apply_margin(p, margin: Optional[Margin]) -> None:
    """(h, v) or (left, top, right, bottom) in points."""
    if not margin:
        return
    fmt = p.paragraph_format
    if len(margin) == 2:
        horizontal, vertical = margin
        fmt.left_indent = Pt(horizontal)
        fmt.space_before = Pt(vertical)
        fmt.space_after = Pt(vertical)
    elif len(margin) == 4:
        left, top, right, bottom = margin
        fmt.left_indent = Pt(left)
        fmt.right_indent = Pt(right)
        fmt.space_before = Pt(top)
        fmt.space_after = Pt(bottom)
