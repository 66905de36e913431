#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PDF Adapter

Renders a DocDefinition to PDF with ReportLab platypus.

    Heading    → Paragraph with h1/h2/h3 style
    Paragraph  → Paragraph with body style, margins as spacing/indent
    Table      → Table of Paragraph cells; unbreakable tables wrapped
                 in KeepTogether, "auto" widths share the free width

The default font must be registered with ReportLab (see
Settings.pdf_font_path); otherwise Helvetica is used.

Version: 1.0.0
"""

from typing import Any, Dict, List, Optional, Tuple
from pathlib import Path
import logging

from reportlab.lib.pagesizes import A4, A5, LETTER
from reportlab.lib.units import cm
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.enums import TA_LEFT
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, KeepTogether, Indenter,
)
from reportlab.lib import colors
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from config.constants import FALLBACK_PDF_BOLD_FONT, FALLBACK_PDF_FONT, TABLE_LAYOUT_LIGHT
from config.settings import settings
from flowdoc.rendering.content_blocks import (
    Block,
    Cell,
    Heading,
    Margin,
    Paragraph as ParagraphBlock,
    Table as TableBlock,
    TextStyle,
)
from flowdoc.rendering.packager import DocDefinition

logger = logging.getLogger(__name__)


PAGE_SIZES: Dict[str, Tuple[float, float]] = {
    "A4": A4,
    "A5": A5,
    "letter": LETTER,
}

MARGIN_CM = 2.0


def _font_available(name: str) -> bool:
    """Registered TTF or one of the standard Type 1 fonts."""
    try:
        pdfmetrics.getFont(name)
    except KeyError:
        return False
    return True


def register_font(name: str, path: Path, bold_path: Optional[Path] = None) -> None:
    """Register a TTF (and optional bold face) under name / name-Bold."""
    pdfmetrics.registerFont(TTFont(name, str(path)))
    if bold_path:
        pdfmetrics.registerFont(TTFont(f"{name}-Bold", str(bold_path)))
    logger.info(f"Registered PDF font {name} from {path}")


class PDFRenderer:
    """
    Renders DocDefinition to PDF.

    Usage:
        renderer = PDFRenderer(page_size="A4")
        renderer.render(definition, Path("process.pdf"))
    """

    def __init__(self, page_size: Optional[str] = None):
        page_size = page_size or settings.page_size
        self.page_dimensions = PAGE_SIZES.get(page_size, A4)
        self.page_size = page_size if page_size in PAGE_SIZES else "A4"

        logger.info(f"PDFRenderer initialized: {self.page_size}")

    def render(self, definition: DocDefinition, output_path: Path) -> Path:
        """
        Render to PDF file.

        Returns:
            Path to created file

        Raises:
            IOError: If file cannot be written
        """
        logger.info(f"Rendering PDF: {len(definition.content)} blocks")

        font, bold_font = self._resolve_fonts(definition.default_font)
        styles = self._create_styles(definition, font, bold_font)

        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=self.page_dimensions,
            topMargin=MARGIN_CM * cm,
            bottomMargin=MARGIN_CM * cm,
            leftMargin=MARGIN_CM * cm,
            rightMargin=MARGIN_CM * cm,
            title=definition.title,
        )

        story: List[Any] = []
        for block in definition.content:
            story.extend(self._render_block(block, styles, doc.width))

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            doc.build(story)
        except OSError as e:
            logger.error(f"Failed to save PDF: {e}")
            raise IOError(f"Cannot save PDF to {output_path}: {e}")

        logger.info(f"PDF saved: {output_path}")
        return output_path

    # ========================================================================
    # Fonts & Styles
    # ========================================================================

    def _resolve_fonts(self, family: str) -> Tuple[str, str]:
        """Regular and bold font names usable by ReportLab."""
        if not _font_available(family) and settings.pdf_font_path:
            register_font(family, settings.pdf_font_path, settings.pdf_bold_font_path)

        if not _font_available(family):
            logger.warning(f"Font '{family}' not registered, using '{FALLBACK_PDF_FONT}'")
            return FALLBACK_PDF_FONT, FALLBACK_PDF_BOLD_FONT

        bold = f"{family}-Bold"
        return family, bold if _font_available(bold) else family

    def _create_styles(self, definition: DocDefinition, font: str, bold_font: str) -> Dict[str, ParagraphStyle]:
        """Paragraph styles for body, cells and headings."""
        base_styles = getSampleStyleSheet()
        sheet = definition.styles
        body_size = sheet.body_size

        styles: Dict[str, ParagraphStyle] = {}

        styles["body"] = ParagraphStyle(
            "FlowBody",
            parent=base_styles["Normal"],
            fontName=font,
            fontSize=body_size,
            leading=body_size * 1.3,
            alignment=TA_LEFT,
        )
        styles["cell"] = ParagraphStyle("FlowCell", parent=styles["body"])
        styles["bold"] = self._derive("FlowBold", styles["body"], sheet.bold, font, bold_font)

        for name, parent in (("h1", "Heading1"), ("h2", "Heading2"), ("h3", "Heading3")):
            heading = ParagraphStyle(f"Flow{parent}", parent=base_styles[parent], fontName=font)
            styles[name] = self._derive(f"Flow{parent}", heading, sheet.get(name), font, bold_font)

        return styles

    @staticmethod
    def _derive(name: str, parent: ParagraphStyle, text_style: Optional[TextStyle],
                font: str, bold_font: str) -> ParagraphStyle:
        if text_style is None:
            return parent
        size = text_style.font_size or parent.fontSize
        style = ParagraphStyle(
            name,
            parent=parent,
            fontName=bold_font if text_style.bold else font,
            fontSize=size,
            leading=size * 1.25,
        )
        if text_style.color:
            style.textColor = colors.HexColor(f"#{text_style.color}")
        return style

    # ========================================================================
    # Blocks
    # ========================================================================

    def _render_block(self, block: Block, styles: Dict[str, ParagraphStyle], width: float) -> List[Any]:
        if isinstance(block, Heading):
            style = self._spaced(styles.get(block.style_name, styles["h3"]), block.margin)
            return [Paragraph(self._escape_html(block.text), style)]
        if isinstance(block, ParagraphBlock):
            return self._render_paragraph(block, styles)
        if isinstance(block, TableBlock):
            return self._render_table(block, styles, width)
        logger.warning(f"Unknown block type: {type(block)}")
        return []

    def _render_paragraph(self, block: ParagraphBlock, styles: Dict[str, ParagraphStyle]) -> List[Any]:
        style = self._spaced(styles.get(block.style or "body", styles["body"]), block.margin)
        return [Paragraph(self._escape_html(block.text), style)]

    @staticmethod
    def _spaced(style: ParagraphStyle, margin: Optional[Margin]) -> ParagraphStyle:
        """Apply a (horizontal, vertical) or (left, top, right, bottom) margin."""
        margin = margin or ()
        if len(margin) == 2:
            return ParagraphStyle("FlowSpaced", parent=style, spaceBefore=margin[1], spaceAfter=margin[1])
        if len(margin) == 4:
            return ParagraphStyle("FlowSpaced", parent=style, leftIndent=margin[0],
                                  spaceBefore=margin[1], spaceAfter=margin[3])
        return style

    def _render_table(self, block: TableBlock, styles: Dict[str, ParagraphStyle], width: float) -> List[Any]:
        if not block.rows:
            return []

        left, bottom = 0, 0
        if block.margin and len(block.margin) == 4:
            left, _, _, bottom = block.margin

        ncols = block.column_count
        data = []
        for row_idx, row in enumerate(block.rows):
            cells = list(row) + [Cell(text="")] * (ncols - len(row))
            data.append([
                Paragraph(
                    self._escape_html(c.text),
                    styles["bold"] if c.is_bold or row_idx < block.header_rows else styles["cell"],
                )
                for c in cells
            ])

        table = Table(
            data,
            colWidths=self._column_widths(block, width - left),
            repeatRows=block.header_rows,
            hAlign="LEFT",
        )
        table.setStyle(self._table_style(block))

        flowables: List[Any] = [KeepTogether([table])] if block.unbreakable else [table]
        if left:
            flowables = [Indenter(left=left)] + flowables + [Indenter(left=-left)]
        if bottom:
            flowables.append(Spacer(1, bottom))
        return flowables

    @staticmethod
    def _column_widths(block: TableBlock, available: float) -> List[float]:
        """Fixed widths as given; "auto" columns share what is left."""
        ncols = block.column_count
        widths = list(block.widths or ())[:ncols]
        widths += ["auto"] * (ncols - len(widths))

        fixed = sum(w for w in widths if isinstance(w, (int, float)))
        auto_count = sum(1 for w in widths if not isinstance(w, (int, float)))
        share = max(available - fixed, 0) / auto_count if auto_count else 0
        return [float(w) if isinstance(w, (int, float)) else share for w in widths]

    @staticmethod
    def _table_style(block: TableBlock) -> TableStyle:
        commands = [
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), 4),
            ("RIGHTPADDING", (0, 0), (-1, -1), 4),
        ]
        if block.layout == TABLE_LAYOUT_LIGHT:
            commands.append(("LINEBELOW", (0, 0), (-1, -2), 0.5, colors.lightgrey))
            if block.header_rows:
                commands.append(("LINEBELOW", (0, block.header_rows - 1), (-1, block.header_rows - 1),
                                 1, colors.black))
        else:
            commands.append(("GRID", (0, 0), (-1, -1), 0.25, colors.grey))
        return TableStyle(commands)

    def _escape_html(self, text: str) -> str:
        """Escape HTML special characters"""
        text = text.replace("&", "&amp;")
        text = text.replace("<", "&lt;")
        text = text.replace(">", "&gt;")
        return text


def render_pdf(definition: DocDefinition, output_path: Path, page_size: Optional[str] = None) -> Path:
    """Convenience wrapper around PDFRenderer.render()."""
    return PDFRenderer(page_size=page_size).render(definition, output_path)
