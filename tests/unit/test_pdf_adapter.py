"""
Smoke Tests for DocDefinition → PDF rendering
"""

import pytest
from reportlab.platypus import KeepTogether, Table

from flowdoc.i18n.translator import Translator
from flowdoc.rendering.content_blocks import Heading, HeadingLevel, Paragraph, make_table
from flowdoc.rendering.packager import DocDefinition, create_doc_definition
from flowdoc.rendering.pdf_adapter import PDFRenderer, render_pdf


class TestRenderPdf:

    def test_file_created(self, tmp_path, sample_graph):
        definition = create_doc_definition(sample_graph, Translator("en"), "Sales Ops")
        output = render_pdf(definition, tmp_path / "out" / "flow.pdf")

        assert output.exists()
        assert output.read_bytes().startswith(b"%PDF")

    def test_unregistered_font_falls_back(self, caplog):
        renderer = PDFRenderer()
        with caplog.at_level("WARNING", logger="flowdoc.rendering.pdf_adapter"):
            fonts = renderer._resolve_fonts("NoSuchFont")
        assert fonts == ("Helvetica", "Helvetica-Bold")
        assert "NoSuchFont" in caplog.text

    def test_registered_font_used(self):
        assert PDFRenderer()._resolve_fonts("Courier") == ("Courier", "Courier-Bold")

    def test_unknown_page_size_defaults_to_a4(self):
        assert PDFRenderer(page_size="B9").page_size == "A4"

    def test_escapes_markup(self, tmp_path):
        definition = DocDefinition(content=[
            Heading(level=HeadingLevel.H1, text="A & B"),
            Paragraph(text="[Opportunity].Amount > 100000 <b>"),
        ])
        output = render_pdf(definition, tmp_path / "escaped.pdf")
        assert output.exists()


class TestTableFlowables:

    @pytest.fixture
    def styles(self):
        renderer = PDFRenderer()
        return renderer, renderer._create_styles(DocDefinition(content=[]), "Helvetica", "Helvetica-Bold")

    def test_unbreakable_wrapped(self, styles):
        renderer, para_styles = styles
        table = make_table([["a", "b"], ["c", "d"]], unbreakable=True)
        flowables = renderer._render_table(table, para_styles, 400)
        assert isinstance(flowables[0], KeepTogether)

    def test_margins_become_indent_and_spacer(self, styles):
        renderer, para_styles = styles
        table = make_table([["a", "b"]], margin=(15, 0, 0, 10))
        flowables = renderer._render_table(table, para_styles, 400)
        assert len(flowables) == 4
        assert isinstance(flowables[1], Table)

    def test_heading_margin_becomes_spacing(self, styles):
        renderer, para_styles = styles
        heading = Heading(level=HeadingLevel.H2, text="Action Group 1", margin=(0, 10))
        (flowable,) = renderer._render_block(heading, para_styles, 400)

        assert flowable.style.spaceBefore == 10
        assert flowable.style.spaceAfter == 10
        assert flowable.style.fontName == para_styles["h2"].fontName

    def test_auto_widths_share_free_space(self):
        table = make_table([["k", "v", "x"]], widths=(200, "auto"))
        assert PDFRenderer._column_widths(table, 400) == [200.0, 100.0, 100.0]
