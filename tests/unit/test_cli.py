"""
Tests for the flowdoc command line
"""

import json

import pytest
from docx import Document

from flowdoc.cli import build_parser, main


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args(["flow.json"])
        assert args.input == "flow.json"
        assert args.output_format == "docx"
        assert args.locale == "en"

    def test_rejects_unknown_format(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["flow.json", "--format", "html"])


class TestMain:

    def test_missing_input(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == 1
        assert "not found" in capsys.readouterr().out

    def test_json_output(self, tmp_path, sample_flow_path):
        output = tmp_path / "flow.json"
        assert main([str(sample_flow_path), "--format", "json", "-o", str(output), "--locale", "ja"]) == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["content"][1] == {"text": "sample_flow"}
        assert data["content"][4]["text"] == "アクショングループ 1"

    def test_docx_output(self, tmp_path, sample_flow_path):
        output = tmp_path / "flow.docx"
        assert main([str(sample_flow_path), "--name", "Sales Ops", "-o", str(output)]) == 0

        doc = Document(str(output))
        assert doc.paragraphs[1].text == "Sales Ops"

    def test_pdf_output(self, tmp_path, sample_flow_path):
        output = tmp_path / "flow.pdf"
        assert main([str(sample_flow_path), "--format", "pdf", "-o", str(output)]) == 0
        assert output.read_bytes().startswith(b"%PDF")

    def test_malformed_json_reports_error(self, tmp_path, capsys):
        input_file = tmp_path / "broken.json"
        input_file.write_text("{not json", encoding="utf-8")

        assert main([str(input_file), "-o", str(tmp_path / "broken.docx")]) == 1
        assert "Error:" in capsys.readouterr().out
        assert not (tmp_path / "broken.docx").exists()

    def test_unknown_trigger_type_reports_error(self, tmp_path, minimal_flow_data, capsys):
        minimal_flow_data["triggerType"] = "onDelete"
        input_file = tmp_path / "flow.json"
        input_file.write_text(json.dumps(minimal_flow_data), encoding="utf-8")

        assert main([str(input_file), "--format", "json", "-o", str(tmp_path / "out.json")]) == 1
        assert "onDelete" in capsys.readouterr().out
