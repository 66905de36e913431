#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Flow Document CLI - render a parsed flow as DOCX, PDF or JSON

Usage:
    flowdoc flow.json
    flowdoc flow.json --name "Sales Operations" --locale ja --format pdf
    flowdoc flow.json --format json -o build/flow.json
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from config.constants import SUPPORTED_OUTPUT_FORMATS
from config.logging_config import setup_logger
from config.settings import settings
from flowdoc.flow.memory_graph import InMemoryFlowGraph
from flowdoc.flow.provider import FlowGraphError
from flowdoc.i18n.translator import Translator, available_locales
from flowdoc.rendering.packager import create_doc_definition


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flowdoc",
        description="Render an automated process flow as a printable document",
    )
    parser.add_argument("input", help="Parsed flow JSON file")
    parser.add_argument("--name", help="Display name under the title (default: file stem)")
    parser.add_argument("--locale", default=settings.locale,
                        help=f"Document language ({', '.join(available_locales())})")
    parser.add_argument("--format", dest="output_format", default=settings.output_format,
                        choices=SUPPORTED_OUTPUT_FORMATS, help="Output format")
    parser.add_argument("-o", "--output", help="Output file (default: <output_dir>/<stem>.<format>)")
    parser.add_argument("--font", default=settings.default_font, help="Default font family")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings.ensure_directories()
    logger = setup_logger("flowdoc", log_file=str(settings.logs_dir / "flowdoc.log"))

    input_file = Path(args.input).resolve()
    if not input_file.exists():
        print(f"Input file not found: {input_file}")
        return 1

    if args.output:
        output_file = Path(args.output).resolve()
    else:
        output_file = settings.output_dir / f"{input_file.stem}.{args.output_format}"

    translator = Translator(args.locale, settings.locales_dir)
    try:
        graph = InMemoryFlowGraph.from_json_file(input_file)
        definition = create_doc_definition(
            graph,
            translator,
            args.name or input_file.stem,
            default_font=args.font,
        )

        if args.output_format == "json":
            definition.write_json(output_file)
        elif args.output_format == "pdf":
            from flowdoc.rendering.pdf_adapter import render_pdf
            render_pdf(definition, output_file)
        else:
            from flowdoc.rendering.docx_adapter import render_docx
            render_docx(definition, output_file)
    except (ValueError, FlowGraphError, OSError) as e:
        logger.error(f"Failed to render {input_file.name}: {e}")
        print(f"Error: {e}")
        return 1

    if translator.missing_keys:
        logger.warning(f"Missing translations ({translator.locale}): {', '.join(translator.missing_keys)}")

    print(f"Saved: {output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
