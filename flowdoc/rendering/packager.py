"""
Document Packager - wraps content blocks into a document definition

The definition is what the layout engines consume:
    content       ordered blocks from DocumentAssembler
    styles        named text styles
    default_font  font family for unstyled text
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from config.settings import settings
from flowdoc.flow.provider import FlowGraphProvider
from flowdoc.i18n.translator import StringLookup
from flowdoc.rendering.assembler import DocumentAssembler
from flowdoc.rendering.content_blocks import (
    BlockList,
    Heading,
    HeadingLevel,
    StyleSheet,
    create_default_stylesheet,
)

logger = logging.getLogger(__name__)


@dataclass
class DocDefinition:
    """Complete document definition handed to a layout engine."""
    content: BlockList
    styles: StyleSheet = field(default_factory=create_default_stylesheet)
    default_font: str = settings.default_font

    @property
    def title(self) -> str:
        """Text of the first H1 heading, or empty."""
        for block in self.content:
            if isinstance(block, Heading) and block.level is HeadingLevel.H1:
                return block.text
        return ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": [block.to_dict() for block in self.content],
            "styles": self.styles.to_dict(),
            "defaultStyle": {"font": self.default_font},
        }

    def write_json(self, output_path: Path) -> None:
        """
        Save the plain-data definition as UTF-8 JSON.

        Raises:
            IOError: If file cannot be written
        """
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)
            logger.info(f"Document definition saved: {output_path}")
        except OSError as e:
            logger.error(f"Failed to save document definition: {e}")
            raise IOError(f"Cannot save JSON to {output_path}: {e}")

    def __repr__(self) -> str:
        return f"DocDefinition(title={self.title!r}, blocks={len(self.content)}, font={self.default_font})"


def create_doc_definition(
    provider: FlowGraphProvider,
    lookup: StringLookup,
    name: str,
    styles: Optional[StyleSheet] = None,
    default_font: Optional[str] = None,
) -> DocDefinition:
    """
    Assemble the flow and package it with styles and a default font.

    Args:
        provider: Flow graph to render
        lookup: String lookup for the active locale
        name: Display name shown under the title
        styles: Stylesheet (defaults to create_default_stylesheet())
        default_font: Font family (defaults to settings.default_font)
    """
    content = DocumentAssembler(provider, lookup).build(name)
    return DocDefinition(
        content=content,
        styles=styles or create_default_stylesheet(),
        default_font=default_font or settings.default_font,
    )
