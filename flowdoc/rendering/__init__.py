"""
Rendering Module

Turns a flow graph into content blocks, packages them as a document
definition and renders that definition to DOCX, PDF or JSON.
"""

from .content_blocks import (
    BlockType,
    Cell,
    Heading,
    HeadingLevel,
    Paragraph,
    StyleSheet,
    Table,
    TextStyle,
    create_default_stylesheet,
)
from .assembler import DocumentAssembler, build_flow_content
from .packager import DocDefinition, create_doc_definition

__all__ = [
    'BlockType',
    'Cell',
    'Heading',
    'HeadingLevel',
    'Paragraph',
    'StyleSheet',
    'Table',
    'TextStyle',
    'create_default_stylesheet',
    'DocumentAssembler',
    'build_flow_content',
    'DocDefinition',
    'create_doc_definition',
]
