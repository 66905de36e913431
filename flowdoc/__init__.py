"""
flowdoc - render automated process flows as printable documents.

Pipeline:
    FlowGraphProvider → DocumentAssembler → content blocks
                      → DocDefinition (styles + default font)
                      → DOCX / PDF / JSON
"""

__version__ = "1.0.0"
