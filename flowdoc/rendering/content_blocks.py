"""
Content Blocks for Flow Documents

A layout-oriented representation that sits between:
- Flow graph (decisions, actions, scheduled sections) - WHAT the process does
- Layout engines (DOCX, PDF) - HOW the page looks

Architecture:
    FlowGraphProvider
         ↓
    DocumentAssembler + block builders
         ↓
    Content blocks (this layer)
         ↓
    DocDefinition → Renderers (DOCX, PDF, JSON)

Blocks are immutable once built. The plain-data form produced by to_dict()
follows the document-definition shape used by declarative PDF layout
engines: {"text": ..., "style": ...} and {"table": {"widths", "body", ...}}.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple, Union

from config.constants import BOLD_STYLE


# ============================================================================
# Enums
# ============================================================================

class BlockType(Enum):
    """Types of block-level elements in the document."""
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    TABLE = "table"


class HeadingLevel(Enum):
    """Heading hierarchy levels."""
    H1 = 1  # Flow title
    H2 = 2  # Action group
    H3 = 3  # Actions / scheduled actions


Width = Union[int, str]  # points or "auto"
Margin = Tuple[int, ...]  # (h, v) or (left, top, right, bottom)


# ============================================================================
# Table Cells
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """One table cell with an optional named style."""
    text: str
    style: Optional[str] = None

    @property
    def is_bold(self) -> bool:
        return self.style == BOLD_STYLE

    def to_dict(self) -> Union[str, Dict[str, Any]]:
        if self.style is None:
            return self.text
        return {"text": self.text, "style": self.style}


Row = Tuple[Cell, ...]


def as_cell(value: Any) -> Cell:
    """Wrap plain values as unstyled cells; cells pass through."""
    if isinstance(value, Cell):
        return value
    return Cell(text="" if value is None else str(value))


def make_row(*values: Any) -> Row:
    return tuple(as_cell(v) for v in values)


# ============================================================================
# Blocks
# ============================================================================

@dataclass(frozen=True)
class Block:
    """Base class for all content blocks."""
    block_type: ClassVar[BlockType] = BlockType.PARAGRAPH
    style: Optional[str] = field(default=None, kw_only=True)
    margin: Optional[Margin] = field(default=None, kw_only=True)

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError

    def _decorate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if self.style is not None:
            data["style"] = self.style
        if self.margin is not None:
            data["margin"] = list(self.margin)
        return data


@dataclass(frozen=True)
class Heading(Block):
    """Heading block (flow title, action group, section)."""
    block_type: ClassVar[BlockType] = BlockType.HEADING
    level: HeadingLevel
    text: str

    @property
    def style_name(self) -> str:
        """Explicit style, else h1/h2/h3 by level."""
        return self.style or f"h{self.level.value}"

    def to_dict(self) -> Dict[str, Any]:
        data = self._decorate({"text": self.text})
        data["style"] = self.style_name
        return data


@dataclass(frozen=True)
class Paragraph(Block):
    """Paragraph of text."""
    block_type: ClassVar[BlockType] = BlockType.PARAGRAPH
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return self._decorate({"text": self.text})


@dataclass(frozen=True)
class Table(Block):
    """Key/value or tabular block."""
    block_type: ClassVar[BlockType] = BlockType.TABLE
    rows: Tuple[Row, ...]
    widths: Optional[Tuple[Width, ...]] = None
    header_rows: int = 0
    layout: Optional[str] = None  # e.g. "lightHorizontalLines"
    unbreakable: bool = False  # Keep the table on one page

    @property
    def header(self) -> Tuple[Row, ...]:
        return self.rows[:self.header_rows]

    @property
    def body(self) -> Tuple[Row, ...]:
        """Rows after the header rows."""
        return self.rows[self.header_rows:]

    @property
    def column_count(self) -> int:
        return max((len(r) for r in self.rows), default=0)

    def to_dict(self) -> Dict[str, Any]:
        table: Dict[str, Any] = {"body": [[c.to_dict() for c in row] for row in self.rows]}
        if self.widths is not None:
            table["widths"] = list(self.widths)
        if self.header_rows:
            table["headerRows"] = self.header_rows

        data: Dict[str, Any] = {}
        if self.layout is not None:
            data["layout"] = self.layout
        if self.unbreakable:
            data["unbreakable"] = True
        data["table"] = table
        return self._decorate(data)


def make_table(rows: Sequence[Sequence[Any]], **kwargs: Any) -> Table:
    """Build a Table from rows of cells or plain values."""
    return Table(rows=tuple(make_row(*r) for r in rows), **kwargs)


# ============================================================================
# Styles
# ============================================================================

@dataclass(frozen=True)
class TextStyle:
    """Named text style referenced by blocks and cells."""
    font_size: Optional[float] = None  # None keeps the default size
    bold: bool = False
    italic: bool = False
    color: Optional[str] = None  # Hex color (without #)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.font_size is not None:
            data["fontSize"] = self.font_size
        if self.bold:
            data["bold"] = True
        if self.italic:
            data["italics"] = True
        if self.color:
            data["color"] = f"#{self.color}"
        return data


@dataclass(frozen=True)
class StyleSheet:
    """Collection of named styles for the document."""
    body_size: float = 10.0
    h1: TextStyle = field(default_factory=lambda: TextStyle(font_size=18.0, bold=True))
    h2: TextStyle = field(default_factory=lambda: TextStyle(font_size=14.0, bold=True, color="1F4E79"))
    h3: TextStyle = field(default_factory=lambda: TextStyle(font_size=12.0, bold=True))
    bold: TextStyle = field(default_factory=lambda: TextStyle(bold=True))

    def get(self, name: Optional[str]) -> Optional[TextStyle]:
        """Style by name; None for unknown or missing names."""
        if name in ("h1", "h2", "h3", "bold"):
            return getattr(self, name)
        return None

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: getattr(self, name).to_dict() for name in ("h1", "h2", "h3", "bold")}


def create_default_stylesheet() -> StyleSheet:
    """Stylesheet for process documents."""
    return StyleSheet()


# ============================================================================
# Type Aliases
# ============================================================================

BlockList = List[Block]
"""Ordered document body"""
