from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional


class InvalidInputError(ValueError):
    """Raised when the documents handed to the comparator are malformed."""


class Classification(Enum):
    """Presence-based label of a row (not content based)."""
    COMMON = "common"
    UNIQUE = "unique"
    PARTIAL = "partial"


class CellType(Enum):
    """Per-document type of a cell, derived from the row classification."""
    COMMON = "common"
    UNIQUE = "unique"
    MODIFIED = "modified"
    EMPTY = "empty"


@dataclass
class Row:
    """
    One alignment group: a slot per input document.

    Attributes:
        lines (List[Optional[str]]): The line placed in each document's slot, or None.
        indices (List[Optional[int]]): 0-based source line index for each slot, or None.
    """
    lines: List[Optional[str]]
    indices: List[Optional[int]]

    @classmethod
    def empty(cls, size: int) -> "Row":
        return cls(lines=[None] * size, indices=[None] * size)

    def place(self, doc_index: int, line_index: int, content: str):
        self.lines[doc_index] = content
        self.indices[doc_index] = line_index

    @property
    def exists_in(self) -> int:
        return sum(1 for line in self.lines if line is not None)

    def present_lines(self) -> List[str]:
        return [line for line in self.lines if line is not None]


@dataclass
class Cell:
    """
    Projection of a row onto a single document.

    Attributes:
        content (str): The line text, or "" when the document has no line in this row.
        exists (bool): Whether the document contributed a line.
        type (CellType): Visual/semantic type of the cell.
        different_words (Optional[FrozenSet[str]]): Words not shared by every
            present line of the row. Never an empty set.
        line_number (Optional[int]): 1-based line number in the source document.
    """
    content: str
    exists: bool
    type: CellType
    different_words: Optional[FrozenSet[str]] = None
    line_number: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'content': self.content,
            'exists': self.exists,
            'type': self.type.value,
            'different_words': sorted(self.different_words) if self.different_words else None,
            'line_number': self.line_number
        }


@dataclass
class AlignedRow:
    """
    A classified row ready for side-by-side rendering.

    Attributes:
        row_index (int): Sequential index of this row.
        classification (Classification): Presence-based label.
        cells (List[Cell]): One cell per input document.
    """
    row_index: int
    classification: Classification
    cells: List[Cell] = field(default_factory=list)

    @property
    def is_change(self) -> bool:
        """False only when every document holds the same line."""
        if not all(cell.exists for cell in self.cells):
            return True
        return len({cell.content for cell in self.cells}) > 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'row_index': self.row_index,
            'classification': self.classification.value,
            'is_change': self.is_change,
            'cells': [c.to_dict() for c in self.cells]
        }
