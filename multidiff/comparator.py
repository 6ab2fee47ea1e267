import logging
from typing import Dict, List, Optional, Sequence
from .classifier import cell_type, classify
from .engine import Aligner, WINDOW_RADIUS
from .models import AlignedRow, Cell, Classification, InvalidInputError
from .utils import SIMILARITY_THRESHOLD, TextProcessor
from .word_differ import WordDiffer

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "SIMILARITY_THRESHOLD": SIMILARITY_THRESHOLD,
    "WINDOW_RADIUS": WINDOW_RADIUS
}


class MultiTextComparator:
    """
    Normalizes N documents, aligns their lines into rows, classifies each
    row and attaches word-level differences to its cells.
    """

    def __init__(self, config: Optional[Dict] = None):
        self.config = self._merge_config(config)
        self.aligner = Aligner(
            threshold=self.config["SIMILARITY_THRESHOLD"],
            window_radius=self.config["WINDOW_RADIUS"])

    @staticmethod
    def _merge_config(config: Optional[Dict]) -> Dict:
        merged = dict(DEFAULT_CONFIG)
        if config:
            unknown = set(config) - set(DEFAULT_CONFIG)
            if unknown:
                raise InvalidInputError(f"Unknown config keys: {', '.join(sorted(unknown))}")
            merged.update(config)
        return merged

    @staticmethod
    def _validate(documents) -> List[str]:
        if documents is None:
            raise InvalidInputError("Documents must be a sequence of strings, got None")
        if isinstance(documents, (str, bytes)):
            raise InvalidInputError("Documents must be a sequence of strings, not a single string")
        try:
            documents = list(documents)
        except TypeError:
            raise InvalidInputError(
                f"Documents must be a sequence of strings, got {type(documents).__name__}") from None
        for i, doc in enumerate(documents):
            if not isinstance(doc, str):
                raise InvalidInputError(
                    f"Document {i} must be a string, got {type(doc).__name__}")
        return documents

    def compare(self, documents: Sequence[str]) -> List[AlignedRow]:
        """
        Compares the given raw documents.

        Args:
            documents: Raw document texts, in display order.

        Returns:
            List[AlignedRow]: One entry per alignment row.
        """
        texts = self._validate(documents)
        lines = [TextProcessor.split_lines(text) for text in texts]
        logger.debug("Comparing %d documents, line counts: %s", len(lines), [len(l) for l in lines])

        results = []
        for row_index, row in enumerate(self.aligner.align(lines)):
            classification = classify(row, len(lines))
            different = WordDiffer.diff_row(row)

            cells = []
            for i, content in enumerate(row.lines):
                exists = content is not None
                cells.append(Cell(
                    content=content if exists else "",
                    exists=exists,
                    type=cell_type(classification, exists),
                    different_words=different[i],
                    line_number=row.indices[i] + 1 if exists else None
                ))
            results.append(AlignedRow(row_index, classification, cells))
        return results


def compare(documents: Sequence[str], config: Optional[Dict] = None) -> List[AlignedRow]:
    """Aligns and diffs the documents with the given (or default) configuration."""
    return MultiTextComparator(config).compare(documents)


def summarize(rows: List[AlignedRow]) -> Dict[str, int]:
    """Row and word-change counts for a comparison result."""
    return {
        'total_rows': len(rows),
        'common': sum(1 for r in rows if r.classification is Classification.COMMON),
        'unique': sum(1 for r in rows if r.classification is Classification.UNIQUE),
        'partial': sum(1 for r in rows if r.classification is Classification.PARTIAL),
        'changed_rows': sum(1 for r in rows if r.is_change),
        'word_changes': sum(len(c.different_words) for r in rows for c in r.cells if c.different_words)
    }
