import logging
from typing import Iterator, List, Optional
from .models import InvalidInputError, Row
from .utils import SimilarityCalculator, SIMILARITY_THRESHOLD

logger = logging.getLogger(__name__)

# How far (in lines) above and below the current row a match may be taken from.
WINDOW_RADIUS = 2


class UsageTracker:
    """
    Marks which line of which document has already been placed in a row.
    One boolean array per document.
    """

    def __init__(self, lengths: List[int]):
        self.used = [[False] * length for length in lengths]

    def is_used(self, doc_index: int, line_index: int) -> bool:
        return self.used[doc_index][line_index]

    def is_available(self, doc_index: int, line_index: int) -> bool:
        """True if the index is in range for the document and not yet used."""
        flags = self.used[doc_index]
        return 0 <= line_index < len(flags) and not flags[line_index]

    def mark(self, doc_index: int, line_index: int):
        if self.used[doc_index][line_index]:
            raise RuntimeError(
                f"Line {line_index} of document {doc_index} is already assigned to a row")
        self.used[doc_index][line_index] = True


class Aligner:
    """
    Greedy, windowed row aligner.

    Rows are seeded in row-major, then document-major order. Each seed pulls
    in at most one line from every other document: the line at the same
    position if it is equal or similar, otherwise the first equal or similar
    unused line within the offset window.
    """

    def __init__(self, threshold: float = SIMILARITY_THRESHOLD, window_radius: int = WINDOW_RADIUS):
        if not 0.0 <= threshold <= 1.0:
            raise InvalidInputError(f"Similarity threshold must be within [0, 1], got {threshold}")
        if window_radius < 0:
            raise InvalidInputError(f"Window radius must be non-negative, got {window_radius}")
        self.threshold = threshold
        self.window_radius = window_radius

    def align(self, documents: List[List[str]]) -> List[Row]:
        """
        Groups the lines of all documents into rows.

        Args:
            documents: One list of lines per document.

        Returns:
            List[Row]: Rows in the order they were seeded.
        """
        rows = []
        if not documents:
            return rows

        tracker = UsageTracker([len(lines) for lines in documents])
        max_len = max(len(lines) for lines in documents)

        for row in range(max_len):
            for doc_index, lines in enumerate(documents):
                if row >= len(lines) or tracker.is_used(doc_index, row): continue

                seed = lines[row]
                group = Row.empty(len(documents))
                group.place(doc_index, row, seed)
                tracker.mark(doc_index, row)

                for other_index, other_lines in enumerate(documents):
                    if other_index == doc_index: continue

                    match = self._find_match(other_lines, tracker, other_index, row, seed)
                    if match is not None:
                        group.place(other_index, match, other_lines[match])
                        tracker.mark(other_index, match)

                rows.append(group)

        logger.debug("Aligned %d documents (%d max lines) into %d rows",
                     len(documents), max_len, len(rows))
        return rows

    def _find_match(self, lines: List[str], tracker: UsageTracker,
                    doc_index: int, row: int, seed: str) -> Optional[int]:
        """Index of the line in `lines` that should join the seed's row, if any."""
        if tracker.is_available(doc_index, row) and self._matches(lines[row], seed):
            return row

        for candidate in self.window(row, len(lines)):
            if tracker.is_available(doc_index, candidate) and self._matches(lines[candidate], seed):
                return candidate
        return None

    def window(self, row: int, length: int) -> Iterator[int]:
        """
        Line indices within the window around `row`, in offset order
        -r..-1, +1..+r, clipped to 0..length-1.
        """
        yield from range(max(row - self.window_radius, 0), min(row, length))
        yield from range(row + 1, min(row + self.window_radius, length - 1) + 1)

    def _matches(self, line: str, seed: str) -> bool:
        return line == seed or SimilarityCalculator.is_similar(line, seed, self.threshold)
