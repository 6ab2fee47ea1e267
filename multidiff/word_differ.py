from typing import FrozenSet, Iterable, List, Optional, Tuple
from .models import Row
from .utils import TextProcessor


class WordDiffer:
    """
    Multi-way word diff within a single row.

    A word is highlighted in a document's cell when that document's line
    contains it but at least one other present line does not.
    """

    @staticmethod
    def common_words(lines: Iterable[str]) -> FrozenSet[str]:
        """Words that appear in every one of the given lines."""
        word_sets = [TextProcessor.word_set(line) for line in lines]
        if not word_sets:
            return frozenset()
        return frozenset.intersection(*word_sets)

    @staticmethod
    def diff_row(row: Row) -> List[Optional[FrozenSet[str]]]:
        """
        Returns the different words for each slot of the row.
        Absent slots, rows whose present lines are all identical, and slots
        whose words are all common get None.
        """
        result = [None] * len(row.lines)
        present = row.present_lines()
        if len(set(present)) < 2:
            return result

        common = WordDiffer.common_words(present)
        for i, line in enumerate(row.lines):
            if line is None: continue
            different = TextProcessor.word_set(line) - common
            result[i] = different or None
        return result


def highlight_segments(content: str, different_words: Optional[FrozenSet[str]]) -> List[Tuple[str, bool]]:
    """
    Splits a line into positional tokens, flagging the ones to highlight.

    Args:
        content (str): The cell's line.
        different_words (Optional[FrozenSet[str]]): Words to highlight.

    Returns:
        List[Tuple[str, bool]]: (token, highlighted) pairs. Joining the
        tokens gives back `content`; whitespace is never highlighted.
    """
    words = different_words or frozenset()
    return [(token, bool(token.strip()) and token in words)
            for token in TextProcessor.tokenize(content)]
