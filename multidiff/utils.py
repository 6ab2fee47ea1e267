import re
from typing import FrozenSet, List

# Minimum word overlap for two differing lines to share a row.
SIMILARITY_THRESHOLD = 0.4

_WHITESPACE_SPLIT = re.compile(r'(\s+)')


class TextProcessor:
    """
    Static helpers for normalizing documents and tokenizing lines.
    """

    @staticmethod
    def normalize(text: str) -> str:
        """Converts CRLF line endings to LF and trims the whole document."""
        return text.replace('\r\n', '\n').strip()

    @staticmethod
    def split_lines(text: str) -> List[str]:
        """
        Normalizes a raw document and splits it into lines.
        An empty document yields a single empty line.
        """
        return TextProcessor.normalize(text).split('\n')

    @staticmethod
    def tokenize(line: str) -> List[str]:
        """
        Positional tokenization: words and the whitespace runs between them.
        Joining the result gives back the original line.
        """
        return [token for token in _WHITESPACE_SPLIT.split(line) if token]

    @staticmethod
    def words(line: str) -> List[str]:
        return [token for token in TextProcessor.tokenize(line) if token.strip()]

    @staticmethod
    def word_set(line: str) -> FrozenSet[str]:
        return frozenset(TextProcessor.words(line))


class SimilarityCalculator:
    """
    Static utility class for word-overlap similarity between two lines.
    """

    @staticmethod
    def overlap_ratio(line_a: str, line_b: str) -> float:
        """
        |A & B| / max(|A|, |B|) over the lines' word sets.
        Returns 1.0 (Identical) to 0.0 (No shared words).
        """
        if line_a == line_b: return 1.0

        words_a = TextProcessor.word_set(line_a)
        words_b = TextProcessor.word_set(line_b)
        if not words_a or not words_b: return 0.0

        overlap = len(words_a & words_b)
        return overlap / max(len(words_a), len(words_b))

    @staticmethod
    def is_similar(line_a: str, line_b: str, threshold: float = SIMILARITY_THRESHOLD) -> bool:
        if line_a == line_b: return True
        # A line without words is never similar, whatever the threshold.
        if not TextProcessor.word_set(line_a) or not TextProcessor.word_set(line_b): return False
        return SimilarityCalculator.overlap_ratio(line_a, line_b) >= threshold
