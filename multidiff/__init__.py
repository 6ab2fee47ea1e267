"""
multidiff Package
=================

This package aligns the lines of several text documents into shared rows and
highlights, within each row, the words that not every document shares.
Alignment is a greedy, position-local heuristic: a line joins a row when it
is equal to, or shares enough words with, the row's seed line and sits at
most a few lines away from it.

Modules:
    - utils: Normalization, tokenization and word-overlap similarity.
    - engine: The row Aligner and its per-document usage tracking.
    - classifier: Common / Unique / Partial row labels and cell types.
    - word_differ: Per-cell different words and highlight segments.
    - comparator: The public compare() entry point.
    - input_controller: Loads documents from files for the CLI.
    - models: Data structures (Row, Cell, AlignedRow).
"""
from .comparator import DEFAULT_CONFIG, MultiTextComparator, compare, summarize
from .models import AlignedRow, Cell, CellType, Classification, InvalidInputError, Row

__version__ = "1.0.0"
__all__ = [
    'DEFAULT_CONFIG',
    'MultiTextComparator',
    'compare',
    'summarize',
    'AlignedRow',
    'Cell',
    'CellType',
    'Classification',
    'InvalidInputError',
    'Row'
]
