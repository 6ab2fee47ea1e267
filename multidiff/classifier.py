from typing import Union
from .models import CellType, Classification, Row


def classify(row: Union[Row, int], total: int) -> Classification:
    """
    Labels a row by how many of the `total` documents contributed a line.
    Accepts either a Row or a precomputed presence count.
    """
    exists_in = row.exists_in if isinstance(row, Row) else row

    # Unreachable for rows built by the Aligner; every row has its seed.
    if exists_in <= 0:
        return Classification.UNIQUE
    if exists_in == total:
        return Classification.COMMON
    if exists_in == 1:
        return Classification.UNIQUE
    return Classification.PARTIAL


def cell_type(classification: Classification, exists: bool) -> CellType:
    if not exists:
        return CellType.EMPTY
    if classification is Classification.COMMON:
        return CellType.COMMON
    if classification is Classification.UNIQUE:
        return CellType.UNIQUE
    return CellType.MODIFIED
