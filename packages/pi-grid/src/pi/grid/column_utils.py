"""Helpers for reading and replacing columns in a layout."""

from __future__ import annotations

from typing import Sequence

from pi.grid.types import Column, ColumnMetrics


def get_size(columns: Sequence[Column]) -> int:
    return len(columns)


def get_column(columns: Sequence[Column], index: int) -> Column:
    """Return the column at *index*.

    Negative indices are not wrapped around.

    Raises:
        IndexError: If *index* is outside ``0 <= index < len(columns)``.
    """
    size = get_size(columns)
    if not 0 <= index < size:
        raise IndexError(f"Column index {index} out of range for {size} columns")
    return columns[index]


def splice_column(metrics: ColumnMetrics, index: int, column: Column) -> ColumnMetrics:
    """Return a copy of *metrics* with the column at *index* replaced."""
    get_column(metrics.columns, index)
    columns = list(metrics.columns)
    columns[index] = column
    return metrics.model_copy(update={"columns": tuple(columns)})
