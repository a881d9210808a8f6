"""Column metrics: layout recalculation, column resizing and equality checks.

The view layer calls :func:`recalculate` whenever the columns, the grid
width or the scrollbar visibility change, and :func:`same_columns` to skip
that work when the column definitions did not change.
"""

from __future__ import annotations

import logging
from typing import Sequence

from pi.grid.column_utils import get_column, get_size, splice_column
from pi.grid.comparer import is_columns_immutable, same_column
from pi.grid.scrollbar import get_scrollbar_size
from pi.grid.types import (
    Column,
    ColumnComparer,
    ColumnMetrics,
    ImmutabilityCheck,
    ScrollbarAllowance,
)
from pi.grid.widths import (
    assign_offsets,
    distribute_deferred_widths,
    resolve_explicit_widths,
)

logger = logging.getLogger(__name__)


def recalculate(
    metrics: ColumnMetrics,
    show_scrollbar: bool,
    *,
    scrollbar_allowance: ScrollbarAllowance = get_scrollbar_size,
) -> ColumnMetrics:
    """Compute widths and offsets for every column in *metrics*.

    Explicit widths are resolved first. The remaining width, less the
    scrollbar allowance, is then shared by the columns without a width.

    The returned ``width`` is the sum of the explicit widths only; deferred
    columns are not counted even though they end up with a width.
    """
    columns = resolve_explicit_widths(metrics.columns, metrics.total_width)

    width = sum(c.width for c in columns if c.width)
    unallocated_width = metrics.total_width - width - scrollbar_allowance(show_scrollbar)

    if unallocated_width <= 0 and any(c.width is None for c in columns):
        logger.debug(
            "No width left for deferred columns (unallocated=%d); using minimum %d",
            unallocated_width,
            metrics.min_column_width,
        )

    columns = distribute_deferred_widths(
        columns, unallocated_width, metrics.min_column_width
    )
    columns = assign_offsets(columns)

    logger.debug(
        "Recalculated %d columns for total width %d (explicit width %d)",
        len(columns),
        metrics.total_width,
        width,
    )
    return metrics.model_copy(update={"columns": tuple(columns), "width": width})


def resize_column(
    metrics: ColumnMetrics,
    index: int,
    width: int,
    show_scrollbar: bool,
    *,
    scrollbar_allowance: ScrollbarAllowance = get_scrollbar_size,
) -> ColumnMetrics:
    """Set the width of the column at *index* and recalculate the layout.

    The new width is raised to ``metrics.min_column_width`` when smaller.
    Every column is re-resolved, exactly as if the caller had set the width
    and called :func:`recalculate`.

    Raises:
        IndexError: If *index* does not address a column.
    """
    column = get_column(metrics.columns, index)
    updated = column.model_copy(
        update={"width": max(width, metrics.min_column_width)}
    )
    resized = splice_column(metrics, index, updated)
    return recalculate(
        resized, show_scrollbar, scrollbar_allowance=scrollbar_allowance
    )


def _are_columns_immutable(
    prev_columns: Sequence[Column],
    next_columns: Sequence[Column],
    is_immutable: ImmutabilityCheck,
) -> bool:
    return is_immutable(prev_columns) and is_immutable(next_columns)


def _compare_each_column(
    prev_columns: Sequence[Column],
    next_columns: Sequence[Column],
    is_same_column: ColumnComparer,
) -> bool:
    if get_size(prev_columns) != get_size(next_columns):
        return False

    prev_by_key = {column.key: column for column in prev_columns}
    next_by_key: dict[str, Column] = {}

    for column in next_columns:
        next_by_key[column.key] = column
        prev_column = prev_by_key.get(column.key)
        if prev_column is None or not is_same_column(prev_column, column):
            return False

    for column in prev_columns:
        if column.key not in next_by_key:
            return False
    return True


def same_columns(
    prev_columns: Sequence[Column],
    next_columns: Sequence[Column],
    is_same_column: ColumnComparer = same_column,
    *,
    is_immutable: ImmutabilityCheck = is_columns_immutable,
) -> bool:
    """Return ``True`` when two column sequences describe the same layout.

    Immutable sequences are compared by identity only: a different object
    is assumed to hold different columns, even when the contents happen to
    be equal. Anything else is compared column by column, matched by key,
    using *is_same_column*.
    """
    if _are_columns_immutable(prev_columns, next_columns, is_immutable):
        return prev_columns is next_columns

    return _compare_each_column(prev_columns, next_columns, is_same_column)
