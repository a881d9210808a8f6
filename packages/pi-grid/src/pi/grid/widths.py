"""Column width resolution and offset assignment.

Widths are resolved in two passes. Explicit widths (pixels or percentages
of the grid width) are fixed first; columns without a width ("deferred")
then share whatever is left. A final pass lays the columns out left to
right.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from pi.grid.types import Column

_PERCENTAGE_RE = re.compile(r"^([0-9]+)%$")


def parse_percentage(width: object) -> int | None:
    """Return ``N`` for a ``"N%"`` width, ``None`` for anything else."""
    if not isinstance(width, str):
        return None
    m = _PERCENTAGE_RE.match(width)
    if m is None:
        return None
    return int(m.group(1))


def resolve_explicit_widths(
    columns: Iterable[Column], total_width: int
) -> list[Column]:
    """Replace percentage widths with pixels.

    ``"50%"`` of 200 becomes ``100``. Pixel widths, including an explicit
    ``0``, and unset widths are returned unchanged.
    """
    resolved: list[Column] = []
    for column in columns:
        pct = parse_percentage(column.width)
        if pct is None:
            resolved.append(column)
        else:
            resolved.append(
                column.model_copy(
                    update={"width": math.floor(total_width * pct / 100)}
                )
            )
    return resolved


def distribute_deferred_widths(
    columns: Iterable[Column],
    unallocated_width: int,
    min_column_width: int,
) -> list[Column]:
    """Give every column without a width a share of *unallocated_width*.

    Each deferred column gets ``unallocated_width // deferred_count``,
    raised to *min_column_width* when smaller. The last deferred column also
    absorbs whatever rounding left over. When nothing is left to share, all
    deferred columns get *min_column_width* and the grid overflows.

    Earlier columns win when the minimum forces over-allocation; the shares
    are not rebalanced.
    """
    columns = list(columns)
    deferred_count = sum(1 for c in columns if c.width is None)
    remaining_count = deferred_count
    remaining_width = unallocated_width

    result: list[Column] = []
    for column in columns:
        if column.width is not None:
            result.append(column)
            continue

        if unallocated_width <= 0:
            width = min_column_width
        else:
            width = max(unallocated_width // deferred_count, min_column_width)
            remaining_width -= width
            remaining_count -= 1
            if remaining_count == 0 and remaining_width > 0:
                width += remaining_width

        result.append(column.model_copy(update={"width": width}))
    return result


def assign_offsets(columns: Iterable[Column]) -> list[Column]:
    """Set each column's ``left`` to the sum of the widths before it.

    Raises:
        ValueError: If a column still has no resolved width.
    """
    left = 0
    result: list[Column] = []
    for column in columns:
        if not isinstance(column.width, int):
            raise ValueError(
                f"Column {column.key!r} has no resolved width: {column.width!r}"
            )
        result.append(column.model_copy(update={"left": left}))
        left += column.width
    return result
