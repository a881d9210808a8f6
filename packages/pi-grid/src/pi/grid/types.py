"""Core types for grid column metrics.

Columns and metrics are frozen Pydantic models: every layout computation
returns new instances and never touches the caller's values.
snake_case naming throughout, with camelCase aliases for grid props.
"""

from __future__ import annotations

from typing import Callable, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pi.grid.settings import get_grid_settings
from pi.grid.widths import parse_percentage

# int  ->  exact number of pixels
# str  ->  percentage string like "50%"
WidthValue = Union[int, str]


class Column(BaseModel):
    """A single grid column definition.

    Only ``key`` is required. Extra fields (``name``, ``resizable``,
    formatters, ...) are kept as-is so the view layer can carry its own
    column shape through the layout computation.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    key: str
    width: WidthValue | None = None
    left: int | None = None

    @field_validator("width")
    @classmethod
    def _check_width(cls, value: WidthValue | None) -> WidthValue | None:
        if value is None:
            return None
        if isinstance(value, str):
            if parse_percentage(value) is None:
                raise ValueError(
                    f"Invalid column width {value!r}: expected a pixel count or a percentage like '50%'"
                )
            return value
        if value < 0:
            raise ValueError(f"Invalid column width {value!r}: must not be negative")
        return value


class ColumnMetrics(BaseModel):
    """Column layout for a whole grid.

    ``width`` is only filled in by :func:`pi.grid.metrics.recalculate` and
    holds the sum of the *explicit* column widths. Deferred columns are not
    included, so it is not the rendered width of the grid.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    columns: tuple[Column, ...] = ()
    total_width: int = Field(alias="totalWidth")
    min_column_width: int = Field(
        default_factory=lambda: get_grid_settings().min_column_width,
        alias="minColumnWidth",
    )
    width: int | None = None


# --- Collaborators ---

ColumnComparer = Callable[[Column, Column], bool]
"""Per-column equality predicate over caller-defined fields."""

ImmutabilityCheck = Callable[[Sequence[Column]], bool]
"""Returns True when a column sequence can never change in place."""

ScrollbarAllowance = Callable[[bool], int]
"""Maps scrollbar visibility to the pixels it takes from the grid."""

