"""Default collaborators for column equality checks."""

from __future__ import annotations

from typing import Any, Sequence

from pi.grid.types import Column

# Computed by the layout, not part of a column's definition
_COMPUTED_FIELDS = frozenset({"left"})


def _defining_fields(column: Column) -> dict[str, Any]:
    return {name: value for name, value in column if name not in _COMPUTED_FIELDS}


def same_column(a: Column, b: Column) -> bool:
    """Shallow comparison of two column definitions.

    Both columns must define the same fields with equal values. The
    computed ``left`` offset is ignored, and two callables (formatters,
    event hooks) always count as equal since they are usually recreated on
    every render.
    """
    a_fields = _defining_fields(a)
    b_fields = _defining_fields(b)
    if a_fields.keys() != b_fields.keys():
        return False
    for name, a_value in a_fields.items():
        b_value = b_fields[name]
        if callable(a_value) and callable(b_value):
            continue
        if a_value != b_value:
            return False
    return True


def is_columns_immutable(columns: Sequence[Column]) -> bool:
    """Return ``True`` for a tuple of frozen columns."""
    return isinstance(columns, tuple) and all(
        isinstance(column, Column) and column.model_config.get("frozen", False)
        for column in columns
    )
