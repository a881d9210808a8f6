"""pi-grid: Column width and offset computation for tabular grids."""

# Column sequence helpers
from pi.grid.column_utils import get_column, get_size, splice_column

# Default collaborators
from pi.grid.comparer import is_columns_immutable, same_column

# Layout recalculation and equality
from pi.grid.metrics import recalculate, resize_column, same_columns

# Scrollbar allowance
from pi.grid.scrollbar import get_scrollbar_size

# Settings
from pi.grid.settings import (
    DEFAULT_MIN_COLUMN_WIDTH,
    DEFAULT_SCROLLBAR_SIZE,
    GridSettings,
    get_grid_settings,
    load_grid_settings,
    reset_grid_settings,
    set_grid_settings,
)

# Types
from pi.grid.types import (
    Column,
    ColumnComparer,
    ColumnMetrics,
    ImmutabilityCheck,
    ScrollbarAllowance,
    WidthValue,
)

# Width resolution
from pi.grid.widths import (
    assign_offsets,
    distribute_deferred_widths,
    parse_percentage,
    resolve_explicit_widths,
)

__all__ = [
    # Column helpers
    "get_column",
    "get_size",
    "splice_column",
    # Collaborators
    "is_columns_immutable",
    "same_column",
    # Metrics
    "recalculate",
    "resize_column",
    "same_columns",
    # Scrollbar
    "get_scrollbar_size",
    # Settings
    "DEFAULT_MIN_COLUMN_WIDTH",
    "DEFAULT_SCROLLBAR_SIZE",
    "GridSettings",
    "get_grid_settings",
    "load_grid_settings",
    "reset_grid_settings",
    "set_grid_settings",
    # Types
    "Column",
    "ColumnComparer",
    "ColumnMetrics",
    "ImmutabilityCheck",
    "ScrollbarAllowance",
    "WidthValue",
    # Widths
    "assign_offsets",
    "distribute_deferred_widths",
    "parse_percentage",
    "resolve_explicit_widths",
]
