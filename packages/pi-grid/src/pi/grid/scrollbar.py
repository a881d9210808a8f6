"""Scrollbar allowance used when sizing deferred columns."""

from __future__ import annotations

from pi.grid.settings import get_grid_settings


def get_scrollbar_size(show_scrollbar: bool) -> int:
    """Return the pixels a vertical scrollbar takes from the grid.

    Hidden scrollbars take nothing. Otherwise the configured
    ``GridSettings.scrollbar_size`` is used.
    """
    if not show_scrollbar:
        return 0
    return get_grid_settings().scrollbar_size
