"""Grid layout settings with environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_SCROLLBAR_SIZE = 17
DEFAULT_MIN_COLUMN_WIDTH = 80

SCROLLBAR_SIZE_ENV = "PI_GRID_SCROLLBAR_SIZE"
MIN_COLUMN_WIDTH_ENV = "PI_GRID_MIN_COLUMN_WIDTH"


@dataclass
class GridSettings:
    """Layout defaults shared by every grid in the process."""

    scrollbar_size: int = DEFAULT_SCROLLBAR_SIZE
    min_column_width: int = DEFAULT_MIN_COLUMN_WIDTH


def _read_pixels(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: must not be negative", name, raw)
        return default
    return value


def load_grid_settings(environ: Mapping[str, str] | None = None) -> GridSettings:
    """Build settings from ``PI_GRID_*`` environment variables.

    Missing or invalid values fall back to the defaults.
    """
    if environ is None:
        environ = os.environ
    return GridSettings(
        scrollbar_size=_read_pixels(environ, SCROLLBAR_SIZE_ENV, DEFAULT_SCROLLBAR_SIZE),
        min_column_width=_read_pixels(environ, MIN_COLUMN_WIDTH_ENV, DEFAULT_MIN_COLUMN_WIDTH),
    )


_global_grid_settings: GridSettings | None = None


def get_grid_settings() -> GridSettings:
    global _global_grid_settings
    if _global_grid_settings is None:
        _global_grid_settings = load_grid_settings()
    return _global_grid_settings


def set_grid_settings(settings: GridSettings) -> None:
    global _global_grid_settings
    _global_grid_settings = settings


def reset_grid_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _global_grid_settings
    _global_grid_settings = None
