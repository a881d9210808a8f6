"""Tests for grid settings and the default scrollbar allowance."""

import logging
import os
from unittest.mock import patch

from pi.grid.scrollbar import get_scrollbar_size
from pi.grid.settings import (
    DEFAULT_MIN_COLUMN_WIDTH,
    DEFAULT_SCROLLBAR_SIZE,
    GridSettings,
    get_grid_settings,
    load_grid_settings,
    reset_grid_settings,
    set_grid_settings,
)


def test_defaults_without_environment():
    settings = load_grid_settings({})
    assert settings.scrollbar_size == DEFAULT_SCROLLBAR_SIZE == 17
    assert settings.min_column_width == DEFAULT_MIN_COLUMN_WIDTH == 80


def test_values_from_environment():
    settings = load_grid_settings(
        {"PI_GRID_SCROLLBAR_SIZE": "12", "PI_GRID_MIN_COLUMN_WIDTH": "40"}
    )
    assert settings == GridSettings(scrollbar_size=12, min_column_width=40)


def test_blank_value_uses_default():
    assert load_grid_settings({"PI_GRID_SCROLLBAR_SIZE": "  "}).scrollbar_size == 17


def test_invalid_value_warns_and_uses_default(caplog):
    with caplog.at_level(logging.WARNING, logger="pi.grid.settings"):
        settings = load_grid_settings({"PI_GRID_MIN_COLUMN_WIDTH": "wide"})
    assert settings.min_column_width == 80
    assert "PI_GRID_MIN_COLUMN_WIDTH" in caplog.text


def test_negative_value_warns_and_uses_default(caplog):
    with caplog.at_level(logging.WARNING, logger="pi.grid.settings"):
        settings = load_grid_settings({"PI_GRID_SCROLLBAR_SIZE": "-3"})
    assert settings.scrollbar_size == 17
    assert "must not be negative" in caplog.text


def test_get_reads_process_environment_once():
    reset_grid_settings()
    with patch.dict(os.environ, {"PI_GRID_SCROLLBAR_SIZE": "9"}):
        assert get_grid_settings().scrollbar_size == 9
    # Cached until reset
    assert get_grid_settings().scrollbar_size == 9


def test_set_replaces_settings():
    custom = GridSettings(scrollbar_size=3, min_column_width=5)
    set_grid_settings(custom)
    assert get_grid_settings() is custom


def test_scrollbar_hidden_takes_no_space():
    set_grid_settings(GridSettings(scrollbar_size=25))
    assert get_scrollbar_size(False) == 0


def test_scrollbar_shown_uses_configured_size():
    set_grid_settings(GridSettings(scrollbar_size=25))
    assert get_scrollbar_size(True) == 25
