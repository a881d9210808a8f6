import pytest

from pi.grid.settings import GridSettings, reset_grid_settings, set_grid_settings


@pytest.fixture(autouse=True)
def default_grid_settings():
    """Pin the process-wide settings to their defaults for each test."""
    set_grid_settings(GridSettings())
    yield
    reset_grid_settings()
