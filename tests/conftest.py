"""Shared pytest configuration and fixtures for the disparity viewer tests."""

import logging
import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure the project root is in the path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from disparity_view.color_mapper import DisparityFrame  # noqa: E402


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def make_frame():
    """Build a DisparityFrame from a nested list / array of disparities."""
    def _make(values, min_disparity=0.0, max_disparity=10.0):
        return DisparityFrame.from_array(np.asarray(values, dtype=np.float32),
                                         min_disparity, max_disparity)
    return _make


@pytest.fixture
def restore_root_logger():
    """setup_logger() replaces the root handlers; put the originals back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
