"""
pytest configuration for helius library tests.

Adds src directory to Python path for imports and resets shared state.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

from config.config import reset_config  # noqa: E402
from helius_core.logging.context import clear_log_context  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_shared_state():
    """Clear the config singleton and logging context around every test."""
    reset_config()
    clear_log_context()
    yield
    reset_config()
    clear_log_context()
