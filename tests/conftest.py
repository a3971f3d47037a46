"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from src.config.settings import Settings
from tests.test_fixtures import create_example_reference_data


@pytest.fixture
def sample_reference_data():
    """Create sample reference data for testing."""
    return create_example_reference_data()


@pytest.fixture
def default_settings():
    """Settings with default pricing constants (no .env overrides)."""
    return Settings(_env_file=None)


@pytest.fixture
def reference_data_path():
    """Path to the shipped reference data file."""
    return project_root / "data" / "reference_data.json"
