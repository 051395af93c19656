"""
Shared pytest fixtures for the Plot Topics test suite.

This module provides common fixtures used across test modules:
- Project paths
- Configuration settings
- Config cache reset

Usage:
    Fixtures are automatically discovered by pytest.
    Import them directly in test files - no explicit import needed.
"""

import pytest
from pathlib import Path
import sys

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import settings
from src.config._loader import clear_config_cache


# ===========================
# Path Fixtures
# ===========================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def configs_dir() -> Path:
    """Return the configs directory path."""
    return settings.paths.configs_dir


# ===========================
# Configuration Fixtures
# ===========================

@pytest.fixture
def fresh_config_cache():
    """Clear the YAML cache before and after a test that reloads settings."""
    clear_config_cache()
    yield
    clear_config_cache()
