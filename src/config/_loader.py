"""
YAML defaults for the settings classes.

Every settings section reads its defaults from a file under the configs
directory (``<project root>/configs`` unless ``PATHS_CONFIGS_DIR`` points
elsewhere). Files are parsed once and cached; environment variables are
applied afterwards by pydantic-settings.

Usage:
    from src.config._loader import load_yaml_section

    seed = load_yaml_section("config.yaml", "reproducibility")["random_seed"]
    topic_modeling = load_yaml_section("features/topic_modeling.yaml", "topic_modeling")
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

CONFIGS_DIR_ENV = "PATHS_CONFIGS_DIR"
PROJECT_ROOT = Path(__file__).parent.parent.parent


def get_configs_dir() -> Path:
    """Directory holding config.yaml and features/*.yaml."""
    override = os.environ.get(CONFIGS_DIR_ENV)
    return Path(override) if override else PROJECT_ROOT / "configs"


@lru_cache(maxsize=16)
def _read_yaml(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path} (set {CONFIGS_DIR_ENV} to relocate configs)"
        )

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping at the top level")
    return data


def load_yaml_section(config_file: str, section: str | None = None) -> dict[str, Any]:
    """
    Load a config file, or one top-level section of it.

    Args:
        config_file: Path relative to the configs directory
            (e.g., "config.yaml" or "features/topic_modeling.yaml")
        section: Optional top-level key to extract (e.g., "topic_modeling")

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If the section is missing from the file
    """
    config_path = get_configs_dir() / config_file
    data = _read_yaml(config_path)

    if section is None:
        return data
    if section not in data:
        raise KeyError(f"Section '{section}' not found in {config_path}")
    return data[section] or {}


def clear_config_cache() -> None:
    """Forget parsed files so the next load re-reads them."""
    _read_yaml.cache_clear()
