"""Project path configuration."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.config._loader import PROJECT_ROOT, get_configs_dir


class PathsConfig(BaseSettings):
    """
    Project path configuration.

    ``configs_dir`` is the directory the YAML defaults are read from; set
    ``PATHS_CONFIGS_DIR`` to point both at another location.
    """
    model_config = SettingsConfigDict(
        env_prefix='PATHS_',
        case_sensitive=False
    )

    project_root: Path = Field(default_factory=lambda: PROJECT_ROOT)
    configs_dir: Path = Field(default_factory=get_configs_dir)
