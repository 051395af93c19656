"""
Plot Topics Configuration Package.

This module uses Pydantic Settings to:
1. Define the schema for all configuration
2. Load defaults from configs/config.yaml and configs/features/*.yaml
3. Automatically override with environment variables from .env or CI/CD secrets

Usage:
    from src.config import settings

    # Final topic count
    k = settings.topic_modeling.model.num_topics

    # Candidate counts for the topic-count search
    candidates = settings.topic_modeling.selection.candidates
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Core configs
from src.config.paths import PathsConfig
from src.config.reproducibility import ReproducibilityConfig

# Feature configs
from src.config.features import TopicModelingConfig


class Settings(BaseSettings):
    """
    Main settings class that combines all configuration sections.

    Usage:
        from src.config import settings

        settings.paths.configs_dir
        settings.topic_modeling.model.num_topics
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    paths: PathsConfig = Field(default_factory=PathsConfig)
    reproducibility: ReproducibilityConfig = Field(default_factory=ReproducibilityConfig)
    topic_modeling: TopicModelingConfig = Field(default_factory=TopicModelingConfig)


# ===========================
# Global Settings Instance
# ===========================

settings = Settings()


# ===========================
# Public API
# ===========================

__all__ = [
    "settings",
    "Settings",
    "PathsConfig",
    "ReproducibilityConfig",
    "TopicModelingConfig",
]
