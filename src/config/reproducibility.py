"""Reproducibility configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.config._loader import load_yaml_section


def _get_reproducibility_config() -> dict:
    return load_yaml_section("config.yaml", "reproducibility")


class ReproducibilityConfig(BaseSettings):
    """Project-wide random seed, the fallback for every seeded component."""
    model_config = SettingsConfigDict(
        env_prefix='REPRODUCIBILITY_',
        case_sensitive=False
    )

    random_seed: int = Field(
        default_factory=lambda: _get_reproducibility_config().get('random_seed', 42)
    )


def get_random_seed() -> int:
    """Current project seed (YAML default or REPRODUCIBILITY_RANDOM_SEED)."""
    return ReproducibilityConfig().random_seed
