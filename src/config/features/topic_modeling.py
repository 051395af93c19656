"""Topic modeling configuration."""

from typing import List, Literal, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.config._loader import load_yaml_section
from src.config.reproducibility import get_random_seed


def _get_config() -> dict:
    return load_yaml_section("features/topic_modeling.yaml", "topic_modeling")


def _default_random_state() -> int:
    seed = _get_config().get('model', {}).get('random_state')
    return get_random_seed() if seed is None else seed


class TopicModelingModelConfig(BaseSettings):
    """LDA model settings for the final fit."""
    model_config = SettingsConfigDict(
        env_prefix='TOPIC_MODELING_MODEL_',
        case_sensitive=False
    )

    num_topics: int = Field(
        default_factory=lambda: _get_config().get('model', {}).get('num_topics', 10)
    )
    passes: int = Field(
        default_factory=lambda: _get_config().get('model', {}).get('passes', 10)
    )
    iterations: int = Field(
        default_factory=lambda: _get_config().get('model', {}).get('iterations', 100)
    )
    random_state: int = Field(
        default_factory=_default_random_state
    )
    alpha: Union[str, float] = Field(
        default_factory=lambda: _get_config().get('model', {}).get('alpha', 'symmetric')
    )
    eta: Union[str, float] = Field(
        default_factory=lambda: _get_config().get('model', {}).get('eta', 'symmetric')
    )


class TopicModelingPreprocessingConfig(BaseSettings):
    """Text normalization settings for topic modeling."""
    model_config = SettingsConfigDict(
        env_prefix='TOPIC_MODELING_PREP_',
        case_sensitive=False
    )

    stopword_source: Literal["gensim", "nltk"] = Field(
        default_factory=lambda: _get_config().get('preprocessing', {}).get('stopword_source', 'gensim')
    )
    language: str = Field(
        default_factory=lambda: _get_config().get('preprocessing', {}).get('language', 'english')
    )
    extra_stopwords: List[str] = Field(
        default_factory=lambda: _get_config().get('preprocessing', {}).get('extra_stopwords', [])
    )


class TopicModelingSelectionConfig(BaseSettings):
    """Topic-count search settings."""
    model_config = SettingsConfigDict(
        env_prefix='TOPIC_MODELING_SELECT_',
        case_sensitive=False
    )

    min_topics: int = Field(
        default_factory=lambda: _get_config().get('selection', {}).get('min_topics', 2)
    )
    max_topics: int = Field(
        default_factory=lambda: _get_config().get('selection', {}).get('max_topics', 20)
    )
    step: int = Field(
        default_factory=lambda: _get_config().get('selection', {}).get('step', 2)
    )
    coherence_metric: Literal["u_mass", "c_v", "c_uci", "c_npmi"] = Field(
        default_factory=lambda: _get_config().get('selection', {}).get('coherence_metric', 'u_mass')
    )
    max_workers: int = Field(
        default_factory=lambda: _get_config().get('selection', {}).get('max_workers', 1)
    )

    @field_validator('step')
    @classmethod
    def validate_step(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"step must be >= 1, got {v}")
        return v

    @property
    def candidates(self) -> List[int]:
        """Candidate topic counts, inclusive of max_topics."""
        return list(range(self.min_topics, self.max_topics + 1, self.step))


class TopicModelingOutputConfig(BaseSettings):
    """Result table settings."""
    model_config = SettingsConfigDict(
        env_prefix='TOPIC_MODELING_OUT_',
        case_sensitive=False
    )

    num_top_terms: int = Field(
        default_factory=lambda: _get_config().get('output', {}).get('num_top_terms', 10)
    )


class TopicModelingConfig(BaseSettings):
    """
    Topic modeling configuration.
    Loads from configs/features/topic_modeling.yaml with environment variable overrides.
    """
    model_config = SettingsConfigDict(
        env_prefix='TOPIC_MODELING_',
        env_nested_delimiter='__',
        case_sensitive=False
    )

    model: TopicModelingModelConfig = Field(
        default_factory=TopicModelingModelConfig
    )
    preprocessing: TopicModelingPreprocessingConfig = Field(
        default_factory=TopicModelingPreprocessingConfig
    )
    selection: TopicModelingSelectionConfig = Field(
        default_factory=TopicModelingSelectionConfig
    )
    output: TopicModelingOutputConfig = Field(
        default_factory=TopicModelingOutputConfig
    )
