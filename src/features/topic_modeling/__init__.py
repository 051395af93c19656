"""
Topic Modeling Module

This package fits LDA topic models on normalized movie plot synopses and
derives the tables used for reporting.

Key Components:
- TermFrequencyMatrixBuilder: Document-term count matrix (gensim Dictionary)
- LDATrainer: gensim LdaModel fitting with a fixed seed
- TopicCountSelector: Metrics table over candidate topic counts
- ResultExtractor: Top terms, gamma and beta tables
- TopicModelingPipeline: End-to-end orchestration

Workflow:
1. Inspect candidate topic counts:
    ```python
    from src.features.topic_modeling import TopicModelingPipeline

    pipeline = TopicModelingPipeline()
    prepared = pipeline.prepare(plots)
    table = pipeline.select_topic_count(prepared.matrix, candidates=range(2, 21, 2))
    print(table.pivot(index="num_topics", columns="metric", values="value"))
    ```

2. Fit the chosen count and extract tables:
    ```python
    result = pipeline.run(plots, num_topics=10)

    result.top_terms   # topic, rank, term, beta
    result.gamma       # document, source_index, topic, gamma
    result.beta        # topic, term, beta
    ```
"""

from .dtm import TermFrequencyMatrixBuilder
from .lda_trainer import LDATrainer, TopicModelConfigurationError
from .topic_count_selector import TopicCountSelector, normalize_metrics, recommend
from .result_extractor import ResultExtractor, top_terms, gamma_table, beta_table
from .pipeline import TopicModelingPipeline, TopicModelingResult, PreparedCorpus
from .schemas import (
    TermFrequencyMatrix,
    FittedTopicModel,
    LDAModelInfo,
    TopicCountMetric,
)
from .constants import (
    TOPIC_MODELING_MODULE_VERSION,
    DEFAULT_NUM_TOPICS,
    DEFAULT_NUM_TOP_TERMS,
    DEFAULT_CANDIDATE_TOPICS,
    METRIC_DIRECTIONS,
)

__all__ = [
    # Main classes
    "TermFrequencyMatrixBuilder",
    "LDATrainer",
    "TopicModelConfigurationError",
    "TopicCountSelector",
    "ResultExtractor",
    "TopicModelingPipeline",
    # Functions
    "top_terms",
    "gamma_table",
    "beta_table",
    "normalize_metrics",
    "recommend",
    # Schemas
    "TermFrequencyMatrix",
    "FittedTopicModel",
    "LDAModelInfo",
    "TopicCountMetric",
    "TopicModelingResult",
    "PreparedCorpus",
    # Constants
    "TOPIC_MODELING_MODULE_VERSION",
    "DEFAULT_NUM_TOPICS",
    "DEFAULT_NUM_TOP_TERMS",
    "DEFAULT_CANDIDATE_TOPICS",
    "METRIC_DIRECTIONS",
]

__version__ = TOPIC_MODELING_MODULE_VERSION
