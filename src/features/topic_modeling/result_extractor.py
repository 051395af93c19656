"""
Result tables derived from a fitted topic model.

All tables are long-format pandas DataFrames:

- beta:       topic, term, beta
- gamma:      document, source_index, topic, gamma
- top terms:  topic, rank, term, beta

``document`` is the row position in the filtered corpus and
``source_index`` the position in the original input collection.

Usage:
    from src.features.topic_modeling import ResultExtractor

    extractor = ResultExtractor(model)
    extractor.top_terms(10)
    extractor.gamma_table()
    extractor.beta_table()
"""

import logging

import numpy as np
import pandas as pd

from .constants import (
    BETA_COLUMNS,
    DEFAULT_NUM_TOP_TERMS,
    DOMINANT_TOPIC_COLUMNS,
    GAMMA_COLUMNS,
    TOP_TERMS_COLUMNS,
)
from .schemas import FittedTopicModel

logger = logging.getLogger(__name__)


class ResultExtractor:
    """
    Read-only views over a FittedTopicModel.

    Every method derives its table from the model's stored distributions,
    so repeated calls return equal frames.
    """

    def __init__(self, model: FittedTopicModel):
        self.model = model
        self.vocabulary = model.matrix.vocabulary

    def beta_table(self) -> pd.DataFrame:
        """Per-topic term probabilities, one row per (topic, term)."""
        beta = self.model.topic_terms()
        num_topics, num_terms = beta.shape
        return pd.DataFrame(
            {
                "topic": np.repeat(np.arange(num_topics), num_terms),
                "term": self.vocabulary * num_topics,
                "beta": beta.ravel(),
            },
            columns=BETA_COLUMNS,
        )

    def gamma_table(self) -> pd.DataFrame:
        """Per-document topic probabilities, one row per (document, topic)."""
        gamma = self.model.document_topics
        num_documents, num_topics = gamma.shape
        source_indices = np.asarray(self.model.matrix.source_indices)
        return pd.DataFrame(
            {
                "document": np.repeat(np.arange(num_documents), num_topics),
                "source_index": np.repeat(source_indices, num_topics),
                "topic": np.tile(np.arange(num_topics), num_documents),
                "gamma": gamma.ravel(),
            },
            columns=GAMMA_COLUMNS,
        )

    def top_terms(self, n: int = DEFAULT_NUM_TOP_TERMS) -> pd.DataFrame:
        """
        The n highest-beta terms of every topic.

        Ordered by descending beta; exact ties are broken by ascending term.

        Args:
            n: Terms per topic (capped at the vocabulary size)

        Raises:
            ValueError: If n < 1
        """
        if n < 1:
            raise ValueError(f"n must be >= 1, got {n}")

        beta = self.model.topic_terms()
        rows = []
        for topic_id, weights in enumerate(beta):
            order = sorted(
                range(len(weights)),
                key=lambda term_id: (-weights[term_id], self.vocabulary[term_id]),
            )[:n]
            for rank, term_id in enumerate(order, 1):
                rows.append((topic_id, rank, self.vocabulary[term_id], float(weights[term_id])))

        return pd.DataFrame(rows, columns=TOP_TERMS_COLUMNS)

    def dominant_topics(self) -> pd.DataFrame:
        """Most probable topic per document (lowest topic id on ties)."""
        gamma = self.model.document_topics
        dominant = gamma.argmax(axis=1)
        return pd.DataFrame(
            {
                "document": np.arange(gamma.shape[0]),
                "source_index": self.model.matrix.source_indices,
                "topic": dominant,
                "gamma": gamma[np.arange(gamma.shape[0]), dominant],
            },
            columns=DOMINANT_TOPIC_COLUMNS,
        )


def top_terms(model: FittedTopicModel, n: int = DEFAULT_NUM_TOP_TERMS) -> pd.DataFrame:
    """Top-Terms table for all topics."""
    return ResultExtractor(model).top_terms(n)


def gamma_table(model: FittedTopicModel) -> pd.DataFrame:
    """Document x topic probability table."""
    return ResultExtractor(model).gamma_table()


def beta_table(model: FittedTopicModel) -> pd.DataFrame:
    """Topic x term probability table."""
    return ResultExtractor(model).beta_table()
