"""
Topic-count quality metrics.

Each metric takes a fitted model and returns a scalar. Separation metrics
(Cao & Juan 2009, Arun et al. 2010) are minimized; Deveaud et al. 2014 and
topic coherence are maximized (see ``METRIC_DIRECTIONS``).
"""

from itertools import combinations
from typing import Callable, Dict

import numpy as np
from gensim.models import CoherenceModel

from .constants import (
    DEFAULT_COHERENCE_METRIC,
    METRIC_ARUN_2010,
    METRIC_CAO_JUAN_2009,
    METRIC_COHERENCE,
    METRIC_DEVEAUD_2014,
)
from .schemas import FittedTopicModel


def cao_juan_2009(model: FittedTopicModel) -> float:
    """Mean pairwise cosine similarity between topic-term distributions."""
    beta = model.topic_terms()
    norms = np.linalg.norm(beta, axis=1)
    similarities = [
        float(beta[i] @ beta[j] / (norms[i] * norms[j]))
        for i, j in combinations(range(beta.shape[0]), 2)
    ]
    return float(np.mean(similarities))


def arun_2010(model: FittedTopicModel) -> float:
    """
    Symmetric KL divergence between the singular values of the topic-term
    matrix and the document-length weighted topic mass.
    """
    beta = model.topic_terms()
    singular_values = np.linalg.svd(beta, compute_uv=False)

    lengths = model.matrix.row_sums().astype(float)
    topic_mass = lengths @ model.document_topics
    topic_mass = topic_mass / np.abs(lengths).max()

    cm1 = singular_values[: model.num_topics]
    cm2 = topic_mass[: len(cm1)]
    return float(np.sum(cm1 * np.log(cm1 / cm2)) + np.sum(cm2 * np.log(cm2 / cm1)))


def deveaud_2014(model: FittedTopicModel) -> float:
    """
    Average pairwise symmetric Kullback-Leibler divergence between topic-term
    distributions: sum over topic pairs of 0.5 * (KL(x||y) + KL(y||x)),
    divided by K * (K - 1).
    """
    beta = model.topic_terms()
    if np.any(beta == 0):
        beta = beta + np.finfo(float).tiny

    num_topics = beta.shape[0]
    divergence = 0.0
    for i, j in combinations(range(num_topics), 2):
        x, y = beta[i], beta[j]
        divergence += 0.5 * np.sum(x * np.log(x / y)) + 0.5 * np.sum(y * np.log(y / x))
    return float(divergence / (num_topics * (num_topics - 1)))


def topic_coherence(model: FittedTopicModel, coherence: str = DEFAULT_COHERENCE_METRIC) -> float:
    """gensim topic coherence over the training documents."""
    coherence_model = CoherenceModel(
        model=model.lda,
        corpus=model.matrix.bow,
        texts=model.matrix.texts,
        dictionary=model.matrix.dictionary,
        coherence=coherence,
    )
    return float(coherence_model.get_coherence())


def get_metric_functions(coherence: str = DEFAULT_COHERENCE_METRIC) -> Dict[str, Callable[[FittedTopicModel], float]]:
    """Metric name -> function, with the coherence measure bound."""
    return {
        METRIC_CAO_JUAN_2009: cao_juan_2009,
        METRIC_ARUN_2010: arun_2010,
        METRIC_DEVEAUD_2014: deveaud_2014,
        METRIC_COHERENCE: lambda model: topic_coherence(model, coherence=coherence),
    }
