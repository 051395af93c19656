"""
Topic-count selection metrics.

Fits one LDA model per candidate topic count (same seed for every
candidate) and tabulates separation and coherence metrics. Choosing the
final count is left to the caller, who inspects the table or passes it to
``recommend``.

Usage:
    from src.features.topic_modeling import TopicCountSelector

    selector = TopicCountSelector(candidates=[2, 4, 6, 8, 10], random_state=42)
    table = selector.evaluate(matrix)
    table.pivot(index="num_topics", columns="metric", values="value")
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from src.config import settings
from src.utils.parallel import ParallelProcessor
from .constants import (
    DEFAULT_METRICS,
    METRIC_DIRECTIONS,
    METRICS_COLUMNS,
)
from .lda_trainer import LDATrainer
from .metrics import get_metric_functions
from .schemas import TermFrequencyMatrix, TopicCountMetric

logger = logging.getLogger(__name__)


def _evaluate_candidate(args: Tuple) -> Dict[str, Any]:
    """
    Fit one candidate and compute its metrics.

    Module-level so it can run in a worker process. Failures are captured
    per candidate (fit) and per metric (computation).
    """
    matrix, num_topics, trainer_kwargs, metric_names, coherence = args

    try:
        model = LDATrainer(num_topics=num_topics, **trainer_kwargs).fit(matrix)
    except Exception as e:
        return {
            'status': 'error',
            'num_topics': num_topics,
            'metrics': {},
            'error': f"{type(e).__name__}: {e}",
        }

    functions = get_metric_functions(coherence=coherence)
    metrics: Dict[str, Dict[str, Any]] = {}
    for name in metric_names:
        try:
            metrics[name] = {'value': functions[name](model), 'error': None}
        except Exception as e:
            metrics[name] = {'value': None, 'error': f"{type(e).__name__}: {e}"}

    return {
        'status': 'success',
        'num_topics': num_topics,
        'metrics': metrics,
        'error': None,
    }


class TopicCountSelector:
    """
    Produces the (num_topics, metric, value) table for candidate topic counts.

    Every candidate is fit with the same ``random_state`` so rows are
    comparable and reproducible. A candidate that fails is reported with
    ``value=NaN`` and an ``error`` message; the remaining candidates still run.
    """

    def __init__(
        self,
        candidates: Optional[Sequence[int]] = None,
        random_state: Optional[int] = None,
        passes: Optional[int] = None,
        iterations: Optional[int] = None,
        alpha: Optional[str | float] = None,
        eta: Optional[str | float] = None,
        metrics: Optional[Sequence[str]] = None,
        coherence: Optional[str] = None,
        max_workers: Optional[int] = None,
    ):
        """
        Initialize selector. Unset parameters come from settings.

        Args:
            candidates: Topic counts to evaluate (default: selection range from settings)
            random_state: Seed shared by every candidate fit
            passes: Training passes per fit
            iterations: Iterations per pass
            alpha: Document-topic prior
            eta: Topic-word prior
            metrics: Metric names to compute (default: all)
            coherence: gensim coherence measure for the coherence metric
            max_workers: Processes for concurrent fits (1 = sequential)

        Raises:
            ValueError: If no candidates are given or a metric name is unknown
        """
        selection = settings.topic_modeling.selection
        model_cfg = settings.topic_modeling.model

        self.candidates = sorted(set(candidates if candidates is not None else selection.candidates))
        if not self.candidates:
            raise ValueError("TopicCountSelector needs at least one candidate topic count")

        self.metric_names = list(metrics) if metrics is not None else list(DEFAULT_METRICS)
        unknown = [name for name in self.metric_names if name not in METRIC_DIRECTIONS]
        if unknown:
            raise ValueError(
                f"Unknown metrics {unknown}. Expected any of {list(METRIC_DIRECTIONS)}"
            )

        self.coherence = coherence or selection.coherence_metric
        self.max_workers = max_workers if max_workers is not None else selection.max_workers
        self.trainer_kwargs = {
            'random_state': random_state if random_state is not None else model_cfg.random_state,
            'passes': passes if passes is not None else model_cfg.passes,
            'iterations': iterations if iterations is not None else model_cfg.iterations,
            'alpha': alpha if alpha is not None else model_cfg.alpha,
            'eta': eta if eta is not None else model_cfg.eta,
        }

    def evaluate(self, matrix: TermFrequencyMatrix) -> pd.DataFrame:
        """
        Fit every candidate and compute the metrics table.

        Args:
            matrix: Document-term matrix shared (read-only) by all fits

        Returns:
            Long-format DataFrame with columns num_topics, metric, value, error,
            sorted by num_topics then metric order
        """
        logger.info(
            f"Evaluating topic counts {self.candidates} "
            f"(seed={self.trainer_kwargs['random_state']}, workers={self.max_workers})"
        )

        items = [
            (matrix, num_topics, self.trainer_kwargs, self.metric_names, self.coherence)
            for num_topics in self.candidates
        ]
        processor = ParallelProcessor(max_workers=self.max_workers)
        results = processor.process_batch(items, _evaluate_candidate)

        rows: List[TopicCountMetric] = []
        for num_topics, result in zip(self.candidates, results):
            rows.extend(self._result_rows(num_topics, result))

        return pd.DataFrame(
            [row.model_dump() for row in rows],
            columns=METRICS_COLUMNS,
        ).astype({'value': float})

    def _result_rows(self, num_topics: int, result: Dict[str, Any]) -> List[TopicCountMetric]:
        if result.get('status') != 'success':
            logger.error(f"Topic count {num_topics} failed: {result.get('error')}")
            return [
                TopicCountMetric(num_topics=num_topics, metric=name, error=result.get('error'))
                for name in self.metric_names
            ]

        rows = []
        for name in self.metric_names:
            entry = result['metrics'][name]
            if entry['error']:
                logger.error(f"Metric {name} failed for topic count {num_topics}: {entry['error']}")
            rows.append(
                TopicCountMetric(
                    num_topics=num_topics,
                    metric=name,
                    value=entry['value'],
                    error=entry['error'],
                )
            )
        logger.info(f"Evaluated topic count {num_topics}")
        return rows


def normalize_metrics(table: pd.DataFrame) -> pd.DataFrame:
    """
    Min-max scale each metric to [0, 1] across candidates.

    Returns a wide DataFrame indexed by num_topics with one column per metric.
    Failed entries stay NaN; a constant metric scales to 0.
    """
    wide = table.pivot(index="num_topics", columns="metric", values="value")
    minimum = wide.min()
    spread = wide.max() - minimum
    return (wide - minimum) / spread.where(spread > 0, 1.0)


def recommend(table: pd.DataFrame) -> int:
    """
    Suggest a topic count from a metrics table.

    Each metric is min-max scaled and flipped where lower is better; the
    candidate with the highest mean score wins (smallest count on ties).

    Raises:
        ValueError: If no candidate has any metric value
    """
    scaled = normalize_metrics(table)
    for metric in scaled.columns:
        if METRIC_DIRECTIONS.get(metric) == "minimize":
            scaled[metric] = 1.0 - scaled[metric]

    scores = scaled.mean(axis=1, skipna=True).dropna()
    if scores.empty:
        raise ValueError("No topic count has a usable metric value")

    best = scores[scores == scores.max()].index.min()
    return int(best)
