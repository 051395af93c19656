"""
Topic Modeling Pipeline for Plot Synopses

Orchestrates the complete flow:
1. Build     - Wrap raw strings into an ordered corpus
2. Normalize - Lowercase, strip punctuation/digits, drop stopwords, stem
3. Filter    - Remove documents left empty, keep the index mapping
4. Matrix    - Build the document-term frequency matrix
5. Select    - (optional) Metrics table over candidate topic counts
6. Fit       - LDA with the injected topic count
7. Extract   - Top terms, gamma and beta tables

The topic count is always supplied by the caller (or settings); the
selection table is produced for inspection and never chooses K itself.
"""

import logging
from typing import Optional, Sequence

import pandas as pd
from pydantic import BaseModel, ConfigDict

from src.config import settings
from src.preprocessing import (
    CorpusBuilder,
    EmptyDocumentFilter,
    FilterResult,
    NormalizationReport,
    TextNormalizer,
)
from .dtm import TermFrequencyMatrixBuilder
from .lda_trainer import LDATrainer
from .result_extractor import ResultExtractor
from .schemas import FittedTopicModel, TermFrequencyMatrix
from .topic_count_selector import TopicCountSelector

logger = logging.getLogger(__name__)


class PreparedCorpus(BaseModel):
    """
    Normalized, filtered corpus and its document-term matrix.

    Attributes:
        report: Empty-document counts after each normalization stage
        filter_result: Surviving documents and removed indices
        matrix: Document-term frequency matrix over the survivors
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    report: NormalizationReport
    filter_result: FilterResult
    matrix: TermFrequencyMatrix


class TopicModelingResult(BaseModel):
    """
    Complete output of a pipeline run.

    Attributes:
        prepared: Corpus diagnostics and the matrix
        model: Fitted LDA model
        top_terms: topic, rank, term, beta
        gamma: document, source_index, topic, gamma
        beta: topic, term, beta
        selection: Topic-count metrics table, when requested
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    prepared: PreparedCorpus
    model: FittedTopicModel
    top_terms: pd.DataFrame
    gamma: pd.DataFrame
    beta: pd.DataFrame
    selection: Optional[pd.DataFrame] = None


class TopicModelingPipeline:
    """
    Complete topic modeling pipeline for plot synopses

    Flow: Build → Normalize → Filter → Matrix → (Select) → Fit → Extract

    Example:
        >>> pipeline = TopicModelingPipeline()
        >>> result = pipeline.run(plots, num_topics=10)
        >>> result.top_terms[result.top_terms.topic == 0]
        >>> result.prepared.report.empty_after_stage
    """

    def __init__(
        self,
        normalizer: Optional[TextNormalizer] = None,
        num_topics: Optional[int] = None,
        random_state: Optional[int] = None,
        num_top_terms: Optional[int] = None,
        passes: Optional[int] = None,
        iterations: Optional[int] = None,
    ):
        """
        Initialize the pipeline. Unset parameters come from settings.

        Args:
            normalizer: Text normalizer (default: settings-driven TextNormalizer)
            num_topics: Topic count for the final fit
            random_state: Seed for the final fit and the selection fits
            num_top_terms: Terms per topic in the top-terms table
            passes: Training passes per fit
            iterations: Iterations per pass
        """
        tm = settings.topic_modeling

        self.normalizer = normalizer or TextNormalizer()
        self.num_topics = num_topics if num_topics is not None else tm.model.num_topics
        self.random_state = random_state if random_state is not None else tm.model.random_state
        self.num_top_terms = num_top_terms if num_top_terms is not None else tm.output.num_top_terms
        self.passes = passes
        self.iterations = iterations

        self.builder = CorpusBuilder()
        self.empty_filter = EmptyDocumentFilter()
        self.matrix_builder = TermFrequencyMatrixBuilder()

    def prepare(self, texts: Sequence[str]) -> PreparedCorpus:
        """
        Run steps 1-4: build, normalize, filter and count.

        Args:
            texts: Raw documents in input order

        Returns:
            PreparedCorpus

        Raises:
            ValueError: If no documents are supplied, or none survive normalization
        """
        corpus = self.builder.build(texts)
        normalized, report = self.normalizer.normalize_corpus(corpus)
        filter_result = self.empty_filter.filter(normalized)

        if len(filter_result.corpus) == 0:
            raise ValueError(
                f"All {len(corpus)} documents are empty after normalization "
                f"(empty counts per stage: {report.empty_after_stage})"
            )

        matrix = self.matrix_builder.build(filter_result.corpus)
        return PreparedCorpus(report=report, filter_result=filter_result, matrix=matrix)

    def select_topic_count(
        self,
        matrix: TermFrequencyMatrix,
        candidates: Optional[Sequence[int]] = None,
        max_workers: Optional[int] = None,
    ) -> pd.DataFrame:
        """
        Produce the topic-count metrics table (step 5).

        Args:
            matrix: Document-term matrix
            candidates: Topic counts to evaluate (default: settings)
            max_workers: Processes for concurrent fits

        Returns:
            Long-format metrics DataFrame
        """
        selector = TopicCountSelector(
            candidates=candidates,
            random_state=self.random_state,
            passes=self.passes,
            iterations=self.iterations,
            max_workers=max_workers,
        )
        return selector.evaluate(matrix)

    def fit(self, matrix: TermFrequencyMatrix, num_topics: Optional[int] = None) -> FittedTopicModel:
        """Fit the final LDA model (step 6)."""
        trainer = LDATrainer(
            num_topics=num_topics if num_topics is not None else self.num_topics,
            random_state=self.random_state,
            passes=self.passes,
            iterations=self.iterations,
        )
        return trainer.fit(matrix)

    def run(
        self,
        texts: Sequence[str],
        num_topics: Optional[int] = None,
        candidates: Optional[Sequence[int]] = None,
        evaluate_topic_counts: bool = False,
    ) -> TopicModelingResult:
        """
        Run the full pipeline.

        Args:
            texts: Raw documents in input order
            num_topics: Topic count for the final fit (default: pipeline setting)
            candidates: Topic counts for the metrics table
            evaluate_topic_counts: Whether to compute the metrics table

        Returns:
            TopicModelingResult
        """
        prepared = self.prepare(texts)
        logger.info(
            f"Prepared corpus: {prepared.matrix.num_documents} documents, "
            f"{prepared.matrix.num_terms} terms, "
            f"{prepared.filter_result.num_removed} removed as empty"
        )

        selection = None
        if evaluate_topic_counts:
            selection = self.select_topic_count(prepared.matrix, candidates=candidates)

        model = self.fit(prepared.matrix, num_topics=num_topics)

        extractor = ResultExtractor(model)
        return TopicModelingResult(
            prepared=prepared,
            model=model,
            top_terms=extractor.top_terms(self.num_top_terms),
            gamma=extractor.gamma_table(),
            beta=extractor.beta_table(),
            selection=selection,
        )
