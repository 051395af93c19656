"""
LDA Model Training

This module fits gensim LDA topic models on a term-frequency matrix built
from normalized plot synopses.

Usage:
    from src.features.topic_modeling.lda_trainer import LDATrainer

    trainer = LDATrainer(num_topics=10, random_state=42)
    model = trainer.fit(matrix)
    trainer.print_topics(model, num_words=10)
"""

import logging
from typing import Optional

import numpy as np
from gensim.models import LdaModel

from src.config import settings
from .constants import MIN_NUM_TOPICS, RECOMMENDED_MIN_CORPUS_SIZE
from .schemas import FittedTopicModel, LDAModelInfo, TermFrequencyMatrix

logger = logging.getLogger(__name__)


class TopicModelConfigurationError(ValueError):
    """Requested topic count cannot be fit on the given matrix."""


class LDATrainer:
    """
    LDA Topic Model Trainer for plot synopses.

    This class handles:
    1. Validating the topic count against the vocabulary
    2. Training the gensim LdaModel with a fixed seed
    3. Inferring the per-document topic distribution once
    4. Evaluating the perplexity bound

    Usage:
        trainer = LDATrainer(num_topics=10)
        model = trainer.fit(matrix)
    """

    def __init__(
        self,
        num_topics: Optional[int] = None,
        passes: Optional[int] = None,
        iterations: Optional[int] = None,
        random_state: Optional[int] = None,
        alpha: Optional[str | float] = None,
        eta: Optional[str | float] = None,
    ):
        """
        Initialize LDA trainer. Unset parameters come from settings.

        Args:
            num_topics: Number of topics to discover
            passes: Number of training passes through corpus
            iterations: Number of iterations during training
            random_state: Random seed for reproducibility
            alpha: Document-topic prior ('symmetric', 'asymmetric', 'auto' or float)
            eta: Topic-word prior ('symmetric', 'auto' or float)
        """
        model_cfg = settings.topic_modeling.model

        self.num_topics = num_topics if num_topics is not None else model_cfg.num_topics
        self.passes = passes if passes is not None else model_cfg.passes
        self.iterations = iterations if iterations is not None else model_cfg.iterations
        self.random_state = random_state if random_state is not None else model_cfg.random_state
        self.alpha = alpha if alpha is not None else model_cfg.alpha
        self.eta = eta if eta is not None else model_cfg.eta

        logger.info(
            f"Initialized LDATrainer with {self.num_topics} topics, "
            f"{self.passes} passes, {self.iterations} iterations"
        )

    def fit(self, matrix: TermFrequencyMatrix) -> FittedTopicModel:
        """
        Train an LDA model on the term-frequency matrix.

        Args:
            matrix: Document-term matrix (no empty rows)

        Returns:
            FittedTopicModel

        Raises:
            ValueError: If the matrix has no rows
            TopicModelConfigurationError: If num_topics < 2 or exceeds the vocabulary size
        """
        self._validate(matrix)

        if matrix.num_documents < RECOMMENDED_MIN_CORPUS_SIZE:
            logger.warning(
                f"Corpus size ({matrix.num_documents}) is below recommended minimum "
                f"({RECOMMENDED_MIN_CORPUS_SIZE}). Results may be unreliable."
            )

        logger.info(
            f"Training LDA with {self.num_topics} topics on "
            f"{matrix.num_documents} documents (seed={self.random_state})..."
        )
        lda = LdaModel(
            corpus=matrix.bow,
            id2word=matrix.dictionary,
            num_topics=self.num_topics,
            random_state=self.random_state,
            passes=self.passes,
            iterations=self.iterations,
            alpha=self.alpha,
            eta=self.eta,
            eval_every=None,
        )
        logger.info("LDA training complete!")

        gamma, _ = lda.inference(matrix.bow)
        gamma = gamma.astype(np.float64)
        document_topics = gamma / gamma.sum(axis=1, keepdims=True)

        log_perplexity = float(lda.log_perplexity(matrix.bow))
        perplexity = float(np.exp2(-log_perplexity))
        logger.info(f"Model perplexity: {perplexity:.4f}")

        info = LDAModelInfo(
            num_topics=self.num_topics,
            num_documents=matrix.num_documents,
            vocabulary_size=matrix.num_terms,
            passes=self.passes,
            iterations=self.iterations,
            alpha=self.alpha,
            eta=self.eta,
            random_state=self.random_state,
            log_perplexity=log_perplexity,
            perplexity=perplexity,
        )

        return FittedTopicModel(
            lda=lda,
            matrix=matrix,
            document_topics=document_topics,
            info=info,
        )

    def print_topics(self, model: FittedTopicModel, num_words: int = 10) -> None:
        """
        Print human-readable topic descriptions.

        Args:
            model: Fitted model
            num_words: Number of top words to show per topic
        """
        print(f"\nDiscovered Topics (n={model.num_topics}):")
        print("=" * 80)

        for topic_id in range(model.num_topics):
            top_words = model.lda.show_topic(topic_id, topn=num_words)
            words_str = ", ".join([f"{word}({weight:.3f})" for word, weight in top_words])

            print(f"\nTopic {topic_id}:")
            print(f"  {words_str}")

        print("\n" + "=" * 80)

    def _validate(self, matrix: TermFrequencyMatrix) -> None:
        if matrix.num_documents == 0:
            raise ValueError("Cannot fit LDA: term-frequency matrix has zero rows")

        if self.num_topics < MIN_NUM_TOPICS:
            raise TopicModelConfigurationError(
                f"num_topics={self.num_topics} is below the minimum of {MIN_NUM_TOPICS}"
            )

        if self.num_topics > matrix.num_terms:
            raise TopicModelConfigurationError(
                f"num_topics={self.num_topics} exceeds vocabulary size ({matrix.num_terms})"
            )
