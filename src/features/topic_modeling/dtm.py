"""
Term-frequency matrix construction.

Usage:
    from src.features.topic_modeling.dtm import TermFrequencyMatrixBuilder

    matrix = TermFrequencyMatrixBuilder().build(filter_result.corpus)
    X = matrix.to_sparse()          # scipy CSR, documents x terms
    matrix.vocabulary[term_id]      # column label
"""

import logging

from gensim import corpora

from src.preprocessing.models import Corpus
from .schemas import TermFrequencyMatrix

logger = logging.getLogger(__name__)


class TermFrequencyMatrixBuilder:
    """
    Builds a bag-of-words matrix over a filtered, normalized corpus.

    The vocabulary is every distinct whitespace token of the corpus; no
    frequency pruning is applied. gensim assigns ids in first-seen document
    order (sorted within a document), so identical input gives identical ids.
    """

    def build(self, corpus: Corpus) -> TermFrequencyMatrix:
        """
        Build the document-term matrix.

        Args:
            corpus: Filtered, normalized corpus

        Returns:
            TermFrequencyMatrix with one row per document

        Raises:
            ValueError: If the corpus is empty or contains an empty document
        """
        if len(corpus) == 0:
            raise ValueError("Cannot build term-frequency matrix: corpus has no documents")

        texts = corpus.get_tokens()
        for doc, tokens in zip(corpus, texts):
            if not tokens:
                raise ValueError(
                    f"Cannot build term-frequency matrix: document {doc.index} is empty. "
                    "Run EmptyDocumentFilter first."
                )

        logger.info("Building vocabulary...")
        dictionary = corpora.Dictionary(texts)
        logger.info(f"Vocabulary size: {len(dictionary)}")

        bow = [dictionary.doc2bow(tokens) for tokens in texts]
        logger.info(f"Created bag-of-words matrix: {len(bow)} x {len(dictionary)}")

        return TermFrequencyMatrix(
            dictionary=dictionary,
            bow=bow,
            texts=texts,
            source_indices=corpus.source_indices,
        )
