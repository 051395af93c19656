"""
Topic Modeling Schemas

Pydantic models for the document-term matrix, fitted LDA models and
topic-count metrics.
"""

from typing import List, Optional, Tuple

import numpy as np
from gensim import corpora, matutils
from gensim.models import LdaModel
from pydantic import BaseModel, ConfigDict, Field, field_validator
from scipy import sparse


class TermFrequencyMatrix(BaseModel):
    """
    Sparse document x term count matrix.

    Rows follow the filtered corpus order; ``source_indices[row]`` is the
    original input position of that row. Columns are gensim Dictionary ids,
    so ``vocabulary[term_id]`` is the term of column ``term_id``.

    Attributes:
        dictionary: gensim Dictionary (term <-> id mapping)
        bow: Bag-of-words rows as (term_id, count) pairs
        texts: Tokenized documents the matrix was built from
        source_indices: Row -> original document index
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    dictionary: corpora.Dictionary
    bow: List[List[Tuple[int, int]]]
    texts: List[List[str]]
    source_indices: List[int]

    @field_validator('source_indices')
    @classmethod
    def validate_source_indices(cls, v: List[int]) -> List[int]:
        if any(b <= a for a, b in zip(v, v[1:])):
            raise ValueError("source_indices must be strictly increasing")
        return v

    @property
    def num_documents(self) -> int:
        return len(self.bow)

    @property
    def num_terms(self) -> int:
        return len(self.dictionary)

    @property
    def vocabulary(self) -> List[str]:
        """Terms ordered by column id."""
        return [self.dictionary[term_id] for term_id in range(self.num_terms)]

    def to_sparse(self) -> sparse.csr_matrix:
        """Document x term CSR matrix of integer counts."""
        csc = matutils.corpus2csc(
            self.bow,
            num_terms=self.num_terms,
            num_docs=self.num_documents,
            dtype=np.int64,
        )
        return csc.T.tocsr()

    def row_sums(self) -> np.ndarray:
        """Token count of every document."""
        return np.array([sum(count for _, count in row) for row in self.bow], dtype=np.int64)

    def term_frequencies(self) -> dict:
        """Corpus-wide count per term, keyed by term."""
        return {
            self.dictionary[term_id]: int(count)
            for term_id, count in sorted(self.dictionary.cfs.items())
        }


class LDAModelInfo(BaseModel):
    """
    Information about a trained LDA model.

    Attributes:
        num_topics: Number of topics
        num_documents: Number of documents in training corpus
        vocabulary_size: Size of vocabulary
        passes: Number of training passes
        iterations: Number of iterations per pass
        alpha: Document-topic density hyperparameter
        eta: Topic-word density hyperparameter
        random_state: Seed used for the fit
        log_perplexity: Per-word likelihood bound on the training corpus
        perplexity: 2 ** (-log_perplexity)
    """
    num_topics: int = Field(..., ge=2)
    num_documents: int = Field(..., ge=1)
    vocabulary_size: int = Field(..., ge=1)
    passes: int = Field(..., ge=1)
    iterations: int = Field(..., ge=1)
    alpha: str | float = Field(..., description="Alpha hyperparameter")
    eta: str | float = Field(..., description="Eta hyperparameter")
    random_state: int
    log_perplexity: Optional[float] = Field(default=None)
    perplexity: Optional[float] = Field(default=None)


class FittedTopicModel(BaseModel):
    """
    A fitted LDA model together with the matrix it was fit on.

    ``document_topics`` is inferred once at fit time (gensim's inference
    draws its starting point from the model's random state), so every
    derived gamma view of the same model is identical.

    Attributes:
        lda: gensim LdaModel
        matrix: Term-frequency matrix used for training
        document_topics: Row-normalized document x topic matrix
        info: Training metadata
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    lda: LdaModel
    matrix: TermFrequencyMatrix
    document_topics: np.ndarray
    info: LDAModelInfo

    @property
    def num_topics(self) -> int:
        return self.info.num_topics

    def topic_terms(self) -> np.ndarray:
        """Row-normalized topic x term matrix."""
        topics = self.lda.get_topics().astype(np.float64)
        return topics / topics.sum(axis=1, keepdims=True)


class TopicCountMetric(BaseModel):
    """
    One row of the topic-count metrics table.

    ``value`` is None and ``error`` is set when the candidate fit or the
    metric computation failed. Any requested count is accepted so that
    counts the trainer rejects (e.g. 0) still get a row.
    """
    num_topics: int
    metric: str
    value: Optional[float] = None
    error: Optional[str] = None
