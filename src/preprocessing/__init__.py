"""Preprocessing modules for plot synopses

Pipeline Flow:
    1. Build     → CorpusBuilder → Corpus
    2. Normalize → TextNormalizer → normalized Corpus + NormalizationReport
    3. Filter    → EmptyDocumentFilter → FilterResult

Quick Start:
    >>> from src.preprocessing import CorpusBuilder, TextNormalizer, EmptyDocumentFilter
    >>> corpus = CorpusBuilder().build(["The Hero ran quickly.", "The, the; the."])
    >>> normalized, report = TextNormalizer().normalize_corpus(corpus)
    >>> result = EmptyDocumentFilter().filter(normalized)
    >>> result.source_indices
    [0]
"""

from .corpus import CorpusBuilder, EmptyDocumentFilter
from .normalizer import TextNormalizer, load_stopwords
from .models import Document, Corpus, NormalizationReport, FilterResult
from .constants import NormalizationStage, STAGE_ORDER

__all__ = [
    # Builder / filter
    'CorpusBuilder',
    'EmptyDocumentFilter',
    # Normalizer
    'TextNormalizer',
    'load_stopwords',
    # Models
    'Document',
    'Corpus',
    'NormalizationReport',
    'FilterResult',
    # Constants
    'NormalizationStage',
    'STAGE_ORDER',
]
