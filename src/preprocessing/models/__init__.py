"""
Pydantic data models for the text preprocessing pipeline.

- corpus: Document, Corpus, NormalizationReport, FilterResult
"""
from .corpus import Document, Corpus, NormalizationReport, FilterResult

__all__ = [
    'Document',
    'Corpus',
    'NormalizationReport',
    'FilterResult',
]
