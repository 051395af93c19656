"""
Corpus construction and empty-document filtering.

Usage:
    from src.preprocessing.corpus import CorpusBuilder, EmptyDocumentFilter

    corpus = CorpusBuilder().build(plots)
    normalized, report = TextNormalizer().normalize_corpus(corpus)
    result = EmptyDocumentFilter().filter(normalized)

    result.corpus            # surviving documents, original order
    result.source_indices    # post-filter position -> original index
"""

import logging
from typing import Sequence

from .models import Corpus, Document, FilterResult

logger = logging.getLogger(__name__)


class CorpusBuilder:
    """Wraps raw document strings into an ordered Corpus."""

    def build(self, texts: Sequence[str]) -> Corpus:
        """
        Build a corpus from raw document strings.

        Args:
            texts: Ordered raw documents (e.g. plot synopses)

        Returns:
            Corpus whose document indices are the input positions

        Raises:
            ValueError: If no documents are supplied
            TypeError: If an entry is not a string
        """
        if texts is None or len(texts) == 0:
            raise ValueError("Cannot build corpus: no documents supplied")

        documents = []
        for index, text in enumerate(texts):
            if not isinstance(text, str):
                raise TypeError(
                    f"Document at index {index} is {type(text).__name__}, expected str"
                )
            documents.append(Document(index=index, text=text))

        logger.info(f"Built corpus with {len(documents)} documents")
        return Corpus(documents=tuple(documents))


class EmptyDocumentFilter:
    """Drops documents whose normalized text is empty, keeping order."""

    def filter(self, corpus: Corpus) -> FilterResult:
        """
        Remove empty documents.

        Args:
            corpus: Normalized corpus

        Returns:
            FilterResult with the compacted corpus and the removed indices
        """
        kept = []
        removed = []
        for doc in corpus:
            if doc.is_empty:
                removed.append(doc.index)
            else:
                kept.append(doc)

        if removed:
            logger.info(
                f"Removed {len(removed)} empty documents "
                f"({len(kept)} of {len(corpus)} remain)"
            )
            logger.debug(f"Removed document indices: {removed}")

        return FilterResult(
            corpus=Corpus(documents=tuple(kept)),
            removed_indices=tuple(removed),
        )
