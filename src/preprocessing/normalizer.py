"""
Text normalization for plot synopses.

Applies five deterministic transforms in a fixed order:

1. lowercase
2. remove punctuation (typographic quotes mapped to ASCII, then every Unicode
   punctuation or symbol character)
3. remove digits (every Unicode number character)
4. remove stopwords (exact whitespace-token match)
5. stem (NLTK Porter stemmer)

Usage:
    from src.preprocessing.normalizer import TextNormalizer

    normalizer = TextNormalizer()
    normalizer.normalize("The Hero ran quickly.")   # "hero ran quickli"

    corpus, report = normalizer.normalize_corpus(corpus)
    print(report.empty_after_stage)
"""

import logging
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

import regex
from gensim.parsing.preprocessing import (
    STOPWORDS as GENSIM_STOPWORDS,
    strip_multiple_whitespaces,
    strip_numeric,
    strip_punctuation,
)
from nltk.stem import PorterStemmer

from src.config import settings
from .constants import (
    NormalizationStage,
    STOPWORD_SOURCES,
    NLTK_STOPWORDS_DOWNLOAD_HINT,
    TYPOGRAPHIC_QUOTES,
)
from .models import Corpus, Document, NormalizationReport

logger = logging.getLogger(__name__)

# gensim's filters only cover string.punctuation and [0-9]
RE_UNICODE_PUNCTUATION = regex.compile(r"[\p{P}\p{S}]+")
RE_UNICODE_NUMERIC = regex.compile(r"\p{N}+")


def load_stopwords(
    source: str = "gensim",
    language: str = "english",
    extra_stopwords: Optional[Iterable[str]] = None,
) -> FrozenSet[str]:
    """
    Build the stopword set used by the stopword stage.

    Args:
        source: "gensim" (bundled list) or "nltk" (requires the stopwords corpus)
        language: NLTK stopword language, ignored for gensim
        extra_stopwords: Additional user-provided stopwords

    Returns:
        Lowercased stopword set

    Raises:
        ValueError: If source is unknown
        LookupError: If the NLTK stopwords corpus is not downloaded
    """
    if source not in STOPWORD_SOURCES:
        raise ValueError(
            f"Unknown stopword source '{source}'. Expected one of {STOPWORD_SOURCES}"
        )

    if source == "gensim":
        words = set(GENSIM_STOPWORDS)
    else:
        from nltk.corpus import stopwords
        try:
            words = set(stopwords.words(language))
        except LookupError as e:
            raise LookupError(
                f"NLTK stopwords corpus not available. Run: {NLTK_STOPWORDS_DOWNLOAD_HINT}"
            ) from e

    if extra_stopwords:
        words.update(extra_stopwords)

    stopword_set = frozenset(word.lower() for word in words)
    logger.info(f"Loaded {len(stopword_set)} stopwords from {source}")
    return stopword_set


class TextNormalizer:
    """
    Ordered, deterministic text normalizer.

    Every stage maps a string to a string and leaves token order intact.
    Whitespace is collapsed after each stage so an empty result is ``""``.
    """

    def __init__(
        self,
        stopwords: Optional[Iterable[str]] = None,
        stopword_source: Optional[str] = None,
        language: Optional[str] = None,
        extra_stopwords: Optional[Iterable[str]] = None,
    ):
        """
        Initialize normalizer.

        Args:
            stopwords: Explicit stopword list; overrides stopword_source
            stopword_source: "gensim" or "nltk" (default from settings)
            language: Stopword language (default from settings)
            extra_stopwords: Additional stopwords (default from settings)
        """
        prep = settings.topic_modeling.preprocessing

        if stopwords is not None:
            self.stopwords = frozenset(word.lower() for word in stopwords)
            if extra_stopwords:
                self.stopwords |= frozenset(word.lower() for word in extra_stopwords)
        else:
            self.stopwords = load_stopwords(
                source=stopword_source or prep.stopword_source,
                language=language or prep.language,
                extra_stopwords=extra_stopwords if extra_stopwords is not None else prep.extra_stopwords,
            )

        self.stemmer = PorterStemmer()
        self._stem_cache: Dict[str, str] = {}

        self._stages: List[Tuple[NormalizationStage, Callable[[str], str]]] = [
            (NormalizationStage.LOWERCASE, self._lowercase),
            (NormalizationStage.REMOVE_PUNCTUATION, self._remove_punctuation),
            (NormalizationStage.REMOVE_NUMBERS, self._remove_numbers),
            (NormalizationStage.REMOVE_STOPWORDS, self._remove_stopwords),
            (NormalizationStage.STEM, self._stem),
        ]

    def normalize(self, text: str) -> str:
        """
        Run all stages over a single text.

        Args:
            text: Raw document text

        Returns:
            Whitespace-joined normalized tokens (possibly empty)
        """
        for _, transform in self._stages:
            text = transform(text)
        return text

    def normalize_corpus(self, corpus: Corpus) -> Tuple[Corpus, NormalizationReport]:
        """
        Normalize every document stage by stage.

        Each stage consumes the complete output of the previous one, and the
        number of documents that are empty after it is recorded and logged.

        Args:
            corpus: Corpus of raw documents

        Returns:
            (normalized corpus, report of empty counts per stage)
        """
        documents = list(corpus.documents)
        empty_after_stage: Dict[str, int] = {}

        for stage, transform in self._stages:
            documents = [
                Document(index=doc.index, text=transform(doc.text))
                for doc in documents
            ]
            num_empty = sum(1 for doc in documents if doc.is_empty)
            empty_after_stage[stage.value] = num_empty
            logger.info(
                f"After {stage.value}: {num_empty} of {len(documents)} documents empty"
            )

        report = NormalizationReport(
            num_documents=len(documents),
            empty_after_stage=empty_after_stage,
        )
        return Corpus(documents=tuple(documents)), report

    # ===========================
    # Stages
    # ===========================

    def _lowercase(self, text: str) -> str:
        return strip_multiple_whitespaces(text.lower()).strip()

    def _remove_punctuation(self, text: str) -> str:
        text = self._normalize_quotes(text)
        text = strip_punctuation(text)
        text = RE_UNICODE_PUNCTUATION.sub(" ", text)
        return strip_multiple_whitespaces(text).strip()

    def _remove_numbers(self, text: str) -> str:
        text = RE_UNICODE_NUMERIC.sub("", strip_numeric(text))
        return strip_multiple_whitespaces(text).strip()

    def _remove_stopwords(self, text: str) -> str:
        return " ".join(token for token in text.split() if token not in self.stopwords)

    def _stem(self, text: str) -> str:
        return " ".join(self._stem_token(token) for token in text.split())

    # ===========================
    # Helpers
    # ===========================

    @staticmethod
    def _normalize_quotes(text: str) -> str:
        """Map curly/smart quotes to straight ASCII quotes."""
        for typographic, ascii_quote in TYPOGRAPHIC_QUOTES.items():
            text = text.replace(typographic, ascii_quote)
        return text

    def _stem_token(self, token: str) -> str:
        """
        Stem a token until the Porter stemmer leaves it unchanged.

        A single Porter pass is not a fixed point ("agreed" -> "agre" -> "agr").
        """
        stem = self._stem_cache.get(token)
        if stem is None:
            stem = token
            while True:
                next_stem = self.stemmer.stem(stem)
                if next_stem == stem:
                    break
                stem = next_stem
            self._stem_cache[token] = stem
        return stem
