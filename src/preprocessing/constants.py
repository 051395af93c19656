"""
Constants for plot-synopsis preprocessing

This module contains the normalization stage identifiers and the
stopword-source settings shared by the preprocessing modules.
"""

from enum import Enum
from typing import List


# ===========================
# Normalization Stages
# ===========================

class NormalizationStage(Enum):
    """
    Text normalization stages, in the order they must run.

    Usage:
        >>> from src.preprocessing.constants import NormalizationStage
        >>> [stage.value for stage in NormalizationStage]
        ['lowercase', 'remove_punctuation', 'remove_numbers', 'remove_stopwords', 'stem']
    """

    LOWERCASE = "lowercase"
    REMOVE_PUNCTUATION = "remove_punctuation"
    REMOVE_NUMBERS = "remove_numbers"
    REMOVE_STOPWORDS = "remove_stopwords"
    STEM = "stem"


STAGE_ORDER: List[NormalizationStage] = list(NormalizationStage)
"""Fixed stage order; stemming runs last so stopword matching sees surface forms"""


# ===========================
# Stopwords
# ===========================

STOPWORD_SOURCES = ("gensim", "nltk")
"""Supported English stopword lists"""

NLTK_STOPWORDS_DOWNLOAD_HINT = "python -m nltk.downloader stopwords"


# ===========================
# Punctuation
# ===========================

TYPOGRAPHIC_QUOTES = {
    '\u201c': '"',
    '\u201d': '"',
    '\u2018': "'",
    '\u2019': "'",
}
"""Curly/smart quotes and their straight ASCII replacements"""
