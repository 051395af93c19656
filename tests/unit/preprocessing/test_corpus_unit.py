"""
Unit tests for src/preprocessing/corpus.py and src/preprocessing/models/corpus.py

Tests corpus construction, input validation and empty-document filtering.
No real data dependencies - runs in <1 second.
"""

import pytest
from pydantic import ValidationError

from src.preprocessing import (
    Corpus,
    CorpusBuilder,
    Document,
    EmptyDocumentFilter,
    TextNormalizer,
)


class TestCorpusBuilder:
    """Tests for CorpusBuilder.build()."""

    def test_assigns_input_positions(self):
        """Document indices are the input positions."""
        corpus = CorpusBuilder().build(["a plot", "another plot"])
        assert corpus.source_indices == [0, 1]
        assert corpus.get_texts() == ["a plot", "another plot"]

    def test_empty_input_raises(self):
        """Zero documents is fatal."""
        with pytest.raises(ValueError, match="no documents"):
            CorpusBuilder().build([])

    def test_non_string_raises_with_index(self):
        """Non-string entries are reported with their index."""
        with pytest.raises(TypeError, match="index 1"):
            CorpusBuilder().build(["plot", None])


class TestCorpusModel:
    """Tests for Document and Corpus models."""

    def test_document_is_frozen(self):
        """Documents are replaced, not mutated."""
        doc = Document(index=0, text="hero")
        with pytest.raises(ValidationError):
            doc.text = "villain"

    def test_whitespace_document_is_empty(self):
        """A document of only whitespace counts as empty."""
        assert Document(index=0, text="   ").is_empty

    def test_out_of_order_documents_rejected(self):
        """Corpus order must follow source indices."""
        with pytest.raises(ValidationError):
            Corpus(documents=(Document(index=2, text="b"), Document(index=1, text="a")))


class TestEmptyDocumentFilter:
    """Tests for EmptyDocumentFilter.filter()."""

    @pytest.fixture
    def empty_filter(self) -> EmptyDocumentFilter:
        return EmptyDocumentFilter()

    def test_removes_stopword_only_document(
        self, normalizer: TextNormalizer, empty_filter, hero_plots, stopword_only_plot
    ):
        """A pure-stopword plot is dropped and the corpus shrinks by exactly one."""
        corpus = CorpusBuilder().build(hero_plots + [stopword_only_plot])
        normalized, _ = normalizer.normalize_corpus(corpus)
        result = empty_filter.filter(normalized)
        assert len(result.corpus) == len(corpus) - 1
        assert result.removed_indices == (2,)

    def test_preserves_order_and_mapping(self, empty_filter):
        """Survivors keep their relative order and map back to original indices."""
        corpus = Corpus(documents=tuple(
            Document(index=i, text=text)
            for i, text in enumerate(["alpha", "", "beta", "", "", "gamma"])
        ))
        result = empty_filter.filter(corpus)
        assert result.corpus.get_texts() == ["alpha", "beta", "gamma"]
        assert result.source_indices == [0, 2, 5]
        assert result.original_index(2) == 5
        assert result.num_removed == 3

    def test_nothing_removed(self, empty_filter):
        """A corpus without empty documents passes through unchanged."""
        corpus = CorpusBuilder().build(["alpha", "beta"])
        result = empty_filter.filter(corpus)
        assert result.corpus == corpus
        assert result.removed_indices == ()

    def test_all_removed(self, empty_filter):
        """Filtering may leave an empty corpus."""
        corpus = CorpusBuilder().build(["", " "])
        result = empty_filter.filter(corpus)
        assert len(result.corpus) == 0
        assert result.removed_indices == (0, 1)
