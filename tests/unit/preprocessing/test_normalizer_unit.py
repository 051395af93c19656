"""
Unit tests for src/preprocessing/normalizer.py

Tests each normalization stage, stage ordering, idempotence and the
per-stage empty-document counts.
No real data dependencies - runs in <1 second.
"""

import pytest

from src.preprocessing import CorpusBuilder, TextNormalizer, NormalizationStage, STAGE_ORDER
from src.preprocessing.normalizer import load_stopwords


class TestStages:
    """Tests for the individual stage methods."""

    def test_lowercase(self, normalizer: TextNormalizer):
        """Uppercase letters are lowered."""
        assert normalizer._lowercase("The HERO") == "the hero"

    def test_remove_punctuation(self, normalizer: TextNormalizer):
        """Punctuation is stripped and whitespace collapsed."""
        assert normalizer._remove_punctuation("hero, ran; quickly!") == "hero ran quickly"

    def test_remove_unicode_punctuation(self, normalizer: TextNormalizer):
        """Typographic quotes, dashes, ellipses and inverted marks are stripped."""
        result = normalizer._remove_punctuation("hero’s “quest” — begins… ¿why?")
        assert result == "hero s quest begins why"

    def test_remove_numbers(self, normalizer: TextNormalizer):
        """Digits are removed."""
        assert normalizer._remove_numbers("agent 007 returns in 1995") == "agent returns in"

    def test_remove_unicode_numbers(self, normalizer: TextNormalizer):
        """Non-ASCII digits and superscripts are removed."""
        assert normalizer._remove_numbers("agent ٠٠٧ returns in ²") == "agent returns in"

    def test_remove_stopwords_exact_token_match(self, normalizer: TextNormalizer):
        """Only whole tokens matching a stopword are removed."""
        result = normalizer._remove_stopwords("the theater and the hero")
        assert result.split() == ["theater", "hero"]

    def test_stem(self, normalizer: TextNormalizer):
        """Surface variants share a Porter root."""
        assert normalizer._stem("running run heroes") == "run run hero"

    def test_token_order_preserved(self, normalizer: TextNormalizer):
        """Surviving tokens keep their relative order."""
        result = normalizer.normalize("Zebra apple mango")
        assert result.split() == ["zebra", "appl", "mango"]


class TestNormalize:
    """Tests for the full normalize() chain."""

    def test_hero_scenario(self, normalizer: TextNormalizer, hero_plots):
        """Both hero plots reduce to hero/run roots without 'the'."""
        first, second = (normalizer.normalize(text).split() for text in hero_plots)
        assert "hero" in first
        assert "the" not in first
        assert second == ["run", "hero", "run"]

    def test_stopword_only_becomes_empty(self, normalizer: TextNormalizer, stopword_only_plot):
        """Pure stopwords and punctuation normalize to an empty string."""
        assert normalizer.normalize(stopword_only_plot) == ""

    def test_stopwords_matched_after_lowercasing(self, normalizer: TextNormalizer):
        """Capitalized stopwords are removed."""
        assert normalizer.normalize("THE And OF") == ""

    def test_typographic_text_is_stemmed(self, normalizer: TextNormalizer):
        """Curly quotes and trailing ellipses do not block stemming."""
        tokens = normalizer.normalize("The hero’s “quest” — begins…").split()
        assert "quest" in tokens
        assert "begin" in tokens
        assert not any(ch in token for token in tokens for ch in "’“”—…")

    def test_unicode_punctuation_only_becomes_empty(self, normalizer: TextNormalizer):
        """A plot made only of typographic punctuation normalizes to nothing."""
        assert normalizer.normalize("— … ¿") == ""

    @pytest.mark.parametrize("text", [
        "The Hero ran quickly.",
        "Running heroes run.",
        "A spaceship crashes on a distant planet in 2049!",
        "The bride and groom dance at the wedding.",
    ])
    def test_idempotent(self, normalizer: TextNormalizer, text: str):
        """Normalizing normalized text changes nothing."""
        once = normalizer.normalize(text)
        assert normalizer.normalize(once) == once

    @pytest.mark.parametrize("word", [
        "agreed", "universally", "generously", "relational", "conditional",
        "happiness", "hopeful", "electrical", "adjustable", "feudalism",
        "sensibility", "dependent", "adoption", "controlling", "hopping",
        "conflated", "troubled", "motoring", "radically", "differently",
        "decisiveness", "formality", "predication", "vietnamization",
        "betrayal", "revenge", "detectives", "investigating", "spaceships",
    ])
    def test_stem_is_fixed_point(self, normalizer: TextNormalizer, word: str):
        """Stemming a stem leaves it unchanged."""
        once = normalizer.normalize(word)
        if once in normalizer.stopwords:
            pytest.skip(f"stem '{once}' is itself a stopword")
        assert normalizer.normalize(once) == once

    def test_repeated_porter_steps_collapsed(self, normalizer: TextNormalizer):
        """Words needing more than one Porter pass reach the final stem at once."""
        assert normalizer.normalize("agreed") == "agr"
        assert normalizer.normalize("universally") == "univ"

    def test_stem_that_is_a_stopword(self, normalizer: TextNormalizer):
        """A stem equal to a stopword survives once and is dropped on a second pass."""
        assert normalizer.normalize("moved") == "move"
        assert normalizer.normalize("move") == ""

    def test_stemming_runs_after_stopwords(self):
        """A word is checked against stopwords in its surface form, not its stem."""
        normalizer = TextNormalizer(stopwords=["run"])
        assert normalizer.normalize("running") == "run"
        assert normalizer.normalize("run") == ""


class TestNormalizeCorpus:
    """Tests for normalize_corpus() diagnostics."""

    def test_reports_every_stage_in_order(self, normalizer: TextNormalizer, hero_plots):
        """The report lists all five stages in execution order."""
        corpus = CorpusBuilder().build(hero_plots)
        _, report = normalizer.normalize_corpus(corpus)
        assert report.stages == [stage.value for stage in STAGE_ORDER]
        assert report.stages[-1] == NormalizationStage.STEM.value

    def test_empty_counts_per_stage(self, normalizer: TextNormalizer):
        """Documents become empty at the stage that removes their last token."""
        corpus = CorpusBuilder().build(["Hero", "!!!", "123", "the of", "Hero"])
        _, report = normalizer.normalize_corpus(corpus)
        assert report.empty_after_stage == {
            "lowercase": 0,
            "remove_punctuation": 1,
            "remove_numbers": 2,
            "remove_stopwords": 3,
            "stem": 3,
        }
        assert report.final_empty == 3

    def test_keeps_indices_and_length(self, normalizer: TextNormalizer, stopword_only_plot):
        """Normalization never drops or reorders documents."""
        corpus = CorpusBuilder().build(["Hero one", stopword_only_plot, "Rocket"])
        normalized, report = normalizer.normalize_corpus(corpus)
        assert len(normalized) == 3
        assert normalized.source_indices == [0, 1, 2]
        assert report.num_documents == 3


class TestStopwordLoading:
    """Tests for load_stopwords()."""

    def test_gensim_list_contains_common_words(self):
        """The bundled list covers basic function words."""
        words = load_stopwords("gensim")
        assert {"the", "and", "of"} <= words

    def test_extra_stopwords_lowercased(self):
        """Extra stopwords are added in lowercase."""
        words = load_stopwords("gensim", extra_stopwords=["Film", "MOVIE"])
        assert {"film", "movie"} <= words

    def test_unknown_source_raises(self):
        """Unknown stopword sources are rejected."""
        with pytest.raises(ValueError, match="Unknown stopword source"):
            load_stopwords("spacy")

    def test_explicit_stopwords_override_source(self):
        """An explicit list replaces the configured source."""
        normalizer = TextNormalizer(stopwords=["Hero"])
        assert normalizer.stopwords == frozenset({"hero"})
        assert normalizer.normalize("the hero") == "the"
