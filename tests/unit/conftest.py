"""
Lightweight fixtures for unit tests - NO real data dependencies.
All fixtures use short synthetic plot synopses.
"""

from typing import List

import pytest


# =============================================================================
# Text Fixtures
# =============================================================================

@pytest.fixture
def hero_plots() -> List[str]:
    """Two plots sharing the hero/run roots."""
    return ["The Hero ran quickly.", "Running heroes run."]


@pytest.fixture
def stopword_only_plot() -> str:
    """Plot that normalizes to nothing."""
    return "The, the; the."


@pytest.fixture(scope="session")
def space_plot() -> str:
    return " ".join(["spaceship alien planet galaxy rocket astronaut"] * 10)


@pytest.fixture(scope="session")
def wedding_plot() -> str:
    return " ".join(["wedding bride groom romance kiss flowers"] * 10)


@pytest.fixture(scope="session")
def sample_plots() -> List[str]:
    """Small two-theme corpus (space adventure vs. romance)."""
    return [
        "An astronaut pilots a rocket to a distant planet where aliens attack the spaceship.",
        "A young bride falls in love with the groom's brother before the wedding.",
        "Aliens invade the galaxy and a rocket crew fights to save the planet.",
        "Two strangers meet in Paris, fall in love and plan a romantic wedding.",
        "The spaceship crew discovers an alien signal from a distant galaxy.",
        "A romance blossoms between a florist and a groom who sends her flowers.",
        "Astronauts repair the damaged rocket while aliens circle the planet.",
        "The bride runs away from her wedding and finds love on the road.",
    ]


# =============================================================================
# Pipeline Object Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def normalizer():
    """TextNormalizer with the bundled gensim stopword list."""
    from src.preprocessing import TextNormalizer
    return TextNormalizer(stopword_source="gensim", extra_stopwords=[])


@pytest.fixture(scope="session")
def sample_matrix(sample_plots, normalizer):
    """Term-frequency matrix over sample_plots."""
    from src.preprocessing import CorpusBuilder, EmptyDocumentFilter
    from src.features.topic_modeling import TermFrequencyMatrixBuilder

    corpus = CorpusBuilder().build(sample_plots)
    normalized, _ = normalizer.normalize_corpus(corpus)
    filtered = EmptyDocumentFilter().filter(normalized)
    return TermFrequencyMatrixBuilder().build(filtered.corpus)


@pytest.fixture(scope="session")
def sample_model(sample_matrix):
    """Three-topic LDA model fit on sample_matrix."""
    from src.features.topic_modeling import LDATrainer
    return LDATrainer(num_topics=3, random_state=42, passes=10, iterations=50).fit(sample_matrix)
