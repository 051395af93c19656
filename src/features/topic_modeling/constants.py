"""
Topic Modeling Constants and Configuration

This module defines constants for LDA-based topic modeling
of movie plot synopses.
"""

from typing import Dict, List

# ===========================
# Module Version
# ===========================
TOPIC_MODELING_MODULE_VERSION = "0.1.0"

# ===========================
# Default LDA Parameters
# ===========================
DEFAULT_NUM_TOPICS = 10
"""Topic count chosen for the plot corpus after inspecting the metrics table"""

MIN_NUM_TOPICS = 2
"""Smallest topic count an LDA fit accepts"""

# ===========================
# Result Tables
# ===========================
DEFAULT_NUM_TOP_TERMS = 10
"""Terms reported per topic"""

BETA_COLUMNS: List[str] = ["topic", "term", "beta"]
GAMMA_COLUMNS: List[str] = ["document", "source_index", "topic", "gamma"]
TOP_TERMS_COLUMNS: List[str] = ["topic", "rank", "term", "beta"]
DOMINANT_TOPIC_COLUMNS: List[str] = ["document", "source_index", "topic", "gamma"]
METRICS_COLUMNS: List[str] = ["num_topics", "metric", "value", "error"]

# ===========================
# Topic-Count Selection
# ===========================
DEFAULT_CANDIDATE_TOPICS: List[int] = list(range(2, 21, 2))
"""Topic counts evaluated by the selector (2, 4, ..., 20)"""

METRIC_CAO_JUAN_2009 = "cao_juan_2009"
METRIC_ARUN_2010 = "arun_2010"
METRIC_DEVEAUD_2014 = "deveaud_2014"
METRIC_COHERENCE = "coherence"

METRIC_DIRECTIONS: Dict[str, str] = {
    METRIC_CAO_JUAN_2009: "minimize",
    METRIC_ARUN_2010: "minimize",
    METRIC_DEVEAUD_2014: "maximize",
    METRIC_COHERENCE: "maximize",
}
"""Whether a lower or a higher value marks a better topic count"""

DEFAULT_METRICS: List[str] = list(METRIC_DIRECTIONS)

DEFAULT_COHERENCE_METRIC = "u_mass"
"""Document co-occurrence coherence; needs no sliding-window pass over texts"""

# ===========================
# Training Recommendations
# ===========================
RECOMMENDED_MIN_CORPUS_SIZE = 50
"""Minimum number of documents recommended for training LDA"""

