"""
everling/constants.py - Simulation and Vocabulary Constants

All constants for the integration engine and vocabulary pipeline. Centralized for tuning.
Pure data, no behavior.
"""

from enum import Enum


class Language(str, Enum):
    """Supported output languages. Values are vocabulary file keys."""
    ENGLISH = "english"
    JAPANESE = "japanese"
    CHINESE = "chinese"


class DiscourseMode(str, Enum):
    """Integration regimes run side by side for each seed."""
    NARRATIVE = "Narrative"  # High momentum, low noise: smooth semantic flow
    DIALECTIC = "Dialectic"  # Low momentum, high noise: conflict/resolution


WORD_CLASSES = ("nouns", "particles", "verbs", "adverbs")

# =============================================================================
# DIMENSION SPACE
# =============================================================================

DEFAULT_TOTAL_DIMENSIONS = 80_000
DEFAULT_ACTIVE_DIMENSIONS = 128
DEFAULT_STEPS = 500
DIMENSION_STRIDE = 137  # index_i = (hash + i * stride) mod total
HASH_ALGORITHMS = ("blake3", "sha256")
DEFAULT_HASH_ALGORITHM = "blake3"

# =============================================================================
# INTEGRATION
# =============================================================================

INITIAL_SPREAD = 0.1      # Initial state drawn from Uniform(-0.1, 0.1)
BLEND_RETAIN = 0.9        # state = state * 0.9 + terrain * 0.1
BLEND_TARGET = 0.1
TERRAIN_BOUND = 1.0       # Terrain clamped to [-1, 1]
METRIC_INTERVAL = 25      # Metrics sampled when step % 25 == 0
VARIANCE_FLOOR = 1e-9     # Denominator floor for variance change

# (alpha, noise_scale) per mode
MODE_PARAMETERS = {
    DiscourseMode.NARRATIVE: (0.95, 0.05),
    DiscourseMode.DIALECTIC: (0.70, 0.20),
}

# =============================================================================
# SENTENCE ASSEMBLY
# =============================================================================

# (intensity threshold, adverb index), checked in order
ADVERB_THRESHOLDS = ((0.8, 4), (0.6, 2), (0.4, 1))
SENTENCE_NOUN_COUNT = 3

# =============================================================================
# FILE LOCATIONS (relative to working directory)
# =============================================================================

VOCABULARY_FILE = "data/vocabulary.json"
MORPHEME_FILE = "data/morphemes.csv"
RESULTS_DIR = "results"
RECEIPTS_FILE = "receipts.jsonl"

# =============================================================================
# MORPHEME TABLE LAYOUT
# =============================================================================

SURFACE_FIELD = 2
POS_FIELD = 6
MIN_FIELDS = 8  # A line is classified only if it has more than 7 fields
QUOTE_CHARS = "\"'"

# Ordered (marker, word class) rules, first match wins
POS_RULES = {
    Language.JAPANESE: (
        ("名詞", "nouns"),
        ("助詞", "particles"),
        ("動詞", "verbs"),
        ("副詞", "adverbs"),
    ),
    Language.CHINESE: (
        ("名词", "nouns"),
        ("助词", "particles"),
        ("动词", "verbs"),
        ("副词", "adverbs"),
    ),
    # Penn Treebank tags
    Language.ENGLISH: (
        ("NN", "nouns"),
        ("IN", "particles"),
        ("VB", "verbs"),
        ("RB", "adverbs"),
    ),
}
