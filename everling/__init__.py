"""
everling - Everling Semantic Integration

Public API: momentum-driven random walk over a sparse slice of a huge dimension
space, seeded from text, rendered as a sentence from a mergeable vocabulary.
One file = one responsibility.
"""

# =============================================================================
# TYPES
# =============================================================================
from .types_config import (
    SimulationConfig,
    SCENARIO_NARRATIVE,
    SCENARIO_DIALECTIC,
    EXPERIMENT_SETS,
    with_seed,
    config_to_dict,
)
from .types_result import SimulationMetric, SimResult, ResearchReport

# =============================================================================
# CONSTANTS AND ERRORS
# =============================================================================
from .constants import Language, DiscourseMode, WORD_CLASSES, POS_RULES
from .errors import EverlingError, IoError, SerializationError, InvalidConfiguration

# =============================================================================
# ENGINE
# =============================================================================
from .seeding import seed_hash, expand_seed, initialize_state, make_rng
from .integrator import MomentumIntegrator
from .variance import state_variance, mean_intensity
from .validation import validate_config
from .cycle import run_simulation, run_experiment, run_experiment_sets

# =============================================================================
# VOCABULARY
# =============================================================================
from .vocabulary import VocabularyData, VocabularyRepository, default_vocabularies
from .morphemes import extract
from .sync import load_and_sync
from .assembler import assemble

# =============================================================================
# EXPORT
# =============================================================================
from .export import report_to_dict, export_report, write_report, load_report, generate_summary

__all__ = [
    "SimulationConfig",
    "SCENARIO_NARRATIVE",
    "SCENARIO_DIALECTIC",
    "EXPERIMENT_SETS",
    "with_seed",
    "config_to_dict",
    "SimulationMetric",
    "SimResult",
    "ResearchReport",
    "Language",
    "DiscourseMode",
    "WORD_CLASSES",
    "POS_RULES",
    "EverlingError",
    "IoError",
    "SerializationError",
    "InvalidConfiguration",
    "seed_hash",
    "expand_seed",
    "initialize_state",
    "make_rng",
    "MomentumIntegrator",
    "state_variance",
    "mean_intensity",
    "validate_config",
    "run_simulation",
    "run_experiment",
    "run_experiment_sets",
    "VocabularyData",
    "VocabularyRepository",
    "default_vocabularies",
    "extract",
    "load_and_sync",
    "assemble",
    "report_to_dict",
    "export_report",
    "write_report",
    "load_report",
    "generate_summary",
]
