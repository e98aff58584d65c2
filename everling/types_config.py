"""
everling/types_config.py - SimulationConfig Dataclass and Scenario Presets

Immutable configuration for integration runs.
Frozen dataclass, no behavior. Validation lives in everling/validation.py.
"""

from dataclasses import dataclass, replace
from typing import Optional

from .constants import (
    DiscourseMode,
    MODE_PARAMETERS,
    DEFAULT_TOTAL_DIMENSIONS,
    DEFAULT_ACTIVE_DIMENSIONS,
    DEFAULT_STEPS,
    DEFAULT_HASH_ALGORITHM,
)


@dataclass(frozen=True)
class SimulationConfig:
    """Simulation configuration (immutable)."""
    total_dimensions: int = DEFAULT_TOTAL_DIMENSIONS  # Virtual address space, may exceed 2**32
    active_dimensions: int = DEFAULT_ACTIVE_DIMENSIONS
    steps: int = DEFAULT_STEPS
    alpha: float = 0.95  # Momentum retention
    noise_scale: float = 0.05  # Half-width of uniform gradient noise
    seed_text: str = ""
    mode: DiscourseMode = DiscourseMode.NARRATIVE
    random_seed: Optional[int] = None  # None = fresh entropy from the OS
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM


# =============================================================================
# SCENARIO PRESETS
# =============================================================================

SCENARIO_NARRATIVE = SimulationConfig(
    alpha=MODE_PARAMETERS[DiscourseMode.NARRATIVE][0],
    noise_scale=MODE_PARAMETERS[DiscourseMode.NARRATIVE][1],
    mode=DiscourseMode.NARRATIVE,
)

SCENARIO_DIALECTIC = SimulationConfig(
    alpha=MODE_PARAMETERS[DiscourseMode.DIALECTIC][0],
    noise_scale=MODE_PARAMETERS[DiscourseMode.DIALECTIC][1],
    mode=DiscourseMode.DIALECTIC,
)

EXPERIMENT_SETS = [SCENARIO_NARRATIVE, SCENARIO_DIALECTIC]


def with_seed(config: SimulationConfig, seed_text: str,
              random_seed: Optional[int] = None) -> SimulationConfig:
    """Copy of a preset bound to a seed text (and optionally a random seed)."""
    if random_seed is None:
        return replace(config, seed_text=seed_text)
    return replace(config, seed_text=seed_text, random_seed=random_seed)


def config_to_dict(config: SimulationConfig) -> dict:
    """JSON-ready view of a config."""
    return {
        "total_dimensions": config.total_dimensions,
        "active_dimensions": config.active_dimensions,
        "steps": config.steps,
        "mode": config.mode.value,
        "noise_scale": config.noise_scale,
        "alpha": config.alpha,
        "seed_text": config.seed_text,
        "random_seed": config.random_seed,
        "hash_algorithm": config.hash_algorithm,
    }
