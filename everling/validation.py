"""
everling/validation.py - Configuration Validation

Fail fast before any state is materialized.
"""

import math

from .constants import HASH_ALGORITHMS
from .errors import InvalidConfiguration
from .types_config import SimulationConfig


def validate_config(config: SimulationConfig) -> SimulationConfig:
    """
    Check that a config can produce a meaningful run.

    Args:
        config: SimulationConfig to check

    Returns:
        The same config, for chaining

    Raises:
        InvalidConfiguration: zero active dimensions, empty dimension space,
            negative step count, alpha outside [0, 1], negative noise scale, NaN or infinite alpha/noise,
            or an unknown hash algorithm
    """
    errors = []

    if config.active_dimensions < 1:
        errors.append(f"active_dimensions must be >= 1, got {config.active_dimensions}")
    if config.total_dimensions < 1:
        errors.append(f"total_dimensions must be >= 1, got {config.total_dimensions}")
    if config.steps < 0:
        errors.append(f"steps must be >= 0, got {config.steps}")
    if not math.isfinite(config.alpha) or not 0.0 <= config.alpha <= 1.0:
        errors.append(f"alpha must be a finite value in [0, 1], got {config.alpha}")
    if not math.isfinite(config.noise_scale) or config.noise_scale < 0.0:
        errors.append(f"noise_scale must be finite and >= 0, got {config.noise_scale}")
    if config.hash_algorithm not in HASH_ALGORITHMS:
        errors.append(
            f"hash_algorithm must be one of {list(HASH_ALGORITHMS)}, got {config.hash_algorithm!r}"
        )

    if errors:
        raise InvalidConfiguration("Invalid simulation config:\n" + "\n".join(f"  - {e}" for e in errors))

    return config
