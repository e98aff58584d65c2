"""
everling/seeding.py - Deterministic Seeding

Seed text -> 64-bit hash -> active dimension indices -> initial sparse state.
The hash algorithm is a config choice (blake3 or sha256); both are stable across
processes and platforms, so identical seed text always yields identical indices.
"""

import hashlib
from typing import Dict, List, Optional

import blake3
import numpy as np

from receipts import emit_receipt

from .constants import DIMENSION_STRIDE, DEFAULT_HASH_ALGORITHM, INITIAL_SPREAD
from .errors import InvalidConfiguration
from .types_config import SimulationConfig


def seed_hash(seed_text: str, algorithm: str = DEFAULT_HASH_ALGORITHM) -> int:
    """
    64-bit unsigned hash of the seed text.

    The first 8 digest bytes are read big-endian.
    """
    data = seed_text.encode("utf-8")
    if algorithm == "blake3":
        digest = blake3.blake3(data).digest()
    elif algorithm == "sha256":
        digest = hashlib.sha256(data).digest()
    else:
        raise InvalidConfiguration(f"Unknown hash algorithm: {algorithm!r}")
    return int.from_bytes(digest[:8], "big")


def expand_seed(seed_text: str, active_dimensions: int, total_dimensions: int,
                algorithm: str = DEFAULT_HASH_ALGORITHM) -> List[int]:
    """
    Expand a seed into active dimension indices.

    index_i = (hash + i * DIMENSION_STRIDE) mod total_dimensions

    Collisions are allowed: two positions may name the same dimension.

    Args:
        seed_text: User supplied seed
        active_dimensions: Number of positions to generate
        total_dimensions: Size of the virtual dimension space

    Returns:
        List of dimension indices, one per position
    """
    if total_dimensions < 1:
        raise InvalidConfiguration(f"total_dimensions must be >= 1, got {total_dimensions}")

    base = seed_hash(seed_text, algorithm)
    return [(base + i * DIMENSION_STRIDE) % total_dimensions for i in range(active_dimensions)]


def make_rng(config: SimulationConfig) -> np.random.Generator:
    """Random source for a run. Seeded when config.random_seed is set."""
    return np.random.default_rng(config.random_seed)


def initialize_state(indices: List[int], rng: np.random.Generator) -> Dict[int, float]:
    """
    Draw the initial sparse state.

    One Uniform(-0.1, 0.1) value per position, in position order. A repeated
    index overwrites the earlier draw, so the state may hold fewer entries
    than there are positions.
    """
    draws = rng.uniform(-INITIAL_SPREAD, INITIAL_SPREAD, size=len(indices))
    state: Dict[int, float] = {}
    for d, value in zip(indices, draws):
        state[d] = float(value)
    return state


def seed_expansion_receipt(seed_text: str, indices: List[int], state: Dict[int, float],
                           algorithm: str, config: Optional[SimulationConfig] = None) -> dict:
    """Receipt describing how a seed was laid out in the dimension space."""
    return emit_receipt("seed_expansion", {
        "tenant_id": "simulation",
        "seed_text": seed_text,
        "hash_algorithm": algorithm,
        "positions": len(indices),
        "distinct_dimensions": len(state),
        "collisions": len(indices) - len(state),
        "mode": config.mode.value if config is not None else None,
    })
