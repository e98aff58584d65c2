"""
everling/variance.py - State Variance

Population variance of a sparse state mapping. Recomputed from scratch on every
call so it can be applied to any snapshot.
"""

from typing import Dict

import numpy as np


def state_variance(state: Dict[int, float]) -> float:
    """
    Mean squared deviation from the mean of all values in the state.

    Args:
        state: Mapping of dimension index to value

    Returns:
        Population variance, 0.0 for an empty state
    """
    if not state:
        return 0.0
    values = np.fromiter(state.values(), dtype=np.float64, count=len(state))
    return float(np.var(values))


def mean_intensity(state: Dict[int, float]) -> float:
    """Average absolute value over the entries of the state, 0.0 when empty."""
    if not state:
        return 0.0
    values = np.fromiter(state.values(), dtype=np.float64, count=len(state))
    return float(np.mean(np.abs(values)))
