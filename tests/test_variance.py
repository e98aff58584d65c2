"""
tests/test_variance.py - State Variance Tests
"""

import math

import numpy as np

from everling.variance import state_variance, mean_intensity


class TestStateVariance:
    """Test state_variance function."""

    def test_empty_is_zero(self):
        assert state_variance({}) == 0.0

    def test_single_entry_is_zero(self):
        assert state_variance({12345: 0.73}) == 0.0

    def test_population_variance(self):
        """Divides by n, not n - 1."""
        assert state_variance({1: 1.0, 2: -1.0}) == 1.0
        assert math.isclose(state_variance({1: 0.0, 2: 0.0, 3: 3.0}), 2.0)

    def test_never_negative(self):
        rng = np.random.default_rng(9)
        for _ in range(20):
            state = {i: float(v) for i, v in enumerate(rng.uniform(-1, 1, size=50))}
            assert state_variance(state) >= 0.0

    def test_ignores_keys(self):
        """Only values matter, not which dimensions hold them."""
        assert state_variance({1: 0.2, 2: 0.4}) == state_variance({900: 0.2, 7: 0.4})


class TestMeanIntensity:
    """Test mean_intensity function."""

    def test_empty_is_zero(self):
        assert mean_intensity({}) == 0.0

    def test_average_absolute_value(self):
        assert mean_intensity({1: 0.5, 2: -0.25}) == 0.375
