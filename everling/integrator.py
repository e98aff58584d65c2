"""
everling/integrator.py - Momentum Integrator

Per active position: momentum is an exponential moving average of uniform noise,
terrain is the clamped running sum of momentum.
"""

import numpy as np

from .constants import TERRAIN_BOUND


class MomentumIntegrator:
    """
    Bounded random walk with momentum.

    momentum and terrain are index-aligned with the positional order of the
    seed-derived dimension list, not with the dimension values themselves.
    """

    def __init__(self, active_dimensions: int):
        self.momentum = np.zeros(active_dimensions, dtype=np.float64)
        self.terrain = np.zeros(active_dimensions, dtype=np.float64)

    def __len__(self) -> int:
        return len(self.terrain)

    def integrate(self, alpha: float, noise_scale: float, rng: np.random.Generator) -> None:
        """
        Advance every position by one step.

        gradient ~ Uniform(-noise_scale, noise_scale)
        momentum = alpha * momentum + (1 - alpha) * gradient
        terrain  = clamp(terrain + momentum, -1, 1)
        """
        gradient = rng.uniform(-noise_scale, noise_scale, size=len(self.terrain))
        self.momentum = alpha * self.momentum + (1.0 - alpha) * gradient
        self.terrain = np.clip(self.terrain + self.momentum, -TERRAIN_BOUND, TERRAIN_BOUND)
