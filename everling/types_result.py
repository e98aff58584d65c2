"""
everling/types_result.py - Result Dataclasses

Immutable containers for per-step metrics, simulation results and reports.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .types_config import SimulationConfig


@dataclass(frozen=True)
class SimulationMetric:
    """Variance sample taken every METRIC_INTERVAL steps."""
    step: int
    variance: float
    structure_score: float  # variance / initial variance, 0 when initial is 0


@dataclass(frozen=True)
class SimResult:
    """Immutable simulation result."""
    metrics: List[SimulationMetric]
    final_state: Dict[int, float]
    final_variance_ratio: float
    mean_intensity: float
    initial_variance: float
    final_variance: float
    indices: List[int]
    receipts: List[dict] = field(default_factory=list)


@dataclass(frozen=True)
class ResearchReport:
    """One mode's run, rendered into a sentence."""
    config: SimulationConfig
    metrics: List[SimulationMetric]
    generated_sentence: str
    variance_change: float
    intensity_score: float
