"""
everling/cycle.py - Core Simulation Loop

Main entry points: run_simulation, run_experiment, run_experiment_sets.
One caller-supplied random source is threaded through the whole run, so a
seeded Generator reproduces a run bit for bit.
"""

from typing import List, Optional

import numpy as np

from receipts import emit_receipt

from .assembler import assemble
from .constants import (
    Language,
    BLEND_RETAIN,
    BLEND_TARGET,
    METRIC_INTERVAL,
    VARIANCE_FLOOR,
)
from .integrator import MomentumIntegrator
from .seeding import expand_seed, initialize_state, make_rng, seed_expansion_receipt
from .types_config import SimulationConfig, EXPERIMENT_SETS, with_seed
from .types_result import SimulationMetric, SimResult, ResearchReport
from .validation import validate_config
from .variance import state_variance, mean_intensity
from .vocabulary import VocabularyData


def run_simulation(config: SimulationConfig,
                   rng: Optional[np.random.Generator] = None) -> SimResult:
    """
    Run one integration experiment.

    Args:
        config: Validated before anything is drawn
        rng: Random source; make_rng(config) when omitted

    Returns:
        SimResult with sampled metrics, final state and summary scores

    Raises:
        InvalidConfiguration: config cannot produce a meaningful run
    """
    validate_config(config)
    rng = rng if rng is not None else make_rng(config)

    indices = expand_seed(config.seed_text, config.active_dimensions,
                          config.total_dimensions, config.hash_algorithm)
    state = initialize_state(indices, rng)
    receipts = [seed_expansion_receipt(config.seed_text, indices, state,
                                       config.hash_algorithm, config)]

    initial_variance = state_variance(state)
    integrator = MomentumIntegrator(config.active_dimensions)
    metrics: List[SimulationMetric] = []

    for step in range(config.steps):
        integrator.integrate(config.alpha, config.noise_scale, rng)
        terrain = integrator.terrain

        for i, d in enumerate(indices):
            state[d] = state[d] * BLEND_RETAIN + float(terrain[i]) * BLEND_TARGET

        if step % METRIC_INTERVAL == 0:
            current = state_variance(state)
            metrics.append(SimulationMetric(
                step=step,
                variance=current,
                structure_score=current / initial_variance if initial_variance > 0 else 0.0,
            ))

    final_variance = state_variance(state)
    variance_change = final_variance / max(initial_variance, VARIANCE_FLOOR)
    intensity = mean_intensity(state)

    receipts.append(emit_receipt("simulation_run", {
        "tenant_id": "simulation",
        "mode": config.mode.value,
        "seed_text": config.seed_text,
        "steps": config.steps,
        "alpha": config.alpha,
        "noise_scale": config.noise_scale,
        "initial_variance": initial_variance,
        "final_variance": final_variance,
        "variance_change": variance_change,
        "mean_intensity": intensity,
        "metrics_sampled": len(metrics),
    }))

    return SimResult(
        metrics=metrics,
        final_state=state,
        final_variance_ratio=variance_change,
        mean_intensity=intensity,
        initial_variance=initial_variance,
        final_variance=final_variance,
        indices=indices,
        receipts=receipts,
    )


def run_experiment(config: SimulationConfig, vocabulary: VocabularyData, language: Language,
                   rng: Optional[np.random.Generator] = None,
                   ledger: Optional[list] = None) -> ResearchReport:
    """
    Simulate, then render the final state as a sentence.

    Args:
        config: Simulation parameters
        vocabulary: Read-only snapshot for the target language
        language: Output language
        rng: Random source; make_rng(config) when omitted
        ledger: Optional list receiving the run's receipts

    Returns:
        ResearchReport for this config
    """
    result = run_simulation(config, rng)
    if ledger is not None:
        ledger.extend(result.receipts)

    return ResearchReport(
        config=config,
        metrics=result.metrics,
        generated_sentence=assemble(result.final_state, vocabulary, language),
        variance_change=result.final_variance_ratio,
        intensity_score=result.mean_intensity,
    )


def run_experiment_sets(seed_text: str, language: Language, vocabulary: VocabularyData,
                        rng: Optional[np.random.Generator] = None,
                        random_seed: Optional[int] = None,
                        ledger: Optional[list] = None) -> List[ResearchReport]:
    """
    Run every discourse mode preset with the same seed text.

    With no rng, each mode gets its own generator from random_seed.
    """
    reports = []
    for preset in EXPERIMENT_SETS:
        config = with_seed(preset, seed_text, random_seed)
        reports.append(run_experiment(config, vocabulary, language, rng, ledger))
    return reports
