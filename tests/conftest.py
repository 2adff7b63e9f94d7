"""
Shared pytest fixtures for the aad_regression test suite.

Fixture Categories:
1. Tapes and factories - a fresh tape per test, so node ids start at 0
2. Experiments - the Black-Scholes digital option scenario at various path counts
3. Analytic reference values
"""

import numpy as np
import pytest

from aad_regression import (
    DigitalOptionExperiment,
    RandomVariableDifferentiableFactory,
    Tape,
    use_tape,
)
from aad_regression.analytic import black_scholes_digital_option_delta

# =============================================================================
# TAPES AND FACTORIES
# =============================================================================

@pytest.fixture
def tape():
    """Fresh tape installed as the global tape for the duration of the test."""
    with use_tape(Tape()) as t:
        yield t


@pytest.fixture
def factory(tape):
    """Differentiable factory with the default (DIRECT) configuration."""
    return RandomVariableDifferentiableFactory(tape=tape)


@pytest.fixture
def rng():
    return np.random.default_rng(20240817)


# =============================================================================
# EXPERIMENTS
# =============================================================================

@pytest.fixture(scope="session")
def experiment() -> DigitalOptionExperiment:
    """Full-size scenario: 200,000 stratified paths."""
    return DigitalOptionExperiment(stratified=True)


@pytest.fixture(scope="session")
def small_experiment() -> DigitalOptionExperiment:
    """Same model and product on 20,000 pseudo-random paths."""
    return DigitalOptionExperiment(number_of_paths=20000)


@pytest.fixture(scope="session")
def analytic_delta(experiment) -> float:
    e = experiment
    return black_scholes_digital_option_delta(
        e.initial_value, e.risk_free_rate, e.volatility, e.option_maturity, e.option_strike
    )
