"""
Digital option delta: accuracy and variance of the estimators against the
Black-Scholes analytic delta.

S0 = 1.0, r = 0.05, sigma = 0.5, T = 1, K = 1.05, analytic delta ~ 0.7361.
"""

import numpy as np
import pytest

from aad_regression import get_sensitivity_approximations
from aad_regression.methods import AADMethod, AADRegressionMethod, FiniteDifferenceMethod

E2E_SEED = 3141
E2E_WIDTH = 0.05
NUMBER_OF_SEEDS = 10


@pytest.fixture(scope="module")
def results(experiment):
    return get_sensitivity_approximations(experiment, width=E2E_WIDTH, seed=E2E_SEED,
                                          is_direct_regression=True)


@pytest.mark.slow
class TestEndToEnd:
    """200,000 paths, seed 3141, width 0.05 standard deviations."""

    def test_result_keys(self, results):
        assert {
            'delta.analytic', 'delta.fd', 'delta.aad', 'delta.aad.regression',
            'delta.likelihood', 'delta.aad.directregression',
            'density', 'density.x', 'density.values', 'density.regression',
        } <= set(results)

    def test_analytic(self, results, analytic_delta):
        assert results['delta.analytic'] == pytest.approx(analytic_delta)

    def test_finite_difference(self, results, analytic_delta):
        assert results['delta.fd'].average() == pytest.approx(analytic_delta, abs=1e-1)

    def test_aad_direct(self, results, analytic_delta):
        assert results['delta.aad'].average() == pytest.approx(analytic_delta, abs=1e-2)

    def test_aad_regression_on_distribution(self, results, analytic_delta):
        assert results['delta.aad.regression'].average() == pytest.approx(analytic_delta, abs=4e-3)

    def test_aad_direct_regression(self, results, analytic_delta):
        assert results['delta.aad.directregression'].average() == pytest.approx(analytic_delta, abs=4e-3)

    def test_likelihood_ratio(self, results, analytic_delta):
        assert results['delta.likelihood'].average() == pytest.approx(analytic_delta, abs=4e-3)


def test_regression_reduces_variance_across_seeds(small_experiment):
    """
    Sample variance of the delta estimate over independent seeds, same path
    count for every method.
    """
    methods = {
        'fd': FiniteDifferenceMethod(small_experiment, bump_per_std_dev=E2E_WIDTH),
        'aad': AADMethod(small_experiment, width=E2E_WIDTH),
        'regression': AADRegressionMethod(small_experiment, width=E2E_WIDTH),
    }
    estimates = {name: [] for name in methods}
    for seed in range(NUMBER_OF_SEEDS):
        for name, method in methods.items():
            estimates[name].append(method.compute_delta(seed)['delta'])

    variance = {name: np.var(values, ddof=1) for name, values in estimates.items()}

    assert variance['regression'] < 0.5 * variance['aad']
    assert variance['regression'] < 0.5 * variance['fd']
