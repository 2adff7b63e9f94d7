"""
Tests for the Dirac delta approximations used when differentiating choose.
"""

import numpy as np
import pytest
from scipy.stats import norm

from aad_regression import AADConfig, DiracDeltaApproximationMethod, RandomVariable
from aad_regression.aad.core.dirac_delta import (
    dirac_delta_partial,
    get_density_on,
    get_density_regression,
    get_density_samples,
    get_dirac_delta_weight,
    get_localizer,
)

NUMBER_OF_PATHS = 200000


@pytest.fixture(scope="module")
def standard_normal():
    return RandomVariable(np.random.default_rng(7).standard_normal(NUMBER_OF_PATHS))


def test_localizer_window_is_half_open():
    x = RandomVariable([-0.6, -0.5, 0.0, 0.49, 0.5])
    np.testing.assert_array_equal(get_localizer(x, 1.0).get_values(), [0.0, 1.0, 1.0, 1.0, 0.0])


class TestDensitySamples:
    def test_offsets_are_symmetric_without_zero(self):
        x = RandomVariable(np.linspace(-1.0, 1.0, 101))
        offsets, densities = get_density_samples(x, half_width=0.5, step=0.1)
        np.testing.assert_allclose(offsets, [-0.5, -0.4, -0.3, -0.2, -0.1, 0.1, 0.2, 0.3, 0.4, 0.5])
        assert densities.shape == offsets.shape

    def test_uniform_density(self, rng):
        x = RandomVariable(rng.uniform(-1.0, 1.0, NUMBER_OF_PATHS))
        _, densities = get_density_samples(x, half_width=0.5, step=0.05)
        np.testing.assert_allclose(densities, 0.5, atol=0.05)

    @pytest.mark.parametrize("step", [0.0, -0.01])
    def test_non_positive_step_raises(self, step):
        with pytest.raises(ValueError):
            get_density_samples(RandomVariable([0.0, 1.0]), half_width=0.5, step=step)


class TestDensityOn:
    def test_maps_window_fit_to_point_density(self):
        # m(s) = c0 + c1 s + c2 s^2  ->  f(x) = c0 - 2 c1 x + 3 c2 x^2
        coefficients = [0.4, 0.1, -0.05]
        x = RandomVariable([-1.0, 0.0, 2.0])
        expected = [0.4 + 0.2 - 0.15, 0.4, 0.4 - 0.4 - 0.6]
        np.testing.assert_allclose(get_density_on(x, coefficients, (0, 1, 2)).get_values(), expected)

    def test_density_at_zero_is_intercept(self):
        assert get_density_on(RandomVariable(0.0), [0.37, 0.2], (0, 1)).double_value() == pytest.approx(0.37)

    def test_regressed_density_of_standard_normal(self, standard_normal):
        config = AADConfig(density_regression_powers=(0, 1, 2))
        offsets, densities, coefficients = get_density_regression(standard_normal, config)
        assert len(offsets) == len(densities) == 100
        assert coefficients[0] == pytest.approx(norm.pdf(0.0), abs=0.01)


class TestWeights:
    def test_infinite_width_is_flat(self, standard_normal):
        config = AADConfig(dirac_delta_approximation_width_per_std_dev=float("inf"))
        assert get_dirac_delta_weight(standard_normal, config).double_value() == 1.0

    def test_zero_width_is_zero(self, standard_normal):
        config = AADConfig(dirac_delta_approximation_width_per_std_dev=0.0)
        assert get_dirac_delta_weight(standard_normal, config).double_value() == 0.0

    def test_deterministic_argument_is_zero(self):
        assert get_dirac_delta_weight(RandomVariable(0.3), AADConfig()).double_value() == 0.0

    def test_direct_weight_integrates_to_density(self, standard_normal):
        weight = get_dirac_delta_weight(standard_normal, AADConfig())
        assert weight.average() == pytest.approx(norm.pdf(0.0), abs=0.03)

    def test_regression_weight_integrates_to_density(self, standard_normal):
        config = AADConfig(
            dirac_delta_approximation_method=DiracDeltaApproximationMethod.REGRESSION_ON_DISTRIBUTION,
            density_regression_powers=(0, 1, 2),
        )
        weight = get_dirac_delta_weight(standard_normal, config)
        assert weight.average() == pytest.approx(norm.pdf(0.0), abs=0.01)

    def test_direct_and_regression_agree(self, standard_normal):
        direct = get_dirac_delta_weight(standard_normal, AADConfig(
            dirac_delta_approximation_width_per_std_dev=0.2,
        ))
        regression = get_dirac_delta_weight(standard_normal, AADConfig(
            dirac_delta_approximation_width_per_std_dev=0.2,
            dirac_delta_approximation_method=DiracDeltaApproximationMethod.REGRESSION_ON_DISTRIBUTION,
        ))
        assert direct.average() == pytest.approx(regression.average(), abs=0.02)

    def test_weight_vanishes_outside_window(self, standard_normal):
        weight = get_dirac_delta_weight(standard_normal, AADConfig()).get_values()
        outside = np.abs(standard_normal.get_values()) > 0.05
        assert np.all(weight[outside] == 0.0)

    def test_partial_scales_with_branch_difference(self, standard_normal):
        config = AADConfig(dirac_delta_approximation_width_per_std_dev=float("inf"))
        partial = dirac_delta_partial(standard_normal, RandomVariable(3.0), RandomVariable(1.0), config)
        assert partial.double_value() == 2.0
