"""
Tests for AADConfig validation and the property-map adapter.
"""

import dataclasses

import pytest

from aad_regression import AADConfig, DiracDeltaApproximationMethod, RandomVariableDifferentiableFactory


def test_defaults():
    config = AADConfig()
    assert config.dirac_delta_approximation_width_per_std_dev == 0.05
    assert config.dirac_delta_approximation_method is DiracDeltaApproximationMethod.DIRECT
    assert config.dirac_delta_approximation_density_regression_width_per_std_dev == 0.5
    assert config.density_regression_powers == (0, 1)
    assert not config.is_infinite_width


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        AADConfig().dirac_delta_approximation_width_per_std_dev = 1.0


def test_infinite_width_allowed():
    assert AADConfig(dirac_delta_approximation_width_per_std_dev=float("inf")).is_infinite_width


@pytest.mark.parametrize("kwargs", [
    {"dirac_delta_approximation_width_per_std_dev": -0.1},
    {"dirac_delta_approximation_width_per_std_dev": float("nan")},
    {"dirac_delta_approximation_density_regression_width_per_std_dev": 0.0},
    {"dirac_delta_approximation_density_regression_width_per_std_dev": float("inf")},
    {"density_regression_step_per_std_dev": 0.0},
    {"density_regression_step_per_std_dev": 0.6},
    {"density_regression_powers": ()},
    {"density_regression_powers": (0, 0)},
    {"density_regression_powers": (-1,)},
    {"dirac_delta_approximation_method": "SMOOTHING"},
])
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError):
        AADConfig(**kwargs)


def test_method_parsed_from_string():
    config = AADConfig(dirac_delta_approximation_method="regression_on_distribution")
    assert config.dirac_delta_approximation_method is DiracDeltaApproximationMethod.REGRESSION_ON_DISTRIBUTION


class TestFromProperties:
    def test_camel_case_keys(self):
        config = AADConfig.from_properties({
            "diracDeltaApproximationWidthPerStdDev": 0.1,
            "diracDeltaApproximationMethod": "REGRESSION_ON_DISTRIBUTION",
            "diracDeltaApproximationDensityRegressionWidthPerStdDev": 0.75,
        })
        assert config.dirac_delta_approximation_width_per_std_dev == 0.1
        assert config.dirac_delta_approximation_method is DiracDeltaApproximationMethod.REGRESSION_ON_DISTRIBUTION
        assert config.dirac_delta_approximation_density_regression_width_per_std_dev == 0.75

    def test_legacy_method_spelling(self):
        config = AADConfig.from_properties({"diracDeltaApproximationMethod": "REGRESSION_ON_DISTRIBUITON"})
        assert config.dirac_delta_approximation_method is DiracDeltaApproximationMethod.REGRESSION_ON_DISTRIBUTION

    def test_snake_case_keys(self):
        config = AADConfig.from_properties({"density_regression_powers": [0, 1, 2]})
        assert config.density_regression_powers == (0, 1, 2)

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError, match="Unknown AAD property"):
            AADConfig.from_properties({"diracDeltaWidth": 0.1})

    def test_factory_from_properties(self, tape):
        factory = RandomVariableDifferentiableFactory.from_properties(
            {"diracDeltaApproximationWidthPerStdDev": 0.2}, tape=tape
        )
        x = factory.create_random_variable(1.0)
        assert x.config.dirac_delta_approximation_width_per_std_dev == 0.2
        assert x.tape is tape
