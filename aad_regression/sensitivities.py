"""
All digital option delta approximations on one Brownian motion.
"""

import logging
from typing import Any, Dict

from .aad.core.config import AADConfig, DiracDeltaApproximationMethod
from .experiment import DigitalOptionExperiment
from .methods import (
    AADDirectRegressionMethod,
    AADMethod,
    AADRegressionMethod,
    AnalyticMethod,
    FiniteDifferenceMethod,
    LikelihoodRatioMethod,
)

logger = logging.getLogger(__name__)

# Half-width of the density sweep used by the REGRESSION_ON_DISTRIBUTION method
REGRESSION_DENSITY_WIDTH_PER_STD_DEV = 0.75


def get_sensitivity_approximations(experiment: DigitalOptionExperiment, width: float = 0.05,
                                   seed: int = 3141,
                                   is_direct_regression: bool = True) -> Dict[str, Any]:
    """
    Estimate the delta with every method.

    Args:
        experiment: model, discretization and product.
        width: Dirac delta approximation width (and finite difference bump)
               in standard deviations of S(T) - K.
        seed: seed of the Brownian motion shared by all Monte Carlo methods.
        is_direct_regression: also run the explicit decomposition and report
               its diagnostics.

    Returns:
        Dictionary with keys
            'delta.analytic'              float
            'delta.fd'                    RandomVariable (per path)
            'delta.aad'                   RandomVariable
            'delta.aad.regression'        RandomVariable
            'delta.likelihood'            RandomVariable
        and, with is_direct_regression,
            'delta.aad.directregression'  RandomVariable
            'density', 'density.x', 'density.values', 'density.regression'
            'delta.aad.directregression.regression.x'
            'delta.aad.directregression.regression.sensitivity'
            'delta.aad.directregression.regression.density'
    """
    results: Dict[str, Any] = {}

    aad_config = AADConfig.from_properties({"diracDeltaApproximationWidthPerStdDev": width})
    regression_config = AADConfig.from_properties({
        "diracDeltaApproximationWidthPerStdDev": width,
        "diracDeltaApproximationMethod": DiracDeltaApproximationMethod.REGRESSION_ON_DISTRIBUTION.name,
        "diracDeltaApproximationDensityRegressionWidthPerStdDev": REGRESSION_DENSITY_WIDTH_PER_STD_DEV,
    })

    methods = {
        "delta.fd": FiniteDifferenceMethod(experiment, bump_per_std_dev=width),
        "delta.aad": AADMethod(experiment, config=aad_config),
        "delta.aad.regression": AADRegressionMethod(experiment, config=regression_config),
        "delta.likelihood": LikelihoodRatioMethod(experiment),
    }
    for key, method in methods.items():
        result = method.compute_delta(seed)
        logger.info(f"{method.method_name:<24} delta={result['delta']:.6f} "
                    f"se={result['std_error']:.6f} ({result['time_ms']:.1f} ms)")
        results[key] = result['delta_paths']

    results["delta.analytic"] = AnalyticMethod(experiment).compute_delta(seed)['delta']

    if is_direct_regression:
        result = AADDirectRegressionMethod(experiment, width=width).compute_delta(seed)
        logger.info(f"{result['method']:<24} delta={result['delta']:.6f} "
                    f"alpha_linear={result['alpha_linear']:.6f} ({result['time_ms']:.1f} ms)")
        results["delta.aad.directregression"] = result['delta_paths']
        results["density"] = result['density']
        results["density.x"] = result['density_x']
        results["density.values"] = result['density_values']
        results["density.regression"] = result['density_regression']
        results["delta.aad.directregression.regression.x"] = result['x']
        results["delta.aad.directregression.regression.sensitivity"] = result['sensitivity_regression']
        results["delta.aad.directregression.regression.density"] = result['density_regression_on_x']

    return results
