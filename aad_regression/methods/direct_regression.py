"""
Method 5: AAD with explicit regression of the adjoint (research decomposition)

The digital delta has the form

    delta = E[A0] + E[A * delta(X)],   X = S(T) - K

where A0 is the adjoint without the indicator derivative (width 0) and A is
the coefficient of the Dirac delta, recovered as A = A_inf - A0 from a run
with a flat weight (infinite width). Then

    E[A * delta(X)] = E[A | X = 0] * f(0)

and both factors are estimated explicitly:
    - f(0) from the regression of window densities on the offset sweep,
    - E[A | X = 0] from a regression of A restricted to the localizer window.

The method exposes all intermediate random variables so that they can be
inspected or plotted.
"""

import logging
import time
from typing import Dict, Sequence

import numpy as np

from ..aad.core.config import AADConfig
from ..aad.core.dirac_delta import get_density_on, get_density_regression, get_localizer
from ..aad.core.factory import RandomVariableFactory
from ..regression.linear_regression import LinearRegression, polynomial_basis
from ..stochastic.random_variable import RandomVariable
from .aad_method import get_aad_delta
from .base_method import DeltaMethodBase

logger = logging.getLogger(__name__)


class AADDirectRegressionMethod(DeltaMethodBase):
    """
    Explicit A0 + E[A | X = 0] * f(0) decomposition of the AAD delta.

    Args:
        experiment: the digital option experiment.
        width: localizer width in standard deviations of X.
        density_width: half-width of the density sweep in standard deviations.
        density_step: spacing of the density sweep in standard deviations.
        density_regression_powers: powers of the window offset for the density fit.
        sensitivity_regression_powers: powers of X, each multiplied by the
            localizer, used as regressors for A. The conditional expectation
            at X = 0 is the coefficient of power 0.
    """

    def __init__(self, experiment, width: float = 0.05, density_width: float = 0.5,
                 density_step: float = 0.01,
                 density_regression_powers: Sequence[int] = (0, 1),
                 sensitivity_regression_powers: Sequence[int] = (0,)):
        super().__init__(experiment)
        if not width > 0 or np.isinf(width):
            raise ValueError(f"width must be positive and finite, got {width}")
        sensitivity_regression_powers = tuple(int(p) for p in sensitivity_regression_powers)
        if 0 not in sensitivity_regression_powers:
            raise ValueError(
                f"sensitivity_regression_powers must contain 0, got {sensitivity_regression_powers}"
            )
        self.method_name = "AAD-Direct-Regression"
        self.width = width
        self.density_config = AADConfig(
            dirac_delta_approximation_density_regression_width_per_std_dev=density_width,
            density_regression_step_per_std_dev=density_step,
            density_regression_powers=density_regression_powers,
        )
        self.sensitivity_regression_powers = sensitivity_regression_powers

    def compute_delta(self, seed: int) -> Dict:
        start_time = time.time()
        e = self.experiment
        brownian_motion = e.get_brownian_motion(seed)

        # A0: no contribution from the indicator, A_inf: flat unit weight
        a0 = get_aad_delta(e, AADConfig(dirac_delta_approximation_width_per_std_dev=0.0),
                           brownian_motion)
        a_inf = get_aad_delta(e, AADConfig(dirac_delta_approximation_width_per_std_dev=float("inf")),
                              brownian_motion)
        a = a_inf.sub(a0)

        model = e.get_model(RandomVariableFactory(), brownian_motion)
        x = model.get_asset_value(e.option_maturity).sub(e.option_strike)

        # Density of X at 0
        powers = self.density_config.density_regression_powers
        density_x, density_values, density_coefficients = get_density_regression(x, self.density_config)
        density = get_density_on(RandomVariable(0.0), density_coefficients, powers).double_value()
        density_regression = LinearRegression(
            polynomial_basis(RandomVariable(density_x), powers)
        ).get_regression_value(density_coefficients)
        density_regression_on_x = get_density_on(x, density_coefficients, powers)

        # Conditional expectation of A at X = 0
        localizer = get_localizer(x, self.width * x.standard_deviation())
        a_tilde = a.mult(localizer)
        x_tilde = x.mult(localizer)

        x_tilde_mean = x_tilde.average()
        x_tilde_variance = x_tilde.squared().average() - x_tilde_mean ** 2
        if x_tilde_variance > 0.0:
            alpha_linear = (x_tilde.squared().average() * a_tilde.average()
                            - x_tilde_mean * x_tilde.mult(a_tilde).average()) / x_tilde_variance
        else:
            alpha_linear = float("nan")

        regressors = [localizer if k == 0 else localizer.mult(x.pow(k))
                      for k in self.sensitivity_regression_powers]
        sensitivity_coefficients = LinearRegression(regressors).get_regression_coefficients(a_tilde)
        sensitivity_regression = RandomVariable(0.0)
        for c, k in zip(sensitivity_coefficients, self.sensitivity_regression_powers):
            term = RandomVariable(1.0) if k == 0 else x.pow(k)
            sensitivity_regression = sensitivity_regression.add(term.mult(float(c)))

        conditional_adjoint = float(sensitivity_coefficients[self.sensitivity_regression_powers.index(0)])
        delta_paths = a0.add(conditional_adjoint * density)

        logger.debug(
            f"E[A | X = 0] = {conditional_adjoint:.6f}, f(0) = {density:.6f}, "
            f"alpha_linear = {alpha_linear:.6f}"
        )

        time_ms = (time.time() - start_time) * 1000
        return self._format_result(
            delta_paths, time_ms,
            density=density,
            density_x=density_x,
            density_values=density_values,
            density_regression=density_regression,
            density_regression_on_x=density_regression_on_x,
            sensitivity_regression=sensitivity_regression,
            x=x,
            alpha_linear=alpha_linear,
        )
