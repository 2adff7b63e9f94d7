# aad/core/dirac_delta.py
"""
Approximations of the Dirac delta arising from differentiating `choose`.

For Y = choose(X, A, B) = A * 1{X >= 0} + B * 1{X < 0} the derivative with
respect to X is (A - B) * delta(X). The expectation E[g * delta(X)] is what
a Monte Carlo sensitivity needs, so the delta is replaced by a per-path
weight w whose expectation against smooth g approximates it:

    DIRECT                      w = L / eps
    REGRESSION_ON_DISTRIBUTION  w = L / E[L] * f(X)

where L is the localizer 1{-eps/2 <= X < eps/2}, eps is the configured width
times the standard deviation of X, and f is a density of X obtained by
regressing empirical window densities. The first gives
E[g L] / eps ~ E[g | X = 0] * f(0) with the density estimated by counting
paths in a single narrow window; the second keeps the conditional
expectation from the narrow window but takes the density from a regression
over a much wider sweep, which removes most of the counting noise.
"""

import logging
from typing import Sequence, Tuple

import numpy as np

from ...regression.linear_regression import LinearRegression, polynomial_basis
from ...stochastic.random_variable import RandomVariable
from .config import AADConfig, DiracDeltaApproximationMethod

logger = logging.getLogger(__name__)


def get_localizer(x: RandomVariable, width: float) -> RandomVariable:
    """Indicator of the window [-width/2, width/2) around X = 0."""
    lower = x.add(width / 2.0).choose(1.0, 0.0)
    upper = x.sub(width / 2.0).choose(0.0, 1.0)
    return lower.mult(upper)


def get_density_samples(x: RandomVariable, half_width: float,
                        step: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Empirical densities of X in windows adjacent to zero.

    For offsets s = k * step (|s| <= half_width, s != 0) the window is
    [-s, 0) for s > 0 and [0, -s) for s < 0; its density is the fraction of
    paths inside divided by |s|. Offsets and widths are in units of X.

    Returns
    -------
    (offsets, densities)
    """
    if not step > 0.0:
        raise ValueError(f"Density sweep step must be positive, got {step}")
    number_of_steps = int(round(half_width / step))
    steps = np.arange(-number_of_steps, number_of_steps + 1)
    offsets = steps[steps != 0] * step

    densities = np.empty_like(offsets)
    for i, offset in enumerate(offsets):
        mask_pos = x.add(max(offset, 0.0)).choose(1.0, 0.0)
        mask_neg = x.add(min(offset, 0.0)).choose(0.0, 1.0)
        densities[i] = mask_pos.mult(mask_neg).average() / abs(offset)
    return offsets, densities


def get_density_regression(x: RandomVariable, config: AADConfig) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Regress the window densities of X on powers of the window offset.

    Returns
    -------
    (offsets, densities, coefficients), with `coefficients` aligned with
    `config.density_regression_powers`.
    """
    std_dev = x.standard_deviation()
    offsets, densities = get_density_samples(
        x,
        half_width=config.dirac_delta_approximation_density_regression_width_per_std_dev * std_dev,
        step=config.density_regression_step_per_std_dev * std_dev,
    )
    basis = polynomial_basis(RandomVariable(offsets), config.density_regression_powers)
    coefficients = LinearRegression(basis).get_regression_coefficients(RandomVariable(densities))
    return offsets, densities, coefficients


def get_density_on(x: RandomVariable, coefficients: Sequence[float], powers: Sequence[int]) -> RandomVariable:
    """
    Point density at X from window-density regression coefficients.

    A window adjacent to zero of signed offset s has mean density
    m(s) = sum_k a_k (-1)^k s^k / (k+1) when f(x) = sum_k a_k x^k, so the fit
    m(s) = sum_k c_k s^k maps to f(x) = sum_k c_k (k+1) (-x)^k.
    """
    density = RandomVariable(0.0)
    for c, k in zip(coefficients, powers):
        term = RandomVariable(1.0) if k == 0 else x.mult(-1.0).pow(k)
        density = density.add(term.mult(float(c) * (k + 1)))
    return density


def get_dirac_delta_weight(x: RandomVariable, config: AADConfig) -> RandomVariable:
    """Per-path weight replacing delta(X) in the reverse pass."""
    if config.is_infinite_width:
        return RandomVariable(1.0)

    epsilon = config.dirac_delta_approximation_width_per_std_dev * x.standard_deviation()
    if not epsilon > 0.0:
        return RandomVariable(0.0)

    localizer = get_localizer(x, epsilon)

    if config.dirac_delta_approximation_method is DiracDeltaApproximationMethod.DIRECT:
        return localizer.div(epsilon)

    localizer_mass = localizer.average()
    if localizer_mass == 0.0:
        logger.debug(f"No paths inside the localizer window of width {epsilon:.3g}")
        return RandomVariable(0.0)

    _, _, coefficients = get_density_regression(x, config)
    density = get_density_on(x, coefficients, config.density_regression_powers)
    logger.debug(
        f"Density regression: coefficients={np.round(coefficients, 6).tolist()}, "
        f"localizer mass={localizer_mass:.4g}"
    )
    return localizer.div(localizer_mass).mult(density)


def dirac_delta_partial(x: RandomVariable, on_true: RandomVariable,
                        on_false: RandomVariable, config: AADConfig) -> RandomVariable:
    """∂ choose(X, A, B) / ∂X ≈ (A - B) * w(X)."""
    return on_true.sub(on_false).mult(get_dirac_delta_weight(x, config))
