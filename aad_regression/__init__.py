"""
aad_regression: adjoint algorithmic differentiation of Monte Carlo random
variables with regression-based approximation of Dirac deltas.

Quick start:
    from aad_regression import DigitalOptionExperiment, get_sensitivity_approximations
    results = get_sensitivity_approximations(DigitalOptionExperiment(), width=0.05, seed=3141)
"""

from .errors import AADError, ShapeMismatchError, SingularRegressionWarning, TapeMismatchError
from .stochastic import RandomVariable
from .aad import (
    AADConfig,
    DiracDeltaApproximationMethod,
    Gradient,
    RandomVariableDifferentiable,
    RandomVariableDifferentiableFactory,
    RandomVariableFactory,
    Tape,
    get_gradient,
    use_tape,
)
from .regression import LinearRegression
from .experiment import DigitalOptionExperiment
from .sensitivities import get_sensitivity_approximations

__version__ = "0.1.0"

__all__ = [
    'AADError',
    'ShapeMismatchError',
    'TapeMismatchError',
    'SingularRegressionWarning',
    'RandomVariable',
    'AADConfig',
    'DiracDeltaApproximationMethod',
    'Gradient',
    'RandomVariableDifferentiable',
    'RandomVariableDifferentiableFactory',
    'RandomVariableFactory',
    'Tape',
    'get_gradient',
    'use_tape',
    'LinearRegression',
    'DigitalOptionExperiment',
    'get_sensitivity_approximations',
]
