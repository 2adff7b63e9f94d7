"""
Methods package for digital option delta estimation.

Provides 6 independent estimators of the same delta:
1. Finite-Difference: central bump of the initial value
2. AAD: reverse pass with the direct Dirac delta approximation
3. AAD-Regression: reverse pass with the density regression approximation
4. Likelihood-Ratio: score function weighting of the payoff
5. AAD-Direct-Regression: explicit A0 + E[A | X = 0] * f(0) decomposition
6. Analytic: Black-Scholes closed form (baseline)
"""

from .base_method import DeltaMethodBase
from .finite_difference import FiniteDifferenceMethod
from .aad_method import AADMethod
from .aad_regression_method import AADRegressionMethod
from .likelihood_ratio import LikelihoodRatioMethod
from .direct_regression import AADDirectRegressionMethod
from .analytic import AnalyticMethod

__all__ = [
    'DeltaMethodBase',
    'FiniteDifferenceMethod',
    'AADMethod',
    'AADRegressionMethod',
    'LikelihoodRatioMethod',
    'AADDirectRegressionMethod',
    'AnalyticMethod',
]
