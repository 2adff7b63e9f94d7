"""
Least-squares regression on random variables.

Given basis functions B_1..B_k and a target Y (all on the same paths), find
coefficients c minimising

    sum over paths of (Y - sum_i c_i * B_i)^2

by solving the normal equations (B^T B) c = B^T Y. This is a plain numerical
building block: nothing here is recorded on an AAD tape.
"""

import logging
import warnings
from typing import Sequence

import numpy as np
from numpy.linalg import LinAlgError
from scipy.linalg import solve

from ..errors import SingularRegressionWarning
from ..stochastic.random_variable import Operand, RandomVariable

logger = logging.getLogger(__name__)

# Above this condition number the normal equations are not trusted.
MAX_CONDITION_NUMBER = 1e14


def polynomial_basis(x: Operand, powers: Sequence[int]) -> list:
    """Basis functions x^p for each p in `powers` (x^0 is the constant one)."""
    x = RandomVariable.of(x)
    return [x.mult(0.0).add(1.0) if p == 0 else x.pow(p) for p in powers]


class LinearRegression:
    """
    Linear regression of a target random variable on a list of basis functions.

    Args:
        basis_functions: random variables (or scalars, broadcast to all paths)
    """

    def __init__(self, basis_functions: Sequence[Operand]):
        if len(basis_functions) == 0:
            raise ValueError("LinearRegression requires at least one basis function")
        self.basis_functions = [RandomVariable.of(b) for b in basis_functions]

    def _design_matrix(self, number_of_paths: int) -> np.ndarray:
        return np.column_stack([b.as_array(number_of_paths) for b in self.basis_functions])

    def get_regression_coefficients(self, target: Operand) -> np.ndarray:
        """
        Coefficients of the least-squares fit of `target` on the basis.

        Falls back to the pseudo-inverse if the normal equations are singular or
        badly conditioned. If even that fails, a SingularRegressionWarning is
        emitted and zero coefficients are returned.
        """
        target = RandomVariable.of(target)
        number_of_paths = max([target.size()] + [b.size() for b in self.basis_functions])

        X = self._design_matrix(number_of_paths)
        y = target.as_array(number_of_paths)
        if not (np.all(np.isfinite(X)) and np.all(np.isfinite(y))):
            raise ValueError("Regression inputs contain non-finite values")

        XtX = X.T @ X
        Xty = X.T @ y
        try:
            if not np.linalg.cond(XtX) <= MAX_CONDITION_NUMBER:
                raise LinAlgError("normal equations are ill-conditioned")
            return solve(XtX, Xty, assume_a="pos")
        except LinAlgError as e:
            logger.debug(f"Normal equations failed ({e}); using pseudo-inverse")

        try:
            return np.linalg.pinv(X) @ y
        except LinAlgError as e:
            warnings.warn(
                f"Regression design matrix could not be conditioned ({e}); returning zero coefficients",
                SingularRegressionWarning,
            )
            logger.warning(f"Singular regression with {X.shape[1]} basis functions: {e}")
            return np.zeros(X.shape[1])

    def get_regression_value(self, coefficients: Sequence[float]) -> RandomVariable:
        """The fitted random variable sum_i c_i * B_i."""
        if len(coefficients) != len(self.basis_functions):
            raise ValueError(
                f"Expected {len(self.basis_functions)} coefficients, got {len(coefficients)}"
            )
        value = RandomVariable(0.0)
        for c, b in zip(coefficients, self.basis_functions):
            value = value.add(b.mult(float(c)))
        return value
