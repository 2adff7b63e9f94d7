"""
Base abstract class for digital option delta estimators.

All methods estimate

    delta = ∂/∂S0 E[ exp(-rT) 1{S(T) >= K} ]

on the same DigitalOptionExperiment, and return their per-path estimator so
that bias and variance can be compared path by path.
"""

from abc import ABC, abstractmethod
from typing import Dict

from ..experiment import DigitalOptionExperiment
from ..stochastic.random_variable import RandomVariable


class DeltaMethodBase(ABC):
    """
    Abstract base class for all delta estimators.

    Attributes:
        experiment (DigitalOptionExperiment): model, discretization and product
        method_name (str): Name of the method
    """

    def __init__(self, experiment: DigitalOptionExperiment):
        self.experiment = experiment
        self.method_name = "Base"

    @abstractmethod
    def compute_delta(self, seed: int) -> Dict:
        """
        Estimate the delta on the Brownian motion generated from `seed`.

        Returns:
            Dictionary with standard format:
            {
                'delta': float,                 # Monte Carlo estimate (path average)
                'delta_paths': RandomVariable,  # Per-path estimator
                'std_error': float,             # Standard error of the average
                'time_ms': float,               # Computation time in milliseconds
                'method': str                   # Method name
            }
        """
        pass

    def _format_result(self, delta_paths: RandomVariable, time_ms: float, **extra) -> Dict:
        result = {
            'delta': delta_paths.average(),
            'delta_paths': delta_paths,
            'std_error': delta_paths.standard_error(),
            'time_ms': time_ms,
            'method': self.method_name,
        }
        result.update(extra)
        return result

    def __repr__(self):
        return f"{self.method_name}(paths={self.experiment.number_of_paths})"
