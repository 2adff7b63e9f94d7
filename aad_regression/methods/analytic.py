"""
Method 6: Black-Scholes closed form.

Exact digital delta (the reference the Monte Carlo estimators are compared to).
"""

import time
from typing import Dict

from ..analytic.formulas import black_scholes_digital_option_delta
from ..stochastic.random_variable import RandomVariable
from .base_method import DeltaMethodBase


class AnalyticMethod(DeltaMethodBase):
    """Analytic digital delta (baseline)."""

    def __init__(self, experiment):
        super().__init__(experiment)
        self.method_name = "Analytic"

    def compute_delta(self, seed: int = 0) -> Dict:
        start_time = time.time()
        e = self.experiment
        delta = black_scholes_digital_option_delta(
            e.initial_value, e.risk_free_rate, e.volatility, e.option_maturity, e.option_strike
        )
        time_ms = (time.time() - start_time) * 1000
        return self._format_result(RandomVariable(delta), time_ms)
