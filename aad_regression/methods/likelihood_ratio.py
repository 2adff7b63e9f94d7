"""
Method 4: Likelihood ratio

Differentiates the density of S(T) instead of the payoff; the benchmark for
discontinuous payoffs in the Black-Scholes model.
"""

import time
from typing import Dict

from ..aad.core.factory import RandomVariableFactory
from ..montecarlo.products import DigitalOptionDeltaLikelihood
from .base_method import DeltaMethodBase


class LikelihoodRatioMethod(DeltaMethodBase):
    """Likelihood ratio (score function) delta."""

    def __init__(self, experiment):
        super().__init__(experiment)
        self.method_name = "Likelihood-Ratio"

    def compute_delta(self, seed: int) -> Dict:
        start_time = time.time()
        e = self.experiment
        model = e.get_model(RandomVariableFactory(), e.get_brownian_motion(seed))
        product = DigitalOptionDeltaLikelihood(e.option_maturity, e.option_strike)
        delta_paths = product.get_value(0.0, model)

        time_ms = (time.time() - start_time) * 1000
        return self._format_result(delta_paths, time_ms)
