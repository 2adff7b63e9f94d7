"""
Method 1: Finite difference

Central difference of the digital option value under a bump of the initial
value, on the same Brownian paths:

    delta ≈ (V(S0 + eps/2) - V(S0 - eps/2)) / eps,   eps = bump * std(S(T) - K)
"""

import logging
import time
from typing import Dict

from ..aad.core.factory import RandomVariableFactory
from .base_method import DeltaMethodBase

logger = logging.getLogger(__name__)


class FiniteDifferenceMethod(DeltaMethodBase):
    """Central finite difference on the initial value."""

    def __init__(self, experiment, bump_per_std_dev: float = 0.05):
        super().__init__(experiment)
        if bump_per_std_dev <= 0:
            raise ValueError(f"bump_per_std_dev must be positive, got {bump_per_std_dev}")
        self.method_name = "Finite-Difference"
        self.bump_per_std_dev = bump_per_std_dev

    def compute_delta(self, seed: int) -> Dict:
        start_time = time.time()
        e = self.experiment
        option = e.get_option()
        model = e.get_model(RandomVariableFactory(), e.get_brownian_motion(seed))

        underlying = model.get_asset_value(e.option_maturity).sub(e.option_strike)
        epsilon = self.bump_per_std_dev * underlying.standard_deviation()
        logger.debug(f"Finite difference bump {epsilon:.6g}")

        value_up = option.get_value(0.0, model.get_clone_with_modified_data(
            initial_value=e.initial_value + epsilon / 2.0))
        value_down = option.get_value(0.0, model.get_clone_with_modified_data(
            initial_value=e.initial_value - epsilon / 2.0))
        delta_paths = value_up.sub(value_down).div(epsilon)

        time_ms = (time.time() - start_time) * 1000
        return self._format_result(delta_paths, time_ms, epsilon=epsilon)
