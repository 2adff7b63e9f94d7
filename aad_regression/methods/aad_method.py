"""
Method 2: AAD with a direct Dirac delta approximation

One reverse pass through the recorded simulation. The derivative of the
indicator in the digital payoff is a Dirac delta; the reverse pass replaces
it with the localizer 1{|S(T) - K| < eps/2} / eps, eps = width * std(S(T) - K).

The estimator is unbiased only in the limit eps -> 0, and its variance grows
like 1 / eps.
"""

import logging
import time
from typing import Dict, Optional

from ..aad.core.config import AADConfig
from ..aad.core.factory import RandomVariableDifferentiableFactory
from ..aad.core.tape import use_tape
from ..montecarlo.brownian_motion import BrownianMotion
from ..stochastic.random_variable import RandomVariable
from .base_method import DeltaMethodBase

logger = logging.getLogger(__name__)


def get_aad_delta(experiment, config: AADConfig, brownian_motion: BrownianMotion) -> RandomVariable:
    """
    Per-path adjoint of the digital option value with respect to the initial
    value, recorded on a fresh tape with the given AAD configuration.
    """
    with use_tape() as tape:
        factory = RandomVariableDifferentiableFactory(config)
        model = experiment.get_model(factory, brownian_motion)
        value = experiment.get_option().get_value(0.0, model)

        gradient = value.get_gradient()
        delta_paths = gradient.get_adjoint(model.get_model().get_initial_value())
        logger.debug(f"Tape with {len(tape)} nodes, {len(gradient)} adjoints")
    return delta_paths


class AADMethod(DeltaMethodBase):
    """AAD delta with the DIRECT Dirac delta approximation."""

    def __init__(self, experiment, width: float = 0.05, config: Optional[AADConfig] = None):
        super().__init__(experiment)
        self.method_name = "AAD"
        self.config = config if config is not None else AADConfig(
            dirac_delta_approximation_width_per_std_dev=width
        )

    def compute_delta(self, seed: int) -> Dict:
        start_time = time.time()
        delta_paths = get_aad_delta(self.experiment, self.config,
                                    self.experiment.get_brownian_motion(seed))
        time_ms = (time.time() - start_time) * 1000
        return self._format_result(delta_paths, time_ms)
