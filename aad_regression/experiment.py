"""
Parameters of the digital option delta experiment.
"""

from dataclasses import dataclass
from typing import Optional

from .aad.core.factory import RandomVariableFactory
from .montecarlo import (
    BlackScholesModel,
    BrownianMotion,
    DigitalOption,
    MonteCarloAssetModel,
    TimeDiscretization,
)


@dataclass(frozen=True)
class DigitalOptionExperiment:
    """
    Immutable description of a Black-Scholes digital option simulation.

    Attributes
    ----------
    initial_value, risk_free_rate, volatility : float
        Model properties.
    number_of_paths, number_of_time_steps, delta_t :
        Process discretization properties.
    option_maturity, option_strike : float
        Product properties.
    stratified : bool
        Latin-hypercube stratified Brownian increments instead of plain
        pseudo-random draws.
    """

    initial_value: float = 1.0
    risk_free_rate: float = 0.05
    volatility: float = 0.50

    number_of_paths: int = 200000
    number_of_time_steps: int = 1
    delta_t: float = 1.0

    option_maturity: float = 1.0
    option_strike: float = 1.05

    stratified: bool = False

    def __post_init__(self) -> None:
        if self.initial_value <= 0:
            raise ValueError(f"initial_value must be positive, got {self.initial_value}")
        if self.volatility <= 0:
            raise ValueError(f"volatility must be positive, got {self.volatility}")
        if self.number_of_paths < 2:
            raise ValueError(f"number_of_paths must be >= 2, got {self.number_of_paths}")
        horizon = self.number_of_time_steps * self.delta_t
        if not 0 < self.option_maturity <= horizon + 1e-12:
            raise ValueError(
                f"option_maturity must lie in (0, {horizon}], got {self.option_maturity}"
            )

    def get_brownian_motion(self, seed: int) -> BrownianMotion:
        time_discretization = TimeDiscretization(0.0, self.number_of_time_steps, self.delta_t)
        return BrownianMotion(time_discretization, 1, self.number_of_paths, seed,
                              stratified=self.stratified)

    def get_model(self, random_variable_factory: Optional[RandomVariableFactory],
                  brownian_motion: BrownianMotion) -> MonteCarloAssetModel:
        """
        Monte Carlo Black-Scholes model on `brownian_motion`. The factory
        decides whether the model parameters are AAD leaves.
        """
        model = BlackScholesModel(self.initial_value, self.risk_free_rate, self.volatility,
                                  random_variable_factory)
        return MonteCarloAssetModel(model, brownian_motion)

    def get_option(self) -> DigitalOption:
        return DigitalOption(self.option_maturity, self.option_strike)
