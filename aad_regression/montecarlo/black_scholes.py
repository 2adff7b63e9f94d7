"""
Black-Scholes model and its Monte Carlo simulation.

    dS = r S dt + sigma S dW,   N(t) = exp(r t)

The simulation steps the log of S with an Euler scheme, which is exact for
constant coefficients:

    S(t_{i+1}) = S(t_i) * exp((r - sigma^2 / 2) dt + sigma dW)

The model parameters are created through a random variable factory. With a
RandomVariableDifferentiableFactory they become leaves of the AAD tape and
every simulated quantity is recorded, so gradients of a product value with
respect to the initial value, rate or volatility come from one reverse pass.
"""

from typing import List, Optional

from ..aad.core.factory import RandomVariableFactory
from .brownian_motion import BrownianMotion


class BlackScholesModel:
    """
    Attributes:
        initial_value, risk_free_rate, volatility: model parameters as
            (possibly differentiable) random variables created by `factory`
    """

    def __init__(self, initial_value: float, risk_free_rate: float, volatility: float,
                 random_variable_factory: Optional[RandomVariableFactory] = None):
        if volatility < 0:
            raise ValueError(f"volatility must be non-negative, got {volatility}")
        self.random_variable_factory = random_variable_factory or RandomVariableFactory()
        self._parameters = {
            "initial_value": float(initial_value),
            "risk_free_rate": float(risk_free_rate),
            "volatility": float(volatility),
        }
        factory = self.random_variable_factory
        self.initial_value = factory.create_random_variable(initial_value)
        self.risk_free_rate = factory.create_random_variable(risk_free_rate)
        self.volatility = factory.create_random_variable(volatility)

    def get_initial_value(self):
        return self.initial_value

    def get_numeraire(self, time: float):
        """Bank account N(t) = exp(r t)."""
        return self.risk_free_rate.mult(time).exp()

    def get_clone_with_modified_data(self, **changes) -> "BlackScholesModel":
        """
        New model with some parameters replaced, e.g.
        model.get_clone_with_modified_data(initial_value=1.01).
        """
        unknown = set(changes) - set(self._parameters)
        if unknown:
            raise ValueError(f"Unknown model parameters: {sorted(unknown)}")
        parameters = dict(self._parameters, **changes)
        return BlackScholesModel(random_variable_factory=self.random_variable_factory, **parameters)

    def __repr__(self):
        p = self._parameters
        return (f"BlackScholesModel(S0={p['initial_value']}, r={p['risk_free_rate']}, "
                f"sigma={p['volatility']})")


class MonteCarloAssetModel:
    """Monte Carlo simulation of a single-asset BlackScholesModel."""

    def __init__(self, model: BlackScholesModel, brownian_motion: BrownianMotion):
        self.model = model
        self.brownian_motion = brownian_motion
        self._asset_values: Optional[List] = None

    @property
    def time_discretization(self):
        return self.brownian_motion.time_discretization

    @property
    def number_of_paths(self) -> int:
        return self.brownian_motion.number_of_paths

    def get_model(self) -> BlackScholesModel:
        return self.model

    def get_brownian_motion(self) -> BrownianMotion:
        return self.brownian_motion

    def _simulate(self) -> List:
        model = self.model
        discretization = self.time_discretization
        drift = model.risk_free_rate.sub(model.volatility.squared().mult(0.5))

        values = [model.initial_value]
        for i in range(discretization.number_of_time_steps):
            dt = discretization.get_time_step(i)
            increment = drift.mult(dt).add(
                model.volatility.mult(self.brownian_motion.get_brownian_increment(i, 0))
            )
            values.append(values[-1].mult(increment.exp()))
        return values

    def get_asset_value(self, time: float, asset_index: int = 0):
        """Simulated S(time) on every path."""
        if asset_index != 0:
            raise ValueError(f"Black-Scholes model has a single asset, got index {asset_index}")
        if self._asset_values is None:
            self._asset_values = self._simulate()
        return self._asset_values[self.time_discretization.get_time_index(time)]

    def get_numeraire(self, time: float):
        return self.model.get_numeraire(time)

    def get_clone_with_modified_data(self, **changes) -> "MonteCarloAssetModel":
        """Same Brownian motion, model parameters replaced."""
        return MonteCarloAssetModel(self.model.get_clone_with_modified_data(**changes), self.brownian_motion)
