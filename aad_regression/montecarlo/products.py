"""
Digital option products valued on a MonteCarloAssetModel.
"""

import numpy as np

from ..stochastic.random_variable import RandomVariable


class DigitalOption:
    """
    Pays 1 at maturity if S(T) >= K, else 0.

    `get_value` returns the per-path value discounted to the evaluation time,
    payoff * N(t) / N(T); its average is the Monte Carlo price. On a model
    built with a differentiable factory the result is differentiable and the
    indicator is recorded as a `choose` node.
    """

    def __init__(self, maturity: float, strike: float, asset_index: int = 0):
        self.maturity = maturity
        self.strike = strike
        self.asset_index = asset_index

    def get_value(self, evaluation_time: float, model):
        underlying_at_maturity = model.get_asset_value(self.maturity, self.asset_index)
        values = underlying_at_maturity.sub(self.strike).choose(1.0, 0.0)

        values = values.div(model.get_numeraire(self.maturity))
        values = values.mult(model.get_numeraire(evaluation_time))
        return values

    def __repr__(self):
        return f"DigitalOption(maturity={self.maturity}, strike={self.strike})"


class DigitalOptionDeltaLikelihood:
    """
    Likelihood ratio estimator of the digital option delta.

    The payoff is weighted with the score of the log-normal density of S(T):

        ∂/∂S0 log p(S_T) = (log(S_T / S0) - (r - sigma^2 / 2) T) / (sigma^2 T S0)

    which needs no derivative of the payoff itself.
    """

    def __init__(self, maturity: float, strike: float):
        self.maturity = maturity
        self.strike = strike

    def get_value(self, evaluation_time: float, model) -> RandomVariable:
        """Per-path likelihood ratio delta (average it for the estimate)."""
        bs = model.get_model()
        initial_value = bs.get_initial_value().double_value()
        r = bs.risk_free_rate.double_value()
        sigma = bs.volatility.double_value()
        T = self.maturity - evaluation_time

        underlying = RandomVariable(model.get_asset_value(self.maturity).as_array())
        payoff = underlying.sub(self.strike).choose(1.0, 0.0).mult(np.exp(-r * T))

        score = underlying.div(initial_value).log().sub((r - 0.5 * sigma * sigma) * T)
        score = score.div(sigma * sigma * T * initial_value)
        return payoff.mult(score)
