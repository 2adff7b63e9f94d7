"""
Closed-form Black-Scholes formulas for the digital (cash-or-nothing) option.

Used as the reference value for the Monte Carlo sensitivities.
"""

import numpy as np
from scipy.stats import norm


def _d2(initial_stock_value, risk_free_rate, volatility, option_maturity, option_strike):
    sqrt_T = np.sqrt(option_maturity)
    return (np.log(initial_stock_value / option_strike)
            + (risk_free_rate - 0.5 * volatility**2) * option_maturity) / (volatility * sqrt_T)


def black_scholes_digital_option_value(initial_stock_value: float, risk_free_rate: float,
                                       volatility: float, option_maturity: float,
                                       option_strike: float) -> float:
    """exp(-rT) N(d2): value of a claim paying 1 if S(T) >= K."""
    if option_maturity <= 0.0 or volatility <= 0.0:
        forward = initial_stock_value * np.exp(risk_free_rate * max(option_maturity, 0.0))
        discount = np.exp(-risk_free_rate * max(option_maturity, 0.0))
        return float(discount if forward >= option_strike else 0.0)

    d2 = _d2(initial_stock_value, risk_free_rate, volatility, option_maturity, option_strike)
    return float(np.exp(-risk_free_rate * option_maturity) * norm.cdf(d2))


def black_scholes_digital_option_delta(initial_stock_value: float, risk_free_rate: float,
                                       volatility: float, option_maturity: float,
                                       option_strike: float) -> float:
    """exp(-rT) phi(d2) / (S0 sigma sqrt(T)); zero for expired or deterministic underlyings."""
    if option_maturity <= 0.0 or volatility <= 0.0:
        return 0.0

    d2 = _d2(initial_stock_value, risk_free_rate, volatility, option_maturity, option_strike)
    return float(np.exp(-risk_free_rate * option_maturity) * norm.pdf(d2)
                 / (initial_stock_value * volatility * np.sqrt(option_maturity)))
