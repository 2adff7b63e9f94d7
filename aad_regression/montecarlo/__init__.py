"""
Monte Carlo collaborators: time grid, Brownian motion, Black-Scholes model
and the digital option products.
"""

from .brownian_motion import BrownianMotion, TimeDiscretization
from .black_scholes import BlackScholesModel, MonteCarloAssetModel
from .products import DigitalOption, DigitalOptionDeltaLikelihood

__all__ = [
    'TimeDiscretization',
    'BrownianMotion',
    'BlackScholesModel',
    'MonteCarloAssetModel',
    'DigitalOption',
    'DigitalOptionDeltaLikelihood',
]
