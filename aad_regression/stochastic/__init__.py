# stochastic/__init__.py
from .random_variable import RandomVariable

__all__ = ["RandomVariable"]
