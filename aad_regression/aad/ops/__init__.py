# aad/ops/__init__.py

# Ensure operator overloading is registered
from . import arithmetic
from . import transcendental
from . import special

# Convenience re-exports so users can do: from aad_regression.aad.ops import mult, exp, ...
from .arithmetic import add, sub, mult, div, neg, pow, squared
from .transcendental import exp, log, sqrt
from .special import choose

__all__ = [
    "add", "sub", "mult", "div", "neg", "pow", "squared",
    "exp", "log", "sqrt",
    "choose",
]
