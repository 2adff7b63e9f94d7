# aad/core/__init__.py

"""
Core public API of the AAD package.

Exports:
    RandomVariableDifferentiable        : random variable recorded on a tape.
    RandomVariableDifferentiableFactory : creates differentiable leaves.
    RandomVariableFactory               : creates plain random variables.
    AADConfig                           : Dirac delta approximation settings.
    DiracDeltaApproximationMethod       : DIRECT / REGRESSION_ON_DISTRIBUTION.
    Tape, global_tape, use_tape         : the computation record.
    get_gradient, Gradient              : reverse pass and its result.
"""

from .config import AADConfig, DiracDeltaApproximationMethod
from .var import RandomVariableDifferentiable
from .tape import Tape, global_tape, use_tape
from .factory import RandomVariableFactory, RandomVariableDifferentiableFactory
from .engine import Gradient, get_gradient

__all__ = [
    "AADConfig", "DiracDeltaApproximationMethod",
    "RandomVariableDifferentiable",
    "Tape", "global_tape", "use_tape",
    "RandomVariableFactory", "RandomVariableDifferentiableFactory",
    "Gradient", "get_gradient",
]
