# aad/__init__.py
# Algorithmic adjoint differentiation of random variables

from .core.config import AADConfig, DiracDeltaApproximationMethod
from .core.var import RandomVariableDifferentiable
from .core.tape import Tape, global_tape, use_tape
from .core.factory import RandomVariableFactory, RandomVariableDifferentiableFactory
from .core.engine import Gradient, get_gradient

# Registers the Python operators on RandomVariableDifferentiable
from . import ops

__all__ = [
    'AADConfig',
    'DiracDeltaApproximationMethod',
    'RandomVariableDifferentiable',
    'Tape',
    'global_tape',
    'use_tape',
    'RandomVariableFactory',
    'RandomVariableDifferentiableFactory',
    'Gradient',
    'get_gradient',
    'ops',
]
