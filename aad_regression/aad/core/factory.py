# aad/core/factory.py
from __future__ import annotations

from typing import Any, Dict, Optional

from ...stochastic.random_variable import RandomVariable
from . import tape as tape_mod  # module access for use_tape() compatibility
from .config import AADConfig
from .node import OperatorType
from .tape import Tape
from .var import RandomVariableDifferentiable


class RandomVariableFactory:
    """Creates plain (non-differentiable) random variables."""

    def create_random_variable(self, value: Any, time: float = 0.0) -> RandomVariable:
        return RandomVariable(value, time=time)

    def create_constant(self, value: Any, time: float = 0.0) -> RandomVariable:
        return RandomVariable(value, time=time)


class RandomVariableDifferentiableFactory(RandomVariableFactory):
    """
    Creates differentiable leaf variables.

    Models receive a factory and build their parameters with it, so switching
    between a plain and an AAD valuation is a matter of passing a different
    factory.

    Args:
        config: AAD configuration attached to every variable created here.
        tape: tape to record on; defaults to the active global tape at
              construction time.
    """

    def __init__(self, config: Optional[AADConfig] = None, tape: Optional[Tape] = None):
        self.config = config if config is not None else AADConfig()
        self.tape = tape if tape is not None else tape_mod.global_tape

    @classmethod
    def from_properties(cls, properties: Dict[str, Any], tape: Optional[Tape] = None):
        return cls(AADConfig.from_properties(properties), tape=tape)

    def create_random_variable(self, value: Any, time: float = 0.0) -> RandomVariableDifferentiable:
        """A new leaf node holding `value`."""
        rv = RandomVariable(value, time=time)
        node_id = self.tape.push_node(op=OperatorType.LEAF, value=rv)
        return RandomVariableDifferentiable(rv, node_id, self.tape, self.config)

    def __repr__(self):
        return f"RandomVariableDifferentiableFactory({self.config!r})"
