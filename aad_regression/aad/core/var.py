# aad/core/var.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np

from ...stochastic.random_variable import Operand, RandomVariable
from .config import AADConfig

if TYPE_CHECKING:
    from .engine import Gradient
    from .tape import Tape


class RandomVariableDifferentiable:
    """
    Active random variable for reverse-mode algorithmic differentiation.

    Wraps a primal RandomVariable and the id of the tape node that produced
    it. Every operation appends a node to the same tape and returns a new
    RandomVariableDifferentiable; nothing is mutated after creation.

    Attributes
    ----------
    value : RandomVariable
        Forward (primal) value.
    id : int
        Node id on `tape` (unique and increasing within the tape).
    tape : Tape
        Tape owning the node.
    config : AADConfig
        Configuration of the factory that created the leaf this variable
        descends from; consulted when differentiating `choose`.
    """

    # numpy defers to our reflected operators (ndarray + RandomVariableDifferentiable)
    __array_ufunc__ = None

    def __init__(self, value: RandomVariable, node_id: int, tape: "Tape", config: AADConfig):
        self.value = value
        self.id = node_id
        self.tape = tape
        self.config = config

    def __repr__(self):
        return f"RandomVariableDifferentiable(id={self.id}, {self.value!r})"

    def get_id(self) -> int:
        return self.id

    def get_values(self) -> RandomVariable:
        return self.value

    # ------------------------------------------------------------------ #
    # Statistics of the primal value (not recorded)
    # ------------------------------------------------------------------ #
    @property
    def time(self) -> float:
        return self.value.time

    def is_deterministic(self) -> bool:
        return self.value.is_deterministic()

    def size(self) -> int:
        return self.value.size()

    def get(self, path: int) -> float:
        return self.value.get(path)

    def as_array(self, number_of_paths: Optional[int] = None) -> np.ndarray:
        return self.value.as_array(number_of_paths)

    def double_value(self) -> float:
        return self.value.double_value()

    def average(self) -> float:
        return self.value.average()

    def variance(self) -> float:
        return self.value.variance()

    def standard_deviation(self) -> float:
        return self.value.standard_deviation()

    def standard_error(self) -> float:
        return self.value.standard_error()

    def get_min(self) -> float:
        return self.value.get_min()

    def get_max(self) -> float:
        return self.value.get_max()

    # ------------------------------------------------------------------ #
    # Recorded operations
    # ------------------------------------------------------------------ #
    def add(self, other: Operand) -> "RandomVariableDifferentiable":
        from ..ops.arithmetic import add
        return add(self, other)

    def sub(self, other: Operand) -> "RandomVariableDifferentiable":
        from ..ops.arithmetic import sub
        return sub(self, other)

    def mult(self, other: Operand) -> "RandomVariableDifferentiable":
        from ..ops.arithmetic import mult
        return mult(self, other)

    def div(self, other: Operand) -> "RandomVariableDifferentiable":
        from ..ops.arithmetic import div
        return div(self, other)

    def pow(self, exponent: float) -> "RandomVariableDifferentiable":
        from ..ops.arithmetic import pow
        return pow(self, exponent)

    def squared(self) -> "RandomVariableDifferentiable":
        from ..ops.arithmetic import squared
        return squared(self)

    def exp(self) -> "RandomVariableDifferentiable":
        from ..ops.transcendental import exp
        return exp(self)

    def log(self) -> "RandomVariableDifferentiable":
        from ..ops.transcendental import log
        return log(self)

    def sqrt(self) -> "RandomVariableDifferentiable":
        from ..ops.transcendental import sqrt
        return sqrt(self)

    def choose(self, on_true: Operand, on_false: Operand) -> "RandomVariableDifferentiable":
        from ..ops.special import choose
        return choose(self, on_true, on_false)

    # ------------------------------------------------------------------ #
    # Reverse pass
    # ------------------------------------------------------------------ #
    def get_gradient(self, seed: Optional[Operand] = None) -> "Gradient":
        """
        Adjoints of every node this variable depends on, keyed by node id.
        See `engine.get_gradient`.
        """
        from .engine import get_gradient
        return get_gradient(self, seed=seed)
