# aad/core/node.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from ...stochastic.random_variable import RandomVariable


class OperatorType(Enum):
    LEAF = "leaf"
    ADD = "add"
    SUB = "sub"
    MULT = "mult"
    DIV = "div"
    POW = "pow"
    SQUARED = "squared"
    EXP = "exp"
    LOG = "log"
    SQRT = "sqrt"
    CHOOSE = "choose"


@dataclass(frozen=True)
class Node:
    """
    One node on the tape produced by a primitive operation.

    Attributes
    ----------
    id : int
        Index of the node in its tape. Identifiers are handed out in creation
        order, so every operand id is smaller than the id of its consumer.
    op : OperatorType
        Operator that produced the value (LEAF for independent variables).
    value : RandomVariable
        The primal value of the node.
    arguments : Tuple[Optional[int], ...]
        Operand node ids, in operator order. `None` marks a constant operand
        that does not take part in differentiation.
    argument_values : Tuple[RandomVariable, ...]
        Primal values of the operands (constants included), aligned with
        `arguments`; local partial derivatives are evaluated from these.
    parameter : Any
        Operator specific data: the exponent for POW, the AADConfig for CHOOSE.
    """
    id: int
    op: OperatorType
    value: RandomVariable
    arguments: Tuple[Optional[int], ...] = ()
    argument_values: Tuple[RandomVariable, ...] = ()
    parameter: Any = None

    @property
    def is_leaf(self) -> bool:
        return self.op is OperatorType.LEAF
