# aad/core/engine.py
from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np

from ...stochastic.random_variable import Operand, RandomVariable
from .dirac_delta import dirac_delta_partial
from .node import Node, OperatorType
from .var import RandomVariableDifferentiable

logger = logging.getLogger(__name__)

ONE = RandomVariable(1.0)
MINUS_ONE = RandomVariable(-1.0)


class Gradient(dict):
    """
    Node id -> accumulated adjoint (RandomVariable).

    Ids that are absent did not influence the output; looking them up yields
    a zero sensitivity instead of a KeyError.
    """

    def __missing__(self, key):
        return RandomVariable(0.0)

    def get(self, key, default=None):
        if key in self:
            return self[key]
        return RandomVariable(0.0) if default is None else default

    def get_adjoint(self, variable: Union[RandomVariableDifferentiable, int]) -> RandomVariable:
        """Adjoint for a variable or a node id."""
        key = variable.get_id() if isinstance(variable, RandomVariableDifferentiable) else int(variable)
        return self[key]


def partial_derivative(node: Node, argument_index: int) -> RandomVariable:
    """
    Local partial ∂(node.value)/∂(argument `argument_index`), evaluated on
    the operand values stored with the node.
    """
    op = node.op
    args = node.argument_values

    # ---------- Linear ops ----------
    if op is OperatorType.ADD:
        return ONE
    if op is OperatorType.SUB:
        return ONE if argument_index == 0 else MINUS_ONE

    # ---------- Product / quotient ----------
    if op is OperatorType.MULT:
        # ∂(x*y)/∂x = y, ∂(x*y)/∂y = x
        return args[1 - argument_index]
    if op is OperatorType.DIV:
        # ∂(x/y)/∂x = 1/y, ∂(x/y)/∂y = -x/y^2
        x, y = args
        if argument_index == 0:
            return ONE.div(y)
        return x.div(y.squared()).mult(-1.0)

    # ---------- Unary ----------
    if op is OperatorType.POW:
        n = node.parameter
        return args[0].pow(n - 1.0).mult(n)
    if op is OperatorType.SQUARED:
        return args[0].mult(2.0)
    if op is OperatorType.EXP:
        return node.value
    if op is OperatorType.LOG:
        return ONE.div(args[0])
    if op is OperatorType.SQRT:
        return RandomVariable(0.5).div(node.value)

    # ---------- Indicator ----------
    if op is OperatorType.CHOOSE:
        x, on_true, on_false = args
        if argument_index == 0:
            return dirac_delta_partial(x, on_true, on_false, node.parameter)
        # The branches are selected, not smoothed
        if argument_index == 1:
            return x.choose(1.0, 0.0)
        return x.choose(0.0, 1.0)

    raise ValueError(f"No derivative rule for operator {op} (node {node.id})")


def get_gradient(output: RandomVariableDifferentiable, seed: Optional[Operand] = None) -> Gradient:
    """
    Run a single reverse pass from `output`.

    Args:
        output: the differentiable variable to differentiate.
        seed: adjoint of the output; defaults to one on every path.

    Returns:
        Gradient mapping the id of every node reached from `output` (the output
        itself included) to its adjoint.

    Notes:
        - Operand ids are always smaller than their consumer's id, so sweeping
          ids downwards visits a node only after all its consumers.
        - For each node: adj[arg] += adj[node] * ∂node/∂arg.
    """
    if seed is None:
        seed = ONE if output.is_deterministic() else RandomVariable(np.ones(output.size()))

    tape = output.tape
    gradient = Gradient({output.id: RandomVariable.of(seed)})

    visited = 0
    for node_id in range(output.id, -1, -1):
        if node_id not in gradient:
            continue  # nothing to propagate
        node = tape.nodes[node_id]
        visited += 1
        if node.is_leaf:
            continue

        adjoint = gradient[node_id]
        for index, argument_id in enumerate(node.arguments):
            if argument_id is None:
                continue
            contribution = adjoint.mult(partial_derivative(node, index))
            if argument_id in gradient:
                gradient[argument_id] = gradient[argument_id].add(contribution)
            else:
                gradient[argument_id] = contribution

    logger.debug(f"Reverse pass from node {output.id}: visited {visited} of {output.id + 1} nodes")
    return gradient
