# aad/core/tape.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, List, Optional, Sequence

from ...stochastic.random_variable import RandomVariable
from .node import Node, OperatorType


class Tape:
    """
    Append-only record of Nodes in forward order.

    A node's id is its index in `nodes`; ids are never reused because the
    tape is never pruned. Discard the whole tape when the simulation is done.
    """
    def __init__(self):
        self.nodes: List[Node] = []

    def __len__(self):
        return len(self.nodes)

    def push_node(self, *, op: OperatorType, value: RandomVariable,
                  arguments: Sequence[Optional[int]] = (),
                  argument_values: Sequence[RandomVariable] = (),
                  parameter: Any = None) -> int:
        """Append a Node and return its id."""
        node_id = len(self.nodes)
        self.nodes.append(Node(
            id=node_id, op=op, value=value,
            arguments=tuple(arguments), argument_values=tuple(argument_values),
            parameter=parameter,
        ))
        return node_id

    def get_node(self, node_id: int) -> Node:
        return self.nodes[node_id]


# Global singleton tape (process scoped)
global_tape = Tape()


@contextmanager
def use_tape(tape: Optional[Tape] = None):
    """
    Context manager to temporarily use a fresh tape:
        with use_tape():
            factory = RandomVariableDifferentiableFactory()
            ... build computation ...
            y.get_gradient()
    Factories created inside the block record on the fresh tape.
    """
    from . import tape as _tape_mod  # local import: rebinding the module attribute
    prev = _tape_mod.global_tape
    try:
        _tape_mod.global_tape = tape if tape is not None else Tape()
        yield _tape_mod.global_tape
    finally:
        _tape_mod.global_tape = prev
