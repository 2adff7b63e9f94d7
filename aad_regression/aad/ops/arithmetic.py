# aad/ops/arithmetic.py
import numbers

from ...errors import TapeMismatchError
from ...stochastic.random_variable import RandomVariable
from ..core.node import OperatorType
from ..core.var import RandomVariableDifferentiable


def _value(x) -> RandomVariable:
    """Primal value of an operand; plain numbers and arrays become constants."""
    return x.value if isinstance(x, RandomVariableDifferentiable) else RandomVariable.of(x)


def _record(op, value, operands, parameter=None):
    """
    Push a node for `value` computed by `op` from `operands`.

    Only RandomVariableDifferentiable operands get an id; everything else is
    recorded as a constant. If no operand is differentiable the plain value is
    returned and nothing is recorded.
    """
    tape = None
    config = None
    arguments = []
    argument_values = []
    for x in operands:
        if isinstance(x, RandomVariableDifferentiable):
            if tape is None:
                tape, config = x.tape, x.config
            elif x.tape is not tape:
                raise TapeMismatchError(
                    f"Operands of '{op.value}' were recorded on different tapes"
                )
            arguments.append(x.id)
            argument_values.append(x.value)
        else:
            arguments.append(None)
            argument_values.append(RandomVariable.of(x))

    if tape is None:
        return value

    if parameter is None and op is OperatorType.CHOOSE:
        parameter = config
    node_id = tape.push_node(
        op=op, value=value, arguments=arguments,
        argument_values=argument_values, parameter=parameter,
    )
    return RandomVariableDifferentiable(value, node_id, tape, config)


def _binary(x, y, f, op):
    return _record(op, f(_value(x), _value(y)), (x, y))


def add(x, y):  return _binary(x, y, RandomVariable.add,  OperatorType.ADD)
def sub(x, y):  return _binary(x, y, RandomVariable.sub,  OperatorType.SUB)
def mult(x, y): return _binary(x, y, RandomVariable.mult, OperatorType.MULT)
def div(x, y):  return _binary(x, y, RandomVariable.div,  OperatorType.DIV)


def neg(x):
    return mult(x, -1.0)


def pow(x, exponent):
    """
    Power with a constant exponent:
      out.val = x.val ** n
      ∂out/∂x = n * x^(n-1)
    """
    if not isinstance(exponent, numbers.Real):
        raise TypeError(f"pow() supports constant real exponents only, got {type(exponent)}")
    n = float(exponent)
    return _record(OperatorType.POW, _value(x).pow(n), (x,), parameter=n)


def squared(x):
    return _record(OperatorType.SQUARED, _value(x).squared(), (x,))


def _reflected(op):
    def wrapper(self, other):
        try:
            return op(other, self)
        except TypeError:
            return NotImplemented
    return wrapper


def _forward(op):
    def wrapper(self, other):
        try:
            return op(self, other)
        except TypeError:
            return NotImplemented
    return wrapper


# Bind Python operators to RandomVariableDifferentiable
RandomVariableDifferentiable.__add__      = _forward(add)
RandomVariableDifferentiable.__radd__     = _reflected(add)
RandomVariableDifferentiable.__sub__      = _forward(sub)
RandomVariableDifferentiable.__rsub__     = _reflected(sub)
RandomVariableDifferentiable.__mul__      = _forward(mult)
RandomVariableDifferentiable.__rmul__     = _reflected(mult)
RandomVariableDifferentiable.__truediv__  = _forward(div)
RandomVariableDifferentiable.__rtruediv__ = _reflected(div)
RandomVariableDifferentiable.__pow__      = _forward(pow)
RandomVariableDifferentiable.__neg__      = lambda self: neg(self)
