# aad/ops/special.py
from ..core.node import OperatorType
from .arithmetic import _record, _value


def choose(x, on_true, on_false):
    """
    Primitive: per path `on_true` where x >= 0, else `on_false`.

    The primal value is the exact indicator selection. Its derivative with
    respect to x is a Dirac delta, which the reverse pass replaces by the
    approximation configured on x's factory (see core/dirac_delta.py).
    """
    value = _value(x).choose(_value(on_true), _value(on_false))
    return _record(OperatorType.CHOOSE, value, (x, on_true, on_false))
