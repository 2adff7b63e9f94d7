# aad/ops/transcendental.py
from ..core.node import OperatorType
from .arithmetic import _record, _value


def exp(x):
    return _record(OperatorType.EXP, _value(x).exp(), (x,))


def log(x):
    return _record(OperatorType.LOG, _value(x).log(), (x,))


def sqrt(x):
    return _record(OperatorType.SQRT, _value(x).sqrt(), (x,))
