# stochastic/random_variable.py
from __future__ import annotations

import numbers
from typing import Any, Optional, Tuple, Union

import numpy as np

from ..errors import ShapeMismatchError

Operand = Union["RandomVariable", float, int, np.ndarray]


class RandomVariable:
    """
    A random variable on a Monte Carlo path space.

    Holds either a single deterministic value (broadcast to every path) or a
    1-D float64 array with one realisation per path. Every operation is pure
    and returns a new RandomVariable; statistics are computed on demand.

    Attributes
    ----------
    time : float
        Filtration time at which the variable is measurable. Binary operations
        return the later of the two operand times.
    """

    # numpy defers to our reflected operators (ndarray + RandomVariable)
    __array_ufunc__ = None

    def __init__(self, values: Any, time: float = 0.0):
        if isinstance(values, RandomVariable):
            self._values = values._values
            self.time = max(float(time), values.time)
            return

        if isinstance(values, numbers.Real) and not isinstance(values, bool):
            self._values = np.float64(values)
        elif isinstance(values, (list, tuple, np.ndarray)):
            arr = np.asarray(values, dtype=np.float64)
            if arr.ndim == 0:
                self._values = np.float64(arr)
            elif arr.ndim == 1:
                self._values = arr
            else:
                raise ValueError(f"RandomVariable expects a scalar or 1-D array, got shape {arr.shape}")
        else:
            raise TypeError(
                f"RandomVariable only accepts numeric scalars, sequences or ndarrays, but got {type(values)}"
            )
        self.time = float(time)

    @classmethod
    def of(cls, value: Operand) -> "RandomVariable":
        """Return `value` if it already is a RandomVariable, otherwise wrap it."""
        return value if isinstance(value, RandomVariable) else cls(value)

    def __repr__(self):
        if self.is_deterministic():
            return f"RandomVariable({float(self._values)!r}, time={self.time})"
        return f"RandomVariable(size={self.size()}, mean={self.average():.6g}, time={self.time})"

    # ------------------------------------------------------------------ #
    # Shape and access
    # ------------------------------------------------------------------ #
    def is_deterministic(self) -> bool:
        return not isinstance(self._values, np.ndarray)

    def size(self) -> int:
        """Number of stored realisations (1 for a deterministic value)."""
        return 1 if self.is_deterministic() else int(self._values.shape[0])

    def get(self, path: int) -> float:
        if self.is_deterministic():
            return float(self._values)
        return float(self._values[path])

    def get_values(self) -> Union[np.float64, np.ndarray]:
        return self._values

    def as_array(self, number_of_paths: Optional[int] = None) -> np.ndarray:
        """
        Realisations as an array. Deterministic values are broadcast to
        `number_of_paths` (default 1).
        """
        if self.is_deterministic():
            return np.full(number_of_paths or 1, float(self._values))
        if number_of_paths is not None and number_of_paths != self.size():
            raise ShapeMismatchError(
                f"Random variable has {self.size()} paths, expected {number_of_paths}"
            )
        return self._values.copy()

    def double_value(self) -> float:
        if not self.is_deterministic():
            raise ValueError("double_value() requires a deterministic random variable")
        return float(self._values)

    # ------------------------------------------------------------------ #
    # Statistics (not cached)
    # ------------------------------------------------------------------ #
    def average(self) -> float:
        return float(np.mean(self._values))

    def variance(self) -> float:
        if self.is_deterministic():
            return 0.0
        return float(np.var(self._values))

    def standard_deviation(self) -> float:
        return float(np.sqrt(self.variance()))

    def standard_error(self) -> float:
        return self.standard_deviation() / np.sqrt(self.size())

    def get_min(self) -> float:
        return float(np.min(self._values))

    def get_max(self) -> float:
        return float(np.max(self._values))

    # ------------------------------------------------------------------ #
    # Element-wise operations
    # ------------------------------------------------------------------ #
    def _binary(self, other: Operand, f) -> "RandomVariable":
        b, b_time = _unwrap(other)
        _check_shapes(self._values, b)
        return RandomVariable(f(self._values, b), time=max(self.time, b_time))

    def _unary(self, f) -> "RandomVariable":
        return RandomVariable(f(self._values), time=self.time)

    def add(self, other: Operand) -> "RandomVariable":
        return self._binary(other, np.add)

    def sub(self, other: Operand) -> "RandomVariable":
        return self._binary(other, np.subtract)

    def mult(self, other: Operand) -> "RandomVariable":
        return self._binary(other, np.multiply)

    def div(self, other: Operand) -> "RandomVariable":
        return self._binary(other, np.divide)

    def pow(self, exponent: float) -> "RandomVariable":
        return self._unary(lambda a: np.power(a, float(exponent)))

    def squared(self) -> "RandomVariable":
        return self._unary(np.square)

    def sqrt(self) -> "RandomVariable":
        return self._unary(np.sqrt)

    def exp(self) -> "RandomVariable":
        return self._unary(np.exp)

    def log(self) -> "RandomVariable":
        return self._unary(np.log)

    def abs(self) -> "RandomVariable":
        return self._unary(np.abs)

    def floor(self, floor: Operand) -> "RandomVariable":
        return self._binary(floor, np.maximum)

    def cap(self, cap: Operand) -> "RandomVariable":
        return self._binary(cap, np.minimum)

    def choose(self, on_true: Operand, on_false: Operand) -> "RandomVariable":
        """
        Per path: `on_true` where this variable is >= 0, else `on_false`.

        This is the indicator primitive; the primal value is never smoothed.
        """
        t, t_time = _unwrap(on_true)
        f, f_time = _unwrap(on_false)
        _check_shapes(self._values, t)
        _check_shapes(self._values, f)
        _check_shapes(t, f)
        values = np.where(self._values >= 0.0, t, f)
        return RandomVariable(values, time=max(self.time, t_time, f_time))

    # ------------------------------------------------------------------ #
    # Python operators
    # ------------------------------------------------------------------ #
    def __add__(self, other):
        return _or_not_implemented(self.add, other)

    def __radd__(self, other):
        return _or_not_implemented(self.add, other)

    def __sub__(self, other):
        return _or_not_implemented(self.sub, other)

    def __rsub__(self, other):
        return _or_not_implemented(lambda o: self._binary(o, lambda a, b: b - a), other)

    def __mul__(self, other):
        return _or_not_implemented(self.mult, other)

    def __rmul__(self, other):
        return _or_not_implemented(self.mult, other)

    def __truediv__(self, other):
        return _or_not_implemented(self.div, other)

    def __rtruediv__(self, other):
        return _or_not_implemented(lambda o: self._binary(o, lambda a, b: b / a), other)

    def __pow__(self, exponent):
        if not isinstance(exponent, numbers.Real):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self):
        return self._unary(np.negative)


def _unwrap(x: Any) -> Tuple[Union[np.float64, np.ndarray], float]:
    """Raw values and filtration time of an operand."""
    if isinstance(x, RandomVariable):
        return x._values, x.time
    if isinstance(x, (numbers.Real, np.ndarray, list, tuple)) and not isinstance(x, bool):
        return RandomVariable(x)._values, 0.0
    raise TypeError(f"Unsupported operand type for RandomVariable: {type(x)}")


def _check_shapes(a, b):
    if isinstance(a, np.ndarray) and isinstance(b, np.ndarray) and a.shape != b.shape:
        raise ShapeMismatchError(
            f"Cannot combine random variables with {a.shape[0]} and {b.shape[0]} paths"
        )


def _or_not_implemented(op, other):
    try:
        return op(other)
    except TypeError:
        return NotImplemented
