"""
Tests for the vector random variable.
"""

import numpy as np
import pytest

from aad_regression import RandomVariable, ShapeMismatchError


class TestConstruction:
    def test_scalar_is_deterministic(self):
        rv = RandomVariable(2.5)
        assert rv.is_deterministic()
        assert rv.size() == 1
        assert rv.double_value() == 2.5

    def test_array_is_stochastic(self):
        rv = RandomVariable([1.0, 2.0, 3.0])
        assert not rv.is_deterministic()
        assert rv.size() == 3
        assert rv.get(1) == 2.0

    def test_two_dimensional_input_rejected(self):
        with pytest.raises(ValueError):
            RandomVariable(np.ones((2, 2)))

    def test_non_numeric_rejected(self):
        with pytest.raises(TypeError):
            RandomVariable("1.0")

    def test_double_value_of_stochastic_raises(self):
        with pytest.raises(ValueError):
            RandomVariable([1.0, 2.0]).double_value()

    def test_as_array_broadcasts_scalar(self):
        np.testing.assert_array_equal(RandomVariable(3.0).as_array(4), np.full(4, 3.0))


class TestStatistics:
    def test_moments(self):
        rv = RandomVariable([1.0, 2.0, 3.0, 4.0])
        assert rv.average() == pytest.approx(2.5)
        assert rv.variance() == pytest.approx(1.25)
        assert rv.standard_deviation() == pytest.approx(np.sqrt(1.25))
        assert rv.standard_error() == pytest.approx(np.sqrt(1.25) / 2.0)
        assert rv.get_min() == 1.0
        assert rv.get_max() == 4.0

    def test_deterministic_has_zero_variance(self):
        assert RandomVariable(7.0).variance() == 0.0


class TestOperations:
    def test_scalar_broadcasts_against_paths(self):
        rv = RandomVariable([1.0, 2.0, 3.0])
        np.testing.assert_allclose(rv.add(1.0).get_values(), [2.0, 3.0, 4.0])
        np.testing.assert_allclose(rv.mult(RandomVariable(2.0)).get_values(), [2.0, 4.0, 6.0])
        np.testing.assert_allclose(rv.div(2.0).get_values(), [0.5, 1.0, 1.5])
        np.testing.assert_allclose(rv.sub(1.0).get_values(), [0.0, 1.0, 2.0])

    def test_python_operators(self):
        rv = RandomVariable([1.0, 4.0])
        np.testing.assert_allclose((2.0 - rv).get_values(), [1.0, -2.0])
        np.testing.assert_allclose((4.0 / rv).get_values(), [4.0, 1.0])
        np.testing.assert_allclose((-rv).get_values(), [-1.0, -4.0])
        np.testing.assert_allclose((rv ** 0.5).get_values(), [1.0, 2.0])

    def test_ndarray_on_the_left_defers(self):
        result = np.array([1.0, 2.0]) + RandomVariable([1.0, 1.0])
        assert isinstance(result, RandomVariable)

    def test_transcendental(self):
        rv = RandomVariable([1.0, 4.0])
        np.testing.assert_allclose(rv.sqrt().get_values(), [1.0, 2.0])
        np.testing.assert_allclose(rv.log().exp().get_values(), [1.0, 4.0])
        np.testing.assert_allclose(rv.squared().get_values(), [1.0, 16.0])

    def test_floor_and_cap(self):
        rv = RandomVariable([-1.0, 0.5, 2.0])
        np.testing.assert_allclose(rv.floor(0.0).get_values(), [0.0, 0.5, 2.0])
        np.testing.assert_allclose(rv.cap(1.0).get_values(), [-1.0, 0.5, 1.0])

    def test_mismatched_path_counts_raise(self):
        with pytest.raises(ShapeMismatchError):
            RandomVariable([1.0, 2.0]).add(RandomVariable([1.0, 2.0, 3.0]))

    def test_time_is_latest_operand_time(self):
        a = RandomVariable([1.0, 2.0], time=0.5)
        b = RandomVariable([1.0, 2.0], time=1.0)
        assert a.add(b).time == 1.0


class TestChoose:
    def test_selects_on_true_where_non_negative(self):
        x = RandomVariable([-1.0, 0.0, 2.0])
        np.testing.assert_array_equal(x.choose(1.0, 0.0).get_values(), [0.0, 1.0, 1.0])

    def test_branches_can_be_random(self):
        x = RandomVariable([-1.0, 1.0])
        on_true = RandomVariable([10.0, 20.0])
        on_false = RandomVariable([-10.0, -20.0])
        np.testing.assert_array_equal(x.choose(on_true, on_false).get_values(), [-10.0, 20.0])

    def test_branch_shape_mismatch_raises(self):
        with pytest.raises(ShapeMismatchError):
            RandomVariable([1.0, 2.0]).choose(RandomVariable([1.0, 2.0, 3.0]), 0.0)
