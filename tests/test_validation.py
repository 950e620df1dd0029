"""
Test suite for shared input validation.
"""
import numpy as np
import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from scad_penalty import (
    check_coefficients,
    check_lambda,
    check_a,
    check_finite_scalar,
    check_same_size,
    ScadError,
    EmptyInputError,
    NonFiniteInputError,
    InvalidLambdaError,
    InvalidAError,
    InvalidScalarError,
    ShapeMismatchError,
    OutOfRangeError,
    PlotError,
    NumericalInstabilityWarning,
    ConstantInputWarning,
    FigureCleanupWarning,
    ScadWarning,
)


class TestCheckCoefficients:

    def test_list_to_float_array(self):
        arr = check_coefficients([1, 2, 3])
        assert arr.dtype == np.float64
        assert arr.shape == (3,)

    def test_scalar(self):
        assert check_coefficients(2).shape == ()

    def test_float_array_not_copied(self):
        data = np.array([1.0, 2.0])
        assert check_coefficients(data) is data

    def test_ragged_input(self):
        with pytest.raises(NonFiniteInputError):
            check_coefficients([[1, 2], [3]])

    def test_message_names_parameter(self):
        with pytest.raises(EmptyInputError, match="'beta'"):
            check_coefficients([], name='beta')
        with pytest.raises(NonFiniteInputError, match="'beta'"):
            check_coefficients([np.nan], name='beta')


class TestScalarChecks:

    def test_lambda_returns_float(self):
        assert check_lambda(2) == 2.0
        assert isinstance(check_lambda(np.int64(2)), float)

    def test_missing_lambda(self):
        with pytest.raises(InvalidLambdaError, match='missing'):
            check_lambda(None)

    def test_int_too_large_for_float64(self):
        with pytest.raises(InvalidLambdaError):
            check_lambda(10 ** 400)
        with pytest.raises(InvalidAError):
            check_a(10 ** 400)
        with pytest.raises(InvalidScalarError):
            check_finite_scalar(-10 ** 400)

    def test_a_just_above_two(self):
        assert check_a(2.0000001) == 2.0000001

    def test_a_message(self):
        with pytest.raises(InvalidAError, match='greater than 2'):
            check_a(1.0)

    def test_finite_scalar(self):
        assert check_finite_scalar(-3) == -3.0
        with pytest.raises(InvalidScalarError):
            check_finite_scalar(np.array([1.0]))


class TestCheckSameSize:

    def test_same_size(self):
        check_same_size(np.zeros(6), np.zeros((2, 3)))

    def test_mismatch(self):
        with pytest.raises(ShapeMismatchError, match=r'beta \(3\).*penalty \(2\)'):
            check_same_size([1, 2, 3], [1, 2], 'beta', 'penalty')


class TestHierarchy:

    @pytest.mark.parametrize('cls', [
        EmptyInputError, NonFiniteInputError, InvalidLambdaError, InvalidAError,
        InvalidScalarError, ShapeMismatchError, OutOfRangeError, PlotError,
    ])
    def test_errors_share_base(self, cls):
        assert issubclass(cls, ScadError)
        assert issubclass(cls, ValueError)

    @pytest.mark.parametrize('cls', [
        NumericalInstabilityWarning, ConstantInputWarning, FigureCleanupWarning,
    ])
    def test_advisories_are_user_warnings(self, cls):
        assert issubclass(cls, ScadWarning)
        assert issubclass(cls, UserWarning)
        assert not issubclass(cls, ScadError)
