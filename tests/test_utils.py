"""
Test suite for normalization and range-check utilities.
"""
import warnings

import numpy as np
import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from scad_penalty import (
    safe_normalize,
    check_range,
    scad_penalty,
    EmptyInputError,
    NonFiniteInputError,
    OutOfRangeError,
    InvalidScalarError,
    ConstantInputWarning,
)


class TestSafeNormalize:

    def test_basic(self):
        np.testing.assert_allclose(safe_normalize([1, 5, 10]), [0, 4 / 9, 1])

    def test_constant_input(self):
        with pytest.warns(ConstantInputWarning, match='constant'):
            out = safe_normalize([3, 3, 3])
        np.testing.assert_array_equal(out, [0, 0, 0])

    def test_constant_scalar(self):
        with pytest.warns(ConstantInputWarning):
            out = safe_normalize(7.0)
        assert out.shape == ()
        assert out == 0.0

    def test_shape_preserved(self):
        data = np.arange(12.0).reshape(3, 4)
        out = safe_normalize(data)
        assert out.shape == (3, 4)
        assert out.min() == 0.0
        assert out.max() == 1.0

    def test_negative_values(self):
        np.testing.assert_allclose(safe_normalize([-2, 0, 2]), [0, 0.5, 1])

    def test_range_wider_than_float64(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            out = safe_normalize([-1e308, 0.0, 1e308])
        np.testing.assert_allclose(out, [0, 0.5, 1])

    def test_extreme_values_stay_in_unit_interval(self):
        data = np.array([[-1.7e308, 3.0], [1.7e308, -2.5e307]])
        out = safe_normalize(data)
        assert out.shape == (2, 2)
        assert np.all(np.isfinite(out))
        assert out.min() == 0.0
        assert out.max() == 1.0

    def test_no_warning_for_varying_input(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            safe_normalize([1, 2])

    def test_input_not_modified(self):
        data = np.array([4.0, 8.0, 6.0])
        safe_normalize(data)
        np.testing.assert_array_equal(data, [4.0, 8.0, 6.0])

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            safe_normalize([])

    @pytest.mark.parametrize('data', [[1.0, np.nan], [np.inf, 0.0], ['x']])
    def test_invalid_data(self, data):
        with pytest.raises(NonFiniteInputError):
            safe_normalize(data)

    def test_normalize_penalty_output(self):
        """Normalized SCAD penalties span [0, 1] with the peak at 1."""
        beta = np.linspace(-8, 8, 400)
        out = safe_normalize(scad_penalty(beta, lam=4, a=2.5))
        assert out.min() == 0.0
        assert out.max() == 1.0


class TestCheckRange:

    def test_in_range(self):
        assert check_range(4, 0, 5, 'lam') is None

    @pytest.mark.parametrize('value', [0, 5, 0.0, 5.0])
    def test_bounds_inclusive(self, value):
        check_range(value, 0, 5, 'lam')

    def test_out_of_range_message(self):
        with pytest.raises(OutOfRangeError, match=r"lam \(6\.0000\) is out of range \[0\.0000, 5\.0000\]"):
            check_range(6, 0, 5, 'lam')

    def test_below_range(self):
        with pytest.raises(OutOfRangeError):
            check_range(-0.1, 0, 5)

    def test_default_name(self):
        with pytest.raises(OutOfRangeError, match='variable'):
            check_range(10, 0, 5)

    @pytest.mark.parametrize('value', [np.nan, np.inf, None, [1, 2], 'abc', True])
    def test_invalid_value(self, value):
        with pytest.raises(InvalidScalarError, match='alpha'):
            check_range(value, 0, 5, 'alpha')

    def test_numpy_scalar(self):
        check_range(np.float64(2.5), 0, 5)

    @pytest.mark.parametrize('lower, upper', [
        (None, 5), (0, None), (np.nan, 5), (0, np.inf), ('0', 5), ([0], 5),
    ])
    def test_invalid_bounds(self, lower, upper):
        with pytest.raises(InvalidScalarError, match='bound'):
            check_range(1.0, lower, upper, 'lam')

    def test_empty_interval(self):
        with pytest.raises(InvalidScalarError, match='empty'):
            check_range(1.0, 5, 0, 'lam')
