"""
Utility functions used alongside the SCAD penalty.

Provides:
- Safe min-max normalization to [0, 1]
- Scalar range checking with named error messages
"""

import warnings

import numpy as np

from .exceptions import ConstantInputWarning, InvalidScalarError, OutOfRangeError
from .validation import check_coefficients, check_finite_scalar


def safe_normalize(data):
    """
    Linearly rescale a finite real array to the [0, 1] range.

    Parameters
    ----------
    data : array-like
        Non-empty, real, finite values of any shape.

    Returns
    -------
    out : ndarray of float64
        Rescaled values with the same shape as ``data``. If every element
        is equal, an all-zero array is returned instead.

    Raises
    ------
    EmptyInputError, NonFiniteInputError
        If ``data`` is empty or not a finite real array.

    Warns
    -----
    ConstantInputWarning
        If ``data`` is constant.

    Examples
    --------
    >>> safe_normalize([1, 5, 10])
    array([0.        , 0.44444444, 1.        ])
    """
    arr = check_coefficients(data, name='data')

    min_val = arr.min()
    max_val = arr.max()

    if min_val == max_val:
        warnings.warn(
            "Input data is constant; returning zeros array.",
            ConstantInputWarning,
            stacklevel=2,
        )
        return np.zeros(arr.shape)

    with np.errstate(over='ignore'):
        span = max_val - min_val

    if np.isfinite(span):
        return (arr - min_val) / span

    # Range exceeds float64; halving is exact for normal numbers
    return (arr / 2 - min_val / 2) / (max_val / 2 - min_val / 2)


def check_range(value, lower, upper, name='variable'):
    """
    Ensure a scalar lies within the closed interval [lower, upper].

    Parameters
    ----------
    value : float
        Value to check.
    lower : float
        Lower bound (inclusive).
    upper : float
        Upper bound (inclusive).
    name : str, default='variable'
        Name cited in the error message.

    Raises
    ------
    InvalidScalarError
        If ``value``, ``lower`` or ``upper`` is not a finite real scalar,
        or ``lower > upper``.
    OutOfRangeError
        If ``value < lower`` or ``value > upper``.

    Examples
    --------
    >>> check_range(4, 0, 5, 'lam')
    >>> check_range(6, 0, 5, 'lam')
    Traceback (most recent call last):
        ...
    scad_penalty.exceptions.OutOfRangeError: lam (6.0000) is out of range [0.0000, 5.0000].
    """
    value = check_finite_scalar(value, name)
    lower = check_finite_scalar(lower, f"{name} lower bound")
    upper = check_finite_scalar(upper, f"{name} upper bound")

    if lower > upper:
        raise InvalidScalarError(
            f"Range for {name} is empty: lower bound {lower:.4f} exceeds upper bound {upper:.4f}."
        )

    if value < lower or value > upper:
        raise OutOfRangeError(
            f"{name} ({value:.4f}) is out of range [{lower:.4f}, {upper:.4f}]."
        )
