"""
Input validation shared by the penalty evaluator and its helpers.

Every public entry point runs these checks before doing any arithmetic,
so a call either fails with a specific ``ScadError`` subclass or works on
fully validated inputs.
"""

import numbers

import numpy as np
from sklearn.utils.validation import assert_all_finite, check_scalar

from .exceptions import (
    EmptyInputError,
    NonFiniteInputError,
    InvalidLambdaError,
    InvalidAError,
    InvalidScalarError,
    ShapeMismatchError,
)

# Lower bound on the SCAD concavity parameter (exclusive)
A_MIN = 2.0


def check_coefficients(values, name='values'):
    """Validate a coefficient array and return it as float64.

    Parameters
    ----------
    values : array-like or scalar
        Real, finite numbers of any shape. A scalar is treated as a
        0-dimensional array.
    name : str, default='values'
        Parameter name used in error messages.

    Returns
    -------
    ndarray of float64
        Array with the same shape as ``values``. The input itself is
        never modified.

    Raises
    ------
    EmptyInputError
        If ``values`` is None or has no elements.
    NonFiniteInputError
        If ``values`` is not real numeric (bool, complex, object and
        string dtypes are rejected) or contains NaN/Inf.

    Examples
    --------
    >>> check_coefficients([1, -2, 3]).dtype
    dtype('float64')
    >>> check_coefficients(2.5).shape
    ()
    """
    if values is None:
        raise EmptyInputError(
            f"Input '{name}' cannot be empty. Provide a numeric array or scalar."
        )

    try:
        arr = np.asarray(values)
    except (TypeError, ValueError) as e:
        raise NonFiniteInputError(
            f"Input '{name}' must be a finite, real numeric array: {e}"
        ) from e

    if arr.size == 0:
        raise EmptyInputError(
            f"Input '{name}' cannot be empty. Provide a numeric array or scalar."
        )

    # Integer and float kinds only
    if arr.dtype.kind not in 'iuf':
        raise NonFiniteInputError(
            f"Input '{name}' must be a finite, real numeric array, "
            f"got dtype {arr.dtype}."
        )

    try:
        assert_all_finite(arr, input_name=name)
    except ValueError as e:
        raise NonFiniteInputError(
            f"Input '{name}' must be a finite, real numeric array. {e}"
        ) from e

    return arr.astype(np.float64, copy=False)


def _check_real_scalar(value, name, error_cls, constraint, min_val=None):
    """Shared scalar check; raises ``error_cls`` on any failure."""
    if value is None:
        raise error_cls(f"Input '{name}' is missing; expected {constraint}.")

    if isinstance(value, np.ndarray) and value.ndim == 0:
        value = value.item()

    if isinstance(value, (bool, np.bool_)):
        raise error_cls(
            f"Input '{name}' must be {constraint}, got bool {value!r}."
        )

    try:
        check_scalar(
            value,
            name,
            numbers.Real,
            min_val=min_val,
            include_boundaries='neither',
        )
    except (TypeError, ValueError) as e:
        raise error_cls(
            f"Input '{name}' must be {constraint}, got {value!r}. {e}"
        ) from e

    try:
        result = float(value)
    except (TypeError, OverflowError) as e:
        raise error_cls(
            f"Input '{name}' must be {constraint}, got {value!r}. {e}"
        ) from e

    if not np.isfinite(result):
        raise error_cls(
            f"Input '{name}' must be {constraint}, got {value!r}."
        )

    return result


def check_lambda(lam):
    """Validate the SCAD threshold ``lam``.

    Returns
    -------
    float

    Raises
    ------
    InvalidLambdaError
        If ``lam`` is missing, non-scalar, non-real, non-finite or <= 0.
    """
    return _check_real_scalar(
        lam, 'lam', InvalidLambdaError,
        'a finite, positive real scalar', min_val=0.0,
    )


def check_a(a):
    """Validate the SCAD concavity parameter ``a``.

    Returns
    -------
    float

    Raises
    ------
    InvalidAError
        If ``a`` is non-scalar, non-real, non-finite or <= 2.
    """
    return _check_real_scalar(
        a, 'a', InvalidAError,
        f'a finite, real scalar greater than {A_MIN:g}', min_val=A_MIN,
    )


def check_finite_scalar(value, name='variable'):
    """Validate that ``value`` is a finite real scalar.

    Raises
    ------
    InvalidScalarError
    """
    return _check_real_scalar(
        value, name, InvalidScalarError, 'a finite, real numeric scalar',
    )


def check_same_size(x, y, x_name='x', y_name='y'):
    """Require two arrays to hold the same number of elements.

    Raises
    ------
    ShapeMismatchError
        If ``np.size(x) != np.size(y)``.
    """
    n_x, n_y = np.size(x), np.size(y)
    if n_x != n_y:
        raise ShapeMismatchError(
            f"Length of {x_name} ({n_x}) must match length of {y_name} ({n_y})."
        )
