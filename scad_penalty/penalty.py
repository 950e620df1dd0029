"""
SCAD (Smoothly Clipped Absolute Deviation) penalty evaluation.

The penalty of Fan & Li (2001) is defined piecewise on |β|:

    p(β) = λ|β|                                   if |β| ≤ λ
    p(β) = (-|β|² + 2aλ|β| - λ²) / (2(a - 1))    if λ < |β| ≤ aλ
    p(β) = (a + 1)λ² / 2                          if |β| > aλ

It is continuous, non-decreasing in |β|, and flat beyond aλ, so large
coefficients are not shrunk the way they are under an L1 penalty.

Reference: Fan, J. and Li, R. (2001). "Variable Selection via Nonconcave
Penalized Likelihood and its Oracle Properties." JASA 96(456).
"""

import numbers
import warnings
from dataclasses import dataclass
from enum import IntEnum

import numpy as np
import pandas as pd
from sklearn.utils.validation import check_scalar

from .exceptions import (
    InvalidScalarError,
    NumericalInstabilityWarning,
    ShapeMismatchError,
)
from .validation import (
    check_coefficients,
    check_lambda,
    check_a,
    check_finite_scalar,
)

# Standard choice from Fan & Li (2001)
DEFAULT_A = 3.7

DEFAULT_N_POINTS = 400


class ScadRegion(IntEnum):
    """Region of |β| in which a single closed-form expression applies."""
    LINEAR = 1
    QUADRATIC = 2
    FLAT = 3


def _validate(values, lam, a):
    """Run every precondition before any arithmetic."""
    arr = check_coefficients(values, name='values')
    lam = check_lambda(lam)
    a = check_a(a)
    return arr, np.float64(lam), np.float64(a)


def _region_masks(abs_values, lam, a):
    """Split |β| into three disjoint boolean masks.

    The comparison ``≤`` assigns each breakpoint to the lower region.
    """
    linear = abs_values <= lam
    flat = abs_values > a * lam
    quadratic = ~linear & ~flat
    return linear, quadratic, flat




def _evaluate(values, lam, a, stacklevel):
    """Validated SCAD evaluation.

    ``stacklevel`` is counted from the caller of this helper, as it would
    be for a ``warnings.warn`` issued there.
    """
    arr, lam, a = _validate(values, lam, a)

    abs_values = np.abs(arr)
    penalty = np.zeros_like(abs_values)

    # Overflow is reported through NumericalInstabilityWarning below
    with np.errstate(over='ignore', invalid='ignore'):
        linear, quadratic, flat = _region_masks(abs_values, lam, a)
        flat_value = (a + 1) * lam ** 2 / 2

        penalty[linear] = lam * abs_values[linear]

        # Rounding must not push the quadratic outside [lam^2, flat_value],
        # and |v| == a * lam takes the flat value exactly
        v = abs_values[quadratic]
        quad = (-(v ** 2) + 2 * a * lam * v - lam ** 2) / (2 * (a - 1))
        quad = np.minimum(np.maximum(quad, lam * lam), flat_value)
        penalty[quadratic] = np.where(v == a * lam, flat_value, quad)

        penalty[flat] = flat_value

    if not np.all(np.isfinite(penalty)):
        warnings.warn(
            "Numerical instability detected in SCAD computation "
            f"(NaN or Inf values found) for lam={lam:g}, a={a:g}.",
            NumericalInstabilityWarning,
            stacklevel=stacklevel + 1,
        )

    return penalty


def scad_penalty(values, lam, a=DEFAULT_A):
    """Compute the SCAD penalty element-wise.

    Parameters
    ----------
    values : array-like or scalar
        Coefficients. Any shape; must be non-empty, real and finite.
    lam : float
        Threshold λ > 0. Coefficients with |β| ≤ λ are penalized linearly.
    a : float, default=3.7
        Concavity parameter, must be > 2.

    Returns
    -------
    ndarray of float64
        Penalty values with the same shape as ``values`` (0-d for a scalar).

    Raises
    ------
    EmptyInputError, NonFiniteInputError, InvalidLambdaError, InvalidAError
        Raised before any computation if an input is invalid.

    Warns
    -----
    NumericalInstabilityWarning
        If the result contains NaN or Inf (e.g. λ² overflows). The result
        is still returned.

    Examples
    --------
    >>> scad_penalty(2, lam=4, a=2.5)
    array(8.)
    >>> scad_penalty([2, 9, 11], lam=4, a=2.5)
    array([ 8.        , 27.66666667, 28.        ])
    """
    return _evaluate(values, lam, a, stacklevel=2)


def scad_regions(values, lam, a=DEFAULT_A):
    """Label each coefficient with its SCAD region.

    Returns
    -------
    ndarray of int
        ``ScadRegion`` values (1, 2 or 3) with the same shape as ``values``.

    Examples
    --------
    >>> scad_regions([0.5, 2.0, 10.0], lam=1.0)
    array([1, 2, 3])
    """
    arr, lam, a = _validate(values, lam, a)
    with np.errstate(over='ignore'):
        linear, quadratic, flat = _region_masks(np.abs(arr), lam, a)

    regions = np.empty(arr.shape, dtype=int)
    regions[linear] = ScadRegion.LINEAR
    regions[quadratic] = ScadRegion.QUADRATIC
    regions[flat] = ScadRegion.FLAT
    return regions


def _total(coef, lam, a, penalty_mask, stacklevel):
    penalty = _evaluate(coef, lam, a, stacklevel + 1)

    if penalty_mask is None:
        return float(np.sum(penalty))

    mask = np.asarray(penalty_mask, dtype=bool)
    if mask.shape != penalty.shape:
        raise ShapeMismatchError(
            f"penalty_mask shape {mask.shape} must match coef shape {penalty.shape}."
        )
    return float(np.sum(penalty[mask]))


def total_scad_penalty(coef, lam, a=DEFAULT_A, penalty_mask=None):
    """Sum of SCAD penalties over a coefficient vector.

    Parameters
    ----------
    coef : array-like
        Coefficient values to penalize.
    lam : float
        Threshold λ > 0.
    a : float, default=3.7
        Concavity parameter, must be > 2.
    penalty_mask : array-like of bool, optional
        If provided, only coefficients where the mask is True contribute.
        Must have the same shape as ``coef``.

    Returns
    -------
    float
        Total penalty.

    Examples
    --------
    >>> round(total_scad_penalty([2, 9, 11], lam=4, a=2.5), 4)
    63.6667
    >>> total_scad_penalty([2, 9, 11], lam=4, a=2.5, penalty_mask=[True, False, True])
    36.0
    """
    return _total(coef, lam, a, penalty_mask, stacklevel=2)


def _profile(lam, a, limit, n_points, stacklevel):
    lam = check_lambda(lam)
    a = check_a(a)
    check_scalar(n_points, 'n_points', numbers.Integral, min_val=2)

    if limit is None:
        limit = 2 * a * lam
    limit = check_finite_scalar(limit, 'limit')
    if limit <= 0:
        raise InvalidScalarError(f"Input 'limit' must be positive, got {limit!r}.")

    beta = np.linspace(-limit, limit, n_points)
    return pd.DataFrame({
        'beta': beta,
        'abs_beta': np.abs(beta),
        'region': scad_regions(beta, lam, a),
        'penalty': _evaluate(beta, lam, a, stacklevel + 1),
    })


def penalty_profile(lam, a=DEFAULT_A, limit=None, n_points=DEFAULT_N_POINTS):
    """Tabulate the penalty over a symmetric grid of coefficients.

    Parameters
    ----------
    lam : float
        Threshold λ > 0.
    a : float, default=3.7
        Concavity parameter, must be > 2.
    limit : float, optional
        Grid spans ``[-limit, limit]``. Defaults to ``2 * a * lam`` so
        all three regions are visible.
    n_points : int, default=400
        Number of grid points (at least 2).

    Returns
    -------
    pd.DataFrame
        Columns ``beta``, ``abs_beta``, ``region`` and ``penalty``.
    """
    return _profile(lam, a, limit, n_points, stacklevel=2)


@dataclass
class SCADPenalty:
    """SCAD penalty with fixed tuning parameters.

    Parameters are validated once at construction, so an instance can be
    applied repeatedly without re-checking ``lam`` and ``a``.

    Examples
    --------
    >>> pen = SCADPenalty(lam=4, a=2.5)
    >>> pen.breakpoints
    (4.0, 10.0)
    >>> pen.max_penalty
    28.0
    >>> pen([2, 11])
    array([ 8., 28.])
    """
    lam: float
    a: float = DEFAULT_A

    def __post_init__(self):
        self.lam = check_lambda(self.lam)
        self.a = check_a(self.a)

    @property
    def breakpoints(self):
        """(λ, aλ): where the penalty switches region."""
        return (self.lam, self.a * self.lam)

    @property
    def max_penalty(self):
        """Constant value on the flat region, (a + 1)λ² / 2."""
        return (self.a + 1) * self.lam ** 2 / 2

    def value(self, values):
        return _evaluate(values, self.lam, self.a, stacklevel=2)

    def regions(self, values):
        return scad_regions(values, self.lam, self.a)

    def total(self, coef, penalty_mask=None):
        return _total(coef, self.lam, self.a, penalty_mask, stacklevel=2)

    def profile(self, limit=None, n_points=DEFAULT_N_POINTS):
        return _profile(self.lam, self.a, limit, n_points, stacklevel=2)

    __call__ = value
