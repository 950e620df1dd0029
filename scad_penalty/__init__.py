"""
SCAD Penalty
============

Element-wise evaluation of the Smoothly Clipped Absolute Deviation (SCAD)
penalty of Fan & Li (2001), with strict input validation, numerical
instability detection, and small helpers for normalizing, range-checking
and plotting.

Main Functions
--------------
scad_penalty : Penalty for every element of a coefficient array
SCADPenalty : Penalty with fixed (lam, a), validated once

Quick Start
-----------
>>> import numpy as np
>>> import scad_penalty as scad
>>>
>>> beta = np.linspace(-8, 8, 400)
>>> penalty = scad.scad_penalty(beta, lam=4, a=2.5)
>>> fig = scad.plot_scad(beta, penalty, lam=4, a=2.5)
>>> scad.close_all_figures()

References
----------
Fan, J. and Li, R. (2001). "Variable Selection via Nonconcave Penalized
Likelihood and its Oracle Properties." Journal of the American
Statistical Association, 96(456), 1348-1360.
"""

from .penalty import (
    DEFAULT_A,
    ScadRegion,
    SCADPenalty,
    scad_penalty,
    scad_regions,
    total_scad_penalty,
    penalty_profile,
)
from .utils import safe_normalize, check_range
from .plotting import plot_scad, close_all_figures
from .validation import (
    check_coefficients,
    check_lambda,
    check_a,
    check_finite_scalar,
    check_same_size,
)
from .exceptions import (
    ScadError,
    EmptyInputError,
    NonFiniteInputError,
    InvalidLambdaError,
    InvalidAError,
    ShapeMismatchError,
    OutOfRangeError,
    InvalidScalarError,
    PlotError,
    ScadWarning,
    NumericalInstabilityWarning,
    ConstantInputWarning,
    FigureCleanupWarning,
)

__version__ = "0.1.0"

__all__ = [
    # Penalty
    'DEFAULT_A',
    'ScadRegion',
    'SCADPenalty',
    'scad_penalty',
    'scad_regions',
    'total_scad_penalty',
    'penalty_profile',

    # Utilities
    'safe_normalize',
    'check_range',

    # Plotting
    'plot_scad',
    'close_all_figures',

    # Validation
    'check_coefficients',
    'check_lambda',
    'check_a',
    'check_finite_scalar',
    'check_same_size',

    # Errors
    'ScadError',
    'EmptyInputError',
    'NonFiniteInputError',
    'InvalidLambdaError',
    'InvalidAError',
    'ShapeMismatchError',
    'OutOfRangeError',
    'InvalidScalarError',
    'PlotError',

    # Advisories
    'ScadWarning',
    'NumericalInstabilityWarning',
    'ConstantInputWarning',
    'FigureCleanupWarning',
]
