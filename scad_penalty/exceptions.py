"""
Errors and advisory warnings raised by the SCAD penalty package.

Two tiers are used:

- Validation errors (subclasses of ``ScadError``, itself a ``ValueError``)
  are raised before any computation starts.
- Advisories (subclasses of ``ScadWarning``, itself a ``UserWarning``)
  are emitted with ``warnings.warn`` after the work has completed and
  never prevent a result from being returned.
"""


class ScadError(ValueError):
    """Base class for all validation failures."""


class EmptyInputError(ScadError):
    """Input array has no elements."""


class NonFiniteInputError(ScadError):
    """Input array is non-numeric, complex, or contains NaN/Inf."""


class InvalidLambdaError(ScadError):
    """lam is missing, non-scalar, non-real, non-finite, or not positive."""


class InvalidAError(ScadError):
    """a is non-scalar, non-real, non-finite, or not greater than 2."""


class ShapeMismatchError(ScadError):
    """Two arrays that must pair element-wise have different sizes."""


class OutOfRangeError(ScadError):
    """Scalar lies outside its allowed closed interval."""


class InvalidScalarError(ScadError):
    """Value is not a finite real scalar."""


class PlotError(ScadError):
    """matplotlib failed while drawing a SCAD plot."""


class ScadWarning(UserWarning):
    """Base class for non-fatal advisories."""


class NumericalInstabilityWarning(ScadWarning):
    """Penalty output contains NaN or Inf values."""


class ConstantInputWarning(ScadWarning):
    """Normalization input is constant; zeros were returned."""


class FigureCleanupWarning(ScadWarning):
    """Open figures could not be closed."""
