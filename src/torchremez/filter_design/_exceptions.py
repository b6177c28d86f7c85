"""Exceptions for filter design module."""


class FilterDesignError(Exception):
    """Base exception for filter design errors."""

    pass


class ValidationError(FilterDesignError, ValueError):
    """Raised when a filter request is malformed.

    This occurs when:
    - Order is not an integer or is smaller than 3
    - Band edges are odd in number, outside [0, 1] or decreasing
    - Weights do not match the number of bands or are not positive
    - Grid density is not a positive integer
    """

    pass


class SpecMismatchError(ValidationError):
    """Raised when band edges and amplitudes disagree.

    This occurs when:
    - The amplitude count differs from the band edge count
    - Two adjacent bands touch at a frequency but ask for different
      amplitudes there
    """

    pass


class ConvergenceError(FilterDesignError):
    """Raised when the Remez exchange reaches its iteration cap.

    The extremal set was still changing after ``maxiter`` iterations, which
    usually means very narrow bands or an ill-conditioned request.
    """

    pass


class ValidationWarning(UserWarning):
    """Warning when a filter request was adjusted before design."""

    pass
