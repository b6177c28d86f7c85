"""Parks-McClellan (Remez) design of optimal linear-phase FIR filters."""

from ._coefficient_synthesis import synthesize_coefficients
from ._desired_response import DesiredResponse, cosine_form, desired_response
from ._exceptions import (
    ConvergenceError,
    FilterDesignError,
    SpecMismatchError,
    ValidationError,
    ValidationWarning,
)
from ._frequency_grid import FrequencyGrid, frequency_grid
from ._remez_design import RemezResult, remez_design
from ._remez_exchange import (
    RemezExchangeResult,
    barycentric_interpolate,
    barycentric_weights,
    remez_exchange,
)
from ._remez_minimum_order import RemezOrderEstimate, remez_minimum_order
from ._specification import (
    FilterSpecification,
    SymmetryClass,
    ValidationResult,
    normalize_specification,
    symmetry_class,
)

__all__ = [
    # Design functions
    "remez_design",
    "remez_minimum_order",
    # Pipeline stages
    "normalize_specification",
    "symmetry_class",
    "frequency_grid",
    "desired_response",
    "cosine_form",
    "remez_exchange",
    "barycentric_weights",
    "barycentric_interpolate",
    "synthesize_coefficients",
    # Result types
    "DesiredResponse",
    "FilterSpecification",
    "FrequencyGrid",
    "RemezExchangeResult",
    "RemezOrderEstimate",
    "RemezResult",
    "SymmetryClass",
    "ValidationResult",
    # Exceptions
    "ConvergenceError",
    "FilterDesignError",
    "SpecMismatchError",
    "ValidationError",
    "ValidationWarning",
]
