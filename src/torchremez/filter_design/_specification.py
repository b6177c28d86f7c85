"""Validation and canonicalization of Remez filter requests."""

from __future__ import annotations

import numbers
from typing import Literal, NamedTuple, Optional, Sequence

from ._exceptions import SpecMismatchError, ValidationError

FILTER_TYPES = ("regular", "hilbert", "differentiator")

DEFAULT_GRID_DENSITY = 16


class SymmetryClass(NamedTuple):
    """Linear-phase symmetry class of an FIR filter.

    Parameters
    ----------
    filter_class : int
        Linear-phase type, 1 to 4.
    antisymmetric : bool
        True for Types III and IV (Hilbert transformers and
        differentiators).
    odd_length : bool
        True when the filter has an odd number of taps.
    sign : int
        Overall sign applied to the final impulse response, ``-1`` for
        differentiators and ``+1`` otherwise.
    """

    filter_class: int
    antisymmetric: bool
    odd_length: bool
    sign: int

    def num_functions(self, num_taps: int) -> int:
        """Number of cosine basis functions for a filter of ``num_taps``."""
        if self.filter_class == 1:
            return (num_taps + 1) // 2
        if self.filter_class == 3:
            return (num_taps - 1) // 2
        return num_taps // 2


class FilterSpecification(NamedTuple):
    """A validated Remez request with every default resolved."""

    order: int
    bands: tuple[float, ...]
    amplitudes: tuple[float, ...]
    filter_type: str
    weights: tuple[float, ...]
    grid_density: int
    symmetry: SymmetryClass

    @property
    def num_taps(self) -> int:
        return self.order + 1


class ValidationResult(NamedTuple):
    """Outcome of :func:`normalize_specification`.

    Exactly one of ``specification`` and ``error`` is set. ``warning`` holds
    a message for adjustments that did not prevent the design.
    """

    specification: Optional[FilterSpecification] = None
    error: Optional[ValidationError] = None
    warning: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def symmetry_class(order: int, filter_type: str) -> SymmetryClass:
    """Derive the linear-phase type from the order and the filter type."""
    odd_length = order % 2 == 0
    antisymmetric = filter_type != "regular"

    if antisymmetric:
        filter_class = 3 if odd_length else 4
    else:
        filter_class = 1 if odd_length else 2

    sign = -1 if filter_type == "differentiator" else 1

    return SymmetryClass(filter_class, antisymmetric, odd_length, sign)


def normalize_specification(
    order: int,
    bands: Sequence[float],
    amplitudes: Sequence[float],
    filter_type: Literal["regular", "hilbert", "differentiator"] = "regular",
    weights: Optional[Sequence[float]] = None,
    grid_density: Optional[int] = None,
) -> ValidationResult:
    """
    Validate a Remez request and resolve its defaults.

    Parameters
    ----------
    order : int
        Filter order. The filter has ``order + 1`` taps. Must be at least 3.
    bands : sequence of float
        Band edges as pairs ``[start1, end1, start2, end2, ...]`` normalized
        so that 1 is the Nyquist frequency.
    amplitudes : sequence of float
        Desired amplitude at each band edge. The desired response is linear
        between the two edges of a band.
    filter_type : {"regular", "hilbert", "differentiator"}, optional
        Filter type. Default is "regular".
    weights : sequence of float, optional
        One positive weight per band. Default is all ones.
    grid_density : int, optional
        Grid points per cosine basis function. Default is 16.

    Returns
    -------
    ValidationResult
        The specification, or the first violated constraint as a
        :class:`ValidationError`. Odd-order regular filters with non-zero
        gain at Nyquist come back with ``order + 1`` and a warning.
    """
    try:
        specification, warning = _normalize(
            order, bands, amplitudes, filter_type, weights, grid_density
        )
    except ValidationError as error:
        return ValidationResult(error=error)

    return ValidationResult(specification=specification, warning=warning)


def _normalize(
    order: int,
    bands: Sequence[float],
    amplitudes: Sequence[float],
    filter_type: str,
    weights: Optional[Sequence[float]],
    grid_density: Optional[int],
) -> tuple[FilterSpecification, Optional[str]]:
    if filter_type not in FILTER_TYPES:
        raise ValidationError(
            f"filter_type must be one of {FILTER_TYPES}, got {filter_type!r}"
        )

    if isinstance(order, bool) or not isinstance(order, numbers.Integral):
        raise ValidationError(f"order must be an integer, got {order!r}")
    order = int(order)
    if order < 3:
        raise ValidationError(f"order must be at least 3, got {order}")

    bands = tuple(float(f) for f in bands)
    amplitudes = tuple(float(a) for a in amplitudes)

    if len(bands) == 0 or len(bands) % 2 != 0:
        raise ValidationError(
            f"bands must have a non-zero even length, got {len(bands)}"
        )

    if len(amplitudes) != len(bands):
        raise SpecMismatchError(
            f"Number of amplitudes ({len(amplitudes)}) must equal "
            f"number of band edges ({len(bands)})"
        )

    for i, freq in enumerate(bands):
        if not 0.0 <= freq <= 1.0:
            raise ValidationError(
                f"Band edge {freq} at index {i} must be between 0 and 1"
            )

    for i in range(1, len(bands)):
        if bands[i] < bands[i - 1]:
            raise ValidationError(
                f"Band edges must be monotonically increasing. "
                f"Got {bands[i]} after {bands[i - 1]} at index {i}"
            )

    if all(bands[i] == bands[i + 1] for i in range(0, len(bands), 2)):
        raise ValidationError("At least one band must have non-zero width")

    check_adjacent_bands(bands, amplitudes)

    num_bands = len(bands) // 2
    if weights is None:
        weights = (1.0,) * num_bands
    else:
        weights = tuple(float(w) for w in weights)

    if len(weights) != num_bands:
        raise ValidationError(
            f"Number of weights ({len(weights)}) must equal "
            f"number of bands ({num_bands})"
        )

    if any(w <= 0.0 for w in weights):
        raise ValidationError(
            f"weights must all be strictly positive, got {list(weights)}"
        )

    if grid_density is None:
        grid_density = DEFAULT_GRID_DENSITY
    if (
        isinstance(grid_density, bool)
        or not isinstance(grid_density, numbers.Integral)
        or grid_density < 1
    ):
        raise ValidationError(
            f"grid_density must be a positive integer, got {grid_density!r}"
        )

    warning = None
    if (
        filter_type == "regular"
        and order % 2 == 1
        and bands[-1] == 1.0
        and amplitudes[-1] != 0.0
    ):
        warning = (
            "Odd order symmetric FIR filters must have a gain of zero at "
            f"the Nyquist frequency. The order is being increased from "
            f"{order} to {order + 1}."
        )
        order += 1

    specification = FilterSpecification(
        order=order,
        bands=bands,
        amplitudes=amplitudes,
        filter_type=filter_type,
        weights=weights,
        grid_density=int(grid_density),
        symmetry=symmetry_class(order, filter_type),
    )

    return specification, warning


def check_adjacent_bands(
    bands: Sequence[float], amplitudes: Sequence[float]
) -> None:
    """Reject touching bands whose amplitudes disagree at the shared edge."""
    for i in range(1, len(bands) - 1, 2):
        if bands[i] == bands[i + 1] and amplitudes[i] != amplitudes[i + 1]:
            raise SpecMismatchError(
                f"Bands {i // 2} and {i // 2 + 1} share the edge "
                f"{bands[i]} but ask for amplitudes {amplitudes[i]} and "
                f"{amplitudes[i + 1]} there"
            )
