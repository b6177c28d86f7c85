"""Parks-McClellan (Remez) optimal FIR filter design."""

from __future__ import annotations

import warnings
from typing import Literal, NamedTuple, Optional, Sequence

import torch
from torch import Tensor

from ._coefficient_synthesis import synthesize_coefficients
from ._desired_response import cosine_form, desired_response
from ._exceptions import ValidationWarning
from ._frequency_grid import frequency_grid
from ._remez_exchange import DEFAULT_MAXITER, remez_exchange
from ._specification import (
    DEFAULT_GRID_DENSITY,
    SymmetryClass,
    normalize_specification,
)


class RemezResult(NamedTuple):
    """Result of :func:`remez_design`.

    Parameters
    ----------
    coefficients : Tensor
        FIR filter coefficients with shape ``(order + 1,)``.
    maximum_error : float
        Magnitude of the converged weighted deviation, in the units of the
        desired amplitudes.
    """

    coefficients: Tensor
    maximum_error: float


def remez_design(
    order: int,
    bands: Sequence[float],
    amplitudes: Sequence[float],
    filter_type: Literal["regular", "hilbert", "differentiator"] = "regular",
    weights: Optional[Sequence[float]] = None,
    grid_density: int = DEFAULT_GRID_DENSITY,
    *,
    maxiter: int = DEFAULT_MAXITER,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> RemezResult:
    """
    Design an optimal FIR filter using the Parks-McClellan (Remez) algorithm.

    The Parks-McClellan algorithm computes the linear-phase FIR filter that
    minimizes the maximum weighted error between the desired and the actual
    amplitude response over a set of bands (Chebyshev criterion).

    Parameters
    ----------
    order : int
        Filter order. The filter has ``order + 1`` taps. Must be at least 3.
    bands : sequence of float
        Band edges as pairs [start1, end1, start2, end2, ...]. Frequencies are
        normalized so that 1 is the Nyquist frequency. Must have even length
        with non-decreasing values.
    amplitudes : sequence of float
        Desired amplitude at each band edge. Same length as ``bands``; the
        desired response is linear between the two edges of a band.
    filter_type : {"regular", "hilbert", "differentiator"}, optional
        Type of filter:
        - "regular": symmetric impulse response (default)
        - "hilbert": antisymmetric, for Hilbert transformers
        - "differentiator": antisymmetric with error weighted by 1/f in
          bands of non-zero amplitude
    weights : sequence of float, optional
        Positive weight for the error in each band. Length must equal
        ``len(bands) // 2``. Default is equal weighting (all ones).
    grid_density : int, optional
        Grid points per cosine basis function. Default is 16. The density is
        raised automatically when the grid would have too few points.
    maxiter : int, optional
        Maximum number of Remez exchange iterations. Default is 250.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.float64.
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    RemezResult
        Named tuple ``(coefficients, maximum_error)``.

    Raises
    ------
    ValidationError
        If the request is malformed. :class:`SpecMismatchError` for
        inconsistent bands and amplitudes.
    ConvergenceError
        If the exchange does not converge within ``maxiter`` iterations.

    Warns
    -----
    ValidationWarning
        When an odd-order regular filter with non-zero gain at Nyquist is
        designed with ``order + 1`` instead.

    Notes
    -----
    The filter type and the parity of the length select one of the four
    linear-phase types:

    ======  ===========  ===============  ==========================
    Type    Length       Symmetry         Forced zeros
    ======  ===========  ===============  ==========================
    I       odd          symmetric        none
    II      even         symmetric        Nyquist
    III     odd          antisymmetric    DC and Nyquist
    IV      even         antisymmetric    DC
    ======  ===========  ===============  ==========================

    Hilbert transformers come out with ``H(w) exp(j w M) = +j A(w)`` and
    differentiators with ``-j A(w)``, ``M = order / 2``.

    Examples
    --------
    >>> import torch
    >>> from torchremez.filter_design import remez_design
    >>> # Lowpass filter, passband to 0.4 and stopband from 0.5 (Nyquist = 1)
    >>> h, error = remez_design(40, [0.0, 0.4, 0.5, 1.0], [1.0, 1.0, 0.0, 0.0])
    >>> h.shape
    torch.Size([41])

    >>> # Hilbert transformer
    >>> h, error = remez_design(31, [0.1, 0.9], [1.0, 1.0], "hilbert")
    """
    result = normalize_specification(
        order, bands, amplitudes, filter_type, weights, grid_density
    )
    if result.error is not None:
        raise result.error
    if result.warning is not None:
        warnings.warn(result.warning, ValidationWarning, stacklevel=2)

    specification = result.specification
    symmetry = specification.symmetry

    if dtype is None:
        dtype = torch.float64
    if device is None:
        device = torch.device("cpu")

    num_functions = symmetry.num_functions(specification.num_taps)

    grid, _ = frequency_grid(
        num_functions,
        specification.grid_density,
        specification.bands,
        symmetry.antisymmetric,
        symmetry.odd_length,
        device=device,
    )

    response = desired_response(
        specification.order,
        specification.bands,
        grid,
        specification.weights,
        specification.amplitudes,
        differentiator=specification.filter_type == "differentiator",
    )
    desired, weight = cosine_form(grid, response, symmetry)

    exchange = remez_exchange(grid, desired, weight, num_functions, maxiter)

    h, deviation = synthesize_coefficients(
        exchange, grid, specification.bands, symmetry
    )

    h = _full_impulse_response(h, symmetry)

    return RemezResult(h.to(dtype), abs(deviation))


def _full_impulse_response(h: Tensor, symmetry: SymmetryClass) -> Tensor:
    """Mirror the half-length taps into the full impulse response."""
    if not symmetry.antisymmetric:
        if symmetry.odd_length:
            mirror = h[:-1].flip(0)
        else:
            mirror = h.flip(0)
        full = torch.cat([h, mirror])
    elif symmetry.odd_length:
        full = torch.cat([h, h.new_zeros(1), -h.flip(0)])
    else:
        full = torch.cat([h, -h.flip(0)])

    return symmetry.sign * full
