"""Desired response and error weight sampled on the frequency grid."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

import torch
from torch import Tensor

from ._exceptions import SpecMismatchError
from ._specification import SymmetryClass, check_adjacent_bands

# Differentiator bands ending below this amplitude keep a flat weight.
DIFFERENTIATOR_AMPLITUDE_THRESHOLD = 1e-4


class DesiredResponse(NamedTuple):
    """Target amplitude and error weight, parallel to the grid."""

    desired: Tensor
    weight: Tensor


def desired_response(
    order: int,
    bands: Sequence[float],
    grid: Tensor,
    weights: Sequence[float],
    amplitudes: Sequence[float],
    differentiator: bool = False,
) -> DesiredResponse:
    """
    Sample the piecewise-linear band specification on the grid.

    Parameters
    ----------
    order : int
        Filter order.
    bands : sequence of float
        Band edges, normalized so that 1 is the Nyquist frequency.
    grid : Tensor
        Grid frequencies in cycles per sample, as built by
        :func:`frequency_grid`.
    weights : sequence of float
        One weight per band.
    amplitudes : sequence of float
        Desired amplitude at each band edge.
    differentiator : bool, optional
        If True, bands ending at a non-trivial amplitude are weighted by the
        inverse of frequency, so the error is relative to the slope.

    Returns
    -------
    DesiredResponse
        Desired amplitude and weight at every grid point.

    Raises
    ------
    SpecMismatchError
        If ``amplitudes`` and ``bands`` differ in length, or two touching
        bands ask for different amplitudes at their shared edge.
    """
    if len(amplitudes) != len(bands):
        raise SpecMismatchError(
            f"Number of amplitudes ({len(amplitudes)}) must equal "
            f"number of band edges ({len(bands)}) for order {order}"
        )
    check_adjacent_bands(bands, amplitudes)

    # Grid points are in half-band units; band edges are in Nyquist units.
    frequency = 2.0 * grid

    desired = torch.zeros_like(grid)
    weight = torch.zeros_like(grid)
    assigned = torch.zeros_like(grid, dtype=torch.bool)

    for band in range(len(bands) // 2):
        lower, upper = bands[2 * band], bands[2 * band + 1]
        a_lower, a_upper = amplitudes[2 * band], amplitudes[2 * band + 1]

        selected = (
            (frequency >= lower - 1e-12)
            & (frequency <= upper + 1e-12)
            & ~assigned
        )
        if not selected.any():
            continue

        f = frequency[selected]

        if upper == lower:
            desired[selected] = (a_lower + a_upper) / 2.0
        else:
            slope = (a_upper - a_lower) / (upper - lower)
            desired[selected] = a_lower + slope * (f - lower)

        if (
            differentiator
            and abs(a_upper) >= DIFFERENTIATOR_AMPLITUDE_THRESHOLD
        ):
            weight[selected] = weights[band] / f
        else:
            weight[selected] = weights[band]

        assigned |= selected

    if not assigned.all():
        raise RuntimeError(
            f"{int((~assigned).sum())} grid points fall outside every band"
        )

    return DesiredResponse(desired, weight)


def cosine_form(
    grid: Tensor,
    response: DesiredResponse,
    symmetry: SymmetryClass,
) -> DesiredResponse:
    """
    Rewrite a response so it can be approximated by a plain cosine series.

    Types II, III and IV carry a fixed factor ``Q(f)`` in their amplitude
    (``cos(pi f)``, ``sin(2 pi f)`` and ``sin(pi f)`` with ``f`` in cycles
    per sample). Approximating ``D / Q`` with weight ``W * Q`` gives the same
    weighted error as approximating ``D`` with weight ``W``.
    """
    if symmetry.filter_class == 1:
        return response

    if symmetry.filter_class == 2:
        factor = torch.cos(math.pi * grid)
    elif symmetry.filter_class == 3:
        factor = torch.sin(2 * math.pi * grid)
    else:
        factor = torch.sin(math.pi * grid)

    if torch.any(factor == 0):
        raise RuntimeError(
            f"Type {symmetry.filter_class} grid contains a forced zero of "
            "the amplitude response"
        )

    return DesiredResponse(
        response.desired / factor,
        response.weight * factor,
    )
