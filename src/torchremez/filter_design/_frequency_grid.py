"""Dense frequency grid for the Remez exchange algorithm."""

from __future__ import annotations

import math
from typing import NamedTuple, Optional, Sequence

import torch
from torch import Tensor

# Bands that would get fewer interior points than this are resampled evenly.
MIN_INTERIOR_POINTS = 10


class FrequencyGrid(NamedTuple):
    """Frequency samples used by the exchange.

    Parameters
    ----------
    frequencies : Tensor
        Strictly increasing samples in cycles per sample, ``[0, 0.5]``.
    grid_density : int
        Density that produced the grid, after any escalation.
    """

    frequencies: Tensor
    grid_density: int


def frequency_grid(
    num_functions: int,
    grid_density: int,
    bands: Sequence[float],
    antisymmetric: bool,
    odd_length: bool,
    *,
    device: Optional[torch.device] = None,
) -> FrequencyGrid:
    """
    Build the dense frequency grid for a Remez design.

    Parameters
    ----------
    num_functions : int
        Number of cosine basis functions (``nfcns``).
    grid_density : int
        Requested grid points per basis function.
    bands : sequence of float
        Band edges, normalized so that 1 is the Nyquist frequency.
    antisymmetric : bool
        True for Types III and IV, which have a zero at DC.
    odd_length : bool
        True for an odd number of taps.
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    FrequencyGrid
        The grid in cycles per sample and the density used to build it.

    Notes
    -----
    Points are spaced ``0.5 / (grid_density * num_functions)`` apart within
    each band, with the last point of every band snapped to its upper edge.
    Types III and IV cannot be evaluated at DC, so a band starting at 0 is
    started one spacing (at most half the band) above it, and a zero-width
    band at DC is not sampled at all; Types II and III
    drop a final point lying within one spacing of Nyquist.

    The density is multiplied by 4 until the grid holds more points than the
    filter has taps.
    """
    if device is None:
        device = torch.device("cpu")

    num_taps = _num_taps(num_functions, antisymmetric, odd_length)
    zero_at_nyquist = antisymmetric == odd_length
    edges = [f / 2.0 for f in bands]

    while True:
        spacing = 0.5 / (grid_density * num_functions)
        points = _grid_points(edges, spacing, antisymmetric)

        if zero_at_nyquist and points[-1] > 0.5 - spacing:
            points.pop()

        if len(points) > num_taps:
            break

        grid_density *= 4

    frequencies = torch.tensor(points, dtype=torch.float64, device=device)

    return FrequencyGrid(frequencies, grid_density)


def _grid_points(
    edges: list[float], spacing: float, zero_at_dc: bool
) -> list[float]:
    points: list[float] = []

    for band in range(len(edges) // 2):
        lower = edges[2 * band]
        upper = edges[2 * band + 1]

        if lower == 0.0 and zero_at_dc:
            # A zero-width band at DC has no sample off the forced zero.
            if upper == 0.0:
                continue
            lower = min(spacing, upper / 2.0)

        band_points = _band_points(lower, upper, spacing)

        if points and band_points[0] <= points[-1]:
            band_points = band_points[1:]

        points.extend(band_points)

    return points


def _band_points(lower: float, upper: float, spacing: float) -> list[float]:
    if upper == lower:
        return [lower]

    steps = int(math.floor((upper - lower) / spacing + 1e-9))

    if steps < MIN_INTERIOR_POINTS + 1:
        steps = MIN_INTERIOR_POINTS + 1
        spacing = (upper - lower) / steps

    points = [lower + i * spacing for i in range(steps + 1)]
    points[-1] = upper

    return points


def _num_taps(
    num_functions: int, antisymmetric: bool, odd_length: bool
) -> int:
    if not odd_length:
        return 2 * num_functions
    if antisymmetric:
        return 2 * num_functions + 1
    return 2 * num_functions - 1
