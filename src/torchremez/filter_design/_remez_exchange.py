"""Remez multiple exchange with barycentric Lagrange interpolation."""

from __future__ import annotations

import math
from typing import NamedTuple

import torch
from torch import Tensor

from ._exceptions import ConvergenceError

DEFAULT_MAXITER = 250


class RemezExchangeResult(NamedTuple):
    """Converged state of the Remez exchange.

    Parameters
    ----------
    abscissas : Tensor
        Lagrange abscissas ``x = cos(2 pi f)`` at the extremal frequencies.
    ordinates : Tensor
        Interpolated values ``y`` at the abscissas.
    barycentric_weights : Tensor
        Barycentric weights ``ad`` of the abscissas.
    deviation : float
        Signed deviation ``dev``. The weighted error at extremal point ``k``
        is ``(-1)**k * dev``.
    extremal_indices : Tensor
        Grid indices of the extremal frequencies, strictly increasing.
    num_iterations : int
        Number of exchange iterations performed.
    """

    abscissas: Tensor
    ordinates: Tensor
    barycentric_weights: Tensor
    deviation: float
    extremal_indices: Tensor
    num_iterations: int


def remez_exchange(
    grid: Tensor,
    desired: Tensor,
    weight: Tensor,
    num_functions: int,
    maxiter: int = DEFAULT_MAXITER,
) -> RemezExchangeResult:
    """
    Find the minimax cosine-series approximation on a frequency grid.

    Parameters
    ----------
    grid : Tensor
        Strictly increasing grid frequencies in cycles per sample.
    desired : Tensor
        Desired amplitude at each grid point, in cosine form.
    weight : Tensor
        Positive error weight at each grid point, in cosine form.
    num_functions : int
        Number of cosine basis functions. The extremal set has
        ``num_functions + 1`` points.
    maxiter : int, optional
        Maximum number of exchange iterations. Default is 250.

    Returns
    -------
    RemezExchangeResult
        Interpolation state at convergence.

    Raises
    ------
    ConvergenceError
        If the extremal set is still changing after ``maxiter`` iterations.

    Notes
    -----
    Each iteration solves for the deviation that makes the weighted error

    .. math::
        E(f) = W(f) \\left(P(\\cos 2 \\pi f) - D(f)\\right)

    alternate in sign with equal magnitude on the current extremal set, then
    moves every extremal point to the largest same-sign error between its
    neighbours. An extremum of opposite sign beyond either end of the set
    shifts the whole set by one point. The iteration stops once the set no
    longer changes.
    """
    ngrid = grid.numel()
    nz = num_functions + 1

    if ngrid < nz:
        raise RuntimeError(
            f"Grid has {ngrid} points, fewer than the {nz} extremal points"
        )

    x_grid = torch.cos(2 * math.pi * grid)

    extremal = [(ngrid - 1) * k // num_functions for k in range(num_functions)]
    extremal.append(ngrid - 1)

    signs = torch.ones(nz, dtype=grid.dtype, device=grid.device)
    signs[1::2] = -1.0

    # Errors below this are rounding noise of the interpolant.
    noise = 1e-12 * max((desired * weight).abs().max().item(), 1.0)

    for iteration in range(1, maxiter + 1):
        indices = torch.tensor(extremal, dtype=torch.long, device=grid.device)

        x = x_grid[indices]
        ad = barycentric_weights(x)

        d = desired[indices]
        w = weight[indices]
        dev = -torch.sum(ad * d) / torch.sum(signs * ad / w)
        y = d + signs * dev / w

        fitted = barycentric_interpolate(x_grid, x, ad, y)
        error = (fitted - desired) * weight
        error[indices] = signs * dev

        dev = dev.item()

        candidates = _vicinity_search(error, extremal)
        candidates = _endpoint_search(error, candidates)

        converged = candidates == extremal or (
            error.abs().max().item() <= abs(dev) * (1.0 + 1e-12) + noise
        )

        if converged:
            return RemezExchangeResult(
                abscissas=x,
                ordinates=y,
                barycentric_weights=ad,
                deviation=dev,
                extremal_indices=indices,
                num_iterations=iteration,
            )

        extremal = candidates

    raise ConvergenceError(
        f"Remez exchange did not converge after {maxiter} iterations. "
        "Try widening the transition bands or increasing maxiter."
    )


def barycentric_weights(x: Tensor) -> Tensor:
    """
    Barycentric weights of the abscissas ``x``.

    ``ad[k] = 1 / prod_{j != k} 2 (x[j] - x[k])``. The factor 2 keeps the
    products near unit magnitude for abscissas spread over ``[-1, 1]``.
    """
    difference = 2.0 * (x.unsqueeze(0) - x.unsqueeze(1))
    difference.fill_diagonal_(1.0)

    if torch.any(difference == 0):
        raise RuntimeError("Extremal abscissas must be distinct")

    return 1.0 / torch.prod(difference, dim=1)


def barycentric_interpolate(
    points: Tensor,
    x: Tensor,
    ad: Tensor,
    y: Tensor,
) -> Tensor:
    """Evaluate the barycentric interpolant through (x, y) at ``points``."""
    difference = points.unsqueeze(1) - x.unsqueeze(0)
    exact = difference == 0

    c = ad / torch.where(exact, torch.ones_like(difference), difference)
    values = (c @ y) / c.sum(dim=1)

    return torch.where(exact.any(dim=1), (exact * y).sum(dim=1), values)


def _vicinity_search(error: Tensor, extremal: list[int]) -> list[int]:
    ngrid = error.numel()
    nz = len(extremal)
    candidates = list(extremal)

    for k in range(nz):
        low = candidates[k - 1] + 1 if k > 0 else 0
        high = extremal[k + 1] if k < nz - 1 else ngrid

        if low >= high:
            raise RuntimeError(
                f"Empty search interval for extremal point {k} "
                f"(grid indices {low} to {high})"
            )

        sign = 1.0 if error[extremal[k]] >= 0 else -1.0
        window = sign * error[low:high]
        candidates[k] = low + int(torch.argmax(window))

    return candidates


def _endpoint_search(error: Tensor, candidates: list[int]) -> list[int]:
    ngrid = error.numel()
    magnitude = error[candidates].abs()
    weakest = magnitude.min().item()

    left = None
    first = candidates[0]
    if first > 0:
        sign = -1.0 if error[first] >= 0 else 1.0
        window = sign * error[:first]
        index = int(torch.argmax(window))
        if window[index].item() > weakest:
            left = (window[index].item(), index)

    right = None
    last = candidates[-1]
    if last < ngrid - 1:
        sign = -1.0 if error[last] >= 0 else 1.0
        window = sign * error[last + 1 :]
        index = int(torch.argmax(window))
        if window[index].item() > weakest:
            right = (window[index].item(), last + 1 + index)

    if left is not None and (right is None or left[0] >= right[0]):
        return [left[1]] + candidates[:-1]
    if right is not None:
        return candidates[1:] + [right[1]]

    return candidates
