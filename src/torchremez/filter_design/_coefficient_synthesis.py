"""Impulse response synthesis from a converged Remez interpolant."""

from __future__ import annotations

import math
from typing import Sequence

import torch
from torch import Tensor

from ._remez_exchange import RemezExchangeResult, barycentric_interpolate
from ._specification import SymmetryClass


def synthesize_coefficients(
    exchange: RemezExchangeResult,
    grid: Tensor,
    bands: Sequence[float],
    symmetry: SymmetryClass,
) -> tuple[Tensor, float]:
    """
    Convert the converged interpolant into half of the impulse response.

    Parameters
    ----------
    exchange : RemezExchangeResult
        Converged state of :func:`remez_exchange`.
    grid : Tensor
        Grid frequencies in cycles per sample.
    bands : sequence of float
        Band edges, normalized so that 1 is the Nyquist frequency.
    symmetry : SymmetryClass
        Linear-phase type of the filter.

    Returns
    -------
    h : Tensor
        The first ``num_functions`` taps of the impulse response. The rest
        follow by (anti)symmetry.
    deviation : float
        Signed deviation of the design.

    Notes
    -----
    The interpolant ``P`` is a polynomial of degree ``n - 1`` in
    ``x = cos(w)``, so it is recovered exactly from ``2n - 1`` equally
    spaced samples of ``w``. When the bands do not cover ``[0, 1]`` the
    samples are taken in the variable ``t = aa x + bb``, which maps the grid
    onto ``[-1, 1]`` and keeps every sample inside the span of the
    interpolation nodes. The Chebyshev series in ``t`` is then expanded back
    into a series in ``x``.
    """
    x = exchange.abscissas
    ad = exchange.barycentric_weights
    y = exchange.ordinates
    n = x.numel() - 1

    warped = not (bands[0] == 0.0 and bands[-1] == 1.0) and n > 3

    size = 2 * n - 1
    t = torch.cos(
        2 * math.pi * torch.arange(n, dtype=x.dtype, device=x.device) / size
    )

    if warped:
        x_first = math.cos(2 * math.pi * grid[0].item())
        x_last = math.cos(2 * math.pi * grid[-1].item())
        aa = 2.0 / (x_first - x_last)
        bb = -(x_first + x_last) / (x_first - x_last)
        samples = (t - bb) / aa
    else:
        samples = t

    a = barycentric_interpolate(samples, x, ad, y)
    alpha = _cosine_coefficients(a)

    if warped:
        alpha = _unwarp(alpha, aa, bb)

    return _half_impulse_response(alpha, symmetry), exchange.deviation


def _cosine_coefficients(a: Tensor) -> Tensor:
    """Cosine-series coefficients from samples at ``2 pi j / (2n - 1)``."""
    n = a.numel()
    size = 2 * n - 1

    k = torch.arange(n, dtype=a.dtype, device=a.device)
    kernel = torch.cos(2 * math.pi * torch.outer(k, k) / size)

    folded = 2.0 * a
    folded[0] = a[0]

    alpha = kernel @ folded / size
    alpha[1:] = 2.0 * alpha[1:]

    return alpha


def _unwarp(beta: Tensor, aa: float, bb: float) -> Tensor:
    """
    Re-express ``sum beta_k T_k(aa x + bb)`` as ``sum alpha_m T_m(x)``.

    Builds the Chebyshev coefficients of ``T_k(u)``, ``u = aa x + bb``, with
    ``T_{k+1}(u) = 2 u T_k(u) - T_{k-1}(u)``.
    """
    n = beta.numel()

    previous = torch.zeros_like(beta)
    previous[0] = 1.0
    alpha = beta[0] * previous

    current = torch.zeros_like(beta)
    current[0] = bb
    current[1] = aa
    alpha = alpha + beta[1] * current

    for k in range(2, n):
        following = 2.0 * (aa * _multiply_by_x(current) + bb * current)
        following = following - previous
        alpha = alpha + beta[k] * following
        previous, current = current, following

    return alpha


def _multiply_by_x(c: Tensor) -> Tensor:
    # x T_0 = T_1, x T_m = (T_{m+1} + T_{m-1}) / 2
    product = torch.zeros_like(c)
    product[1] = c[0]
    product[2:] = product[2:] + 0.5 * c[1:-1]
    product[:-1] = product[:-1] + 0.5 * c[1:]
    return product


def _half_impulse_response(alpha: Tensor, symmetry: SymmetryClass) -> Tensor:
    n = alpha.numel()

    if symmetry.filter_class == 1:
        taps = alpha / 2.0
        taps[0] = alpha[0]
        return taps.flip(0)

    padded = torch.cat([alpha, alpha.new_zeros(2)])
    lower = padded[:n].clone()
    lower[0] = 2.0 * lower[0]

    # Coefficients of cos((k - 1/2) w), sin(k w) and sin((k - 1/2) w)
    # for k = 1..n.
    if symmetry.filter_class == 2:
        c = (lower + padded[1 : n + 1]) / 2.0
    elif symmetry.filter_class == 3:
        c = (lower - padded[2 : n + 2]) / 2.0
    else:
        c = (lower - padded[1 : n + 1]) / 2.0

    return (c / 2.0).flip(0)
