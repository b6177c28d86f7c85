"""Frequency response computation for FIR filters."""

import math
from typing import Optional, Tuple, Union

import torch
from torch import Tensor


def frequency_response_fir(
    coefficients: Tensor,
    frequencies: Union[Tensor, int] = 512,
    whole: bool = False,
    sampling_frequency: Optional[float] = None,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Compute frequency response of an FIR filter.

    Parameters
    ----------
    coefficients : Tensor
        Impulse response h[n], n = 0, ..., N - 1.
    frequencies : Tensor or int, default 512
        If int: Number of frequency points to compute.
        If Tensor: Specific frequency points at which to evaluate.
    whole : bool, default False
        If True and frequencies is int, compute from 0 to sampling frequency.
    sampling_frequency : float, optional
        If None: frequencies are normalized [0, 1] where 1 = Nyquist.
        If provided: frequencies are in Hz.
    dtype : torch.dtype, optional
        Output dtype for frequency response.
    device : torch.device, optional
        Output device.

    Returns
    -------
    frequencies : Tensor
        Frequency points.
    response : Tensor
        Complex frequency response H(e^{jw}).

    Notes
    -----
    The frequency response is computed as:

    .. math::
        H(e^{j\\omega}) = \\sum_{n=0}^{N-1} h_n e^{-j\\omega n}

    Examples
    --------
    >>> import torch
    >>> from torchremez.filter_analysis import frequency_response_fir
    >>> h = torch.tensor([0.25, 0.5, 0.25], dtype=torch.float64)
    >>> freqs, response = frequency_response_fir(h)
    >>> response.shape
    torch.Size([512])
    """
    if device is None:
        device = coefficients.device
    if dtype is None:
        if coefficients.dtype == torch.float64:
            dtype = torch.complex128
        else:
            dtype = torch.complex64

    # Generate or validate frequency points
    if isinstance(frequencies, int):
        n_points = frequencies
        if whole:
            max_freq = (
                2.0 if sampling_frequency is None else sampling_frequency
            )
        else:
            max_freq = (
                1.0 if sampling_frequency is None else sampling_frequency / 2.0
            )

        # Use endpoint=False to match scipy behavior
        freq_points = torch.linspace(
            0, max_freq, n_points + 1, dtype=torch.float64, device=device
        )[:-1]
    else:
        freq_points = frequencies.to(dtype=torch.float64, device=device)

    # Convert frequencies to normalized angular frequency
    if sampling_frequency is not None:
        w = 2 * math.pi * freq_points / sampling_frequency
    else:
        w = math.pi * freq_points

    h = coefficients.to(dtype=torch.complex128, device=device)
    n = torch.arange(h.numel(), dtype=torch.float64, device=device)

    # Direct evaluation is exact for the short filters Remez produces
    kernel = torch.exp(-1j * torch.outer(w, n))
    response = kernel @ h

    return freq_points.to(coefficients.dtype), response.to(dtype)
