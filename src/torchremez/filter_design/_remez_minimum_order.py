"""Parks-McClellan filter order estimation."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

from ._exceptions import SpecMismatchError, ValidationError


class RemezOrderEstimate(NamedTuple):
    """Arguments for :func:`remez_design` meeting a ripple specification."""

    order: int
    bands: list[float]
    amplitudes: list[float]
    weights: list[float]


def remez_minimum_order(
    frequencies: Sequence[float],
    amplitudes: Sequence[float],
    deviations: Sequence[float],
    sampling_frequency: float = 2.0,
) -> RemezOrderEstimate:
    """
    Estimate the Parks-McClellan filter order for given specifications.

    Parameters
    ----------
    frequencies : sequence of float
        Transition band edges ``[f1_start, f1_end, f2_start, ...]``, two per
        transition, strictly between 0 and ``sampling_frequency / 2``.
    amplitudes : sequence of float
        Desired gain of each band. Length must equal
        ``len(frequencies) // 2 + 1``.
    deviations : sequence of float
        Maximum allowed deviation from the desired gain in each band. Same
        length as ``amplitudes``.
    sampling_frequency : float, optional
        Sampling frequency in the units of ``frequencies``. Default is 2.0,
        so that 1 is the Nyquist frequency.

    Returns
    -------
    RemezOrderEstimate
        ``(order, bands, amplitudes, weights)`` ready to pass to
        :func:`remez_design`; bands are normalized so that 1 is Nyquist.

    Notes
    -----
    Uses Herrmann's formula for the length of a lowpass filter with
    passband deviation :math:`\\delta_1` and stopband deviation
    :math:`\\delta_2` over a transition of width :math:`\\Delta f`:

    .. math::
        N = \\frac{D_\\infty(\\delta_1, \\delta_2)}{\\Delta f}
            - f(\\delta_1, \\delta_2) \\Delta f + 1

    For more than two bands every transition is evaluated with both
    deviation orderings and the longest estimate is kept. The estimate is
    usually within a few taps of the true minimum; check the designed
    filter and raise the order if needed.

    Examples
    --------
    >>> estimate = remez_minimum_order([0.4, 0.5], [1.0, 0.0], [0.01, 0.001])
    >>> h, error = remez_design(
    ...     estimate.order,
    ...     estimate.bands,
    ...     estimate.amplitudes,
    ...     weights=estimate.weights,
    ... )
    """
    num_bands = len(amplitudes)

    if len(frequencies) % 2 != 0 or len(frequencies) == 0:
        raise ValidationError(
            f"frequencies must have a non-zero even length, "
            f"got {len(frequencies)}"
        )

    if num_bands != len(frequencies) // 2 + 1:
        raise SpecMismatchError(
            f"Number of amplitudes ({num_bands}) must equal "
            f"number of transition bands plus one "
            f"({len(frequencies) // 2 + 1})"
        )

    if len(deviations) != num_bands:
        raise SpecMismatchError(
            f"Number of deviations ({len(deviations)}) must equal "
            f"number of amplitudes ({num_bands})"
        )

    if any(d <= 0 for d in deviations):
        raise ValidationError(
            f"deviations must all be positive, got {list(deviations)}"
        )

    nyquist = sampling_frequency / 2.0
    for i, freq in enumerate(frequencies):
        if not 0 < freq < nyquist:
            raise ValidationError(
                f"Frequency {freq} at index {i} must be between 0 and "
                f"{nyquist}"
            )

    for i in range(1, len(frequencies)):
        if frequencies[i] <= frequencies[i - 1]:
            raise ValidationError(
                f"Frequencies must be strictly increasing. "
                f"Got {frequencies[i]} after {frequencies[i - 1]} at index {i}"
            )

    # Deviations of bands with non-zero gain are relative to the gain.
    relative = [
        d / abs(a) if a != 0 else d for d, a in zip(deviations, amplitudes)
    ]

    # Frequencies in cycles per sample
    normalized = [f / sampling_frequency for f in frequencies]

    if num_bands == 2:
        length = _herrmann_length(
            normalized[0], normalized[1], relative[0], relative[1]
        )
    else:
        length = 0.0
        for i in range(num_bands - 1):
            f1, f2 = normalized[2 * i], normalized[2 * i + 1]
            length = max(
                length,
                _herrmann_length(f1, f2, relative[i], relative[i + 1]),
                _herrmann_length(f1, f2, relative[i + 1], relative[i]),
            )

    order = max(int(math.ceil(length)) - 1, 3)

    bands = [0.0] + [f / nyquist for f in frequencies] + [1.0]
    desired = [float(a) for a in amplitudes for _ in range(2)]
    largest = max(relative)
    weights = [largest / d for d in relative]

    return RemezOrderEstimate(order, bands, desired, weights)


def _herrmann_length(
    frequency_1: float,
    frequency_2: float,
    passband_deviation: float,
    stopband_deviation: float,
) -> float:
    """Herrmann's estimate of the length of a lowpass filter."""
    d1 = math.log10(passband_deviation)
    d2 = math.log10(stopband_deviation)

    d_infinity = (
        (5.309e-03 * d1**2 + 7.114e-02 * d1 - 4.761e-01) * d2
        - 2.660e-03 * d1**2
        - 5.941e-01 * d1
        - 4.278e-01
    )
    correction = 11.01217 + 0.51244 * (d1 - d2)

    width = abs(frequency_2 - frequency_1)

    return d_infinity / width - correction * width + 1
