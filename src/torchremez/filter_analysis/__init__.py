"""Filter analysis functions for FIR filters."""

from ._frequency_response_fir import frequency_response_fir

__all__ = [
    "frequency_response_fir",
]
