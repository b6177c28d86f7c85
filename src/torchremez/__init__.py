"""torchremez: Parks-McClellan FIR filter design in PyTorch."""

from . import filter_analysis, filter_design

__all__ = [
    "filter_analysis",
    "filter_design",
]

__version__ = "0.1.0"
