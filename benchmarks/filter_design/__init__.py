"""Benchmarks for Parks-McClellan filter design.

Compares torchremez against scipy baselines.
"""

from .bench_remez_design import BenchRemezDesign

__all__ = [
    "BenchRemezDesign",
]
