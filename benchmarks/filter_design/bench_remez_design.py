"""Benchmarks for Parks-McClellan filter design.

This module compares torchremez design functions against scipy baselines.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

# scipy imports - handle optional dependency
try:
    from scipy import signal as scipy_signal

    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False

from torchremez.filter_design import remez_design, remez_minimum_order


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Returns
    -------
    dict
        Mean, standard deviation, minimum and maximum time in seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    remez_time: dict[str, float],
    scipy_time: dict[str, float] | None = None,
) -> None:
    """Print benchmark comparison results."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  torchremez: {format_time(remez_time['mean'])} "
        f"+/- {format_time(remez_time['std'])}"
    )
    if scipy_time is not None:
        print(
            f"  scipy:      {format_time(scipy_time['mean'])} "
            f"+/- {format_time(scipy_time['std'])}"
        )
        speedup = scipy_time["mean"] / remez_time["mean"]
        if speedup >= 1:
            print(f"  Speedup:    {speedup:.2f}x faster")
        else:
            print(f"  Speedup:    {1 / speedup:.2f}x slower")


class BenchRemezDesign:
    """Benchmarks for remez_design."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_lowpass(self, order: int = 50) -> None:
        """Benchmark a lowpass design vs scipy.signal.remez.

        Parameters
        ----------
        order : int, optional
            Filter order. Default is 50.
        """
        bands = [0.0, 0.4, 0.5, 1.0]

        remez_time = self._bench(
            remez_design, order, bands, [1.0, 1.0, 0.0, 0.0]
        )

        scipy_time = None
        if SCIPY_AVAILABLE:
            scipy_time = self._bench(
                scipy_signal.remez, order + 1, bands, [1.0, 0.0], fs=2.0
            )

        print_comparison(f"lowpass (order={order})", remez_time, scipy_time)

    def bench_bandpass(self, order: int = 64) -> None:
        """Benchmark a bandpass design vs scipy.signal.remez."""
        bands = [0.0, 0.2, 0.3, 0.6, 0.7, 1.0]

        remez_time = self._bench(
            remez_design, order, bands, [0.0, 0.0, 1.0, 1.0, 0.0, 0.0]
        )

        scipy_time = None
        if SCIPY_AVAILABLE:
            scipy_time = self._bench(
                scipy_signal.remez, order + 1, bands, [0.0, 1.0, 0.0], fs=2.0
            )

        print_comparison(f"bandpass (order={order})", remez_time, scipy_time)

    def bench_hilbert(self, order: int = 31) -> None:
        """Benchmark a Hilbert transformer vs scipy.signal.remez."""
        bands = [0.1, 0.9]

        remez_time = self._bench(
            remez_design, order, bands, [1.0, 1.0], "hilbert"
        )

        scipy_time = None
        if SCIPY_AVAILABLE:
            scipy_time = self._bench(
                scipy_signal.remez,
                order + 1,
                bands,
                [1.0],
                type="hilbert",
                fs=2.0,
            )

        print_comparison(f"hilbert (order={order})", remez_time, scipy_time)

    def bench_minimum_order(self) -> None:
        """Benchmark order estimation followed by the design."""

        def estimate_and_design():
            estimate = remez_minimum_order(
                [0.4, 0.5], [1.0, 0.0], [0.01, 0.001]
            )
            return remez_design(
                estimate.order,
                estimate.bands,
                estimate.amplitudes,
                weights=estimate.weights,
            )

        print_comparison(
            "minimum order + design", self._bench(estimate_and_design)
        )

    def run_all(self) -> None:
        """Run all Remez design benchmarks."""
        print("=" * 60)
        print("REMEZ DESIGN BENCHMARKS")
        print("=" * 60)

        self.bench_lowpass()
        self.bench_bandpass()
        self.bench_hilbert()
        self.bench_minimum_order()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying filter order."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        for order in [20, 50, 100, 200]:
            self.bench_lowpass(order=order)


if __name__ == "__main__":
    bench = BenchRemezDesign(warmup=5, iterations=20)
    bench.run_all()
    print("\n")
    bench.run_scaling()
