"""Benchmarks for the fast exponential.

Compares the in-place Numba kernel :func:`vecmathpy.functions.cpu_numba.vecexp`
with :func:`numpy.exp` and the vectorised reference
:func:`vecmathpy.fastexp.fastexp_array` under reproducible settings.
"""

from __future__ import annotations

import argparse
import os

import numpy as np
import pyperf

from vecmathpy.fastexp import fastexp_array
from vecmathpy.factory import get_vector_math


def _set_reproducible_thread_env() -> None:
    """Set conservative thread environment variables.

    Notes
    -----
    Uses ``os.environ.setdefault`` so user-provided values win.
    """
    defaults = {
        "OMP_NUM_THREADS": "1",
        "MKL_NUM_THREADS": "1",
        "OPENBLAS_NUM_THREADS": "1",
        "NUMBA_NUM_THREADS": "1",
    }
    for key, value in defaults.items():
        os.environ.setdefault(key, value)


def _add_worker_args(cmd: list[str], args: argparse.Namespace) -> None:
    """Populate pyperf worker command-line arguments."""
    cmd.extend(["--size", str(args.size)])
    cmd.extend(["--scale", str(args.scale)])
    cmd.extend(["--precision", args.precision])
    cmd.extend(["--seed", str(args.seed)])

    if args.log_quiet:
        cmd.append("--log-quiet")


def _build_runner() -> tuple[pyperf.Runner, argparse.ArgumentParser]:
    """Create the pyperf runner and CLI parser."""
    parser = argparse.ArgumentParser(
        description="Benchmark the fast exponential against numpy.exp",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--size",
        type=int,
        default=100_000,
        help="Vector length",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=20.0,
        help="Inputs are drawn uniformly from [-scale, scale]",
    )
    parser.add_argument(
        "--precision",
        choices=("float64", "float32"),
        default="float64",
        help="Scalar type of the buffers",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="RNG seed for deterministic inputs",
    )
    parser.add_argument(
        "--log-quiet",
        dest="log_quiet",
        action="store_true",
        help="Suppress noisy Python-side logging",
    )

    runner = pyperf.Runner(
        _argparser=parser,
        add_cmdline_args=_add_worker_args,
        processes=1,
        warmups=1,
    )
    return runner, parser


def main() -> None:
    """CLI entry point for the fast exponential benchmark."""
    _set_reproducible_thread_env()

    runner, _ = _build_runner()
    args = runner.parse_args()

    if args.log_quiet:
        import logging

        logging.getLogger().setLevel(logging.ERROR)

    vm = get_vector_math(args.precision, checked=False)
    rng = np.random.default_rng(args.seed)
    x = rng.uniform(-args.scale, args.scale, size=args.size).astype(vm.dtype)
    work = np.empty_like(x)
    n = x.size

    def _bench_vecexp() -> None:
        vm.copy(work, x, n)
        vm.exp(work, n)

    def _bench_numpy() -> None:
        np.exp(x, out=work)

    # Warm up Numba compilation and caches.
    _bench_vecexp()

    runner.bench_func(f"vecexp_{args.precision}", _bench_vecexp)
    runner.bench_func(f"numpy_exp_{args.precision}", _bench_numpy)
    runner.bench_func(f"fastexp_array_{args.precision}", fastexp_array, x)


if __name__ == "__main__":
    main()
