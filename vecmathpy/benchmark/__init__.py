"""Benchmark scripts.

Run with ``python -m vecmathpy.benchmark.bench_fastexp``.
"""
