"""Approximation constants for the fast exponential.

The clamp bounds, range-reduction split of ``ln(2)`` and the rational
coefficients are the classic Cephes ``exp`` constants. They are evaluated in
double precision regardless of the buffer precision.

Notes
-----
Per-precision data (exponent bias, mantissa width, clamp bounds) is bundled in
:class:`FloatFormat` so the same operation set can be instantiated for single
and double precision buffers.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

# log(2**1022)
MAXLOG = 7.08396418532264106224e2
MINLOG = -7.08396418532264106224e2

# 1 / log(2)
LOG2E = 1.4426950408889634073599

# log(2) = C1 + C2, C1 exactly representable
C1 = 6.93145751953125e-1
C2 = 1.42860682030941723212e-6

# x * P(x**2)
P0 = 1.26177193074810590878e-4
P1 = 3.02994407707441961300e-2
P2 = 9.99999999999999999910e-1

# Q(x**2)
Q0 = 3.00198505138664455042e-6
Q1 = 2.52448340349684104192e-3
Q2 = 2.27265548208155028766e-1
Q3 = 2.00000000000000000009e0

EXPONENT_BIAS = 1023
MANTISSA_BITS = 52


@dataclass(frozen=True)
class FloatFormat:
    """IEEE-754 layout and clamp bounds for one floating-point precision.

    Attributes
    ----------
    dtype:
        Floating-point numpy dtype of the buffers.
    uint_dtype:
        Unsigned integer dtype with the same width, used for bit construction.
    exponent_bias:
        Bias added to the unbiased exponent.
    mantissa_bits:
        Width of the fraction field; the exponent field starts at this bit.
    maxlog, minlog:
        Inputs above ``maxlog`` map to ``+inf`` and inputs below ``minlog``
        map to ``0.0``.
    """

    dtype: np.dtype
    uint_dtype: np.dtype
    exponent_bias: int
    mantissa_bits: int
    maxlog: float
    minlog: float

    @property
    def name(self) -> str:
        return self.dtype.name


FLOAT64 = FloatFormat(
    dtype=np.dtype(np.float64),
    uint_dtype=np.dtype(np.uint64),
    exponent_bias=EXPONENT_BIAS,
    mantissa_bits=MANTISSA_BITS,
    maxlog=MAXLOG,
    minlog=MINLOG,
)

# log(2**126)
FLOAT32 = FloatFormat(
    dtype=np.dtype(np.float32),
    uint_dtype=np.dtype(np.uint32),
    exponent_bias=127,
    mantissa_bits=23,
    maxlog=8.73365447505531089866e1,
    minlog=-8.73365447505531089866e1,
)

FORMATS = {fmt.name: fmt for fmt in (FLOAT64, FLOAT32)}


def float_format(dtype) -> FloatFormat:
    """Return the :class:`FloatFormat` for ``dtype``.

    Parameters
    ----------
    dtype:
        Anything accepted by :func:`numpy.dtype`.

    Returns
    -------
    FloatFormat
        The matching format.

    Raises
    ------
    ValueError
        If ``dtype`` is not ``float32`` or ``float64``.
    """

    try:
        name = np.dtype(dtype).name
    except TypeError as exc:
        raise ValueError(f"Unsupported scalar type {dtype!r}") from exc
    if name not in FORMATS:
        raise ValueError(
            f"Unsupported scalar type {name!r}; expected one of {sorted(FORMATS)}"
        )
    return FORMATS[name]
