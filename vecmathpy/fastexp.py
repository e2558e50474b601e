"""Vectorised reference implementation of the fast exponential.

This module evaluates the same range reduction, rational approximation and
bit-level power-of-two reconstruction as the Numba kernel
:func:`vecmathpy.functions.cpu_numba.fastexp`, but on whole numpy arrays.
It allocates its result and never mutates the input, which makes it the
reference the in-place kernels are tested against.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from vecmathpy.constants import (
    C1,
    C2,
    LOG2E,
    P0,
    P1,
    P2,
    Q0,
    Q1,
    Q2,
    Q3,
    FLOAT64,
    FloatFormat,
    float_format,
)


def pow2_array(n: npt.ArrayLike, fmt: FloatFormat = FLOAT64) -> np.ndarray:
    """Build ``2**n`` from IEEE-754 bit patterns.

    Parameters
    ----------
    n:
        Integer exponents with ``1 - bias <= n <= bias``.
    fmt:
        Target precision.

    Returns
    -------
    np.ndarray
        Array of ``fmt.dtype`` holding exact powers of two.

    Notes
    -----
    The biased exponent is assembled as an integer and shifted into the
    exponent field; the integer buffer is then viewed as floats. No byte
    offsets are involved, so the result does not depend on the host byte
    order.
    """

    n = np.asarray(n, dtype=np.int64)
    biased = (n + fmt.exponent_bias).astype(fmt.uint_dtype)
    bits = np.left_shift(biased, fmt.uint_dtype.type(fmt.mantissa_bits))
    return np.asarray(bits).view(fmt.dtype)


def fastexp_array(x: npt.ArrayLike) -> np.ndarray:
    """Approximate ``exp(x)`` elementwise.

    Parameters
    ----------
    x:
        Exponents. ``float32`` input uses the single-precision clamp bounds
        and exponent layout; anything else is evaluated as ``float64``.

    Returns
    -------
    np.ndarray
        Array of the same shape and precision as ``x``. Values above the
        upper clamp are ``inf``, below the lower clamp ``0.0``; NaN stays NaN.
    """

    x = np.asarray(x)
    fmt = float_format(x.dtype) if x.dtype == np.float32 else FLOAT64
    x64 = x.astype(np.float64)

    inside = (x64 >= fmt.minlog) & (x64 <= fmt.maxlog)
    xs = np.where(inside, x64, 0.0)

    n = np.floor(LOG2E * xs + 0.5)
    r = xs - n * C1
    r -= n * C2
    xx = r * r

    px = ((P0 * xx + P1) * xx + P2) * r
    qx = ((Q0 * xx + Q1) * xx + Q2) * xx + Q3
    r = 1.0 + 2.0 * (px / (qx - px))

    core = r * pow2_array(n.astype(np.int64), fmt).astype(np.float64)

    outside = np.where(
        x64 > fmt.maxlog, np.inf, np.where(x64 < fmt.minlog, 0.0, np.nan)
    )
    return np.where(inside, core, outside).astype(fmt.dtype)
