"""CPU kernels for vector arithmetic and the fast exponential.

Every routine works in place on caller-owned 1-D buffers and touches exactly
the first ``n`` elements. Lengths, strides and aliasing are not checked; use
:class:`vecmathpy.vector_math.CheckedVectorMath` for a validating front end.

Notes
-----
The kernels are compiled without ``parallel`` and ``fastmath``: reductions
must accumulate in index order, and infinities/NaNs have to follow IEEE-754.
``error_model="numpy"`` makes ``1 / 0`` return ``inf`` instead of raising.
"""

from numba import jit

import numpy as np

from vecmathpy.constants import (
    C1,
    C2,
    EXPONENT_BIAS,
    LOG2E,
    MANTISSA_BITS,
    MAXLOG,
    MINLOG,
    P0,
    P1,
    P2,
    Q0,
    Q1,
    Q2,
    Q3,
)


@jit(nopython=True, nogil=True, cache=True)
def pow2(n: int) -> float:
    """Build ``2**n`` in double precision from its IEEE-754 bit pattern.

    The biased exponent is shifted into the exponent field of an unsigned
    64-bit integer (sign and mantissa zero) whose bits are then reinterpreted
    as a ``float64``. Only valid for ``-1022 <= n <= 1023``.

    Parameters
    ----------
    n : int
        Unbiased binary exponent.

    Returns
    -------
    float
        Exactly ``2**n``.
    """
    bits = np.uint64(n + EXPONENT_BIAS) << np.uint64(MANTISSA_BITS)
    return np.uint64(bits).view(np.float64)


@jit(nopython=True, nogil=True, cache=True)
def fastexp_clamped(x, maxlog, minlog):
    """Fast ``exp(x)`` with explicit clamp bounds.

    Parameters
    ----------
    x : float
        Exponent.
    maxlog : float
        Inputs above this return ``inf``.
    minlog : float
        Inputs below this return ``0.0``.

    Returns
    -------
    float
        Approximation of ``exp(x)`` in double precision.

    """
    if x != x:
        return np.nan
    if maxlog < x:
        return np.inf
    elif x < minlog:
        return 0.0

    # e**x = e**r * 2**n, |r| <= ln(2) / 2
    n = int(np.floor(LOG2E * x + 0.5))
    px = float(n)
    r = x - px * C1
    r -= px * C2
    xx = r * r

    px = ((P0 * xx + P1) * xx + P2) * r
    qx = ((Q0 * xx + Q1) * xx + Q2) * xx + Q3

    # e**r = 1 + 2r P(r**2) / (Q(r**2) - P(r**2))
    r = px / (qx - px)
    r = 1.0 + 2.0 * r

    return r * pow2(n)


@jit(nopython=True, nogil=True, cache=True)
def fastexp(x):
    """Approximate ``exp(x)`` for double precision input.

    Returns ``inf`` above ``log(2**1022)`` and ``0.0`` below
    ``-log(2**1022)``. The relative error is far below ``1e-6`` inside the
    clamp bounds, but the result is not bit-identical to :func:`numpy.exp`
    and ``fastexp(0)`` is not guaranteed to be exactly one.
    """
    return fastexp_clamped(x, MAXLOG, MINLOG)


@jit(nopython=True, nogil=True, cache=True)
def veczero(y, n):
    for i in range(n):
        y[i] = 0.0


@jit(nopython=True, nogil=True, cache=True)
def vecset(y, a, n):
    for i in range(n):
        y[i] = a


@jit(nopython=True, nogil=True, cache=True)
def veccopy(y, x, n):
    for i in range(n):
        y[i] = x[i]


@jit(nopython=True, nogil=True, cache=True)
def vecadd(y, x, n):
    for i in range(n):
        y[i] += x[i]


@jit(nopython=True, nogil=True, cache=True)
def vecaadd(y, a, x, n):
    """``y += a * x`` over the first ``n`` elements."""
    for i in range(n):
        y[i] += a * x[i]


@jit(nopython=True, nogil=True, cache=True)
def vecsub(y, x, n):
    for i in range(n):
        y[i] -= x[i]


@jit(nopython=True, nogil=True, cache=True)
def vecasub(y, a, x, n):
    """``y -= a * x`` over the first ``n`` elements."""
    for i in range(n):
        y[i] -= a * x[i]


@jit(nopython=True, nogil=True, cache=True)
def vecmul(y, x, n):
    for i in range(n):
        y[i] *= x[i]


@jit(nopython=True, nogil=True, cache=True, error_model="numpy")
def vecinv(y, n):
    """Replace ``y[i]`` by ``1 / y[i]``; zeros become ``inf``."""
    for i in range(n):
        y[i] = 1.0 / y[i]


@jit(nopython=True, nogil=True, cache=True)
def vecscale(y, a, n):
    for i in range(n):
        y[i] *= a


@jit(nopython=True, nogil=True, cache=True)
def vecdot(x, y, n):
    """Inner product of the first ``n`` elements, summed in index order.

    The accumulator has the element type of the buffers, so float32 input is
    summed in single precision.
    """
    if n == 0:
        return 0.0
    s = x[0] * y[0]
    for i in range(1, n):
        s += x[i] * y[i]
    return s


@jit(nopython=True, nogil=True, cache=True)
def vecsum(x, n):
    if n == 0:
        return 0.0
    # seeded with the first element to keep the accumulator in the buffer type
    s = x[0]
    for i in range(1, n):
        s += x[i]
    return s


@jit(nopython=True, nogil=True, cache=True)
def vecexp_clamped(x, n, maxlog, minlog):
    """Elementwise :func:`fastexp_clamped` with an exact ``exp(0) == 1``."""
    for i in range(n):
        if x[i] == 0.0:
            x[i] = 1.0
        else:
            x[i] = fastexp_clamped(x[i], maxlog, minlog)


@jit(nopython=True, nogil=True, cache=True)
def vecexp(x, n):
    """Replace ``x[i]`` by ``fastexp(x[i])``.

    Zero entries are mapped to exactly ``1.0`` since the approximation is not
    guaranteed to be exact there.
    """
    vecexp_clamped(x, n, MAXLOG, MINLOG)


@jit(nopython=True, nogil=True, cache=True, error_model="numpy")
def vecsumlog(x, n):
    """Sum of natural logarithms using the exact ``log``.

    Zeros contribute ``-inf`` and negative values ``nan``. Like
    :func:`vecsum`, float32 input is accumulated in single precision.
    """
    if n == 0:
        return 0.0
    s = np.log(x[0])
    for i in range(1, n):
        s += np.log(x[i])
    return s
