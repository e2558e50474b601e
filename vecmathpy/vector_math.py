"""Precision-bound front ends for the vector kernels.

:class:`VectorMath` binds the kernels of :mod:`vecmathpy.functions.cpu_numba`
to one scalar type and is as unchecked as the kernels themselves.
:class:`CheckedVectorMath` validates buffers before every call and is meant
for debugging callers; the numerical results are identical.
"""

from __future__ import annotations

import numpy as np

from vecmathpy.constants import FloatFormat, float_format
from vecmathpy.functions.cpu_numba import (
    fastexp_clamped,
    vecaadd,
    vecadd,
    vecasub,
    veccopy,
    vecdot,
    vecexp_clamped,
    vecinv,
    vecmul,
    vecscale,
    vecset,
    vecsub,
    vecsum,
    vecsumlog,
    veczero,
)


class VectorMath:
    """Vector operations over caller-owned buffers of a single precision.

    Parameters
    ----------
    dtype : numpy dtype, optional
        Scalar type of every buffer passed to this instance, ``float64``
        (default) or ``float32``.

    Attributes
    ----------
    fmt : FloatFormat
        Layout and clamp bounds of the scalar type.
    dtype : numpy.dtype
        Scalar type.

    Notes
    -----
    Every buffer must hold at least ``n`` elements; the first argument is
    updated in place. No bounds or aliasing checks are made.
    """

    checked = False

    def __init__(self, dtype=np.float64):
        self.fmt: FloatFormat = float_format(dtype)
        self.dtype = self.fmt.dtype
        self._scalar = self.dtype.type

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dtype={self.dtype.name})"

    def fastexp(self, x: float):
        """Approximate ``exp(x)`` using this instance's clamp bounds."""
        return self._scalar(fastexp_clamped(x, self.fmt.maxlog, self.fmt.minlog))

    def zero(self, y: np.ndarray, n: int) -> None:
        veczero(y, n)

    def set(self, y: np.ndarray, a: float, n: int) -> None:
        vecset(y, self._scalar(a), n)

    def copy(self, y: np.ndarray, x: np.ndarray, n: int) -> None:
        veccopy(y, x, n)

    def add(self, y: np.ndarray, x: np.ndarray, n: int) -> None:
        vecadd(y, x, n)

    def aadd(self, y: np.ndarray, a: float, x: np.ndarray, n: int) -> None:
        vecaadd(y, self._scalar(a), x, n)

    def sub(self, y: np.ndarray, x: np.ndarray, n: int) -> None:
        vecsub(y, x, n)

    def asub(self, y: np.ndarray, a: float, x: np.ndarray, n: int) -> None:
        vecasub(y, self._scalar(a), x, n)

    def mul(self, y: np.ndarray, x: np.ndarray, n: int) -> None:
        vecmul(y, x, n)

    def inv(self, y: np.ndarray, n: int) -> None:
        vecinv(y, n)

    def scale(self, y: np.ndarray, a: float, n: int) -> None:
        vecscale(y, self._scalar(a), n)

    def dot(self, x: np.ndarray, y: np.ndarray, n: int) -> float:
        return self._scalar(vecdot(x, y, n))

    def sum(self, x: np.ndarray, n: int) -> float:
        return self._scalar(vecsum(x, n))

    def exp(self, x: np.ndarray, n: int) -> None:
        """Elementwise fast exponential, exact ``1.0`` for zero entries."""
        vecexp_clamped(x, n, self.fmt.maxlog, self.fmt.minlog)

    def sumlog(self, x: np.ndarray, n: int) -> float:
        return self._scalar(vecsumlog(x, n))


def _same_buffer(a: np.ndarray, b: np.ndarray) -> bool:
    if a is b:
        return True
    return (
        a.__array_interface__["data"][0] == b.__array_interface__["data"][0]
        and a.strides == b.strides
    )


class CheckedVectorMath(VectorMath):
    """:class:`VectorMath` that validates its arguments.

    Before delegating to the kernels, each call checks that

    - ``n`` is a non-negative integer,
    - every buffer is a 1-D, C-contiguous numpy array of the instance dtype
      holding at least ``n`` elements,
    - output buffers are writeable,
    - an input buffer is either the output buffer itself or does not share
      memory with it.

    Raises
    ------
    TypeError
        If a buffer is not a numpy array of the instance dtype or ``n`` is not
        an integer.
    ValueError
        On negative or too large ``n``, non-contiguous or read-only buffers,
        and partial aliasing.
    """

    checked = True

    def _check_n(self, n) -> None:
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise TypeError(f"n must be an integer, got {type(n).__name__}")
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")

    def _check_buffer(self, name: str, buf, n: int, *, output: bool = False) -> None:
        if not isinstance(buf, np.ndarray):
            raise TypeError(f"{name} must be a numpy array, got {type(buf).__name__}")
        if buf.dtype != self.dtype:
            raise TypeError(
                f"{name} has dtype {buf.dtype.name}, expected {self.dtype.name}"
            )
        if buf.ndim != 1:
            raise ValueError(f"{name} must be 1-D, got shape {buf.shape}")
        if not buf.flags.c_contiguous:
            raise ValueError(f"{name} must be contiguous")
        if buf.shape[0] < n:
            raise ValueError(f"{name} holds {buf.shape[0]} elements, need {n}")
        if output and not buf.flags.writeable:
            raise ValueError(f"{name} is read-only")

    def _check_unary(self, y, n) -> None:
        self._check_n(n)
        self._check_buffer("y", y, n, output=True)

    def _check_binary(self, y, x, n) -> None:
        self._check_n(n)
        self._check_buffer("y", y, n, output=True)
        self._check_buffer("x", x, n)
        if not _same_buffer(y, x) and np.shares_memory(y[:n], x[:n]):
            raise ValueError("x and y overlap without being the same buffer")

    def _check_reduction(self, n, *buffers) -> None:
        self._check_n(n)
        for name, buf in zip(("x", "y"), buffers):
            self._check_buffer(name, buf, n)

    def zero(self, y, n):
        self._check_unary(y, n)
        super().zero(y, n)

    def set(self, y, a, n):
        self._check_unary(y, n)
        super().set(y, a, n)

    def copy(self, y, x, n):
        self._check_binary(y, x, n)
        super().copy(y, x, n)

    def add(self, y, x, n):
        self._check_binary(y, x, n)
        super().add(y, x, n)

    def aadd(self, y, a, x, n):
        self._check_binary(y, x, n)
        super().aadd(y, a, x, n)

    def sub(self, y, x, n):
        self._check_binary(y, x, n)
        super().sub(y, x, n)

    def asub(self, y, a, x, n):
        self._check_binary(y, x, n)
        super().asub(y, a, x, n)

    def mul(self, y, x, n):
        self._check_binary(y, x, n)
        super().mul(y, x, n)

    def inv(self, y, n):
        self._check_unary(y, n)
        super().inv(y, n)

    def scale(self, y, a, n):
        self._check_unary(y, n)
        super().scale(y, a, n)

    def dot(self, x, y, n):
        self._check_reduction(n, x, y)
        return super().dot(x, y, n)

    def sum(self, x, n):
        self._check_reduction(n, x)
        return super().sum(x, n)

    def exp(self, x, n):
        self._check_unary(x, n)
        super().exp(x, n)

    def sumlog(self, x, n):
        self._check_reduction(n, x)
        return super().sumlog(x, n)


__all__ = ["VectorMath", "CheckedVectorMath"]
