"""Factory for shared :class:`~vecmathpy.vector_math.VectorMath` instances.

Callers that do not care about the scalar type use
:func:`get_vector_math`, which honours explicit arguments first and the
``VECMATH_PRECISION`` / ``VECMATH_CHECKED`` environment variables second.
"""

from __future__ import annotations

import logging
import threading

from vecmathpy.constants import float_format
from vecmathpy.env import checked_from_env, precision_from_env
from vecmathpy.vector_math import CheckedVectorMath, VectorMath

log = logging.getLogger(__name__)

_CACHE: dict[tuple[str, bool], VectorMath] = {}
_LOCK = threading.Lock()


def get_vector_math(dtype=None, checked: bool | None = None) -> VectorMath:
    """Return a cached vector-math instance.

    Parameters
    ----------
    dtype:
        Scalar type. ``None`` reads ``VECMATH_PRECISION``.
    checked:
        Whether to validate arguments. ``None`` reads ``VECMATH_CHECKED``.

    Returns
    -------
    VectorMath
        A :class:`VectorMath` or :class:`CheckedVectorMath`. Instances are
        stateless, so the same object is returned for equal arguments.

    Raises
    ------
    ValueError
        If an explicit ``dtype`` is neither ``float32`` nor ``float64``.
    """

    name = precision_from_env() if dtype is None else float_format(dtype).name
    if checked is None:
        checked = checked_from_env()
    key = (name, bool(checked))

    with _LOCK:
        cached = _CACHE.get(key)
        if cached is not None:
            return cached

        cls = CheckedVectorMath if checked else VectorMath
        vm = cls(name)
        _CACHE[key] = vm

    log.debug(f"Created {vm!r}")
    return vm


def clear_cache() -> None:
    """Drop all cached instances (used by tests that change the environment)."""
    with _LOCK:
        _CACHE.clear()
