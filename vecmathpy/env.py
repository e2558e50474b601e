"""Environment-variable helpers.

These helpers centralize parsing/normalization of the environment variables
that select the default :class:`vecmathpy.vector_math.VectorMath` instance:

- ``VECMATH_PRECISION``: ``float64`` (default) or ``float32``
- ``VECMATH_CHECKED``: enable argument validation

Notes
-----
These are intentionally forgiving: invalid inputs fall back to defaults rather
than raising, so a stray variable never breaks a training run.
"""

from __future__ import annotations

import logging
import os

PRECISION_ENV = "VECMATH_PRECISION"
CHECKED_ENV = "VECMATH_CHECKED"

_PRECISION_ALIASES = {
    "float64": "float64",
    "double": "float64",
    "f8": "float64",
    "float32": "float32",
    "single": "float32",
    "f4": "float32",
}

log = logging.getLogger(__name__)


def parse_bool_env(name: str, *, default: bool) -> bool:
    """Parse a boolean environment variable.

    Parameters
    ----------
    name:
        Environment variable name.
    default:
        Default value used when the variable is unset or invalid.

    Returns
    -------
    bool
        Parsed boolean value.
    """

    raw = os.environ.get(name, "").strip().lower()
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off", ""}:
        return default if raw == "" else False
    log.warning(f"Ignoring invalid boolean {raw!r} in {name}")
    return default


def normalize_precision(value: str) -> str:
    """Normalize a precision selector.

    Parameters
    ----------
    value:
        A raw environment variable value.

    Returns
    -------
    str
        ``'float64'`` or ``'float32'``; unknown values map to ``'float64'``.
    """

    key = value.strip().lower()
    if key in _PRECISION_ALIASES:
        return _PRECISION_ALIASES[key]
    if key:
        log.warning(f"Unknown precision {value!r}, using float64")
    return "float64"


def precision_from_env() -> str:
    """Return the normalized value of ``VECMATH_PRECISION``."""
    return normalize_precision(os.environ.get(PRECISION_ENV, ""))


def checked_from_env() -> bool:
    """Return the parsed value of ``VECMATH_CHECKED`` (default ``False``)."""
    return parse_bool_env(CHECKED_ENV, default=False)
