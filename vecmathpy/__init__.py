from .constants import FLOAT32, FLOAT64, FloatFormat
from .factory import get_vector_math
from .fastexp import fastexp_array, pow2_array
from .functions.cpu_numba import (
    fastexp,
    pow2,
    vecaadd,
    vecadd,
    vecasub,
    veccopy,
    vecdot,
    vecexp,
    vecinv,
    vecmul,
    vecscale,
    vecset,
    vecsub,
    vecsum,
    vecsumlog,
    veczero,
)
from .vector_math import CheckedVectorMath, VectorMath

__version__ = "0.1.0"
