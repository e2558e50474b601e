"""Low-level numerical kernels.

This subpackage contains the Numba-compiled in-place vector routines and the
fast exponential used by :class:`vecmathpy.vector_math.VectorMath`.
"""
