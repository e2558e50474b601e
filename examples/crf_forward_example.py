"""
Example: scaled forward pass of a linear-chain CRF

This example shows the hot loop the vector primitives were written for.
State and transition scores are exponentiated once with ``exp`` and the
forward recursion then only needs products, dot products and rescaling:

- ``exp`` turns log-potentials into potentials (exact 1.0 for zero scores)
- ``dot`` accumulates the incoming mass for every label
- ``sum`` / ``scale`` keep each column normalised
- ``sumlog`` of the scaling factors yields the log partition function
"""

import numpy as np

from vecmathpy import get_vector_math


def log_partition(state_scores: np.ndarray, trans_scores: np.ndarray) -> float:
    vm = get_vector_math(np.float64)
    T, L = state_scores.shape

    state = np.ascontiguousarray(state_scores, dtype=np.float64).copy()
    trans = np.ascontiguousarray(trans_scores.T, dtype=np.float64).copy()
    vm.exp(state.reshape(-1), T * L)
    vm.exp(trans.reshape(-1), L * L)

    alpha = np.empty((T, L))
    scale = np.empty(T)

    vm.copy(alpha[0], state[0], L)
    scale[0] = vm.sum(alpha[0], L)
    vm.scale(alpha[0], 1.0 / scale[0], L)

    for t in range(1, T):
        for j in range(L):
            alpha[t, j] = vm.dot(alpha[t - 1], trans[j], L)
        vm.mul(alpha[t], state[t], L)
        scale[t] = vm.sum(alpha[t], L)
        vm.scale(alpha[t], 1.0 / scale[t], L)

    return vm.sumlog(scale, T)


def brute_force(state_scores: np.ndarray, trans_scores: np.ndarray) -> float:
    from itertools import product

    T, L = state_scores.shape
    total = 0.0
    for path in product(range(L), repeat=T):
        s = sum(state_scores[t, y] for t, y in enumerate(path))
        s += sum(trans_scores[a, b] for a, b in zip(path, path[1:]))
        total += np.exp(s)
    return float(np.log(total))


if __name__ == "__main__":
    rng = np.random.default_rng(0)
    state_scores = rng.normal(size=(5, 3))
    trans_scores = rng.normal(size=(3, 3))

    fast = log_partition(state_scores, trans_scores)
    exact = brute_force(state_scores, trans_scores)

    print("=" * 50)
    print(f"log Z (vector primitives): {fast:.12f}")
    print(f"log Z (brute force)      : {exact:.12f}")
    print(f"absolute difference      : {abs(fast - exact):.3e}")
    print("=" * 50)
