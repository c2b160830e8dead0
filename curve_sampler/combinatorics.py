"""
Binomial coefficients and Bernstein basis polynomials.

Every curve quantity (point, velocity, acceleration) is a weighted sum of the
control points. The weights differ only in which coefficient function is used,
so all three go through ``blend``.
"""

import numpy as np
from functools import lru_cache


@lru_cache(maxsize=256)
def n_choose_k(n, k):
    """
    Binomial coefficient C(n, k) using the multiplicative formula.

    Args:
        n: Total number of elements (must be non-negative)
        k: Number of chosen elements

    Returns:
        int: C(n, k), 0 when k is outside [0, n]
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if k < 0 or k > n:
        return 0

    result = 1
    # Each partial product is itself a binomial coefficient, so floor division is exact
    for i in range(min(k, n - k)):
        result = result * (n - i) // (i + 1)
    return result


def bernstein_basis(n, i, u):
    """
    Bernstein basis polynomial B_{i,n}(u) = C(n,i) * u^i * (1-u)^(n-i).

    Indices outside [0, n] give 0, which lets the derivative formulas below
    drop the out-of-range terms at the ends of the curve.
    """
    if i < 0 or i > n:
        return 0.0 * u
    return n_choose_k(n, i) * (u ** i) * ((1 - u) ** (n - i))


def bernstein_first_derivative(n, i, u):
    """d/du B_{i,n}(u) = n * (B_{i-1,n-1}(u) - B_{i,n-1}(u))"""
    return n * (bernstein_basis(n - 1, i - 1, u) - bernstein_basis(n - 1, i, u))


def bernstein_second_derivative(n, i, u):
    """d²/du² B_{i,n}(u), the same recursion applied to the first derivative."""
    return n * (bernstein_first_derivative(n - 1, i - 1, u)
                - bernstein_first_derivative(n - 1, i, u))


def blend(control_points, coefficient, u):
    """
    Blend control points with a per-index coefficient function.

    Args:
        control_points: (N+1, dim) array
        coefficient: Callable (n, i, u) -> weight, e.g. bernstein_basis
        u: Parameter value, scalar or array of shape S

    Returns:
        np.ndarray: shape (dim,) for scalar u, S + (dim,) otherwise
    """
    P = np.asarray(control_points, dtype=float)
    u = np.asarray(u, dtype=float)
    n = P.shape[0] - 1

    out = np.zeros(u.shape + (P.shape[1],))
    for i in range(n + 1):
        weight = np.asarray(coefficient(n, i, u), dtype=float)
        out += weight[..., np.newaxis] * P[i]
    return out
