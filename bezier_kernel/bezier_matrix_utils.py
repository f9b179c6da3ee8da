"""
Bezier matrix utilities.

Computes the degree elevation and derivative (hodograph) matrices directly,
without building a curve. Matrices are cached per degree and returned
read-only, since the same few degrees are requested over and over.
"""

from functools import lru_cache
from typing import Dict, Tuple

import numpy as np
from scipy.special import comb

from .constants import MAX_DEGREE
from .errors import InvalidArgumentError, validate_argument

# Global cache: (matrix type, degree, extra) -> matrix
_MATRIX_CACHE: Dict[Tuple[str, int, int], np.ndarray] = {}


def _generate_cache_key(matrix_type: str, degree: int, extra: int = 0) -> Tuple[str, int, int]:
    """Cache key"""
    return (matrix_type, degree, extra)


def _store(cache_key, matrix: np.ndarray) -> np.ndarray:
    matrix.setflags(write=False)
    _MATRIX_CACHE[cache_key] = matrix
    return matrix


@lru_cache(maxsize=1024)
def binomial(n: int, k: int) -> float:
    """Binomial coefficient C(n, k) as a float (0 outside 0 <= k <= n)."""
    if k > n or k < 0:
        return 0.0
    return float(comb(n, k, exact=True))


def get_elevation_matrix(from_degree: int, to_degree: int) -> np.ndarray:
    """
    Degree elevation matrix.

    Q_i = sum_j C(n, j) C(m - n, i - j) / C(m, i) * P_j

    Args:
        from_degree (int): Original degree n
        to_degree (int): Target degree m >= n

    Returns:
        np.ndarray: Elevation matrix, shape ((m + 1), (n + 1))
    """
    validate_argument(
        0 <= from_degree <= to_degree, "to_degree",
        "Target degree must be greater than or equal to the original degree",
    )
    cache_key = _generate_cache_key("elevation", from_degree, to_degree)
    if cache_key in _MATRIX_CACHE:
        return _MATRIX_CACHE[cache_key]

    n = from_degree
    m = to_degree
    E = np.zeros((m + 1, n + 1))
    for i in range(m + 1):
        for j in range(max(0, i - (m - n)), min(n, i) + 1):
            E[i, j] = binomial(n, j) * binomial(m - n, i - j) / binomial(m, i)

    return _store(cache_key, E)


def get_derivative_matrix(degree: int, order: int = 1) -> np.ndarray:
    """
    Derivative matrix mapping the poles of a curve to those of its hodograph.

    The control points of the derivative of order k are
    n! / (n - k)! * (forward difference of order k of the poles).

    Args:
        degree (int): Degree n of the curve
        order (int): Derivative order k (default: 1)

    Returns:
        np.ndarray: Shape ((n - k + 1), (n + 1)), or (1, n + 1) of zeros when k > n
    """
    if order < 0:
        raise InvalidArgumentError("Derivative order must be non-negative", "order")
    cache_key = _generate_cache_key("derivative", degree, order)
    if cache_key in _MATRIX_CACHE:
        return _MATRIX_CACHE[cache_key]

    n = degree
    if order > n:
        # Higher derivatives of a polynomial of degree n vanish
        return _store(cache_key, np.zeros((1, n + 1)))

    factor = 1.0
    for k in range(order):
        factor *= (n - k)

    D = np.zeros((n - order + 1, n + 1))
    for i in range(n - order + 1):
        for j in range(order + 1):
            sign = -1.0 if (order - j) % 2 else 1.0
            D[i, i + j] = factor * sign * binomial(order, j)

    return _store(cache_key, D)


def clear_matrix_cache():
    """Empty the matrix cache"""
    _MATRIX_CACHE.clear()


def get_cache_info() -> dict:
    """Cache statistics"""
    return {
        'cached_matrices': len(_MATRIX_CACHE),
        'cache_keys': list(_MATRIX_CACHE.keys())
    }


def precompute_common_matrices(max_degree: int = MAX_DEGREE):
    """
    Fill the cache with the matrices used by evaluation up to max_degree.

    Args:
        max_degree (int): Highest degree to precompute (default: MAX_DEGREE)
    """
    for degree in range(1, max_degree + 1):
        get_derivative_matrix(degree, 1)
        if degree >= 2:
            get_derivative_matrix(degree, 2)
    return len(_MATRIX_CACHE)
