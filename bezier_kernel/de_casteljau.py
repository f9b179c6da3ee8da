"""
De Casteljau evaluation and subdivision of Bezier control polygons.

All functions work row-wise on arrays of shape (n + 1, dim), so they apply
unchanged to 3D poles and to 4D homogeneous poles (w * P, w).
"""

import numpy as np

from .bezier_matrix_utils import get_derivative_matrix


def de_casteljau_point(points, tau):
    """
    Evaluate a Bezier control polygon at tau by repeated affine blending.

    Exact at the ends: returns points[0] for tau == 0 and points[-1] for tau == 1.
    """
    W = np.array(points, dtype=float)
    for _ in range(1, W.shape[0]):
        W = (1 - tau) * W[:-1] + tau * W[1:]
    return W[0]


def de_casteljau_split(points, tau):
    """
    Split a control polygon at tau.

    Returns:
        (left, right): control polygons of the pieces on [0, tau] and [tau, 1],
        each reparameterized onto [0, 1]
    """
    W = np.array(points, dtype=float)
    left = [W[0]]
    right = [W[-1]]

    for _ in range(1, W.shape[0]):
        W = (1 - tau) * W[:-1] + tau * W[1:]
        left.append(W[0])
        right.append(W[-1])

    L = np.array(left)
    R = np.array(right[::-1])
    return L, R


def hodograph_points(points, order):
    """Control points of the derivative of the given order (degree n - order)."""
    P = np.asarray(points, dtype=float)
    D = get_derivative_matrix(P.shape[0] - 1, order)
    return D @ P


def derivatives_at(points, tau, order):
    """
    Derivatives of order 0..order of a (possibly homogeneous) polygon at tau.

    Returns:
        np.ndarray: shape (order + 1, dim); row k is the k-th derivative.
        Orders above the degree are zero.
    """
    P = np.asarray(points, dtype=float)
    degree = P.shape[0] - 1
    out = np.zeros((order + 1, P.shape[1]))
    out[0] = de_casteljau_point(P, tau)
    for k in range(1, min(order, degree) + 1):
        out[k] = de_casteljau_point(hodograph_points(P, k), tau)
    return out
