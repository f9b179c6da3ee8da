"""
Rational and non-rational Bezier curves in 3D space.

A non-rational Bezier curve is defined by a table of poles (control points).
A rational Bezier curve is defined by a table of poles with varying weights;
the weights are stored only when the curve is rational.

The parameter domain is always [0, 1]. Internally the curve is handled in
homogeneous coordinates (w * P, w), so evaluation, degree elevation and
segmentation run the same algorithm for both kinds of curves and only the
final projection back to 3D depends on whether weights are stored.
"""

import logging
from typing import Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike

from .bezier_matrix_utils import binomial, get_elevation_matrix
from .constants import FIRST_PARAMETER, LAST_PARAMETER, MAX_DEGREE, MAX_POLES, MIN_POLES
from .curve import BoundedCurve, Continuity
from .de_casteljau import de_casteljau_split, derivatives_at
from .errors import (
    InvalidArgumentError,
    InvalidDegreeError,
    InvalidParameterRangeError,
    InvalidSizeError,
    InvalidWeightError,
    validate_argument,
    validate_index,
    validate_range,
)
from .precision import Precision, get_default_precision

logger = logging.getLogger(__name__)


class BezierCurve(BoundedCurve):
    """
    Bezier curve of degree 1 to MAX_DEGREE in 3D space.

    Args:
        poles: (N, 3) control points, 2 <= N <= MAX_DEGREE + 1
        weights: Optional (N,) positive weights. If all the weights are
            identical the curve is stored as non-rational.
        precision: Tolerance policy (defaults to get_default_precision())

    Raises:
        InvalidSizeError: Bad pole count, non-3D poles or weights not matching the poles
        InvalidWeightError: A weight is not greater than precision.resolution
    """

    def __init__(self, poles: ArrayLike, weights: Optional[ArrayLike] = None,
                 precision: Optional[Precision] = None):
        if precision is None:
            precision = get_default_precision()
        validate_argument(isinstance(precision, Precision), "precision",
                          "precision must be a Precision instance")
        self._precision = precision

        P = self._check_poles(poles)
        W = None if weights is None else self._check_weights(weights, P.shape[0])
        self._closed = None
        self._init(P, W)

    # ------------------------------------------------------------------
    # Pole/weight store

    @staticmethod
    def _check_poles(poles) -> np.ndarray:
        try:
            P = np.array(poles, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidSizeError("Poles must be a sequence of 3D points", "poles") from exc
        validate_argument(P.ndim == 2 and P.shape[1] == 3, "poles",
                          "Poles must be a sequence of 3D points", InvalidSizeError)
        validate_argument(MIN_POLES <= P.shape[0] <= MAX_POLES, "poles",
                          f"Number of poles must be in [{MIN_POLES}, {MAX_POLES}], got {P.shape[0]}",
                          InvalidSizeError)
        validate_argument(bool(np.all(np.isfinite(P))), "poles", "Poles must be finite")
        return P

    def _check_weights(self, weights, nb_poles: int) -> np.ndarray:
        try:
            W = np.array(weights, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidSizeError("Weights must be a sequence of reals", "weights") from exc
        validate_argument(W.ndim == 1 and W.shape[0] == nb_poles, "weights",
                          f"Number of weights must equal the number of poles ({nb_poles})",
                          InvalidSizeError)
        for w in W:
            self._check_weight(w, "weights")
        return W

    def _check_weight(self, weight, parameter="weight") -> float:
        try:
            weight = float(weight)
        except (TypeError, ValueError) as exc:
            raise InvalidWeightError("Weight must be a real number", parameter) from exc
        validate_argument(np.isfinite(weight) and weight > self._precision.resolution, parameter,
                          f"Weight must be greater than {self._precision.resolution}",
                          InvalidWeightError)
        return weight

    def _check_point(self, point) -> np.ndarray:
        try:
            p = np.array(point, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError("Pole must be a 3D point", "point") from exc
        validate_argument(p.shape == (3,) and bool(np.all(np.isfinite(p))), "point",
                          "Pole must be a finite 3D point")
        return p

    def _weights_differ(self, weights: np.ndarray) -> bool:
        return bool(np.any(np.abs(np.diff(weights)) > self._precision.resolution))

    def _init(self, poles: np.ndarray, weights: Optional[np.ndarray]):
        """
        Store poles and weights, then refresh the derived state.

        Weights that are all equal are dropped: the curve is non-rational.
        Every mutation ends here.
        """
        if weights is not None and not self._weights_differ(weights):
            weights = None
        self._poles = np.array(poles, dtype=float)
        self._weights = None if weights is None else np.array(weights, dtype=float)
        self._update_flags()

    def _update_flags(self):
        w = np.ones(self._poles.shape[0]) if self._weights is None else self._weights
        self._hpoles = np.hstack([self._poles * w[:, None], w[:, None]])
        self._rational = self._weights is not None

        was_closed = self._closed
        gap = np.linalg.norm(self._poles[-1] - self._poles[0])
        self._closed = bool(gap <= self._precision.confusion)
        if was_closed is not None and self._closed != was_closed:
            logger.debug("Curve is now %s (end gap %.3e)",
                         "closed" if self._closed else "open", gap)

    def _set_homogeneous(self, H: np.ndarray):
        """Store homogeneous poles (w * P, w) produced by a shape-preserving rewrite."""
        if self._weights is None:
            # The weight function is identically 1
            self._init(H[:, :3], None)
        else:
            weights = H[:, 3]
            self._init(H[:, :3] / weights[:, None], weights)

    def _edited_weights(self, index: int, weight: float) -> Optional[np.ndarray]:
        if self._weights is None and abs(weight - 1.0) <= self._precision.resolution:
            return None
        weights = self.weights()
        weights[index] = weight
        return weights

    # ------------------------------------------------------------------
    # Mutation

    def set_pole(self, index: int, point: ArrayLike, weight: Optional[float] = None):
        """
        Substitute the pole of range index with point, and optionally its weight.

        Raises:
            IndexOutOfRangeError: index not in [0, degree]
            InvalidWeightError: weight <= precision.resolution
        """
        validate_index(index, 0, self.degree())
        p = self._check_point(point)
        if weight is not None:
            weight = self._check_weight(weight)

        poles = self._poles.copy()
        poles[index] = p
        weights = self._weights if weight is None else self._edited_weights(index, weight)
        self._init(poles, weights)

    def set_weight(self, index: int, weight: float):
        """
        Change the weight of the pole of range index.

        A non-rational curve becomes rational when the new weight differs from
        1; a rational curve whose weights all become equal is non-rational.

        Raises:
            IndexOutOfRangeError: index not in [0, degree]
            InvalidWeightError: weight <= precision.resolution
        """
        validate_index(index, 0, self.degree())
        weight = self._check_weight(weight)

        was_rational = self._rational
        weights = self._edited_weights(index, weight)
        if weights is None and not was_rational:
            return
        self._init(self._poles, weights)

        if self._rational != was_rational:
            logger.debug("Curve is now %s", "rational" if self._rational else "non-rational")

    def increase(self, degree: int):
        """
        Increase the degree of the curve without changing its shape.

        Raises:
            InvalidDegreeError: degree lower than the current degree or greater than MAX_DEGREE
        """
        validate_argument(isinstance(degree, (int, np.integer)) and not isinstance(degree, bool),
                          "degree", "Degree must be an integer", InvalidDegreeError)
        current = self.degree()
        validate_argument(current <= degree <= MAX_DEGREE, "degree",
                          f"Degree must be in [{current}, {MAX_DEGREE}], got {degree}",
                          InvalidDegreeError)
        if degree == current:
            return

        E = get_elevation_matrix(current, degree)
        self._set_homogeneous(E @ self._hpoles)
        logger.debug("Degree increased from %d to %d", current, degree)

    def segment(self, u1: float, u2: float):
        """
        Restrict the curve to [u1, u2] and reparameterize it onto [0, 1].

        The curve keeps its number of poles. Even if the curve is not closed it
        can become closed after segmentation, for example if it makes a loop.

        Raises:
            InvalidParameterRangeError: unless 0 <= u1 < u2 <= 1
        """
        validate_range(u1, FIRST_PARAMETER, LAST_PARAMETER, "u1", InvalidParameterRangeError)
        validate_range(u2, FIRST_PARAMETER, LAST_PARAMETER, "u2", InvalidParameterRangeError)
        validate_argument(u1 < u2, "u2", f"u1 must be lower than u2, got [{u1}, {u2}]",
                          InvalidParameterRangeError)

        H = self._hpoles
        if u1 > FIRST_PARAMETER:
            _, H = de_casteljau_split(H, u1)
        if u2 < LAST_PARAMETER:
            H, _ = de_casteljau_split(H, (u2 - u1) / (LAST_PARAMETER - u1))
        self._set_homogeneous(H)
        logger.debug("Curve segmented to [%g, %g]", u1, u2)

    # ------------------------------------------------------------------
    # Queries

    @property
    def precision(self) -> Precision:
        return self._precision

    @staticmethod
    def max_degree() -> int:
        """Maximum polynomial degree of any BezierCurve (25)."""
        return MAX_DEGREE

    def degree(self) -> int:
        return self._poles.shape[0] - 1

    def nb_poles(self) -> int:
        return self._poles.shape[0]

    def pole(self, index: int) -> np.ndarray:
        validate_index(index, 0, self.degree())
        return self._poles[index].copy()

    def poles(self) -> np.ndarray:
        """All the poles, (N, 3) copy."""
        return self._poles.copy()

    def weight(self, index: int) -> float:
        """Weight of the pole of range index, 1.0 for a non-rational curve."""
        validate_index(index, 0, self.degree())
        if self._weights is None:
            return 1.0
        return float(self._weights[index])

    def weights(self) -> np.ndarray:
        """All the weights, (N,) copy; all ones for a non-rational curve."""
        if self._weights is None:
            return np.ones(self.nb_poles())
        return self._weights.copy()

    def is_rational(self) -> bool:
        return self._rational

    def is_closed(self) -> bool:
        """True if the first and last poles are within precision.confusion."""
        return self._closed

    def is_cn(self, n: int) -> bool:
        """A Bezier curve is infinitely continuously differentiable."""
        validate_argument(n >= 0, "n", "Continuity order must be non-negative")
        return True

    def continuity(self) -> Continuity:
        return Continuity.CN

    def first_parameter(self) -> float:
        return FIRST_PARAMETER

    def last_parameter(self) -> float:
        return LAST_PARAMETER

    def start_point(self) -> np.ndarray:
        return self._poles[0].copy()

    def end_point(self) -> np.ndarray:
        return self._poles[-1].copy()

    # ------------------------------------------------------------------
    # Evaluation

    def _derivatives(self, u: float, n: int) -> np.ndarray:
        """
        Point and derivatives of order 1..n at u, shape (n + 1, 3).

        Blends the homogeneous poles, then projects with the quotient rule
        C^(k) = (A^(k) - sum_{i=1..k} C(k, i) w^(i) C^(k-i)) / w.
        """
        H = derivatives_at(self._hpoles, float(u), n)
        if self._weights is None:
            return H[:, :3]

        # Derivatives of the weight function vanish above the degree
        degree = self.degree()
        A, w = H[:, :3], H[:, 3]
        C = np.zeros_like(A)
        for k in range(n + 1):
            v = A[k].copy()
            for i in range(1, min(k, degree) + 1):
                v -= binomial(k, i) * w[i] * C[k - i]
            C[k] = v / w[0]
        return C

    def d0(self, u: float) -> np.ndarray:
        return self._derivatives(u, 0)[0]

    def d1(self, u: float) -> Tuple[np.ndarray, np.ndarray]:
        C = self._derivatives(u, 1)
        return C[0], C[1]

    def d2(self, u: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        C = self._derivatives(u, 2)
        return C[0], C[1], C[2]

    def dn(self, u: float, n: int) -> np.ndarray:
        """
        Derivative of order n at u.

        Raises:
            InvalidArgumentError: n < 1
        """
        validate_argument(isinstance(n, (int, np.integer)) and n >= 1, "n",
                          "Derivative order must be an integer >= 1")
        return self._derivatives(u, int(n))[n]

    def evaluate(self, u) -> np.ndarray:
        """
        Points of the curve for a scalar or an array of parameters.

        Returns:
            (3,) for a scalar, (..., 3) for an array
        """
        ts = np.asarray(u, dtype=float)
        if ts.ndim == 0:
            return self.d0(float(ts))
        pts = np.array([self.d0(t) for t in ts.ravel()]).reshape(ts.shape + (3,))
        return pts

    def resolution(self, tolerance3d: float) -> float:
        """
        Parametric tolerance for a 3D tolerance.

        If C is this curve, the returned u_tolerance ensures that
        |t1 - t0| < u_tolerance  ==>  |C(t1) - C(t0)| < tolerance3d

        The derivative is bounded over [0, 1] from the poles: with the poles
        translated so that P0 is the origin,
        |C'| <= (N * max|w_{i+1} P_{i+1} - w_i P_i| + N * max|w_{i+1} - w_i| * max|P_i|) / min(w)
        """
        validate_argument(np.isfinite(tolerance3d) and tolerance3d > 0.0, "tolerance3d",
                          "Tolerance must be a positive real")
        n = self.degree()
        w = self.weights()
        Q = self._poles - self._poles[0]
        wQ = Q * w[:, None]

        a = n * np.max(np.linalg.norm(np.diff(wQ, axis=0), axis=1))
        b = n * np.max(np.abs(np.diff(w)))
        radius = np.max(np.linalg.norm(Q, axis=1))
        bound = (a + b * radius) / np.min(w)

        if bound <= self._precision.resolution:
            # All poles coincide: any parameter gap maps to the same point
            return self._precision.infinite()
        return float(tolerance3d / bound)

    # ------------------------------------------------------------------

    def copy(self) -> "BezierCurve":
        """Independent copy of this curve."""
        return BezierCurve(self._poles, self._weights, precision=self._precision)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __repr__(self) -> str:
        return (f"BezierCurve(degree={self.degree()}, rational={self._rational}, "
                f"closed={self._closed})")
