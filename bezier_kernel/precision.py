"""
Tolerance policy used by the Bezier curve kernel.

Floating point values are never compared for equality. A difference is
compared against a precision instead:

    abs(x1 - x2) < precision.confusion

A ``Precision`` is immutable and is handed to each curve at construction
time, so callers can substitute their own tolerances without touching the
algorithms.
"""

import logging
import math
from typing import Optional

from .constants import (
    DEFAULT_CONFUSION,
    DEFAULT_PARAMETRIC_LENGTH,
    DEFAULT_RESOLUTION,
    INFINITE,
)
from .errors import validate_argument

logger = logging.getLogger(__name__)


class Precision:
    """
    Set of tolerances for comparing points, weights and parameters.

    Args:
        confusion: Distance under which two 3D points are coincident
        resolution: Real number under which a value is considered as zero
        parametric_length: Length of the segment generated by a unit parameter
            variation on a default curve
    """

    __slots__ = ("_confusion", "_resolution", "_parametric_length")

    def __init__(
        self,
        confusion: float = DEFAULT_CONFUSION,
        resolution: float = DEFAULT_RESOLUTION,
        parametric_length: float = DEFAULT_PARAMETRIC_LENGTH,
    ):
        for name, value in (
            ("confusion", confusion),
            ("resolution", resolution),
            ("parametric_length", parametric_length),
        ):
            validate_argument(
                math.isfinite(value) and value > 0.0, name, "Tolerance must be a positive real"
            )
        self._confusion = float(confusion)
        self._resolution = float(resolution)
        self._parametric_length = float(parametric_length)

    @property
    def confusion(self) -> float:
        """Tolerance of confusion of two points in 3D space."""
        return self._confusion

    @property
    def resolution(self) -> float:
        """Near-zero tolerance for weights and weight differences."""
        return self._resolution

    @property
    def parametric_length(self) -> float:
        return self._parametric_length

    def square_confusion(self) -> float:
        return self._confusion * self._confusion

    def real_small(self) -> float:
        """Small number that can be considered as zero."""
        return self._resolution

    def parametric(self, p: float, t: Optional[float] = None) -> float:
        """
        Convert a real space precision to a parametric space precision.

        Args:
            p: Precision in 3D space
            t: Mean length of the tangent of the curve (defaults to parametric_length)

        Returns:
            float: p / t
        """
        if t is None:
            t = self._parametric_length
        return p / t

    def p_confusion(self, t: Optional[float] = None) -> float:
        """Parametric tolerance of confusion, confusion / t."""
        return self.parametric(self._confusion, t)

    def square_p_confusion(self) -> float:
        p = self.p_confusion()
        return p * p

    @staticmethod
    def infinite() -> float:
        """Big number that can be considered as infinite; use -infinite() for negative."""
        return INFINITE

    @staticmethod
    def is_infinite(r: float) -> bool:
        return abs(r) >= 0.5 * INFINITE

    @staticmethod
    def is_positive_infinite(r: float) -> bool:
        return r >= 0.5 * INFINITE

    @staticmethod
    def is_negative_infinite(r: float) -> bool:
        return r <= -0.5 * INFINITE

    def __eq__(self, other):
        if not isinstance(other, Precision):
            return NotImplemented
        return (self._confusion, self._resolution, self._parametric_length) == (
            other._confusion, other._resolution, other._parametric_length
        )

    def __hash__(self):
        return hash((self._confusion, self._resolution, self._parametric_length))

    def __repr__(self) -> str:
        return (f"Precision(confusion={self._confusion!r}, resolution={self._resolution!r}, "
                f"parametric_length={self._parametric_length!r})")


_DEFAULT_PRECISION = Precision()


def get_default_precision() -> Precision:
    """Precision handed to curves created without an explicit one."""
    return _DEFAULT_PRECISION


def set_default_precision(precision: Precision) -> Precision:
    """
    Replace the process-wide default precision.

    Curves already created keep the precision they were built with.

    Args:
        precision: New default policy

    Returns:
        Precision: The previous default
    """
    global _DEFAULT_PRECISION
    validate_argument(
        isinstance(precision, Precision), "precision", "Default precision must be a Precision"
    )
    previous = _DEFAULT_PRECISION
    _DEFAULT_PRECISION = precision
    logger.debug("Default precision set to %r", precision)
    return previous
