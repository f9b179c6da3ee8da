"""
Abstract contracts shared by the curves of the kernel.

A curve is parameterized over [first_parameter(), last_parameter()] and
evaluated through d0/d1/d2/dn. A bounded curve also exposes the points at
both ends of its domain.
"""

from abc import ABC, abstractmethod
from enum import IntEnum

import numpy as np


class Continuity(IntEnum):
    """Global continuity of a curve, ordered from weakest to strongest."""

    C0 = 0
    G1 = 1
    C1 = 2
    G2 = 3
    C2 = 4
    C3 = 5
    CN = 6


class Curve(ABC):
    """Common behaviour of curves in 3D space."""

    @abstractmethod
    def first_parameter(self) -> float:
        ...

    @abstractmethod
    def last_parameter(self) -> float:
        ...

    @abstractmethod
    def is_closed(self) -> bool:
        ...

    @abstractmethod
    def continuity(self) -> Continuity:
        ...

    @abstractmethod
    def is_cn(self, n: int) -> bool:
        """Return True if the curve is at least n times continuously differentiable."""

    @abstractmethod
    def d0(self, u: float) -> np.ndarray:
        """Point of parameter u."""

    @abstractmethod
    def d1(self, u: float):
        """Point and first derivative at u."""

    @abstractmethod
    def d2(self, u: float):
        """Point, first and second derivatives at u."""

    @abstractmethod
    def dn(self, u: float, n: int) -> np.ndarray:
        """Derivative of order n at u."""

    @abstractmethod
    def copy(self) -> "Curve":
        """Independent copy of the curve."""

    def value(self, u: float) -> np.ndarray:
        """Point of parameter u."""
        return self.d0(u)


class BoundedCurve(Curve):
    """Curve limited by two finite parameter values."""

    @abstractmethod
    def start_point(self) -> np.ndarray:
        ...

    @abstractmethod
    def end_point(self) -> np.ndarray:
        ...
