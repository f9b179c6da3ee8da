"""
Exceptions raised by the Bezier curve kernel and the argument checks that raise them.

Every public entry point validates its arguments with the ``validate_*``
helpers before touching the curve, so a rejected call never leaves a
partially modified curve behind.
"""

import math

import numpy as np


class BezierCurveError(Exception):
    """Base class of every error raised by this package."""

    def __init__(self, message, parameter=None):
        self.constraint = message
        self.parameter = parameter
        if parameter is not None:
            message = f"{message}\nParameter name: {parameter}"
        super().__init__(message)


class InvalidArgumentError(BezierCurveError, ValueError):
    """An argument violates a constraint of the called operation."""


class InvalidSizeError(InvalidArgumentError):
    """Pole count outside [2, MAX_DEGREE + 1] or weights not matching the poles."""


class InvalidWeightError(InvalidArgumentError):
    """A weight is not strictly greater than the near-zero resolution."""


class InvalidDegreeError(InvalidArgumentError):
    """Degree elevation target below the current degree or above MAX_DEGREE."""


class InvalidParameterRangeError(InvalidArgumentError):
    """Segment bounds not satisfying 0 <= u1 < u2 <= 1."""


class IndexOutOfRangeError(BezierCurveError, IndexError):
    """Pole or weight index outside [0, degree]."""


def validate_argument(condition, parameter, message, error=InvalidArgumentError):
    """
    Raise ``error`` unless ``condition`` holds.

    Args:
        condition: Result of the check
        parameter: Name of the offending argument
        message: Violated constraint, in words
        error: Exception class to raise
    """
    if not condition:
        raise error(message, parameter)


def validate_index(index, lower, upper, parameter="index"):
    """Raise IndexOutOfRangeError unless lower <= index <= upper."""
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise IndexOutOfRangeError(f"Index must be an integer in [{lower}, {upper}]", parameter)
    if index < lower or index > upper:
        raise IndexOutOfRangeError(
            f"Argument is out of range [{lower}, {upper}], got {index}", parameter
        )


def validate_range(value, lower, upper, parameter, error=InvalidArgumentError):
    """Raise ``error`` unless ``value`` is a finite real within [lower, upper]."""
    if not math.isfinite(value) or value < lower or value > upper:
        raise error(f"Argument is out of range [{lower}, {upper}], got {value}", parameter)
