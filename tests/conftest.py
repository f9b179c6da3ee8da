"""Shared fixtures for the Bezier curve kernel tests."""

import numpy as np
import pytest

from bezier_kernel import BezierCurve, get_default_precision, set_default_precision

SQRT_HALF = np.sqrt(0.5)

@pytest.fixture
def cubic_poles():
    return np.array([[0.0, 0.0, 0.0], [1.0, 2.0, 0.0], [2.0, 2.0, 0.0], [3.0, 0.0, 0.0]])

@pytest.fixture
def cubic(cubic_poles):
    return BezierCurve(cubic_poles)

@pytest.fixture
def quarter_circle():
    """Unit quarter circle in the XY plane as a rational quadratic."""
    poles = [[1.0, 0.0, 0.0], [1.0, 1.0, 0.0], [0.0, 1.0, 0.0]]
    return BezierCurve(poles, [1.0, SQRT_HALF, 1.0])

@pytest.fixture
def space_rational():
    """Non-planar rational quartic with distinct weights."""
    poles = [
        [0.0, 0.0, 0.0],
        [1.0, 2.0, 1.0],
        [2.0, -1.0, 3.0],
        [3.0, 1.0, -1.0],
        [4.0, 0.5, 0.5],
    ]
    return BezierCurve(poles, [1.0, 2.5, 0.7, 1.8, 1.2])

@pytest.fixture
def looping_cubic():
    poles = [[0.0, 0.0, 0.0], [2.0, 1.0, 0.0], [-1.0, 1.0, 0.0], [1.0, 0.0, 0.0]]
    return BezierCurve(poles)

@pytest.fixture
def restore_default_precision():
    previous = get_default_precision()
    yield
    set_default_precision(previous)

@pytest.fixture
def samples():
    return np.linspace(0.0, 1.0, 101)
