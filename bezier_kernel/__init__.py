"""
Bezier curve kernel

Rational and non-rational Bezier curves in 3D space for a geometric modeling
kernel: evaluation of points and derivatives, degree elevation, segmentation
and parametric tolerance estimation.

Example:
    >>> from bezier_kernel import BezierCurve
    >>> curve = BezierCurve([(0, 0, 0), (1, 2, 0), (2, 2, 0), (3, 0, 0)])
    >>> curve.degree()
    3
    >>> curve.d0(1.0)
    array([3., 0., 0.])
"""

import logging

from .bezier import BezierCurve
from .curve import BoundedCurve, Continuity, Curve
from .bezier_matrix_utils import (
    get_derivative_matrix,
    get_elevation_matrix,
    clear_matrix_cache,
)
from .de_casteljau import de_casteljau_point, de_casteljau_split
from .errors import (
    BezierCurveError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidDegreeError,
    InvalidParameterRangeError,
    InvalidSizeError,
    InvalidWeightError,
)
from .precision import Precision, get_default_precision, set_default_precision
from .logging_config import setup_logging
from .constants import MAX_DEGREE
from . import constants

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core classes
    'BezierCurve',
    'Curve',
    'BoundedCurve',
    'Continuity',

    # Matrix functions
    'get_derivative_matrix',
    'get_elevation_matrix',
    'clear_matrix_cache',

    # De Casteljau functions
    'de_casteljau_point',
    'de_casteljau_split',

    # Errors
    'BezierCurveError',
    'InvalidArgumentError',
    'InvalidSizeError',
    'InvalidWeightError',
    'InvalidDegreeError',
    'InvalidParameterRangeError',
    'IndexOutOfRangeError',

    # Configuration
    'Precision',
    'get_default_precision',
    'set_default_precision',
    'setup_logging',
    'MAX_DEGREE',

    # Constants module
    'constants',
]

__version__ = "1.0.0"
