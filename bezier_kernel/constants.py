"""
Fixed constants for the Bezier curve kernel.
"""

import sys

# Degree limits
MAX_DEGREE = 25  # Highest polynomial degree of any BezierCurve
MIN_POLES = 2  # A linear Bezier curve
MAX_POLES = MAX_DEGREE + 1

# Default tolerances (see precision.Precision)
DEFAULT_CONFUSION = 1.0e-7  # Coincidence of two points in 3D space
DEFAULT_RESOLUTION = sys.float_info.min  # Real number considered as zero
DEFAULT_PARAMETRIC_LENGTH = 1.0e2  # Mean tangent length of a default curve
INFINITE = 2.0e100  # Big number considered as infinite

# Parameter domain of every Bezier curve
FIRST_PARAMETER = 0.0
LAST_PARAMETER = 1.0
