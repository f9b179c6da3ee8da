#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Bezier curve basic usage example
"""

import logging
import sys
import os

import numpy as np
import matplotlib.pyplot as plt

# Add the package root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from bezier_kernel import BezierCurve, setup_logging
from bezier_kernel.visualization import plot_curve, beautify_3d_axes


def basic_example():
    """Cubic Bezier curve: evaluation and derivatives"""
    print("=== Cubic Bezier curve ===")

    poles = np.array([
        [0, 0, 0],  # P0 (start)
        [1, 2, 0],  # P1
        [2, 2, 0],  # P2
        [3, 0, 0],  # P3 (end)
    ])
    curve = BezierCurve(poles)
    print(f"Degree: {curve.degree()}, rational: {curve.is_rational()}, closed: {curve.is_closed()}")

    p, v1, v2 = curve.d2(0.5)
    print(f"C(0.5) = {p}, C'(0.5) = {v1}, C''(0.5) = {v2}")
    print(f"Parametric tolerance for 1e-3: {curve.resolution(1e-3):.3e}")
    return curve


def rational_example():
    """Quarter circle as a rational quadratic Bezier curve"""
    print("\n=== Rational quarter circle ===")

    poles = [[1, 0, 0], [1, 1, 0], [0, 1, 0]]
    weights = [1.0, np.sqrt(0.5), 1.0]
    curve = BezierCurve(poles, weights)

    ts = np.linspace(0, 1, 5)
    radii = np.linalg.norm(curve.evaluate(ts), axis=1)
    print(f"Radii along the arc: {radii}")

    curve.increase(4)
    print(f"After elevation: degree {curve.degree()}, weights {curve.weights()}")

    curve.segment(0.25, 0.75)
    print(f"Segment start {curve.start_point()}, end {curve.end_point()}")
    return curve


def plot_example(curves):
    """Plot the curves with their control polygons"""
    fig = plt.figure(figsize=(7, 6))
    ax = fig.add_subplot(111, projection='3d')
    colors = ['tab:blue', 'tab:green']
    for curve, color in zip(curves, colors):
        plot_curve(curve, ax=ax, color=color, label=repr(curve))
    beautify_3d_axes(ax)
    ax.legend(loc='upper left', fontsize=8)
    plt.show()


if __name__ == "__main__":
    setup_logging(logging.DEBUG)
    cubic = basic_example()
    arc = rational_example()
    plot_example([cubic, arc])
