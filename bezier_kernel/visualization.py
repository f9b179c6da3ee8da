"""
Visualization functions for Bezier curves.
"""

import numpy as np
import matplotlib.pyplot as plt


def set_axes_equal_around(ax, center=(0, 0, 0), radius=1.0, pad=0.05):
    """
    Set 3D axes to equal aspect ratio around a specified center and radius.

    Args:
        ax: 3D matplotlib axes
        center: Center point for the view
        radius: Radius around center to include
        pad: Additional padding factor
    """
    cx, cy, cz = center

    # Get current axis limits
    x0, x1 = ax.get_xlim3d()
    y0, y1 = ax.get_ylim3d()
    z0, z1 = ax.get_zlim3d()

    # Expand limits to include the specified sphere
    x0 = min(x0, cx - radius); x1 = max(x1, cx + radius)
    y0 = min(y0, cy - radius); y1 = max(y1, cy + radius)
    z0 = min(z0, cz - radius); z1 = max(z1, cz + radius)

    max_range = max(x1 - x0, y1 - y0, z1 - z0)
    half = 0.5 * max_range * (1 + pad)
    ax.set_xlim(cx - half, cx + half)
    ax.set_ylim(cy - half, cy + half)
    ax.set_zlim(cz - half, cz + half)
    ax.set_box_aspect((1, 1, 1))


def beautify_3d_axes(ax, show_ticks=True, show_grid=True):
    """
    Apply paper-friendly styling to 3D axes.

    Args:
        ax: 3D matplotlib axes
        show_ticks: Whether to show axis ticks and labels
        show_grid: Whether to show grid lines
    """
    ax.grid(show_grid)
    if show_ticks:
        ax.tick_params(axis='both', which='major', labelsize=8, pad=2)
    else:
        ax.set_xticks([]); ax.set_yticks([]); ax.set_zticks([])

    for axis in (ax.xaxis, ax.yaxis, ax.zaxis):
        axis.pane.set_facecolor((1, 1, 1, 1))
        axis.pane.set_edgecolor("0.85")


def plot_curve(curve, ax=None, samples=200, show_poles=True, color='tab:blue',
               pole_color='tab:red', lw=2.0, label=None):
    """
    Plot a Bezier curve and its control polygon.

    Args:
        curve: BezierCurve to draw
        ax: 3D matplotlib axes (a new figure is created if None)
        samples: Number of evaluated points along [0, 1]
        show_poles: Draw the control polygon and the poles
        color: Curve color
        pole_color: Control polygon color
        lw: Line width for the curve
        label: Legend label for the curve

    Returns:
        The 3D axes
    """
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111, projection='3d')

    ts = np.linspace(curve.first_parameter(), curve.last_parameter(), samples)
    pts = curve.evaluate(ts)
    ax.plot(pts[:, 0], pts[:, 1], pts[:, 2], color=color, lw=lw, label=label)

    if show_poles:
        P = curve.poles()
        ax.plot(P[:, 0], P[:, 1], P[:, 2], color=pole_color, ls='--', lw=1.0, alpha=0.7)
        ax.scatter(P[:, 0], P[:, 1], P[:, 2], color=pole_color, s=15)

    P = curve.poles()
    center = 0.5 * (P.min(axis=0) + P.max(axis=0))
    radius = 0.5 * float(np.max(P.max(axis=0) - P.min(axis=0)))
    set_axes_equal_around(ax, center=tuple(center), radius=max(radius, 1e-9))
    return ax
