"""Tests for the parametric tolerance estimate."""

import numpy as np
import pytest

from bezier_kernel import BezierCurve, InvalidArgumentError, Precision


def _max_gap(curve, u_tol, count=400):
    """Largest 3D distance between points whose parameters differ by just under u_tol."""
    step = 0.999 * u_tol
    starts = np.linspace(0.0, 1.0 - step, count)
    a = curve.evaluate(starts)
    b = curve.evaluate(starts + step)
    return np.max(np.linalg.norm(b - a, axis=1))


class TestResolution:

    def test_non_rational_bound(self, cubic):
        # 3 * max |P_{i+1} - P_i| = 3 * sqrt(5)
        assert cubic.resolution(1e-3) == pytest.approx(1e-3 / (3.0 * np.sqrt(5.0)))

    def test_scales_with_tolerance(self, space_rational):
        assert space_rational.resolution(2e-2) == pytest.approx(2.0 * space_rational.resolution(1e-2))

    @pytest.mark.parametrize("name", ["cubic", "quarter_circle", "space_rational", "looping_cubic"])
    @pytest.mark.parametrize("tolerance", [1e-1, 1e-3])
    def test_guarantee_holds(self, request, name, tolerance):
        curve = request.getfixturevalue(name)
        u_tol = curve.resolution(tolerance)
        assert 0.0 < u_tol
        assert _max_gap(curve, min(u_tol, 1.0)) < tolerance

    def test_rational_is_conservative(self, space_rational):
        u_tol = space_rational.resolution(1.0)
        speeds = [np.linalg.norm(space_rational.d1(u)[1]) for u in np.linspace(0, 1, 501)]
        assert max(speeds) <= 1.0 / u_tol

    def test_degenerate_curve(self):
        curve = BezierCurve([[1.0, 2.0, 3.0]] * 4)
        u_tol = curve.resolution(1e-6)
        assert Precision.is_positive_infinite(u_tol)

    def test_does_not_mutate(self, quarter_circle):
        poles = quarter_circle.poles()
        quarter_circle.resolution(1e-4)
        np.testing.assert_array_equal(quarter_circle.poles(), poles)
        assert quarter_circle.is_rational()

    @pytest.mark.parametrize("tolerance", [0.0, -1e-3, np.inf, np.nan])
    def test_invalid_tolerance(self, cubic, tolerance):
        with pytest.raises(InvalidArgumentError):
            cubic.resolution(tolerance)
