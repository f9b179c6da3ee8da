"""Tests for set_pole / set_weight and the derived rational/closed flags."""

import logging

import numpy as np
import pytest

from bezier_kernel import (
    BezierCurve,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidWeightError,
)


class TestSetPole:

    def test_overwrites_pole(self, cubic):
        cubic.set_pole(1, [1.0, 3.0, 1.0])
        np.testing.assert_array_equal(cubic.pole(1), [1.0, 3.0, 1.0])
        assert cubic.degree() == 3

    def test_end_pole_updates_closure(self, cubic):
        cubic.set_pole(3, [0.0, 0.0, 0.0])
        assert cubic.is_closed()
        cubic.set_pole(0, [0.0, 0.0, 1.0])
        assert not cubic.is_closed()

    def test_closure_uses_confusion(self, cubic):
        cubic.set_pole(3, [0.5e-7, 0.0, 0.0])
        assert cubic.is_closed()
        cubic.set_pole(3, [2e-7, 0.0, 0.0])
        assert not cubic.is_closed()

    @pytest.mark.parametrize("index", [-1, 4])
    def test_bad_index(self, cubic, index):
        with pytest.raises(IndexOutOfRangeError) as info:
            cubic.set_pole(index, [0.0, 0.0, 0.0])
        assert info.value.parameter == "index"

    def test_non_integer_index(self, cubic):
        with pytest.raises(IndexOutOfRangeError):
            cubic.set_pole(1.5, [0.0, 0.0, 0.0])

    def test_bad_point(self, cubic):
        with pytest.raises(InvalidArgumentError):
            cubic.set_pole(1, [0.0, 0.0])

    def test_with_weight_promotes(self, cubic):
        cubic.set_pole(2, [2.0, 3.0, 0.0], 2.0)
        assert cubic.is_rational()
        np.testing.assert_array_equal(cubic.weights(), [1.0, 1.0, 2.0, 1.0])
        np.testing.assert_array_equal(cubic.pole(2), [2.0, 3.0, 0.0])

    def test_with_unit_weight_stays_non_rational(self, cubic):
        cubic.set_pole(2, [2.0, 3.0, 0.0], 1.0)
        assert not cubic.is_rational()

    def test_rejected_weight_leaves_curve_unchanged(self, cubic, cubic_poles):
        with pytest.raises(InvalidWeightError):
            cubic.set_pole(1, [7.0, 7.0, 7.0], 0.0)
        np.testing.assert_array_equal(cubic.poles(), cubic_poles)
        assert not cubic.is_rational()


class TestSetWeight:

    def test_unit_weight_on_non_rational_is_noop(self, cubic):
        cubic.set_weight(1, 1.0)
        assert not cubic.is_rational()
        np.testing.assert_array_equal(cubic.weights(), np.ones(4))

    def test_promotes_to_rational(self, cubic):
        cubic.set_weight(1, 2.0)
        assert cubic.is_rational()
        assert [cubic.weight(i) for i in range(4)] == [1.0, 2.0, 1.0, 1.0]

    def test_demotes_when_weights_equalize(self, cubic):
        cubic.set_weight(1, 2.0)
        cubic.set_weight(1, 1.0)
        assert not cubic.is_rational()
        assert all(cubic.weight(i) == 1.0 for i in range(4))

    def test_demotes_to_common_weight(self):
        curve = BezierCurve([[0, 0, 0], [1, 1, 0], [2, 0, 0]], [1.0, 2.0, 2.0])
        curve.set_weight(0, 2.0)
        assert not curve.is_rational()
        assert all(curve.weight(i) == 1.0 for i in range(3))
        np.testing.assert_allclose(curve.d0(0.5), [1.0, 0.5, 0.0])

    def test_rational_edit(self, quarter_circle):
        quarter_circle.set_weight(2, 3.0)
        assert quarter_circle.is_rational()
        assert quarter_circle.weight(2) == 3.0
        np.testing.assert_allclose(quarter_circle.d0(1.0), [0.0, 1.0, 0.0], atol=1e-15)

    @pytest.mark.parametrize("weight", [0.0, -0.5, np.nan])
    def test_invalid_weight_leaves_curve_unchanged(self, quarter_circle, weight):
        with pytest.raises(InvalidWeightError) as info:
            quarter_circle.set_weight(1, weight)
        assert info.value.parameter == "weight"
        assert quarter_circle.weight(1) == pytest.approx(np.sqrt(0.5))

    def test_bad_index(self, quarter_circle):
        with pytest.raises(IndexOutOfRangeError):
            quarter_circle.set_weight(3, 2.0)

    def test_weight_change_keeps_closure(self):
        curve = BezierCurve([[0, 0, 0], [1, 1, 0], [0, 0, 0]])
        curve.set_weight(1, 4.0)
        assert curve.is_closed()
        assert curve.is_rational()

    def test_logs_promotion_and_demotion(self, cubic, caplog):
        caplog.set_level(logging.DEBUG, logger="bezier_kernel")
        cubic.set_weight(1, 2.0)
        cubic.set_weight(1, 1.0)
        messages = [r.getMessage() for r in caplog.records if r.name == "bezier_kernel.bezier"]
        assert "Curve is now rational" in messages
        assert "Curve is now non-rational" in messages


class TestInvariants:
    """Flags stay consistent and degree follows the pole count."""

    def test_degree_tracks_pole_count(self, cubic):
        for degree in (3, 5, 9, 25):
            cubic.increase(degree)
            assert cubic.degree() == cubic.nb_poles() - 1 == degree
            assert 2 <= cubic.nb_poles() <= 26

    def test_flags_after_every_mutation(self, quarter_circle):
        quarter_circle.set_pole(2, [1.0, 0.0, 0.0])
        assert quarter_circle.is_closed()
        quarter_circle.increase(4)
        assert quarter_circle.is_closed() and quarter_circle.is_rational()
        quarter_circle.segment(0.0, 0.5)
        assert not quarter_circle.is_closed()
        assert quarter_circle.is_rational()
