"""
Tests for duct size selection and parameter sweeps.
"""

import pytest

from duct_sizer.errors import SelectionError, ValidationError
from duct_sizer.models import Shape
from duct_sizer.selection import select_duct_for_pressure_loss, select_duct_for_velocity
from duct_sizer.sweep import sweep_duct_sizing

REFERENCE = {"flowRate": 1000, "shape": "rectangular", "width": 12, "height": 8, "length": 100}


class TestVelocitySelection:

    def test_rectangular(self):
        selection = select_duct_for_velocity(1000, 1500, "rectangular")
        assert selection.width == 12
        assert selection.height == 8
        assert selection.diameter is None
        assert selection.result is None

    def test_circular(self):
        selection = select_duct_for_velocity(1000, 1500, "round")
        assert selection.shape == Shape.CIRCULAR
        assert selection.diameter == 12
        assert 11 < selection.exact_dimension < 11.1

    def test_with_length_runs_the_pipeline(self):
        selection = select_duct_for_velocity(1000, 1500, "rectangular", length=100)
        assert selection.result.velocity == pytest.approx(1500.0)
        assert selection.result.pressure_loss == 0.34

    def test_aspect_ratio_below_one(self):
        with pytest.raises(ValidationError):
            select_duct_for_velocity(1000, 1500, "rectangular", aspect_ratio=0.5)

    def test_invalid_target(self):
        with pytest.raises(ValidationError):
            select_duct_for_velocity(1000, 0, "rectangular")


class TestPressureLossSelection:

    @pytest.mark.parametrize("shape", ["rectangular", "circular"])
    def test_meets_target(self, shape):
        selection = select_duct_for_pressure_loss(1000, 100, 0.1, shape)
        assert selection.criterion == "pressure_loss"
        assert selection.result.pressure_loss <= 0.1
        assert 3 < selection.exact_dimension < 120

    def test_larger_than_velocity_selection(self):
        by_loss = select_duct_for_pressure_loss(1000, 100, 0.1, "circular")
        by_velocity = select_duct_for_velocity(1000, 1500, "circular")
        assert by_loss.diameter > by_velocity.diameter

    def test_unreachable_target(self):
        with pytest.raises(SelectionError):
            select_duct_for_pressure_loss(100, 1, 100, "rectangular")


class TestSweep:

    def test_flow_rate_sweep(self):
        points = sweep_duct_sizing(REFERENCE, "flow_rate", 500, 2000, n=4)
        assert [p.value for p in points] == [500, 1000, 1500, 2000]
        assert [p.velocity for p in points] == pytest.approx([750, 1500, 2250, 3000])
        losses = [p.pressure_loss for p in points]
        assert losses == sorted(losses)
        assert points[-1].joint_spacing == 4

    def test_rejected_point_carries_error(self):
        points = sweep_duct_sizing(REFERENCE, "length", 0, 300, n=4)
        assert points[0].error is not None
        assert points[0].velocity is None
        assert all(p.error is None for p in points[1:])

    def test_compliance_flag(self):
        points = sweep_duct_sizing(REFERENCE, "length", 5, 100, n=2)
        assert points[0].compliant
        assert not points[1].compliant

    @pytest.mark.parametrize("variable,n", [("material", 4), ("flow_rate", 1)])
    def test_invalid_sweep(self, variable, n):
        with pytest.raises(ValidationError):
            sweep_duct_sizing(REFERENCE, variable, 1, 10, n=n)
