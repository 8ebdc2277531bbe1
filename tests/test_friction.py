"""
Tests for the duct friction pressure loss.

Validates against manual Darcy-Weisbach calculations with the Swamee-Jain
friction factor and standard air (nu = 1.62e-4 ft²/s, rho = 0.075 lb/ft³).
"""

import math
import pytest

from duct_sizer.errors import InvalidMaterialError
from duct_sizer.friction import (
    calculate_pressure_loss,
    classify_regime,
    darcy_friction_factor,
    get_roughness,
    swamee_jain,
)
from duct_sizer.models import FlowRegime, Material


def manual_pressure_loss(velocity_fpm, dh_in, length_ft, roughness_ft):
    v = velocity_fpm / 60
    d = dh_in / 12
    re = v * d / 1.62e-4
    if re < 2300:
        f = 64 / max(re, 1)
    else:
        f = 0.25 / math.log10(roughness_ft / (3.7 * d) + 5.74 / re ** 0.9) ** 2
    dp_psf = f * (length_ft / d) * 0.075 * v ** 2 / (2 * 32.2)
    return dp_psf / 144 * 27.68


class TestPressureLoss:
    """Darcy-Weisbach pressure loss in in. w.g."""

    def test_reference_rectangular_duct(self):
        """1000 CFM through 12"x8": 1500 ft/min, Dh 9.6 in, 100 ft galvanized."""
        result = calculate_pressure_loss(1500, 9.6, 100, Material.GALVANIZED)
        assert result.reynolds == pytest.approx(25 * 0.8 / 1.62e-4)
        assert result.regime == FlowRegime.TURBULENT
        assert result.friction_factor == pytest.approx(0.0193, abs=2e-4)
        assert result.pressure_loss == pytest.approx(manual_pressure_loss(1500, 9.6, 100, 0.0003))
        assert 0.1 < result.pressure_loss < 0.5
        assert result.pressure_loss == pytest.approx(0.3375, abs=0.002)

    def test_reference_round_duct(self):
        velocity = 1000 / (math.pi / 4)
        result = calculate_pressure_loss(velocity, 12, 100, "galvanized")
        assert result.pressure_loss == pytest.approx(0.189, abs=0.002)

    def test_material_ordering(self):
        galvanized = calculate_pressure_loss(1800, 12, 100, "galvanized").pressure_loss
        stainless = calculate_pressure_loss(1800, 12, 100, "stainless").pressure_loss
        aluminum = calculate_pressure_loss(1800, 12, 100, "aluminum").pressure_loss
        assert galvanized > stainless
        assert stainless == pytest.approx(aluminum)

    def test_monotonic_in_velocity_and_length(self):
        losses = [calculate_pressure_loss(v, 10, 100).pressure_loss for v in (500, 1000, 1500, 2000, 3000)]
        assert losses == sorted(losses)
        by_length = [calculate_pressure_loss(1500, 10, L).pressure_loss for L in (10, 50, 100, 500)]
        assert by_length == sorted(by_length)
        assert by_length[2] == pytest.approx(2 * by_length[1])

    def test_never_negative(self):
        assert calculate_pressure_loss(0, 12, 100).pressure_loss == 0.0

    def test_unknown_material(self):
        with pytest.raises(InvalidMaterialError, match="copper"):
            calculate_pressure_loss(1500, 12, 100, "copper")


class TestFrictionFactor:
    """Friction factor branches."""

    def test_laminar_branch(self):
        result = calculate_pressure_loss(1, 12, 100)
        assert result.regime == FlowRegime.LAMINAR
        assert result.friction_factor == pytest.approx(64 / result.reynolds)

    def test_laminar_floor_at_zero_velocity(self):
        """Re is floored at 1 below the laminar limit.

        At Re = 0 this returns f = 64, a divide-by-zero guard rather than a
        physically meaningful value. Kept as-is and flagged here.
        """
        assert darcy_friction_factor(0.0, 0.0003, 1.0) == pytest.approx(64.0)
        assert darcy_friction_factor(0.5, 0.0003, 1.0) == pytest.approx(64.0)

    def test_swamee_jain_is_the_direct_formula(self):
        re, eps, d = 1e5, 0.0003, 1.0
        expected = 0.25 / math.log10(eps / (3.7 * d) + 5.74 / re ** 0.9) ** 2
        assert swamee_jain(re, eps, d) == pytest.approx(expected)
        assert darcy_friction_factor(re, eps, d) == pytest.approx(expected)

    def test_regime_labels(self):
        assert classify_regime(2299) == FlowRegime.LAMINAR
        assert classify_regime(2300) == FlowRegime.TRANSITIONAL
        assert classify_regime(3999) == FlowRegime.TRANSITIONAL
        assert classify_regime(4000) == FlowRegime.TURBULENT

    def test_transitional_uses_turbulent_formula(self):
        # 2300 <= Re < 4000 is labelled transitional but takes the Swamee-Jain branch
        assert darcy_friction_factor(3000, 0.0003, 1.0) == pytest.approx(swamee_jain(3000, 0.0003, 1.0))


class TestRoughness:

    def test_roughness_table(self):
        assert get_roughness("galvanized") == 0.0003
        assert get_roughness(Material.STAINLESS) == 0.00015
        assert get_roughness("Aluminum") == 0.00015

    def test_invalid_material_lists_valid_ones(self):
        with pytest.raises(InvalidMaterialError) as exc_info:
            get_roughness("pvc")
        assert "galvanized" in str(exc_info.value)
        assert exc_info.value.material == "pvc"
