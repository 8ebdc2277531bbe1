"""
Tests for the duct sizing pipeline, the input boundary and the summary.
"""

import math
import pytest

from duct_sizer import (
    DuctInput,
    GeometryError,
    InvalidMaterialError,
    Material,
    PressureClass,
    Shape,
    ValidationError,
    calculate_duct_sizing,
    generate_snap_summary,
    parse_duct_input,
)
from duct_sizer.calculator import run_duct_sizing
from duct_sizer.inputs import InputResolver
from duct_sizer.models import ComplianceStatus
from duct_sizer.summary import format_pressure_loss, format_velocity

REFERENCE = {"flowRate": 1000, "shape": "rectangular", "width": 12, "height": 8, "length": 100}


class TestReferenceScenario:
    """1000 CFM, 12"x8", 100 ft, galvanized supply duct."""

    def test_results(self):
        result = calculate_duct_sizing(REFERENCE)
        assert result.area == 0.667
        assert result.perimeter == 3.33
        assert result.velocity == pytest.approx(1500.0)
        assert result.hydraulic_diameter == 9.6
        assert result.pressure_loss == 0.34
        assert result.gauge == "24"
        assert result.joint_spacing == 8
        assert result.hanger_spacing == 8

    def test_warnings_from_compliance(self):
        result = calculate_duct_sizing(REFERENCE)
        assert result.warnings == ["Pressure loss 0.34 in. w.g. exceeds recommended 0.1 in. w.g. per 100 ft"]

    def test_snap_summary(self):
        summary = calculate_duct_sizing(REFERENCE).snap_summary
        assert summary == '1000 CFM • 12"×8" • 1500 ft/min • 0.34" w.g. • 24 ga • 100\' long'
        for part in ("1000 CFM", '12"×8"', "ft/min", '" w.g.', "ga", "100' long"):
            assert part in summary

    def test_report_status(self):
        _, _, report = run_duct_sizing(REFERENCE)
        assert report.status == ComplianceStatus.NON_COMPLIANT
        assert not report.pressure_compliant
        assert report.velocity_compliant

    def test_camel_case_dump(self):
        dumped = calculate_duct_sizing(REFERENCE).model_dump(by_alias=True)
        for key in ("velocity", "pressureLoss", "gauge", "jointSpacing", "hangerSpacing",
                    "hydraulicDiameter", "area", "perimeter", "warnings", "snapSummary"):
            assert key in dumped

    def test_round_duct(self):
        result = calculate_duct_sizing({"flow_rate": 1000, "shape": "circular", "diameter": 12, "length": 100})
        assert result.velocity == pytest.approx(1000 / (math.pi / 4))
        assert result.hydraulic_diameter == 12.0
        assert result.pressure_loss == 0.19
        assert result.joint_spacing == 10
        assert '12"⌀' in result.snap_summary


class TestPipelineProperties:

    def test_idempotent(self):
        first = calculate_duct_sizing(REFERENCE)
        second = calculate_duct_sizing(REFERENCE)
        assert first.model_dump_json() == second.model_dump_json()

    def test_velocity_depends_only_on_area(self):
        square = calculate_duct_sizing({"flow_rate": 1200, "shape": "rectangular", "width": 12, "height": 12, "length": 50})
        wide = calculate_duct_sizing({"flow_rate": 1200, "shape": "rectangular", "width": 16, "height": 9, "length": 50})
        assert square.velocity == pytest.approx(wide.velocity)

    def test_pressure_loss_monotonic_in_flow_and_length(self):
        by_flow = [calculate_duct_sizing({**REFERENCE, "flowRate": q}).pressure_loss for q in (400, 800, 1200, 1600)]
        assert by_flow == sorted(by_flow)
        by_length = [calculate_duct_sizing({**REFERENCE, "length": L}).pressure_loss for L in (25, 50, 100, 200)]
        assert by_length == sorted(by_length)

    def test_stainless_loses_less_than_galvanized(self):
        galvanized = calculate_duct_sizing({**REFERENCE, "length": 500})
        stainless = calculate_duct_sizing({**REFERENCE, "length": 500, "material": "stainless"})
        assert stainless.pressure_loss < galvanized.pressure_loss

    def test_aluminum_loses_less_than_galvanized(self):
        galvanized = calculate_duct_sizing({**REFERENCE, "length": 500})
        aluminum = calculate_duct_sizing({**REFERENCE, "length": 500, "material": "aluminum"})
        assert aluminum.pressure_loss < galvanized.pressure_loss

    def test_compliance_uses_unrounded_pressure_loss(self):
        # 30.5 ft gives 0.1029 in. w.g., which displays as 0.1
        _, result, report = run_duct_sizing({**REFERENCE, "length": 30.5})
        assert result.pressure_loss == 0.1
        assert not report.pressure_compliant
        assert report.status == ComplianceStatus.NON_COMPLIANT
        assert result.warnings == ["Pressure loss 0.1 in. w.g. exceeds recommended 0.1 in. w.g. per 100 ft"]

    def test_exhaust_gets_heavier_gauge(self):
        assert calculate_duct_sizing({**REFERENCE, "application": "exhaust"}).gauge == "22"

    def test_high_velocity_joint_spacing(self):
        result = calculate_duct_sizing({**REFERENCE, "flowRate": 2000})
        assert result.velocity == pytest.approx(3000.0)
        assert result.joint_spacing == 4

    def test_accepts_duct_input(self):
        duct = DuctInput(flow_rate=1000, shape=Shape.RECTANGULAR, width=12, height=8, length=100)
        assert calculate_duct_sizing(duct) == calculate_duct_sizing(REFERENCE)


class TestErrors:

    def test_zero_flow_rate(self):
        with pytest.raises(ValidationError, match="flowRate must be greater than 0"):
            calculate_duct_sizing({"flowRate": 0, "shape": "rectangular", "width": 12, "height": 8, "length": 100})

    def test_missing_dimensions(self):
        with pytest.raises(GeometryError):
            calculate_duct_sizing({"flowRate": 1000, "shape": "rectangular", "length": 100})

    def test_missing_diameter(self):
        with pytest.raises(GeometryError, match="Diameter required"):
            calculate_duct_sizing({"flowRate": 1000, "shape": "circular", "width": 12, "length": 100})

    @pytest.mark.parametrize("field,value", [
        ("flowRate", "abc"), ("flowRate", -5), ("flowRate", float("inf")), ("flowRate", float("nan")),
        ("length", 0), ("width", -12), ("height", "tall"),
    ])
    def test_invalid_numbers(self, field, value):
        with pytest.raises(ValidationError) as exc_info:
            calculate_duct_sizing({**REFERENCE, field: value})
        assert exc_info.value.field == field

    def test_missing_length(self):
        inputs = dict(REFERENCE)
        del inputs["length"]
        with pytest.raises(ValidationError, match="length must be greater than 0"):
            calculate_duct_sizing(inputs)

    def test_unknown_material(self):
        with pytest.raises(InvalidMaterialError):
            calculate_duct_sizing({**REFERENCE, "material": "copper"})

    def test_unknown_shape_and_application(self):
        with pytest.raises(ValidationError):
            calculate_duct_sizing({**REFERENCE, "shape": "triangle"})
        with pytest.raises(ValidationError):
            calculate_duct_sizing({**REFERENCE, "application": "kitchen"})

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            calculate_duct_sizing({**REFERENCE, "flowRate": 0})


class TestInputBoundary:

    def test_textual_numbers_and_aliases(self):
        duct = parse_duct_input({"cfm": "1000", "shape": "Round", "diameter": " 12 ", "length": "100",
                                 "pressureClass": "MEDIUM", "material": "Stainless"})
        assert duct.flow_rate == 1000.0
        assert duct.shape == Shape.CIRCULAR
        assert duct.diameter == 12.0
        assert duct.pressure_class == PressureClass.MEDIUM
        assert duct.material == Material.STAINLESS

    def test_irrelevant_dimensions_dropped(self):
        duct = parse_duct_input({**REFERENCE, "diameter": 20})
        assert duct.diameter is None
        assert duct.governing_dimension == 12

    def test_defaults(self):
        duct = parse_duct_input(REFERENCE)
        assert duct.material == Material.GALVANIZED
        assert duct.pressure_class == PressureClass.LOW

    def test_unknown_pressure_class_falls_back_to_low(self):
        assert parse_duct_input({**REFERENCE, "pressureClass": "extreme"}).pressure_class == PressureClass.LOW

    def test_resolver_logs_aliases_and_defaults(self):
        resolver = InputResolver("test")
        resolver.resolve({"cfm": 1000, "shape": "rectangular", "width": 12, "height": 8, "length": 100})
        log = resolver.get_logs()["log"]
        assert "flowRate: read from 'cfm'" in log
        assert "material: defaulted to 'galvanized'" in log


class TestSummaryFormatting:

    def test_summary_uses_integer_velocity(self):
        duct = parse_duct_input({"flow_rate": 1000, "shape": "circular", "diameter": 12, "length": 50.5})
        result = calculate_duct_sizing(duct)
        summary = generate_snap_summary(duct, result)
        assert "1273 ft/min" in summary
        assert "50.5' long" in summary

    @pytest.mark.parametrize("velocity,status", [
        (1500, "optimal"), (1000, "warning"), (700, "error"), (2600, "error"),
    ])
    def test_format_velocity(self, velocity, status):
        formatted = format_velocity(velocity, "supply")
        assert formatted["status"] == status
        assert formatted["unit"] == "ft/min"

    def test_format_velocity_value(self):
        assert format_velocity(1499.6)["value"] == "1,500"

    @pytest.mark.parametrize("pressure_loss,status", [
        (0.05, "good"), (0.08, "acceptable"), (0.12, "high"), (0.2, "excessive"),
    ])
    def test_format_pressure_loss(self, pressure_loss, status):
        assert format_pressure_loss(pressure_loss)["status"] == status

    def test_format_pressure_loss_value(self):
        assert format_pressure_loss(0.3375)["value"] == "0.338"
