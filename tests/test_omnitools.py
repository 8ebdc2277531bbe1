"""
Integration tests for the MCP omnitools.

Each tool returns a JSON string; tests parse it and check the payload.
"""

import json
import pytest

from omnitools.duct_selection import duct_selection
from omnitools.duct_sizing import duct_sizing
from omnitools.help_resources import help_resources
from omnitools.parameter_sweep import parameter_sweep
from omnitools.properties import properties
from omnitools.smacna_lookup import smacna_lookup
from utils.import_helpers import COOLPROP_AVAILABLE


class TestDuctSizingTool:

    def test_reference_duct(self):
        data = json.loads(duct_sizing(flow_rate=1000, shape="rectangular", width=12, height=8, length=100))
        assert data["errors"] == []
        result = data["result"]
        assert result["velocity"] == pytest.approx(1500.0)
        assert result["pressureLoss"] == 0.34
        assert result["gauge"] == "24"
        assert result["jointSpacing"] == 8
        assert result["hangerSpacing"] == 8
        assert result["snapSummary"].startswith("1000 CFM")
        assert data["compliance"]["status"] == "non_compliant"
        assert len(data["educational_notes"]) == 2
        assert len(data["results_table"]) == 9
        assert data["summary"]["status"] == "warning"
        assert "csv" not in data
        assert "material: defaulted to 'galvanized'" not in data["log"]

    def test_csv_export(self):
        data = json.loads(duct_sizing(flow_rate=1000, shape="round", diameter=12, length=100,
                                      include_table=False, export_csv=True))
        assert "results_table" not in data
        assert data["csv"].startswith("Parameter,Value,Limit,Status,Reference,Advice")
        assert '"12 in (Round)"' in data["csv"]

    def test_invalid_flow_rate(self):
        data = json.loads(duct_sizing(flow_rate=0, shape="rectangular", width=12, height=8, length=100))
        assert "result" not in data
        assert data["errors"] == ["flowRate must be greater than 0 (got 0)"]

    def test_missing_dimensions(self):
        data = json.loads(duct_sizing(flow_rate=1000, shape="rectangular", length=100))
        assert data["errors"] == ["Width and height required for rectangular ducts"]

    def test_invalid_material(self):
        data = json.loads(duct_sizing(flow_rate=1000, shape="round", diameter=12, length=100, material="copper"))
        assert "copper" in data["errors"][0]


class TestSmacnaLookupTool:

    def test_gauge(self):
        data = json.loads(smacna_lookup(lookup_type="gauge", size=12, pressure_class="low", application="exhaust"))
        assert data["gauge"] == "22"
        assert data["table_gauge"] == "24"
        assert data["pressure_class"] == "low"

    def test_joint_spacing(self):
        data = json.loads(smacna_lookup(lookup_type="joint_spacing", velocity=2200, shape="round"))
        assert data["joint_spacing_ft"] == 8
        assert data["shape"] == "circular"

    def test_hanger_spacing(self):
        assert json.loads(smacna_lookup(lookup_type="hanger_spacing", gauge="22"))["hanger_spacing_ft"] == 10

    def test_seams(self):
        data = json.loads(smacna_lookup(lookup_type="seams", size=12, shape="rectangular"))
        assert data["seamTypes"] == ["Pittsburgh Lock", "Button Punch Snap Lock"]

    def test_velocity_limits(self):
        data = json.loads(smacna_lookup(lookup_type="velocity_limits", application="return"))
        assert data["max"] == 2000

    def test_missing_parameters(self):
        assert "error" in json.loads(smacna_lookup(lookup_type="joint_spacing"))
        assert "errors" in json.loads(smacna_lookup(lookup_type="gauge"))
        assert "error" in json.loads(smacna_lookup(lookup_type="bogus"))


class TestDuctSelectionTool:

    def test_velocity(self):
        data = json.loads(duct_selection(criterion="velocity", flow_rate=1000, target_velocity=1500))
        assert data["selection"]["width"] == 12
        assert data["selection"]["height"] == 8

    def test_pressure_loss(self):
        data = json.loads(duct_selection(criterion="pressure_loss", flow_rate=1000, length=100,
                                         target_pressure_loss=0.1, shape="round"))
        assert data["selection"]["result"]["pressureLoss"] <= 0.1
        assert data["errors"] == []

    def test_convert_shape(self):
        data = json.loads(duct_selection(criterion="convert_shape", shape="rectangular", width=12, height=8))
        assert data["to_shape"] == "circular"
        assert data["converted"]["diameter"] == pytest.approx(11.06, abs=0.01)
        assert 10 < data["equivalent_diameter_in"] < 11

    def test_unreachable_target(self):
        data = json.loads(duct_selection(criterion="pressure_loss", flow_rate=100, length=1,
                                         target_pressure_loss=100))
        assert data["errors"]


class TestParameterSweepTool:

    def test_sweep(self):
        data = json.loads(parameter_sweep(variable="flow_rate", start=500, stop=2000, n=4,
                                          shape="rectangular", width=12, height=8, length=100))
        assert data["errors"] == []
        assert [p["velocity"] for p in data["points"]] == pytest.approx([750, 1500, 2250, 3000])

    def test_invalid_points(self):
        data = json.loads(parameter_sweep(variable="length", start=1, stop=10, n=1,
                                          flow_rate=1000, width=12, height=8))
        assert data["errors"]


class TestPropertiesTool:

    @pytest.mark.skipif(not COOLPROP_AVAILABLE, reason="CoolProp not installed")
    def test_standard_air(self):
        data = json.loads(properties(lookup_type="air", temperature_f=70))
        assert data["air"]["density_lb_ft3"] == pytest.approx(0.075, abs=0.003)
        assert data["density_ratio"] == pytest.approx(1.0, abs=0.05)

    def test_material(self):
        data = json.loads(properties(lookup_type="material", material="stainless"))
        assert data["roughness"] == 0.00015

    def test_unknown_material(self):
        data = json.loads(properties(lookup_type="material", material="copper"))
        assert "error" in data
        assert "galvanized" in data["available_materials"]

    def test_list_materials(self):
        assert json.loads(properties(lookup_type="list_materials"))["count"] == 3


class TestHelpResourcesTool:

    def test_gauge_tables(self):
        data = json.loads(help_resources(resource_type="gauge_tables"))
        assert set(data["gauge_tables"]) == {"low", "medium", "high"}
        assert data["gauge_tables"]["low"][-1] == {"max_dimension_in": None, "gauge": 10}

    def test_all(self):
        data = json.loads(help_resources())
        for key in ("materials", "applications", "pressure_classes", "gauge_tables", "velocity_limits", "config"):
            assert key in data

    def test_invalid(self):
        assert "error" in json.loads(help_resources(resource_type="bogus"))
