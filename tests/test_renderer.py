"""
Tests for pie chart rendering — charts/renderer.py

Verifies one slice per record entry in iteration order, palette cycling,
tooltip text, the fixed styling options, and the missing-surface no-op.
"""
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from charts.renderer import build_chart_config, render
from charts.surfaces import CanvasSurface
from utils.config import CHART_PALETTE

RECORD = {"Health": 35, "Education": 30, "Infrastructure": 20, "Pensions": 15}


# ── build_chart_config ───────────────────────────────────────────────────────

class TestBuildChartConfig:
    def test_type(self):
        assert build_chart_config(RECORD)["type"] == "pie"

    def test_labels_and_values_in_order(self):
        cfg = build_chart_config(RECORD)
        assert cfg["data"]["labels"] == ["Health", "Education", "Infrastructure", "Pensions"]
        assert cfg["data"]["datasets"][0]["data"] == [35, 30, 20, 15]

    def test_one_slice_per_entry(self):
        record = {f"C{i}": i for i in range(12)}
        ds = build_chart_config(record)["data"]["datasets"][0]
        assert len(ds["data"]) == 12
        assert len(ds["backgroundColor"]) == 12

    def test_insertion_order_not_sorted(self):
        cfg = build_chart_config({"Zeta": 1, "Alpha": 2})
        assert cfg["data"]["labels"] == ["Zeta", "Alpha"]

    def test_palette_cycles(self):
        record = {f"C{i}": 1 for i in range(7)}
        colors = build_chart_config(record)["data"]["datasets"][0]["backgroundColor"]
        assert colors[:5] == list(CHART_PALETTE)
        assert colors[5:] == list(CHART_PALETTE[:2])

    def test_dataset_styling(self):
        ds = build_chart_config(RECORD)["data"]["datasets"][0]
        assert ds["label"] == "Tax Distribution"
        assert ds["hoverOffset"] == 10

    def test_options(self):
        opts = build_chart_config(RECORD)["options"]
        assert opts["responsive"] is True
        assert opts["maintainAspectRatio"] is False
        assert opts["plugins"]["legend"]["position"] == "bottom"
        assert opts["plugins"]["legend"]["labels"]["usePointStyle"] is True

    def test_tooltip_labels(self):
        cfg = build_chart_config({"Health": 35, "Debt": 12.5})
        assert cfg["tooltipLabels"] == ["Health: 35%", "Debt: 12.5%"]

    def test_empty_record(self):
        cfg = build_chart_config({})
        assert cfg["data"]["labels"] == []
        assert cfg["data"]["datasets"][0]["backgroundColor"] == []

    def test_json_serialisable(self):
        json.dumps(build_chart_config(RECORD))


# ── render ───────────────────────────────────────────────────────────────────

class TestRender:
    def test_draws_on_surface(self):
        surface = CanvasSurface("taxChart")
        render(RECORD, surface)
        assert surface.drawn
        assert surface.config["data"]["labels"] == list(RECORD)

    def test_missing_surface_is_noop(self, caplog):
        with caplog.at_level("ERROR", logger="charts.renderer"):
            render(RECORD, None)
        assert "Canvas element not found. Unable to render chart." in caplog.text

    def test_does_not_mutate_record(self):
        record = dict(RECORD)
        render(record, CanvasSurface("taxChart"))
        assert record == RECORD
