"""
Tests for display surfaces and the HTML page — charts/surfaces.py
"""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from charts.renderer import render
from charts.surfaces import CHART_JS_URL, CanvasSurface, ChartPage, InfoSurface


class TestCanvasSurface:
    def test_initially_blank(self):
        assert not CanvasSurface("taxChart").drawn

    def test_draw_once(self):
        surface = CanvasSurface("taxChart")
        surface.draw({"type": "pie"})
        with pytest.raises(RuntimeError, match="already holds a chart"):
            surface.draw({"type": "pie"})


class TestInfoSurface:
    def test_write(self):
        info = InfoSurface("dataInfo")
        info.write("<p>hi</p>")
        assert info.html == "<p>hi</p>"


class TestChartPage:
    def test_default_has_both_surfaces(self):
        page = ChartPage.default()
        assert page.canvas.element_id == "taxChart"
        assert page.info.element_id == "dataInfo"

    def test_default_without_canvas(self):
        page = ChartPage.default(with_canvas=False)
        assert page.canvas is None
        assert page.lookup("taxChart") is None
        assert page.info is not None

    def test_lookup_unknown(self):
        assert ChartPage.default().lookup("nope") is None

    def test_html_before_render(self):
        html = ChartPage.default().render_html()
        assert '<canvas id="taxChart"' in html
        assert 'id="dataInfo"' in html
        assert CHART_JS_URL not in html

    def test_html_with_chart(self):
        page = ChartPage.default()
        render({"Health": 35, "Education": 30}, page.canvas)
        html = page.render_html()
        assert CHART_JS_URL in html
        assert '"labels": ["Health", "Education"]' in html
        assert "Health: 35%" in html
        assert "new Chart(" in html

    def test_html_with_info_message(self):
        page = ChartPage.default()
        page.info.write("<p>Unable to load data. Please try again later.</p>")
        html = page.render_html()
        assert "<p>Unable to load data. Please try again later.</p>" in html

    def test_labels_escaped(self):
        page = ChartPage.default()
        render({"</script><b>x": 1}, page.canvas)
        assert "</script><b>x" not in page.render_html()

    def test_title(self):
        assert "<title>Budget</title>" in ChartPage([], title="Budget").render_html()
