"""
Display surfaces the renderer and orchestration write into.

    CanvasSurface  — the drawable target; receives one Chart.js config
    InfoSurface    — the text area that receives the apology on total failure
    ChartPage      — a page holding surfaces by element id; renders itself to
                     HTML through the Jinja2 templates in ``charts/templates``

Surfaces are handed to orchestration explicitly.  ``ChartPage.lookup`` returns
None for an id the page does not contain, which is how a missing canvas
reaches the renderer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from utils.config import CHART_ELEMENT_ID, INFO_ELEMENT_ID

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
CHART_JS_URL = "https://cdn.jsdelivr.net/npm/chart.js@4.4.3/dist/chart.umd.min.js"

_env: Environment | None = None


def template_env() -> Environment:
    global _env
    if _env is None:
        _env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(["html"]),
        )
    return _env


class CanvasSurface:
    """A named drawable target.  ``draw`` may be called once."""

    def __init__(self, element_id: str):
        self.element_id = element_id
        self.config: dict[str, Any] | None = None

    @property
    def drawn(self) -> bool:
        return self.config is not None

    def draw(self, config: dict[str, Any]) -> None:
        if self.config is not None:
            raise RuntimeError(f"#{self.element_id} already holds a chart")
        self.config = config


class InfoSurface:
    """A named text output area."""

    def __init__(self, element_id: str):
        self.element_id = element_id
        self.html = ""

    def write(self, html: str) -> None:
        self.html = html


class ChartPage:
    """The page hosting the chart canvas and the information area."""

    def __init__(self, surfaces: list | None = None, title: str = "TaxMap Spain"):
        self.title = title
        self._surfaces: dict[str, Any] = {}
        for surface in surfaces or []:
            self._surfaces[surface.element_id] = surface

    @classmethod
    def default(cls, with_canvas: bool = True) -> "ChartPage":
        """A page with the standard ``taxChart`` canvas and ``dataInfo`` area."""
        surfaces: list = [InfoSurface(INFO_ELEMENT_ID)]
        if with_canvas:
            surfaces.insert(0, CanvasSurface(CHART_ELEMENT_ID))
        return cls(surfaces)

    def lookup(self, element_id: str) -> Any | None:
        return self._surfaces.get(element_id)

    @property
    def canvas(self) -> CanvasSurface | None:
        return self.lookup(CHART_ELEMENT_ID)

    @property
    def info(self) -> InfoSurface | None:
        return self.lookup(INFO_ELEMENT_ID)

    def context(self) -> dict[str, Any]:
        """Template variables for ``index.html``."""
        canvas = self.canvas
        info = self.info
        return {
            "title": self.title,
            "chart_js_url": CHART_JS_URL,
            "chart_element_id": canvas.element_id if canvas else None,
            "chart_config": canvas.config if canvas else None,
            "info_element_id": info.element_id if info else None,
            "info_html": info.html if info else "",
        }

    def render_html(self) -> str:
        return template_env().get_template("index.html").render(**self.context())
