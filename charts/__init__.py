"""
Chart rendering for TaxMap Spain.

Re-exports the renderer and the display surfaces::

    from charts import render, ChartPage
"""

from charts.renderer import build_chart_config, render
from charts.surfaces import CanvasSurface, ChartPage, InfoSurface

__all__ = [
    "build_chart_config",
    "render",
    "CanvasSurface",
    "ChartPage",
    "InfoSurface",
]
