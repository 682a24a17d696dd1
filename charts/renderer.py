"""
Pie chart rendering.

Turns a Distribution Record into the configuration object Chart.js expects
and hands it to a display surface.  Chart.js itself runs in the browser;
nothing here draws pixels.

Config shape (mirrors ``new Chart(ctx, config)``)::

    {
      "type": "pie",
      "data": {"labels": [...], "datasets": [{"label", "data",
               "backgroundColor", "hoverOffset"}]},
      "options": {"responsive", "maintainAspectRatio",
                  "plugins": {"tooltip": {...}, "legend": {...}}},
      "tooltipLabels": [...]
    }

``tooltipLabels`` holds the preformatted ``"<category>: <value>%"`` strings;
the page script returns ``tooltipLabels[context.dataIndex]`` from its tooltip
callback because functions cannot travel as JSON.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from utils.config import CHART_DATASET_LABEL, CHART_HOVER_OFFSET, CHART_PALETTE
from utils.formatting import cycle_colors, format_tooltip

logger = logging.getLogger(__name__)


def build_chart_config(record: Mapping[str, Any],
                       palette: Sequence[str] = CHART_PALETTE) -> dict[str, Any]:
    """Build a Chart.js pie configuration for *record*.

    Labels and values follow the record's iteration order; slice colors cycle
    through *palette*.
    """
    labels = list(record.keys())
    values = list(record.values())

    return {
        "type": "pie",
        "data": {
            "labels": labels,
            "datasets": [
                {
                    "label": CHART_DATASET_LABEL,
                    "data": values,
                    "backgroundColor": cycle_colors(palette, len(labels)),
                    "hoverOffset": CHART_HOVER_OFFSET,
                },
            ],
        },
        "options": {
            "responsive": True,
            "maintainAspectRatio": False,
            "plugins": {
                "tooltip": {"enabled": True},
                "legend": {
                    "position": "bottom",
                    "labels": {"usePointStyle": True},
                },
            },
        },
        "tooltipLabels": [format_tooltip(k, v) for k, v in zip(labels, values)],
    }


def render(record: Mapping[str, Any], surface: Optional[Any]) -> None:
    """Draw *record* as a pie chart on *surface*.

    A missing surface is logged and otherwise ignored.
    """
    if surface is None:
        logger.error("Canvas element not found. Unable to render chart.")
        return

    config = build_chart_config(record)
    surface.draw(config)
    logger.info("Rendered %d slices on #%s", len(config["data"]["labels"]),
                getattr(surface, "element_id", "?"))
