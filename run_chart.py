"""
TaxMap Spain -- fetch the budget distribution and draw it as a pie chart.

Steps (in order):
  1. acquire  -- try each data source in priority order, then the local file
  2. render   -- hand the first distribution obtained to the chart renderer
  On total failure the information area gets a static apology instead.

The page surfaces are passed in by the caller; nothing here looks them up.

Usage:
    python run_chart.py                          # full chain, writes taxmap.html
    python run_chart.py --profile local-only     # local file only
    python run_chart.py --out /tmp/chart.html
"""

from __future__ import annotations

import argparse
import enum
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import requests

from charts import ChartPage, render
from sources import AcquisitionReport, NoDataAvailable, ProbeChain, acquire, build_chain
from utils.config import AppConfig, PROBE_PROFILES, UNAVAILABLE_MESSAGE
from utils.http import SessionManager
from utils.logging import configure_logging

logger = logging.getLogger(__name__)


class RunState(enum.Enum):
    IDLE = "idle"
    ACQUIRING = "acquiring"
    RENDERING = "rendering"
    FAILED = "failed"


def run(chart_surface: Optional[Any], info_surface: Optional[Any],
        chain: Optional[ProbeChain] = None,
        session: Optional[requests.Session] = None,
        report: Optional[AcquisitionReport] = None) -> RunState:
    """Acquire a distribution and render it; return the terminal state.

    IDLE -> ACQUIRING -> RENDERING on success, IDLE -> ACQUIRING -> FAILED
    when no source produced data.  There is no way back to ACQUIRING.
    """
    if chain is None:
        chain = build_chain("full")

    logger.info("Initializing TaxMap Spain...")
    logger.debug("state=%s", RunState.ACQUIRING.value)
    try:
        record = acquire(chain, session=session, report=report)
    except NoDataAvailable as e:
        logger.error("%s", e)
        if info_surface is None:
            logger.error("Information area not found. Unable to show error message.")
        else:
            info_surface.write(f"<p>{UNAVAILABLE_MESSAGE}</p>")
        return RunState.FAILED

    logger.debug("state=%s", RunState.RENDERING.value)
    render(record, chart_surface)
    return RunState.RENDERING


def main(chart_surface: Optional[Any], info_surface: Optional[Any],
         chain: Optional[ProbeChain] = None,
         session: Optional[requests.Session] = None) -> None:
    """Entry point: run once, surface nothing to the caller."""
    run(chart_surface, info_surface, chain=chain, session=session)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Fetch Spanish budget distribution data and write a pie chart page.",
    )
    p.add_argument(
        "--profile", choices=PROBE_PROFILES, default=None,
        help="Source chain to use (default: TAXMAP_PROBE_PROFILE or 'full')",
    )
    p.add_argument(
        "--local-data", type=Path, default=None,
        help="Fallback JSON file (default: TAXMAP_LOCAL_DATA or bundled file)",
    )
    p.add_argument(
        "--out", type=Path, default=Path("taxmap.html"),
        help="Where to write the HTML page (default: taxmap.html)",
    )
    return p.parse_args(argv)


def cli(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    cfg = AppConfig.from_env()
    configure_logging(cfg.log_format)

    chain = build_chain(
        args.profile or cfg.probe_profile,
        local_path=args.local_data or cfg.local_data_path,
        timeout=cfg.http_timeout,
    )
    page = ChartPage.default()
    report = AcquisitionReport()
    with SessionManager() as sm:
        state = run(page.canvas, page.info, chain=chain, session=sm.session,
                    report=report)

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(page.render_html(), encoding="utf-8")
    print(f"  [sources] {report.console_summary()}", flush=True)
    print(f"  Chart page: {args.out}", flush=True)
    return 0 if state is RunState.RENDERING else 1


if __name__ == "__main__":
    sys.exit(cli())
