"""
Sequential acquisition over a fallback chain of probes.

Probes run one at a time in priority order (lowest number first, ties keep
their listed order).  The first probe that returns a record wins and no
lower-priority probe is touched.  When every prioritized probe fails the
chain's fallback probe gets exactly one attempt; if that fails too,
``NoDataAvailable`` is raised.
"""

from __future__ import annotations

import logging
import time
from typing import Optional, Sequence

import requests

from sources.probes import Probe
from sources.report import AcquisitionReport, ProbeAttempt

logger = logging.getLogger(__name__)


class NoDataAvailable(Exception):
    """Every probe in the chain, fallback included, failed."""

    def __init__(self, report: AcquisitionReport):
        self.report = report
        tried = ", ".join(a.probe for a in report.attempts) or "none"
        super().__init__(f"No data source produced a distribution (tried: {tried})")


class ProbeChain:
    """Prioritized probes plus the last-resort fallback."""

    def __init__(self, probes: Sequence[Probe], fallback: Optional[Probe] = None,
                 profile: Optional[str] = None):
        self.probes = sorted(probes, key=lambda p: p.priority)
        self.fallback = fallback
        self.profile = profile

    def names(self) -> list[str]:
        names = [p.name for p in self.probes]
        if self.fallback is not None:
            names.append(self.fallback.name)
        return names

    def __len__(self) -> int:
        return len(self.probes)


def _attempt(probe: Probe, session, report: AcquisitionReport,
             fallback: bool = False) -> Optional[dict]:
    t0 = time.monotonic()
    record = probe.fetch(session)
    outcome = "ok" if record is not None else "failed"
    report.record(ProbeAttempt(
        probe=probe.name,
        outcome=outcome,
        elapsed_seconds=time.monotonic() - t0,
        simulated=probe.simulated,
        fallback=fallback,
        detail=probe.last_error if record is None else "",
    ))
    logger.info("probe=%s outcome=%s", probe.name, outcome,
                extra={"probe": probe.name, "outcome": outcome})
    return record


def acquire(chain: ProbeChain, session: Optional[requests.Session] = None,
            report: Optional[AcquisitionReport] = None) -> dict:
    """Run *chain* and return the first Distribution Record obtained.

    Args:
        chain: Probes to try, plus the fallback.
        session: Shared HTTP session for remote probes.
        report: Optional report that receives one ProbeAttempt per call.

    Returns:
        The winning probe's record.

    Raises:
        NoDataAvailable: if every probe and the fallback failed.
    """
    if report is None:
        report = AcquisitionReport()

    for probe in chain.probes:
        record = _attempt(probe, session, report)
        if record is not None:
            return record

    if chain.probes:
        logger.warning("All API requests failed. Falling back to local data.")
    if chain.fallback is not None:
        report.fell_back = True
        record = _attempt(chain.fallback, session, report, fallback=True)
        if record is not None:
            return record

    raise NoDataAvailable(report)
