"""
Data acquisition for TaxMap Spain.

Re-exports the probe variants, the fallback chain and its runner so callers
can do::

    from sources import build_chain, acquire, NoDataAvailable
"""

from sources.probes import Probe, RemoteJsonProbe, SimulatedProbe, LocalFileProbe
from sources.acquisition import ProbeChain, NoDataAvailable, acquire
from sources.catalog import build_chain, default_probes, local_probe
from sources.report import AcquisitionReport, ProbeAttempt

__all__ = [
    "Probe",
    "RemoteJsonProbe",
    "SimulatedProbe",
    "LocalFileProbe",
    "ProbeChain",
    "NoDataAvailable",
    "acquire",
    "build_chain",
    "default_probes",
    "local_probe",
    "AcquisitionReport",
    "ProbeAttempt",
]
