"""
Built-in data sources and the named chains (profiles) that combine them.

Profiles:
    full        — Datos.gob.es, Ministerio de Hacienda (simulated), BOE,
                  Gobierto (simulated), then the local file
    local-only  — the local file alone
"""

from pathlib import Path
from typing import Optional

from sources.acquisition import ProbeChain
from sources.probes import LocalFileProbe, RemoteJsonProbe, SimulatedProbe
from utils.config import (
    BOE_SEARCH_URL,
    DATOS_GOB_ES_URL,
    GOBIERTO_URL,
    HACIENDA_STATS_URL,
    LOCAL_DATA_PATH,
    PROBE_PROFILES,
)

# Placeholder figures until the XLS/CSV statistics are parsed.
HACIENDA_SIMULATED = {
    "Health": 35,
    "Education": 30,
    "Infrastructure": 20,
    "Pensions": 15,
}

GOBIERTO_SIMULATED = {
    "Health": 40,
    "Education": 25,
    "Infrastructure": 20,
    "Pensions": 15,
}


def default_probes(timeout: Optional[float] = None) -> list:
    """The prioritized sources of the ``full`` profile."""
    return [
        RemoteJsonProbe("datos.gob.es", DATOS_GOB_ES_URL, priority=1, timeout=timeout),
        SimulatedProbe(
            "ministerio-hacienda", HACIENDA_SIMULATED,
            reference_url=HACIENDA_STATS_URL, priority=2,
            note="XLS/CSV parsing not implemented",
        ),
        RemoteJsonProbe("boe", BOE_SEARCH_URL, priority=3, timeout=timeout),
        SimulatedProbe(
            "gobierto", GOBIERTO_SIMULATED,
            reference_url=GOBIERTO_URL, priority=4,
            note="API integration pending",
        ),
    ]


def local_probe(path: Optional[Path] = None) -> LocalFileProbe:
    return LocalFileProbe("local-file", path or LOCAL_DATA_PATH)


def build_chain(profile: str = "full", local_path: Optional[Path] = None,
                timeout: Optional[float] = None) -> ProbeChain:
    """Return the probe chain for *profile*.

    Raises:
        ValueError: if *profile* is not a known profile name.
    """
    if profile == "full":
        probes = default_probes(timeout=timeout)
    elif profile == "local-only":
        probes = []
    else:
        raise ValueError(
            f"Unknown probe profile {profile!r}; expected one of {', '.join(PROBE_PROFILES)}"
        )
    return ProbeChain(probes, fallback=local_probe(local_path), profile=profile)
