"""
Data source probes.

A probe makes one attempt to obtain a Distribution Record (a mapping of
category name to numeric share) from a single source.  Every probe exposes
``fetch(session) -> dict | None``: a dict on success, ``None`` on any
failure.  Failures are logged here and never propagate past ``fetch``;
the reason is kept in ``last_error``.

Variants:
    RemoteJsonProbe  — HTTP GET to a fixed endpoint
    SimulatedProbe   — hard-coded values standing in for spreadsheet parsing
                       that does not exist yet; never production data
    LocalFileProbe   — the bundled JSON file used as the last resort
"""

import copy
import logging
from pathlib import Path
from typing import Any, Optional

import requests

from utils.http import decode_json, get_json

logger = logging.getLogger(__name__)

# Everything a source can fail with.  RecursionError comes from the JSON
# decoder on absurdly nested bodies.
FETCH_ERRORS = (requests.RequestException, OSError, ValueError, RecursionError)


def as_record(payload: Any, source: str) -> Optional[dict]:
    """Return *payload* if it is a JSON object, else log and return None."""
    if isinstance(payload, dict):
        return payload
    logger.error(
        "Error fetching data: %s returned %s, expected a JSON object",
        source, type(payload).__name__,
    )
    return None


class Probe:
    """Base class for a single data source.

    Subclasses implement ``load``, which may raise any of FETCH_ERRORS.
    ``fetch`` turns those into ``None`` and keeps the reason in
    ``last_error``.
    """

    simulated = False
    last_error = ""

    def __init__(self, name: str, priority: int = 0):
        self.name = name
        self.priority = priority

    @property
    def location(self) -> str:
        return self.name

    def load(self, session: Optional[requests.Session] = None) -> Any:
        raise NotImplementedError

    def fetch(self, session: Optional[requests.Session] = None) -> Optional[dict]:
        self.last_error = ""
        try:
            payload = self.load(session)
        except FETCH_ERRORS as e:
            self.last_error = str(e) or type(e).__name__
            logger.error("Error fetching data from %s: %s", self.location, self.last_error)
            return None

        record = as_record(payload, self.location)
        if record is None:
            self.last_error = f"expected a JSON object, got {type(payload).__name__}"
        return record

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, priority={self.priority})"


class RemoteJsonProbe(Probe):
    """GET a fixed URL; succeed only on a 2xx status with a JSON object body."""

    def __init__(self, name: str, url: str, priority: int = 0,
                 timeout: Optional[float] = None):
        super().__init__(name, priority)
        self.url = url
        self.timeout = timeout

    @property
    def location(self) -> str:
        return self.url

    def load(self, session: Optional[requests.Session] = None) -> Any:
        return get_json(self.url, session=session, timeout=self.timeout)


class SimulatedProbe(Probe):
    """Return fixed data unconditionally.

    Stands in for a source whose real format (XLS/CSV downloads, an
    unintegrated municipal API) is not parsed.  ``reference_url`` records
    where the real data lives; it is never requested.
    """

    simulated = True

    def __init__(self, name: str, data: dict, reference_url: str = "",
                 priority: int = 0, note: str = ""):
        super().__init__(name, priority)
        self.data = dict(data)
        self.reference_url = reference_url
        self.note = note

    def load(self, session: Optional[requests.Session] = None) -> dict:
        logger.info(
            "%s data is simulated%s", self.name,
            f" ({self.note})" if self.note else "",
        )
        return copy.deepcopy(self.data)


class LocalFileProbe(Probe):
    """Read a bundled JSON file with the same contract as RemoteJsonProbe."""

    def __init__(self, name: str, path: Path, priority: int = 0):
        super().__init__(name, priority)
        self.path = Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    def load(self, session: Optional[requests.Session] = None) -> Any:
        with open(self.path, "r", encoding="utf-8") as f:
            payload = decode_json(f.read())
        logger.info("Data loaded from %s", self.path)
        return payload
