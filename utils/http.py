"""HTTP utilities for TaxMap Spain.

Provides:
- SessionManager: a pooled ``requests.Session`` shared by all probes of a run
- is_success_status / get_json: a single GET returning strictly decoded JSON
"""

import json
import logging
from typing import Optional, Any

import requests
from requests.adapters import HTTPAdapter

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages an HTTP session with connection pooling.

    Retries are disabled: a failing source is skipped, not re-tried.
    """

    def __init__(self, pool_connections: int = 4, pool_maxsize: int = 4):
        """Initialize session manager.

        Args:
            pool_connections: Number of connection pools to cache
            pool_maxsize: Maximum number of connections per pool
        """
        self.pool_connections = pool_connections
        self.pool_maxsize = pool_maxsize
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """Get or create the pooled HTTP session.

        Returns:
            requests.Session object
        """
        if self._session is None:
            self._session = requests.Session()
            adapter = HTTPAdapter(
                max_retries=0,
                pool_connections=self.pool_connections,
                pool_maxsize=self.pool_maxsize,
            )
            self._session.mount("http://", adapter)
            self._session.mount("https://", adapter)

        return self._session

    def close(self) -> None:
        """Close the session and release resources."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def is_success_status(status_code: int) -> bool:
    """Return True for 2xx status codes only."""
    return 200 <= status_code < 300


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def decode_json(text: str) -> Any:
    """Decode a strict JSON document.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected.  Nesting deeper
    than the interpreter's recursion limit raises RecursionError.

    Raises:
        ValueError: If *text* is not valid JSON
    """
    return json.loads(text, parse_constant=_reject_constant)


def get_json(url: str, session: Optional[requests.Session] = None,
             timeout: Optional[float] = None) -> Any:
    """GET *url* and return the decoded JSON body.

    Args:
        url: URL to request
        session: Optional requests.Session (default: a new session, closed
            before returning)
        timeout: Request timeout in seconds; None leaves it to the transport

    Returns:
        Decoded JSON value

    Raises:
        requests.RequestException: On network error or a non-2xx status
        ValueError: If the body is not valid JSON
    """
    if session is None:
        own = requests.Session()
        try:
            return get_json(url, session=own, timeout=timeout)
        finally:
            own.close()

    resp = session.get(url, timeout=timeout)
    if not is_success_status(resp.status_code):
        raise requests.HTTPError(
            f"HTTP error! Status: {resp.status_code}", response=resp
        )
    data = decode_json(resp.text)

    logger.info("Data fetched from %s", url)
    logger.debug("Payload from %s: %r", url, data)
    return data
