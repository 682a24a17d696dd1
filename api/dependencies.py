"""
Per-request dependencies for the API.

Provides:
  - get_chain(): the probe chain, built once from AppConfig (profile, local
    data path, HTTP timeout) unless create_app() was given one
  - get_session(): a pooled requests.Session opened for the request and
    closed after the response is sent
"""

from collections.abc import Generator

import requests

from sources import ProbeChain, build_chain
from utils.config import AppConfig
from utils.http import SessionManager

_CHAIN: ProbeChain | None = None


def set_chain(chain: ProbeChain | None) -> None:
    """Override (or with None, reset) the chain used by every request."""
    global _CHAIN
    _CHAIN = chain


def get_chain() -> ProbeChain:
    global _CHAIN
    if _CHAIN is None:
        cfg = AppConfig.from_env()
        _CHAIN = build_chain(
            cfg.probe_profile,
            local_path=cfg.local_data_path,
            timeout=cfg.http_timeout,
        )
    return _CHAIN


def get_session() -> Generator[requests.Session, None, None]:
    with SessionManager() as sm:
        yield sm.session
