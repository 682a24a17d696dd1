"""
Pytest fixtures for TaxMap Spain tests.

Provides fake HTTP responses and sessions (no network access), a writer for
local fallback JSON files, and a reset of the API's module-level chain.
"""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


def _response(status_code=200, payload=None, text=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text if text is not None else json.dumps(payload)
    return resp


@pytest.fixture
def make_response():
    """Factory: make_response(status, payload=None, text=None); *text* is the raw body."""
    return _response


@pytest.fixture
def fake_session():
    """Factory for a session whose GET answers per URL.

    Each value in *routes* is either a response (see make_response) or an
    exception instance to raise.  Unknown URLs raise ConnectionError.
    """
    def _make(routes=None):
        routes = routes or {}
        session = MagicMock()

        def _get(url, **kwargs):
            outcome = routes.get(url)
            if outcome is None:
                raise requests.ConnectionError(f"unreachable: {url}")
            if isinstance(outcome, BaseException):
                raise outcome
            return outcome

        session.get.side_effect = _get
        return session

    return _make


@pytest.fixture
def write_local(tmp_path):
    """Write *data* as JSON (or raw text) under tmp_path and return the path."""
    def _write(data, name="presupuesto.json"):
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_api_chain():
    """Keep a chain set by one create_app() call from leaking into the next test."""
    yield
    import api.dependencies as deps
    deps.set_chain(None)
