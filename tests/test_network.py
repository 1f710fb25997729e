"""
Unit tests for fetch_glossary error translation. The HTTP session is mocked.
"""

from unittest.mock import Mock, patch

import pytest
import requests

import network
from network import FetchError, fetch_glossary

URL = "https://example.test/dictionary.json"


def _response(ok=True, status_code=200, payload=None, json_error=None):
    resp = Mock()
    resp.ok = ok
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


@pytest.mark.unit
def test_fetch_glossary_returns_array():
    records = [{"word": "Bolt", "parent": "root", "definition": "A fastener"}]

    with patch.object(network, "session_glossary") as session:
        session.get.return_value = _response(payload=records)
        assert fetch_glossary(URL, timeout=5) == records

    session.get.assert_called_once_with(URL, timeout=5)


@pytest.mark.unit
def test_fetch_glossary_wraps_transport_errors():
    cause = requests.ConnectionError("connection refused")

    with patch.object(network, "session_glossary") as session:
        session.get.side_effect = cause
        with pytest.raises(FetchError) as info:
            fetch_glossary(URL)

    assert info.value.cause is cause
    assert info.value.__cause__ is cause
    assert info.value.url == URL


@pytest.mark.unit
def test_fetch_glossary_rejects_non_success_status():
    with patch.object(network, "session_glossary") as session:
        session.get.return_value = _response(ok=False, status_code=404)
        with pytest.raises(FetchError) as info:
            fetch_glossary(URL)

    assert isinstance(info.value.cause, requests.HTTPError)
    assert "404" in str(info.value)


@pytest.mark.unit
def test_fetch_glossary_rejects_malformed_json():
    with patch.object(network, "session_glossary") as session:
        session.get.return_value = _response(json_error=ValueError("Expecting value"))
        with pytest.raises(FetchError) as info:
            fetch_glossary(URL)

    assert isinstance(info.value.cause, ValueError)


@pytest.mark.unit
def test_fetch_glossary_rejects_non_array_document():
    with patch.object(network, "session_glossary") as session:
        session.get.return_value = _response(payload={"word": "Bolt"})
        with pytest.raises(FetchError, match="JSON array"):
            fetch_glossary(URL)


@pytest.mark.unit
def test_session_bypasses_http_cache():
    assert network.session_glossary.headers["Cache-Control"] == "no-cache"
