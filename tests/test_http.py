"""
Tests for the request and response value objects.
"""

from unittest.mock import MagicMock

from apiendpoint.endpoint.http import Request, Response, is_response


def test_with_added_header_returns_copy():
    """Test that adding a header leaves the original response untouched."""
    response = Response()

    updated = response.with_added_header("Allow", "GET, OPTIONS")

    assert updated is not response
    assert not response.has_header("Allow")
    assert updated.get_header("Allow") == ["GET, OPTIONS"]


def test_with_added_header_appends_case_insensitively():
    """Test that values are appended to an existing header."""
    response = Response(headers={"Vary": ["Accept"]})

    updated = response.with_added_header("vary", "Origin")

    assert updated.get_header("VARY") == ["Accept", "Origin"]
    assert updated.get_header_line("Vary") == "Accept, Origin"
    assert response.get_header("Vary") == ["Accept"]


def test_with_header_replaces():
    """Test that with_header replaces previous values."""
    response = Response(headers={"Content-Type": ["text/html"]})

    updated = response.with_header("content-type", "application/json")

    assert updated.headers == {"content-type": ["application/json"]}


def test_with_status():
    """Test changing the status code."""
    response = Response().with_status(405, "Method Not Allowed")

    assert response.status_code == 405
    assert response.reason_phrase == "Method Not Allowed"


def test_missing_header():
    """Test reading a header that is not set."""
    request = Request(headers={"Accept": ["application/json"]})

    assert request.get_header("X-Missing") == []
    assert request.get_header_line("X-Missing") == ""
    assert request.get_header_line("accept") == "application/json"


def test_is_response():
    """Test detecting usable response objects."""
    assert is_response(Response())
    assert is_response(MagicMock())
    assert not is_response(None)
    assert not is_response(Request())
