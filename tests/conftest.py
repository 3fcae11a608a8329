"""Shared test fixtures: an ip-api.com payload and a stub HTTP session."""

import json

import pytest
import requests


class StubSession:
    """Stands in for requests.Session, answering every GET the same way."""

    def __init__(self, status_code=200, body=b"", exc=None):
        self.status_code = status_code
        self.body = body
        self.exc = exc
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        response = requests.Response()
        response.status_code = self.status_code
        response._content = self.body
        response.encoding = "utf-8"
        response.url = url
        return response


@pytest.fixture()
def payload() -> dict:
    """ip-api.com answer for 8.8.8.8."""
    return {
        "status": "success",
        "country": "United States",
        "countryCode": "US",
        "region": "CA",
        "regionName": "California",
        "city": "Mountain View",
        "zip": "94043",
        "lat": 37.4,
        "lon": -122.1,
        "timezone": "America/Los_Angeles",
        "isp": "Google LLC",
        "org": "Google Public DNS",
        "as": "AS15169 Google LLC",
        "query": "8.8.8.8",
    }


@pytest.fixture()
def result(payload):
    from termip.models import LookupResult

    return LookupResult.from_payload(payload)


@pytest.fixture()
def make_session():
    """Build a StubSession answering with *body* (dict/list -> JSON)."""

    def _make(status_code=200, body=None, exc=None):
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode()
        return StubSession(status_code=status_code, body=body or b"", exc=exc)

    return _make
