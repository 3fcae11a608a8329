"""
Geolocation lookup against ip-api.com, run off the interactive thread.

The worker reports exactly one outcome over a one-shot channel: either a
LookupResult or the LookupFailed error that explains why there is none.
"""

import logging
from typing import Callable, Optional

import requests
from pydantic import ValidationError

from termip.channel import Sender
from termip.exceptions import LookupFailed, LookupRejected
from termip.models import LookupResult

log = logging.getLogger("termip.fetcher")

API_URL = "http://ip-api.com/json/{target}"
REQUEST_TIMEOUT = 30  # seconds
USER_AGENT = "termip/1.0.0"

Fetch = Callable[[str], LookupResult]


def fetch_details(target: str, session: Optional[requests.Session] = None) -> LookupResult:
    """
    Look up *target* (IP address, hostname, or "" for our own address).

    Returns a LookupResult. Raises LookupRejected if ip-api.com refused the
    query, LookupFailed for every other failure.
    """
    url = API_URL.format(target=target)
    http = session or requests
    try:
        response = http.get(url, headers={"User-Agent": USER_AGENT}, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as exc:
        raise LookupFailed(target, str(exc)) from exc
    except ValueError as exc:
        raise LookupFailed(target, "response is not valid JSON") from exc

    if not isinstance(payload, dict):
        raise LookupFailed(target, "unexpected response body")
    if payload.get("status") != "success":
        raise LookupRejected(target, payload.get("message") or "no reason given")

    try:
        return LookupResult.from_payload(payload)
    except ValidationError as exc:
        raise LookupFailed(target, f"malformed response ({exc.error_count()} errors)") from exc


def fetch_worker(target: str, sender: Sender, fetch: Fetch = fetch_details) -> None:
    """Run one lookup and send its outcome. Always leaves the channel closed."""
    with sender:
        try:
            result = fetch(target)
        except LookupFailed as exc:
            log.warning("%s", exc)
            sender.send(exc)
        else:
            log.info("Resolved '%s' to %s (%s, %s)", target, result.query, result.lat, result.lon)
            sender.send(result)

