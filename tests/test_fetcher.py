"""Tests for termip.fetcher module."""

import threading

import pytest
import requests

from termip.channel import oneshot
from termip.exceptions import ChannelClosed, LookupFailed, LookupRejected
from termip.fetcher import REQUEST_TIMEOUT, fetch_details, fetch_worker
from termip.models import LookupResult


class TestFetchDetails:
    def test_successful_lookup(self, make_session, payload: dict):
        session = make_session(body=payload)
        result = fetch_details("8.8.8.8", session=session)
        assert isinstance(result, LookupResult)
        assert result.country == "United States"
        assert session.calls[0]["url"] == "http://ip-api.com/json/8.8.8.8"
        assert session.calls[0]["timeout"] == REQUEST_TIMEOUT

    def test_empty_target_queries_own_address(self, make_session, payload: dict):
        session = make_session(body=payload)
        fetch_details("", session=session)
        assert session.calls[0]["url"] == "http://ip-api.com/json/"

    def test_ipv6_target_keeps_colons(self, make_session, payload: dict):
        session = make_session(body=payload)
        fetch_details("2001:4860:4860::8888", session=session)
        assert session.calls[0]["url"].endswith("/json/2001:4860:4860::8888")

    def test_target_passed_through_unchanged(self, make_session, payload: dict):
        session = make_session(body=payload)
        fetch_details(" example.com/path ", session=session)
        assert session.calls[0]["url"] == "http://ip-api.com/json/ example.com/path "

    def test_http_error(self, make_session, payload: dict):
        session = make_session(status_code=500, body=payload)
        with pytest.raises(LookupFailed) as exc_info:
            fetch_details("8.8.8.8", session=session)
        assert not isinstance(exc_info.value, LookupRejected)
        assert exc_info.value.target == "8.8.8.8"

    def test_rejected_query(self, make_session):
        session = make_session(
            body={"status": "fail", "message": "invalid query", "query": "nope"}
        )
        with pytest.raises(LookupRejected) as exc_info:
            fetch_details("nope", session=session)
        assert exc_info.value.message == "invalid query"

    def test_rejected_without_message(self, make_session):
        session = make_session(body={"status": "fail"})
        with pytest.raises(LookupRejected):
            fetch_details("nope", session=session)

    def test_invalid_json(self, make_session):
        session = make_session(body=b"<html>not json</html>")
        with pytest.raises(LookupFailed):
            fetch_details("8.8.8.8", session=session)

    def test_non_object_body(self, make_session):
        session = make_session(body=["8.8.8.8"])
        with pytest.raises(LookupFailed):
            fetch_details("8.8.8.8", session=session)

    def test_incomplete_payload(self, make_session, payload: dict):
        del payload["lat"]
        session = make_session(body=payload)
        with pytest.raises(LookupFailed) as exc_info:
            fetch_details("8.8.8.8", session=session)
        assert "malformed" in exc_info.value.reason

    def test_network_error(self, make_session):
        session = make_session(exc=requests.ConnectionError("unreachable"))
        with pytest.raises(LookupFailed) as exc_info:
            fetch_details("8.8.8.8", session=session)
        assert "unreachable" in exc_info.value.reason


class TestFetchWorker:
    def test_sends_result_once(self, result: LookupResult):
        sender, receiver = oneshot()
        fetch_worker("8.8.8.8", sender, fetch=lambda target: result)
        assert receiver.recv() is result
        with pytest.raises(ChannelClosed):
            receiver.recv()

    def test_sends_failure_once(self):
        def failing(target):
            raise LookupFailed(target, "timed out")

        sender, receiver = oneshot()
        fetch_worker("8.8.8.8", sender, fetch=failing)
        outcome = receiver.recv()
        assert isinstance(outcome, LookupFailed)
        assert outcome.reason == "timed out"
        with pytest.raises(ChannelClosed):
            receiver.recv()

    def test_unexpected_error_closes_channel(self):
        def broken(target):
            raise RuntimeError("bug")

        sender, receiver = oneshot()
        with pytest.raises(RuntimeError):
            fetch_worker("8.8.8.8", sender, fetch=broken)
        with pytest.raises(ChannelClosed):
            receiver.recv()

    def test_passes_target_through(self, result: LookupResult):
        seen = []

        def recording(target):
            seen.append(target)
            return result

        sender, receiver = oneshot()
        fetch_worker("example.com", sender, fetch=recording)
        receiver.recv()
        assert seen == ["example.com"]


class TestWorkerThread:
    def test_delivers_from_background_thread(self, result: LookupResult):
        sender, receiver = oneshot()
        thread = threading.Thread(
            target=fetch_worker, args=("8.8.8.8", sender, lambda target: result)
        )
        thread.start()
        assert receiver.recv() is result
        thread.join()

    def test_delivers_failure(self, make_session):
        session = make_session(status_code=500)
        sender, receiver = oneshot()
        thread = threading.Thread(
            target=fetch_worker,
            args=("8.8.8.8", sender, lambda target: fetch_details(target, session=session)),
        )
        thread.start()
        assert isinstance(receiver.recv(), LookupFailed)
        thread.join()
