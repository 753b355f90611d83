"""
Unit tests for the client ChatSession state machine and its HTTP transport.
"""

import threading
from unittest.mock import MagicMock, patch

import pytest
import requests

from campus_assistant.client.session import (
    GREETING,
    ChatEntry,
    ChatSession,
    HttpTransport,
    TransportError,
)


class TestSubmit:
    def test_blank_input_is_ignored(self) -> None:
        transport = MagicMock(return_value="reply")
        session = ChatSession(transport=transport)
        assert session.submit("") is False
        assert session.submit("   \n") is False
        assert session.log == []
        assert session.pending is False
        transport.assert_not_called()

    def test_turn_appends_user_then_assistant(self) -> None:
        transport = MagicMock(return_value="The Gym is open 05:00-23:00.")
        session = ChatSession(transport=transport, use_llm=True)
        assert session.submit("gym hours") is True
        assert session.log == [
            ChatEntry("user", "gym hours"),
            ChatEntry("assistant", "The Gym is open 05:00-23:00."),
        ]
        assert session.pending is False
        transport.assert_called_once_with("gym hours", True)

    def test_pending_is_set_during_request(self) -> None:
        seen = []
        session = ChatSession(transport=lambda text, use_llm: seen.append(session.pending) or "ok")
        session.submit("hi")
        assert seen == [True]
        assert session.pending is False

    def test_empty_reply_becomes_placeholder(self) -> None:
        session = ChatSession(transport=lambda text, use_llm: "")
        session.submit("hi")
        assert session.log[-1] == ChatEntry("assistant", "Sorry, no response")

    def test_transport_failure_appends_error_and_clears_pending(self) -> None:
        def failing(text, use_llm):
            raise TransportError("connection refused")

        session = ChatSession(transport=failing)
        assert session.submit("library hours") is True
        assert [e.speaker for e in session.log] == ["user", "assistant"]
        assert session.log[-1].text == "Error contacting server"
        assert session.pending is False

    def test_unexpected_transport_error_still_settles_turn(self) -> None:
        def broken(text, use_llm):
            raise KeyError("reply")

        session = ChatSession(transport=broken)
        assert session.submit("dining") is True
        assert session.log == [
            ChatEntry("user", "dining"),
            ChatEntry("assistant", "Error contacting server"),
        ]
        assert session.pending is False

    def test_submit_while_pending_is_dropped(self) -> None:
        nested = {}
        calls = []

        def transport(text, use_llm):
            calls.append(text)
            log_len = len(session.log)
            nested["accepted"] = session.submit("library hours")
            nested["log_unchanged"] = len(session.log) == log_len
            return "first reply"

        session = ChatSession(transport=transport)
        session.submit("gym")
        assert nested == {"accepted": False, "log_unchanged": True}
        assert calls == ["gym"]
        assert [e.text for e in session.log] == ["gym", "first reply"]

    def test_submit_from_other_thread_while_pending_is_dropped(self) -> None:
        release = threading.Event()
        started = threading.Event()
        transport = MagicMock()

        def slow(text, use_llm):
            started.set()
            release.wait(timeout=5)
            return "done"

        transport.side_effect = slow
        session = ChatSession(transport=transport)
        worker = threading.Thread(target=session.submit, args=("gym",))
        worker.start()
        assert started.wait(timeout=5)
        assert session.submit("library hours") is False
        assert len(session.log) == 1
        release.set()
        worker.join(timeout=5)
        assert transport.call_count == 1
        assert [e.text for e in session.log] == ["gym", "done"]
        # accepted again once settled
        assert session.submit("library hours") is True

    def test_with_greeting(self) -> None:
        session = ChatSession.with_greeting(MagicMock())
        assert session.log == [ChatEntry("assistant", GREETING)]


class TestHttpTransport:
    def test_posts_message_and_flag(self) -> None:
        response = MagicMock()
        response.json.return_value = {"reply": "hello", "hits": {}}
        with patch("campus_assistant.client.session.requests.post", return_value=response) as mock_post:
            reply = HttpTransport("http://campus.test/", timeout=5)("gym", True)
        assert reply == "hello"
        mock_post.assert_called_once_with(
            "http://campus.test/api/query",
            json={"message": "gym", "useLLM": True},
            timeout=5,
        )

    def test_connection_error_raises_transport_error(self) -> None:
        with patch(
            "campus_assistant.client.session.requests.post",
            side_effect=requests.ConnectionError("refused"),
        ):
            with pytest.raises(TransportError):
                HttpTransport("http://campus.test")("gym", False)

    def test_error_status_with_json_body_is_read_as_reply(self) -> None:
        response = MagicMock(ok=False, status_code=400)
        response.json.return_value = {"detail": "message required"}
        with patch("campus_assistant.client.session.requests.post", return_value=response):
            session = ChatSession(transport=HttpTransport("http://campus.test"))
            assert session.submit("gym") is True
        assert session.log[-1] == ChatEntry("assistant", "Sorry, no response")

    def test_error_status_reply_is_shown(self) -> None:
        response = MagicMock(ok=False, status_code=500)
        response.json.return_value = {"reply": "Temporarily unavailable"}
        with patch("campus_assistant.client.session.requests.post", return_value=response):
            assert HttpTransport("http://campus.test")("gym", False) == "Temporarily unavailable"

    def test_timeout_raises_transport_error(self) -> None:
        with patch(
            "campus_assistant.client.session.requests.post",
            side_effect=requests.Timeout("read timed out"),
        ):
            with pytest.raises(TransportError):
                HttpTransport("http://campus.test")("gym", False)

    def test_invalid_json_raises_transport_error(self) -> None:
        response = MagicMock()
        response.json.side_effect = ValueError("Expecting value")
        with patch("campus_assistant.client.session.requests.post", return_value=response):
            with pytest.raises(TransportError):
                HttpTransport("http://campus.test")("gym", False)
