"""
Client-side chat session: the conversation log plus a single in-flight request.

submit() drops empty input and anything sent while a reply is pending (no
queue). Each accepted turn issues exactly one request and appends exactly one
assistant entry, whether the request succeeded or not.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Literal

import requests

from campus_assistant.core.config import API_BASE, CLIENT_TIMEOUT

logger = logging.getLogger(__name__)

GREETING = "Hi! I can help with schedules, facilities, dining, library, and admin. What would you like to know?"
NO_RESPONSE_TEXT = "Sorry, no response"
TRANSPORT_ERROR_TEXT = "Error contacting server"


class TransportError(Exception):
    """Raised by a transport when the backend cannot be reached or answers badly."""


# (message, use_llm) -> reply text
Transport = Callable[[str, bool], str]


class HttpTransport:
    """POST /api/query on the backend with requests."""

    def __init__(self, api_base: str = API_BASE, timeout: float = CLIENT_TIMEOUT) -> None:
        self.url = f"{api_base.rstrip('/')}/api/query"
        self.timeout = timeout

    def __call__(self, message: str, use_llm: bool) -> str:
        """
        Return the reply text ("" if the body has none). Error statuses that still
        carry a JSON body are read like a normal answer; connection failures,
        timeouts and non-JSON bodies raise TransportError.
        """
        try:
            r = requests.post(
                self.url,
                json={"message": message, "useLLM": use_llm},
                timeout=self.timeout,
            )
            data = r.json()
        except requests.RequestException as e:
            raise TransportError(str(e)) from e
        except ValueError as e:
            raise TransportError(f"invalid JSON from backend: {e}") from e
        if not r.ok:
            logger.warning("[session:transport] backend answered %s", r.status_code)
        if not isinstance(data, dict):
            return ""
        reply = data.get("reply")
        return reply if isinstance(reply, str) else ""


@dataclass
class ChatEntry:
    speaker: Literal["user", "assistant"]
    text: str


@dataclass
class ChatSession:
    transport: Transport
    use_llm: bool = False
    log: list[ChatEntry] = field(default_factory=list)
    pending: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    @classmethod
    def with_greeting(cls, transport: Transport, use_llm: bool = False) -> "ChatSession":
        return cls(transport=transport, use_llm=use_llm, log=[ChatEntry("assistant", GREETING)])

    def submit(self, text: str) -> bool:
        """Send one user turn. Returns False (and changes nothing) if text is blank or a reply is pending."""
        if not text or not text.strip():
            return False
        with self._lock:
            if self.pending:
                logger.info("[session:submit] dropped while pending text=%r", text)
                return False
            self.pending = True
            self.log.append(ChatEntry("user", text))
        try:
            try:
                reply = self.transport(text, self.use_llm) or NO_RESPONSE_TEXT
            except TransportError as e:
                logger.warning("[session:submit] request failed: %s", e)
                reply = TRANSPORT_ERROR_TEXT
            except Exception:
                logger.exception("[session:submit] transport raised unexpectedly")
                reply = TRANSPORT_ERROR_TEXT
            with self._lock:
                self.log.append(ChatEntry("assistant", reply))
        finally:
            with self._lock:
                self.pending = False
        return True
