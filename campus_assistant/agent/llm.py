"""
Augmentation delegate LLM: OpenAI (primary) or Hugging Face router (fallback provider).
When OPENAI_API_KEY is set, uses OpenAI chat completions; else HF_API_KEY enables the
HF router; with neither key, augmentation is disabled (build_delegate returns None).

A delegate makes exactly one bounded attempt per call and never raises: failures
come back as DelegateFailure(kind, message) with kind timeout | transport | malformed.
"""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import httpx
import openai
from openai import OpenAI

from campus_assistant.core.config import (
    HF_API_KEY,
    HF_CHAT_URL,
    HF_LLM_MODEL,
    LLM_API_TIMEOUT,
    LLM_MAX_TOKENS,
    OPENAI_API_KEY,
    OPENAI_LLM_MODEL,
)
from campus_assistant.core.errors import DelegateError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a helpful campus assistant."


@dataclass(frozen=True)
class DelegateSuccess:
    text: str


@dataclass(frozen=True)
class DelegateFailure:
    kind: str
    message: str = ""


DelegateResult = DelegateSuccess | DelegateFailure


class AugmentationDelegate(Protocol):
    """Anything that turns a prompt into reply text, reporting failure as a result."""

    name: str

    def generate(self, prompt: str) -> DelegateResult: ...


def _messages(prompt: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]


class _ChatDelegate:
    name = "chat"

    def _complete(self, prompt: str) -> str:
        raise NotImplementedError

    def generate(self, prompt: str) -> DelegateResult:
        logger.info("[llm:%s] IN  prompt_len=%d", self.name, len(prompt))
        logger.debug("[llm:%s] prompt_sample=%r", self.name, prompt[:500])
        try:
            text = self._complete(prompt)
        except DelegateError as e:
            logger.warning("[llm:%s] failed kind=%s: %s", self.name, e.kind, e.message)
            return DelegateFailure(kind=e.kind, message=e.message)
        except Exception as e:
            logger.exception("[llm:%s] unexpected error", self.name)
            return DelegateFailure(kind="malformed", message=str(e))
        logger.info("[llm:%s] OUT response_len=%d", self.name, len(text))
        return DelegateSuccess(text=text)


class OpenAIDelegate(_ChatDelegate):
    """OpenAI chat completions. Retries are disabled on the client: one request per call."""

    name = "openai"

    def __init__(
        self,
        api_key: str = OPENAI_API_KEY,
        model: str = OPENAI_LLM_MODEL,
        timeout: float = LLM_API_TIMEOUT,
        max_tokens: int = LLM_MAX_TOKENS,
        client: Any = None,
    ) -> None:
        self.model = model
        self.max_tokens = max_tokens
        self._client = client or OpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    def _complete(self, prompt: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=_messages(prompt),
                max_tokens=self.max_tokens,
            )
        except openai.APITimeoutError as e:
            raise DelegateError("timeout", str(e)) from e
        except openai.APIError as e:
            raise DelegateError("transport", str(e)) from e
        msg = response.choices[0].message if response.choices else None
        content = getattr(msg, "content", None) or ""
        if not isinstance(content, str):
            raise DelegateError("malformed", "message content is not text")
        out = content.strip()
        if not out:
            raise DelegateError("malformed", "OpenAI returned no message content")
        return out


class HuggingFaceDelegate(_ChatDelegate):
    """Hugging Face router chat completions over httpx."""

    name = "huggingface"

    def __init__(
        self,
        api_key: str = HF_API_KEY,
        model: str = HF_LLM_MODEL,
        timeout: float = LLM_API_TIMEOUT,
        max_tokens: int = LLM_MAX_TOKENS,
        url: str = HF_CHAT_URL,
        client: httpx.Client | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.max_tokens = max_tokens
        self.url = url
        self._client = client

    def _post(self, client: httpx.Client, payload: dict[str, Any]) -> httpx.Response:
        headers = {"Authorization": f"Bearer {self.api_key}", "Content-Type": "application/json"}
        return client.post(self.url, json=payload, headers=headers)

    def _complete(self, prompt: str) -> str:
        payload = {
            "model": self.model,
            "messages": _messages(prompt),
            "max_tokens": self.max_tokens,
        }
        try:
            if self._client is not None:
                response = self._post(self._client, payload)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = self._post(client, payload)
        except httpx.TimeoutException as e:
            raise DelegateError("timeout", str(e)) from e
        except httpx.HTTPError as e:
            raise DelegateError("transport", str(e)) from e
        if response.status_code != 200:
            raise DelegateError("transport", f"HF LLM error {response.status_code}: {response.text[:200]}")
        try:
            data = response.json()
        except ValueError as e:
            raise DelegateError("malformed", f"invalid JSON: {e}") from e
        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            raise DelegateError("malformed", "response has no choices")
        msg = choices[0].get("message") or {}
        if not isinstance(msg, dict):
            raise DelegateError("malformed", "choice message is not an object")
        content = msg.get("content") or ""
        if not isinstance(content, str):
            raise DelegateError("malformed", "message content is not text")
        out = content.strip()
        if not out:
            raise DelegateError("malformed", "HF returned no message content")
        return out


def build_delegate() -> AugmentationDelegate | None:
    """Pick the configured delegate: OpenAI if its key is set, else HF, else None (disabled)."""
    if OPENAI_API_KEY:
        logger.info("[llm] augmentation via OpenAI model=%s", OPENAI_LLM_MODEL)
        return OpenAIDelegate()
    if HF_API_KEY:
        logger.info("[llm] augmentation via Hugging Face model=%s", HF_LLM_MODEL)
        return HuggingFaceDelegate()
    logger.info("[llm] no LLM API key set; augmentation disabled")
    return None
