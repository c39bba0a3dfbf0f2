"""
Client for an OpenAI compatible chat-completions endpoint.

This client wraps a single HTTP request to ``{base_url}/chat/completions``.
There is no streaming and no retry: transport errors, non-2xx statuses
and undecodable bodies are all raised as :class:`AIServiceError`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List

import requests

from commit_wizard.config.loader import OpenAIConfig


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


SYSTEM_PROMPT = "You are a helpful Git commit message generator."

_THINKING_TAGS = re.compile(
    r"<(think|thinking|thought|reasoning)>.*?</\1>", re.DOTALL | re.IGNORECASE
)


class AIServiceError(Exception):
    """Raised when the completion request fails."""

    pass


def strip_thinking_tags(text: str) -> str:
    """Remove ``<think>``-style reasoning blocks from a model reply.

    >>> strip_thinking_tags("<think>hmm</think>{\\"type\\": \\"fix\\"}")
    '{"type": "fix"}'
    """
    return _THINKING_TAGS.sub("", text).strip()


@dataclass
class OpenAIClient:
    """Client for a chat-completions API.

    Parameters
    ----------
    api_key : str
        Bearer token.
    base_url : str
        API root, e.g. ``"https://api.openai.com/v1"``.
    model : str
        Model name.
    temperature : float, optional
        Sampling temperature. Defaults to ``0.7``.
    max_tokens : int, optional
        Maximum number of generated tokens. Defaults to ``150``.
    request_timeout : float, optional
        Timeout in seconds for the HTTP request. Defaults to 60 seconds.
    """

    api_key: str
    base_url: str
    model: str
    temperature: float = 0.7
    max_tokens: int = 150
    request_timeout: float = 60.0

    @classmethod
    def from_config(cls, config: OpenAIConfig) -> "OpenAIClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            model=config.model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )

    def _endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"

    def _payload(self, prompt: str) -> Dict[str, Any]:
        messages: List[Dict[str, str]] = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]
        return {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "top_p": 1,
            "frequency_penalty": 0,
            "presence_penalty": 0,
            "n": 1,
            "stream": False,
        }

    def complete(self, prompt: str) -> str:
        """Send ``prompt`` and return the text of the first choice.

        Returns an empty string when the reply carries no choices or no
        content; the caller treats that like any other unusable reply.

        Raises
        ------
        AIServiceError
            If the request fails or the server returns an error.
        """
        url = self._endpoint()
        logger.debug("Sending completion request to %s (model=%s)", url, self.model)
        try:
            response = requests.post(
                url,
                json=self._payload(prompt),
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.request_timeout,
            )
        except requests.RequestException as exc:
            logger.error("Failed to reach completion service: %s", exc)
            raise AIServiceError(f"Failed to reach completion service: {exc}") from exc

        if not 200 <= response.status_code < 300:
            logger.error(
                "Completion service returned status %s: %s", response.status_code, response.text
            )
            raise AIServiceError(
                f"Completion service returned status {response.status_code}: {response.text}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Failed to decode completion response: %s", exc)
            raise AIServiceError("Failed to decode completion response") from exc

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            return ""
        message = choices[0].get("message") or {}
        content = message.get("content") if isinstance(message, dict) else None
        return strip_thinking_tags(content or "")
