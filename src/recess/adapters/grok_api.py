"""Grok chat-completions adapter - HTTP client for short explanations."""

import logging

import requests

from recess.ports.llm_service import LLMServiceError

logger = logging.getLogger(__name__)

API_URL = "https://api.x.ai/v1/chat/completions"
DEFAULT_MODEL = "grok-3-mini"
REQUEST_TIMEOUT = 8.0


class GrokChatService:
    """
    xAI Grok chat-completions adapter.

    Implements LLMService protocol. No business logic - just I/O.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = API_URL,
        model: str = DEFAULT_MODEL,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.model = model
        self.timeout = timeout
        self._session = requests.Session()

    def complete(
        self,
        system: str,
        prompt: str,
        max_tokens: int = 60,
        temperature: float = 0.7,
    ) -> str:
        """Generate a reply to prompt under a system instruction."""
        try:
            resp = self._session.post(
                self.api_url,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.api_key}",
                },
                json={
                    "model": self.model,
                    "messages": [
                        {"role": "system", "content": system},
                        {"role": "user", "content": prompt},
                    ],
                    "max_tokens": max_tokens,
                    "temperature": temperature,
                },
                timeout=self.timeout,
            )
        except requests.Timeout:
            raise LLMServiceError(f"Grok request timed out after {self.timeout}s")
        except requests.RequestException as e:
            raise LLMServiceError(f"Grok request failed: {e}") from e

        if resp.status_code != 200:
            logger.error(f"Grok API returned {resp.status_code}: {resp.text[:200]}")
            raise LLMServiceError(f"Grok API returned {resp.status_code}")

        try:
            content = resp.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise LLMServiceError(f"Malformed Grok response: {e}") from e

        if not isinstance(content, str):
            raise LLMServiceError("Malformed Grok response: content is not text")
        return content
