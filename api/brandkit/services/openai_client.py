"""OpenAI chat-completions client.

One `complete` call is one HTTPS request: the client never retries, and it
opens a fresh connection for every call.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..core.config import Settings
from ..core.structured_logging import LoggerFactory, log_external_call
from ..models.exceptions import ProviderError, UnexpectedError
from .prompts import build_messages

logger = LoggerFactory.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.7


def _headers(api_key: str) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


def extract_message_text(response: Dict[str, Any]) -> str:
    """Extract the first choice's message content ("" when absent)."""
    choices = response.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return ""
    msg = choices[0].get("message") or {}
    content = msg.get("content") if isinstance(msg, dict) else None
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = [p.get("text", "") for p in content if isinstance(p, dict) and "text" in p]
        return "\n".join([p for p in parts if p])
    return ""


class OpenAIChatClient:
    """Thin async wrapper over the chat-completions endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout: float = 30.0,
        base_url: str = DEFAULT_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenAIChatClient":
        return cls(
            api_key=settings.openai_api_key or "",
            model=settings.openai_model,
            temperature=settings.openai_temperature,
            timeout=settings.openai_timeout,
            base_url=settings.openai_base_url,
        )

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": build_messages(prompt),
            "temperature": self.temperature,
        }

    async def complete(self, prompt: str) -> str:
        """Send `prompt` as the user turn and return the completion text.

        Raises:
            ProviderError: on transport failure or a non-2xx status.
            UnexpectedError: when a success body is not JSON.
        """
        url = f"{self.base_url}/chat/completions"
        log_external_call(logger, "openai", "chat.completions", model=self.model)

        try:
            async with self._client() as client:
                response = await client.post(
                    url,
                    headers=_headers(self.api_key),
                    json=self.build_payload(prompt),
                )
        except httpx.HTTPError as e:
            raise ProviderError(
                message=f"OpenAI request failed: {type(e).__name__}: {e}",
                model=self.model,
            ) from e

        if not response.is_success:
            raise ProviderError(
                message=f"OpenAI API error: {response.text}",
                provider_status=response.status_code,
                model=self.model,
                details={"body": response.text[:2000]},
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UnexpectedError(
                message=f"OpenAI returned a non-JSON body: {response.text[:500]}",
                details={"provider_status": response.status_code, "model": self.model},
            ) from e

        # A body without choices reads as an absent completion
        if not isinstance(data, dict):
            return ""
        return extract_message_text(data)

    async def health_check(self) -> bool:
        """Check that the provider answers an authenticated models listing."""
        if not self.api_key:
            logger.warning("OpenAI API key not configured")
            return False
        try:
            async with httpx.AsyncClient(timeout=10.0, transport=self._transport) as client:
                response = await client.get(f"{self.base_url}/models", headers=_headers(self.api_key))
            return response.status_code == 200
        except httpx.HTTPError as e:
            logger.error(f"OpenAI health check failed: {e}")
            return False
