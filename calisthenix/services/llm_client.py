import logging
from typing import Dict, List, Optional

import httpx

from calisthenix.core.config import settings
from calisthenix.core.exceptions import UpstreamError, UpstreamUnavailable

logger = logging.getLogger(__name__)


class LLMNotConfigured(UpstreamUnavailable):
    message = "AI Coach is not configured. Please set LLM_API_KEY."


class LLMRequestFailed(UpstreamError):
    message = "Failed to process chat message"


def provider_error(response: httpx.Response) -> str:
    """Best-effort error text from a failed provider response."""
    try:
        error_data = response.json()
    except ValueError:
        return response.text
    error = error_data.get("error") if isinstance(error_data, dict) else None
    if isinstance(error, dict):
        return str(error.get("message", response.text))
    return str(error or response.text)


class LLMClient:
    """Chat-completions client for any OpenAI-compatible endpoint (Groq by default).

    ``messages`` use the usual ``{"role": "system" | "user" | "assistant", "content": str}``
    shape. A single request is made per call; nothing is retried.
    """

    def __init__(
            self,
            api_key: Optional[str] = None,
            base_url: Optional[str] = None,
            model: Optional[str] = None,
            timeout: Optional[float] = None,
            temperature: Optional[float] = None,
            max_tokens: Optional[int] = None,
    ):
        self.api_key = settings.LLM_API_KEY if api_key is None else api_key
        self.base_url = base_url or settings.LLM_BASE_URL
        self.model = model or settings.LLM_MODEL
        self.timeout = timeout or settings.LLM_TIMEOUT_SECONDS
        self.temperature = settings.LLM_TEMPERATURE if temperature is None else temperature
        self.max_tokens = max_tokens or settings.LLM_MAX_TOKENS

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, messages: List[Dict[str, str]]) -> str:
        if not self.is_configured:
            raise LLMNotConfigured()

        logger.debug(f"Sending {len(messages)} messages to {self.model}")
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.base_url,
                    headers={
                        "Content-Type": "application/json",
                        "Authorization": f"Bearer {self.api_key}"
                    },
                    json={
                        "model": self.model,
                        "messages": messages,
                        "temperature": self.temperature,
                        "max_tokens": self.max_tokens,
                        "stream": False
                    },
                    timeout=self.timeout
                )
        except httpx.TimeoutException as e:
            logger.error(f"LLM request timed out after {self.timeout}s")
            raise LLMRequestFailed() from e
        except httpx.HTTPError as e:
            logger.error(f"LLM request failed: {e}")
            raise LLMRequestFailed() from e

        if response.status_code != 200:
            logger.error(f"LLM provider returned {response.status_code}: {provider_error(response)}")
            if response.status_code in (401, 403):
                raise LLMNotConfigured("AI Coach configuration error. Please check LLM_API_KEY.")
            raise LLMRequestFailed()

        try:
            result = response.json()
            text = result["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected LLM response shape: {e}")
            raise LLMRequestFailed() from e

        if not isinstance(text, str):
            logger.error("LLM response content is not text")
            raise LLMRequestFailed()
        return text


def get_llm_client() -> LLMClient:
    """Dependency; tests override it with a fake client."""
    return LLMClient()
