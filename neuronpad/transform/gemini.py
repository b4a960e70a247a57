from typing import Any

import httpx
from loguru import logger

from neuronpad.errors import MissingCredentialError, UpstreamError
from neuronpad.transform.base import TextGenerator, TransformKind
from neuronpad.transform.prompts import PROMPTS, get_prompt

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_MODEL = "gemini-2.0-flash"
GEMINI_TIMEOUT = 60.0  # seconds


class GeminiGenerator(TextGenerator):
    """Text generator backed by the Gemini generateContent API."""

    def __init__(
        self,
        api_key: str | None,
        *,
        model: str = GEMINI_MODEL,
        base_url: str = GEMINI_BASE_URL,
        timeout: float = GEMINI_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the Gemini generator.

        Args:
            api_key: Gemini API key. Generation fails with MissingCredentialError without one.
            model: Gemini model name
            base_url: API base URL, without trailing slash
            timeout: Request timeout in seconds, used when no client is given
            client: HTTP client to use instead of a new one per request
        """
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

        if not api_key:
            logger.warning("GEMINI_API_KEY not set - summarize and grammar fix unavailable")

    def generate(self, kind: TransformKind, text: str) -> str:
        """Run one summarize or grammar-fix request.

        When the response holds no candidate text, the fixed fallback message for
        the kind is returned instead of failing.

        Raises:
            MissingCredentialError: If no API key is configured
            UpstreamError: If the API answers with a non-success status or invalid JSON
        """
        if not self._api_key:
            raise MissingCredentialError("GEMINI_API_KEY is not configured.")

        config = PROMPTS[kind]
        payload = {
            "contents": [{"parts": [{"text": get_prompt(kind, text)}]}],
            "generationConfig": {
                "temperature": config.temperature,
                "maxOutputTokens": config.max_output_tokens,
            },
        }

        response = self._post(
            f"{self._base_url}/models/{self._model}:generateContent",
            params={"key": self._api_key},
            json=payload,
        )
        if not response.is_success:
            logger.error(f"Gemini API error ({response.status_code}): {response.text}")
            raise UpstreamError(
                "AI service error. Check your API key.", status_code=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Gemini API returned invalid JSON: {e}")
            raise UpstreamError("AI service returned an invalid response.") from e

        result = extract_text(data)
        if not result:
            # TODO: treat an unexpected response shape as UpstreamError once clients
            # stop relying on the fallback text
            logger.warning(f"No candidate text in Gemini response, using fallback for {kind.value}")
            return config.fallback
        return result

    def _post(self, url: str, **kwargs: Any) -> httpx.Response:
        if self._client is not None:
            return self._client.post(url, **kwargs)
        with httpx.Client(timeout=self._timeout) as client:
            return client.post(url, **kwargs)


def extract_text(data: Any) -> str | None:
    """Get `candidates[0].content.parts[0].text` from a generateContent response."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None
