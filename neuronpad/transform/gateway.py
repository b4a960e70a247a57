"""Client for the summarize and grammar-fix HTTP endpoints."""

from typing import Any

import httpx
from loguru import logger

from neuronpad.errors import EmptyInputError, ServiceError
from neuronpad.transform.base import ROUTES, TransformKind

# (non-success response message, transport failure message)
_DEFAULT_ERRORS: dict[TransformKind, tuple[str, str]] = {
    TransformKind.SUMMARIZE: ("Failed to summarize", "AI summarization failed"),
    TransformKind.GRAMMAR_FIX: ("Failed to correct grammar", "AI grammar correction failed"),
}


class TransformGateway:
    """Sends note text to the NeuronPad server for summarizing or grammar fixes.

    Each call is a single attempt: there is no retry, and any failure surfaces
    as a ServiceError with a human-readable message.
    """

    def __init__(self, base_url: str, client: httpx.Client | None = None) -> None:
        """Initialize the gateway.

        Args:
            base_url: Base URL of the NeuronPad server
            client: HTTP client to use instead of a new one per request
        """
        self._base_url = base_url.rstrip("/")
        self._client = client

    def transform(self, kind: TransformKind, text: str) -> str:
        """Transform text through the server.

        Raises:
            EmptyInputError: If the text is blank; no request is made
            ServiceError: If the request fails or the response has no result
        """
        if not text.strip():
            raise EmptyInputError()

        response_error, transport_error = _DEFAULT_ERRORS[kind]
        try:
            response = self._post(f"{self._base_url}{ROUTES[kind]}", json={"text": text})
        except httpx.HTTPError as e:
            logger.error(f"Request to {ROUTES[kind]} failed: {e}")
            raise ServiceError(str(e) or transport_error) from e

        if not response.is_success:
            raise ServiceError(response.text or response_error)

        try:
            data = response.json()
        except ValueError as e:
            raise ServiceError(f"{response_error}: invalid response") from e

        result = data.get("result") if isinstance(data, dict) else None
        if not isinstance(result, str):
            raise ServiceError(f"{response_error}: missing result")
        return result

    def summarize(self, text: str) -> str:
        return self.transform(TransformKind.SUMMARIZE, text)

    def correct_grammar(self, text: str) -> str:
        return self.transform(TransformKind.GRAMMAR_FIX, text)

    def _post(self, url: str, **kwargs: Any) -> httpx.Response:
        if self._client is not None:
            return self._client.post(url, **kwargs)
        with httpx.Client(timeout=None) as client:
            return client.post(url, **kwargs)
