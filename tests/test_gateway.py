import json
from typing import Callable

import httpx
import pytest

from neuronpad.errors import EmptyInputError, ServiceError
from neuronpad.transform.base import TransformKind
from neuronpad.transform.gateway import TransformGateway
from tests.fakes import FakeTextGenerator


def gateway_for(handler: Callable[[httpx.Request], httpx.Response]) -> TransformGateway:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return TransformGateway(base_url="http://notes.local/", client=client)


def test_summarize_posts_text_and_returns_result() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"result": "Short."})

    assert gateway_for(handler).summarize("A long note") == "Short."
    assert str(requests[0].url) == "http://notes.local/api/ai/summarize"
    assert json.loads(requests[0].content) == {"text": "A long note"}


def test_grammar_route() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/ai/grammar"
        return httpx.Response(200, json={"result": "Fixed."})

    assert gateway_for(handler).correct_grammar("fixd") == "Fixed."


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_blank_text_is_rejected_without_request(text: str) -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        raise AssertionError("No request expected")

    with pytest.raises(EmptyInputError):
        gateway_for(handler).transform(TransformKind.SUMMARIZE, text)


def test_error_status_surfaces_body() -> None:
    gateway = gateway_for(
        lambda request: httpx.Response(500, json={"error": "AI service error. Check your API key."})
    )

    with pytest.raises(ServiceError, match="Check your API key") as exc_info:
        gateway.summarize("text")
    assert exc_info.value.message


@pytest.mark.parametrize(
    "kind,message",
    [
        (TransformKind.SUMMARIZE, "Failed to summarize"),
        (TransformKind.GRAMMAR_FIX, "Failed to correct grammar"),
    ],
)
def test_error_status_without_body_uses_default_message(kind: TransformKind, message: str) -> None:
    gateway = gateway_for(lambda request: httpx.Response(502))

    with pytest.raises(ServiceError, match=message):
        gateway.transform(kind, "text")


def test_network_failure_raises_service_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    with pytest.raises(ServiceError, match="Connection refused"):
        gateway_for(handler).summarize("text")


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="not json"),
        httpx.Response(200, json={"answer": "wrong key"}),
        httpx.Response(200, json={"result": None}),
        httpx.Response(200, json=["result"]),
    ],
)
def test_malformed_response_raises_service_error(response: httpx.Response) -> None:
    with pytest.raises(ServiceError):
        gateway_for(lambda request: response).summarize("text")


def test_gateway_against_app(gateway: TransformGateway, fake_generator: FakeTextGenerator) -> None:
    """Test the client gateway end to end against the HTTP endpoints."""
    assert gateway.summarize("Some note text") == "A short summary."
    assert gateway.correct_grammar("this are wrong") == "This sentence is correct."
    assert fake_generator.calls == [
        (TransformKind.SUMMARIZE, "Some note text"),
        (TransformKind.GRAMMAR_FIX, "this are wrong"),
    ]


def test_gateway_against_failing_app(
    gateway: TransformGateway, fake_generator: FakeTextGenerator
) -> None:
    fake_generator.error = RuntimeError("boom")

    with pytest.raises(ServiceError) as exc_info:
        gateway.summarize("Some note text")

    assert "Internal server error" in exc_info.value.message
