"""Tests for the chat completion client."""

from __future__ import annotations

import json

import httpx
import pytest

from toydesk.core.http import DEFAULT_USER_AGENT, make_httpx_client
from toydesk.llm.client import ChatCompletionClient, build_request_body, decode_response
from toydesk.llm.types import ChatErrorKind, ChatMessage, LLMConfig, Role

CHAT_URL = "https://api.example.test/v1/chat/completions"


def _reply(*contents: str) -> dict:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "choices": [
            {"index": i, "message": {"role": "assistant", "content": c}, "finish_reason": "stop"}
            for i, c in enumerate(contents)
        ],
        "usage": {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5},
    }


def _client(handler, **config_kwargs) -> ChatCompletionClient:
    config = LLMConfig(model="gpt-3.5-turbo", api_key="sk-test", chat_url=CHAT_URL, **config_kwargs)
    http_client = make_httpx_client(transport=httpx.MockTransport(handler))
    return ChatCompletionClient(config, http_client=http_client)


def test_chat_message_to_api():
    msg = ChatMessage(role=Role.USER, content="Hello")
    assert msg.to_api() == {"role": "user", "content": "Hello"}


@pytest.mark.parametrize(
    "text",
    [
        "Hello",
        "  leading and trailing  ",
        "line one\nline two",
        'quotes " and \\ backslashes',
        "emoji 🎄 and ünïcödé",
        "{\"role\": \"assistant\"}",
    ],
)
def test_request_body_has_single_verbatim_user_message(text):
    body = build_request_body("gpt-3.5-turbo", text)
    assert body["model"] == "gpt-3.5-turbo"
    assert body["messages"] == [{"role": "user", "content": text}]

    # Survives JSON encoding unchanged
    assert json.loads(json.dumps(body))["messages"][0]["content"] == text


def test_request_body_rejects_empty_text():
    with pytest.raises(ValueError):
        build_request_body("gpt-3.5-turbo", "")


def test_decode_takes_first_choice():
    result = decode_response(json.dumps(_reply("first", "second")))
    assert result.ok
    assert result.text == "first"


def test_decode_zero_choices_is_no_result():
    result = decode_response(json.dumps({"choices": []}))
    assert result.text is None
    assert result.error == ChatErrorKind.EMPTY


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b"",
        b'{"error": {"message": "Invalid API key"}}',
        b'{"choices": [{"message": {"role": "assistant"}}]}',
        b'{"choices": "nope"}',
        b"[]",
    ],
)
def test_decode_failures_are_no_result(body):
    result = decode_response(body)
    assert result.text is None
    assert result.error == ChatErrorKind.DECODE


@pytest.mark.asyncio
async def test_send_posts_wire_contract():
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["headers"] = request.headers
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_reply("Ho ho ho"))

    client = _client(handler)
    try:
        reply = await client.complete("Hi Santa")
    finally:
        await client.close()

    assert reply == "Ho ho ho"
    assert seen["method"] == "POST"
    assert seen["url"] == CHAT_URL
    assert seen["headers"]["authorization"] == "Bearer sk-test"
    assert seen["headers"]["content-type"] == "application/json"
    assert seen["headers"]["user-agent"] == DEFAULT_USER_AGENT
    assert seen["body"] == {
        "model": "gpt-3.5-turbo",
        "messages": [{"role": "user", "content": "Hi Santa"}],
    }


@pytest.mark.asyncio
async def test_transport_error_collapses_to_none():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    client = _client(handler)
    try:
        result = await client.send("Hi")
        reply = await client.complete("Hi")
    finally:
        await client.close()

    assert result.error == ChatErrorKind.TRANSPORT
    assert reply is None


@pytest.mark.asyncio
async def test_error_status_with_error_body_is_decode_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": {"message": "Incorrect API key provided"}})

    client = _client(handler)
    try:
        result = await client.send("Hi")
    finally:
        await client.close()

    assert result.text is None
    assert result.error == ChatErrorKind.DECODE


@pytest.mark.asyncio
async def test_empty_choices_collapses_to_none():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": []})

    client = _client(handler)
    try:
        assert await client.complete("Hi") is None
    finally:
        await client.close()


def test_from_settings(settings):
    client = ChatCompletionClient.from_settings(settings)
    assert client.model == settings.model
    assert client._config.chat_url == "https://api.openai.com/v1/chat/completions"
    assert client._config.api_key == "sk-test-key"
