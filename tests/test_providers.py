"""
Tests for the OpenAI-compatible HTTP client and provider registry.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from react_agent.core.primitives import assistant_message, tool_message, user_message
from react_agent.llm import (
    LLMError,
    LLMResponse,
    OpenAICompatibleClient,
    ProviderSpec,
    create_chat_completion_client,
    list_providers,
    register_provider,
)


def _mock_response(status_code=200, body=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.json.return_value = body
    return response


def _client(**kwargs):
    return OpenAICompatibleClient(
        "test-model",
        api_key_env="TEST_API_KEY",
        base_url="https://llm.example.com/v1/",
        api_key="secret",
        **kwargs,
    )


class TestOpenAICompatibleClient:
    """Tests for OpenAICompatibleClient.chat."""

    def test_requires_api_key(self, monkeypatch):
        monkeypatch.delenv("TEST_API_KEY", raising=False)

        with pytest.raises(ValueError):
            OpenAICompatibleClient("m", api_key_env="TEST_API_KEY", base_url="https://x")

    def test_api_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("TEST_API_KEY", "from-env")

        client = OpenAICompatibleClient("m", api_key_env="TEST_API_KEY", base_url="https://x")

        assert client.headers["Authorization"] == "Bearer from-env"

    @patch("react_agent.llm.providers.requests.post")
    def test_chat_posts_payload_and_parses_content(self, mock_post):
        mock_post.return_value = _mock_response(
            body={
                "choices": [{"message": {"content": "hi"}, "finish_reason": "stop"}],
                "usage": {"total_tokens": 5},
            }
        )
        client = _client(max_output_tokens=100)

        response = client.chat([user_message("hello")])

        assert response.content == "hi"
        assert response.finish_reason == "stop"
        assert response.usage == {"total_tokens": 5}
        assert response.tool_calls is None
        args, kwargs = mock_post.call_args
        assert args[0] == "https://llm.example.com/v1/chat/completions"
        assert kwargs["json"]["model"] == "test-model"
        assert kwargs["json"]["max_tokens"] == 100
        assert kwargs["json"]["messages"] == [{"role": "user", "content": "hello"}]
        assert kwargs["timeout"] == 30.0

    @patch("react_agent.llm.providers.requests.post")
    def test_tools_and_tool_calls_round_trip_through_payload(self, mock_post):
        calls = [{"id": "call_1", "type": "function", "function": {"name": "calc", "arguments": "{}"}}]
        mock_post.return_value = _mock_response(
            body={"choices": [{"message": {"content": None, "tool_calls": calls}, "finish_reason": "tool_calls"}]}
        )
        tools = [{"type": "function", "function": {"name": "calc", "description": "", "parameters": {}}}]

        response = _client().chat(
            [user_message("2+2?"), assistant_message(tool_calls=calls), tool_message("4", "call_1")],
            tools=tools,
        )

        assert response.content == ""
        assert response.tool_calls == calls
        payload = mock_post.call_args.kwargs["json"]
        assert payload["tools"] == tools
        assert payload["messages"][1]["tool_calls"] == calls
        assert payload["messages"][2]["tool_call_id"] == "call_1"

    @patch("react_agent.llm.providers.requests.post")
    def test_none_valued_options_are_dropped(self, mock_post):
        mock_post.return_value = _mock_response(body={"choices": [{"message": {"content": "x"}}]})

        _client().chat([user_message("hi")], tools=None)

        assert "tools" not in mock_post.call_args.kwargs["json"]

    @patch("react_agent.llm.providers.requests.post")
    def test_http_error_raises_llm_error(self, mock_post):
        mock_post.return_value = _mock_response(status_code=429, text="rate limited")

        with pytest.raises(LLMError, match="429"):
            _client().chat([user_message("hi")])

    @patch("react_agent.llm.providers.requests.post")
    def test_transport_error_raises_llm_error(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("refused")

        with pytest.raises(LLMError):
            _client().chat([user_message("hi")])

    @patch("react_agent.llm.providers.requests.post")
    def test_malformed_body_raises_llm_error(self, mock_post):
        mock_post.return_value = _mock_response(body={"choices": []})

        with pytest.raises(LLMError, match="Malformed"):
            _client().chat([user_message("hi")])


class TestProviderRegistry:
    """Tests for provider lookup and client construction."""

    def test_builtin_providers(self):
        assert {"openai", "deepseek", "qwen"} <= set(list_providers())

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            create_chat_completion_client("nope", "model")

    def test_qwen_workspace_header_from_environment(self, monkeypatch):
        monkeypatch.setenv("QWEN_API_KEY", "k")
        monkeypatch.setenv("QWEN_WORKSPACE", "ws-1")
        monkeypatch.delenv("QWEN_BASE_URL", raising=False)

        client = create_chat_completion_client("qwen", "qwen-plus")

        assert client.headers["X-DashScope-Workspace"] == "ws-1"
        assert client.base_url == "https://dashscope.aliyuncs.com/compatible-mode/v1"

    def test_explicit_base_url_wins(self, monkeypatch):
        monkeypatch.setenv("DEEPSEEK_BASE_URL", "https://env.example.com/v1")

        client = create_chat_completion_client("deepseek", "deepseek-chat", api_key="k", base_url="https://mine/v1/")

        assert client.base_url == "https://mine/v1"

    def test_register_custom_provider(self, monkeypatch):
        monkeypatch.setenv("LOCAL_KEY", "k")
        register_provider(ProviderSpec(name="local", api_key_env="LOCAL_KEY", default_base_url="http://localhost:8000/v1"))

        client = create_chat_completion_client("local", "llama")

        assert client.endpoint == "http://localhost:8000/v1/chat/completions"

    def test_organization_from_environment_and_explicit_headers(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "k")
        monkeypatch.setenv("OPENAI_ORG_ID", "org-1")

        client = create_chat_completion_client("openai", "gpt-4o-mini", headers={"X-Trace": "abc"})

        assert client.headers["OpenAI-Organization"] == "org-1"
        assert client.headers["X-Trace"] == "abc"
        assert client.headers["Authorization"] == "Bearer k"


class TestLLMResponse:
    """Tests for LLMResponse.from_completion."""

    def test_null_content_becomes_empty_string(self):
        response = LLMResponse.from_completion({"choices": [{"message": {"content": None}}]})

        assert response.content == ""
        assert response.finish_reason is None
        assert response.tool_calls is None

    def test_non_mapping_body_raises_llm_error(self):
        with pytest.raises(LLMError, match="Malformed"):
            LLMResponse.from_completion({"choices": ["oops"]})
