"""
OpenAI-compatible HTTP client and the registry of known providers.

Each provider is described by the environment variables it reads, so
`create_chat_completion_client("deepseek", "deepseek-chat")` needs nothing
but `DEEPSEEK_API_KEY` set.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import requests

from .base import LLMClient, LLMError, LLMResponse
from ..core.primitives.messages import ChatMessage


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderSpec:
    name: str
    api_key_env: str
    default_base_url: str
    base_url_env: Optional[str] = None
    organization_env: Optional[str] = None
    header_env_map: Dict[str, str] = field(default_factory=dict)  # header -> env var

    def base_url(self, explicit: Optional[str] = None) -> str:
        env_value = os.getenv(self.base_url_env) if self.base_url_env else None
        return explicit or env_value or self.default_base_url

    def headers(self, explicit: Optional[Dict[str, str]] = None, organization: Optional[str] = None) -> Dict[str, str]:
        """Extra request headers: env-mapped ones, then the organization, then `explicit`."""
        resolved = {header: os.environ[env] for header, env in self.header_env_map.items() if os.getenv(env)}
        organization = organization or (os.getenv(self.organization_env) if self.organization_env else None)
        if organization:
            resolved["OpenAI-Organization"] = organization
        resolved.update(explicit or {})
        return resolved


class OpenAICompatibleClient(LLMClient):
    """
    Client for `/chat/completions` style APIs.

    Passing `tools=[...]` to `chat` forwards function definitions; native tool
    calls in the reply come back on `LLMResponse.tool_calls`.
    """

    def __init__(
        self,
        model: str,
        *,
        api_key_env: str,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        max_output_tokens: Optional[int] = None,
        temperature: float = 0.2,
    ) -> None:
        super().__init__(model, temperature=temperature, max_output_tokens=max_output_tokens)
        api_key = api_key if api_key is not None else os.getenv(api_key_env)
        if not api_key:
            raise ValueError(
                f"API key is required. Provide via constructor or set the {api_key_env} environment variable."
            )
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            **(headers or {}),
        }

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/chat/completions"

    def chat(
        self,
        messages: List[ChatMessage],
        *,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
        **kwargs: Any,
    ) -> LLMResponse:
        payload = self.build_payload(
            messages,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
            **kwargs,
        )
        LOGGER.debug("POST %s with %d messages", self.endpoint, len(messages))
        try:
            response = requests.post(self.endpoint, json=payload, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise LLMError(f"LLM request failed: {exc}") from exc
        if response.status_code >= 400:
            raise LLMError(f"LLM request failed ({response.status_code}): {response.text}")
        try:
            body = response.json()
        except ValueError as exc:
            raise LLMError(f"LLM returned a non-JSON body: {response.text}") from exc
        return LLMResponse.from_completion(body)


_PROVIDER_REGISTRY: Dict[str, ProviderSpec] = {
    spec.name: spec
    for spec in (
        ProviderSpec(
            name="openai",
            api_key_env="OPENAI_API_KEY",
            default_base_url="https://api.openai.com/v1",
            base_url_env="OPENAI_BASE_URL",
            organization_env="OPENAI_ORG_ID",
        ),
        ProviderSpec(
            name="deepseek",
            api_key_env="DEEPSEEK_API_KEY",
            default_base_url="https://api.deepseek.com/v1",
            base_url_env="DEEPSEEK_BASE_URL",
        ),
        ProviderSpec(
            name="qwen",
            api_key_env="QWEN_API_KEY",
            default_base_url="https://dashscope.aliyuncs.com/compatible-mode/v1",
            base_url_env="QWEN_BASE_URL",
            header_env_map={"X-DashScope-Workspace": "QWEN_WORKSPACE"},
        ),
    )
}


def register_provider(spec: ProviderSpec) -> None:
    _PROVIDER_REGISTRY[spec.name] = spec


def list_providers() -> Iterable[str]:
    return tuple(_PROVIDER_REGISTRY)


def create_chat_completion_client(
    provider: str,
    model: str,
    *,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    organization: Optional[str] = None,
    timeout: float = 30.0,
    temperature: float = 0.2,
    max_output_tokens: Optional[int] = None,
) -> OpenAICompatibleClient:
    """
    Build a client for a registered provider. Explicit arguments win over
    environment variables, which win over the provider defaults.
    """
    try:
        spec = _PROVIDER_REGISTRY[provider]
    except KeyError as exc:
        raise ValueError(f"Unknown provider '{provider}'. Available: {list_providers()}") from exc

    return OpenAICompatibleClient(
        model,
        api_key_env=spec.api_key_env,
        base_url=spec.base_url(base_url),
        api_key=api_key,
        timeout=timeout,
        headers=spec.headers(headers, organization),
        temperature=temperature,
        max_output_tokens=max_output_tokens,
    )
