"""
Generation capability consumed by `LLMChain`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..core.primitives.messages import ChatMessage, coerce_messages


class LLMError(RuntimeError):
    """Raised when an LLM request fails."""


@dataclass
class LLMResponse:
    content: str
    finish_reason: Optional[str] = None
    usage: Optional[Dict[str, Any]] = None
    raw: Optional[Dict[str, Any]] = None
    tool_calls: Optional[List[Dict[str, Any]]] = None

    @classmethod
    def from_completion(cls, body: Dict[str, Any]) -> "LLMResponse":
        """Read the first choice of a chat-completion body; native tool calls may leave `content` null."""
        try:
            choice = body["choices"][0]
            message = choice["message"]
            return cls(
                content=message.get("content") or "",
                finish_reason=choice.get("finish_reason"),
                usage=body.get("usage"),
                raw=body,
                tool_calls=message.get("tool_calls") or None,
            )
        except (KeyError, IndexError, TypeError, AttributeError) as exc:
            raise LLMError(f"Malformed response structure: {body}") from exc


class LLMClient(ABC):
    """
    A chat model the chains can call.

    `temperature` and `max_output_tokens` are client defaults; per-call values
    given to `chat` override them. Other keyword options (e.g. `tools`) go to
    the backend as-is.
    """

    def __init__(
        self,
        model: str,
        *,
        temperature: float = 0.2,
        max_output_tokens: Optional[int] = None,
    ) -> None:
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

    @abstractmethod
    def chat(
        self,
        messages: List[ChatMessage],
        *,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
        **kwargs: Any,
    ) -> LLMResponse:
        raise NotImplementedError

    def build_payload(self, messages: List[ChatMessage], **options: Any) -> Dict[str, Any]:
        """JSON request body for an OpenAI-style endpoint. Options set to None are left out."""
        temperature = options.pop("temperature", None)
        max_tokens = options.pop("max_output_tokens", None)
        payload: Dict[str, Any] = {
            "model": self.model,
            "temperature": self.temperature if temperature is None else temperature,
            "max_tokens": self.max_output_tokens if max_tokens is None else max_tokens,
            **options,
        }
        payload = {key: value for key, value in payload.items() if value is not None}
        payload["messages"] = coerce_messages(messages)
        return payload
