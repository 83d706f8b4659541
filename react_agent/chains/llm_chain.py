"""
Chain that renders a chat prompt and sends it to an LLM client.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from ..llm import LLMClient
from .base import BaseChain, GenerateResult
from .prompt import ChatPromptTemplate


LOGGER = logging.getLogger(__name__)


class LLMChain(BaseChain):
    def __init__(
        self,
        llm: LLMClient,
        prompt: ChatPromptTemplate,
        *,
        call_options: Optional[Dict[str, Any]] = None,  # forwarded to llm.chat, e.g. tools / max_output_tokens
    ) -> None:
        self.llm = llm
        self.prompt = prompt
        self.call_options = dict(call_options or {})

    def call(self, inputs: Mapping[str, Any]) -> GenerateResult:
        messages = self.prompt.format_messages(inputs)
        LOGGER.debug("Sending %d prompt messages to %s", len(messages), self.llm.model)
        response = self.llm.chat(messages, **self.call_options)
        return GenerateResult(
            generation=response.content,
            tool_calls=response.tool_calls,
            usage=response.usage,
        )
