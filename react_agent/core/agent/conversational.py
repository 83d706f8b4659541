"""
Agent that plans through free-text replies containing a fenced JSON action.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from ...chains.base import AGENT_SCRATCHPAD_KEY, BaseChain
from ...chains.llm_chain import LLMChain
from ...llm import LLMClient
from ..primitives.actions import AgentEvent, IntermediateStep
from ..primitives.messages import ChatMessage, assistant_message, user_message
from ..primitives.tools import Tool
from .base import BaseAgent
from .parsers import ChatOutputParser
from .prompts import PREFIX, SUFFIX, build_conversational_prompt, format_tool_response


LOGGER = logging.getLogger(__name__)

DEFAULT_CALL_OPTIONS: Dict[str, Any] = {"max_output_tokens": 1000}


class ConversationalAgent(BaseAgent):
    def __init__(
        self,
        chain: BaseChain,
        tools: Iterable[Tool],
        *,
        output_parser: Optional[ChatOutputParser] = None,
    ) -> None:
        self.chain = chain
        self.tools = list(tools)
        self.output_parser = output_parser or ChatOutputParser()

    @classmethod
    def from_llm(
        cls,
        llm: LLMClient,
        tools: Iterable[Tool] = (),
        *,
        prefix: str = PREFIX,
        suffix: str = SUFFIX,
        call_options: Optional[Dict[str, Any]] = None,
    ) -> "ConversationalAgent":
        tools = list(tools)
        prompt = build_conversational_prompt(tools, prefix=prefix, suffix=suffix)
        options = call_options if call_options is not None else DEFAULT_CALL_OPTIONS
        return cls(LLMChain(llm, prompt, call_options=options), tools)

    def construct_scratchpad(self, intermediate_steps: Sequence[IntermediateStep]) -> List[ChatMessage]:
        thoughts: List[ChatMessage] = []
        for action, observation in intermediate_steps:
            thoughts.append(assistant_message(action.log))
            # The wrapper repeats the response schema so long transcripts keep the format.
            thoughts.append(user_message(format_tool_response(observation)))
        return thoughts

    def plan(
        self,
        intermediate_steps: Sequence[IntermediateStep],
        inputs: Mapping[str, Any],
    ) -> AgentEvent:
        variables = dict(inputs)
        variables[AGENT_SCRATCHPAD_KEY] = self.construct_scratchpad(intermediate_steps)
        output = self.chain.call(variables).generation
        LOGGER.info(
            "\n%s\n[RAW LLM RESPONSE] after %d step(s)\n%s\n%s",
            "-" * 80,
            len(intermediate_steps),
            output.strip(),
            "-" * 80,
        )
        return self.output_parser.parse(output)

    def get_tools(self) -> List[Tool]:
        return list(self.tools)
