"""
Agent for backends that return native tool calls, possibly several per turn.

Each requested call becomes one `AgentAction` that carries the whole batch in
`tool_call`. When the transcript is replayed, the batch is echoed back once as
an assistant message, followed by one tool message per result tagged with the
call id, which is the shape OpenAI-style APIs require.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from ...chains.base import AGENT_SCRATCHPAD_KEY, BaseChain, GenerateResult
from ...chains.llm_chain import LLMChain
from ...llm import LLMClient
from ..primitives.actions import (
    AgentAction,
    AgentEvent,
    AgentFinish,
    IntermediateStep,
    ToolCall,
    ToolCallLog,
)
from ..primitives.messages import ChatMessage, assistant_message, tool_message
from ..primitives.tools import Tool
from .base import BaseAgent
from .errors import OutputParserError, ScratchpadDecodeError
from .prompts import TOOL_CALLING_PREFIX, build_tool_calling_prompt


LOGGER = logging.getLogger(__name__)

_TOOL_CALLS = TypeAdapter(List[ToolCall])


class ToolCallingAgent(BaseAgent):
    def __init__(self, chain: BaseChain, tools: Iterable[Tool]) -> None:
        self.chain = chain
        self.tools = list(tools)

    @classmethod
    def from_llm(
        cls,
        llm: LLMClient,
        tools: Iterable[Tool] = (),
        *,
        prefix: str = TOOL_CALLING_PREFIX,
        call_options: Optional[Dict[str, Any]] = None,
    ) -> "ToolCallingAgent":
        tools = list(tools)
        options: Dict[str, Any] = {"max_output_tokens": 1000}
        if tools:
            options["tools"] = [tool.to_function_definition() for tool in tools]
        options.update(call_options or {})
        return cls(LLMChain(llm, build_tool_calling_prompt(prefix), call_options=options), tools)

    @staticmethod
    def decode_log(action: AgentAction) -> ToolCallLog:
        if action.tool_call is not None:
            return action.tool_call
        try:
            return ToolCallLog.model_validate_json(action.log)
        except ValidationError as exc:
            raise ScratchpadDecodeError(f"Action log for '{action.tool}' is not a tool-call batch: {exc}") from exc

    def construct_scratchpad(self, intermediate_steps: Sequence[IntermediateStep]) -> List[ChatMessage]:
        thoughts: List[ChatMessage] = []
        current_batch = None
        for action, observation in intermediate_steps:
            call_log = self.decode_log(action)
            if call_log.tools != current_batch:
                current_batch = call_log.tools
                thoughts.append(
                    assistant_message(tool_calls=[call.model_dump() for call in call_log.tools])
                )
            thoughts.append(tool_message(observation, call_log.tool_id, name=action.tool))
        return thoughts

    def _extract_calls(self, result: GenerateResult) -> Optional[List[ToolCall]]:
        if result.tool_calls:
            try:
                return _TOOL_CALLS.validate_python(result.tool_calls)
            except ValidationError as exc:
                raise OutputParserError(f"Backend returned malformed tool calls: {exc}") from exc
        # Some backends serialize the calls into the message text instead.
        try:
            calls = _TOOL_CALLS.validate_json(result.generation)
        except ValidationError:
            return None
        return calls or None

    def plan(
        self,
        intermediate_steps: Sequence[IntermediateStep],
        inputs: Mapping[str, Any],
    ) -> AgentEvent:
        variables = dict(inputs)
        variables[AGENT_SCRATCHPAD_KEY] = self.construct_scratchpad(intermediate_steps)
        result = self.chain.call(variables)
        LOGGER.info(
            "\n%s\n[RAW LLM RESPONSE] after %d step(s)\n%s\n%s",
            "-" * 80,
            len(intermediate_steps),
            result.generation.strip() or f"(tool calls: {result.tool_calls})",
            "-" * 80,
        )
        calls = self._extract_calls(result)
        if calls is None:
            return AgentFinish(output=result.generation)

        batch = tuple(calls)
        actions: List[AgentAction] = []
        for call in batch:
            call_log = ToolCallLog(tool_id=call.id, tools=batch)
            actions.append(
                AgentAction(
                    tool=call.function.name,
                    tool_input=call.function.arguments,
                    log=call_log.model_dump_json(),
                    tool_call=call_log,
                )
            )
        LOGGER.info("Backend requested %d tool call(s): %s", len(actions), ", ".join(a.tool for a in actions))
        return actions

    def get_tools(self) -> List[Tool]:
        return list(self.tools)
