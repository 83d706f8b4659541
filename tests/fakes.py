"""
Test doubles shared by the test modules.
"""

from typing import Any, List, Optional

from react_agent.core.agent.base import BaseAgent
from react_agent.core.primitives import AgentAction, AgentFinish, ChatMessage
from react_agent.llm import LLMClient, LLMResponse


class FakeLLM(LLMClient):
    """Returns queued responses and records every request."""

    def __init__(self, responses: List[Any]) -> None:
        super().__init__("fake-model")
        self.responses = list(responses)
        self.calls: List[dict] = []

    def chat(
        self,
        messages: List[ChatMessage],
        *,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
        **kwargs: Any,
    ) -> LLMResponse:
        self.calls.append({"messages": list(messages), "max_output_tokens": max_output_tokens, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, LLMResponse):
            return response
        return LLMResponse(content=response)


class ScriptedAgent(BaseAgent):
    """Replays a fixed list of events, recording the steps it was shown."""

    def __init__(self, events, tools=()) -> None:
        self.events = list(events)
        self.tools = list(tools)
        self.seen_steps = []
        self.seen_inputs = []

    def plan(self, intermediate_steps, inputs):
        self.seen_steps.append(list(intermediate_steps))
        self.seen_inputs.append(dict(inputs))
        event = self.events.pop(0)
        if isinstance(event, Exception):
            raise event
        return event

    def get_tools(self):
        return self.tools


class LoopingAgent(BaseAgent):
    """Always asks for the same tool."""

    def __init__(self, tool_name: str, tools=()) -> None:
        self.tool_name = tool_name
        self.tools = list(tools)
        self.plan_calls = 0

    def plan(self, intermediate_steps, inputs):
        self.plan_calls += 1
        return [AgentAction(tool=self.tool_name, tool_input="again", log="looping")]

    def get_tools(self):
        return self.tools


def action(tool: str, tool_input: str = "x") -> AgentAction:
    return AgentAction(tool=tool, tool_input=tool_input, log=f"calling {tool}")


def finish(output: str) -> AgentFinish:
    return AgentFinish(output=output)
