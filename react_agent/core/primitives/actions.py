"""
Definitions of agent events emitted by the planner/executor loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict


class FunctionCall(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    arguments: str


class ToolCall(BaseModel):
    """A single call requested natively by a tool-calling backend."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: str = "function"
    function: FunctionCall


class ToolCallLog(BaseModel):
    """
    Call batch an action belongs to.

    `tool_id` is the id of the call this action answers; `tools` is the full
    batch requested in the same turn, which must be echoed back to the backend
    before the per-call results.
    """

    model_config = ConfigDict(frozen=True)

    tool_id: str
    tools: Tuple[ToolCall, ...]


@dataclass(frozen=True)
class AgentAction:
    """
    Indicates that the agent should execute a tool invocation.
    """

    tool: str
    tool_input: str
    log: str
    tool_call: Optional[ToolCallLog] = None


@dataclass(frozen=True)
class AgentFinish:
    """
    Signals that the agent has produced a final answer.
    """

    output: str


# One planning round yields either a batch of actions or a final answer.
AgentEvent = Union[List[AgentAction], AgentFinish]

IntermediateStep = Tuple[AgentAction, str]
