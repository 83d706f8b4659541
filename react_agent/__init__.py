"""
High-level exports for the ReAct-inspired agent framework.

This package exposes the agents, the executor loop and the supporting core
types that can be used to extend or customize agent behaviour.
"""

from .chains import ConversationalChain, GenerateResult, LLMChain
from .core.agent import (
    AgentError,
    AgentExecutor,
    AgentRunResult,
    ChatOutputParser,
    ConversationalAgent,
    ExecutorConfig,
    Outcome,
    ToolCallingAgent,
)
from .core.primitives import (
    AgentAction,
    AgentFinish,
    ChatMessage,
    MessageRole,
    SimpleMemory,
    Tool,
    ToolRegistry,
)

__all__ = [
    "ConversationalChain",
    "GenerateResult",
    "LLMChain",
    "AgentError",
    "AgentExecutor",
    "AgentRunResult",
    "ChatOutputParser",
    "ConversationalAgent",
    "ExecutorConfig",
    "Outcome",
    "ToolCallingAgent",
    "AgentAction",
    "AgentFinish",
    "ChatMessage",
    "MessageRole",
    "SimpleMemory",
    "Tool",
    "ToolRegistry",
]
