"""
Core primitives that compose the agent pipeline.
"""

from .primitives import (
    AgentAction,
    AgentFinish,
    BaseMemory,
    ChatMessage,
    MessageRole,
    SimpleMemory,
    Tool,
    ToolExecutionError,
    ToolRegistry,
)

__all__ = [
    "AgentAction",
    "AgentFinish",
    "BaseMemory",
    "ChatMessage",
    "MessageRole",
    "SimpleMemory",
    "Tool",
    "ToolExecutionError",
    "ToolRegistry",
]
