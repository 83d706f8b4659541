"""
Foundational data structures shared across the framework.
"""

from .actions import (
    AgentAction,
    AgentEvent,
    AgentFinish,
    FunctionCall,
    IntermediateStep,
    ToolCall,
    ToolCallLog,
)
from .memory import BaseMemory, SimpleMemory
from .messages import (
    ChatMessage,
    MessageRole,
    assistant_message,
    coerce_messages,
    get_buffer_string,
    system_message,
    tool_message,
    user_message,
)
from .tools import (
    Tool,
    ToolCallable,
    ToolExecutionError,
    ToolRegistry,
    normalize_tool_name,
)

__all__ = [
    "AgentAction",
    "AgentEvent",
    "AgentFinish",
    "FunctionCall",
    "IntermediateStep",
    "ToolCall",
    "ToolCallLog",
    "BaseMemory",
    "SimpleMemory",
    "ChatMessage",
    "MessageRole",
    "assistant_message",
    "coerce_messages",
    "get_buffer_string",
    "system_message",
    "tool_message",
    "user_message",
    "Tool",
    "ToolCallable",
    "ToolExecutionError",
    "ToolRegistry",
    "normalize_tool_name",
]
