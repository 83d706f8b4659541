"""
Errors raised by agents and the executor loop.

Generation failures are not wrapped: whatever the chain raises (typically
`LLMError`) reaches the caller unchanged. Tool failures promoted by
`break_if_error` surface as `ToolExecutionError`.
"""

from __future__ import annotations


class AgentError(RuntimeError):
    """Base class for agent-level failures."""


class OutputParserError(AgentError):
    """Structured output was found but does not match the expected schema."""


class ScratchpadDecodeError(AgentError):
    """An action log could not be decoded back into its tool-call batch."""


class ToolNotFoundError(AgentError):
    """The agent asked for a tool that is not registered."""


class MissingInputVariableError(AgentError):
    """A required input key was not supplied."""
