"""
Core agent orchestration components (planning, execution, parsing).
"""

from .base import BaseAgent
from .conversational import ConversationalAgent
from .errors import (
    AgentError,
    MissingInputVariableError,
    OutputParserError,
    ScratchpadDecodeError,
    ToolNotFoundError,
)
from .executor import (
    MAX_ITERATIONS_OUTPUT,
    AgentExecutor,
    AgentRunResult,
    ExecutorConfig,
    Outcome,
)
from .parsers import ChatOutputParser, parse_json_markdown, parse_partial_json
from .prompts import FINAL_ANSWER_ACTION, FORMAT_INSTRUCTIONS, PREFIX, SUFFIX
from .tool_calling import ToolCallingAgent

__all__ = [
    "BaseAgent",
    "ConversationalAgent",
    "AgentError",
    "MissingInputVariableError",
    "OutputParserError",
    "ScratchpadDecodeError",
    "ToolNotFoundError",
    "MAX_ITERATIONS_OUTPUT",
    "AgentExecutor",
    "AgentRunResult",
    "ExecutorConfig",
    "Outcome",
    "ChatOutputParser",
    "parse_json_markdown",
    "parse_partial_json",
    "FINAL_ANSWER_ACTION",
    "FORMAT_INSTRUCTIONS",
    "PREFIX",
    "SUFFIX",
    "ToolCallingAgent",
]
