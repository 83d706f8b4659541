"""
Generation capabilities: prompt rendering plus LLM invocation.
"""

from .base import (
    AGENT_SCRATCHPAD_KEY,
    CHAT_HISTORY_KEY,
    INPUT_KEY,
    BaseChain,
    GenerateResult,
)
from .conversational import DEFAULT_TEMPLATE, ConversationalChain
from .llm_chain import LLMChain
from .prompt import (
    ChatPromptTemplate,
    HumanMessageTemplate,
    MessagesPlaceholder,
    PromptError,
    render_template,
)

__all__ = [
    "AGENT_SCRATCHPAD_KEY",
    "CHAT_HISTORY_KEY",
    "INPUT_KEY",
    "BaseChain",
    "GenerateResult",
    "DEFAULT_TEMPLATE",
    "ConversationalChain",
    "LLMChain",
    "ChatPromptTemplate",
    "HumanMessageTemplate",
    "MessagesPlaceholder",
    "PromptError",
    "render_template",
]
