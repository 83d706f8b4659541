"""
Plain memory-backed conversation without tools.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from ..core.primitives.memory import BaseMemory, SimpleMemory
from ..core.primitives.messages import get_buffer_string
from ..llm import LLMClient
from .base import INPUT_KEY, BaseChain, GenerateResult
from .llm_chain import LLMChain
from .prompt import ChatPromptTemplate, HumanMessageTemplate, PromptError


LOGGER = logging.getLogger(__name__)

DEFAULT_TEMPLATE = """The following is a friendly conversation between a human and an AI. The AI is talkative and provides lots of specific details from its context. If the AI does not know the answer to a question, it truthfully says it does not know.

Current conversation:
$history
Human: $input
AI:
"""


class ConversationalChain(BaseChain):
    """
    Renders the stored transcript into `$history`, asks the LLM, then records
    the exchange. Custom prompts must accept `history` and the input key.
    """

    def __init__(
        self,
        llm: LLMClient,
        *,
        memory: Optional[BaseMemory] = None,
        prompt: Optional[ChatPromptTemplate] = None,
        input_key: str = INPUT_KEY,
        call_options: Optional[Dict[str, Any]] = None,
    ) -> None:
        prompt = prompt or ChatPromptTemplate([HumanMessageTemplate(DEFAULT_TEMPLATE)])
        self.chain = LLMChain(llm, prompt, call_options=call_options)
        self.memory = memory if memory is not None else SimpleMemory()
        self.input_key = input_key

    def call(self, inputs: Mapping[str, Any]) -> GenerateResult:
        if self.input_key not in inputs:
            raise PromptError(f"Missing input variable: {self.input_key}")
        human_input = str(inputs[self.input_key])
        with self.memory.lock:
            history = get_buffer_string(self.memory.messages())
        variables = dict(inputs)
        variables["history"] = history
        variables["input"] = human_input
        result = self.chain.call(variables)
        with self.memory.lock:
            self.memory.add_user_message(human_input)
            self.memory.add_ai_message(result.generation)
        LOGGER.info("Conversation turn recorded (%d chars answered)", len(result.generation))
        return result
