"""
Generation capability consumed by agents.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

# Reserved input keys shared by prompts, agents and the executor.
INPUT_KEY = "input"
CHAT_HISTORY_KEY = "chat_history"
AGENT_SCRATCHPAD_KEY = "agent_scratchpad"


@dataclass
class GenerateResult:
    generation: str
    tool_calls: Optional[List[Dict[str, Any]]] = None
    usage: Optional[Dict[str, Any]] = None


class BaseChain(ABC):
    @abstractmethod
    def call(self, inputs: Mapping[str, Any]) -> GenerateResult:
        raise NotImplementedError

    def invoke(self, inputs: Mapping[str, Any]) -> str:
        return self.call(inputs).generation
