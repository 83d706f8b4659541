"""
Planning interface implemented by every agent.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Sequence

from ..primitives.actions import AgentEvent, IntermediateStep
from ..primitives.tools import Tool


class BaseAgent(ABC):
    @abstractmethod
    def plan(
        self,
        intermediate_steps: Sequence[IntermediateStep],
        inputs: Mapping[str, Any],
    ) -> AgentEvent:
        """
        Decide the next event from the steps taken so far.

        Agents keep no state between calls; everything needed is rebuilt from
        `intermediate_steps` and `inputs`.
        """
        raise NotImplementedError

    @abstractmethod
    def get_tools(self) -> List[Tool]:
        raise NotImplementedError
