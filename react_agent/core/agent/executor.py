"""
Execution loop that drives an agent against registered tools.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ...chains.base import CHAT_HISTORY_KEY, INPUT_KEY
from ..primitives.actions import AgentAction, AgentFinish, IntermediateStep
from ..primitives.memory import BaseMemory
from ..primitives.messages import ChatMessage
from ..primitives.tools import ToolExecutionError, ToolRegistry
from .base import BaseAgent
from .errors import MissingInputVariableError, ToolNotFoundError


MAX_ITERATIONS_OUTPUT = "Max iterations reached"


class Outcome(str, Enum):
    ANSWER = "answer"
    EXHAUSTED = "exhausted"


@dataclass
class ExecutorConfig:
    # None disables the bound; 0 stops after the first action batch.
    max_iterations: Optional[int] = 10
    break_if_error: bool = False


@dataclass
class AgentRunResult:
    output: str
    outcome: Outcome
    intermediate_steps: List[IntermediateStep] = field(default_factory=list)


class AgentExecutor:
    def __init__(
        self,
        agent: BaseAgent,
        *,
        config: Optional[ExecutorConfig] = None,
        memory: Optional[BaseMemory] = None,
    ) -> None:
        self.agent = agent
        self.config = config or ExecutorConfig()
        self.memory = memory
        self.tools = ToolRegistry(agent.get_tools())
        self._logger = logging.getLogger(__name__)

    def invoke(self, inputs: Mapping[str, Any]) -> str:
        return self.call(inputs).output

    def call(self, inputs: Mapping[str, Any]) -> AgentRunResult:
        variables: Dict[str, Any] = dict(inputs)
        if self.memory is not None and INPUT_KEY not in variables:
            raise MissingInputVariableError(f"Missing input variable: {INPUT_KEY}")
        variables[CHAT_HISTORY_KEY] = self._load_history()
        steps: List[IntermediateStep] = []

        self._logger.info(
            "\n%s\n[EXECUTION START]\nInput: %s\nMax iterations: %s\n%s",
            "=" * 80,
            variables.get(INPUT_KEY, ""),
            self.config.max_iterations,
            "=" * 80,
        )

        while True:
            event = self.agent.plan(list(steps), variables)
            if isinstance(event, AgentFinish):
                self._logger.info(
                    "\n%s\n[STEP %d] FINAL ANSWER RECEIVED\n%s\n%s",
                    "=" * 80,
                    len(steps),
                    event.output.strip(),
                    "=" * 80,
                )
                self._save_turn(variables, event.output)
                return AgentRunResult(output=event.output, outcome=Outcome.ANSWER, intermediate_steps=steps)
            elif isinstance(event, list):
                for action in event:
                    steps.append((action, self._take_action(action)))
            else:
                raise TypeError(f"Agent returned an unsupported event: {event!r}")

            max_iterations = self.config.max_iterations
            if max_iterations is not None and len(steps) >= max_iterations:
                self._logger.warning(
                    "Stopping after %d steps: max iterations (%d) reached\n%s",
                    len(steps),
                    max_iterations,
                    self._format_steps(steps),
                )
                return AgentRunResult(
                    output=MAX_ITERATIONS_OUTPUT,
                    outcome=Outcome.EXHAUSTED,
                    intermediate_steps=steps,
                )

    def _load_history(self) -> List[ChatMessage]:
        if self.memory is None:
            return []
        with self.memory.lock:
            return self.memory.messages()

    def _save_turn(self, variables: Mapping[str, Any], output: str) -> None:
        if self.memory is None:
            return
        with self.memory.lock:
            self.memory.add_user_message(str(variables[INPUT_KEY]))
            self.memory.add_ai_message(output)

    def _take_action(self, action: AgentAction) -> str:
        self._logger.info(
            "\n%s\n[TOOL ACTION]\nTool: %s\nInput: %s\n%s",
            "-" * 80,
            action.tool,
            action.tool_input,
            "-" * 80,
        )
        try:
            tool = self.tools.get(action.tool)
        except KeyError as exc:
            raise ToolNotFoundError(f"Tool {action.tool} not found") from exc
        try:
            observation = str(tool(action.tool_input))
        except Exception as exc:
            self._logger.info("The tool returned the following error: %s", exc)
            if self.config.break_if_error:
                raise ToolExecutionError(f"Tool '{tool.name}' failed: {exc}") from exc
            observation = f"The tool returned the following error: {exc}"
        self._logger.info(
            "\n%s\n[TOOL RESULT] %s\n%s\n%s",
            "-" * 80,
            tool.name,
            observation.strip(),
            "-" * 80,
        )
        return observation

    def _format_steps(self, steps: Sequence[IntermediateStep]) -> str:
        if not steps:
            return "(no steps)"
        lines = []
        for index, (action, observation) in enumerate(steps, start=1):
            snippet = observation.strip().replace("\n", " ")
            if len(snippet) > 160:
                snippet = f"{snippet[:157]}..."
            lines.append(f"{index:02d}. {action.tool}({action.tool_input!r}) -> {snippet}")
        return "\n".join(lines)
