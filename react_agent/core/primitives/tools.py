"""
Utilities for registering and invoking tools in the agent loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional


class ToolExecutionError(RuntimeError):
    """Raised when a tool invocation fails."""


ToolCallable = Callable[[str], str]

DEFAULT_PARAMETERS: Dict[str, Any] = {
    "type": "object",
    "properties": {"input": {"type": "string"}},
    "required": ["input"],
}


@dataclass
class Tool:
    name: str
    description: str
    func: ToolCallable
    # JSON Schema of the arguments, advertised to tool-calling backends.
    parameters: Optional[Dict[str, Any]] = None

    def __call__(self, tool_input: str) -> str:
        return self.func(tool_input)

    def to_function_definition(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters or DEFAULT_PARAMETERS,
            },
        }


def normalize_tool_name(name: str) -> str:
    """Map natural-language tool names such as " Web Search" to `Web_Search`."""
    return name.strip().replace(" ", "_")


class ToolRegistry:
    """In-memory registry resolving tools by normalized name."""

    def __init__(self, tools: Optional[Iterable[Tool]] = None) -> None:
        self._tools: Dict[str, Tool] = {}
        if tools is not None:
            self.update(tools)

    def __contains__(self, name: str) -> bool:
        return normalize_tool_name(name) in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def register(self, tool: Tool) -> None:
        key = normalize_tool_name(tool.name)
        if key in self._tools:
            raise ValueError(f"Tool named '{tool.name}' already registered as '{key}'.")
        self._tools[key] = tool

    def update(self, tools: Iterable[Tool]) -> None:
        for tool in tools:
            self.register(tool)

    def remove(self, name: str) -> None:
        self._tools.pop(normalize_tool_name(name), None)

    def get(self, name: str) -> Tool:
        try:
            return self._tools[normalize_tool_name(name)]
        except KeyError as exc:
            raise KeyError(f"Unknown tool '{name}'.") from exc

    def names(self) -> List[str]:
        return [tool.name for tool in self._tools.values()]
