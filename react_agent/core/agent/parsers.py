"""
Parser for interpreting LLM responses within the ReAct loop.

The model is asked to answer with a fenced JSON block holding `action` and
`action_input`. Replies are frequently truncated or written as plain prose,
so parsing never fails on missing or broken structure: such replies become
the final answer. Only a well-formed block with the wrong fields is an error.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, List

from pydantic import BaseModel, ConfigDict, ValidationError

from ..primitives.actions import AgentAction, AgentEvent, AgentFinish
from .errors import OutputParserError
from .prompts import FINAL_ANSWER_ACTION, FORMAT_INSTRUCTIONS


LOGGER = logging.getLogger(__name__)

_NOT_FOUND = object()

JSON_MARKDOWN_RE = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL)

_CLOSERS = {"{": "}", "[": "]"}


class AgentOutput(BaseModel):
    model_config = ConfigDict(strict=True)

    action: str
    action_input: str


def parse_partial_json(text: str) -> Any:
    """
    Parse `text` as JSON, closing any structures left open by truncation.

    Returns `_NOT_FOUND` when the text cannot be repaired, e.g. when a closing
    bracket does not match the innermost open one.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    stack: List[str] = []
    inside_string = False
    escaped = False
    for char in text:
        if char == '"' and not escaped:
            inside_string = not inside_string
        elif inside_string:
            if char == "\\":
                escaped = not escaped
                continue
        elif char in _CLOSERS:
            stack.append(_CLOSERS[char])
        elif char in "}]":
            if not stack or stack.pop() != char:
                return _NOT_FOUND
        escaped = False

    repaired = text + "".join(reversed(stack))
    try:
        return json.loads(repaired)
    except json.JSONDecodeError:
        return _NOT_FOUND


def parse_json_markdown(text: str) -> Any:
    """Extract and parse the first ```json block, or return `_NOT_FOUND`."""
    match = JSON_MARKDOWN_RE.search(text)
    if match is None:
        # A block cut off before its closing fence is still worth repairing.
        start = re.search(r"```json\s*", text)
        if start is None:
            return _NOT_FOUND
        return parse_partial_json(text[start.end():].strip())
    return parse_partial_json(match.group(1))


class ChatOutputParser:
    """
    Turns a raw model reply into an `AgentEvent`.
    """

    def parse(self, text: str) -> AgentEvent:
        LOGGER.debug("Parsing to agent event: %s", text)
        value = parse_json_markdown(text)
        if value is _NOT_FOUND:
            LOGGER.debug("No JSON found or malformed JSON in text, treating it as the final answer")
            return AgentFinish(output=text)

        try:
            output = AgentOutput.model_validate(value)
        except ValidationError as exc:
            raise OutputParserError(f"Unexpected agent output schema: {value!r}") from exc

        if output.action == FINAL_ANSWER_ACTION:
            return AgentFinish(output=output.action_input)
        return [AgentAction(tool=output.action, tool_input=output.action_input, log=text)]

    def get_format_instructions(self) -> str:
        return FORMAT_INSTRUCTIONS

