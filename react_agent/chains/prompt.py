"""
Chat prompt assembly from static messages, templates and message placeholders.

Templates use `string.Template` (`$name`) so JSON examples embedded in the
boilerplate need no brace escaping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from string import Template
from typing import Any, Dict, List, Mapping, Sequence, Union

from ..core.primitives.messages import ChatMessage, MessageRole


class PromptError(ValueError):
    """Raised when a prompt cannot be rendered from the given inputs."""


def render_template(template: str, values: Mapping[str, Any]) -> str:
    try:
        return Template(template).substitute(values)
    except KeyError as exc:
        raise PromptError(f"Missing input variable: {exc.args[0]}") from exc
    except ValueError as exc:
        raise PromptError(f"Invalid template: {exc}") from exc


@dataclass
class MessagesPlaceholder:
    """Splices a list of messages taken from the inputs under `key`."""

    key: str
    optional: bool = False


@dataclass
class HumanMessageTemplate:
    template: str
    partial_variables: Dict[str, str] = field(default_factory=dict)

    def format(self, inputs: Mapping[str, Any]) -> ChatMessage:
        values: Dict[str, Any] = dict(self.partial_variables)
        values.update(inputs)
        return ChatMessage(role=MessageRole.USER, content=render_template(self.template, values))


PromptPart = Union[ChatMessage, MessagesPlaceholder, HumanMessageTemplate]


class ChatPromptTemplate:
    def __init__(self, parts: Sequence[PromptPart]) -> None:
        self.parts = list(parts)

    def format_messages(self, inputs: Mapping[str, Any]) -> List[ChatMessage]:
        messages: List[ChatMessage] = []
        for part in self.parts:
            if isinstance(part, ChatMessage):
                messages.append(part)
            elif isinstance(part, MessagesPlaceholder):
                if part.key not in inputs:
                    if part.optional:
                        continue
                    raise PromptError(f"Missing input variable: {part.key}")
                value = inputs[part.key]
                if not isinstance(value, (list, tuple)) or not all(isinstance(m, ChatMessage) for m in value):
                    raise PromptError(f"Input '{part.key}' must be a list of ChatMessage.")
                messages.extend(value)
            elif isinstance(part, HumanMessageTemplate):
                messages.append(part.format(inputs))
            else:
                raise TypeError(f"Unsupported prompt part: {part!r}")
        return messages
