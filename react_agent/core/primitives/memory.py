"""
Conversation memory shared between executor invocations.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from .messages import ChatMessage, assistant_message, user_message


class BaseMemory(ABC):
    """
    Running transcript of a conversation.

    Callers that read the history and later append to it must hold `lock` for
    each of those operations; the lock is re-entrant so implementations may
    take it internally as well.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()

    @abstractmethod
    def messages(self) -> List[ChatMessage]:
        raise NotImplementedError

    @abstractmethod
    def add_message(self, message: ChatMessage) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError

    def add_user_message(self, content: str) -> None:
        self.add_message(user_message(content))

    def add_ai_message(self, content: str) -> None:
        self.add_message(assistant_message(content))


class SimpleMemory(BaseMemory):
    """In-process list of messages."""

    def __init__(self, messages: Optional[Iterable[ChatMessage]] = None) -> None:
        super().__init__()
        self._messages: List[ChatMessage] = list(messages or [])

    def messages(self) -> List[ChatMessage]:
        # Shallow copy so callers cannot mutate internal state.
        with self.lock:
            return list(self._messages)

    def add_message(self, message: ChatMessage) -> None:
        with self.lock:
            self._messages.append(message)

    def clear(self) -> None:
        with self.lock:
            self._messages.clear()

    def last(self) -> Optional[ChatMessage]:
        with self.lock:
            if not self._messages:
                return None
            return self._messages[-1]
