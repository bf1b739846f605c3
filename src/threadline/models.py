"""Output records produced by the import pipeline."""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Message:
    """One trunk message with its parts flattened into a single string."""

    id: Optional[str]
    author: str
    content: str
    timestamp: Optional[float] = None

    def with_content(self, content: str) -> "Message":
        return replace(self, content=content)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'author': self.author,
            'content': self.content,
            'timestamp': self.timestamp,
        }


@dataclass(frozen=True)
class Conversation:
    """A conversation reduced to its trunk.

    Result lists never contain a Conversation whose ``messages`` is empty;
    stages that could empty one drop it instead.
    """

    id: Optional[str]
    title: Optional[str]
    create_time: Optional[float]
    messages: Tuple[Message, ...] = field(default_factory=tuple)

    def with_messages(self, messages) -> "Conversation":
        return replace(self, messages=tuple(messages))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'create_time': self.create_time,
            'messages': [message.to_dict() for message in self.messages],
        }
