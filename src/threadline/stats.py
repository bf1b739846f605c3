"""Import statistics and rough token estimates for cleaned output."""

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable

from .models import Conversation

CHARS_PER_TOKEN = 3.5
MESSAGE_OVERHEAD_TOKENS = 10
CONVERSATION_OVERHEAD_TOKENS = 20


def estimate_tokens_from_text(text: str) -> int:
    # English averages ~4 chars per token; 3.5 leaves a buffer for formatting
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def estimate_tokens_for_conversation(conversation: Conversation) -> int:
    return CONVERSATION_OVERHEAD_TOKENS + sum(
        MESSAGE_OVERHEAD_TOKENS + estimate_tokens_from_text(message.content)
        for message in conversation.messages
    )


@dataclass
class ImportStats:
    """Counts describing one archive import."""

    raw_conversations: int = 0
    parsed_conversations: int = 0
    dropped_by_parser: int = 0
    dropped_by_filter: int = 0
    conversations: int = 0
    messages: int = 0
    estimated_tokens: int = 0

    @classmethod
    def collect(cls, raw_count: int, parsed_count: int,
                conversations: Iterable[Conversation]) -> "ImportStats":
        conversations = list(conversations)
        return cls(
            raw_conversations=raw_count,
            parsed_conversations=parsed_count,
            dropped_by_parser=raw_count - parsed_count,
            dropped_by_filter=parsed_count - len(conversations),
            conversations=len(conversations),
            messages=sum(len(c.messages) for c in conversations),
            estimated_tokens=sum(estimate_tokens_for_conversation(c) for c in conversations),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
