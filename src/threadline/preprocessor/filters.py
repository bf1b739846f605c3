"""Prune messages and conversations emptied by preprocessing."""

import logging
from typing import Iterable, List, Optional

from ..models import Conversation

logger = logging.getLogger(__name__)


def is_blank(content: str) -> bool:
    return content.strip() == ''


def filter_empty_messages(conversation: Conversation) -> Optional[Conversation]:
    """Drop blank messages; return None if none remain."""
    messages = [message for message in conversation.messages if not is_blank(message.content)]
    if not messages:
        return None
    return conversation.with_messages(messages)


def filter_conversations(conversations: Iterable[Conversation]) -> List[Conversation]:
    """Apply message filtering and drop conversations left empty.

    Must run after content transformation so that messages consisting only
    of removed code blocks are pruned.
    """
    results = []
    dropped = 0

    for conversation in conversations:
        filtered = filter_empty_messages(conversation)
        if filtered is None:
            dropped += 1
            logger.debug(f"Conversation {conversation.id} has no content after preprocessing")
            continue
        results.append(filtered)

    if dropped:
        logger.info(f"Filtered out {dropped} empty conversations")

    return results
