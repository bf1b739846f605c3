"""Apply the trunk parser across a whole archive."""

import logging
from typing import Any, List, Tuple

from ..exceptions import ArchiveFormatError
from ..models import Conversation
from .trunk import parse_conversation

logger = logging.getLogger(__name__)


def validate_archive(raw_conversations: Any) -> None:
    """Raise ArchiveFormatError unless the archive is a list of objects."""
    if not isinstance(raw_conversations, list):
        raise ArchiveFormatError(
            f"Archive must be a list of conversations, got {type(raw_conversations).__name__}"
        )

    for index, entry in enumerate(raw_conversations):
        if not isinstance(entry, dict):
            raise ArchiveFormatError(
                f"Archive entry {index} is {type(entry).__name__}, expected an object"
            )


def assemble_with_report(raw_conversations: List[Any]) -> Tuple[List[Conversation], int]:
    """Parse every conversation, returning survivors and the dropped count."""
    validate_archive(raw_conversations)

    conversations = []
    for data in raw_conversations:
        conversation = parse_conversation(data)
        if conversation is not None:
            conversations.append(conversation)

    dropped = len(raw_conversations) - len(conversations)
    if dropped:
        logger.info(f"Dropped {dropped} of {len(raw_conversations)} conversations without trunk messages")

    return conversations, dropped


def assemble_conversations(raw_conversations: List[Any]) -> List[Conversation]:
    """Parse every conversation, keeping input order and omitting empty ones."""
    conversations, _ = assemble_with_report(raw_conversations)
    return conversations
