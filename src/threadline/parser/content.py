"""Flatten raw message payloads into plain text."""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SYSTEM_ROLE = 'system'


def message_role(message: Dict[str, Any]) -> Optional[str]:
    """Return the author role of a raw message, or None when missing."""
    author = message.get('author')
    if not isinstance(author, dict):
        return None
    return author.get('role')


def join_parts(parts: Any) -> str:
    """Concatenate message parts without a separator.

    String parts are used as-is. Mapping parts (multimodal exports) contribute
    their ``text`` field; anything else contributes nothing.
    """
    if not isinstance(parts, list):
        return ""

    text = ""
    for part in parts:
        if isinstance(part, str):
            text += part
        elif isinstance(part, dict) and isinstance(part.get('text'), str):
            text += part['text']
    return text


def extract_message_text(message: Optional[Dict[str, Any]]) -> Optional[str]:
    """Return the text of a message eligible for the trunk, else None.

    A message is eligible when its author is not ``system``, it has a
    ``content.parts`` list, and the parts join to a non-empty string.
    """
    if not isinstance(message, dict):
        return None

    role = message_role(message)
    if role is None or role == SYSTEM_ROLE:
        return None

    content = message.get('content')
    if not isinstance(content, dict) or content.get('parts') is None:
        return None

    text = join_parts(content['parts'])
    return text or None
