"""Content transformations applied to parsed conversations."""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..exceptions import ConfigError
from ..models import Conversation, Message

logger = logging.getLogger(__name__)

# Shortest span between two triple-backtick markers, across newlines.
CODE_BLOCK_PATTERN = re.compile(r'```.*?```', re.DOTALL)
WHITESPACE_PATTERN = re.compile(r'\s+')


@dataclass(frozen=True)
class PreprocessConfig:
    """Options for content preprocessing. ``remove_code_blocks`` is the only one."""

    remove_code_blocks: bool = False

    def __post_init__(self):
        if not isinstance(self.remove_code_blocks, bool):
            raise ConfigError(
                f"removeCodeBlocks must be a boolean, got {type(self.remove_code_blocks).__name__}"
            )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PreprocessConfig":
        """Build from a caller payload such as ``{"removeCodeBlocks": true}``.

        Missing payloads and missing keys fall back to the defaults.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Preprocess config must be an object, got {type(data).__name__}")
        return cls(remove_code_blocks=data.get('removeCodeBlocks', False))

    def to_dict(self) -> Dict[str, Any]:
        return {'removeCodeBlocks': self.remove_code_blocks}


def remove_code_blocks(content: str) -> str:
    """Delete every fenced code block, fences included, without a placeholder."""
    return CODE_BLOCK_PATTERN.sub('', content)


def normalize_whitespace(content: str) -> str:
    """Collapse whitespace runs to single spaces and trim the ends.

    Standalone primitive; ``preprocess_conversation`` does not apply it.
    """
    return WHITESPACE_PATTERN.sub(' ', content).strip()


def preprocess_message(message: Message, config: PreprocessConfig) -> Message:
    content = message.content
    if config.remove_code_blocks:
        content = remove_code_blocks(content)
    return message.with_content(content)


def preprocess_conversation(conversation: Conversation,
                            config: Optional[PreprocessConfig] = None) -> Conversation:
    """Transform message contents, keeping message count and identity fields."""
    config = config or PreprocessConfig()
    return conversation.with_messages(
        preprocess_message(message, config) for message in conversation.messages
    )


def preprocess_conversations(conversations: Iterable[Conversation],
                             config: Optional[PreprocessConfig] = None) -> List[Conversation]:
    config = config or PreprocessConfig()
    logger.debug(f"Preprocessing with {config.to_dict()}")
    return [preprocess_conversation(conversation, config) for conversation in conversations]
