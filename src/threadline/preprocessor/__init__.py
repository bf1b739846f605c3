"""Content cleaning and empty-record filtering for parsed conversations."""

from .preprocessor import (
    PreprocessConfig,
    normalize_whitespace,
    preprocess_conversation,
    preprocess_conversations,
    remove_code_blocks,
)
from .filters import filter_conversations, filter_empty_messages

__all__ = [
    "PreprocessConfig",
    "filter_conversations",
    "filter_empty_messages",
    "normalize_whitespace",
    "preprocess_conversation",
    "preprocess_conversations",
    "remove_code_blocks",
]
