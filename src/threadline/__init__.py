"""
THREADLINE - trunk reconstruction for conversation export archives.

Turns conversation exports, stored as branching node graphs, into clean
linear per-conversation message lists ready for downstream indexing.
"""

__version__ = "0.1.0"

from .models import Conversation, Message
from .parser.parser import ThreadlineParser
from .preprocessor import PreprocessConfig
from .pipeline import ImportPipeline

__all__ = ["Conversation", "Message", "ThreadlineParser", "PreprocessConfig", "ImportPipeline"]
