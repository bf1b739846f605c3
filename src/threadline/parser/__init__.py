"""
Conversation export parsing.

Reconstructs the visible trunk of each conversation from the export's
node graph, dropping alternate branches and system messages.
"""

from .parser import ThreadlineParser
from .assembler import assemble_conversations, assemble_with_report
from .trunk import parse_conversation

__all__ = [
    "ThreadlineParser",
    "assemble_conversations",
    "assemble_with_report",
    "parse_conversation",
]
