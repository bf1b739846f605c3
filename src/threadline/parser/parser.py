"""
ThreadlineParser: conversation export archive parsing.

Loads conversation export archives and reduces every conversation's
node graph to the trunk the user actually saw.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from ..exceptions import ArchiveFormatError
from ..models import Conversation
from .assembler import assemble_with_report

logger = logging.getLogger(__name__)


class ThreadlineParser:
    """Parses conversation exports into linear per-conversation message lists."""

    def __init__(self, output_dir: Optional[str] = None):
        """Initialize parser with output directory."""
        self.output_dir = Path(output_dir) if output_dir else Path.cwd()

    def load_archive(self, filepath: Union[str, Path]) -> List[Dict[str, Any]]:
        """Read a raw archive from disk.

        Raises:
            FileNotFoundError: if the file does not exist.
            ArchiveFormatError: if the file is not valid JSON.
        """
        logger.info(f"Loading archive: {filepath}")

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ArchiveFormatError(f"Invalid JSON in {filepath}: {e}") from e

    def parse_archive(self, raw_conversations: Sequence[Any]) -> List[Conversation]:
        """Parse already-decoded raw conversations."""
        conversations, _ = assemble_with_report(raw_conversations)
        logger.info(f"Parsed {len(conversations)} conversations")
        return conversations

    def parse_file(self, filepath: Union[str, Path]) -> List[Conversation]:
        """Load and parse an archive file."""
        return self.parse_archive(self.load_archive(filepath))

    def save_to_json(self, conversations: List[Conversation], output_filename: Optional[str] = None) -> str:
        """Save conversations to a JSON file and return its path.

        An empty list is still written, as an empty JSON array.
        """
        if not conversations:
            logger.warning("No conversations survived cleaning, writing an empty archive")

        if not output_filename:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_filename = f"cleaned_{timestamp}.json"

        output_path = Path(output_filename)
        if not output_path.is_absolute():
            output_path = self.output_dir / output_path.name

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump([conversation.to_dict() for conversation in conversations], f, indent=2)

        logger.info(f"Saved {len(conversations)} conversations to {output_path}")
        return str(output_path)
