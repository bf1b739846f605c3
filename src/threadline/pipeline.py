"""
Import pipeline for conversation export archives.

The ImportPipeline class runs the cleaning workflow: (1) reducing each
conversation's node graph to its trunk, (2) transforming message content,
(3) pruning messages and conversations left empty. Persistence and
enrichment are left to the caller.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import Config
from .models import Conversation
from .parser import ThreadlineParser
from .preprocessor import PreprocessConfig, filter_conversations, preprocess_conversations
from .stats import ImportStats

logger = logging.getLogger(__name__)


class ImportPipeline:
    """Conversation archive cleaning pipeline."""

    def __init__(self,
                 config: Optional[Config] = None,
                 output_dir: Optional[str] = None):
        """Initialize the pipeline.

        Args:
            config: Configuration object. If None, creates a new Config instance.
            output_dir: Optional output directory for JSON files
        """
        self.config = config or Config()
        self.parser = ThreadlineParser(
            output_dir=output_dir or str(self.config.default_output_dir)
        )
        self.last_stats = ImportStats()

    def process_archive(self,
                        raw_conversations: Sequence[Any],
                        preprocess_config: Optional[PreprocessConfig] = None
                        ) -> Tuple[List[Conversation], ImportStats]:
        """Clean an already-decoded archive.

        Args:
            raw_conversations: decoded archive, a list of raw conversation objects
            preprocess_config: content options; defaults to the environment config

        Returns:
            Cleaned conversations and the import statistics

        Raises:
            ArchiveFormatError: if the archive is not a list of objects
        """
        preprocess_config = preprocess_config or self.config.preprocess_config()

        parsed = self.parser.parse_archive(raw_conversations)
        processed = preprocess_conversations(parsed, preprocess_config)
        cleaned = filter_conversations(processed)

        stats = ImportStats.collect(len(raw_conversations), len(parsed), cleaned)
        self.last_stats = stats
        logger.info(
            f"Import complete: {stats.conversations}/{stats.raw_conversations} conversations, "
            f"{stats.messages} messages, ~{stats.estimated_tokens} tokens"
        )
        return cleaned, stats

    def process_file(self,
                     file_path: str,
                     preprocess_config: Optional[PreprocessConfig] = None,
                     save_output: bool = False) -> List[Conversation]:
        """Clean a single archive file.

        Args:
            file_path: export file path
            preprocess_config: content options; defaults to the environment config
            save_output: write the cleaned conversations next to the output dir

        Returns:
            Cleaned conversations
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Input file not found: {file_path}")

        logger.info(f"Processing file: {file_path}")
        raw_conversations = self.parser.load_archive(file_path)
        conversations, _ = self.process_archive(raw_conversations, preprocess_config)

        if save_output:
            self.parser.save_to_json(conversations, file_path.stem + '_cleaned.json')

        return conversations

    def process_files(self,
                      file_paths: List[str],
                      preprocess_config: Optional[PreprocessConfig] = None,
                      save_output: bool = False) -> Dict[str, List[Conversation]]:
        """Clean multiple archive files.

        A file that fails is logged and maps to an empty list; the rest
        still run.

        Returns:
            Dictionary mapping file paths to cleaned conversations
        """
        results = {}

        for file_path in file_paths:
            try:
                results[file_path] = self.process_file(file_path, preprocess_config, save_output)
                logger.info(f"Successfully processed {file_path}: {len(results[file_path])} conversations")
            except (OSError, ValueError) as e:
                logger.error(f"Failed to process {file_path}: {e}")
                results[file_path] = []

        total_conversations = sum(len(conversations) for conversations in results.values())
        logger.info(f"Batch processing complete. Total conversations processed: {total_conversations}")

        return results
