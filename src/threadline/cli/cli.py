"""
Command-line interface for threadline.

Cleans conversation export archives into linear message lists and
writes them as JSON.
"""

import argparse
import logging
import sys
from pathlib import Path

from ..config import Config
from ..exceptions import ThreadlineError
from ..pipeline import ImportPipeline
from ..preprocessor import PreprocessConfig

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging with specified level."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Clean conversation export archives into linear message lists.'
    )
    parser.add_argument(
        'input_files',
        nargs='+',
        help='Input archive JSON files'
    )
    parser.add_argument(
        '-o', '--output-dir',
        help='Output directory for cleaned files'
    )
    parser.add_argument(
        '--remove-code-blocks',
        action='store_true',
        default=None,
        help='Strip fenced code blocks from message content'
    )
    parser.add_argument(
        '--log-level',
        default=config.log_level.upper(),
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Set logging level'
    )
    return parser


def import_cli(argv=None) -> int:
    """Clean each input archive and write ``<stem>_cleaned.json``.

    Returns the process exit code: 0 when every file was written, 1 otherwise.
    """
    config = Config()
    if not config.validate():
        invalid = config.get_invalid_config()
        logger.error(f"Invalid configuration: {', '.join(invalid)}")
        return 1

    args = build_parser(config).parse_args(argv)
    setup_logging(args.log_level)

    if args.remove_code_blocks:
        preprocess_config = PreprocessConfig(remove_code_blocks=True)
    else:
        preprocess_config = config.preprocess_config()

    pipeline = ImportPipeline(config=config, output_dir=args.output_dir)

    failures = 0
    for input_file in args.input_files:
        input_path = Path(input_file)
        if not input_path.exists():
            logger.error(f"Input file not found: {input_file}")
            failures += 1
            continue

        try:
            pipeline.process_file(str(input_path), preprocess_config, save_output=True)
        except ThreadlineError as e:
            logger.error(f"Failed to import {input_file}: {e}")
            failures += 1

    return 1 if failures else 0


def main() -> None:
    sys.exit(import_cli())


if __name__ == '__main__':
    main()
