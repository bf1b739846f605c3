"""Configuration management with environment variable support."""

import os
from pathlib import Path

from dotenv import load_dotenv

from ..exceptions import ConfigError
from ..preprocessor import PreprocessConfig

load_dotenv()

TRUE_VALUES = {'1', 'true', 'yes', 'on'}
FALSE_VALUES = {'0', 'false', 'no', 'off', ''}


def parse_bool(name: str, value: str) -> bool:
    """Interpret an environment string as a boolean."""
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}")


class Config:
    """Centralized configuration management."""

    @property
    def remove_code_blocks(self) -> bool:
        """Strip fenced code blocks from message content."""
        return parse_bool(
            "THREADLINE_REMOVE_CODE_BLOCKS",
            os.environ.get("THREADLINE_REMOVE_CODE_BLOCKS", "false")
        )

    @property
    def default_output_dir(self) -> Path:
        """Base output directory path."""
        return Path(os.environ.get("THREADLINE_OUTPUT_DIR", "output"))

    @property
    def log_level(self) -> str:
        """Application logging level."""
        return os.environ.get("THREADLINE_LOG_LEVEL", "INFO")

    def preprocess_config(self) -> PreprocessConfig:
        """Default preprocessing options from the environment."""
        return PreprocessConfig(remove_code_blocks=self.remove_code_blocks)

    def get_invalid_config(self) -> list[str]:
        """List environment keys holding unusable values."""
        invalid = []
        try:
            self.remove_code_blocks
        except ConfigError:
            invalid.append("THREADLINE_REMOVE_CODE_BLOCKS")
        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            invalid.append("THREADLINE_LOG_LEVEL")
        return invalid

    def validate(self) -> bool:
        """Check configuration values are usable."""
        return not self.get_invalid_config()
