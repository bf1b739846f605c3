"""Exception types raised across threadline."""


class ThreadlineError(ValueError):
    """Base class for threadline errors."""


class ArchiveFormatError(ThreadlineError):
    """Archive does not match the export contract (not a list of conversation objects)."""


class ConfigError(ThreadlineError):
    """Invalid preprocessing or environment configuration."""
