from .cli import import_cli, main, setup_logging

__all__ = ["import_cli", "main", "setup_logging"]
