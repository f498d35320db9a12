"""
Command line interface for archguard.

- main: the ``archguard`` click group (check, describe)
- options: shared click options
- console: rich output helpers
- logging_setup: console + file logging
"""

from .logging_setup import setup_logging
from .main import cli

__all__ = ["cli", "setup_logging"]
