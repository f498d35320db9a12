"""Click option decorators shared by archguard commands."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

import click


def config_option[F: Callable[..., Any]](func: F) -> F:
    """
    Decorator adding the --config option.

    Without it, commands look for archguard.json, archguard.toml, then a
    pyproject.toml with a [tool.archguard] table in the working directory.
    """

    @click.option(
        "--config",
        default=None,
        type=click.Path(exists=True, dir_okay=False),
        help="Path to archguard.json, archguard.toml or pyproject.toml",
    )
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def common_options[F: Callable[..., Any]](func: F) -> F:
    """
    Decorator adding the options of scanning commands.

    Options added:
        --config: Path to the architecture config
        --source: Source root overriding [scan] source_root
        --provider: Class graph provider overriding [scan] provider
        --log-file: Path to log file
        -v/--verbose: Enable verbose logging
    """

    @config_option
    @click.option(
        "--source",
        default=None,
        type=click.Path(file_okay=False),
        help="Directory holding the scanned packages (default: from config)",
    )
    @click.option(
        "--provider",
        default=None,
        help="Class graph provider name (default: from config, 'source')",
    )
    @click.option(
        "--log-file",
        default=None,
        type=click.Path(),
        help="Path to log file",
    )
    @click.option(
        "-v",
        "--verbose",
        is_flag=True,
        help="Enable verbose (DEBUG) logging to console",
    )
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
