"""
archguard command line.

Usage:
    archguard check
    archguard check --config archguard.json --source src
    archguard check --provider source -v --log-file archguard.log
    archguard describe --config pyproject.toml

Exit codes:
    0: every architecture rule holds
    1: architecture violations were found
    2: configuration or provider error
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from archguard import __version__
from archguard.domain.exceptions import ConfigurationError, ProviderError
from archguard.infrastructure.config import (
    ArchitectureConfig,
    find_config,
    load_architecture_config,
)
from archguard.infrastructure.registry import ProviderRegistry

from .console import (
    print_architecture,
    print_conforms,
    print_declaration_header,
    print_error,
    print_report,
    print_scan_header,
)
from .logging_setup import setup_logging
from .options import common_options, config_option

EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def _load(config: str | None) -> tuple[Path, ArchitectureConfig]:
    config_path = Path(config) if config else find_config(Path.cwd())
    return config_path, load_architecture_config(config_path)


@click.group()
@click.version_option(__version__, prog_name="archguard")
def cli() -> None:
    """archguard - architecture conformance checks for Python packages."""


@cli.command()
@common_options
def check(
    config: str | None,
    source: str | None,
    provider: str | None,
    log_file: str | None,
    verbose: bool,
) -> None:
    """Scan the configured packages and verify the architecture."""
    logger = setup_logging("archguard", log_file, verbose)

    try:
        config_path, arch_config = _load(config)
        logger.debug(f"Loaded architecture config from: {config_path}")
        architecture = arch_config.to_architecture()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print_error(str(e), "Check archguard.json or the [tool.archguard] table.")
        sys.exit(EXIT_ERROR)

    provider_name = provider or arch_config.scan.provider
    if source:
        source_root = Path(source)
    else:
        source_root = config_path.parent / arch_config.scan.source_root
    try:
        graph_provider = ProviderRegistry.create(provider_name, source_root=source_root)
    except (KeyError, TypeError) as e:
        message = e.args[0] if e.args else str(e)
        logger.error(message)
        print_error(
            message, f"Available providers: {', '.join(ProviderRegistry.available())}"
        )
        sys.exit(EXIT_ERROR)

    try:
        graph = graph_provider.import_packages(*arch_config.scan_packages())
        print_scan_header(architecture.base_package, len(graph), provider_name)
        result = architecture.validate(graph)
    except ProviderError as e:
        logger.error(f"Provider error: {e}")
        print_error(str(e), f"Check that {source_root} holds the scanned packages.")
        sys.exit(EXIT_ERROR)

    if result.is_success:
        print_conforms(architecture.base_package)
        return

    print_report(result.violations, architecture.base_package)
    sys.exit(EXIT_VIOLATIONS)


@cli.command()
@config_option
def describe(config: str | None) -> None:
    """Print the declared layer model without scanning."""
    try:
        config_path, arch_config = _load(config)
        architecture = arch_config.to_architecture()
    except ConfigurationError as e:
        print_error(str(e), "Check archguard.json or the [tool.archguard] table.")
        sys.exit(EXIT_ERROR)

    print_declaration_header(architecture.base_package, config_path)
    print_architecture(architecture)


if __name__ == "__main__":
    cli()
