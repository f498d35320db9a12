"""Rich console output for the archguard command line."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from archguard.application import HexagonalArchitecture

console = Console()
error_console = Console(stderr=True)


def print_scan_header(base_package: str, modules: int, provider: str) -> None:
    """Announce what is about to be verified."""
    content = Text(f"archguard check: {base_package}", style="bold blue")
    content.append(f"\n{modules} modules scanned by the '{provider}' provider", style="dim")
    console.print(Panel(content, expand=False))


def print_declaration_header(base_package: str, config_path: Path) -> None:
    content = Text(f"archguard layers: {base_package}", style="bold blue")
    content.append(f"\ndeclared in {config_path}", style="dim")
    console.print(Panel(content, expand=False))


def print_error(message: str, hint: str | None = None) -> None:
    """Configuration and provider problems go to stderr, never stdout."""
    content = Text(message, style="bold red")
    if hint:
        content.append(f"\n\nHint: {hint}", style="yellow")
    error_console.print(Panel(content, title="archguard error", border_style="red"))


def print_conforms(base_package: str) -> None:
    console.print(
        Panel(
            f"Architecture of {base_package} conforms",
            title="OK",
            border_style="green",
            expand=False,
        )
    )


def print_report(violations: Sequence[str], base_package: str) -> None:
    """
    Print the violation table followed by a summary panel.

    Each violation reads ``"<rule>: <detail>"``; the rule and the detail get
    separate columns.
    """
    table = Table(show_header=True, box=None)
    table.add_column("#", style="cyan", width=4)
    table.add_column("Rule", style="yellow")
    table.add_column("Violation", style="red")

    for i, violation in enumerate(violations, 1):
        rule, _, detail = violation.partition(": ")
        table.add_row(str(i), rule, detail or rule)

    console.print(table)

    count = len(violations)
    summary = Text(
        f"{count} architecture violation{'s' if count != 1 else ''}", style="bold red"
    )
    summary.append(f"\nin {base_package}", style="dim")
    console.print(Panel(summary, title="Violations", border_style="red"))


def print_architecture(architecture: HexagonalArchitecture) -> None:
    """Print the declared layers and their packages."""
    table = Table(show_header=True, box=None)
    table.add_column("Layer", style="cyan")
    table.add_column("Role", style="magenta")
    table.add_column("Package")

    for package in architecture.domain_packages:
        table.add_row("domain", "", package)

    adapters = architecture.adapters
    if adapters is not None:
        table.add_row("adapters", "base", adapters.base_package)
        for package in adapters.incoming:
            table.add_row("", "incoming", package)
        for package in adapters.outgoing:
            table.add_row("", "outgoing", package)

    application = architecture.application_layer
    if application is not None:
        table.add_row("application", "base", application.base_package)
        for package in application.incoming_ports:
            table.add_row("", "incoming port", package)
        for package in application.outgoing_ports:
            table.add_row("", "outgoing port", package)
        for package in application.services:
            table.add_row("", "service", package)

    if architecture.configuration_package is not None:
        table.add_row("configuration", "", architecture.configuration_package)

    console.print(table)

    if architecture.custom_rules:
        console.print("\n[bold]Custom rules:[/bold]")
        for rule in architecture.custom_rules:
            console.print(f"  {rule.description}")
