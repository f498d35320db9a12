"""
Layer model of a hexagonal architecture.

Layers are immutable once built (see archguard.application.dsl for the
builders). Each exposes the verification procedures the orchestrator runs;
every procedure returns a ValidationResult.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from archguard.domain.interfaces import ClassGraphInterface
from archguard.domain.models import ValidationResult, combine_all
from archguard.rules import (
    DenyAnyDependencyRule,
    DenyDependencyRule,
    DenyEmptyPackageRule,
)


@dataclass(frozen=True)
class ArchitectureElement:
    """Base for layers rooted at a fully qualified base package."""

    base_package: str

    def deny_dependency(
        self, from_package: str, to_package: str, graph: ClassGraphInterface
    ) -> ValidationResult:
        return DenyDependencyRule(from_package, to_package).validate(graph)

    def deny_any_dependency(
        self,
        from_packages: Sequence[str],
        to_packages: Sequence[str],
        graph: ClassGraphInterface,
    ) -> ValidationResult:
        return DenyAnyDependencyRule(tuple(from_packages), tuple(to_packages)).validate(
            graph
        )

    def deny_empty_packages(
        self, packages: Sequence[str], graph: ClassGraphInterface
    ) -> ValidationResult:
        return combine_all(
            DenyEmptyPackageRule(package).validate(graph) for package in packages
        )


@dataclass(frozen=True)
class Adapters(ArchitectureElement):
    """
    Adapters layer: incoming (web, CLI, ...) and outgoing (persistence,
    messaging, ...) adapter packages, fully qualified.
    """

    incoming: tuple[str, ...] = ()
    outgoing: tuple[str, ...] = ()

    @property
    def all_packages(self) -> tuple[str, ...]:
        return self.incoming + self.outgoing

    def verify_no_empty_packages(self, graph: ClassGraphInterface) -> ValidationResult:
        return self.deny_empty_packages(self.all_packages, graph)

    def verify_no_cross_adapter_dependencies(
        self, graph: ClassGraphInterface
    ) -> ValidationResult:
        """Each adapter must be independent of every other adapter."""
        adapters = self.all_packages
        return combine_all(
            self.deny_dependency(first, second, graph)
            for first in adapters
            for second in adapters
            if first != second
        )

    def verify_no_dependency_on(
        self, package: str, graph: ClassGraphInterface
    ) -> ValidationResult:
        return self.deny_dependency(self.base_package, package, graph)


@dataclass(frozen=True)
class ApplicationLayer(ArchitectureElement):
    """
    Application layer: incoming ports (use cases), outgoing ports
    (persistence and other driven interfaces) and services.
    """

    incoming_ports: tuple[str, ...] = ()
    outgoing_ports: tuple[str, ...] = ()
    services: tuple[str, ...] = ()

    @property
    def all_packages(self) -> tuple[str, ...]:
        return self.incoming_ports + self.outgoing_ports + self.services

    def verify_no_empty_packages(self, graph: ClassGraphInterface) -> ValidationResult:
        return self.deny_empty_packages(self.all_packages, graph)

    def verify_no_dependency_on(
        self, package: str, graph: ClassGraphInterface
    ) -> ValidationResult:
        return self.deny_dependency(self.base_package, package, graph)

    def verify_ports_do_not_depend_on_each_other(
        self, graph: ClassGraphInterface
    ) -> ValidationResult:
        """Incoming and outgoing ports are checked in both directions."""
        return combine_all(
            [
                self.deny_any_dependency(
                    self.incoming_ports, self.outgoing_ports, graph
                ),
                self.deny_any_dependency(
                    self.outgoing_ports, self.incoming_ports, graph
                ),
            ]
        )
