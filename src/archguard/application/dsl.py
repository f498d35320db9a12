"""
Builder DSL for hexagonal architectures.

Each layer has its own builder type, so only the calls that make sense
for a layer are available on it. Nested configuration runs synchronously,
either through a callback or a ``with`` block:

    builder = HexagonalArchitectureBuilder("com.example.app")
    builder.domain("domain")
    with builder.adapters("adapter") as adapters:
        adapters.incoming("in.web")
        adapters.outgoing("out.persistence")
    builder.application(
        "application",
        lambda app: app.services("service")
        .incoming_ports("port.in")
        .outgoing_ports("port.out"),
    )
    builder.configuration("configuration")
    builder.build().check(graph)
"""

from collections.abc import Callable
from types import TracebackType
from typing import Self

from archguard.application.architecture import HexagonalArchitecture
from archguard.application.layers import Adapters, ApplicationLayer
from archguard.domain.exceptions import ConfigurationError
from archguard.domain.interfaces import ClassGraphInterface, ValidationRule
from archguard.domain.packages import (
    PackageSet,
    qualify,
    resides_in,
    validate_package,
)


def _reject_overlap(
    package: str, role: str, others: PackageSet, other_role: str
) -> None:
    # Incoming and outgoing ports must be disjoint package trees
    for other in others:
        if resides_in(package, other) or resides_in(other, package):
            raise ConfigurationError(
                f"{role.capitalize()} port {package} overlaps {other_role} port {other}"
            )


class _LayerBuilder:
    """Shared behaviour of nested layer builders."""

    def __init__(self, base_package: str):
        self.base_package = validate_package(base_package)

    def _qualify(self, relative: str) -> str:
        return qualify(self.base_package, relative)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        return None


class AdaptersBuilder(_LayerBuilder):
    """Configures the adapters layer."""

    def __init__(self, base_package: str):
        super().__init__(base_package)
        self._incoming = PackageSet()
        self._outgoing = PackageSet()

    def incoming(self, package: str) -> Self:
        """Register an incoming adapter package (relative to the layer)."""
        self._incoming.add(self._qualify(package))
        return self

    def outgoing(self, package: str) -> Self:
        """Register an outgoing adapter package (relative to the layer)."""
        self._outgoing.add(self._qualify(package))
        return self

    def build(self) -> Adapters:
        return Adapters(
            base_package=self.base_package,
            incoming=self._incoming.as_tuple(),
            outgoing=self._outgoing.as_tuple(),
        )


class ApplicationLayerBuilder(_LayerBuilder):
    """Configures the application layer."""

    def __init__(self, base_package: str):
        super().__init__(base_package)
        self._incoming_ports = PackageSet()
        self._outgoing_ports = PackageSet()
        self._services = PackageSet()

    def incoming_ports(self, package: str) -> Self:
        """
        Raises:
            ConfigurationError: If the package overlaps an outgoing port
        """
        port = self._qualify(package)
        _reject_overlap(port, "incoming", self._outgoing_ports, "outgoing")
        self._incoming_ports.add(port)
        return self

    def outgoing_ports(self, package: str) -> Self:
        """
        Raises:
            ConfigurationError: If the package overlaps an incoming port
        """
        port = self._qualify(package)
        _reject_overlap(port, "outgoing", self._incoming_ports, "incoming")
        self._outgoing_ports.add(port)
        return self

    def services(self, package: str) -> Self:
        self._services.add(self._qualify(package))
        return self

    def build(self) -> ApplicationLayer:
        return ApplicationLayer(
            base_package=self.base_package,
            incoming_ports=self._incoming_ports.as_tuple(),
            outgoing_ports=self._outgoing_ports.as_tuple(),
            services=self._services.as_tuple(),
        )


class HexagonalArchitectureBuilder:
    """
    Top-level builder for a HexagonalArchitecture.

    Domain, adapters, application and configuration may each be declared
    at most once. Package names are relative to ``base_package``.
    """

    def __init__(self, base_package: str):
        self.base_package = validate_package(base_package)
        self._domain: PackageSet | None = None
        self._adapters: AdaptersBuilder | None = None
        self._application: ApplicationLayerBuilder | None = None
        self._configuration: str | None = None
        self._rules: list[ValidationRule] = []

    def domain(self, *packages: str) -> Self:
        """Declare the domain layer as one or more relative packages."""
        if self._domain is not None:
            raise ConfigurationError("Domain layer already declared")
        if not packages:
            raise ConfigurationError("Domain layer needs at least one package")
        self._domain = PackageSet(
            qualify(self.base_package, package) for package in packages
        )
        return self

    def adapters(
        self,
        package: str,
        configure: Callable[[AdaptersBuilder], object] | None = None,
    ) -> AdaptersBuilder:
        """
        Declare the adapters layer.

        Args:
            package: Adapters base package, relative to the base package
            configure: Optional callback receiving the AdaptersBuilder

        Returns:
            The AdaptersBuilder (also usable as a context manager)
        """
        if self._adapters is not None:
            raise ConfigurationError("Adapters layer already declared")
        self._adapters = AdaptersBuilder(qualify(self.base_package, package))
        if configure is not None:
            configure(self._adapters)
        return self._adapters

    def application(
        self,
        package: str,
        configure: Callable[[ApplicationLayerBuilder], object] | None = None,
    ) -> ApplicationLayerBuilder:
        """
        Declare the application layer.

        Args:
            package: Application base package, relative to the base package
            configure: Optional callback receiving the ApplicationLayerBuilder

        Returns:
            The ApplicationLayerBuilder (also usable as a context manager)
        """
        if self._application is not None:
            raise ConfigurationError("Application layer already declared")
        self._application = ApplicationLayerBuilder(
            qualify(self.base_package, package)
        )
        if configure is not None:
            configure(self._application)
        return self._application

    def configuration(self, package: str) -> Self:
        """Declare the configuration package."""
        if self._configuration is not None:
            raise ConfigurationError("Configuration package already declared")
        self._configuration = qualify(self.base_package, package)
        return self

    def rule(self, *rules: ValidationRule) -> Self:
        """Attach custom rules, run after the layer checks."""
        self._rules.extend(rules)
        return self

    def build(self) -> HexagonalArchitecture:
        return HexagonalArchitecture(
            base_package=self.base_package,
            domain_packages=self._domain.as_tuple() if self._domain else (),
            adapters=self._adapters.build() if self._adapters else None,
            application_layer=(
                self._application.build() if self._application else None
            ),
            configuration_package=self._configuration,
            custom_rules=tuple(self._rules),
        )


def hexagonal_architecture(
    base_package: str,
    configure: Callable[[HexagonalArchitectureBuilder], object] | None = None,
) -> HexagonalArchitecture:
    """
    Declare a hexagonal architecture in one call.

    Example:
        architecture = hexagonal_architecture(
            "com.example.app",
            lambda arch: (
                arch.domain("domain"),
                arch.adapters("adapter").incoming("in.web"),
                arch.configuration("configuration"),
            ),
        )
    """
    builder = HexagonalArchitectureBuilder(base_package)
    if configure is not None:
        configure(builder)
    return builder.build()


def verify_architecture(
    base_package: str,
    graph: ClassGraphInterface,
    configure: Callable[[HexagonalArchitectureBuilder], object],
) -> None:
    """
    Declare and check a hexagonal architecture in one call.

    Raises:
        ArchitectureViolation: If any rule is violated
        ConfigurationError: If the declaration is malformed
    """
    hexagonal_architecture(base_package, configure).check(graph)
