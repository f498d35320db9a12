"""
Generic layered-architecture DSL.

Where the hexagonal template fixes the layer set, this DSL lets callers
name arbitrary layers and state which may or may not depend on which:

    spec = architecture(
        "com.example.app",
        lambda arch: (
            arch.domain().cannot_depend_on("application", "adapters"),
            arch.application()
            .can_depend_on("domain")
            .sub_package("port.in")
            .sub_package("port.out"),
            arch.adapters().sub_package("in.web").sub_package("out.persistence"),
        ),
    )
    spec.check(graph)
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from types import TracebackType
from typing import Self

from archguard.domain.exceptions import ConfigurationError
from archguard.domain.interfaces import ClassGraphInterface, ValidationRule
from archguard.domain.models import ValidationResult, combine_all
from archguard.domain.packages import qualify, validate_package
from archguard.rules import (
    DenyDependencyRule,
    DenyEmptyPackageRule,
    MutualIndependenceRule,
)

logger = logging.getLogger("archguard.layered")


@dataclass(frozen=True)
class LayerSpec:
    """A named layer, its package, sub-packages and dependency permissions."""

    name: str
    package_name: str
    sub_packages: tuple[str, ...] = ()
    allowed_dependencies: tuple[str, ...] = ()
    forbidden_dependencies: tuple[str, ...] = ()

    @property
    def all_packages(self) -> tuple[str, ...]:
        return (self.package_name,) + tuple(
            f"{self.package_name}.{sub}" for sub in self.sub_packages
        )


@dataclass(frozen=True)
class ArchitectureSpec:
    """
    A built layered architecture.

    Rules are derived in a fixed order: per layer (declaration order) its
    forbidden dependencies then its non-empty packages; then layer
    independence rules; then custom rules.
    """

    base_package: str
    layers: tuple[LayerSpec, ...] = ()
    independent_layers: tuple[tuple[str, ...], ...] = ()
    custom_rules: tuple[ValidationRule, ...] = ()

    def layer(self, name: str) -> LayerSpec:
        for layer in self.layers:
            if layer.name == name:
                return layer
        raise KeyError(f"Unknown layer: {name}")

    def forbidden_layers(self, layer: LayerSpec) -> list[str]:
        """
        Layers ``layer`` must not depend on.

        Explicit cannot_depend_on entries come first. When can_depend_on
        was used, every other declared layer not listed is forbidden too.
        """
        forbidden = list(layer.forbidden_dependencies)
        if layer.allowed_dependencies:
            for other in self.layers:
                if (
                    other.name != layer.name
                    and other.name not in layer.allowed_dependencies
                    and other.name not in forbidden
                ):
                    forbidden.append(other.name)
        return forbidden

    def rules(self) -> list[ValidationRule]:
        derived: list[ValidationRule] = []
        for layer in self.layers:
            for target in self.forbidden_layers(layer):
                derived.append(
                    DenyDependencyRule(
                        layer.package_name, self.layer(target).package_name
                    )
                )
            for package in layer.all_packages:
                derived.append(DenyEmptyPackageRule(package))
        for names in self.independent_layers:
            derived.append(
                MutualIndependenceRule(
                    tuple(self.layer(name).package_name for name in names)
                )
            )
        derived.extend(self.custom_rules)
        return derived

    def validate(self, graph: ClassGraphInterface) -> ValidationResult:
        rules = self.rules()
        logger.info(
            "Verifying %d layers of %s (%d rules)",
            len(self.layers),
            self.base_package,
            len(rules),
        )
        return combine_all(rule.validate(graph) for rule in rules)

    def check(self, graph: ClassGraphInterface) -> None:
        """
        Raises:
            ArchitectureViolation: One consolidated report of every violation
        """
        self.validate(graph).raise_for_failure(
            f"layered architecture of {self.base_package}"
        )


class LayerBuilder:
    """Configures one layer of an ArchitectureBuilder."""

    def __init__(self, name: str, package_name: str):
        self.name = name
        self.package_name = validate_package(package_name)
        self._sub_packages: list[str] = []
        self._allowed: list[str] = []
        self._forbidden: list[str] = []

    def sub_package(self, name: str) -> Self:
        validate_package(name)
        if name in self._sub_packages:
            raise ConfigurationError(
                f"Sub-package {name} already declared in layer {self.name}"
            )
        self._sub_packages.append(name)
        return self

    def can_depend_on(self, *layers: str) -> Self:
        """Allow dependencies on these layers; all others become forbidden."""
        self._allowed.extend(layer for layer in layers if layer not in self._allowed)
        return self

    def cannot_depend_on(self, *layers: str) -> Self:
        self._forbidden.extend(
            layer for layer in layers if layer not in self._forbidden
        )
        return self

    def build(self) -> LayerSpec:
        conflicting = set(self._allowed) & set(self._forbidden)
        if conflicting:
            raise ConfigurationError(
                f"Layer {self.name} both allows and forbids: "
                f"{', '.join(sorted(conflicting))}"
            )
        return LayerSpec(
            name=self.name,
            package_name=self.package_name,
            sub_packages=tuple(self._sub_packages),
            allowed_dependencies=tuple(self._allowed),
            forbidden_dependencies=tuple(self._forbidden),
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        return None


class ArchitectureBuilder:
    """Top-level builder for an ArchitectureSpec."""

    def __init__(self, base_package: str):
        self.base_package = validate_package(base_package)
        self._layers: dict[str, LayerBuilder] = {}
        self._independent: list[tuple[str, ...]] = []
        self._rules: list[ValidationRule] = []

    def layer(
        self,
        name: str,
        package: str | None = None,
        configure: Callable[[LayerBuilder], object] | None = None,
    ) -> LayerBuilder:
        """
        Declare a layer.

        Args:
            name: Layer name, used by can_depend_on / cannot_depend_on
            package: Package relative to the base package (defaults to name)
            configure: Optional callback receiving the LayerBuilder

        Raises:
            ConfigurationError: If a layer with this name already exists
        """
        if name in self._layers:
            raise ConfigurationError(f"Layer already declared: {name}")
        builder = LayerBuilder(name, qualify(self.base_package, package or name))
        self._layers[name] = builder
        if configure is not None:
            configure(builder)
        return builder

    def domain(
        self,
        package: str = "domain",
        configure: Callable[[LayerBuilder], object] | None = None,
    ) -> LayerBuilder:
        return self.layer("domain", package, configure)

    def application(
        self,
        package: str = "application",
        configure: Callable[[LayerBuilder], object] | None = None,
    ) -> LayerBuilder:
        return self.layer("application", package, configure)

    def adapters(
        self,
        package: str = "adapters",
        configure: Callable[[LayerBuilder], object] | None = None,
    ) -> LayerBuilder:
        return self.layer("adapters", package, configure)

    def independent(self, *layer_names: str) -> Self:
        """Forbid dependencies between any two of the named layers."""
        if len(layer_names) < 2:
            raise ConfigurationError("Independence needs at least two layers")
        self._independent.append(tuple(layer_names))
        return self

    def rule(self, *rules: ValidationRule) -> Self:
        self._rules.extend(rules)
        return self

    def build(self) -> ArchitectureSpec:
        """
        Raises:
            ConfigurationError: If any layer reference names an undeclared
                layer, or a layer forbids dependencies on itself
        """
        layers = tuple(builder.build() for builder in self._layers.values())
        for layer in layers:
            if layer.name in layer.forbidden_dependencies:
                raise ConfigurationError(
                    f"Layer {layer.name} cannot forbid dependencies on itself"
                )
            for reference in layer.allowed_dependencies + layer.forbidden_dependencies:
                self._require_layer(reference, f"layer {layer.name}")
        for names in self._independent:
            for name in names:
                self._require_layer(name, "independence rule")
        return ArchitectureSpec(
            base_package=self.base_package,
            layers=layers,
            independent_layers=tuple(self._independent),
            custom_rules=tuple(self._rules),
        )

    def _require_layer(self, name: str, referenced_by: str) -> None:
        if name not in self._layers:
            raise ConfigurationError(
                f"Unknown layer '{name}' referenced by {referenced_by}"
            )


def architecture(
    base_package: str,
    configure: Callable[[ArchitectureBuilder], object] | None = None,
) -> ArchitectureSpec:
    """Declare a layered architecture in one call."""
    builder = ArchitectureBuilder(base_package)
    if configure is not None:
        configure(builder)
    return builder.build()
