"""
archguard: architecture conformance checks for Python packages.

Declares the intended layering of a code base (hexagonal or freely
layered), scans its import graph and reports every dependency that
crosses a forbidden boundary.

Example:
    from archguard import SourceTreeClassGraphProvider, hexagonal_architecture

    graph = SourceTreeClassGraphProvider("src").import_packages("app")
    architecture = hexagonal_architecture(
        "app",
        lambda arch: (
            arch.domain("domain"),
            arch.adapters("adapter").incoming("inbound.web").outgoing("outbound.db"),
            arch.application("application").services("service"),
            arch.configuration("configuration"),
        ),
    )
    architecture.check(graph)
"""

# Application layer (architecture models and DSLs)
from archguard.application import (
    Adapters,
    ApplicationLayer,
    ArchitectureBuilder,
    ArchitectureSpec,
    HexagonalArchitecture,
    HexagonalArchitectureBuilder,
    LayerSpec,
    architecture,
    hexagonal_architecture,
    verify_architecture,
)

# Domain exceptions
from archguard.domain.exceptions import (
    ArchitectureViolation,
    ConfigurationError,
    ProviderError,
)

# Domain interfaces (for type hints and custom implementations)
from archguard.domain.interfaces import (
    ClassGraphInterface,
    ClassGraphProviderInterface,
    ValidationRule,
)
from archguard.domain.models import (
    SUCCESS,
    ClassInfo,
    Dependency,
    Failure,
    Success,
    ValidationResult,
    combine,
    combine_all,
    failure,
    success,
)

# Infrastructure (providers, registry, config files)
from archguard.infrastructure import (
    ArchitectureConfig,
    InMemoryClassGraph,
    InMemoryClassGraphProvider,
    ProviderRegistry,
    SourceTreeClassGraphProvider,
    load_architecture_config,
)

# Rules (commonly composed)
from archguard.rules import (
    AllOfRule,
    AnyOfRule,
    DenyDependencyRule,
    DenyEmptyPackageRule,
    MutualIndependenceRule,
    all_of,
    any_of,
    deny,
    independent,
    require_non_empty,
    rule,
)

__version__ = "0.1.0"

__all__ = [
    # Application
    "HexagonalArchitecture",
    "HexagonalArchitectureBuilder",
    "Adapters",
    "ApplicationLayer",
    "hexagonal_architecture",
    "verify_architecture",
    "ArchitectureSpec",
    "ArchitectureBuilder",
    "LayerSpec",
    "architecture",
    # Domain
    "ClassInfo",
    "Dependency",
    "ValidationResult",
    "Success",
    "Failure",
    "SUCCESS",
    "success",
    "failure",
    "combine",
    "combine_all",
    "ClassGraphInterface",
    "ClassGraphProviderInterface",
    "ValidationRule",
    "ArchitectureViolation",
    "ConfigurationError",
    "ProviderError",
    # Infrastructure
    "InMemoryClassGraph",
    "InMemoryClassGraphProvider",
    "SourceTreeClassGraphProvider",
    "ProviderRegistry",
    "ArchitectureConfig",
    "load_architecture_config",
    # Rules
    "DenyDependencyRule",
    "DenyEmptyPackageRule",
    "AllOfRule",
    "AnyOfRule",
    "MutualIndependenceRule",
    "all_of",
    "any_of",
    "deny",
    "independent",
    "require_non_empty",
    "rule",
]
