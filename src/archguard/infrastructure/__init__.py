"""
Infrastructure layer for archguard.

Contains adapters for external concerns (source scanning, provider
registry, configuration files).
"""

from archguard.infrastructure.config import (
    ArchitectureConfig,
    find_config,
    load_architecture_config,
)
from archguard.infrastructure.graph import (
    InMemoryClassGraph,
    InMemoryClassGraphProvider,
    SourceTreeClassGraphProvider,
)
from archguard.infrastructure.registry import ProviderRegistry

__all__ = [
    # Class graph providers
    "InMemoryClassGraph",
    "InMemoryClassGraphProvider",
    "SourceTreeClassGraphProvider",
    # Registry
    "ProviderRegistry",
    # Configuration
    "ArchitectureConfig",
    "load_architecture_config",
    "find_config",
]
