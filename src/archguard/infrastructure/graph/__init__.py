"""
Class graph providers.
"""

from archguard.infrastructure.graph.memory import (
    InMemoryClassGraph,
    InMemoryClassGraphProvider,
)
from archguard.infrastructure.graph.source import SourceTreeClassGraphProvider

__all__ = [
    "InMemoryClassGraph",
    "InMemoryClassGraphProvider",
    "SourceTreeClassGraphProvider",
]
