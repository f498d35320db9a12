"""
Application layer for archguard.

Contains the layer model, the hexagonal architecture orchestrator and the
builder DSLs that declare architectures.
"""

from archguard.application.architecture import HexagonalArchitecture
from archguard.application.dsl import (
    AdaptersBuilder,
    ApplicationLayerBuilder,
    HexagonalArchitectureBuilder,
    hexagonal_architecture,
    verify_architecture,
)
from archguard.application.layered import (
    ArchitectureBuilder,
    ArchitectureSpec,
    LayerBuilder,
    LayerSpec,
    architecture,
)
from archguard.application.layers import Adapters, ApplicationLayer, ArchitectureElement

__all__ = [
    "ArchitectureElement",
    "Adapters",
    "ApplicationLayer",
    "HexagonalArchitecture",
    "HexagonalArchitectureBuilder",
    "AdaptersBuilder",
    "ApplicationLayerBuilder",
    "hexagonal_architecture",
    "verify_architecture",
    "ArchitectureSpec",
    "ArchitectureBuilder",
    "LayerSpec",
    "LayerBuilder",
    "architecture",
]
