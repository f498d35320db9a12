"""Shared pytest fixtures for archguard tests."""

import pytest

from archguard.application import HexagonalArchitecture, HexagonalArchitectureBuilder
from archguard.infrastructure.graph import InMemoryClassGraph

BASE = "com.example.app"

# A small hexagonal application that follows every rule
CONFORMING_DEPENDENCIES: dict[str, list[str]] = {
    f"{BASE}.domain.Account": [],
    f"{BASE}.domain.Money": [],
    f"{BASE}.adapter.in.web.AccountController": [
        f"{BASE}.application.port.in.SendMoneyUseCase",
        f"{BASE}.domain.Money",
    ],
    f"{BASE}.adapter.out.persistence.AccountPersistenceAdapter": [
        f"{BASE}.application.port.out.LoadAccountPort",
        f"{BASE}.domain.Account",
    ],
    f"{BASE}.application.port.in.SendMoneyUseCase": [f"{BASE}.domain.Money"],
    f"{BASE}.application.port.out.LoadAccountPort": [f"{BASE}.domain.Account"],
    f"{BASE}.application.service.SendMoneyService": [
        f"{BASE}.application.port.in.SendMoneyUseCase",
        f"{BASE}.application.port.out.LoadAccountPort",
        f"{BASE}.domain.Account",
    ],
    f"{BASE}.configuration.AppConfiguration": [
        f"{BASE}.adapter.in.web.AccountController",
        f"{BASE}.application.service.SendMoneyService",
    ],
}


def build_graph(
    overrides: dict[str, list[str]] | None = None,
) -> InMemoryClassGraph:
    """Conforming graph with some classes added or replaced."""
    dependencies = dict(CONFORMING_DEPENDENCIES)
    dependencies.update(overrides or {})
    return InMemoryClassGraph.from_dependencies(dependencies)


def build_architecture() -> HexagonalArchitectureBuilder:
    """Builder declaring the full hexagonal layout of the sample app."""
    builder = HexagonalArchitectureBuilder(BASE)
    builder.domain("domain")
    with builder.adapters("adapter") as adapters:
        adapters.incoming("in.web")
        adapters.outgoing("out.persistence")
    with builder.application("application") as application:
        application.services("service")
        application.incoming_ports("port.in")
        application.outgoing_ports("port.out")
    builder.configuration("configuration")
    return builder


@pytest.fixture
def conforming_graph() -> InMemoryClassGraph:
    """Graph of the sample app with no violations."""
    return build_graph()


@pytest.fixture
def cross_adapter_graph() -> InMemoryClassGraph:
    """The web adapter reaches straight into the persistence adapter."""
    return build_graph(
        {
            f"{BASE}.adapter.in.web.AccountController": [
                f"{BASE}.application.port.in.SendMoneyUseCase",
                f"{BASE}.adapter.out.persistence.AccountPersistenceAdapter",
            ],
        }
    )


@pytest.fixture
def hexagonal() -> HexagonalArchitecture:
    """Full hexagonal declaration of the sample app."""
    return build_architecture().build()


@pytest.fixture
def make_graph():
    """Factory for variations of the sample graph."""
    return build_graph


@pytest.fixture
def architecture_builder() -> HexagonalArchitectureBuilder:
    """Unbuilt full declaration, for tests that attach custom rules."""
    return build_architecture()
