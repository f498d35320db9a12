"""
Self-check: archguard verifies its own layering with its own DSL.

Scans src/archguard through the source-tree provider, so this also
exercises the provider on a real package.
"""

from pathlib import Path

import pytest

from archguard import SourceTreeClassGraphProvider, architecture
from archguard.application import ArchitectureBuilder, ArchitectureSpec

SRC_DIR = Path(__file__).parent.parent.parent / "src"


def _layers(arch: ArchitectureBuilder) -> None:
    arch.domain().cannot_depend_on("rules", "application", "infrastructure", "cli")
    arch.layer("rules").sub_package("composite").can_depend_on("domain")
    arch.application().can_depend_on("domain", "rules")
    arch.layer("infrastructure").sub_package("graph").can_depend_on(
        "domain", "rules", "application"
    )
    arch.layer("cli")


@pytest.fixture(scope="module")
def spec() -> ArchitectureSpec:
    return architecture("archguard", _layers)


@pytest.fixture(scope="module")
def graph():
    return SourceTreeClassGraphProvider(SRC_DIR).import_packages("archguard")


class TestSelfCheck:
    """archguard's layered declaration of itself holds."""

    def test_every_module_scanned(self, graph):
        names = {info.name for info in graph.classes}
        assert "archguard.domain.models" in names
        assert "archguard.cli.main" in names

    def test_layering_holds(self, spec, graph):
        spec.check(graph)

    def test_domain_depends_only_on_itself(self, graph):
        domain = graph.classes_in("archguard.domain..")
        assert domain
        for info in domain:
            internal = {
                package
                for package in info.depends_on_packages
                if package.startswith("archguard")
            }
            assert internal <= {"archguard.domain"}, info.name
