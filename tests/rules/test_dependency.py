"""Tests for DenyDependencyRule and DenyAnyDependencyRule."""

import pytest

from archguard.domain.exceptions import ConfigurationError
from archguard.domain.models import SUCCESS
from archguard.infrastructure.graph import InMemoryClassGraph
from archguard.rules import DenyAnyDependencyRule, DenyDependencyRule, deny

BASE = "com.example.app"


class TestDenyDependencyRule:
    """Tests for the atomic dependency rule."""

    def test_conforming_graph_passes(self, conforming_graph):
        """A layer that never reaches the other yields Success."""
        rule = DenyDependencyRule(f"{BASE}.domain", f"{BASE}.adapter")
        assert rule.validate(conforming_graph) is SUCCESS

    def test_violation_message(self, cross_adapter_graph):
        """One formatted violation per offending class pair."""
        rule = DenyDependencyRule(
            f"{BASE}.adapter.in.web", f"{BASE}.adapter.out.persistence"
        )
        result = rule.validate(cross_adapter_graph)
        assert result.violations == (
            f"{BASE}.adapter.in.web should not depend on "
            f"{BASE}.adapter.out.persistence: "
            f"<{BASE}.adapter.in.web.AccountController> depends on "
            f"<{BASE}.adapter.out.persistence.AccountPersistenceAdapter>",
        )

    def test_segment_boundaries_respected(self):
        """A sibling package sharing a name prefix is not a target."""
        graph = InMemoryClassGraph.from_dependencies(
            {"com.foo.web.A": ["com.foo.barstuff.B"]}
        )
        rule = DenyDependencyRule("com.foo.web", "com.foo.bar")
        assert rule.validate(graph) is SUCCESS

    def test_explicit_patterns(self, cross_adapter_graph):
        """Values ending in '..' are used as patterns."""
        result = deny("..adapter.in..", "..persistence..").validate(
            cross_adapter_graph
        )
        assert len(result.violations) == 1

    def test_custom_message(self, cross_adapter_graph):
        """A custom message replaces the default description."""
        rule = DenyDependencyRule(
            f"{BASE}.adapter.in", f"{BASE}.adapter.out", message="adapters isolated"
        )
        assert rule.description == "adapters isolated"
        assert rule.validate(cross_adapter_graph).violations[0].startswith(
            "adapters isolated: "
        )

    def test_malformed_package_fails_at_construction(self):
        """Invalid packages raise before any graph is consulted."""
        with pytest.raises(ConfigurationError):
            DenyDependencyRule("com..", "com.example")
        with pytest.raises(ConfigurationError):
            DenyDependencyRule("", "com.example")

    def test_idempotent(self, cross_adapter_graph):
        """Validating twice yields equal results."""
        rule = DenyDependencyRule(f"{BASE}.adapter.in", f"{BASE}.adapter.out")
        assert rule.validate(cross_adapter_graph) == rule.validate(
            cross_adapter_graph
        )


class TestDenyAnyDependencyRule:
    """Tests for the cartesian-product rule."""

    def test_empty_lists_pass(self, cross_adapter_graph):
        """No pairs means nothing to violate."""
        assert DenyAnyDependencyRule((), ()).validate(cross_adapter_graph) is SUCCESS

    def test_pairs_in_order(self):
        """Pairs iterate from-major, to-minor."""
        rule = DenyAnyDependencyRule(("a.x", "a.y"), ("b.x", "b.y"))
        assert [(r.from_package, r.to_package) for r in rule.pairs()] == [
            ("a.x", "b.x"),
            ("a.x", "b.y"),
            ("a.y", "b.x"),
            ("a.y", "b.y"),
        ]

    def test_accumulates_all_pairs(self, cross_adapter_graph):
        """Every failing pair contributes its violations."""
        rule = DenyAnyDependencyRule(
            (f"{BASE}.adapter.in.web", f"{BASE}.configuration"),
            (f"{BASE}.adapter.out.persistence", f"{BASE}.adapter.in.web"),
        )
        result = rule.validate(cross_adapter_graph)
        assert [v.split(":")[0] for v in result.violations] == [
            f"{BASE}.adapter.in.web should not depend on "
            f"{BASE}.adapter.out.persistence",
            f"{BASE}.configuration should not depend on {BASE}.adapter.in.web",
        ]
