"""Tests for the layer model verification procedures."""

from archguard.application.layers import Adapters, ApplicationLayer
from archguard.domain.models import SUCCESS

BASE = "com.example.app"


class TestAdapters:
    """Tests for the Adapters layer."""

    def test_all_packages_incoming_first(self):
        adapters = Adapters(
            base_package=f"{BASE}.adapter",
            incoming=("a.in1", "a.in2"),
            outgoing=("a.out",),
        )
        assert adapters.all_packages == ("a.in1", "a.in2", "a.out")

    def test_single_adapter_has_no_cross_checks(self, cross_adapter_graph):
        """One adapter cannot depend on another adapter."""
        adapters = Adapters(f"{BASE}.adapter", incoming=(f"{BASE}.adapter.in.web",))
        assert adapters.verify_no_cross_adapter_dependencies(
            cross_adapter_graph
        ) is SUCCESS

    def test_cross_checks_cover_both_directions(self, cross_adapter_graph):
        adapters = Adapters(
            f"{BASE}.adapter",
            incoming=(f"{BASE}.adapter.in.web",),
            outgoing=(f"{BASE}.adapter.out.persistence",),
        )
        result = adapters.verify_no_cross_adapter_dependencies(cross_adapter_graph)
        assert len(result.violations) == 1

    def test_verify_no_dependency_on(self, conforming_graph):
        """The configuration wires adapters, never the other way round."""
        adapters = Adapters(f"{BASE}.adapter")
        assert adapters.verify_no_dependency_on(
            f"{BASE}.configuration", conforming_graph
        ) is SUCCESS
        assert adapters.verify_no_dependency_on(
            f"{BASE}.application", conforming_graph
        ).is_failure


class TestApplicationLayer:
    """Tests for the ApplicationLayer."""

    def test_all_packages(self):
        layer = ApplicationLayer(
            f"{BASE}.application",
            incoming_ports=("p.in",),
            outgoing_ports=("p.out",),
            services=("s",),
        )
        assert layer.all_packages == ("p.in", "p.out", "s")

    def test_empty_packages_reported_per_package(self, conforming_graph):
        layer = ApplicationLayer(
            f"{BASE}.application",
            incoming_ports=(f"{BASE}.application.port.in",),
            services=(f"{BASE}.application.query", f"{BASE}.application.command"),
        )
        result = layer.verify_no_empty_packages(conforming_graph)
        assert len(result.violations) == 2
        assert "application.query" in result.violations[0]
        assert "application.command" in result.violations[1]

    def test_ports_without_outgoing_pass(self, conforming_graph):
        """With no outgoing ports there is nothing to cross."""
        layer = ApplicationLayer(
            f"{BASE}.application", incoming_ports=(f"{BASE}.application.port.in",)
        )
        assert layer.verify_ports_do_not_depend_on_each_other(
            conforming_graph
        ) is SUCCESS
