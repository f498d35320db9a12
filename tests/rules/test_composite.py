"""Tests for rule composition: AllOfRule, AnyOfRule and friends."""

import pytest

from archguard.application import HexagonalArchitectureBuilder
from archguard.domain.exceptions import ConfigurationError
from archguard.domain.interfaces import ClassGraphInterface, ValidationRule
from archguard.domain.models import SUCCESS, ValidationResult, failure
from archguard.rules import (
    AllOfRule,
    AnyOfRule,
    CallableRule,
    MutualIndependenceRule,
    all_of,
    any_of,
    independent,
    rule,
)

BASE = "com.example.app"


class AlwaysPassRule(ValidationRule):
    """Test rule that always passes."""

    description = "always passes"

    def validate(self, graph: ClassGraphInterface) -> ValidationResult:  # noqa: ARG002
        return SUCCESS


class AlwaysFailRule(ValidationRule):
    """Test rule that always fails with a fixed violation."""

    def __init__(self, violation: str = "always fails"):
        self.violation = violation

    @property
    def description(self) -> str:
        return self.violation

    def validate(self, graph: ClassGraphInterface) -> ValidationResult:  # noqa: ARG002
        return failure(self.violation)


class CountingRule(ValidationRule):
    """Test rule that counts invocations."""

    description = "counting"

    def __init__(self):
        self.call_count = 0

    def validate(self, graph: ClassGraphInterface) -> ValidationResult:  # noqa: ARG002
        self.call_count += 1
        return SUCCESS


class TestAllOfRule:
    """Tests for AND composition."""

    def test_all_pass(self, conforming_graph):
        """When all rules pass, the composite passes."""
        assert AllOfRule(AlwaysPassRule(), AlwaysPassRule()).validate(
            conforming_graph
        ) is SUCCESS

    def test_accumulates_all_failures(self, conforming_graph):
        """Every rule runs; failures accumulate in rule order."""
        counter = CountingRule()
        composite = AllOfRule(
            AlwaysFailRule("first"), counter, AlwaysFailRule("second")
        )
        result = composite.validate(conforming_graph)
        assert result.violations == ("first", "second")
        assert counter.call_count == 1

    def test_empty_composite_passes(self, conforming_graph):
        assert AllOfRule().validate(conforming_graph) is SUCCESS

    def test_description(self):
        assert AllOfRule(AlwaysPassRule(), AlwaysFailRule("x")).description == (
            "(always passes) and (x)"
        )


class TestAnyOfRule:
    """Tests for OR composition."""

    def test_stops_at_first_success(self, conforming_graph):
        """Later alternatives are not evaluated after a pass."""
        counter = CountingRule()
        composite = AnyOfRule(AlwaysFailRule(), AlwaysPassRule(), counter)
        assert composite.validate(conforming_graph) is SUCCESS
        assert counter.call_count == 0

    def test_all_fail_accumulates(self, conforming_graph):
        """When no alternative holds, every violation is reported."""
        composite = AnyOfRule(AlwaysFailRule("a"), AlwaysFailRule("b"))
        assert composite.validate(conforming_graph).violations == ("a", "b")


class TestFlattening:
    """Tests for the all_of / any_of helpers."""

    def test_all_of_flattens_nested(self):
        """Nested AllOfRules collapse into one level."""
        a, b, c = AlwaysPassRule(), AlwaysFailRule("b"), AlwaysFailRule("c")
        assert all_of(a, all_of(b, c)).rules == (a, b, c)

    def test_any_of_keeps_other_kinds(self):
        """An AllOfRule nested in any_of stays a single alternative."""
        inner = all_of(AlwaysPassRule(), AlwaysFailRule())
        outer = any_of(inner, AlwaysPassRule())
        assert outer.rules[0] == inner


class TestMutualIndependenceRule:
    """Tests for MutualIndependenceRule."""

    def test_pairs_exclude_self(self):
        """Each ordered pair of distinct packages is checked once."""
        rule_ = MutualIndependenceRule(("a.x", "a.y", "a.z"))
        assert len(rule_.pairs()) == 6
        assert all(r.from_package != r.to_package for r in rule_.pairs())

    def test_detects_cross_dependency(self, cross_adapter_graph):
        result = independent(
            f"{BASE}.adapter.in.web", f"{BASE}.adapter.out.persistence"
        ).validate(cross_adapter_graph)
        assert len(result.violations) == 1

    def test_independent_packages_pass(self, conforming_graph):
        result = independent(
            f"{BASE}.adapter.in.web", f"{BASE}.adapter.out.persistence"
        ).validate(conforming_graph)
        assert result is SUCCESS

    def test_malformed_package_fails_at_construction(self):
        """Malformed packages raise before any graph is scanned."""
        with pytest.raises(ConfigurationError, match="not valid"):
            independent("not valid", f"{BASE}.x")

    def test_malformed_package_fails_at_build(self):
        with pytest.raises(ConfigurationError):
            HexagonalArchitectureBuilder(BASE).rule(
                MutualIndependenceRule(("app.x", "app.-y"))
            ).build()


class TestCallableRule:
    """Tests for function-based rules."""

    def test_wraps_function(self, conforming_graph):
        """The function receives the graph and its result is returned."""

        def no_more_than_ten_classes(graph: ClassGraphInterface) -> ValidationResult:
            if len(graph) > 10:
                return failure("too many classes")
            return SUCCESS

        custom = rule(no_more_than_ten_classes)
        assert isinstance(custom, CallableRule)
        assert custom.description == "no_more_than_ten_classes"
        assert custom.validate(conforming_graph) is SUCCESS

    def test_explicit_description(self):
        assert rule(lambda _graph: SUCCESS, "always ok").description == "always ok"
