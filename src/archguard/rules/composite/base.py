"""
Rule composition patterns.

AllOfRule and AnyOfRule implement the Composite pattern for rules;
MutualIndependenceRule and CallableRule are convenience rules built on
the same value-returning contract.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from archguard.domain.interfaces import ClassGraphInterface, ValidationRule
from archguard.domain.models import SUCCESS, ValidationResult, combine_all
from archguard.domain.packages import all_classes
from archguard.rules.dependency import DenyDependencyRule


class AllOfRule(ValidationRule):
    """
    Logical AND of multiple rules. All must pass.

    Unlike a short-circuiting guard chain, every rule is evaluated so the
    combined Failure lists all violations in rule order.
    """

    def __init__(self, *rules: ValidationRule):
        """
        Args:
            *rules: Rules to compose (evaluated in order)
        """
        self.rules = rules

    @property
    def description(self) -> str:
        return " and ".join(f"({rule.description})" for rule in self.rules)

    def validate(self, graph: ClassGraphInterface) -> ValidationResult:
        return combine_all(rule.validate(graph) for rule in self.rules)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AllOfRule) and self.rules == other.rules

    def __hash__(self) -> int:
        return hash(("all_of", self.rules))

    def __repr__(self) -> str:
        return f"AllOfRule{self.rules!r}"


class AnyOfRule(ValidationRule):
    """
    Logical OR of multiple rules. One passing rule suffices.

    Stops at the first rule that passes. If every rule fails, the
    violations of all of them are accumulated.
    """

    def __init__(self, *rules: ValidationRule):
        """
        Args:
            *rules: Alternative rules (evaluated in order)
        """
        self.rules = rules

    @property
    def description(self) -> str:
        return " or ".join(f"({rule.description})" for rule in self.rules)

    def validate(self, graph: ClassGraphInterface) -> ValidationResult:
        results: list[ValidationResult] = []
        for rule in self.rules:
            result = rule.validate(graph)
            if result.is_success:
                return SUCCESS
            results.append(result)
        return combine_all(results)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AnyOfRule) and self.rules == other.rules

    def __hash__(self) -> int:
        return hash(("any_of", self.rules))

    def __repr__(self) -> str:
        return f"AnyOfRule{self.rules!r}"


@dataclass(frozen=True)
class MutualIndependenceRule(ValidationRule):
    """No package in the list may depend on any other package in the list."""

    packages: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "packages", tuple(self.packages))
        for package in self.packages:
            all_classes(package)

    @property
    def description(self) -> str:
        return f"[{', '.join(self.packages)}] should not depend on each other"

    def pairs(self) -> list[DenyDependencyRule]:
        return [
            DenyDependencyRule(first, second)
            for first in self.packages
            for second in self.packages
            if first != second
        ]

    def validate(self, graph: ClassGraphInterface) -> ValidationResult:
        return combine_all(rule.validate(graph) for rule in self.pairs())


class CallableRule(ValidationRule):
    """Wraps a plain ``graph -> ValidationResult`` function as a rule."""

    def __init__(
        self,
        check: Callable[[ClassGraphInterface], ValidationResult],
        description: str | None = None,
    ):
        self._check = check
        self._description = description or getattr(check, "__name__", "custom rule")

    @property
    def description(self) -> str:
        return self._description

    def validate(self, graph: ClassGraphInterface) -> ValidationResult:
        return self._check(graph)

    def __repr__(self) -> str:
        return f"CallableRule({self._description!r})"


def _flatten(
    rules: Iterable[ValidationRule], kind: type[AllOfRule] | type[AnyOfRule]
) -> list[ValidationRule]:
    flat: list[ValidationRule] = []
    for rule in rules:
        if isinstance(rule, kind):
            flat.extend(rule.rules)
        else:
            flat.append(rule)
    return flat


def all_of(*rules: ValidationRule) -> AllOfRule:
    """AND-compose rules; nested AllOfRules are flattened."""
    return AllOfRule(*_flatten(rules, AllOfRule))


def any_of(*rules: ValidationRule) -> AnyOfRule:
    """OR-compose rules; nested AnyOfRules are flattened."""
    return AnyOfRule(*_flatten(rules, AnyOfRule))
