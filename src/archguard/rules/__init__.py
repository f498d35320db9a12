"""
Validation rules for archguard.

Rules read a class graph and return a ValidationResult: Success, or
Failure listing every violation. They never raise for violations.

Organization:
- assertions: raising checks (the lowest layer)
- base: the single boundary converting raised violations into values
- dependency / emptiness: atomic rules
- composite/: rule composition patterns

The free-standing helpers below build ad-hoc rules outside the fixed
hexagonal template:

    rule = all_of(
        deny("..domain..", "..infrastructure.."),
        require_non_empty("com.example.app.domain"),
    )
    rule.validate(graph).raise_for_failure()
"""

from collections.abc import Callable

from archguard.domain.interfaces import ClassGraphInterface, ValidationRule
from archguard.domain.models import ValidationResult
from archguard.rules.composite import (
    AllOfRule,
    AnyOfRule,
    CallableRule,
    MutualIndependenceRule,
    all_of,
    any_of,
)
from archguard.rules.dependency import DenyAnyDependencyRule, DenyDependencyRule
from archguard.rules.emptiness import DenyEmptyPackageRule


def deny(from_package: str, to_package: str) -> DenyDependencyRule:
    """Forbid dependencies from one package (or pattern) to another."""
    return DenyDependencyRule(from_package, to_package)


def require_non_empty(package: str) -> DenyEmptyPackageRule:
    """Require a package to contain at least one class."""
    return DenyEmptyPackageRule(package)


def independent(*packages: str) -> MutualIndependenceRule:
    """Forbid dependencies between any two of the given packages."""
    return MutualIndependenceRule(packages)


def rule(
    check: Callable[[ClassGraphInterface], ValidationResult],
    description: str | None = None,
) -> CallableRule:
    """Turn a ``graph -> ValidationResult`` function into a rule."""
    return CallableRule(check, description)


__all__ = [
    # Atomic rules
    "DenyDependencyRule",
    "DenyAnyDependencyRule",
    "DenyEmptyPackageRule",
    # Composition patterns
    "AllOfRule",
    "AnyOfRule",
    "MutualIndependenceRule",
    "CallableRule",
    # Free-standing helpers
    "deny",
    "require_non_empty",
    "independent",
    "rule",
    "all_of",
    "any_of",
    # Port
    "ValidationRule",
]
