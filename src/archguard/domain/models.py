"""
Domain models for archguard.

Pure data structures: the scanned class graph units and the validation
result algebra. All models are immutable (frozen dataclasses).
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from archguard.domain.exceptions import ArchitectureViolation

# =============================================================================
# CLASS GRAPH UNITS
# =============================================================================


def parent_package(name: str) -> str:
    """Package a dotted name resides in (``a.b.C`` -> ``a.b``)."""
    parent, _, _ = name.rpartition(".")
    return parent or name


@dataclass(frozen=True, order=True)
class Dependency:
    """Single outgoing type dependency of a class."""

    target: str  # Fully qualified name of the referenced class/module
    target_package: str  # Package the target resides in


@dataclass(frozen=True)
class ClassInfo:
    """
    A scanned class and its outgoing type dependencies.

    For Python sources one unit is produced per module, so ``name`` is the
    module's dotted path.
    """

    name: str
    package: str
    dependencies: frozenset[Dependency] = field(default_factory=frozenset)

    @property
    def depends_on_packages(self) -> frozenset[str]:
        """Packages of every class this class depends on."""
        return frozenset(dep.target_package for dep in self.dependencies)

    @classmethod
    def of(cls, name: str, *targets: str) -> "ClassInfo":
        """
        Build a ClassInfo from dotted names alone.

        Packages are derived by dropping the last segment, as for a
        fully qualified class name:

            ClassInfo.of("app.adapter.in.web.Controller", "app.domain.Account")
        """
        return cls(
            name=name,
            package=parent_package(name),
            dependencies=frozenset(
                Dependency(target=target, target_package=parent_package(target))
                for target in targets
            ),
        )


# =============================================================================
# VALIDATION RESULT
# =============================================================================


class ValidationResult:
    """
    Outcome of evaluating one or more architecture rules.

    Exactly two variants exist: Success and Failure. Results form a monoid
    under combine(): Success is the identity and failures accumulate their
    violations in order.
    """

    __slots__ = ()

    violations: tuple[str, ...]

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def on_success(self, action: Callable[[], None]) -> "ValidationResult":
        """Run ``action`` if this is a Success; returns self."""
        if self.is_success:
            action()
        return self

    def on_failure(
        self, action: Callable[[tuple[str, ...]], None]
    ) -> "ValidationResult":
        """Run ``action`` with the violations if this is a Failure; returns self."""
        if self.is_failure:
            action(self.violations)
        return self

    def raise_for_failure(self, description: str = "architecture rules") -> None:
        """
        Raise a single ArchitectureViolation listing every violation.

        Raises:
            ArchitectureViolation: If this result is a Failure
        """
        if self.is_failure:
            raise ArchitectureViolation(description, self.violations)


@dataclass(frozen=True)
class Success(ValidationResult):
    """All rules held."""

    @property
    def violations(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class Failure(ValidationResult):
    """One or more rules were violated."""

    violations: tuple[str, ...]

    def __post_init__(self) -> None:
        violations = tuple(self.violations)
        if not violations:
            raise ValueError("Failure requires at least one violation")
        object.__setattr__(self, "violations", violations)


SUCCESS = Success()


def success() -> ValidationResult:
    return SUCCESS


def failure(*violations: str) -> ValidationResult:
    return Failure(violations)


def combine(*results: ValidationResult) -> ValidationResult:
    """Combine results left to right; every violation is kept in order."""
    return combine_all(results)


def combine_all(results: Iterable[ValidationResult]) -> ValidationResult:
    """Fold results over the monoid, starting from Success."""
    accumulated: ValidationResult = SUCCESS
    for result in results:
        accumulated = _combine_pair(accumulated, result)
    return accumulated


def _combine_pair(left: ValidationResult, right: ValidationResult) -> ValidationResult:
    if left.is_failure and right.is_failure:
        return Failure(left.violations + right.violations)
    if left.is_failure:
        return left
    return right
