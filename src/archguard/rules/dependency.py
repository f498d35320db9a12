"""
Dependency rules: forbid edges from one package set to another.
"""

from dataclasses import dataclass

from archguard.domain.interfaces import ClassGraphInterface, ValidationRule
from archguard.domain.models import ValidationResult, combine_all
from archguard.domain.packages import all_classes
from archguard.rules.assertions import assert_no_dependency
from archguard.rules.base import evaluate


@dataclass(frozen=True)
class DenyDependencyRule(ValidationRule):
    """
    No class in ``from_package`` may depend on any class in ``to_package``.

    Both values are package prefixes (matching the package and everything
    below it) or explicit patterns ending in ``..`` such as ``..domain..``.
    One violation is reported per offending class pair.
    """

    from_package: str
    to_package: str
    message: str | None = None

    def __post_init__(self) -> None:
        # Malformed prefixes fail here, before any scanning
        all_classes(self.from_package)
        all_classes(self.to_package)

    @property
    def description(self) -> str:
        if self.message:
            return self.message
        return f"{self.from_package} should not depend on {self.to_package}"

    def validate(self, graph: ClassGraphInterface) -> ValidationResult:
        from_pattern = all_classes(self.from_package)
        to_pattern = all_classes(self.to_package)
        return evaluate(
            lambda: assert_no_dependency(graph, from_pattern, to_pattern),
            self.description,
        )


@dataclass(frozen=True)
class DenyAnyDependencyRule(ValidationRule):
    """
    Cartesian product of DenyDependencyRule over two package lists.

    Every pair is checked; results accumulate instead of short-circuiting.
    """

    from_packages: tuple[str, ...]
    to_packages: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "from_packages", tuple(self.from_packages))
        object.__setattr__(self, "to_packages", tuple(self.to_packages))
        for package in self.from_packages + self.to_packages:
            all_classes(package)

    @property
    def description(self) -> str:
        return (
            f"[{', '.join(self.from_packages)}] should not depend on "
            f"[{', '.join(self.to_packages)}]"
        )

    def pairs(self) -> list[DenyDependencyRule]:
        return [
            DenyDependencyRule(from_package, to_package)
            for from_package in self.from_packages
            for to_package in self.to_packages
        ]

    def validate(self, graph: ClassGraphInterface) -> ValidationResult:
        return combine_all(rule.validate(graph) for rule in self.pairs())
