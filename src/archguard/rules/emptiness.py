"""
Emptiness rule: a declared package must contain at least one class.
"""

from dataclasses import dataclass

from archguard.domain.interfaces import ClassGraphInterface, ValidationRule
from archguard.domain.models import ValidationResult
from archguard.domain.packages import all_classes, validate_package
from archguard.rules.assertions import assert_not_empty
from archguard.rules.base import evaluate


@dataclass(frozen=True)
class DenyEmptyPackageRule(ValidationRule):
    """
    ``package`` must contain at least one class.

    Runs a fresh query scoped to the package rather than reusing the outer
    graph, so a package counts as empty even when the outer scan was
    rooted elsewhere.
    """

    package: str
    message: str | None = None

    def __post_init__(self) -> None:
        validate_package(self.package)

    @property
    def description(self) -> str:
        return self.message or f"Package {self.package} should not be empty"

    def validate(self, graph: ClassGraphInterface) -> ValidationResult:
        scoped = graph.import_package(self.package)
        pattern = all_classes(self.package)
        return evaluate(lambda: assert_not_empty(scoped, pattern), self.description)
