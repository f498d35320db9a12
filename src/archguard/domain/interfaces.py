"""
Domain interfaces (Ports) for archguard.

These abstract base classes define the contracts that class graph
providers and validation rules must satisfy.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archguard.domain.models import ClassInfo, ValidationResult


class ClassGraphInterface(ABC):
    """
    Port for a scanned, read-only class graph.

    Implementations are treated as immutable input: rules only query them.
    """

    @property
    @abstractmethod
    def classes(self) -> frozenset["ClassInfo"]:
        """Every class in the graph."""

    @abstractmethod
    def classes_in(self, pattern: str) -> frozenset["ClassInfo"]:
        """
        Classes whose package matches a package pattern.

        Args:
            pattern: Package pattern, e.g. "com.example.domain.."

        Returns:
            Matching classes (possibly empty)
        """

    @abstractmethod
    def import_package(self, prefix: str) -> "ClassGraphInterface":
        """
        Run a fresh query scoped to one package prefix.

        Unlike import_packages() on a provider, an empty result is not an
        error here: callers use it to ask whether a package has classes.

        Args:
            prefix: Fully qualified package prefix

        Returns:
            A graph holding only the classes under ``prefix``
        """

    def __len__(self) -> int:
        return len(self.classes)


class ClassGraphProviderInterface(ABC):
    """
    Port for the class graph importer.

    Given package prefixes, returns the classes under them together with
    each class's outgoing type dependencies.
    """

    @abstractmethod
    def import_packages(self, *prefixes: str) -> ClassGraphInterface:
        """
        Scan the given package prefixes.

        Args:
            *prefixes: Fully qualified package prefixes (scan roots)

        Returns:
            The scanned class graph

        Raises:
            ProviderError: If nothing on the scan path matches, or the
                scan itself fails
        """


class ValidationRule(ABC):
    """
    Port for an architecture rule.

    Rules are pure with respect to the class graph: they read it and
    return a ValidationResult value, never raising for violations.
    """

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable statement of the rule."""

    @abstractmethod
    def validate(self, graph: ClassGraphInterface) -> "ValidationResult":
        """
        Evaluate the rule against a class graph.

        Args:
            graph: The scanned class graph

        Returns:
            Success, or Failure listing every violation found
        """

    def __str__(self) -> str:
        return self.description
