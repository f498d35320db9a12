"""
In-memory implementation of the class graph.

Useful for testing and for callers that already hold a dependency model.
"""

from collections.abc import Callable, Iterable, Mapping

from archguard.domain.exceptions import ProviderError
from archguard.domain.interfaces import ClassGraphInterface, ClassGraphProviderInterface
from archguard.domain.models import ClassInfo
from archguard.domain.packages import all_classes, matches, validate_package

ScopeLoader = Callable[[str], Iterable[ClassInfo]]


class InMemoryClassGraph(ClassGraphInterface):
    """
    Immutable set of classes with pattern queries.

    Args:
        classes: Classes in the graph
        scope_loader: Loads the classes under one prefix for scoped
            queries. Without it, scoped queries filter this graph.
    """

    def __init__(
        self,
        classes: Iterable[ClassInfo] = (),
        scope_loader: ScopeLoader | None = None,
    ) -> None:
        self._classes = frozenset(classes)
        self._scope_loader = scope_loader

    @classmethod
    def from_dependencies(
        cls, dependencies: Mapping[str, Iterable[str]]
    ) -> "InMemoryClassGraph":
        """
        Build a graph from ``{class name: [dependency class names]}``.

        Packages are derived from the dotted names (see ClassInfo.of).
        """
        return cls(
            ClassInfo.of(name, *targets) for name, targets in dependencies.items()
        )

    @property
    def classes(self) -> frozenset[ClassInfo]:
        return self._classes

    def classes_in(self, pattern: str) -> frozenset[ClassInfo]:
        return frozenset(
            info for info in self._classes if matches(info.package, pattern)
        )

    def import_package(self, prefix: str) -> "InMemoryClassGraph":
        validate_package(prefix)
        if self._scope_loader is not None:
            return InMemoryClassGraph(self._scope_loader(prefix), self._scope_loader)
        return InMemoryClassGraph(self.classes_in(all_classes(prefix)))

    def __repr__(self) -> str:
        return f"InMemoryClassGraph({len(self._classes)} classes)"


class InMemoryClassGraphProvider(ClassGraphProviderInterface):
    """Provider over a fixed universe of classes."""

    def __init__(self, classes: Iterable[ClassInfo] = ()) -> None:
        self._classes = frozenset(classes)

    def add(self, *classes: ClassInfo) -> None:
        self._classes = self._classes | frozenset(classes)

    def _scan(self, prefixes: Iterable[str]) -> frozenset[ClassInfo]:
        patterns = [all_classes(validate_package(prefix)) for prefix in prefixes]
        return frozenset(
            info
            for info in self._classes
            if any(matches(info.package, pattern) for pattern in patterns)
        )

    def import_packages(self, *prefixes: str) -> InMemoryClassGraph:
        if not prefixes:
            raise ProviderError("No packages requested")
        found = self._scan(prefixes)
        if not found:
            raise ProviderError(
                f"No classes found in packages: {', '.join(prefixes)}", prefixes
            )
        return InMemoryClassGraph(found, lambda prefix: self._scan([prefix]))
