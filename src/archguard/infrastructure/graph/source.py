"""
Python source tree class graph provider.

Pure AST-based scanner: modules are parsed, never imported or executed.
Each module becomes one unit of the graph, mirroring a class in a package:

    src/app/domain/account.py     -> "app.domain.account" in package "app.domain"
    src/app/domain/__init__.py    -> "app.domain" in package "app.domain"

Every import statement of a module counts as an outgoing dependency,
including imports under ``if TYPE_CHECKING:`` and inside functions.
"""

import ast
import importlib.util
import logging
from collections.abc import Iterable
from pathlib import Path

from archguard.domain.exceptions import ProviderError
from archguard.domain.interfaces import ClassGraphProviderInterface
from archguard.domain.models import ClassInfo, Dependency, parent_package
from archguard.domain.packages import is_valid_package, validate_package
from archguard.infrastructure.graph.memory import InMemoryClassGraph

logger = logging.getLogger("archguard.infrastructure.source")


class SourceTreeClassGraphProvider(ClassGraphProviderInterface):
    """
    Scans a directory of Python sources (e.g. ``src/``).

    Example usage:
        provider = SourceTreeClassGraphProvider("src")
        graph = provider.import_packages("app")
    """

    def __init__(self, source_root: str | Path, encoding: str = "utf-8") -> None:
        """
        Args:
            source_root: Directory that contains the top-level packages
            encoding: Encoding used to read source files
        """
        self.source_root = Path(source_root)
        self.encoding = encoding
        self._package_cache: dict[str, str] = {}

    def import_packages(self, *prefixes: str) -> InMemoryClassGraph:
        if not prefixes:
            raise ProviderError("No packages requested")
        if not self.source_root.is_dir():
            raise ProviderError(
                f"Source root not found: {self.source_root}", prefixes
            )

        classes = self._scan(prefixes)
        if not classes:
            raise ProviderError(
                f"Nothing under {self.source_root} matches: {', '.join(prefixes)}",
                prefixes,
            )
        logger.info(
            "Scanned %d modules from %s under %s",
            len(classes),
            ", ".join(prefixes),
            self.source_root,
        )
        return InMemoryClassGraph(classes, lambda prefix: self._scan([prefix]))

    def _scan(self, prefixes: Iterable[str]) -> frozenset[ClassInfo]:
        modules: dict[str, Path] = {}
        for prefix in prefixes:
            modules.update(self._discover(validate_package(prefix)))
        return frozenset(
            self._read_module(name, path) for name, path in sorted(modules.items())
        )

    def _discover(self, prefix: str) -> dict[str, Path]:
        """Map module names to source files under one prefix."""
        location = self.source_root.joinpath(*prefix.split("."))
        found: dict[str, Path] = {}
        if location.is_dir():
            for path in sorted(location.rglob("*.py")):
                name = self._module_name(path)
                if name is not None:
                    found[name] = path
        module_file = location.with_suffix(".py")
        if module_file.is_file():
            found[prefix] = module_file
        logger.debug("Discovered %d modules under %s", len(found), prefix)
        return found

    def _module_name(self, path: Path) -> str | None:
        parts = list(path.relative_to(self.source_root).with_suffix("").parts)
        if parts and parts[-1] == "__init__":
            parts = parts[:-1]
        name = ".".join(parts)
        # Skips files that cannot be imported (e.g. hyphenated directories)
        return name if is_valid_package(name) else None

    def _read_module(self, name: str, path: Path) -> ClassInfo:
        try:
            source = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ProviderError(f"Cannot read {path}: {e}", (name,)) from e
        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ProviderError(f"Syntax error in {path}: {e}", (name,)) from e

        is_package = path.name == "__init__.py"
        anchor = name if is_package else name.rpartition(".")[0]
        targets = self._collect_imports(tree, anchor, path)
        dependencies = frozenset(
            Dependency(target=target, target_package=self._resolve_package(target))
            for target in targets
            if target != name
        )
        return ClassInfo(
            name=name,
            package=name if is_package else parent_package(name),
            dependencies=dependencies,
        )

    def _collect_imports(self, tree: ast.AST, anchor: str, path: Path) -> set[str]:
        """
        Collect absolute names of everything the module imports.

        ``from x import y`` yields ``x.y``, since ``y`` may be a submodule
        or a name defined in ``x``; _resolve_package() sorts that out.
        """
        targets: set[str] = set()
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    targets.add(alias.name)
            elif isinstance(node, ast.ImportFrom):
                base = self._absolute_module(node, anchor, path)
                for alias in node.names:
                    if alias.name == "*":
                        targets.add(base)
                    else:
                        targets.add(f"{base}.{alias.name}" if base else alias.name)
        return targets

    def _absolute_module(self, node: ast.ImportFrom, anchor: str, path: Path) -> str:
        if not node.level:
            return node.module or ""
        relative = "." * node.level + (node.module or "")
        try:
            return importlib.util.resolve_name(relative, anchor)
        except (ImportError, ValueError) as e:
            raise ProviderError(
                f"Cannot resolve relative import '{relative}' in {path}: {e}"
            ) from e

    def _resolve_package(self, target: str) -> str:
        """
        Package a dependency target resides in.

        Walks up the dotted name until it hits a package directory or a
        module file under the source root. Targets outside the tree fall
        back to their dotted parent.
        """
        cached = self._package_cache.get(target)
        if cached is not None:
            return cached

        resolved = parent_package(target)
        parts = target.split(".")
        while parts:
            candidate = self.source_root.joinpath(*parts)
            if candidate.is_dir():
                resolved = ".".join(parts)
                break
            if candidate.with_suffix(".py").is_file():
                resolved = parent_package(".".join(parts))
                break
            parts.pop()

        self._package_cache[target] = resolved
        return resolved
