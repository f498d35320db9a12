"""
Package predicate engine.

Package patterns are dot-separated segments where ``..`` stands for any
number of segments (including none):

    com.example..        com.example and every package below it
    ..domain..           any package containing a ``domain`` segment
    com.example          exactly com.example
    com.*.domain         ``*`` matches within a single segment

Matching always works on whole segments, so ``com.foo.barstuff`` never
resides in ``com.foo.bar``.
"""

import re
from collections.abc import Iterable, Iterator
from fnmatch import fnmatchcase
from functools import lru_cache

from archguard.domain.exceptions import ConfigurationError

ANY_DEPTH = ".."

_SEGMENT = r"[A-Za-z_][A-Za-z0-9_]*"
_PATTERN_SEGMENT = r"[A-Za-z_*][A-Za-z0-9_*]*"

_PACKAGE_RE = re.compile(rf"^{_SEGMENT}(?:\.{_SEGMENT})*$")
_PATTERN_RE = re.compile(
    rf"^(?:\.\.)?{_PATTERN_SEGMENT}(?:(?:\.\.|\.){_PATTERN_SEGMENT})*(?:\.\.)?$"
)


def is_valid_package(name: str) -> bool:
    """True when ``name`` is a syntactically valid dotted package path."""
    return isinstance(name, str) and bool(_PACKAGE_RE.match(name))


def validate_package(name: str) -> str:
    """
    Validate a fully qualified package path.

    Args:
        name: Dotted package path, e.g. "com.example.app.domain"

    Returns:
        The name unchanged

    Raises:
        ConfigurationError: If the name is empty or malformed
    """
    if not is_valid_package(name):
        raise ConfigurationError(f"Invalid package name: {name!r}")
    return name


def validate_pattern(pattern: str) -> str:
    """
    Validate a package pattern.

    Raises:
        ConfigurationError: If the pattern is empty or malformed
    """
    if not isinstance(pattern, str) or not _PATTERN_RE.match(pattern):
        raise ConfigurationError(f"Invalid package pattern: {pattern!r}")
    return pattern


def qualify(base_package: str, relative: str) -> str:
    """Qualify a relative package name against a base package."""
    validate_package(base_package)
    validate_package(relative)
    return f"{base_package}.{relative}"


def all_classes(prefix: str) -> str:
    """
    Pattern matching ``prefix`` and every package below it.

    A value that already ends in ``..`` is treated as an explicit pattern
    and returned unchanged.
    """
    pattern = prefix if prefix.endswith(ANY_DEPTH) else f"{prefix}{ANY_DEPTH}"
    return validate_pattern(pattern)


@lru_cache(maxsize=1024)
def _compile(pattern: str) -> tuple[str, ...]:
    validate_pattern(pattern)
    tokens: list[str] = []
    for piece in re.split(r"(\.\.)", pattern):
        if piece == ANY_DEPTH:
            tokens.append(ANY_DEPTH)
        elif piece:
            tokens.extend(piece.split("."))
    return tuple(tokens)


def _match_from(
    tokens: tuple[str, ...], segments: list[str], ti: int, si: int
) -> bool:
    if ti == len(tokens):
        return si == len(segments)
    token = tokens[ti]
    if token == ANY_DEPTH:
        return any(
            _match_from(tokens, segments, ti + 1, k)
            for k in range(si, len(segments) + 1)
        )
    if si < len(segments) and fnmatchcase(segments[si], token):
        return _match_from(tokens, segments, ti + 1, si + 1)
    return False


def matches(package: str, pattern: str) -> bool:
    """
    Check whether a package matches a package pattern.

    Args:
        package: Fully qualified package of a class
        pattern: Package pattern (see module docstring)

    Returns:
        True if the package matches

    Raises:
        ConfigurationError: If the pattern is malformed
    """
    tokens = _compile(pattern)
    segments = package.split(".") if package else []
    return _match_from(tokens, segments, 0, 0)


def resides_in(package: str, prefix: str) -> bool:
    """True when ``package`` equals ``prefix`` or lies below it."""
    return matches(package, all_classes(prefix))


class PackageSet:
    """
    Ordered set of fully qualified package prefixes.

    Insertion order is kept so violation messages come out in the order
    packages were declared. Registering the same package twice is a
    declaration error.
    """

    def __init__(self, packages: Iterable[str] = ()) -> None:
        self._packages: list[str] = []
        for package in packages:
            self.add(package)

    def add(self, package: str) -> "PackageSet":
        validate_package(package)
        if package in self._packages:
            raise ConfigurationError(f"Package already declared: {package}")
        self._packages.append(package)
        return self

    def as_tuple(self) -> tuple[str, ...]:
        return tuple(self._packages)

    def __iter__(self) -> Iterator[str]:
        return iter(self._packages)

    def __len__(self) -> int:
        return len(self._packages)

    def __contains__(self, package: object) -> bool:
        return package in self._packages

    def __repr__(self) -> str:
        return f"PackageSet({self._packages!r})"
