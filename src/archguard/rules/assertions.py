"""
Check-or-raise assertions over a class graph.

This is the lowest verification layer: each assertion scans the graph and
raises ArchitectureViolation listing every offending element. Rules never
call these directly; they go through archguard.rules.base.evaluate(),
which turns the exception into a Failure value.
"""

import logging

from archguard.domain.exceptions import ArchitectureViolation
from archguard.domain.interfaces import ClassGraphInterface
from archguard.domain.packages import matches, validate_pattern

logger = logging.getLogger("archguard.rules.assertions")


def assert_no_dependency(
    graph: ClassGraphInterface, from_pattern: str, to_pattern: str
) -> None:
    """
    Assert that no class matching ``from_pattern`` depends on a class
    matching ``to_pattern``.

    Scanning does not stop at the first offending edge: every edge is
    collected into one ArchitectureViolation.

    Raises:
        ArchitectureViolation: If at least one forbidden edge exists
        ConfigurationError: If either pattern is malformed
    """
    validate_pattern(from_pattern)
    validate_pattern(to_pattern)

    edges: list[str] = []
    sources = sorted(graph.classes_in(from_pattern), key=lambda info: info.name)
    for info in sources:
        for dependency in sorted(info.dependencies):
            if matches(dependency.target_package, to_pattern):
                edges.append(f"<{info.name}> depends on <{dependency.target}>")

    logger.debug(
        "Checked %d classes in %s against %s: %d forbidden edges",
        len(sources),
        from_pattern,
        to_pattern,
        len(edges),
    )
    if edges:
        raise ArchitectureViolation(
            f"no classes that reside in '{from_pattern}' should depend on "
            f"classes that reside in '{to_pattern}'",
            edges,
        )


def assert_not_empty(graph: ClassGraphInterface, pattern: str) -> None:
    """
    Assert that at least one class matches ``pattern``.

    Raises:
        ArchitectureViolation: If no class matches
    """
    found = graph.classes_in(pattern)
    logger.debug("Found %d classes in %s", len(found), pattern)
    if not found:
        raise ArchitectureViolation(
            f"classes that reside in '{pattern}' should contain at least 1 element",
            [f"no classes reside in {pattern}"],
        )
