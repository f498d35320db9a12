"""
Domain exceptions for archguard.

Three kinds of failure exist and they are never mixed:
- ArchitectureViolation: forbidden dependency or empty package found.
- ConfigurationError: the architecture declaration itself is invalid.
- ProviderError: the class graph could not be scanned.
"""

from collections.abc import Sequence


class ArchitectureViolation(AssertionError):
    """
    Raised when an architecture rule does not hold.

    Subclasses AssertionError so test runners report it as a failed
    assertion rather than an error.
    """

    def __init__(self, rule: str, violations: Sequence[str]):
        """
        Args:
            rule: Human-readable text of the rule that was violated
            violations: One entry per offending edge or empty package
        """
        self.rule = rule
        self.violations = tuple(violations)
        super().__init__(self._format())

    def _format(self) -> str:
        count = len(self.violations)
        times = "time" if count == 1 else "times"
        lines = [f"Rule '{self.rule}' was violated ({count} {times}):"]
        lines.extend(self.violations)
        return "\n".join(lines)


class ConfigurationError(ValueError):
    """
    Raised when an architecture declaration is malformed.

    Covers invalid package names or patterns, DSL misuse (declaring a
    layer twice) and invalid configuration files. Always raised before
    any scanning happens.
    """


class ProviderError(Exception):
    """Raised when a class graph provider cannot scan the requested packages."""

    def __init__(self, message: str, prefixes: Sequence[str] = ()):
        super().__init__(message)
        self.prefixes = tuple(prefixes)
