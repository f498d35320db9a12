"""
Conversion boundary between raising assertions and result values.

Everything above this module deals in ValidationResult values only.
"""

from collections.abc import Callable

from archguard.domain.exceptions import ArchitectureViolation
from archguard.domain.models import SUCCESS, Failure, ValidationResult


def evaluate(check: Callable[[], None], description: str) -> ValidationResult:
    """
    Run a raising check and convert its outcome into a ValidationResult.

    Only ArchitectureViolation is converted. ConfigurationError and
    ProviderError propagate to the caller unchanged.

    Args:
        check: Zero-argument callable raising ArchitectureViolation on failure
        description: Rule statement prefixed to every violation

    Returns:
        SUCCESS, or a Failure with one entry per reported violation
    """
    try:
        check()
    except ArchitectureViolation as violation:
        details = violation.violations or (str(violation),)
        return Failure(tuple(f"{description}: {detail}" for detail in details))
    return SUCCESS
