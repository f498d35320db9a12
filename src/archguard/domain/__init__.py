"""
Domain layer for archguard.

Contains the package predicate engine, the class graph and validation
result models, ports and exceptions. No dependency on other layers.
"""

from archguard.domain.exceptions import (
    ArchitectureViolation,
    ConfigurationError,
    ProviderError,
)
from archguard.domain.interfaces import (
    ClassGraphInterface,
    ClassGraphProviderInterface,
    ValidationRule,
)
from archguard.domain.models import (
    SUCCESS,
    ClassInfo,
    Dependency,
    Failure,
    Success,
    ValidationResult,
    combine,
    combine_all,
    failure,
    success,
)
from archguard.domain.packages import (
    PackageSet,
    all_classes,
    matches,
    qualify,
    resides_in,
    validate_package,
    validate_pattern,
)

__all__ = [
    # Models
    "ClassInfo",
    "Dependency",
    "ValidationResult",
    "Success",
    "Failure",
    "SUCCESS",
    "success",
    "failure",
    "combine",
    "combine_all",
    # Packages
    "PackageSet",
    "all_classes",
    "matches",
    "qualify",
    "resides_in",
    "validate_package",
    "validate_pattern",
    # Interfaces
    "ClassGraphInterface",
    "ClassGraphProviderInterface",
    "ValidationRule",
    # Exceptions
    "ArchitectureViolation",
    "ConfigurationError",
    "ProviderError",
]
