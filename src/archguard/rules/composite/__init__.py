"""
Composite rules - Rule composition patterns.

These rules combine multiple rules using logical operators.
"""

from archguard.rules.composite.base import (
    AllOfRule,
    AnyOfRule,
    CallableRule,
    MutualIndependenceRule,
    all_of,
    any_of,
)

__all__ = [
    "AllOfRule",
    "AnyOfRule",
    "CallableRule",
    "MutualIndependenceRule",
    "all_of",
    "any_of",
]
