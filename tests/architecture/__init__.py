"""Architecture validation tests.

These tests verify that archguard itself follows its own layering:
dependency direction between domain, rules, application, infrastructure
and cli, plus code conventions import rules cannot see.
"""
