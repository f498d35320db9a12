"""Tests for the package predicate engine."""

import pytest

from archguard.domain.exceptions import ConfigurationError
from archguard.domain.packages import (
    PackageSet,
    all_classes,
    is_valid_package,
    matches,
    qualify,
    resides_in,
    validate_package,
    validate_pattern,
)


class TestPackageValidation:
    """Tests for package name and pattern validation."""

    @pytest.mark.parametrize(
        "name", ["com", "com.example.app", "app_1.domain", "_private.pkg"]
    )
    def test_valid_packages(self, name):
        """Dotted identifiers are valid package names."""
        assert is_valid_package(name)
        assert validate_package(name) == name

    @pytest.mark.parametrize(
        "name", ["", "com..example", ".com", "com.", "1com", "com.my-app", "a b"]
    )
    def test_invalid_packages(self, name):
        """Empty or malformed names raise ConfigurationError."""
        assert not is_valid_package(name)
        with pytest.raises(ConfigurationError):
            validate_package(name)

    @pytest.mark.parametrize(
        "pattern", ["com.example..", "..domain..", "com.*.domain", "..service"]
    )
    def test_valid_patterns(self, pattern):
        """Patterns may use '..' at either end or between segments and '*'."""
        assert validate_pattern(pattern) == pattern

    @pytest.mark.parametrize("pattern", ["", "...", "com...example", "com.", "."])
    def test_invalid_patterns(self, pattern):
        """Malformed patterns raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            validate_pattern(pattern)

    def test_qualify_joins_base_and_relative(self):
        """qualify() appends the relative package to the base."""
        assert qualify("com.example.app", "adapter.in.web") == (
            "com.example.app.adapter.in.web"
        )

    def test_qualify_rejects_empty_relative(self):
        """An empty relative package is a declaration error."""
        with pytest.raises(ConfigurationError):
            qualify("com.example.app", "")


class TestMatching:
    """Tests for segment-wise pattern matching."""

    def test_prefix_pattern_matches_package_and_descendants(self):
        """'a.b..' matches a.b itself and everything below it."""
        assert matches("com.foo.bar", "com.foo.bar..")
        assert matches("com.foo.bar.baz", "com.foo.bar..")
        assert not matches("com.foo", "com.foo.bar..")

    def test_matching_is_segment_wise(self):
        """com.foo.barstuff does not reside in com.foo.bar."""
        assert not matches("com.foo.barstuff", "com.foo.bar..")
        assert not resides_in("com.foo.barstuff", "com.foo.bar")

    def test_leading_any_depth(self):
        """'..domain..' matches any package containing a domain segment."""
        assert matches("com.example.domain", "..domain..")
        assert matches("domain.model", "..domain..")
        assert matches("x.y.domain.z", "..domain..")
        assert not matches("com.example.domains", "..domain..")

    def test_exact_pattern(self):
        """A pattern without '..' matches only that package."""
        assert matches("com.example", "com.example")
        assert not matches("com.example.app", "com.example")

    def test_wildcard_within_segment(self):
        """'*' matches inside exactly one segment."""
        assert matches("com.billing.domain", "com.*.domain")
        assert not matches("com.a.b.domain", "com.*.domain")
        assert matches("com.adapter_web", "com.adapter_*")

    def test_any_depth_between_segments(self):
        """'..' between segments matches zero or more segments."""
        assert matches("com.domain", "com..domain")
        assert matches("com.a.b.domain", "com..domain")

    def test_malformed_pattern_raises(self):
        """Matching against an invalid pattern raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            matches("com.example", "com...")

    def test_all_classes_appends_any_depth(self):
        """Plain prefixes gain '..'; explicit patterns pass through."""
        assert all_classes("com.example") == "com.example.."
        assert all_classes("..domain..") == "..domain.."


class TestPackageSet:
    """Tests for PackageSet."""

    def test_keeps_insertion_order(self):
        """Packages iterate in declaration order."""
        packages = PackageSet(["b.x", "a.y"]).add("c.z")
        assert list(packages) == ["b.x", "a.y", "c.z"]
        assert packages.as_tuple() == ("b.x", "a.y", "c.z")
        assert len(packages) == 3
        assert "a.y" in packages

    def test_duplicate_raises(self):
        """Registering a package twice is a declaration error."""
        packages = PackageSet(["com.example.web"])
        with pytest.raises(ConfigurationError, match="already declared"):
            packages.add("com.example.web")

    def test_invalid_package_raises(self):
        """Malformed packages are rejected on add."""
        with pytest.raises(ConfigurationError):
            PackageSet(["com..web"])
