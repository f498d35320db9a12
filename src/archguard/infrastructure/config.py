"""
Architecture configuration files.

A hexagonal declaration can live in ``archguard.json``, ``archguard.toml``
or the ``[tool.archguard]`` table of ``pyproject.toml``:

    [tool.archguard]
    base_package = "app.account"
    domain = ["domain"]
    configuration = "configuration"

    [tool.archguard.adapters]
    package = "adapter"
    incoming = ["inbound.web"]
    outgoing = ["outbound.persistence"]

    [tool.archguard.application]
    package = "application"
    services = ["service"]
    incoming_ports = ["port.inbound"]
    outgoing_ports = ["port.outbound"]

    [[tool.archguard.rules]]
    deny = ["..domain..", "..infrastructure.."]

    [tool.archguard.scan]
    source_root = "src"

Layer packages are relative to ``base_package``; custom rule packages are
absolute prefixes or patterns.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from archguard.application.architecture import HexagonalArchitecture
from archguard.application.dsl import HexagonalArchitectureBuilder
from archguard.domain.exceptions import ConfigurationError
from archguard.domain.interfaces import ValidationRule
from archguard.domain.packages import is_valid_package
from archguard.rules import deny, require_non_empty

DEFAULT_CONFIG_FILES = ("archguard.json", "archguard.toml", "pyproject.toml")


def _check_package(value: str) -> str:
    if not is_valid_package(value):
        raise ValueError(f"invalid package name {value!r}")
    return value


class AdaptersConfig(BaseModel):
    """Adapters layer: base package plus incoming/outgoing sub-packages."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    package: str
    incoming: list[str] = Field(default_factory=list)
    outgoing: list[str] = Field(default_factory=list)


class ApplicationConfig(BaseModel):
    """Application layer: base package plus services and ports."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    package: str
    services: list[str] = Field(default_factory=list)
    incoming_ports: list[str] = Field(default_factory=list)
    outgoing_ports: list[str] = Field(default_factory=list)


class RuleConfig(BaseModel):
    """A custom rule: exactly one of ``deny`` or ``require_non_empty``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    deny: tuple[str, str] | None = None
    require_non_empty: str | None = None

    @model_validator(mode="after")
    def _exactly_one_kind(self) -> RuleConfig:
        if (self.deny is None) == (self.require_non_empty is None):
            raise ValueError(
                "a rule needs exactly one of 'deny' or 'require_non_empty'"
            )
        return self

    def to_rule(self) -> ValidationRule:
        if self.deny is not None:
            return deny(*self.deny)
        if self.require_non_empty is not None:
            return require_non_empty(self.require_non_empty)
        raise ConfigurationError(
            "a rule needs exactly one of 'deny' or 'require_non_empty'"
        )


class ScanConfig(BaseModel):
    """Where and how to scan for classes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_root: str = "src"
    packages: list[str] = Field(default_factory=list)
    provider: str = "source"


class ArchitectureConfig(BaseModel):
    """Validated hexagonal architecture declaration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    base_package: str
    domain: list[str] = Field(default_factory=list)
    adapters: AdaptersConfig | None = None
    application: ApplicationConfig | None = None
    configuration: str | None = None
    rules: list[RuleConfig] = Field(default_factory=list)
    scan: ScanConfig = Field(default_factory=ScanConfig)

    @field_validator("base_package")
    @classmethod
    def _valid_base_package(cls, value: str) -> str:
        return _check_package(value)

    @field_validator("domain", mode="before")
    @classmethod
    def _domain_as_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    def scan_packages(self) -> list[str]:
        """Packages to scan; defaults to the base package."""
        return self.scan.packages or [self.base_package]

    def to_architecture(self) -> HexagonalArchitecture:
        """
        Build the architecture model through the DSL.

        Raises:
            ConfigurationError: If any declared package is malformed
        """
        builder = HexagonalArchitectureBuilder(self.base_package)
        if self.domain:
            builder.domain(*self.domain)
        if self.adapters is not None:
            adapters = builder.adapters(self.adapters.package)
            for package in self.adapters.incoming:
                adapters.incoming(package)
            for package in self.adapters.outgoing:
                adapters.outgoing(package)
        if self.application is not None:
            application = builder.application(self.application.package)
            for package in self.application.services:
                application.services(package)
            for package in self.application.incoming_ports:
                application.incoming_ports(package)
            for package in self.application.outgoing_ports:
                application.outgoing_ports(package)
        if self.configuration is not None:
            builder.configuration(self.configuration)
        builder.rule(*(rule.to_rule() for rule in self.rules))
        return builder.build()


def _read_data(path: Path) -> dict[str, Any]:
    if path.suffix == ".json":
        try:
            with open(path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
    elif path.suffix == ".toml":
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e
        if path.name == "pyproject.toml" or "tool" in data:
            data = data.get("tool", {}).get("archguard")
            if data is None:
                raise ConfigurationError(f"No [tool.archguard] table in {path}")
    else:
        raise ConfigurationError(
            f"Unsupported config format '{path.suffix}' for {path} "
            "(use .json or .toml)"
        )

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a table in {path}, got {type(data).__name__}"
        )
    return data


def load_architecture_config(path: Path) -> ArchitectureConfig:
    """
    Load an architecture declaration from a JSON or TOML file.

    Args:
        path: Path to archguard.json, archguard.toml or pyproject.toml

    Returns:
        The validated configuration

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    data = _read_data(path)
    try:
        return ArchitectureConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid architecture config in {path}: {e}") from e


def find_config(directory: Path) -> Path:
    """
    Locate the default config file in ``directory``.

    pyproject.toml only counts when it has a [tool.archguard] table.

    Raises:
        ConfigurationError: If no config file is found
    """
    for name in DEFAULT_CONFIG_FILES:
        candidate = Path(directory) / name
        if not candidate.is_file():
            continue
        if name == "pyproject.toml":
            try:
                with open(candidate, "rb") as f:
                    tool = tomllib.load(f).get("tool", {})
            except tomllib.TOMLDecodeError as e:
                raise ConfigurationError(f"Invalid TOML in {candidate}: {e}") from e
            if "archguard" not in tool:
                continue
        return candidate
    raise ConfigurationError(
        f"No architecture config found in {directory} "
        f"(looked for {', '.join(DEFAULT_CONFIG_FILES)})"
    )
