"""
Class graph provider lookup.

Two providers ship with archguard (``memory`` and ``source``). Third-party
packages add more through the ``archguard.providers`` entry point group:

    [project.entry-points."archguard.providers"]
    bytecode = "mypackage.providers:BytecodeProvider"

Plugins cannot replace a built-in name.
"""

import inspect
import logging
from importlib.metadata import entry_points
from typing import Any

from archguard.domain.interfaces import ClassGraphProviderInterface
from archguard.infrastructure.graph import (
    InMemoryClassGraphProvider,
    SourceTreeClassGraphProvider,
)

logger = logging.getLogger("archguard.registry")

ENTRY_POINT_GROUP = "archguard.providers"

BUILTIN_PROVIDERS: dict[str, type[ClassGraphProviderInterface]] = {
    "memory": InMemoryClassGraphProvider,
    "source": SourceTreeClassGraphProvider,
}


def _is_provider_class(candidate: object) -> bool:
    return inspect.isclass(candidate) and issubclass(
        candidate, ClassGraphProviderInterface
    )


class ProviderRegistry:
    """
    Name-to-class table of class graph providers.

    The table fills lazily on first lookup.

    Example usage:
        provider = ProviderRegistry.create("source", source_root="src")
        graph = provider.import_packages("app")
    """

    _providers: dict[str, type[ClassGraphProviderInterface]] = {}
    _loaded: bool = False

    @classmethod
    def _load_entry_points(cls) -> None:
        if cls._loaded:
            return

        cls._providers.update(
            (name, provider_class)
            for name, provider_class in BUILTIN_PROVIDERS.items()
            if name not in cls._providers
        )

        for ep in entry_points(group=ENTRY_POINT_GROUP):
            if ep.name in BUILTIN_PROVIDERS:
                if ep.value != _qualified_name(BUILTIN_PROVIDERS[ep.name]):
                    logger.warning(
                        f"Ignoring plugin '{ep.value}': '{ep.name}' is a built-in provider"
                    )
                continue
            try:
                loaded = ep.load()
            except Exception as e:
                logger.warning(f"Failed to load provider '{ep.name}' ({ep.value}): {e}")
                continue
            if not _is_provider_class(loaded):
                logger.warning(
                    f"Entry point '{ep.name}' ({ep.value}) is not a "
                    "ClassGraphProviderInterface subclass, skipped"
                )
                continue
            cls._providers.setdefault(ep.name, loaded)
            logger.debug(f"Registered provider '{ep.name}' from {ep.value}")

        cls._loaded = True

    @classmethod
    def register(
        cls, name: str, provider_class: type[ClassGraphProviderInterface]
    ) -> None:
        """
        Register a provider class under ``name``.

        Raises:
            TypeError: If provider_class is not a ClassGraphProviderInterface
        """
        if not _is_provider_class(provider_class):
            raise TypeError(
                f"Provider '{name}' must be a ClassGraphProviderInterface subclass, "
                f"got {provider_class!r}"
            )
        cls._providers[name] = provider_class

    @classmethod
    def get(cls, name: str) -> type[ClassGraphProviderInterface]:
        """
        Look up a provider class.

        Raises:
            KeyError: If no provider has that name
        """
        cls._load_entry_points()
        try:
            return cls._providers[name]
        except KeyError:
            raise KeyError(
                f"Provider '{name}' not found. "
                f"Available providers: {', '.join(cls.available())}"
            ) from None

    @classmethod
    def create(cls, name: str, **config: Any) -> ClassGraphProviderInterface:
        """
        Instantiate a provider, passing ``config`` to its constructor.

        Raises:
            KeyError: If no provider has that name
            TypeError: If the constructor rejects the config
        """
        provider_class = cls.get(name)
        try:
            return provider_class(**config)
        except TypeError as e:
            raise TypeError(
                f"Provider '{name}' does not accept {sorted(config)}: {e}"
            ) from e

    @classmethod
    def available(cls) -> list[str]:
        cls._load_entry_points()
        return sorted(cls._providers)

    @classmethod
    def clear(cls) -> None:
        """Forget every provider; the next lookup reloads built-ins and plugins."""
        cls._providers.clear()
        cls._loaded = False


def _qualified_name(provider_class: type) -> str:
    return f"{provider_class.__module__}:{provider_class.__qualname__}"
