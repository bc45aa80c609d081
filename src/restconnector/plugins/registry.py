"""Plugin registry for restconnector.

Connector descriptors reference plugins by name; factories registered
here turn those names into Plugin instances.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from restconnector.errors.types import ConfigError
from restconnector.plugins.base import Plugin

logger = logging.getLogger(__name__)

PluginFactory = Callable[[], Plugin]

_PLUGINS: dict[str, PluginFactory] = {}


class PluginNotFoundError(ConfigError):
    """A descriptor names a plugin nobody registered."""


def register_plugin(name: str) -> Callable[[PluginFactory], PluginFactory]:
    """Decorator to register a plugin factory under a name.

    Usage:
        @register_plugin("bearer-token")
        def bearer_token() -> Plugin:
            ...
    """

    def decorator(factory: PluginFactory) -> PluginFactory:
        _PLUGINS[name] = factory
        logger.debug("Registered plugin: %s -> %s", name, factory.__name__)
        return factory

    return decorator


def unregister_plugin(name: str) -> None:
    """Remove a plugin factory if present."""
    _PLUGINS.pop(name, None)


def get_plugin(name: str) -> Plugin:
    """Create a plugin by name.

    Raises:
        PluginNotFoundError: If no factory is registered under the name
    """
    factory = _PLUGINS.get(name)
    if factory is None:
        raise PluginNotFoundError(
            f"Unknown plugin: {name}",
            reference=f"Registered plugins: {', '.join(sorted(_PLUGINS)) or 'none'}",
        )
    return factory()


def resolve_plugins(entries: Iterable[str | Plugin]) -> list[Plugin]:
    """Resolve a mixed list of names and Plugin instances, keeping order."""
    return [entry if isinstance(entry, Plugin) else get_plugin(entry) for entry in entries]


def list_plugin_names() -> list[str]:
    """List all registered plugin names."""
    return list(_PLUGINS.keys())
