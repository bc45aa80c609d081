"""Plugin extension points for restconnector."""

from restconnector.plugins.base import Capability, Plugin, call_hook
from restconnector.plugins.pipeline import (
    run_error_hooks,
    run_request_hooks,
    transform_body,
)
from restconnector.plugins.registry import (
    PluginNotFoundError,
    get_plugin,
    list_plugin_names,
    register_plugin,
    resolve_plugins,
    unregister_plugin,
)

# Register built-in plugins
from restconnector.plugins import builtin  # noqa: E402,F401

__all__ = [
    "Capability",
    "Plugin",
    "call_hook",
    # pipeline
    "run_request_hooks",
    "run_error_hooks",
    "transform_body",
    # registry
    "PluginNotFoundError",
    "register_plugin",
    "unregister_plugin",
    "get_plugin",
    "resolve_plugins",
    "list_plugin_names",
]
