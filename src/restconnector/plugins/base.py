"""Plugin capability slots."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Callable


class Capability(StrEnum):
    """Extension points a plugin may attach to."""

    REQUEST = "request"
    ONERROR = "onerror"
    DATA_MANIPULATION = "data_manipulation"


@dataclass(frozen=True)
class Plugin:
    """Caller-supplied extension with up to three optional hooks.

    Hook contracts:
        request(config, descriptor) -> descriptor
            Chained across every plugin that exposes it, in order.
        onerror(config, error) -> Any
            First plugin exposing it wins. Returning (rather than
            raising) tells the engine to retry the failed path once.
        data_manipulation(raw_body) -> Any
            First plugin exposing it wins; replaces JSON parsing.

    Any hook may be a plain function or a coroutine function.
    """

    name: str
    request: Callable[..., Any] | None = None
    onerror: Callable[..., Any] | None = None
    data_manipulation: Callable[..., Any] | None = None

    def has(self, capability: Capability) -> bool:
        """Check whether this plugin exposes a capability."""
        return getattr(self, capability.value) is not None

    def hook(self, capability: Capability) -> Callable[..., Any]:
        """Get the hook for a capability."""
        hook = getattr(self, capability.value)
        if hook is None:
            raise LookupError(f"Plugin {self.name!r} has no {capability} hook")
        return hook


async def call_hook(hook: Callable[..., Any], *args: Any) -> Any:
    """Call a hook, awaiting its result if it is awaitable."""
    result = hook(*args)
    if inspect.isawaitable(result):
        result = await result
    return result
