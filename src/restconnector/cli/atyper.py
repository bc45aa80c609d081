"""Async wrapper for Typer to support async commands."""

import asyncio
import inspect
from functools import wraps
from typing import Any, Callable

import typer
from typer.core import TyperCommand


def _async_command_wrapper(f: Callable) -> Callable:
    """Wrap an async function to run synchronously with asyncio.run."""

    @wraps(f)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(f(*args, **kwargs))

    return sync_wrapper


class ATyper(typer.Typer):
    """Typer subclass whose commands may be coroutine functions."""

    def command(  # type: ignore
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Any:
        """Register a command, wrapping async functions for execution."""

        def decorator(f: Callable) -> Callable:
            if inspect.iscoroutinefunction(f):
                f = _async_command_wrapper(f)
            return typer.Typer.command(self, name, cls=cls, **kwargs)(f)

        return decorator
