"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at CLI entry points
and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from sidekit.exceptions import SidekitError

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    This decorator should be applied to CLI command entry points to provide
    user-friendly error messages without stack traces for predictable error conditions.

    Catches:
        - SidekitError: Resolution, schema, fetch and generation failures
        - FileExistsError / FileNotFoundError: File/directory conflicts
        - ValueError: Invalid input or configuration
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces, and so do
    the caught ones when the CLI runs with --debug.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SidekitError as e:
            _exit_with_error(e)
        except (FileExistsError, FileNotFoundError, PermissionError) as e:
            _exit_with_error(e)
        except ValueError as e:
            _exit_with_error(e)

    return wrapper  # type: ignore[return-value]


def _exit_with_error(error: Exception) -> None:
    if _debug_enabled():
        raise error
    click.echo(f"Error: {error}", err=True)
    raise SystemExit(1) from None


def _debug_enabled() -> bool:
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return False
    return bool(getattr(ctx.find_root().obj, "debug", False))
