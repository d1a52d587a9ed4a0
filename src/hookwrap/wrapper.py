"""Lifecycle wrapper: run an operation between hooks, return a tagged result.

Execution order for every call is fixed:

    before(*args, **kwargs) -> operation(*args, **kwargs) -> after(result)
        -> Success(result)
    on any Exception from those three: on_error(error) -> Failure(error)
    always, last: finally_()

``on_error`` and ``finally_`` are not protected: their own exceptions escape
to the caller, and an exception from ``finally_`` supersedes the outcome.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
import functools
import logging
from typing import Any, overload

from hookwrap._awaitable import resolve
from hookwrap.config import Config
from hookwrap.errors import ConfigurationError
from hookwrap.hooks import HookFn, LifecycleHooks
from hookwrap.result import Failure, Success, WrappedResult

logger = logging.getLogger(__name__)


@overload
def with_lifecycle[**P, T](
    operation: Callable[P, Awaitable[T]],
    /,
    hooks: LifecycleHooks | Mapping[str, Any] | None = None,
    *,
    config: Config | None = None,
    **hook_kwargs: HookFn | None,
) -> Callable[P, Awaitable[WrappedResult[T]]]: ...


@overload
def with_lifecycle[**P, T](
    operation: Callable[P, T],
    /,
    hooks: LifecycleHooks | Mapping[str, Any] | None = None,
    *,
    config: Config | None = None,
    **hook_kwargs: HookFn | None,
) -> Callable[P, Awaitable[WrappedResult[T]]]: ...


def with_lifecycle(
    operation: Callable[..., Any],
    /,
    hooks: LifecycleHooks | Mapping[str, Any] | None = None,
    *,
    config: Config | None = None,
    **hook_kwargs: HookFn | None,
) -> Callable[..., Awaitable[WrappedResult[Any]]]:
    """Wrap ``operation`` with lifecycle hooks.

    Args:
        operation: Sync or async callable. Its arguments are forwarded as-is.
        hooks: A ``LifecycleHooks`` or a mapping of hook names to callables.
        config: Optional tracing configuration.
        **hook_kwargs: Hooks given by keyword (``before=``, ``after=``,
            ``on_error=``, ``finally_=``) instead of ``hooks``.

    Returns:
        A coroutine function with the operation's signature that resolves to
        ``Success(result)`` or ``Failure(error)``.

    Example:
        safe_div = with_lifecycle(divide, on_error=report)
        outcome = await safe_div(10, 0)
        if not outcome.ok:
            print(outcome.error)
    """
    if not callable(operation):
        raise ConfigurationError(
            f"operation must be callable, got {type(operation).__name__}",
            hint="Pass the function to wrap as the first argument.",
        )
    if hooks is not None and hook_kwargs:
        raise ConfigurationError(
            "hooks and keyword hooks are mutually exclusive",
            hint="Pass either hooks=LifecycleHooks(...) or before=/after=/... keywords.",
        )

    resolved = LifecycleHooks.coerce(hooks if hooks is not None else hook_kwargs)
    cfg = config if config is not None else Config()
    label = cfg.label or getattr(operation, "__qualname__", None) or repr(operation)

    if cfg.trace:
        logger.debug("Wrapping %s with hooks %s", label, resolved.present())

    def trace(step: str) -> None:
        if cfg.trace:
            logger.debug("%s: %s", label, step)

    @functools.wraps(operation)
    async def wrapped(*args: Any, **kwargs: Any) -> WrappedResult[Any]:
        try:
            if resolved.before is not None:
                trace("before")
                await resolve(resolved.before(*args, **kwargs))

            trace("operation")
            result = await resolve(operation(*args, **kwargs))

            if resolved.after is not None:
                trace("after")
                await resolve(resolved.after(result))

            trace("ok")
            return Success(result)
        except Exception as error:
            if cfg.trace:
                logger.debug("%s: failed with %s", label, type(error).__name__)
            if resolved.on_error is not None:
                trace("on_error")
                await resolve(resolved.on_error(error))
            return Failure(error)
        finally:
            if resolved.finally_ is not None:
                trace("finally")
                await resolve(resolved.finally_())

    return wrapped


def lifecycle(
    *,
    before: HookFn | None = None,
    after: HookFn | None = None,
    on_error: HookFn | None = None,
    finally_: HookFn | None = None,
    config: Config | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Awaitable[WrappedResult[Any]]]]:
    """Decorator form of ``with_lifecycle``.

    Example:
        @lifecycle(finally_=release)
        async def fetch(key: str) -> bytes: ...
    """
    hooks = LifecycleHooks(
        before=before, after=after, on_error=on_error, finally_=finally_
    )

    def decorate(
        operation: Callable[..., Any],
    ) -> Callable[..., Awaitable[WrappedResult[Any]]]:
        return with_lifecycle(operation, hooks, config=config)

    return decorate


__all__ = ["lifecycle", "with_lifecycle"]
