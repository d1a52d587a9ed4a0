"""Lifecycle hook record.

A fixed set of four optional callbacks. Execution order is owned by the
wrapper, never by the record.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, fields
from typing import Any, Literal

from hookwrap.errors import ConfigurationError

HookName = Literal["before", "after", "on_error", "finally_"]
HookFn = Callable[..., Awaitable[Any] | None]

# Mapping keys accepted by ``coerce``; the camelCase/bare forms mirror the
# names used by JavaScript hook records.
_ALIASES: dict[str, HookName] = {
    "before": "before",
    "after": "after",
    "on_error": "on_error",
    "onError": "on_error",
    "finally_": "finally_",
    "finally": "finally_",
}


@dataclass(frozen=True)
class LifecycleHooks:
    """Optional callbacks around a wrapped operation.

    Example:
        hooks = LifecycleHooks(before=audit, on_error=report)
    """

    #: Called with the wrapped call's arguments before the operation.
    before: HookFn | None = None
    #: Called with the operation's return value on success.
    after: HookFn | None = None
    #: Called with the captured exception on failure. Not protected.
    on_error: HookFn | None = None
    #: Called with no arguments on every path, last. Not protected.
    finally_: HookFn | None = None

    def __post_init__(self) -> None:
        """Reject non-callable hooks early for clear errors."""
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None and not callable(value):
                raise ConfigurationError(
                    f"{f.name} hook must be callable, got {type(value).__name__}",
                    hint=f"Pass a function or coroutine function as {f.name}=...",
                )

    def present(self) -> tuple[HookName, ...]:
        """Return the names of the configured hooks, in execution order."""
        return tuple(
            f.name  # type: ignore[misc]
            for f in fields(self)
            if getattr(self, f.name) is not None
        )

    @classmethod
    def coerce(
        cls, value: LifecycleHooks | Mapping[str, Any] | None
    ) -> LifecycleHooks:
        """Normalize ``None``, a hooks record, or a mapping into a record."""
        if value is None:
            return cls()
        if isinstance(value, LifecycleHooks):
            return value
        if not isinstance(value, Mapping):
            raise ConfigurationError(
                f"hooks must be a LifecycleHooks or a mapping, got {type(value).__name__}",
                hint="Pass LifecycleHooks(before=...) or {'before': ...}.",
            )

        resolved: dict[str, Any] = {}
        for key, fn in value.items():
            name = _ALIASES.get(key)
            if name is None:
                raise ConfigurationError(
                    f"Unknown hook: {key!r}",
                    hint="Supported hooks: 'before', 'after', 'onError', 'finally'",
                )
            if name in resolved:
                raise ConfigurationError(
                    f"Hook {name!r} given more than once",
                    hint=f"Use exactly one of the aliases for {name!r}.",
                )
            resolved[name] = fn
        return cls(**resolved)


__all__ = ["HookFn", "HookName", "LifecycleHooks"]
