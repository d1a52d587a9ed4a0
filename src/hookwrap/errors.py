"""Exception hierarchy for hookwrap.

Only misuse of the library raises these. Failures of wrapped operations are
never translated: they are captured unmodified into a ``Failure`` result.
"""

from __future__ import annotations


class HookwrapError(Exception):
    """Base exception for all hookwrap errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(HookwrapError):
    """Wrapper, hook or config validation failed at construction time."""
