"""Configuration: frozen Config with optional environment resolution."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from hookwrap.errors import ConfigurationError

_TRACE_ENV_VAR = "HOOKWRAP_TRACE"
_LABEL_ENV_VAR = "HOOKWRAP_LABEL"


@dataclass(frozen=True)
class Config:
    """Immutable wrapper configuration.

    The environment is only consulted through ``from_env()``; a bare
    ``Config()`` never reads it.

    Example:
        config = Config(trace=True, label="billing.charge")
    """

    #: Emit DEBUG records for every lifecycle step.
    trace: bool = False
    #: Name used in log records; defaults to the operation's qualified name.
    label: str | None = None

    def __post_init__(self) -> None:
        """Validate field types."""
        if not isinstance(self.trace, bool):
            raise ConfigurationError(
                f"trace must be a bool, got {type(self.trace).__name__}",
                hint="Pass Config(trace=True) or set HOOKWRAP_TRACE=1.",
            )
        if self.label is not None and (
            not isinstance(self.label, str) or not self.label.strip()
        ):
            raise ConfigurationError(
                "label must be a non-empty string",
                hint="Pass Config(label='orders.create') or omit it.",
            )

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> Config:
        """Build a Config from ``HOOKWRAP_*`` environment variables.

        ``HOOKWRAP_TRACE`` enables tracing only when exactly ``"1"``.
        """
        if dotenv:
            load_dotenv()
        label = os.environ.get(_LABEL_ENV_VAR) or None
        return cls(trace=os.environ.get(_TRACE_ENV_VAR) == "1", label=label)


__all__ = ["Config"]
