"""hookwrap: lifecycle hooks around sync or async operations.

Public API:
    - with_lifecycle(): Wrap an operation; calls resolve to a tagged result
    - lifecycle(): Decorator form of with_lifecycle()
    - LifecycleHooks: The four optional hooks (before, after, on_error, finally_)
    - Success / Failure: Result variants, discriminated by ``ok``
    - Config: Tracing configuration
"""

from __future__ import annotations

import logging

from hookwrap.config import Config
from hookwrap.errors import ConfigurationError, HookwrapError
from hookwrap.hooks import LifecycleHooks
from hookwrap.result import Failure, Success, WrappedResult, is_failure, is_success
from hookwrap.wrapper import lifecycle, with_lifecycle

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("hookwrap")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("hookwrap").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Failure",
    "HookwrapError",
    "LifecycleHooks",
    "Success",
    "WrappedResult",
    "is_failure",
    "is_success",
    "lifecycle",
    "with_lifecycle",
]
