"""Pytest configuration and fixtures.

Provides environment isolation and a call-recording test double. Isolation
fixtures are autouse; opt out with the markers noted on each.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import os
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class CallRecorder:
    """Records hook and operation invocations in the order they happen.

    Each entry is ``(name, args, kwargs)``. Hooks can be made to raise by
    listing their name in ``fail`` (mapping to the exception to raise).
    """

    calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = field(
        default_factory=list
    )
    fail: dict[str, BaseException] = field(default_factory=dict)

    @property
    def order(self) -> list[str]:
        return [name for name, _, _ in self.calls]

    def args_of(self, name: str) -> tuple[Any, ...]:
        for entry, args, _ in self.calls:
            if entry == name:
                return args
        raise AssertionError(f"{name} was not called")

    def count(self, name: str) -> int:
        return self.order.count(name)

    def sync(self, name: str):
        def hook(*args: Any, **kwargs: Any) -> None:
            self.calls.append((name, args, kwargs))
            if name in self.fail:
                raise self.fail[name]

        return hook

    def async_(self, name: str):
        async def hook(*args: Any, **kwargs: Any) -> None:
            self.calls.append((name, args, kwargs))
            if name in self.fail:
                raise self.fail[name]

        return hook

    def hooks(self, *, use_async: bool = True) -> dict[str, Any]:
        """Return a JS-style hook mapping wired to this recorder."""
        make = self.async_ if use_async else self.sync
        return {
            "before": make("before"),
            "after": make("after"),
            "onError": make("on_error"),
            "finally": make("finally"),
        }


@pytest.fixture
def recorder() -> CallRecorder:
    return CallRecorder()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "hookwrap.config.load_dotenv", lambda *_args, **_kwargs: False
        )


@pytest.fixture(autouse=True)
def isolate_hookwrap_env(request, monkeypatch):
    """Clear HOOKWRAP_* variables so tests see a clean environment.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("HOOKWRAP_"):
            monkeypatch.delenv(key, raising=False)
