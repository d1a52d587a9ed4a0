from __future__ import annotations

import pytest

from hookwrap.errors import ConfigurationError, HookwrapError

pytestmark = pytest.mark.unit


def test_error_carries_hint() -> None:
    err = ConfigurationError("boom", hint="do this")

    assert str(err) == "boom"
    assert err.hint == "do this"


def test_hint_defaults_to_none() -> None:
    assert HookwrapError("fail").hint is None


def test_subclass_hierarchy() -> None:
    """ConfigurationError is catchable as HookwrapError and Exception."""
    err = ConfigurationError("bad")

    assert isinstance(err, HookwrapError)
    assert isinstance(err, Exception)
