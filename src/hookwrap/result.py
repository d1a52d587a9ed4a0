"""Tagged success/failure results returned by wrapped operations.

Both variants carry an explicit ``ok`` discriminant. Check it (or match on the
variant type) before touching ``result`` or ``error``.
"""

from __future__ import annotations

import dataclasses
import typing
from typing import Any, Literal, NoReturn, TypeGuard

T = typing.TypeVar("T")
E = typing.TypeVar("E", bound=BaseException)


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """The wrapped operation (and its ``before``/``after`` hooks) completed."""

    result: T
    ok: Literal[True] = dataclasses.field(default=True, init=False)

    def unwrap(self) -> T:
        return self.result

    def to_dict(self) -> dict[str, Any]:
        """Return the ``{"ok": True, "result": ...}`` mapping form."""
        return {"ok": True, "result": self.result}


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E: BaseException]:
    """A captured failure; ``error`` is the exact object that was raised."""

    error: E
    ok: Literal[False] = dataclasses.field(default=False, init=False)

    def unwrap(self) -> NoReturn:
        """Re-raise the captured error."""
        raise self.error

    def to_dict(self) -> dict[str, Any]:
        """Return the ``{"ok": False, "error": ...}`` mapping form."""
        return {"ok": False, "error": self.error}


type WrappedResult[T] = Success[T] | Failure[Exception]


def is_success(result: Success[T] | Failure[Any]) -> TypeGuard[Success[T]]:
    return result.ok is True


def is_failure(result: Success[Any] | Failure[E]) -> TypeGuard[Failure[E]]:
    return result.ok is False


__all__ = ["Failure", "Success", "WrappedResult", "is_failure", "is_success"]
