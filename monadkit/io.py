"""Deferred synchronous computations that may cause side effects."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from monadkit.either import Either, left, right

R = TypeVar("R")


class IO(Generic[R]):
    """A side-effecting computation that yields a value and never fails."""

    __slots__ = ("_perform",)

    def __init__(self, fn: Callable[..., R]) -> None:
        self._perform = fn

    def run(self, *args: Any) -> R:
        """Run the computation with the given arguments and return its value."""
        return self._perform(*args)


class IOEither(Generic[R]):
    """A side-effecting computation that yields a value or fails."""

    __slots__ = ("_perform",)

    def __init__(self, fn: Callable[..., R]) -> None:
        self._perform = fn

    def run(self, *args: Any) -> Either[Exception, R]:
        """Run the computation; return Right of its value or Left of its exception."""
        try:
            value = self._perform(*args)
        except Exception as exc:  # noqa: BLE001 - failures become a Left
            return left(exc)
        return right(value)