"""Values that hold exactly one of two alternatives: a Left or a Right."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


class EitherError(LookupError):
    """Raised when the requested side of an Either is not present."""


class Foldable(ABC, Generic[T, U]):
    """A value in either a failure (left) or a success (right) state."""

    __slots__ = ()

    @abstractmethod
    def _left_value(self) -> T:
        """Return the failure-side value."""

    @abstractmethod
    def _right_value(self) -> U:
        """Return the success-side value."""

    @abstractmethod
    def _has_left_value(self) -> bool:
        """Return True when the value is in the failure state."""


def fold(
    foldable: Foldable[T, U],
    success_func: Callable[[U], V],
    failure_func: Callable[[T], V],
) -> V:
    """Apply ``failure_func`` to a left state or ``success_func`` to a right one."""
    if foldable._has_left_value():
        return failure_func(foldable._left_value())
    return success_func(foldable._right_value())


class Either(Foldable[L, R]):
    """A value of one of two possible types: a Left or a Right."""

    __slots__ = ("_is_left", "_value")

    def __init__(self, value: Any, *, is_left: bool) -> None:
        self._is_left = bool(is_left)
        self._value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self._is_left == other._is_left and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_left, self._value))

    def __repr__(self) -> str:
        side = "Left" if self._is_left else "Right"
        return f"{side}({self._value!r})"

    def is_left(self) -> bool:
        """Return True if this is a Left."""
        return self._is_left

    def is_right(self) -> bool:
        """Return True if this is a Right."""
        return not self._is_left

    def get_left(self) -> Tuple[Optional[L], bool]:
        """Return ``(value, True)`` for a Left, ``(None, False)`` otherwise."""
        if self._is_left:
            return self._value, True
        return None, False

    def get_right(self) -> Tuple[Optional[R], bool]:
        """Return ``(value, True)`` for a Right, ``(None, False)`` otherwise."""
        if not self._is_left:
            return self._value, True
        return None, False

    def must_left(self) -> L:
        """Return the Left value or raise EitherError."""
        if not self._is_left:
            raise EitherError("no such Left value")
        return self._value

    def must_right(self) -> R:
        """Return the Right value or raise EitherError."""
        if self._is_left:
            raise EitherError("no such Right value")
        return self._value

    def unpack(self) -> Tuple[Optional[L], Optional[R]]:
        """Return ``(left, right)``, with None for the absent side."""
        if self._is_left:
            return self._value, None
        return None, self._value

    def left_or_else(self, fallback: L) -> L:
        """Return the Left value, or ``fallback`` for a Right."""
        return self._value if self._is_left else fallback

    def right_or_else(self, fallback: R) -> R:
        """Return the Right value, or ``fallback`` for a Left."""
        return fallback if self._is_left else self._value

    def left_or_none(self) -> Optional[L]:
        """Return the Left value, or None for a Right."""
        return self._value if self._is_left else None

    def right_or_none(self) -> Optional[R]:
        """Return the Right value, or None for a Left."""
        return None if self._is_left else self._value

    def swap(self) -> "Either[R, L]":
        """Turn a Left into a Right and vice versa."""
        return Either(self._value, is_left=not self._is_left)

    def for_each(
        self, left_cb: Callable[[L], Any], right_cb: Callable[[R], Any]
    ) -> None:
        """Call ``left_cb`` or ``right_cb`` with the held value."""
        if self._is_left:
            left_cb(self._value)
        else:
            right_cb(self._value)

    def match(
        self,
        on_left: Callable[[L], "Either[L, R]"],
        on_right: Callable[[R], "Either[L, R]"],
    ) -> "Either[L, R]":
        """Return the result of ``on_left`` or ``on_right`` applied to the value."""
        if self._is_left:
            return on_left(self._value)
        return on_right(self._value)

    def map_left(self, mapper: Callable[[L], "Either[L, R]"]) -> "Either[L, R]":
        """Apply ``mapper`` to a Left; a Right is returned unchanged."""
        if self._is_left:
            return mapper(self._value)
        return self

    def map_right(self, mapper: Callable[[R], "Either[L, R]"]) -> "Either[L, R]":
        """Apply ``mapper`` to a Right; a Left is returned unchanged."""
        if self._is_left:
            return self
        return mapper(self._value)

    def _left_value(self) -> Optional[L]:
        return self._value if self._is_left else None

    def _right_value(self) -> Optional[R]:
        return None if self._is_left else self._value

    def _has_left_value(self) -> bool:
        return self._is_left


def left(value: L) -> Either[L, Any]:
    """Build a Left holding ``value``."""
    return Either(value, is_left=True)


def right(value: R) -> Either[Any, R]:
    """Build a Right holding ``value``."""
    return Either(value, is_left=False)