"""Tagged unions holding exactly one of several alternatives."""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Optional, Tuple


class MissingArgumentError(LookupError):
    """Raised when the requested alternative of a union is not the one held."""


class EitherN:
    """A value that is exactly one of ``arity`` alternatives, numbered from 1."""

    __slots__ = ("_index", "_value")

    arity: ClassVar[int] = 0

    def __init__(self, n: int, value: Any) -> None:
        self._index = self._check_index(n)
        self._value = value

    @classmethod
    def _label(cls) -> str:
        return cls.__name__.lower()

    @classmethod
    def _check_index(cls, n: int) -> int:
        if isinstance(n, bool) or not isinstance(n, int) or not 1 <= n <= cls.arity:
            raise ValueError(
                f"{cls._label()} argument should be between 1 and {cls.arity}"
            )
        return n

    def _check_callbacks(self, callbacks: Tuple[Callable[[Any], Any], ...]) -> None:
        if len(callbacks) != self.arity:
            raise TypeError(
                f"{type(self).__name__} expects {self.arity} callbacks, "
                f"got {len(callbacks)}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EitherN):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._index == other._index
            and self._value == other._value
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._index, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._index}, {self._value!r})"

    @property
    def index(self) -> int:
        """The number of the alternative held, from 1."""
        return self._index

    def is_arg(self, n: int) -> bool:
        """Return True if the union holds alternative ``n``."""
        return self._index == self._check_index(n)

    def arg(self, n: int) -> Tuple[Optional[Any], bool]:
        """Return ``(value, True)`` if alternative ``n`` is held, else ``(None, False)``."""
        if self.is_arg(n):
            return self._value, True
        return None, False

    def must_arg(self, n: int) -> Any:
        """Return alternative ``n`` or raise MissingArgumentError."""
        if not self.is_arg(n):
            raise MissingArgumentError(
                f"{self._label()} doesn't contain expected argument {n}"
            )
        return self._value

    def unpack(self) -> Tuple[Optional[Any], ...]:
        """Return one slot per alternative, None everywhere but the held one."""
        return tuple(
            self._value if i == self._index else None
            for i in range(1, self.arity + 1)
        )

    def arg_or_else(self, n: int, fallback: Any) -> Any:
        """Return alternative ``n``, or ``fallback`` if another one is held."""
        return self._value if self.is_arg(n) else fallback

    def arg_or_none(self, n: int) -> Optional[Any]:
        """Return alternative ``n``, or None if another one is held."""
        return self._value if self.is_arg(n) else None

    def for_each(self, *args: Callable[[Any], Any]) -> None:
        """Call the callback matching the held alternative with its value."""
        self._check_callbacks(args)
        args[self._index - 1](self._value)

    def match(self, *args: Callable[[Any], "EitherN"]) -> "EitherN":
        """Return the result of the callback matching the held alternative."""
        self._check_callbacks(args)
        return args[self._index - 1](self._value)

    def map_arg(self, n: int, mapper: Callable[[Any], "EitherN"]) -> "EitherN":
        """Apply ``mapper`` if alternative ``n`` is held; otherwise return self."""
        if self.is_arg(n):
            return mapper(self._value)
        return self


class Either3(EitherN):
    """A value of one of three possible types."""

    __slots__ = ()
    arity = 3


class Either4(EitherN):
    """A value of one of four possible types."""

    __slots__ = ()
    arity = 4