"""A value computed in the background, with chained continuations."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Optional, TypeVar

from monadkit.either import Either, left, right

T = TypeVar("T")

Resolve = Callable[[Any], None]
Reject = Callable[[BaseException], None]


class Future(Generic[T]):
    """A value that becomes available later, or the exception that prevented it.

    The callback given to the constructor receives ``resolve`` and ``reject``
    functions and runs on a background thread. Raising inside it rejects the
    future with that exception.
    """

    def __init__(self, cb: Callable[[Resolve, Reject], Any]) -> None:
        self._setup(cb, None)
        self._activate()

    def _setup(
        self,
        cb: Callable[[Resolve, Reject], Any],
        cancel_cb: Optional[Callable[[], None]],
    ) -> None:
        self._lock = threading.Lock()
        self._cb = cb
        self._cancel_cb = cancel_cb
        self._next: Optional[Future[T]] = None
        self._done = threading.Event()
        self._value: Optional[T] = None
        self._error: Optional[BaseException] = None

    @classmethod
    def _chained(
        cls, parent: "Future[Any]", cb: Callable[[Resolve, Reject], Any]
    ) -> "Future[Any]":
        child = cls.__new__(cls)
        child._setup(cb, parent.cancel)
        return child

    def _activate(self) -> None:
        threading.Thread(target=self._run, daemon=True).start()

    def _run(self) -> None:
        try:
            self._cb(self._resolve, self._reject)
        except Exception as exc:  # noqa: BLE001 - a failing callback rejects
            self._reject(exc)

    def _settle(self, value: Optional[T], error: Optional[BaseException]) -> None:
        with self._lock:
            if self._done.is_set():
                return
            self._value = value
            self._error = error
            if self._next is not None:
                self._next._run()
            self._done.set()

    def _resolve(self, value: T) -> None:
        self._settle(value, None)

    def _reject(self, error: BaseException) -> None:
        self._settle(None, error)

    def _chain(self, step: Callable[[Resolve, Reject], Any]) -> "Future[Any]":
        with self._lock:
            child = Future._chained(self, step)
            self._next = child
            if self._done.is_set():
                child._activate()
        return child

    def then(self, cb: Callable[[T], Any]) -> "Future[Any]":
        """Continue with ``cb(value)`` once resolved; a rejection passes through."""

        def step(resolve: Resolve, reject: Reject) -> None:
            if self._error is not None:
                reject(self._error)
                return
            resolve(cb(self._value))

        return self._chain(step)

    def catch(self, cb: Callable[[BaseException], Any]) -> "Future[Any]":
        """Recover with ``cb(error)`` once rejected; a value passes through."""

        def step(resolve: Resolve, reject: Reject) -> None:
            if self._error is None:
                resolve(self._value)
                return
            resolve(cb(self._error))

        return self._chain(step)

    def finally_(
        self, cb: Callable[[Optional[T], Optional[BaseException]], Any]
    ) -> "Future[Any]":
        """Continue with ``cb(value, error)`` whatever the outcome."""

        def step(resolve: Resolve, reject: Reject) -> None:
            resolve(cb(self._value, self._error))

        return self._chain(step)

    def cancel(self) -> None:
        """Detach the continuations of this future and of those before it."""
        with self._lock:
            self._next = None
            cancel_cb = self._cancel_cb
        if cancel_cb is not None:
            cancel_cb()

    def collect(self) -> T:
        """Wait for the future; return its value or raise its error."""
        self._done.wait()
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]

    def either(self) -> Either[BaseException, T]:
        """Wait for the future; return Right of its value or Left of its error."""
        try:
            value = self.collect()
        except Exception as exc:  # noqa: BLE001 - every failure becomes a Left
            return left(exc)
        return right(value)