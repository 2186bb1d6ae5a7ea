"""Run a computation and capture any raised exception as a Left."""

from __future__ import annotations

from typing import Callable, TypeVar

from monadkit.either import Either, left, right

T = TypeVar("T")


def do(fn: Callable[[], T]) -> Either[Exception, T]:
    """Call ``fn``; return Right of its result, or Left of the exception it raised."""
    try:
        return right(fn())
    except Exception as exc:  # noqa: BLE001 - every failure becomes a Left
        return left(exc)