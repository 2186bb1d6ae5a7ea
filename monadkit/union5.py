"""A tagged union holding exactly one of five alternatives."""

from __future__ import annotations

from monadkit.union import EitherN


class Either5(EitherN):
    """A value of one of five possible types."""

    __slots__ = ()
    arity = 5