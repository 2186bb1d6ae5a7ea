# monadkit

Small functional containers for Python:

- `monadkit.either`: `Either`, a value that is either a *left* or a *right*, with `fold` to collapse it.
- `monadkit.union` and `monadkit.union5`: `Either3`, `Either4` and `Either5`, a value that is one of three, four or five alternatives.
- `monadkit.do`: `do`, which runs a function and captures any exception it raises as a left value.
- `monadkit.io`: `IO` and `IOEither`, wrappers around a deferred, side-effecting computation.
- `monadkit.future`: `Future`, a value computed on a background thread, with `then`, `catch` and `finally_` chaining.

The package has no dependencies beyond the standard library.

## Installation

```
pip install monadkit
```

## Either

```python
from monadkit.either import left, right, fold

value = right(42)
value.is_right()            # True
value.right_or_else(0)      # 42
value.left_or_none()        # None
value.unpack()              # (None, 42)
value.swap().is_left()      # True

err = left(ValueError("boom"))
fold(err, lambda v: f"ok {v}", lambda e: f"failed {e}")   # "failed boom"
```

- `get_left()` and `get_right()` return a `(value, present)` pair; the value is `None` when that side is absent.
- `must_left()` and `must_right()` raise `EitherError` (a `LookupError`) when the wanted side is absent.
- `left_or_else(fallback)` / `right_or_else(fallback)` return the fallback for the other side.
- `for_each(left_cb, right_cb)` calls the callback for the side that is held.
- `match(on_left, on_right)` returns what the matching callback returns.
- `map_left(mapper)` and `map_right(mapper)` apply the mapper to their side and return the other side unchanged.

`Either` values compare equal when they hold the same side and equal values, and are hashable when the value is.

## Unions of three or more alternatives

Alternatives are numbered from 1. Build one with the class and the number of the alternative:

```python
from monadkit.union import Either3, Either4, MissingArgumentError
from monadkit.union5 import Either5

e = Either3(2, True)
e.is_arg(2)                 # True
e.arg(2)                    # (True, True)
e.arg(1)                    # (None, False)
e.arg_or_else(1, 21)        # 21
e.arg_or_none(3)            # None
e.unpack()                  # (None, True, None)
e.must_arg(2)               # True
e.must_arg(1)               # raises MissingArgumentError
```

- `index` is the number of the alternative held.
- `for_each(*callbacks)` and `match(*callbacks)` take exactly one callback per alternative; another count raises `TypeError`.
- `map_arg(n, mapper)` applies the mapper if alternative `n` is held and otherwise returns the union unchanged.
- A number outside `1..arity` raises `ValueError`, both in the constructor and in the methods that take `n`.

## do

```python
from monadkit.do import do

do(lambda: int("12")).must_right()       # 12
do(lambda: int("x")).is_left()           # True; the left holds the ValueError
```

## IO

```python
from monadkit.io import IO, IOEither

IO(lambda a, b: a + b).run(1, 2)                 # 3
IOEither(lambda: 1 / 0).run().is_left()          # True
IOEither(lambda x: x * 2).run(21).must_right()   # 42
```

`IO.run` returns the function's result and lets exceptions through. `IOEither.run` returns a right of the result, or a left of the exception it raised.

## Future

```python
from monadkit.future import Future

future = (
    Future(lambda resolve, reject: resolve(42))
    .then(lambda v: v * 2)
    .catch(lambda err: 0)
)
future.collect()            # 84
```

- The constructor's callback runs on a background thread and receives `resolve` and `reject`. Raising inside it rejects the future.
- `then(cb)` continues with `cb(value)` on success; a rejection passes through to the next step.
- `catch(cb)` continues with `cb(error)` on failure; a value passes through.
- `finally_(cb)` continues with `cb(value, error)` in either case.
- Inside any continuation, the returned value resolves the next future and a raised exception rejects it.
- `collect()` waits, then returns the value or raises the error.
- `either()` waits, then returns a right of the value or a left of the error.
- `cancel()` detaches the continuations of this future and of the futures before it in the chain, so later steps are not run.

## What the package does not do

There is no separate option or result type: `do`, `IOEither` and `Future.either` report their outcome as an `Either` with the exception on the left. There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```