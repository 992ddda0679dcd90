# aioconcur

Small, dependency-free helpers for awaiting groups of awaitables and
async iterables at the same time with `asyncio`.

| Helper     | Waits for                                  | Result                                              |
|------------|--------------------------------------------|-----------------------------------------------------|
| `join`     | every awaitable                            | all outputs, in input order                         |
| `try_join` | every awaitable, stops at the first error  | all outputs in input order, or that error is raised |
| `race`     | the first awaitable to finish              | that awaitable's output (or its exception)          |
| `race_ok`  | the first awaitable to succeed             | its output, or an `AggregateError` is raised        |
| `merge`    | items from several streams                 | one async iterator that yields every item           |

## Installation

```
pip install aioconcur
```

It needs Python 3.10 or later and nothing outside the standard library.

## Usage

```python
import asyncio

from aioconcur.join import join
from aioconcur.race import race
from aioconcur.race_ok import race_ok
from aioconcur.try_join import try_join
from aioconcur.merge import merge
from aioconcur.errors import AggregateError


async def value(x, delay=0.0):
    await asyncio.sleep(delay)
    return x


async def fail(message):
    raise OSError(message)


async def numbers(*xs):
    for x in xs:
        yield x


async def main():
    # Wait for all of them; outputs keep the order of the inputs.
    assert await join([value(1), value("hello"), value(3)]) == [1, "hello", 3]
    # A tuple of awaitables gives a tuple of outputs.
    assert await join((value(1), value("hello"))) == (1, "hello")

    # The first to finish wins; the others are cancelled.
    assert await race([value("slow", 0.1), value("fast")]) == "fast"

    # The first success wins; if all fail, every error is reported.
    assert await race_ok([fail("oops"), value("hello")]) == "hello"
    try:
        await race_ok([fail("oops"), fail("oh no")])
    except AggregateError as errors:
        assert [str(e) for e in errors] == ["oops", "oh no"]

    # All must succeed; the first error found is raised.
    assert await try_join([value("hello"), value("world")]) == ["hello", "world"]

    # Merge streams; items arrive as soon as any source has one.
    total = 0
    async for n in merge([numbers(1), numbers(2), numbers(3)]):
        total += n
    assert total == 6


asyncio.run(main())
```

## Behaviour

- **`join(awaitables)`** returns a `Join`. Awaiting it runs every awaitable
  concurrently. A tuple input gives a tuple of outputs, any other iterable a
  list. If some awaitables raise, the first such exception in input order is
  raised once all of them have finished. An empty input gives `[]`.
- **`try_join(awaitables)`** returns a `TryJoin`. As soon as a finished
  awaitable is found to have raised, that exception is raised, the other
  awaitables are cancelled and any outputs already produced are discarded.
- **`race(awaitables)`** returns a `Race`. Inputs are checked in the order
  given, so when several have finished by the same check the earliest one
  wins. If the winner raised, its exception is raised. The rest are
  cancelled. An empty input never finishes.
- **`race_ok(awaitables)`** returns a `RaceOk`. The first awaitable to finish
  without raising wins and the rest are cancelled. If all of them raise, an
  `AggregateError` (from `aioconcur.errors`) is raised; it supports `len()`,
  indexing and iteration over the exceptions in input order, which are also
  available as its `errors` list.
- **`merge(streams)`** returns a `Merge`, an async iterator that drives every
  stream concurrently and ends once all of them are exhausted. When several
  streams have an item ready at once, a tuple of streams is checked from a
  random starting point onwards and any other collection in a shuffled
  order, so the order of items between streams is not fixed.
  `Merge.aclose()` cancels outstanding reads and closes the sources.
- **`into_stream(source)`** (in `aioconcur.merge`) returns async iterables
  unchanged, turns an awaitable into a stream of its single output and a
  plain iterable into a stream of its items; anything else raises
  `TypeError`. `merge` applies it to each of its inputs, so plain lists and
  awaitables can be merged too.

`Join`, `TryJoin`, `Race` and `RaceOk` start their awaitables on first use
and must be awaited inside a running event loop. If the awaiting task is
cancelled, every unfinished awaitable is cancelled as well. Each also has a
`poll()` method that advances the inputs one step and returns
`PollState.PENDING` (from `aioconcur.utils`) while no outcome is ready.
Polling or awaiting one of them again after it has finished raises
`RuntimeError`. A finished `Merge` keeps raising `StopAsyncIteration`.

`aioconcur.utils` also holds the building blocks the helpers use:
`MaybeDone`, `Fuse`, the `XorShift32` generator and `random(n)`.

## What it does not do

This is a library only: it has no command-line tool, and it works with
`asyncio` alone, not with other event loops.

## Running the tests

```
pip install -e ".[test]"
pytest
```