"""Merge several asynchronous streams into one."""

from __future__ import annotations

import asyncio
import inspect
import math
from typing import Any, AsyncIterable, AsyncIterator, Awaitable, Iterable

from .utils import Fuse, random


async def _once(awaitable: Awaitable[Any]) -> AsyncIterator[Any]:
    yield await awaitable


async def _from_iterable(iterable: Iterable[Any]) -> AsyncIterator[Any]:
    for item in iterable:
        yield item


def into_stream(source: Any) -> AsyncIterable[Any]:
    """Turn ``source`` into an async iterable.

    Async iterables are returned unchanged, an awaitable becomes a stream of
    its single output, and a plain iterable is yielded item by item.
    """
    if hasattr(source, "__aiter__"):
        return source
    if inspect.isawaitable(source):
        return _once(source)
    if isinstance(source, Iterable):
        return _from_iterable(source)
    raise TypeError(f"cannot turn {type(source).__name__} into a stream")


async def _advance(stream: Fuse) -> tuple[bool, Any]:
    try:
        return True, await anext(stream)
    except StopAsyncIteration:
        return False, None


class Merge:
    """An async iterator yielding items from several streams as they become ready.

    Every stream is driven concurrently and no item is dropped; iteration ends
    once all streams are exhausted. When several streams have an item ready
    at once, the order in which they are checked is randomised: a tuple of
    streams is checked from a random starting point onwards, any other
    collection in a shuffled order. The ordering of items between streams is
    therefore not guaranteed.
    """

    def __init__(self, streams: Iterable[Any]) -> None:
        self._rotate = isinstance(streams, tuple)
        self._sources = [aiter(into_stream(stream)) for stream in streams]
        self._streams = [Fuse(source) for source in self._sources]
        self._tasks: dict[int, asyncio.Future[tuple[bool, Any]]] = {}
        self._done = False

    def _order(self) -> list[int]:
        count = len(self._streams)
        if count == 0:
            return []
        if self._rotate:
            start = -random(math.factorial(count)) % count
            return [(start + offset) % count for offset in range(count)]
        return sorted(range(count), key=lambda _: random(1000))

    def __aiter__(self) -> Merge:
        return self

    async def __anext__(self) -> Any:
        if self._done:
            raise StopAsyncIteration
        while True:
            pending = False
            for index in self._order():
                stream = self._streams[index]
                if stream.done:
                    continue
                task = self._tasks.get(index)
                if task is None:
                    task = asyncio.ensure_future(_advance(stream))
                    self._tasks[index] = task
                if not task.done():
                    pending = True
                    continue
                del self._tasks[index]
                has_item, item = task.result()
                if has_item:
                    return item
            if not pending:
                self._done = True
                raise StopAsyncIteration
            await asyncio.wait(
                set(self._tasks.values()), return_when=asyncio.FIRST_COMPLETED
            )

    async def aclose(self) -> None:
        """Stop every stream still running and close the underlying iterators."""
        self._done = True
        tasks = list(self._tasks.values())
        self._tasks.clear()
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        for source in self._sources:
            close = getattr(source, "aclose", None)
            if close is not None:
                await close()

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(stream) for stream in self._streams) + "]"


def merge(streams: Iterable[Any]) -> Merge:
    """Combine several streams into one stream of all their items."""
    return Merge(streams)