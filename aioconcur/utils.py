"""Shared building blocks: poll states, completion tracking, fused streams and a small PRNG."""

from __future__ import annotations

import asyncio
import enum
import inspect
import threading
from typing import Any, AsyncIterable, AsyncIterator, Awaitable

_MASK32 = 0xFFFFFFFF


class PollState(enum.Enum):
    """Where a tracked operation stands.

    ``PENDING`` doubles as the value ``poll()`` methods return while an
    operation has not finished yet.
    """

    PENDING = "Pending"
    DONE = "Done"
    CONSUMED = "Consumed"

    def __repr__(self) -> str:
        return self.value

    def is_pending(self) -> bool:
        """Return True if the operation is still running."""
        return self is PollState.PENDING

    def is_done(self) -> bool:
        """Return True if the output is ready and not yet taken."""
        return self is PollState.DONE

    def is_consumed(self) -> bool:
        """Return True if the output has been taken."""
        return self is PollState.CONSUMED


class MaybeDone:
    """An awaitable that may have completed, holding its outcome until taken."""

    def __init__(self, awaitable: Awaitable[Any]) -> None:
        self._awaitable: Awaitable[Any] | None = awaitable
        self._future: asyncio.Future[Any] | None = None
        self._state = PollState.PENDING

    @property
    def state(self) -> PollState:
        """The current state of the wrapped awaitable."""
        return self._state

    @property
    def future(self) -> asyncio.Future[Any] | None:
        """The scheduled future, or None before the first poll."""
        return self._future

    def poll(self) -> bool:
        """Schedule the awaitable if needed and report whether it has finished."""
        if self._state is PollState.CONSUMED:
            raise RuntimeError("MaybeDone polled after value taken")
        if self._state is PollState.DONE:
            return True
        if self._future is None:
            self._future = asyncio.ensure_future(self._awaitable)
            self._awaitable = None
        if self._future.done():
            self._state = PollState.DONE
            return True
        return False

    def output(self) -> Any:
        """Return the finished output without taking it; re-raise a stored exception."""
        if self._state is not PollState.DONE:
            raise asyncio.InvalidStateError("output is not available")
        return self._future.result()

    def take(self) -> Any:
        """Take the finished output, leaving nothing behind; re-raise a stored exception."""
        if self._state is not PollState.DONE:
            raise asyncio.InvalidStateError("output is not available")
        self._state = PollState.CONSUMED
        return self._future.result()

    def cancel(self) -> None:
        """Abandon the awaitable if it has not finished."""
        if self._future is not None:
            if self._state is PollState.PENDING:
                self._future.cancel()
            return
        if self._state is PollState.PENDING:
            if inspect.iscoroutine(self._awaitable):
                self._awaitable.close()
            self._awaitable = None
            self._state = PollState.CONSUMED

    def __repr__(self) -> str:
        return f"MaybeDone({self._state!r})"


class Fuse:
    """An async iterator that stays exhausted once its source has ended."""

    def __init__(self, stream: AsyncIterable[Any]) -> None:
        self._iterator: AsyncIterator[Any] = aiter(stream)
        self._done = False

    @property
    def done(self) -> bool:
        """True once the source has signalled its end."""
        return self._done

    def __aiter__(self) -> Fuse:
        return self

    async def __anext__(self) -> Any:
        if self._done:
            raise StopAsyncIteration
        try:
            return await anext(self._iterator)
        except StopAsyncIteration:
            self._done = True
            raise

    def __repr__(self) -> str:
        return f"Fuse(done={self._done})"


class XorShift32:
    """The 32-bit xorshift generator with a multiply-shift range reduction."""

    def __init__(self, seed: int) -> None:
        state = seed & _MASK32
        if state == 0:
            raise ValueError("seed must be non-zero modulo 2**32")
        self._state = state

    def below(self, n: int) -> int:
        """Return a pseudo-random integer in ``range(n)`` (0 when ``n`` is 0)."""
        if n < 0:
            raise ValueError("n must not be negative")
        x = self._state
        x ^= (x << 13) & _MASK32
        x ^= x >> 17
        x ^= (x << 5) & _MASK32
        self._state = x
        return (x * n) >> 32


_local = threading.local()


def random(n: int) -> int:
    """Return a pseudo-random integer in ``range(n)`` from a per-thread generator."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = XorShift32((id(object()) & _MASK32) or 1)
        _local.rng = rng
    return rng.below(n)