"""Wait for every awaitable in a collection to finish."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Generator, Iterable

from .utils import MaybeDone, PollState


class _Combinator:
    """Drives a fixed collection of awaitables until ``poll`` gives an outcome."""

    _label = ""
    _reuse_message = "Futures must not be polled after completing"

    def __init__(self, awaitables: Iterable[Awaitable[Any]]) -> None:
        self._as_tuple = isinstance(awaitables, tuple)
        self._elems = [MaybeDone(awaitable) for awaitable in awaitables]
        self._done = False

    def poll(self) -> Any:
        raise NotImplementedError

    def _check_fresh(self) -> None:
        if self._done:
            raise RuntimeError(self._reuse_message)

    def _settle(self, keep: MaybeDone) -> None:
        """Mark the combinator finished and cancel every element except ``keep``."""
        self._done = True
        for elem in self._elems:
            if elem is not keep:
                elem.cancel()

    def _shape(self, outputs: list[Any]) -> Any:
        return tuple(outputs) if self._as_tuple else outputs

    def __await__(self) -> Generator[Any, None, Any]:
        return self._drive().__await__()

    async def _drive(self) -> Any:
        try:
            while (output := self.poll()) is PollState.PENDING:
                waiting = {
                    elem.future
                    for elem in self._elems
                    if elem.state.is_pending() and elem.future is not None
                }
                if waiting:
                    await asyncio.wait(waiting, return_when=asyncio.FIRST_COMPLETED)
                else:
                    await asyncio.get_running_loop().create_future()
        except BaseException:
            for elem in self._elems:
                elem.cancel()
            raise
        return output

    def __repr__(self) -> str:
        return self._label + "[" + ", ".join(repr(elem.state) for elem in self._elems) + "]"


class Join(_Combinator):
    """Runs awaitables concurrently and yields all of their outputs in input order.

    A tuple of awaitables gives a tuple of outputs; any other iterable gives a
    list. If some awaitables raise, the first such exception in input order is
    raised once all of them have finished.
    """

    def __init__(self, awaitables: Iterable[Awaitable[Any]]) -> None:
        super().__init__(awaitables)

    def poll(self) -> Any:
        """Advance every awaitable once; return the outputs or ``PollState.PENDING``."""
        self._check_fresh()

        still_pending = sum(
            1 for elem in self._elems if elem.state.is_pending() and not elem.poll()
        )
        if still_pending:
            return PollState.PENDING

        self._done = True
        outputs = []
        error: BaseException | None = None
        for elem in self._elems:
            try:
                outputs.append(elem.take())
            except BaseException as exc:
                if error is None:
                    error = exc
        if error is not None:
            raise error
        return self._shape(outputs)

    def __await__(self) -> Generator[Any, None, Any]:
        return super().__await__()

    def __repr__(self) -> str:
        return super().__repr__()


def join(awaitables: Iterable[Awaitable[Any]]) -> Join:
    """Wait for all awaitables to complete, returning their outputs in order."""
    return Join(awaitables)