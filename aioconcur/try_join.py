"""Wait for every awaitable in a collection to succeed, stopping at the first failure."""

from __future__ import annotations

from typing import Any, Awaitable, Generator, Iterable

from .join import _Combinator
from .utils import PollState


class TryJoin(_Combinator):
    """Runs awaitables concurrently and yields all of their outputs in input order.

    A tuple of awaitables gives a tuple of outputs; any other iterable gives a
    list. As soon as a finished awaitable is found to have raised, its
    exception is raised and every other awaitable is cancelled; outputs that
    had already been produced are discarded.
    """

    def __init__(self, awaitables: Iterable[Awaitable[Any]]) -> None:
        super().__init__(awaitables)

    def poll(self) -> Any:
        """Advance every awaitable once; return the outputs, raise, or return ``PollState.PENDING``."""
        self._check_fresh()

        all_done = True
        for candidate in self._elems:
            if not candidate.poll():
                all_done = False
                continue
            try:
                candidate.output()
            except BaseException:
                self._settle(candidate)
                candidate.take()
                raise

        if not all_done:
            return PollState.PENDING

        self._done = True
        return self._shape([elem.take() for elem in self._elems])

    def __await__(self) -> Generator[Any, None, Any]:
        return super().__await__()


def try_join(awaitables: Iterable[Awaitable[Any]]) -> TryJoin:
    """Wait for all awaitables to succeed, or raise the first failure found."""
    return TryJoin(awaitables)