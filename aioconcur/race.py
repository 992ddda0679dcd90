"""Wait for the first awaitable in a collection to finish."""

from __future__ import annotations

from typing import Any, Awaitable, Generator, Iterable

from .join import _Combinator
from .utils import PollState


class Race(_Combinator):
    """Runs awaitables concurrently and yields the outcome of the first to finish.

    Awaitables are checked in input order, so when several have finished by
    the same check the earliest one in the input wins. If the winner raised,
    its exception is raised. The remaining awaitables are cancelled. An empty
    collection never finishes.
    """

    _label = "Race"
    _reuse_message = "Futures must not be polled after being completed"

    def __init__(self, awaitables: Iterable[Awaitable[Any]]) -> None:
        super().__init__(awaitables)

    def poll(self) -> Any:
        """Advance every awaitable once; return the winner's output or ``PollState.PENDING``."""
        self._check_fresh()
        for winner in self._elems:
            if winner.poll():
                self._settle(winner)
                return winner.take()
        return PollState.PENDING

    def __await__(self) -> Generator[Any, None, Any]:
        return super().__await__()


def race(awaitables: Iterable[Awaitable[Any]]) -> Race:
    """Wait for the first awaitable to complete, returning its output."""
    return Race(awaitables)