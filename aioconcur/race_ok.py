"""Wait for the first awaitable in a collection to finish without raising."""

from __future__ import annotations

from typing import Any, Awaitable, Generator, Iterable

from .errors import AggregateError
from .join import _Combinator
from .utils import PollState


class RaceOk(_Combinator):
    """Runs awaitables concurrently and yields the first successful output.

    Awaitables are checked in input order. When one finishes without raising,
    its output is returned and the rest are cancelled. If every awaitable
    raises, an :class:`AggregateError` holding their exceptions in input order
    is raised.
    """

    _label = "RaceOk"

    def __init__(self, awaitables: Iterable[Awaitable[Any]]) -> None:
        super().__init__(awaitables)

    def poll(self) -> Any:
        """Advance every awaitable once; return a success, raise, or return ``PollState.PENDING``."""
        self._check_fresh()

        all_done = True
        for candidate in self._elems:
            if not candidate.poll():
                all_done = False
                continue
            try:
                candidate.output()
            except Exception:
                continue
            self._settle(candidate)
            return candidate.take()

        if not all_done:
            return PollState.PENDING

        self._done = True
        errors = []
        for elem in self._elems:
            try:
                elem.take()
            except Exception as exc:
                errors.append(exc)
        raise AggregateError(errors)

    def __await__(self) -> Generator[Any, None, Any]:
        return super().__await__()


def race_ok(awaitables: Iterable[Awaitable[Any]]) -> RaceOk:
    """Wait for the first awaitable to succeed, or raise an AggregateError if none does."""
    return RaceOk(awaitables)