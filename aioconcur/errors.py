"""Errors raised by the combinators."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class AggregateError(Exception):
    """A collection of errors, one per failed operation, in input order."""

    def __init__(self, errors: Iterable[BaseException]) -> None:
        self.errors: list[BaseException] = list(errors)
        super().__init__(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __getitem__(self, index: Any) -> Any:
        return self.errors[index]

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self.errors)

    def __str__(self) -> str:
        return "[" + ", ".join(repr(error) for error in self.errors) + "]"