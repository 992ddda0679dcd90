import pytest

from aioconcur.errors import AggregateError


def _sample():
    return AggregateError([ValueError("oops"), ValueError("oh no")])


def test_indexing_and_len():
    errs = _sample()
    assert len(errs) == 2
    assert str(errs[0]) == "oops"
    assert str(errs[1]) == "oh no"
    assert [str(e) for e in errs[1:]] == ["oh no"]


def test_iteration_preserves_order():
    first = OSError("oops")
    second = OSError("oh no")
    errs = AggregateError([first, second])
    assert list(errs) == [first, second]


def test_str_lists_errors():
    assert str(_sample()) == "[ValueError('oops'), ValueError('oh no')]"


def test_str_empty():
    assert str(AggregateError([])) == "[]"


def test_can_be_raised_and_caught():
    errs = _sample()
    caught = None
    try:
        raise errs
    except AggregateError as exc:
        caught = exc
    assert caught is errs
    assert len(caught) == 2
    assert str(caught) == "[ValueError('oops'), ValueError('oh no')]"
    assert [str(e) for e in caught] == ["oops", "oh no"]


def test_errors_are_mutable():
    errs = AggregateError(iter([KeyError("a")]))
    errs.errors.append(KeyError("b"))
    assert len(errs) == 2