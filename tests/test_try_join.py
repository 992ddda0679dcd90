import asyncio

import pytest

from aioconcur.try_join import TryJoin, try_join
from aioconcur.utils import PollState

pytestmark = pytest.mark.asyncio


async def fail(exc):
    raise exc


@pytest.fixture
def futures():
    """Two unresolved futures on the running loop."""
    loop = asyncio.get_event_loop()
    return loop.create_future(), loop.create_future()


@pytest.mark.parametrize(
    "container, values",
    [(list, ["hello", "world"]), (tuple, ("hello", "world")), (list, [])],
)
async def test_all_ok(container, values):
    res = await try_join(container(asyncio.sleep(0, value) for value in values))
    assert res == container(values)


async def test_one_err():
    with pytest.raises(OSError) as info:
        await try_join([asyncio.sleep(0, "hello"), fail(OSError("oh no"))])
    assert str(info.value) == "oh no"


async def test_outputs_keep_input_order():
    res = await try_join(
        [asyncio.sleep(0.03, 1), asyncio.sleep(0.0, 2), asyncio.sleep(0.01, 3)]
    )
    assert res == [1, 2, 3]


async def test_error_returns_early_and_cancels_others():
    cancelled = []
    never = asyncio.Event()

    async def waits_forever():
        try:
            await never.wait()
        except asyncio.CancelledError:
            cancelled.append(True)
            raise

    with pytest.raises(ValueError, match="boom"):
        await asyncio.wait_for(
            try_join([waits_forever(), fail(ValueError("boom"))]), timeout=1
        )
    await asyncio.sleep(0)
    await asyncio.sleep(0)
    assert cancelled == [True]


async def test_poll_pending_then_ready(futures):
    first, second = futures
    fut = TryJoin([first, second])
    assert fut.poll() is PollState.PENDING
    first.set_result("a")
    assert fut.poll() is PollState.PENDING
    second.set_result("b")
    assert fut.poll() == ["a", "b"]


async def test_poll_raises_while_others_pending(futures):
    first, second = futures
    second.set_exception(KeyError("missing"))
    fut = TryJoin([first, second])
    with pytest.raises(KeyError):
        fut.poll()
    assert first.cancelled()


async def test_poll_after_completion_raises(futures):
    done, _ = futures
    done.set_result(1)
    fut = TryJoin([done])
    assert fut.poll() == [1]
    with pytest.raises(RuntimeError, match="polled after completing"):
        fut.poll()


async def test_repr_tracks_states(futures):
    first, second = futures
    fut = TryJoin([first, second])
    assert repr(fut) == "[Pending, Pending]"
    first.set_result(1)
    second.set_result(2)
    fut.poll()
    assert repr(fut) == "[Consumed, Consumed]"