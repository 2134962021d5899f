"""Tests for the retry decorator."""

import pytest

from learng.decorators import with_retry


async def test_retries_transient_failures_then_succeeds() -> None:
    calls = 0

    @with_retry(max_retries=3, base_delay=0.001, max_delay=0.01)
    async def flaky() -> str:
        nonlocal calls
        calls += 1
        if calls < 3:
            raise ConnectionError("temporarily down")
        return "ok"

    assert await flaky() == "ok"
    assert calls == 3


async def test_reraises_after_last_attempt() -> None:
    calls = 0

    @with_retry(max_retries=2, base_delay=0.001, max_delay=0.01)
    async def always_down() -> None:
        nonlocal calls
        calls += 1
        raise TimeoutError

    with pytest.raises(TimeoutError):
        await always_down()
    assert calls == 2


async def test_other_errors_are_not_retried() -> None:
    calls = 0

    @with_retry(max_retries=3, base_delay=0.001)
    async def broken() -> None:
        nonlocal calls
        calls += 1
        raise ValueError("bad input")

    with pytest.raises(ValueError, match="bad input"):
        await broken()
    assert calls == 1
