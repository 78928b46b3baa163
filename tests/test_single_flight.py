"""Tests for utils/single_flight.py."""

import asyncio
import pytest
from utils.single_flight import SingleFlight


class TestSingleFlight:
    async def test_concurrent_calls_share_one_run(self):
        flight = SingleFlight()
        calls = 0
        gate = asyncio.Event()

        async def work():
            nonlocal calls
            calls += 1
            await gate.wait()
            return calls

        first = asyncio.ensure_future(flight.run("k", work))
        second = asyncio.ensure_future(flight.run("k", work))
        await asyncio.sleep(0)
        assert flight.in_flight("k")
        gate.set()
        assert await asyncio.gather(first, second) == [1, 1]
        assert calls == 1

    async def test_sequential_calls_run_again(self):
        flight = SingleFlight()
        calls = 0

        async def work():
            nonlocal calls
            calls += 1
            return calls

        assert await flight.run("k", work) == 1
        assert await flight.run("k", work) == 2
        assert not flight.in_flight("k")

    async def test_keys_are_independent(self):
        flight = SingleFlight()

        async def work(v):
            await asyncio.sleep(0)
            return v

        results = await asyncio.gather(
            flight.run("a", lambda: work("a")),
            flight.run("b", lambda: work("b")),
        )
        assert results == ["a", "b"]

    async def test_exception_shared_and_cleared(self):
        flight = SingleFlight()

        async def boom():
            await asyncio.sleep(0)
            raise RuntimeError("down")

        results = await asyncio.gather(
            flight.run("k", boom), flight.run("k", boom), return_exceptions=True
        )
        assert all(isinstance(r, RuntimeError) for r in results)
        assert not flight.in_flight("k")
