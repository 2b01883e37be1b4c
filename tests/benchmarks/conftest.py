"""conftest.py for benchmarks.

Provides one event loop for the whole session so every benchmark measures
the retry wrapper rather than ``asyncio.new_event_loop()`` startup.
"""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture(scope="session")
def event_loop():
    """Session-scoped event loop shared by all async benchmark helpers."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def run_async(event_loop):
    """Run a coroutine to completion in the session event loop.

    Usage inside a benchmark::

        def test_something(benchmark, run_async):
            benchmark(lambda: run_async(client.request(spec)))
    """

    def _run(coro):
        return event_loop.run_until_complete(coro)

    return _run
