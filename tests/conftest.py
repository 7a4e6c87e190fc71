"""
Pytest configuration and shared fixtures.
"""
from typing import Callable, List

import httpx
import pytest

from src.core.config import FetcherSettings
from fakes import BASE_URL, SleepRecorder


@pytest.fixture
def settings() -> FetcherSettings:
    return FetcherSettings(base_url=BASE_URL)


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
async def make_client() -> Callable[[httpx.MockTransport], httpx.AsyncClient]:
    clients: List[httpx.AsyncClient] = []

    def _make(transport: httpx.MockTransport) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=transport)
        clients.append(client)
        return client

    yield _make
    for client in clients:
        await client.aclose()
