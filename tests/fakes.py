"""
Fake leaderboard backend and wire-format builders shared by the tests.
"""
import asyncio
from typing import Dict, List, Optional

import httpx

BASE_URL = "http://leaderboard.test/s2/v2/leaderboard/user"


def envelope(items: List[dict], total: int = 0, page: int = 1, size: int = 100) -> dict:
    """Builds a wire-format leaderboard response body."""
    return {
        "data": {
            "items": items,
            "page": page,
            "size": size,
            "total": total,
            "total_pages": (total + size - 1) // size if size else 0,
        },
        "lastUpdated": 1718000000000,
    }


def entry(rank: int, total_score: float, multiplier: int = 1) -> dict:
    return {
        "rank": rank,
        "address": f"0x{rank:040x}",
        "score": total_score / multiplier if multiplier else 0.0,
        "multiplier": multiplier,
        "totalScore": total_score,
    }


class FakeLeaderboardServer:
    """
    In-memory stand-in for the leaderboard API, served through httpx.MockTransport.

    scores maps rank -> totalScore; ranks missing from it return an empty page.
    delays maps rank -> seconds to wait before answering.
    """

    def __init__(
        self,
        total: int,
        scores: Optional[Dict[int, float]] = None,
        delays: Optional[Dict[int, float]] = None,
        status_for_rank: Optional[Dict[int, int]] = None,
    ):
        self.total = total
        self.scores = scores or {}
        self.delays = delays or {}
        self.status_for_rank = status_for_rank or {}
        self.requests: List[httpx.Request] = []

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page = request.url.params.get("page")
        if page is None:
            return httpx.Response(200, json=envelope([entry(1, 1.0)], total=self.total))

        rank = int(page)
        await asyncio.sleep(self.delays.get(rank, 0))
        if rank in self.status_for_rank:
            return httpx.Response(self.status_for_rank[rank], text="upstream unavailable")
        items = [entry(rank, self.scores[rank])] if rank in self.scores else []
        return httpx.Response(200, json=envelope(items, total=self.total, page=rank, size=1))

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class SleepRecorder:
    """Replaces asyncio.sleep in the fetcher so backoff is observable and instant."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


