import logging
from typing import Optional

from src.core.entities.leaderboard import ApiResponse
from src.core.errors import ClientError, ClientErrorKind, FetchError
from src.core.interfaces.datasource import ILeaderboardSource
from src.infrastructure.gateways.http_fetcher import HttpFetcher

logger = logging.getLogger(__name__)


class LeaderboardGateway(ILeaderboardSource):
    """
    Implementation of ILeaderboardSource for the Trailblazer leaderboard API.

    The API's pagination doubles as a rank lookup: page=N&size=1 returns
    exactly the Nth-ranked participant, so no full download is needed.
    """

    def __init__(self, fetcher: HttpFetcher):
        self.fetcher = fetcher
        self.base_url = fetcher.settings.base_url

    def rank_url(self, rank: int) -> str:
        return f"{self.base_url}?page={rank}&size=1"

    async def _fetch(self, url: str, rank: Optional[int] = None) -> ApiResponse:
        try:
            return await self.fetcher.fetch(url)
        except FetchError as e:
            raise ClientError(
                ClientErrorKind.UPSTREAM,
                f"failed to fetch {url}: {e}",
                rank=rank,
            ) from e

    async def total_participants(self) -> int:
        response = await self._fetch(self.base_url)
        logger.info(f"Leaderboard has {response.data.total} participants")
        return response.data.total

    async def total_score_at_rank(self, rank: int) -> int:
        response = await self._fetch(self.rank_url(rank), rank=rank)

        if not response.data.items:
            raise ClientError(
                ClientErrorKind.EMPTY_RESULT,
                f"no users found in response for rank {rank}",
                rank=rank,
            )

        return int(response.data.items[0].total_score)
