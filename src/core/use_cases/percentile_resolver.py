import asyncio
import logging
import math
from typing import List, Optional, Sequence

from src.core.entities.threshold import ThresholdReport, TierThreshold
from src.core.errors import ClientError, ResolveError, ResolveErrorKind
from src.core.interfaces.datasource import ILeaderboardSource

logger = logging.getLogger(__name__)


def compute_rank(total: int, percentile: float) -> int:
    """Rank of the participant standing at the given top-percentile cutoff."""
    return math.floor(total * percentile)


def _validate(percentiles: Sequence[float]) -> None:
    for p in percentiles:
        if isinstance(p, bool) or not isinstance(p, (int, float)) or not 0 < p <= 1:
            raise ValueError(f"percentile must be in (0, 1], got {p!r}")


class PercentileResolver:
    """
    Resolves the points held at each percentile cutoff of the leaderboard.

    The participant total is fetched first, then one lookup task per
    percentile runs concurrently. Each task owns one slot of the result
    buffer, so results come back in percentile order whatever order the
    tasks finish in. Any failed lookup fails the whole call.
    """

    def __init__(self, source: ILeaderboardSource):
        self.source = source

    async def resolve(self, percentiles: Sequence[float]) -> List[int]:
        report = await self.resolve_report(percentiles)
        return report.points

    async def resolve_report(self, percentiles: Sequence[float]) -> ThresholdReport:
        _validate(percentiles)

        try:
            total = await self.source.total_participants()
        except ClientError as e:
            raise ResolveError(
                ResolveErrorKind.TOTALS_UNAVAILABLE,
                f"failed to get total participants: {e}",
            ) from e

        # 1. Derive one target rank per percentile from the live total
        ranks = [compute_rank(total, p) for p in percentiles]
        for p, rank in zip(percentiles, ranks):
            if rank == 0:
                logger.warning(f"Percentile {p} of {total} participants maps to rank 0")

        points: List[Optional[int]] = [None] * len(ranks)

        async def lookup(i: int, rank: int) -> None:
            points[i] = await self.source.total_score_at_rank(rank)

        # 2. Fan out, one task per percentile, and wait for all of them
        outcomes = await asyncio.gather(
            *(lookup(i, rank) for i, rank in enumerate(ranks)),
            return_exceptions=True,
        )

        # 3. First error wins; lowest percentile index when several failed
        for rank, outcome in zip(ranks, outcomes):
            if isinstance(outcome, ClientError):
                raise ResolveError(
                    ResolveErrorKind.LOOKUP_FAILED,
                    f"failed to get total points for rank {rank}: {outcome}",
                    rank=rank,
                ) from outcome
            if isinstance(outcome, BaseException):
                raise outcome

        return ThresholdReport(
            total_participants=total,
            thresholds=[
                TierThreshold(percentile=p, rank=rank, points=pts)
                for p, rank, pts in zip(percentiles, ranks, points)
            ],
        )
