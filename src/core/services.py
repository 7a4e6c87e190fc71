import logging
from typing import Sequence

from src.core.config import TOP_PERCENTILES
from src.core.entities.threshold import ThresholdReport
from src.core.interfaces.datasource import ILeaderboardSource
from src.core.use_cases.percentile_resolver import PercentileResolver

logger = logging.getLogger(__name__)


class ThresholdService:
    def __init__(self, datasource: ILeaderboardSource, percentiles: Sequence[float] = TOP_PERCENTILES):
        self.resolver = PercentileResolver(datasource)
        self.percentiles = tuple(percentiles)

    async def get_thresholds(self) -> ThresholdReport:
        report = await self.resolver.resolve_report(self.percentiles)
        logger.info(f"Resolved {len(report.thresholds)} tier thresholds from {report.total_participants} participants")
        return report
