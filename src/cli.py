import asyncio
import logging
import sys

from src.core.config import FetcherSettings, log_level
from src.core.entities.threshold import ThresholdReport
from src.core.errors import ResolveError
from src.core.services import ThresholdService
from src.infrastructure.gateways.http_fetcher import HttpFetcher, build_client
from src.infrastructure.gateways.leaderboard_api import LeaderboardGateway

logger = logging.getLogger("TierCut")


def format_report(report: ThresholdReport) -> str:
    lines = [f"Points for top ranks: {report.points}"]
    lines.append(f"{'top %':>8}  {'rank':>8}  {'points':>12}")
    for t in report.thresholds:
        lines.append(f"{t.percentile * 100:>7g}%  {t.rank:>8}  {t.points:>12}")
    return "\n".join(lines)


async def run() -> ThresholdReport:
    settings = FetcherSettings()
    # One pooled client for the whole run, shared by every lookup task
    async with build_client(settings) as client:
        gateway = LeaderboardGateway(HttpFetcher(client, settings))
        return await ThresholdService(gateway).get_thresholds()


def main() -> int:
    logging.basicConfig(level=log_level())

    try:
        report = asyncio.run(run())
    except ResolveError as e:
        logger.error(f"Error: {e}")
        return 1

    print(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
