import os
from typing import Tuple

from pydantic import BaseModel, ConfigDict

# Upstream leaderboard (Taiko Trailblazer, season 2)
BASE_URL = "https://trailblazer.mainnet.taiko.xyz/s2/v2/leaderboard/user"
TIMEOUT_SECONDS = 10.0
RETRY_LIMIT = 3
# The upstream blocks default client user agents
USER_AGENT = "Mozilla/5.0"

# Tier cutoffs, most exclusive first. Output order follows this order.
TOP_PERCENTILES: Tuple[float, ...] = (
    0.0001, 0.001, 0.005, 0.01, 0.03, 0.04, 0.06, 0.08, 0.1, 0.18, 0.26,
)


class FetcherSettings(BaseModel):
    """
    Connection settings shared by the fetcher and the leaderboard gateway.
    Defaults mirror the module constants; tests build their own instances.
    """
    model_config = ConfigDict(frozen=True)

    base_url: str = BASE_URL
    timeout_seconds: float = TIMEOUT_SECONDS
    retry_limit: int = RETRY_LIMIT
    user_agent: str = USER_AGENT


def log_level() -> str:
    """Logging level for the entry points, LOG_LEVEL env var or INFO."""
    return os.getenv("LOG_LEVEL", "INFO").upper()
