from pydantic import BaseModel, ConfigDict, Field
from typing import List


class LeaderboardEntry(BaseModel):
    """
    One participant row as returned by the leaderboard API.
    total_score is server-computed (score * multiplier) and used as-is.
    Only total_score is required; the rest is informational.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rank: int = 0
    address: str = ""
    score: float = 0.0
    multiplier: int = 0
    total_score: float = Field(alias="totalScore", allow_inf_nan=False)


class PageEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: List[LeaderboardEntry]
    page: int = 0
    size: int = 0
    total: int  # participants across the whole leaderboard
    total_pages: int = 0


class ApiResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    data: PageEnvelope
    last_updated: int = Field(0, alias="lastUpdated")  # epoch ms
