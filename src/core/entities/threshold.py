"""
Threshold Entities for TierCut

Per-tier point cutoffs derived from leaderboard percentiles.
"""
from pydantic import BaseModel
from typing import List


class TierThreshold(BaseModel):
    """
    Points held by the participant standing at one percentile cutoff.
    """
    percentile: float  # fraction of participants, e.g. 0.01 = top 1%
    rank: int
    points: int  # total score truncated toward zero

    class Config:
        json_schema_extra = {
            "example": {
                "percentile": 0.001,
                "rank": 1000,
                "points": 3000
            }
        }


class ThresholdReport(BaseModel):
    """
    All tier cutoffs for one resolver run, in percentile order.
    """
    total_participants: int
    thresholds: List[TierThreshold]

    @property
    def points(self) -> List[int]:
        return [t.points for t in self.thresholds]
