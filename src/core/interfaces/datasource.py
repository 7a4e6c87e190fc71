from abc import ABC, abstractmethod


class ILeaderboardSource(ABC):
    @abstractmethod
    async def total_participants(self) -> int:
        pass

    @abstractmethod
    async def total_score_at_rank(self, rank: int) -> int:
        """
        Returns the total score (truncated to int) of the participant at rank.
        Raises ClientError when the lookup fails or the page is empty.
        """
        pass
