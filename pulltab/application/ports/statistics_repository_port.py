"""Player statistics repository port (interface)"""
from abc import ABC, abstractmethod
from typing import Optional

from pulltab.domain.entities.player_statistics import PlayerStatistics


class StatisticsRepositoryPort(ABC):
    """Port for per-player statistics"""

    @abstractmethod
    def get(self, player_id: int) -> Optional[PlayerStatistics]:
        pass

    @abstractmethod
    def get_or_create(self, player_id: int) -> PlayerStatistics:
        """Existing statistics, or a zeroed record (persisted on save)"""
        pass

    @abstractmethod
    def save(self, statistics: PlayerStatistics) -> None:
        pass
