"""Game box repository port (interface)"""
from abc import ABC, abstractmethod
from typing import Optional

from pulltab.domain.entities.game_box import GameBox


class GameBoxRepositoryPort(ABC):
    """Port for game box persistence"""

    @abstractmethod
    def lock_active(self) -> Optional[GameBox]:
        """Write-lock and return the newest active box, None if there is none"""
        pass

    @abstractmethod
    def add(self, box: GameBox) -> GameBox:
        """Insert a new box, returns box with ID"""
        pass

    @abstractmethod
    def save(self, box: GameBox) -> None:
        """Persist remaining inventory and completion of an existing box"""
        pass

    @abstractmethod
    def get_current(self) -> Optional[GameBox]:
        """Newest active box, else newest box of any state, without locking"""
        pass
