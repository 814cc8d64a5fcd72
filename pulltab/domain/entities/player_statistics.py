"""Player statistics entity"""
import time
from dataclasses import dataclass
from typing import Optional


@dataclass
class PlayerStatistics:
    """Aggregate play history for one player"""

    player_id: int
    tickets_played: int = 0
    total_winnings: int = 0
    biggest_win: int = 0
    # Owned by the login flow
    sessions_played: int = 0
    last_played: Optional[float] = None

    def record_ticket(self, payout: int, now: Optional[float] = None) -> None:
        self.tickets_played += 1
        self.total_winnings += payout
        if payout > self.biggest_win:
            self.biggest_win = payout
        self.last_played = time.time() if now is None else now

    def to_dict(self) -> dict:
        return {
            "_id": self.player_id,
            "tickets_played": self.tickets_played,
            "total_winnings": self.total_winnings,
            "biggest_win": self.biggest_win,
            "sessions_played": self.sessions_played,
            "last_played": self.last_played,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'PlayerStatistics':
        return cls(
            player_id=data["_id"],
            tickets_played=data.get("tickets_played", 0),
            total_winnings=data.get("total_winnings", 0),
            biggest_win=data.get("biggest_win", 0),
            sessions_played=data.get("sessions_played", 0),
            last_played=data.get("last_played"),
        )
