"""Player statistics response DTO"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class PlayerStatisticsResponse:
    """Response DTO for a player's lifetime statistics"""

    tickets_played: int = 0
    total_winnings: int = 0
    biggest_win: int = 0
    sessions_played: int = 0
    last_played: Optional[float] = None
    winning_tickets: int = 0
    win_rate: float = 0.0
    total_spent: int = 0
    net_profit: int = 0
    average_win: float = 0.0
    error: Optional[str] = None
    error_code: Optional[str] = None

    @property
    def losing_tickets(self) -> int:
        return self.tickets_played - self.winning_tickets

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error, "code": self.error_code}
        return {
            "statistics": {
                "ticketsPlayed": self.tickets_played,
                "totalWinnings": self.total_winnings,
                "biggestWin": self.biggest_win,
                "sessionsPlayed": self.sessions_played,
                "lastPlayed": self.last_played,
                "winRate": self.win_rate,
                "winningTickets": self.winning_tickets,
                "losingTickets": self.losing_tickets,
                "totalSpent": self.total_spent,
                "netProfit": self.net_profit,
                "averageWin": self.average_win,
            }
        }
