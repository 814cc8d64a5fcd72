"""Ticket history response DTO"""
from dataclasses import dataclass, field
from typing import List, Optional

from pulltab.domain.entities.ticket import Ticket


@dataclass
class TicketHistoryResponse:
    """Response DTO for ticket history"""

    tickets: List[Ticket] = field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0
    error: Optional[str] = None
    error_code: Optional[str] = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error, "code": self.error_code}
        return {
            "tickets": [
                {
                    "id": ticket.id,
                    "gameBoxId": ticket.game_box_id,
                    "totalPayout": ticket.total_payout,
                    "isWinner": ticket.is_winner,
                    "createdAt": ticket.created_at,
                }
                for ticket in self.tickets
            ],
            "total": self.total,
            "limit": self.limit,
            "offset": self.offset,
        }
