"""Purchase ticket response DTO"""
from dataclasses import dataclass
from typing import Optional

from pulltab.domain.entities.ticket import Ticket


@dataclass
class PurchaseTicketResponse:
    """Response DTO for a ticket purchase

    Symbols and payout stay hidden until tabs are revealed.
    """

    ticket: Optional[Ticket] = None
    box_completed: bool = False
    error: Optional[str] = None
    error_code: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to camelCase dictionary"""
        if self.error:
            return {"error": self.error, "code": self.error_code}
        return {
            "message": "Ticket purchased successfully",
            "ticket": {
                "id": self.ticket.id,
                "gameBoxId": self.ticket.game_box_id,
                "createdAt": self.ticket.created_at,
            },
        }
