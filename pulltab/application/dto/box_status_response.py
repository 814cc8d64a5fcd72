"""Game box status response DTO"""
from dataclasses import dataclass
from typing import Optional

from pulltab.domain.entities.game_box import GameBox


@dataclass
class BoxStatusResponse:
    """Response DTO for the current game box statistics"""

    box: Optional[GameBox] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error, "code": self.error_code}
        box = self.box
        return {
            "gameBox": {
                "id": box.id,
                "totalTickets": box.total_tickets,
                "remainingTickets": box.remaining_tickets,
                "soldTickets": box.sold_tickets,
                "percentSold": box.percent_sold,
                "winnersRemaining": {str(int(tier)): count for tier, count in box.winners_remaining.items()},
                "totalWinnersRemaining": box.total_winners_remaining,
                "isComplete": box.is_complete,
                "createdAt": box.created_at,
                "completedAt": box.completed_at,
            }
        }
