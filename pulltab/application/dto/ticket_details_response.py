"""Ticket details response DTO"""
from dataclasses import dataclass
from typing import Optional

from pulltab.domain.entities.ticket import Ticket


def ticket_view(ticket: Ticket) -> dict:
    """Reveal state of a ticket; the grid and payout only once every tab is open"""
    view = {
        "id": ticket.id,
        "gameBoxId": ticket.game_box_id,
        "createdAt": ticket.created_at,
        "revealedTabs": ticket.revealed_state,
        "isFullyRevealed": ticket.is_fully_revealed,
    }
    if ticket.is_fully_revealed:
        view.update({
            "symbols": [int(s) for s in ticket.symbols],
            "winningLines": [line.to_dict() for line in ticket.winning_lines],
            "totalPayout": ticket.total_payout,
            "isWinner": ticket.is_winner,
        })
    return view


@dataclass
class TicketDetailsResponse:
    """Response DTO for ticket details"""

    ticket: Optional[Ticket] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error, "code": self.error_code}
        return {"ticket": ticket_view(self.ticket)}
