"""Ticket history request DTO"""
from dataclasses import dataclass


@dataclass
class TicketHistoryRequest:
    """Request DTO for a page of a player's tickets"""

    player_id: int
    limit: int = 10
    offset: int = 0
