"""Ticket details request DTO"""
from dataclasses import dataclass


@dataclass
class TicketDetailsRequest:
    """Request DTO for one ticket scoped to its owner"""

    ticket_id: int
    player_id: int
