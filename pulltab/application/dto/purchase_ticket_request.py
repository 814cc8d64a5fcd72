"""Purchase ticket request DTO"""
from dataclasses import dataclass


@dataclass
class PurchaseTicketRequest:
    """Request DTO for buying one ticket; player identity is trusted"""

    player_id: int
