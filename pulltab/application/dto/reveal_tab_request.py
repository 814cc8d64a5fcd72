"""Reveal tab request DTO"""
from dataclasses import dataclass


@dataclass
class RevealTabRequest:
    """Request DTO for revealing one tab (0-4) of a ticket"""

    ticket_id: int
    player_id: int
    tab_index: int
