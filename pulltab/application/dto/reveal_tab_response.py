"""Reveal tab response DTO"""
from dataclasses import dataclass, field
from typing import List, Optional

from pulltab.application.dto.ticket_details_response import ticket_view
from pulltab.domain.entities.ticket import Ticket


@dataclass
class RevealTabResponse:
    """Response DTO for a tab reveal"""

    tab_index: int = 0
    symbols: List[int] = field(default_factory=list)
    win_detected: bool = False
    total_payout: int = 0
    ticket: Optional[Ticket] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to camelCase dictionary"""
        if self.error:
            return {"error": self.error, "code": self.error_code}
        data = {
            "message": f"Tab {self.tab_index + 1} revealed",
            "tab": {
                "index": self.tab_index,
                "symbols": self.symbols,
                "winDetected": self.win_detected,
            },
            "ticket": ticket_view(self.ticket),
        }
        # A losing tab must not give away the rest of the ticket
        if self.win_detected:
            data["totalPayout"] = self.total_payout
        return data
