"""Game box entity"""
import time
from dataclasses import dataclass, field
from typing import Dict, Optional

from pulltab.domain.entities.symbols import (
    INITIAL_WINNER_DISTRIBUTION,
    TICKETS_PER_BOX,
    PrizeTier,
)
from pulltab.domain.exceptions import OutOfInventoryError


@dataclass(frozen=True)
class BoxSnapshot:
    """Immutable view of a box's remaining inventory, used for allocation decisions"""

    remaining_tickets: int
    winners_remaining: Dict[PrizeTier, int]

    @property
    def total_winners_remaining(self) -> int:
        return sum(self.winners_remaining.values())


@dataclass
class GameBox:
    """Domain entity representing one finite round of tickets and prizes"""

    total_tickets: int
    remaining_tickets: int
    winners_remaining: Dict[PrizeTier, int]
    created_at: float = field(default_factory=time.time)
    completed_at: Optional[float] = None
    id: Optional[int] = None

    @classmethod
    def create_new(cls, now: Optional[float] = None) -> 'GameBox':
        """Unsaved box with the fixed schedule"""
        return cls(
            total_tickets=TICKETS_PER_BOX,
            remaining_tickets=TICKETS_PER_BOX,
            winners_remaining=dict(INITIAL_WINNER_DISTRIBUTION),
            created_at=time.time() if now is None else now,
        )

    @property
    def is_active(self) -> bool:
        return self.completed_at is None and self.remaining_tickets > 0

    @property
    def is_complete(self) -> bool:
        return self.completed_at is not None

    @property
    def sold_tickets(self) -> int:
        return self.total_tickets - self.remaining_tickets

    @property
    def percent_sold(self) -> float:
        if not self.total_tickets:
            return 0.0
        return round(self.sold_tickets / self.total_tickets * 100, 2)

    @property
    def total_winners_remaining(self) -> int:
        return sum(self.winners_remaining.values())

    def has_tickets_remaining(self) -> bool:
        return self.remaining_tickets > 0

    def has_winners_remaining(self) -> bool:
        return any(count > 0 for count in self.winners_remaining.values())

    def consume_ticket_slot(self, now: Optional[float] = None) -> None:
        """Take one ticket slot, completing the box when the last one goes"""
        if self.remaining_tickets <= 0:
            raise OutOfInventoryError(f"Game box {self.id} has no tickets remaining")
        self.remaining_tickets -= 1
        if self.remaining_tickets == 0 and self.completed_at is None:
            self.completed_at = time.time() if now is None else now

    def consume_prize(self, tier: int) -> bool:
        """Take one prize of ``tier``; returns False (and changes nothing) if none are left"""
        tier = PrizeTier(tier)
        if self.winners_remaining.get(tier, 0) <= 0:
            return False
        self.winners_remaining[tier] -= 1
        return True

    def snapshot(self) -> BoxSnapshot:
        return BoxSnapshot(
            remaining_tickets=self.remaining_tickets,
            winners_remaining=dict(self.winners_remaining),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage"""
        return {
            "_id": self.id,
            "total_tickets": self.total_tickets,
            "remaining_tickets": self.remaining_tickets,
            "winners_remaining": {str(int(tier)): count for tier, count in self.winners_remaining.items()},
            "created_at": self.created_at,
            "completed_at": self.completed_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'GameBox':
        """Create from dictionary"""
        return cls(
            total_tickets=data.get("total_tickets", TICKETS_PER_BOX),
            remaining_tickets=data.get("remaining_tickets", 0),
            winners_remaining={
                PrizeTier(int(tier)): count
                for tier, count in data.get("winners_remaining", {}).items()
            },
            created_at=data.get("created_at", time.time()),
            completed_at=data.get("completed_at"),
            id=data.get("_id"),
        )
