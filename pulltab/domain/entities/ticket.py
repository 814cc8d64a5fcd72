"""Ticket entity"""
import time
from dataclasses import dataclass, field
from typing import List, Optional

from pulltab.domain.entities.symbols import LINES_PER_TICKET, SYMBOLS_PER_LINE, GameSymbol
from pulltab.domain.entities.winning_line import WinningLine
from pulltab.domain.exceptions import InvalidArgumentError


def check_tab_index(tab_index) -> int:
    """Validate a 0-based tab index"""
    if isinstance(tab_index, bool) or not isinstance(tab_index, int):
        raise InvalidArgumentError("Invalid tab index (must be 0-4)")
    if tab_index < 0 or tab_index >= LINES_PER_TICKET:
        raise InvalidArgumentError("Invalid tab index (must be 0-4)")
    return tab_index


@dataclass
class Ticket:
    """Domain entity representing one purchased pull-tab ticket

    Payout is fixed when the ticket is created; revealing tabs only changes
    what may be shown to the player.
    """

    player_id: int
    game_box_id: int
    symbols: List[GameSymbol]
    winning_lines: List[WinningLine]
    total_payout: int
    revealed_tabs: List[int] = field(default_factory=list)
    created_at: float = field(default_factory=time.time)
    id: Optional[int] = None

    @property
    def is_winner(self) -> bool:
        return self.total_payout > 0

    @property
    def revealed_state(self) -> List[bool]:
        return [i in self.revealed_tabs for i in range(LINES_PER_TICKET)]

    @property
    def is_fully_revealed(self) -> bool:
        return all(self.revealed_state)

    def tab_symbols(self, tab_index: int) -> List[GameSymbol]:
        start = check_tab_index(tab_index) * SYMBOLS_PER_LINE
        return list(self.symbols[start:start + SYMBOLS_PER_LINE])

    def tab_wins(self, tab_index: int) -> bool:
        line_number = check_tab_index(tab_index) + 1
        return any(line.line == line_number for line in self.winning_lines)

    def reveal(self, tab_index: int) -> bool:
        """Mark a tab revealed; returns False when it already was"""
        check_tab_index(tab_index)
        if tab_index in self.revealed_tabs:
            return False
        self.revealed_tabs.append(tab_index)
        return True

    def to_dict(self) -> dict:
        """Convert to dictionary for storage"""
        return {
            "_id": self.id,
            "player_id": self.player_id,
            "game_box_id": self.game_box_id,
            "symbols": [int(s) for s in self.symbols],
            "winning_lines": [line.to_dict() for line in self.winning_lines],
            "total_payout": self.total_payout,
            "is_winner": self.is_winner,
            "revealed_tabs": list(self.revealed_tabs),
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Ticket':
        """Create from dictionary"""
        return cls(
            player_id=data.get("player_id"),
            game_box_id=data.get("game_box_id"),
            symbols=[GameSymbol(s) for s in data.get("symbols", [])],
            winning_lines=[WinningLine.from_dict(line) for line in data.get("winning_lines", [])],
            total_payout=data.get("total_payout", 0),
            revealed_tabs=sorted(data.get("revealed_tabs", [])),
            created_at=data.get("created_at", time.time()),
            id=data.get("_id"),
        )
