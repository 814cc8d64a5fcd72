"""Winning line value object"""
from dataclasses import dataclass
from typing import List

from pulltab.domain.entities.symbols import GameSymbol


@dataclass(frozen=True)
class WinningLine:
    """One paying line of a ticket grid (line is 1-based)"""

    line: int
    symbols: List[GameSymbol]
    prize: int

    def to_dict(self) -> dict:
        return {
            "line": self.line,
            "symbols": [int(s) for s in self.symbols],
            "prize": self.prize,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'WinningLine':
        return cls(
            line=data["line"],
            symbols=[GameSymbol(s) for s in data.get("symbols", [])],
            prize=data.get("prize", 0),
        )
