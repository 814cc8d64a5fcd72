"""Pull-tab symbols, paytable and box schedule"""
from enum import IntEnum
from typing import Dict, List


class GameSymbol(IntEnum):
    """Symbol codes printed on a ticket grid"""

    SKULL = 0
    TREASURE = 1
    SHIP = 2
    ANCHOR = 3
    COMPASS = 4
    MAP = 5


class PrizeTier(IntEnum):
    """Payout amounts a game box can award (currency units)"""

    HUNDRED = 100
    TWENTY = 20
    TEN = 10
    FIVE = 5
    TWO = 2
    ONE = 1


# A line pays only when its first two symbols are both the wild symbol
WILD_SYMBOL = GameSymbol.SKULL

# Third symbol of a Skull-Skull-X line -> prize
PAYTABLE: Dict[GameSymbol, PrizeTier] = {
    GameSymbol.SKULL: PrizeTier.HUNDRED,
    GameSymbol.TREASURE: PrizeTier.TWENTY,
    GameSymbol.SHIP: PrizeTier.TEN,
    GameSymbol.ANCHOR: PrizeTier.FIVE,
    GameSymbol.COMPASS: PrizeTier.TWO,
    GameSymbol.MAP: PrizeTier.ONE,
}

TIER_SYMBOLS: Dict[PrizeTier, GameSymbol] = {tier: symbol for symbol, tier in PAYTABLE.items()}

ALL_SYMBOLS: List[GameSymbol] = list(GameSymbol)
NON_WILD_SYMBOLS: List[GameSymbol] = [s for s in GameSymbol if s != WILD_SYMBOL]

LINES_PER_TICKET = 5
SYMBOLS_PER_LINE = 3
GRID_SIZE = LINES_PER_TICKET * SYMBOLS_PER_LINE

TICKETS_PER_BOX = 500
TICKET_PRICE = 1

# 125 winners, 375 units paid per 500 tickets
INITIAL_WINNER_DISTRIBUTION: Dict[PrizeTier, int] = {
    PrizeTier.HUNDRED: 1,
    PrizeTier.TWENTY: 2,
    PrizeTier.TEN: 5,
    PrizeTier.FIVE: 5,
    PrizeTier.TWO: 48,
    PrizeTier.ONE: 64,
}


def symbol_for_tier(tier: int) -> GameSymbol:
    """Third symbol that realizes a prize tier, raises ValueError for unknown amounts"""
    try:
        return TIER_SYMBOLS[PrizeTier(tier)]
    except ValueError:
        raise ValueError(f"Invalid prize amount: {tier}") from None
