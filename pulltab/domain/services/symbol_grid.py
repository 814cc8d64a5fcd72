"""Symbol grid encoding and decoding

A grid is 15 symbols read as 5 lines of 3. A line pays when its first two
symbols are both the wild symbol; the third symbol picks the prize from
PAYTABLE. Encoders never let filler symbols complete a second wild pair, so
a grid built for a tier decodes to exactly that tier.
"""
from random import Random, SystemRandom
from typing import List, Optional, Sequence

from pulltab.domain.entities.symbols import (
    ALL_SYMBOLS,
    GRID_SIZE,
    LINES_PER_TICKET,
    NON_WILD_SYMBOLS,
    PAYTABLE,
    SYMBOLS_PER_LINE,
    WILD_SYMBOL,
    GameSymbol,
    symbol_for_tier,
)
from pulltab.domain.entities.winning_line import WinningLine

_rng = SystemRandom()


def line_symbols(symbols: Sequence[GameSymbol], index: int) -> List[GameSymbol]:
    """Symbols of line ``index`` (0-based)"""
    start = index * SYMBOLS_PER_LINE
    return list(symbols[start:start + SYMBOLS_PER_LINE])


def _fill_symbol(symbols: List[Optional[GameSymbol]], position: int, rng: Random) -> GameSymbol:
    """Random filler for ``position`` that cannot complete a wild pair"""
    offset = position % SYMBOLS_PER_LINE
    if offset < 2:
        line_start = position - offset
        partner = line_start + 1 if offset == 0 else line_start
        if symbols[partner] == WILD_SYMBOL:
            return rng.choice(NON_WILD_SYMBOLS)
    return rng.choice(ALL_SYMBOLS)


def encode_winning_grid(tier: int, rng: Optional[Random] = None) -> List[GameSymbol]:
    """Build a grid with exactly one winning line paying ``tier``"""
    rng = rng or _rng
    third_symbol = symbol_for_tier(tier)

    symbols: List[Optional[GameSymbol]] = [None] * GRID_SIZE
    start = rng.randrange(LINES_PER_TICKET) * SYMBOLS_PER_LINE
    symbols[start] = WILD_SYMBOL
    symbols[start + 1] = WILD_SYMBOL
    symbols[start + 2] = third_symbol

    for position in range(GRID_SIZE):
        if symbols[position] is None:
            symbols[position] = _fill_symbol(symbols, position, rng)
    return symbols


def encode_losing_grid(rng: Optional[Random] = None) -> List[GameSymbol]:
    """Build a grid with no winning line"""
    rng = rng or _rng
    symbols: List[Optional[GameSymbol]] = [None] * GRID_SIZE
    for position in range(GRID_SIZE):
        symbols[position] = _fill_symbol(symbols, position, rng)
    return symbols


def decode_winning_lines(symbols: Sequence[int]) -> List[WinningLine]:
    """Every line of the grid that reads wild, wild, X"""
    if len(symbols) != GRID_SIZE:
        raise ValueError(f"Grid must contain {GRID_SIZE} symbols, got {len(symbols)}")

    lines = []
    for index in range(LINES_PER_TICKET):
        first, second, third = (GameSymbol(s) for s in line_symbols(symbols, index))
        if first == WILD_SYMBOL and second == WILD_SYMBOL:
            lines.append(WinningLine(
                line=index + 1,
                symbols=[first, second, third],
                prize=int(PAYTABLE[third]),
            ))
    return lines


def calculate_payout(lines: Sequence[WinningLine]) -> int:
    """Total of all line prizes, lines stack"""
    return sum(line.prize for line in lines)
