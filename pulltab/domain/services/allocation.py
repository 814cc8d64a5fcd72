"""Winner allocation for a game box

Each unsold ticket is treated as a draw without replacement from an urn holding
the box's remaining winners and remaining tickets. Drawing a winner with
probability winners/tickets keeps every ticket's chance fair and empties the
prize pool exactly when the last ticket sells.
"""
from random import Random, SystemRandom
from typing import Optional

from pulltab.domain.entities.game_box import BoxSnapshot
from pulltab.domain.entities.symbols import PrizeTier

_rng = SystemRandom()


def should_generate_winner(box: BoxSnapshot, rng: Optional[Random] = None) -> bool:
    """Decide whether the next ticket sold from ``box`` wins"""
    total_winners = box.total_winners_remaining
    if total_winners <= 0:
        return False

    # Forced win: every remaining ticket must carry a remaining prize
    if box.remaining_tickets <= total_winners:
        return True

    rng = rng or _rng
    return rng.random() < total_winners / box.remaining_tickets


def select_prize_level(box: BoxSnapshot, rng: Optional[Random] = None) -> Optional[PrizeTier]:
    """Draw one remaining prize uniformly, weighted by how many of each tier are left"""
    available = [
        tier
        for tier in PrizeTier
        for _ in range(max(box.winners_remaining.get(tier, 0), 0))
    ]
    if not available:
        return None

    rng = rng or _rng
    return rng.choice(available)
