#!/usr/bin/env python3
"""
Raise sizing for strong preflop hands.

The raise starts at the pot, is scaled up for strong hands and again for
generous pot odds, grows by a tenth of the pot per caller and is rounded to
the nearest 0.5.
"""

import math
import logging

from preflop_advisor.advisor.errors import InvalidInputError, require_non_negative

logger = logging.getLogger(__name__)

PREMIUM_STRENGTH = 12
STRONG_STRENGTH = 7
PREMIUM_MULTIPLIER = 3.0
STRONG_MULTIPLIER = 1.5

HIGH_POT_ODDS = 100
HIGH_POT_ODDS_MULTIPLIER = 1.5

PER_CALLER_POT_FRACTION = 0.1
RAISE_INCREMENT = 0.5


def round_to_increment(value: float, increment: float = RAISE_INCREMENT) -> float:
    """Round to the nearest increment, ties away from zero."""
    scaled = abs(value) / increment
    steps = math.floor(scaled)
    # compare the exact remainder, adding 0.5 first can round up past a tie
    if scaled - steps >= 0.5:
        steps += 1
    return math.copysign(steps * increment, value)


def calculate_raise_amount(pot_size: float, hand_strength: int, players_called: int,
                           pot_odds: float) -> float:
    """
    Size a raise.

    Args:
        pot_size: Pot before hero acts
        hand_strength: Hand strength tier
        players_called: Players who called the big blind
        pot_odds: Unrounded pot odds percentage

    Returns:
        Raise amount, a multiple of 0.5

    Raises:
        InvalidInputError: If pot_size or players_called is negative or
            non-finite, or the raise overflows
    """
    require_non_negative("pot_size", pot_size)
    require_non_negative("players_called", players_called)

    raise_amount = pot_size
    if hand_strength >= PREMIUM_STRENGTH:
        raise_amount *= PREMIUM_MULTIPLIER
    elif hand_strength > STRONG_STRENGTH:
        raise_amount *= STRONG_MULTIPLIER

    if pot_odds > HIGH_POT_ODDS:
        raise_amount *= HIGH_POT_ODDS_MULTIPLIER

    # callers scale with the original pot, not the multiplied one
    raise_amount += players_called * PER_CALLER_POT_FRACTION * pot_size
    if not math.isfinite(raise_amount):
        raise InvalidInputError(f"Raise amount for a pot of {pot_size} is out of range")

    rounded = round_to_increment(raise_amount)
    logger.debug(f"Raise sizing: pot={pot_size}, strength={hand_strength}, "
                 f"callers={players_called}, odds={pot_odds:.2f} -> {raise_amount:.4f} -> {rounded}")
    return rounded
