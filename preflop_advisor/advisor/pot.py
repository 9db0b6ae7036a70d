#!/usr/bin/env python3
"""
Pot size and pot odds arithmetic.
"""

import math
import logging

from preflop_advisor.advisor.errors import InvalidInputError, require_non_negative

logger = logging.getLogger(__name__)


def estimate_pot_size(small_blind: float, big_blind: float, players_called: int) -> float:
    """
    Estimate the preflop pot: both blinds plus one big blind per caller.

    Raises:
        InvalidInputError: If any argument is negative or non-finite
    """
    require_non_negative("small_blind", small_blind)
    require_non_negative("big_blind", big_blind)
    require_non_negative("players_called", players_called)

    return small_blind + big_blind + players_called * big_blind


def calculate_pot_odds(pot_size: float, to_call: float) -> float:
    """
    Calculate pot odds as a percentage of the call.

    Args:
        pot_size: Current pot size
        to_call: Amount needed to call

    Returns:
        pot_size / to_call * 100, e.g. 200.0 for a pot of 100 and a call of 50

    Raises:
        InvalidInputError: If to_call is not a positive finite number or pot_size
            is negative or non-finite
    """
    if not math.isfinite(to_call) or to_call <= 0:
        logger.warning(f"Rejected amount to call: {to_call}")
        raise InvalidInputError(f"to_call must be positive, got {to_call}")
    require_non_negative("pot_size", pot_size)

    return (pot_size / to_call) * 100
