#!/usr/bin/env python3
"""
Preflop hand strength scoring.

Scores two hole cards into one of eight tiers. The rules are checked top to
bottom and the first match wins, so a pair always outranks the suited checks
and an unsuited high-card hand (rule 6) outranks an unsuited connector
(rule 7) even when both apply.
"""

import logging
from enum import IntEnum
from typing import Union

from preflop_advisor.advisor.errors import InvalidInputError
from preflop_advisor.models.card import ACE, JACK, KING, MAX_RANK, MIN_RANK, Suit

logger = logging.getLogger(__name__)

SuitLike = Union[Suit, str]

SUITED_HIGH_CARDS_MIN_SUM = 15
HIGH_CARDS_MIN_SUM = 12


class HandStrength(IntEnum):
    """Preflop hand quality tiers, higher is stronger."""
    PREMIUM_PAIR = 12
    PAIR = 10
    PREMIUM_ACE = 9
    SUITED_HIGH_CARDS = 8
    SUITED_CONNECTORS = 7
    HIGH_CARDS = 6
    CONNECTORS = 5
    WEAK = 3


def _validate_rank(rank: int) -> int:
    if isinstance(rank, bool) or not isinstance(rank, int) or not MIN_RANK <= rank <= MAX_RANK:
        logger.warning(f"Rejected rank: {rank!r}")
        raise InvalidInputError(f"rank must be an integer from {MIN_RANK} to {MAX_RANK}, got {rank!r}")
    return rank


def _validate_suit(suit: SuitLike) -> Suit:
    try:
        return Suit.parse(suit)
    except ValueError as e:
        logger.warning(f"Rejected suit: {suit!r}")
        raise InvalidInputError(str(e)) from e


def evaluate_hand_strength(rank1: int, rank2: int, suit1: SuitLike, suit2: SuitLike) -> HandStrength:
    """
    Score two hole cards.

    Args:
        rank1: Rank of the first card (1-14, 14=Ace)
        rank2: Rank of the second card
        suit1: Suit of the first card, a Suit or anything Suit.parse accepts
        suit2: Suit of the second card

    Returns:
        The hand's strength tier

    Raises:
        InvalidInputError: If a rank is out of range or a suit is unknown
    """
    _validate_rank(rank1)
    _validate_rank(rank2)
    suited = _validate_suit(suit1) == _validate_suit(suit2)
    connected = abs(rank1 - rank2) == 1
    rank_sum = rank1 + rank2

    if rank1 == rank2 and rank1 >= KING:
        return HandStrength.PREMIUM_PAIR
    if rank1 == rank2:
        return HandStrength.PAIR
    if (rank1 == ACE and rank2 >= JACK) or (rank2 == ACE and rank1 >= JACK):
        return HandStrength.PREMIUM_ACE
    if suited and rank_sum > SUITED_HIGH_CARDS_MIN_SUM:
        return HandStrength.SUITED_HIGH_CARDS
    if suited and connected:
        return HandStrength.SUITED_CONNECTORS
    if rank_sum > HIGH_CARDS_MIN_SUM:
        return HandStrength.HIGH_CARDS
    if connected:
        return HandStrength.CONNECTORS
    return HandStrength.WEAK
