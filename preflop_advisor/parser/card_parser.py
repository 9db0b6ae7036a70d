#!/usr/bin/env python3
"""
Card parser module for reading hole cards from typed text.

Accepts the spaced form "14 H 13 S" (rank, suit, rank, suit), rank letters
("A h K s") and compact tokens ("Ah Kd", "10c 9c").

Usage:
    from preflop_advisor.parser.card_parser import CardParser

    parser = CardParser()
    card1, card2 = parser.parse_hole_cards("14 H 13 S")
"""

import logging
import re
from typing import List, Tuple

from preflop_advisor.advisor.errors import InvalidInputError
from preflop_advisor.models.card import ACE, JACK, KING, QUEEN, Card, Suit

logger = logging.getLogger(__name__)

COMPACT_CARD = re.compile(r'^(\d{1,2}|[AKQJT])([HSDC])$', re.IGNORECASE | re.ASCII)


class CardParser:
    """Parser for hole cards typed at a prompt."""

    RANK_LETTERS = {'A': ACE, 'K': KING, 'Q': QUEEN, 'J': JACK, 'T': 10}

    def parse_hole_cards(self, text: str) -> Tuple[Card, Card]:
        """
        Parse exactly two hole cards.

        Args:
            text: Cards as typed, e.g. "14 H 13 S" or "Ah Kd"

        Returns:
            The two cards in the order given

        Raises:
            InvalidInputError: If the text does not describe exactly two distinct cards
        """
        cards = self.parse_cards(text)
        if len(cards) != 2:
            raise InvalidInputError(f"Expected 2 hole cards, got {len(cards)} in {text!r}")
        if cards[0] == cards[1]:
            raise InvalidInputError(f"Duplicate card {cards[0]} in {text!r}")
        return cards[0], cards[1]

    def parse_cards(self, text: str) -> List[Card]:
        """Parse any number of cards in spaced or compact form."""
        tokens = (text or "").replace(',', ' ').split()
        cards = []

        i = 0
        while i < len(tokens):
            match = COMPACT_CARD.match(tokens[i])
            if match:
                rank_text, suit_text = match.groups()
                i += 1
            elif i + 1 < len(tokens):
                rank_text, suit_text = tokens[i], tokens[i + 1]
                i += 2
            else:
                raise InvalidInputError(f"Card {tokens[i]!r} is missing a suit")

            cards.append(self._build_card(rank_text, suit_text))

        logger.debug(f"Parsed cards {[str(c) for c in cards]} from {text!r}")
        return cards

    def parse_rank(self, text: str) -> int:
        """Parse a rank given as a number (1-14) or a letter (A, K, Q, J, T)."""
        token = text.strip().upper()
        if token in self.RANK_LETTERS:
            return self.RANK_LETTERS[token]
        if not (token.isascii() and token.isdigit()):
            raise InvalidInputError(f"Invalid rank: {text!r}")
        return int(token)

    def _build_card(self, rank_text: str, suit_text: str) -> Card:
        rank = self.parse_rank(rank_text)
        try:
            suit = Suit.parse(suit_text)
        except ValueError as e:
            raise InvalidInputError(str(e)) from e

        if not 1 <= rank <= ACE:
            raise InvalidInputError(f"Invalid rank: {rank_text!r}. Must be from 1 to 14")
        return Card(rank=rank, suit=suit)
