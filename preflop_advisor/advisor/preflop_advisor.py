#!/usr/bin/env python3
"""
Preflop advisor for hero's first decision of a hand.

Coordinates pot estimation, hand scoring and the decision table to turn two
hole cards and the betting context into a raise, call or fold.
"""

import logging
from typing import Sequence

from preflop_advisor.advisor.decision_table import decide
from preflop_advisor.advisor.errors import InvalidInputError
from preflop_advisor.advisor.hand_strength import HandStrength, evaluate_hand_strength
from preflop_advisor.advisor.pot import estimate_pot_size
from preflop_advisor.config.settings import Settings
from preflop_advisor.models.card import Card
from preflop_advisor.models.decision import Decision
from preflop_advisor.models.game_context import GameContext

logger = logging.getLogger(__name__)


def is_suited(card1: Card, card2: Card) -> bool:
    return card1.suit == card2.suit


class PreflopAdvisor:
    """Recommends a preflop action for two hole cards."""

    def __init__(self):
        """Initialize advisor and register its settings."""
        self.settings = Settings()

        self.settings.create("advisor.preflop.currency_symbol", default="$")
        self.currency_symbol = self.settings.get("advisor.preflop.currency_symbol")

        logger.info("Initialized preflop advisor")

    def get_recommendation(self, cards: Sequence[Card], context: GameContext) -> Decision:
        """
        Get a recommendation for hero's hole cards.

        Args:
            cards: Hero's two hole cards
            context: Blinds, callers and amount to call

        Returns:
            Decision with the recommended action

        Raises:
            InvalidInputError: If hero does not hold exactly two cards
        """
        if len(cards) != 2:
            logger.error(f"Hero has {len(cards)} hole cards, need 2")
            raise InvalidInputError(f"Exactly 2 hole cards are required, got {len(cards)}")

        card1, card2 = cards
        pot_size = estimate_pot_size(context.small_blind, context.big_blind, context.players_called)
        strength = evaluate_hand_strength(card1.rank, card2.rank, card1.suit, card2.suit)
        suited = is_suited(card1, card2)

        logger.debug(f"Pot size {pot_size}, strength {strength.name} ({int(strength)}), suited={suited}")

        decision = decide(strength, pot_size, context.to_call, context.players_called, suited)
        reasoning = self._describe(card1, card2, strength, decision)

        logger.info(f"Preflop recommendation for {card1} {card2}: {decision.action.value}"
                    f"{f' {decision.amount}' if decision.is_raise else ''} "
                    f"(pot odds {decision.pot_odds:.1f}%)")

        return decision.model_copy(update={"reasoning": reasoning})

    def format_amount(self, amount: float) -> str:
        """Format a chip amount with the configured currency symbol."""
        return f"{self.currency_symbol}{amount:g}"

    def _describe(self, card1: Card, card2: Card, strength: HandStrength, decision: Decision) -> str:
        text = f"{card1} {card2} ({strength.name.lower().replace('_', ' ')}): {decision.reasoning}"
        if decision.is_raise:
            text += f", raise to {self.format_amount(decision.amount)}"
        return text
