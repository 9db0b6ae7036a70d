#!/usr/bin/env python3
"""
Unit tests for PreflopAdvisor.

Tests the card and context level entry point that wires pot estimation,
hand scoring and the decision table together.
"""

import pytest
from unittest.mock import patch

from preflop_advisor.advisor.errors import InvalidInputError
from preflop_advisor.advisor.preflop_advisor import PreflopAdvisor, is_suited
from preflop_advisor.config.settings import Settings
from preflop_advisor.models.card import Card
from preflop_advisor.models.decision import Action, Decision
from preflop_advisor.models.game_context import GameContext


class TestPreflopAdvisor:
    """Test cases for PreflopAdvisor."""

    def setup_method(self):
        """Set up test fixtures."""
        with patch('preflop_advisor.advisor.preflop_advisor.Settings') as mock_settings:
            mock_settings_instance = mock_settings.return_value
            mock_settings_instance.create.return_value = None
            mock_settings_instance.get.side_effect = lambda key: {
                "advisor.preflop.currency_symbol": "$"
            }.get(key)

            self.mock_settings = mock_settings_instance
            self.advisor = PreflopAdvisor()

        self.context = GameContext(small_blind=1, big_blind=2, players_called=2, to_call=4)

    def test_init(self):
        """Test PreflopAdvisor initialization."""
        assert self.advisor.currency_symbol == "$"
        self.mock_settings.create.assert_called_once_with("advisor.preflop.currency_symbol", default="$")

    def test_ace_king_offsuit_raises(self):
        cards = [Card(rank=14, suit='H'), Card(rank=13, suit='S')]

        decision = self.advisor.get_recommendation(cards, self.context)

        assert isinstance(decision, Decision)
        assert decision.action is Action.RAISE
        assert decision.amount == 17.0
        assert decision.pot_size == 7
        assert decision.pot_odds == pytest.approx(175.0)
        assert decision.hand_strength == 9
        assert decision.reasoning.startswith("Ah Ks (premium ace)")
        assert "raise to $17" in decision.reasoning

    def test_pocket_aces_raise_with_poor_odds(self):
        cards = [Card(rank=14, suit='H'), Card(rank=14, suit='D')]
        context = GameContext(small_blind=1, big_blind=2, players_called=0, to_call=100)

        decision = self.advisor.get_recommendation(cards, context)

        assert decision.action is Action.RAISE
        assert decision.amount == 9.0

    def test_weak_hand_folds(self):
        cards = [Card(rank=2, suit='H'), Card(rank=4, suit='S')]
        context = GameContext(small_blind=1, big_blind=2, players_called=0, to_call=10)

        decision = self.advisor.get_recommendation(cards, context)

        assert decision.action is Action.FOLD
        assert decision.amount is None
        assert "weak" in decision.reasoning

    def test_suitedness_taken_from_cards(self):
        context = GameContext(small_blind=1, big_blind=2, players_called=1, to_call=2)
        suited = [Card(rank=7, suit='C'), Card(rank=6, suit='C')]
        offsuit = [Card(rank=7, suit='C'), Card(rank=6, suit='D')]

        # pot 5, odds 250: suited 7-6 raises, offsuit 7-6 (high cards) calls
        assert self.advisor.get_recommendation(suited, context).action is Action.RAISE
        assert self.advisor.get_recommendation(offsuit, context).action is Action.CALL

    def test_card_order_does_not_matter(self):
        card1, card2 = Card(rank=9, suit='H'), Card(rank=8, suit='H')

        forward = self.advisor.get_recommendation([card1, card2], self.context)
        backward = self.advisor.get_recommendation([card2, card1], self.context)

        assert forward.action is backward.action
        assert forward.amount == backward.amount
        assert forward.hand_strength == backward.hand_strength

    @pytest.mark.parametrize("count", [0, 1, 3])
    def test_wrong_card_count(self, count):
        cards = [Card(rank=rank, suit='S') for rank in range(2, 2 + count)]
        with pytest.raises(InvalidInputError, match="Exactly 2 hole cards"):
            self.advisor.get_recommendation(cards, self.context)

    def test_format_amount(self):
        assert self.advisor.format_amount(17.0) == "$17"
        assert self.advisor.format_amount(9.5) == "$9.5"


class TestIsSuited:

    def test_is_suited(self):
        assert is_suited(Card(rank=2, suit='H'), Card(rank=9, suit='hearts'))
        assert not is_suited(Card(rank=2, suit='H'), Card(rank=9, suit='S'))


class TestPreflopAdvisorSettings:
    """PreflopAdvisor against a real Settings file."""

    def test_currency_symbol_from_settings(self):
        Settings().create("advisor.preflop.currency_symbol", default="$")
        Settings().update("advisor.preflop.currency_symbol", "€")

        advisor = PreflopAdvisor()
        cards = [Card(rank=13, suit='S'), Card(rank=13, suit='C')]
        context = GameContext(small_blind=1, big_blind=2, players_called=0, to_call=2)

        decision = advisor.get_recommendation(cards, context)

        assert advisor.currency_symbol == "€"
        assert decision.reasoning.endswith("raise to €13.5")
