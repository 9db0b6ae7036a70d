#!/usr/bin/env python3
"""
Unit tests for MoneyParser and parse_player_count.
"""

import pytest
from unittest.mock import patch

from preflop_advisor.advisor.errors import InvalidInputError
from preflop_advisor.parser.money_parser import MoneyParser, parse_player_count


class TestMoneyParser:
    """Test cases for MoneyParser."""

    def setup_method(self):
        self.parser = MoneyParser()

    def test_init_registers_settings(self):
        settings = self.parser.settings
        assert settings.get("parser.money.currency_symbols") == ['$', '€', '£']
        assert settings.get("parser.money.abbreviation_multipliers") == {'K': 1000, 'M': 1000000}
        assert settings.get("parser.money.max_reasonable_amount") == 1000000000.0

    @pytest.mark.parametrize("text, expected", [
        ("2", 2.0),
        ("0", 0.0),
        ("1.5", 1.5),
        ("$2", 2.0),
        ("€ 12.50", 12.5),
        ("1,250", 1250.0),
        ("2.5K", 2500.0),
        ("1k", 1000.0),
        ("$3M", 3000000.0),
        ("  4 ", 4.0),
    ])
    def test_parse_amount(self, text, expected):
        assert self.parser.parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "K", "-2", "$-1", "1.2.3", "nan", "inf", "5000M"])
    def test_invalid_amount(self, text):
        with pytest.raises(InvalidInputError):
            self.parser.parse_amount(text)

    def test_settings_override(self):
        with patch('preflop_advisor.parser.money_parser.Settings') as mock_settings:
            mock_settings.return_value.get.side_effect = lambda key: {
                "parser.money.max_reasonable_amount": 100.0,
                "parser.money.currency_symbols": ['G'],
                "parser.money.abbreviation_multipliers": {'K': 1000},
            }[key]
            parser = MoneyParser()

        assert parser.parse_amount("G50") == 50.0
        with pytest.raises(InvalidInputError, match="between 0 and 100"):
            parser.parse_amount("150")


class TestParsePlayerCount:

    @pytest.mark.parametrize("text, expected", [("0", 0), ("3", 3), (" 7 ", 7)])
    def test_valid(self, text, expected):
        assert parse_player_count(text) == expected

    @pytest.mark.parametrize("text", ["", "-1", "2.5", "two", "²", "٣"])
    def test_invalid(self, text):
        with pytest.raises(InvalidInputError, match="non-negative integer"):
            parse_player_count(text)
