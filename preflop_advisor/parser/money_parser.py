#!/usr/bin/env python3
"""
Money parser module for reading blinds and bet amounts from typed text.

Strips currency symbols and thousands separators and expands K/M
abbreviations ("$1,250", "2.5K").

Usage:
    from preflop_advisor.parser.money_parser import MoneyParser

    parser = MoneyParser()
    big_blind = parser.parse_amount("$2")
"""

import logging

from preflop_advisor.advisor.errors import InvalidInputError
from preflop_advisor.config.settings import Settings

logger = logging.getLogger(__name__)


class MoneyParser:
    """Parser for monetary amounts typed at a prompt."""

    def __init__(self):
        """Initialize money parser with settings."""
        self.settings = Settings()

        self._create_settings()
        self._load_settings()

        logger.info("MoneyParser initialized")

    def _create_settings(self) -> None:
        """Create all money parser settings with defaults."""
        self.settings.create("parser.money.max_reasonable_amount", default=1000000000.0)
        self.settings.create("parser.money.currency_symbols", default=['$', '€', '£'])
        self.settings.create("parser.money.abbreviation_multipliers", default={'K': 1000, 'M': 1000000})

    def _load_settings(self) -> None:
        """Load settings values into instance variables."""
        self.max_reasonable_amount = self.settings.get("parser.money.max_reasonable_amount")
        self.currency_symbols = self.settings.get("parser.money.currency_symbols")
        self.abbreviation_multipliers = self.settings.get("parser.money.abbreviation_multipliers")

    def parse_amount(self, text: str) -> float:
        """
        Parse a single non-negative amount.

        Args:
            text: Amount as typed, e.g. "2", "$1.50", "1,200" or "2.5K"

        Returns:
            Amount as a float

        Raises:
            InvalidInputError: If the text is not a number or is out of range
        """
        original_text = (text or "").strip()
        clean_text = self._remove_currency_symbols(original_text.upper())

        try:
            value = self._parse_abbreviations(clean_text)
        except ValueError as e:
            logger.debug(f"Error parsing amount '{original_text}': {e}")
            raise InvalidInputError(f"Invalid amount: {original_text!r}") from e

        # also rejects nan and inf
        if not 0 <= value <= self.max_reasonable_amount:
            raise InvalidInputError(
                f"Amount {original_text!r} must be between 0 and {self.max_reasonable_amount:g}"
            )
        return value

    def _remove_currency_symbols(self, text: str) -> str:
        clean_text = text
        for symbol in self.currency_symbols:
            clean_text = clean_text.replace(symbol.upper(), '')
        return clean_text.strip()

    def _parse_abbreviations(self, text: str) -> float:
        """Parse text with abbreviations (K, M) into a numeric value."""
        text = text.replace(',', '')

        for abbr, multiplier in self.abbreviation_multipliers.items():
            if text.endswith(abbr.upper()):
                return float(text[:-len(abbr)]) * multiplier

        return float(text)


def parse_player_count(text: str) -> int:
    """
    Parse the number of players who called the big blind.

    Raises:
        InvalidInputError: If the text is not a non-negative integer
    """
    token = (text or "").strip()
    if not (token.isascii() and token.isdigit()):
        raise InvalidInputError(f"Player count must be a non-negative integer, got {text!r}")
    return int(token)
