#!/usr/bin/env python3
"""
Card model for representing hole cards with validation.

Ranks are integers from 1 to 14 (11=Jack, 12=Queen, 13=King, 14=Ace) and
suits are one of the four ``Suit`` members.
"""

from enum import Enum
from pydantic import BaseModel, Field, field_validator

MIN_RANK = 1
MAX_RANK = 14

JACK = 11
QUEEN = 12
KING = 13
ACE = 14

RANK_SYMBOLS = {10: 'T', JACK: 'J', QUEEN: 'Q', KING: 'K', ACE: 'A'}


class Suit(str, Enum):
    """The four card suits, valued by their one-letter symbol."""
    HEARTS = 'H'
    SPADES = 'S'
    DIAMONDS = 'D'
    CLUBS = 'C'

    @classmethod
    def parse(cls, value) -> "Suit":
        """
        Resolve a suit from a member, a letter ('h', 'S') or a name ('hearts').

        Raises:
            ValueError: If the value names no suit
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().upper()
        for suit in cls:
            if text in (suit.value, suit.name, suit.name.rstrip('S')):
                return suit
        raise ValueError(f'Invalid suit: {value!r}. Must be one of {[s.value for s in cls]}')


class Card(BaseModel):
    """A single hole card."""
    rank: int = Field(..., ge=MIN_RANK, le=MAX_RANK, description="Card rank (1-14, 14=Ace)")
    suit: Suit = Field(..., description="Card suit (H, S, D, C)")

    @field_validator('rank', mode='before')
    @classmethod
    def validate_rank(cls, v):
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f'Invalid rank: {v!r}. Must be an integer from {MIN_RANK} to {MAX_RANK}')
        return v

    @field_validator('suit', mode='before')
    @classmethod
    def validate_suit(cls, v):
        return Suit.parse(v)

    def __str__(self) -> str:
        """Short form, e.g. 'Ah' for the Ace of hearts."""
        return f"{RANK_SYMBOLS.get(self.rank, str(self.rank))}{self.suit.value.lower()}"

    class Config:
        frozen = True
        extra = "forbid"
