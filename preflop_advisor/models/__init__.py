#!/usr/bin/env python3
"""
Models package for preflop advisor data models.

Provides Pydantic models for cards, the betting context and the advisor's
decision.
"""

from .card import Card, Suit
from .decision import Action, Decision
from .game_context import GameContext

__all__ = [
    'Card',
    'Suit',
    'Action',
    'Decision',
    'GameContext'
]
