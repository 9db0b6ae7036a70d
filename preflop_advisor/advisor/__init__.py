#!/usr/bin/env python3
"""
Advisor module for preflop decision-making.

Public API:
    - evaluate_hand_strength: Score two hole cards into a strength tier
    - calculate_pot_odds: Pot odds as a percentage of the call
    - estimate_pot_size: Pot from blinds and callers
    - calculate_raise_amount: Raise size for strong hands
    - decide: Pick raise, call or fold from the decision table
    - PreflopAdvisor: Card and context level entry point
"""

from preflop_advisor.advisor.errors import InvalidInputError
from preflop_advisor.advisor.hand_strength import HandStrength, evaluate_hand_strength
from preflop_advisor.advisor.pot import calculate_pot_odds, estimate_pot_size
from preflop_advisor.advisor.raise_sizing import calculate_raise_amount
from preflop_advisor.advisor.decision_table import DECISION_TABLE, decide
from preflop_advisor.advisor.preflop_advisor import PreflopAdvisor, is_suited

__all__ = [
    'InvalidInputError',
    'HandStrength',
    'evaluate_hand_strength',
    'calculate_pot_odds',
    'estimate_pot_size',
    'calculate_raise_amount',
    'DECISION_TABLE',
    'decide',
    'PreflopAdvisor',
    'is_suited'
]
