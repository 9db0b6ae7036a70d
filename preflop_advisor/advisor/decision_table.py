#!/usr/bin/env python3
"""
Preflop decision table.

Maps hand strength, pot odds and suitedness to raise, call or fold. Rules
are checked in order and the first match wins; pot odds count as favorable
only when strictly above 50%.
"""

import logging
from typing import Callable, NamedTuple, Tuple

from preflop_advisor.advisor.errors import require_non_negative
from preflop_advisor.advisor.pot import calculate_pot_odds
from preflop_advisor.advisor.raise_sizing import calculate_raise_amount
from preflop_advisor.models.decision import Action, Decision

logger = logging.getLogger(__name__)

FAVORABLE_POT_ODDS = 50


class DecisionRule(NamedTuple):
    """One row of the decision table."""
    description: str
    matches: Callable[[int, float, bool], bool]
    action: Action


DECISION_TABLE: Tuple[DecisionRule, ...] = (
    DecisionRule(
        "very strong hand",
        lambda strength, odds, suited: strength >= 12,
        Action.RAISE,
    ),
    DecisionRule(
        "premium high cards with favorable pot odds",
        lambda strength, odds, suited: strength >= 9 and odds > FAVORABLE_POT_ODDS,
        Action.RAISE,
    ),
    DecisionRule(
        "suited hand with favorable pot odds",
        lambda strength, odds, suited: strength >= 7 and odds > FAVORABLE_POT_ODDS and suited,
        Action.RAISE,
    ),
    DecisionRule(
        "moderate hand with favorable pot odds",
        lambda strength, odds, suited: strength > 5 and odds > FAVORABLE_POT_ODDS,
        Action.CALL,
    ),
    DecisionRule(
        "weak hand or unfavorable pot odds",
        lambda strength, odds, suited: True,
        Action.FOLD,
    ),
)


def select_rule(hand_strength: int, pot_odds: float, is_suited: bool) -> DecisionRule:
    """Return the first rule of the decision table that matches."""
    for rule in DECISION_TABLE:
        if rule.matches(hand_strength, pot_odds, is_suited):
            return rule
    raise AssertionError("decision table has no fallback rule")


def decide(hand_strength: int, pot_size: float, to_call: float, players_called: int,
           is_suited: bool) -> Decision:
    """
    Choose a preflop action.

    Args:
        hand_strength: Hand strength tier
        pot_size: Pot before hero acts
        to_call: Amount needed to call
        players_called: Players who called the big blind
        is_suited: Whether both hole cards share a suit

    Returns:
        Decision, with a raise amount when the action is a raise

    Raises:
        InvalidInputError: If to_call is not positive or an amount is negative
    """
    require_non_negative("players_called", players_called)
    pot_odds = calculate_pot_odds(pot_size, to_call)
    rule = select_rule(hand_strength, pot_odds, is_suited)

    amount = None
    if rule.action is Action.RAISE:
        amount = calculate_raise_amount(pot_size, hand_strength, players_called, pot_odds)

    logger.debug(f"Strength {hand_strength}, pot odds {pot_odds:.2f}%, suited={is_suited}: "
                 f"{rule.description} -> {rule.action.value}")

    return Decision(
        action=rule.action,
        amount=amount,
        hand_strength=int(hand_strength),
        pot_odds=pot_odds,
        pot_size=pot_size,
        reasoning=rule.description.capitalize()
    )
