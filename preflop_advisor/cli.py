#!/usr/bin/env python3
"""
Command line entry point for the preflop advisor.

Values not given as options are prompted for on stdin, in the order cards,
small blind, big blind, players called, amount to call.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, TypeVar

from pydantic import ValidationError

from preflop_advisor.advisor.errors import InvalidInputError
from preflop_advisor.advisor.preflop_advisor import PreflopAdvisor
from preflop_advisor.config.settings import Settings
from preflop_advisor.models.game_context import GameContext
from preflop_advisor.parser.card_parser import CardParser
from preflop_advisor.parser.money_parser import MoneyParser, parse_player_count

logger = logging.getLogger(__name__)

T = TypeVar('T')

CARDS_PROMPT = ("Enter your cards and suits (1-10, Jack = 11, Queen = 12, King = 13, Ace = 14, "
                "H = hearts, S = spades, D = diamonds, C = clubs): ")

EXIT_INVALID_INPUT = 2

EPILOG = """
Examples:
  python -m preflop_advisor --cards "14 H 13 S" --small-blind 1 --big-blind 2 \\
      --players-called 2 --to-call 4
  python -m preflop_advisor --log-level DEBUG
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="preflop-advisor",
        description="Suggest a preflop raise, call or fold for two hole cards",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG
    )
    parser.add_argument('--cards', '-c', help='Hole cards, e.g. "14 H 13 S" or "Ah Kd"')
    parser.add_argument('--small-blind', '-s', help='Small blind amount')
    parser.add_argument('--big-blind', '-b', help='Big blind amount')
    parser.add_argument('--players-called', '-p', help='Players who called the big blind')
    parser.add_argument('--to-call', '-t', help='Amount needed to call')
    parser.add_argument('--settings', type=Path, help='Settings JSON file')
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: cli.logging.level setting)'
    )
    return parser


def _value(given: Optional[str], prompt: str, parse: Callable[[str], T]) -> T:
    if given is None:
        given = input(prompt)
    return parse(given)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one recommendation and print it. Returns the exit status."""
    args = build_parser().parse_args(argv)

    settings = Settings(args.settings)
    settings.create("cli.logging.level", default="WARNING")

    logging.basicConfig(
        level=args.log_level or settings.get("cli.logging.level"),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    advisor = PreflopAdvisor()
    card_parser = CardParser()
    money_parser = MoneyParser()

    try:
        cards = _value(args.cards, CARDS_PROMPT, card_parser.parse_hole_cards)
        small_blind = _value(args.small_blind, "Enter the small blind amount: ", money_parser.parse_amount)
        big_blind = _value(args.big_blind, "Enter the big blind amount: ", money_parser.parse_amount)
        players_called = _value(args.players_called,
                                "Enter the number of players who called the big blind: ",
                                parse_player_count)
        to_call = _value(args.to_call, "Enter the amount needed to call: ", money_parser.parse_amount)

        context = GameContext(
            small_blind=small_blind,
            big_blind=big_blind,
            players_called=players_called,
            to_call=to_call
        )
        decision = advisor.get_recommendation(cards, context)
    except (InvalidInputError, ValidationError) as e:
        logger.error(f"Invalid input: {e}")
        print(f"Invalid input: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(f"Pot odds: {decision.pot_odds:g}%")
    if decision.is_raise:
        print(f"Action: {decision.action.value} with amount: {advisor.format_amount(decision.amount)}")
    else:
        print(f"Action: {decision.action.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
