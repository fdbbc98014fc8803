"""
This module is used to run a session of blackjack from the command line.

It can be used in different modes:
- Interactive console mode (the default), where the user answers (h)it or
  (s)tand at each prompt.
- Autoplay mode, where the player's hand follows the dealer's policy.
- Logging mode, where a transcript of the session is appended to a file.

For example, `--rounds 10` plays ten rounds, `--autoplay` runs without
prompting and `--log_file` followed by a filename records the transcript.
"""

import argparse
import logging
import random
import sys

from simplejack.common.io_interface import (
    ConsoleIOInterface,
    IOInterface,
    LoggingIOInterface,
)
from simplejack.blackjack.errors import SessionAborted
from simplejack.blackjack.game import BlackjackGame
from simplejack.blackjack.rules import Rules
from simplejack.blackjack.strategy import DealerStrategy

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Play blackjack against the dealer."
    )
    parser.add_argument(
        "-r", "--rounds", type=int, default=5, help="number of rounds to play (default: 5)"
    )
    parser.add_argument(
        "-d",
        "--decks",
        type=int,
        default=3,
        help="number of decks combined into the shoe (default: 3)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed the shuffle for a repeatable session"
    )
    parser.add_argument(
        "--stand-on-soft-17",
        action="store_true",
        default=False,
        help="make the dealer stand on soft 17 instead of hitting",
    )
    parser.add_argument(
        "--autoplay",
        action="store_true",
        default=False,
        help="play the player's hand with the dealer's policy instead of prompting",
    )
    parser.add_argument(
        "--log_file",
        type=str,
        help="Append a transcript of the session to the specified file.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="diagnostic logging level, written to stderr (default: WARNING)",
    )
    return parser.parse_args(argv)


def create_rules(args) -> Rules:
    """Create the Rules object based on the command line arguments."""
    return Rules(
        num_decks=args.decks,
        num_rounds=args.rounds,
        dealer_hit_soft_17=not args.stand_on_soft_17,
    )


def create_io_interface(args) -> IOInterface:
    io_interface = ConsoleIOInterface()
    if args.log_file:
        io_interface = LoggingIOInterface(io_interface, args.log_file)
    return io_interface


def main(argv=None) -> int:
    """
    Main function to start the game.

    Returns the process exit status: 0 after a full session, 1 if input
    ended early or the console or transcript file failed, 2 for invalid
    options.
    """
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        rules = create_rules(args)
    except ValueError as exc:
        logger.error("Invalid options: %s", exc)
        return 2

    rng = random.Random(args.seed) if args.seed is not None else None
    player_strategy = DealerStrategy(rules, actor="Player") if args.autoplay else None
    game = BlackjackGame(
        create_io_interface(args), rules, rng=rng, player_strategy=player_strategy
    )

    try:
        game.play()
    except SessionAborted as exc:
        logger.error("%s", exc)
        return 1
    except OSError as exc:
        logger.error("Session failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
