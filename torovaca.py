#!/usr/bin/env python3
"""Toro y Vaca: play Bulls and Cows against a minimax computer player.

Usage:
    python3 torovaca.py              # you vs. the computer
    python3 torovaca.py --guess      # the computer guesses your number
    python3 torovaca.py --vguess     # same, showing its search space
    python3 torovaca.py --rules      # game rules
"""

from __future__ import annotations

import argparse
import logging
import sys

from console import Console, InputStreamFailure
from player import SolverConfig
from players import HumanPlayer, MinimaxPlayer
from session import run_game, run_guesser

log = logging.getLogger(__name__)

HELP_TEXT = """\
Arguments:
  --guess    Guess mode, where the AI tries to guess your number
  --vguess   Guess mode, with a visualization of the search space
  --help     Show this menu
  --rules    Show game rules
  default    Player vs. AI mode

Options (after the mode flag):
  --seed N   Seed the computer's random choices
  --verbose  Log solver decisions to stderr
  --no-color Plain visualization without colors
"""

RULES_TEXT = """\
Welcome to Toro y Vaca!

Rules:
 1) Each player has a secret 4-digits number
 2) The number doesn't start with zero and doesn't repeat digits
 3) The first one to guess the opponent's number wins
 4) In their turn a player tells a guess, and the opponent gives feedback on the guess
 5) The feedback consists of the number of Toros (T) and Vacas (V)
 6) A Toro is a right digit in the right position
 7) A Vaca is a right digit in the wrong position
"""

NORMAL, GUESS, VGUESS, HELP, RULES = "normal", "guess", "vguess", "help", "rules"
MODE_FLAGS = {f"--{mode}": mode for mode in (GUESS, VGUESS, HELP, RULES)}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line.

    Only the first argument selects the mode; anything but an exact mode
    flag there means a normal game.
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = argparse.ArgumentParser(
        description="Toro y Vaca (Bulls and Cows)",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--no-color", action="store_true", help="Disable colors")
    args, unknown = parser.parse_known_args(argv)
    args.mode = MODE_FLAGS.get(argv[0], NORMAL) if argv else NORMAL
    if unknown:
        log.debug("ignoring arguments: %s", unknown)
    return args


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.mode == HELP:
        print(HELP_TEXT)
        return
    if args.mode == RULES:
        print(RULES_TEXT)
        return

    console = Console()
    solver = MinimaxPlayer(SolverConfig(seed=args.seed))
    try:
        if args.mode == NORMAL:
            result = run_game(HumanPlayer(console), solver)
        else:
            result = run_guesser(
                HumanPlayer(console),
                solver,
                visual=args.mode == VGUESS,
                colorize=not args.no_color,
            )
    except InputStreamFailure as exc:
        print(f"Input closed: {exc}", file=sys.stderr)
        sys.exit(1)

    log.debug("game finished: %s after %d computer guesses", result.outcome, result.rounds)


if __name__ == "__main__":
    main()
