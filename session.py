"""Game loops: human vs. computer, and computer guessing alone."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from player import ExhaustedCandidates, Player
from players.minimax_player import MinimaxPlayer
from search_space import render_search_space
from torovaca_env import Answer, InvalidFormat

log = logging.getLogger(__name__)

HUMAN_WON = "human"
SOLVER_WON = "solver"
CONTRADICTION = "contradiction"


@dataclass
class SessionResult:
    outcome: str
    rounds: int = 0
    history: list[Answer] = field(default_factory=list)


def _human_turn(human: Player, solver: Player) -> bool:
    """Let the human guess until the guess parses.  True if it wins."""
    while True:
        try:
            guess = human.ask()
        except InvalidFormat as exc:
            log.debug("rejected guess: %s", exc)
            print("Guess must be a 4 digit number, without repetitions.")
            print("Try again!")
            continue
        break

    answer = solver.answer(guess)
    log.debug("%s guessed %s, %s answered %s", human.name, guess, solver.name, answer.feedback)
    human.receive_feedback(answer)
    return answer.feedback.is_win


def _solver_turn(oracle: Player, solver: Player, result: SessionResult) -> str | None:
    """Run one computer guess.  Returns the outcome if the game ended."""
    try:
        guess = solver.ask()
    except ExhaustedCandidates as exc:
        log.info("%s: %s", solver.name, exc)
        print("You lied to me!")
        return CONTRADICTION

    result.rounds += 1
    print(f"What's in {guess}:")
    answer = oracle.answer(guess)
    log.debug("%s guessed %s, %s answered %s", solver.name, guess, oracle.name, answer.feedback)
    result.history.append(answer)
    if answer.feedback.is_win:
        print("Game Over!")
        return SOLVER_WON

    solver.receive_feedback(answer)
    return None


def run_game(human: Player, solver: Player) -> SessionResult:
    """Alternate turns, human first, until someone is identified."""
    human.begin_game()
    solver.begin_game()
    result = SessionResult(outcome="")

    while True:
        print()
        if _human_turn(human, solver):
            print("You won")
            result.outcome = HUMAN_WON
            return result

        print()
        outcome = _solver_turn(human, solver, result)
        if outcome is not None:
            result.outcome = outcome
            return result


def run_guesser(
    oracle: Player,
    solver: MinimaxPlayer,
    visual: bool = False,
    colorize: bool = True,
) -> SessionResult:
    """Let *solver* guess *oracle*'s secret, optionally showing its pool."""
    oracle.begin_game()
    solver.begin_game()
    result = SessionResult(outcome="")

    while True:
        print()
        outcome = _solver_turn(oracle, solver, result)
        if outcome is not None:
            result.outcome = outcome
            return result

        if visual:
            print()
            print(render_search_space(
                solver.pool,
                (a.guess for a in solver.history),
                colorize=colorize,
            ))
