import io
import logging
import random

from console import Console
from player import Player, SolverConfig
from players.human_player import HumanPlayer
from players.minimax_player import MinimaxPlayer
from session import CONTRADICTION, HUMAN_WON, SOLVER_WON, run_game, run_guesser
from torovaca_env import UNIVERSE_SIZE, Answer, Code, Feedback


def _code(n):
    return Code.from_integer(n)


class ScriptedHuman(Player):
    """Always guesses the same code and scores guesses honestly."""

    def __init__(self, secret, guess):
        self._secret = secret
        self._guess = guess
        self.seen: list[Answer] = []

    @property
    def name(self):
        return "Scripted"

    def ask(self):
        return self._guess

    def answer(self, guess):
        return Answer(guess, self._secret.compare(guess))

    def receive_feedback(self, answer):
        self.seen.append(answer)


class LyingOracle(ScriptedHuman):
    def answer(self, guess):
        return Answer(guess, Feedback(3, 1))


def test_guesser_finds_secret():
    oracle = MinimaxPlayer(secret=_code(4071), rng=random.Random(0))
    solver = MinimaxPlayer(SolverConfig(seed=9))
    result = run_guesser(oracle, solver)

    assert result.outcome == SOLVER_WON
    assert 0 < result.rounds <= UNIVERSE_SIZE
    assert result.history[-1] == Answer(_code(4071), Feedback(4, 0))
    assert len(result.history) == result.rounds


def test_guesser_reports_contradiction(capsys):
    oracle = LyingOracle(_code(1234), _code(1234))
    result = run_guesser(oracle, MinimaxPlayer(SolverConfig(seed=1)))

    assert result.outcome == CONTRADICTION
    assert result.rounds == 1
    out = capsys.readouterr().out
    assert "You lied to me!" in out
    assert "Game Over!" not in out


def test_turns_are_logged_with_player_names(caplog):
    caplog.set_level(logging.DEBUG, logger="session")
    human = ScriptedHuman(secret=_code(8510), guess=_code(1234))
    solver = MinimaxPlayer(SolverConfig(seed=0), secret=_code(1234))
    assert run_game(human, solver).outcome == HUMAN_WON
    assert "Scripted guessed 1234, Minimax answered 4T0V" in caplog.text

    caplog.clear()
    run_guesser(LyingOracle(_code(1234), _code(1234)), MinimaxPlayer(SolverConfig(seed=1)))
    assert "Scripted answered 3T1V" in caplog.text
    assert "Minimax: no code fits the 1 answers received" in caplog.text


def test_visual_guesser_prints_search_space(capsys):
    oracle = MinimaxPlayer(secret=_code(1234), rng=random.Random(0))
    result = run_guesser(oracle, MinimaxPlayer(SolverConfig(seed=3)),
                         visual=True, colorize=False)
    out = capsys.readouterr().out
    assert result.outcome == SOLVER_WON
    assert out.count(f"/ {UNIVERSE_SIZE}") == result.rounds - 1


def test_human_wins_after_bad_input(capsys):
    stdin = io.StringIO("\nabc\n1123\n1234\n")
    human = HumanPlayer(Console(stdin))
    solver = MinimaxPlayer(SolverConfig(seed=0), secret=_code(1234))
    result = run_game(human, solver)

    assert result.outcome == HUMAN_WON
    assert result.rounds == 0
    out = capsys.readouterr().out
    assert out.count("Guess must be a 4 digit number, without repetitions.") == 2
    assert "1234: 4T0V" in out
    assert out.rstrip().endswith("You won")


def test_solver_wins_against_scripted_human(capsys):
    human = ScriptedHuman(secret=_code(8510), guess=_code(1243))
    solver = MinimaxPlayer(SolverConfig(seed=2), secret=_code(1234))
    result = run_game(human, solver)

    assert result.outcome == SOLVER_WON
    assert result.history[-1].guess == _code(8510)
    assert len(human.seen) == result.rounds
    assert all(a == Answer(_code(1243), Feedback(2, 2)) for a in human.seen)
    out = capsys.readouterr().out
    assert "What's in 8510:" in out
    assert "Game Over!" in out


def test_full_game_contradiction():
    human = LyingOracle(_code(1234), _code(5678))
    solver = MinimaxPlayer(SolverConfig(seed=4), secret=_code(1234))
    result = run_game(human, solver)
    assert result.outcome == CONTRADICTION
