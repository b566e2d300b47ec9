"""Human player: guesses and feedback typed at the console."""

from __future__ import annotations

from console import Console, parse_feedback, parse_guess
from player import Player
from torovaca_env import Answer, Code, InvalidFormat


class HumanPlayer(Player):
    """The person at the keyboard.

    The human's secret lives on paper, never in the program: ``answer``
    asks the human to score the computer's guess.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    @property
    def name(self) -> str:
        return "Human"

    def begin_game(self) -> None:
        print("Write down your number!")
        self._console.pause()

    def ask(self) -> Code:
        """Read one guess.

        Raises
        ------
        InvalidFormat
            If the line is not a 4-digit number without repeated digits.
        """
        return parse_guess(self._console.read_line("Enter your guess: "))

    def answer(self, guess: Code) -> Answer:
        while True:
            line = self._console.read_line()
            try:
                return Answer(guess, parse_feedback(line))
            except InvalidFormat:
                print("Invalid format. Valid format is 1T2V or 1t2v")
                print("Try again")

    def receive_feedback(self, answer: Answer) -> None:
        print(answer)
