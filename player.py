"""Abstract base class for Toro y Vaca players."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from torovaca_env import Answer, Code


class ExhaustedCandidates(RuntimeError):
    """No code is consistent with the feedback received so far."""


@dataclass(frozen=True)
class SolverConfig:
    """Tuning knobs for the computer player.

    Attributes
    ----------
    small_pool : int
        Below this pool size the next guess is searched within the pool.
    large_pool : int
        Above this pool size the next guess is searched within the pool.
        Between ``small_pool`` and ``large_pool`` (inclusive) the whole
        universe of valid codes is searched, so guesses that cannot be
        the secret but split the pool better are allowed.
    quick_pick : int
        Above this pool size minimax is skipped and an arbitrary pool
        member is guessed.
    seed : int or None
        Seed for the player's random generator (secret and pool order).
    """

    small_pool: int = 16
    large_pool: int = 400
    quick_pick: int = 500
    seed: int | None = None


class Player(ABC):
    """Interface shared by the human and the computer side of a game."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable player name."""
        ...

    def begin_game(self) -> None:
        """Called once before the first turn.

        The default implementation does nothing.
        """

    @abstractmethod
    def ask(self) -> Code:
        """Return this player's next guess at the opponent's secret."""
        ...

    @abstractmethod
    def answer(self, guess: Code) -> Answer:
        """Score the opponent's *guess* against this player's secret."""
        ...

    @abstractmethod
    def receive_feedback(self, answer: Answer) -> None:
        """Take the feedback the opponent gave to this player's last guess."""
        ...
