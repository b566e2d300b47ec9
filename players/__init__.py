"""The two sides of a Toro y Vaca game."""

from __future__ import annotations

from players.human_player import HumanPlayer
from players.minimax_player import MinimaxPlayer, select_next_guess

__all__ = ["HumanPlayer", "MinimaxPlayer", "select_next_guess"]
