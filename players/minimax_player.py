"""Minimax player: guess to minimise the worst-case remaining pool.

The player keeps the pool of codes still consistent with every answer it
has received.  Each guess is the code whose largest feedback class over
the pool is smallest.  While the pool is mid-sized the whole universe of
valid codes is searched, which allows probes that cannot be the secret
but split the pool better.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

import numpy as np

from player import ExhaustedCandidates, Player, SolverConfig
from torovaca_env import (
    CODE_LENGTH,
    Answer,
    Code,
    all_valid_codes,
    filter_candidates,
)

log = logging.getLogger(__name__)

# Feedback (bulls, cows) is keyed as bulls * 5 + cows.
_OUTCOMES = (CODE_LENGTH + 1) ** 2
_POPCOUNT = np.array([bin(m).count("1") for m in range(1 << 10)], dtype=np.int64)


def _encode(codes: Sequence[Code]) -> tuple[np.ndarray, np.ndarray]:
    """Digit matrix (n, 4) and digit-set bitmask (n,) for *codes*."""
    digits = np.array([c.digits for c in codes], dtype=np.int64).reshape(-1, CODE_LENGTH)
    masks = np.bitwise_or.reduce(np.left_shift(1, digits), axis=1)
    return digits, masks


def partition_worst_cases(guesses: Sequence[Code], pool: Sequence[Code]) -> np.ndarray:
    """For each guess, the size of the largest group of *pool* it cannot split.

    Equivalent to scoring every pool member against the guess and taking
    the count of the most common feedback.
    """
    g_digits, g_masks = _encode(guesses)
    p_digits, p_masks = _encode(pool)

    bulls = (g_digits[:, None, :] == p_digits[None, :, :]).sum(axis=2)
    shared = _POPCOUNT[g_masks[:, None] & p_masks[None, :]]
    keys = bulls * (CODE_LENGTH + 1) + (shared - bulls)

    n = len(guesses)
    keys += np.arange(n)[:, None] * _OUTCOMES
    counts = np.bincount(keys.ravel(), minlength=n * _OUTCOMES)
    return counts.reshape(n, _OUTCOMES).max(axis=1)


def select_next_guess(pool: Sequence[Code], config: SolverConfig | None = None) -> Code | None:
    """Pick the guess minimising the worst-case remaining pool.

    Returns None when *pool* is empty.  Ties go to the first guess in
    search order: pool order, or ascending order over the universe.
    """
    if not pool:
        return None
    config = config or SolverConfig()

    if len(pool) < config.small_pool or len(pool) > config.large_pool:
        search_space: Sequence[Code] = pool
    else:
        search_space = all_valid_codes()

    worst = partition_worst_cases(search_space, pool)
    best = int(np.argmin(worst))
    log.debug("minimax over %d guesses for pool of %d: %s (worst case %d)",
              len(search_space), len(pool), search_space[best], worst[best])
    return search_space[best]


class MinimaxPlayer(Player):
    """Computer player: honest oracle for its own secret, minimax guesser.

    Parameters
    ----------
    config : SolverConfig or None
        Pool-size thresholds and seed.
    rng : random.Random or None
        Random source for the secret and the initial pool order.  Built
        from ``config.seed`` when omitted.
    secret : Code or None
        Fixed secret; a random one is drawn when omitted.
    """

    def __init__(
        self,
        config: SolverConfig | None = None,
        rng: random.Random | None = None,
        secret: Code | None = None,
    ) -> None:
        self._config = config or SolverConfig()
        self._rng = rng or random.Random(self._config.seed)
        self._secret = secret if secret is not None else Code.generate(self._rng)
        self._pool = list(all_valid_codes())
        self._rng.shuffle(self._pool)
        self._history: list[Answer] = []

    @property
    def name(self) -> str:
        return "Minimax"

    @property
    def pool(self) -> tuple[Code, ...]:
        return tuple(self._pool)

    @property
    def history(self) -> list[Answer]:
        return list(self._history)

    def remaining_guesses(self) -> int:
        return len(self._pool)

    def ask(self) -> Code:
        """Return the next guess and drop it from the pool.

        Raises
        ------
        ExhaustedCandidates
            If no code is consistent with the answers received.
        """
        if len(self._pool) > self._config.quick_pick:
            guess = self._pool.pop()
            log.debug("pool of %d too large for minimax, guessing %s",
                      len(self._pool) + 1, guess)
            return guess

        guess = select_next_guess(self._pool, self._config)
        if guess is None:
            raise ExhaustedCandidates(
                f"no code fits the {len(self._history)} answers received"
            )
        if guess in self._pool:
            self._pool.remove(guess)
        return guess

    def answer(self, guess: Code) -> Answer:
        return Answer(guess, self._secret.compare(guess))

    def receive_feedback(self, answer: Answer) -> None:
        before = len(self._pool)
        self._pool = filter_candidates(self._pool, answer.guess, answer.feedback)
        self._history.append(answer)
        log.debug("%s: pool %d -> %d", answer, before, len(self._pool))
