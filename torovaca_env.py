"""Toro y Vaca game model: codes, feedback and the candidate universe."""

from __future__ import annotations

import random
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable


CODE_LENGTH = 4
UNIVERSE_SIZE = 4536  # 9 * 9 * 8 * 7


class InvalidFormat(ValueError):
    """Raised when text or an integer does not form a valid Code or Feedback."""


# ------------------------------------------------------------------
# Feedback
# ------------------------------------------------------------------

@dataclass(frozen=True)
class Feedback:
    """Toros (right digit, right place) and Vacas (right digit, wrong place)."""

    bulls: int
    cows: int

    @property
    def is_win(self) -> bool:
        return self.bulls == CODE_LENGTH and self.cows == 0

    def __str__(self) -> str:
        return f"{self.bulls}T{self.cows}V"


WIN = Feedback(CODE_LENGTH, 0)


# ------------------------------------------------------------------
# Code
# ------------------------------------------------------------------

@dataclass(frozen=True)
class Code:
    """A 4-digit number with pairwise-distinct digits."""

    digits: tuple[int, ...]

    @classmethod
    def from_integer(cls, n: int) -> Code:
        """Validate *n* and return the matching Code.

        Raises
        ------
        InvalidFormat
            If *n* is outside (1000, 9999) or repeats a digit.
        """
        if not 1000 < n < 9999:
            raise InvalidFormat(f"{n} is not a 4-digit number")
        digits = tuple(int(ch) for ch in str(n))
        if len(set(digits)) != CODE_LENGTH:
            raise InvalidFormat(f"{n} repeats a digit")
        return cls(digits)

    @classmethod
    def generate(cls, rng: random.Random | None = None) -> Code:
        """Draw uniformly from the 4-digit range until a valid code comes up."""
        rng = rng or random.Random()
        while True:
            try:
                return cls.from_integer(rng.randrange(1000, 9999))
            except InvalidFormat:
                continue

    @property
    def value(self) -> int:
        return int(str(self))

    def compare(self, other: Code) -> Feedback:
        """Score *other* against this code."""
        bulls = 0
        cows = 0
        for i, a in enumerate(self.digits):
            for j, b in enumerate(other.digits):
                if a == b:
                    if i == j:
                        bulls += 1
                    else:
                        cows += 1
        return Feedback(bulls, cows)

    def __str__(self) -> str:
        return "".join(str(d) for d in self.digits)


@dataclass(frozen=True)
class Answer:
    """A guess together with the feedback it received."""

    guess: Code
    feedback: Feedback

    def __str__(self) -> str:
        return f"{self.guess}: {self.feedback}"


# ------------------------------------------------------------------
# Module helpers
# ------------------------------------------------------------------

def feedback(secret: Code, guess: Code) -> Feedback:
    """Return the feedback *guess* earns against *secret*."""
    return secret.compare(guess)


def filter_candidates(
    candidates: Iterable[Code],
    guess: Code,
    observed: Feedback,
) -> list[Code]:
    """Keep only candidates consistent with the *observed* feedback."""
    return [c for c in candidates if feedback(c, guess) == observed]


@lru_cache(maxsize=1)
def all_valid_codes() -> tuple[Code, ...]:
    """Every valid code, in ascending numeric order."""
    codes: list[Code] = []
    for n in range(1000, 9999):
        try:
            codes.append(Code.from_integer(n))
        except InvalidFormat:
            continue
    return tuple(codes)
