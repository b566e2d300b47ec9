"""Terminal view of the solver's candidate pool over the whole universe."""

from __future__ import annotations

from typing import Iterable

from torovaca_env import Code, all_valid_codes

COLORS = {
    "candidate": "\033[32m",       # Green
    "asked": "\033[2;36m",         # Dim cyan
    "eliminated": "\033[2;90m",    # Dim bright black
    "RESET": "\033[0m",
}

CODES_PER_LINE = 56


def _paint(text: str, status: str, colorize: bool) -> str:
    if not colorize:
        return text
    return f"{COLORS[status]}{text}{COLORS['RESET']}"


def code_status(code: Code, pool: set[Code], asked: set[Code]) -> str:
    """Classify *code* as "candidate", "asked" or "eliminated"."""
    if code in pool:
        return "candidate"
    if code in asked:
        return "asked"
    return "eliminated"


def render_search_space(
    pool: Iterable[Code],
    asked: Iterable[Code],
    colorize: bool = True,
) -> str:
    """Render every valid code, marked as candidate, asked, or eliminated."""
    pool_set = set(pool)
    asked_set = set(asked)
    universe = all_valid_codes()

    header = (f"{_paint(str(len(pool_set)), 'candidate', colorize)} / "
              f"{_paint(str(len(universe)), 'eliminated', colorize)}")
    lines = [header]
    for start in range(0, len(universe), CODES_PER_LINE):
        row = universe[start:start + CODES_PER_LINE]
        lines.append(" ".join(
            _paint(str(c), code_status(c, pool_set, asked_set), colorize)
            for c in row
        ))
    return "\n".join(lines)
