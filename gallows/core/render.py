"""Plain-text rendering helpers for the presentation layer."""

from __future__ import annotations

from .state import MAX_LIVES

GALLOWS_STATES = [
    "",
    "\n\n\n\n\n____",
    "\n |\n |\n |\n |\n_|___",
    " ______\n |\n |\n |\n |\n_|___",
    " ______\n |    |\n |\n |\n |\n_|___",
    " ______\n |    |\n |    O\n |\n |\n_|___",
    " ______\n |    |\n |    O\n |    |\n |\n_|___",
    " ______\n |    |\n |    O\n |   /|\n |\n_|___",
    " ______\n |    |\n |    O\n |   /|\\\n |\n_|___",
    " ______\n |    |\n |    O\n |   /|\\\n |   /\n_|___",
]

GAME_OVER_GALLOWS = " ______\n |    |\n |    O\n |   /|\\\n |   / \\\n_|___\nRIP"


def gallows_art(lives_remaining: int) -> str:
    """ASCII gallows for the given number of lives; the full figure once none are left."""
    if lives_remaining <= 0:
        return GAME_OVER_GALLOWS
    index = min(max(MAX_LIVES - lives_remaining, 0), len(GALLOWS_STATES) - 1)
    return GALLOWS_STATES[index]


def spaced_mask(mask: str) -> str:
    """Return the mask with spaces between characters, e.g. 'h _ u _'."""
    return " ".join(mask)
