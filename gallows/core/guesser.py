from __future__ import annotations

import logging
import random
from collections import deque
from typing import Deque, Iterable, List, Optional

from .state import PLACEHOLDER

logger = logging.getLogger(__name__)

ALPHABET = "abcdefghijklmnopqrstuvwxyzäöüß"

# Most frequent letters first, tuned for the German vocabulary.
COMMON_LETTERS = ("m", "e", "k", "a", "h", "c", "z", "i", "u", "f",
                  "r", "g", "d", "w", "s", "o", "l", "n", "b", "t")

FALLBACK_LETTER = "a"


def matches_mask(word: str, mask: str) -> bool:
    """
    True if `word` fits the mask positionally.

    Placeholder positions accept any character; revealed positions must be
    equal (case-insensitive). Words of a different length never match.
    """
    word = word.lower()
    mask = mask.lower()
    if len(word) != len(mask):
        return False
    return all(m == PLACEHOLDER or m == c for c, m in zip(word, mask))


def is_compatible(word: str, guessed_letters: Iterable[str]) -> bool:
    """
    True if `word` contains at least one guessed letter, or nothing was guessed yet.

    Note
    ----
    This is deliberately generous: a word is *not* dropped for containing a
    letter that turned out to be absent from the target.
    """
    guessed = list(guessed_letters)
    if not guessed:
        return True
    word = word.lower()
    return any(ch in word for ch in guessed)


class AutoGuesser:
    """
    Frequency-driven computer player.

    The guesser never looks inside a `GameState`. It only sees what a human
    would: the current mask and the letters guessed so far.

    Letter phases
    -------------
    1) `COMMON_LETTERS` in order.
    2) Uniformly random picks from the rest of `ALPHABET`.
    3) `FALLBACK_LETTER` once every letter has been proposed.
    """

    def __init__(self, vocabulary: Iterable[str], rng: Optional[random.Random] = None,
                 seed: Optional[int] = None) -> None:
        """
        Parameters
        ----------
        vocabulary : Iterable[str]
            Known words used to seed the candidate pool. Blank entries are dropped.
        rng : random.Random, optional
            Random source for tie-breaking; takes precedence over `seed`.
        seed : int, optional
            Seed for a private `random.Random` when no `rng` is given.
        """
        self._vocabulary: List[str] = [w.strip().lower() for w in vocabulary if w and w.strip()]
        if not self._vocabulary:
            raise ValueError("AutoGuesser needs a non-empty vocabulary.")
        self._rng = rng if rng is not None else random.Random(seed)
        self.initialize_guesser()

    def initialize_guesser(self) -> None:
        """Reset both letter pools and the candidate pool for a new round."""
        self._ranked: Deque[str] = deque(COMMON_LETTERS)
        self._remaining: List[str] = list(ALPHABET)
        self._pool: List[str] = list(self._vocabulary)

    @property
    def vocabulary(self) -> List[str]:
        return list(self._vocabulary)

    @property
    def candidate_pool(self) -> List[str]:
        return list(self._pool)

    def has_more_letters(self) -> bool:
        return bool(self._ranked) or bool(self._remaining)

    def get_next_letter_guess(self) -> str:
        """Pop the next untried letter; see the class docstring for the order."""
        if self._ranked:
            letter = self._ranked.popleft()
            if letter in self._remaining:
                self._remaining.remove(letter)
            return letter

        if self._remaining:
            idx = self._rng.randrange(len(self._remaining))
            return self._remaining.pop(idx)

        logger.debug("Alphabet exhausted; falling back to %r", FALLBACK_LETTER)
        return FALLBACK_LETTER

    def matching_words(self, mask: str) -> List[str]:
        """Pool words that fit `mask` positionally."""
        return [w for w in self._pool if matches_mask(w, mask)]

    def update_possible_words(self, mask: str, guessed_letters: Iterable[str]) -> None:
        """Narrow the candidate pool to words fitting the mask and the guess history."""
        guessed = [g.lower() for g in guessed_letters]
        before = len(self._pool)
        self._pool = [w for w in self.matching_words(mask) if is_compatible(w, guessed)]
        logger.debug("Candidate pool narrowed from %d to %d for mask %r", before, len(self._pool), mask)

    def get_word_guess(self, mask: str) -> str:
        """
        Pick a whole-word guess for `mask`.

        Returns a random pool word matching the mask; when nothing matches
        (over-pruned pool, or a target outside the vocabulary) returns a
        random word from the full vocabulary.
        """
        matching = self.matching_words(mask)
        if matching:
            return self._rng.choice(matching)
        logger.debug("No candidate fits %r; guessing from the full vocabulary", mask)
        return self._rng.choice(self._vocabulary)
