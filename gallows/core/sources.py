"""
Guess sources: who proposes the next guess for a round.

The round driver only talks to the `GuessSource` interface, so a human at a
prompt, a scripted test and the computer player all feed the same
`GameState` API.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Set

from .guesser import AutoGuesser
from .state import RoundView

logger = logging.getLogger(__name__)


class GuessSource(ABC):
    """Base class for anything that can propose guesses."""

    def reset(self) -> None:
        """Prepare for a new round (optional)."""
        pass

    @abstractmethod
    def next_guess(self, view: RoundView) -> str:
        """Return a raw guess: one letter, or a whole word."""

    def observe(self, view: RoundView) -> None:
        """Receive the round snapshot after a guess was applied (optional)."""
        pass


class HumanGuessSource(GuessSource):
    """
    Adapter around any input callable.

    `prompt` takes no arguments and returns the raw text the player typed,
    e.g. `input`, a UI callback, or `iter([...]).__next__` in tests.
    """

    def __init__(self, prompt: Callable[[], str]) -> None:
        self.prompt = prompt

    def next_guess(self, view: RoundView) -> str:
        return self.prompt()


class AutoGuessSource(GuessSource):
    """
    Heuristic adapter around an `AutoGuesser`.

    Strategy
    --------
    - Guess a whole word once exactly one untried candidate fits the mask,
      or when no letters are left to try.
    - Otherwise take the guesser's next letter, skipping letters already in
      the observed history (another player may have used them).
    """

    def __init__(self, guesser: AutoGuesser) -> None:
        self.guesser = guesser
        self._tried_words: Set[str] = set()

    def reset(self) -> None:
        self.guesser.initialize_guesser()
        self._tried_words = set()

    def next_guess(self, view: RoundView) -> str:
        fresh = [w for w in self.guesser.matching_words(view.mask) if w not in self._tried_words]
        if len(fresh) == 1:
            return self._word(fresh[0])

        while self.guesser.has_more_letters():
            letter = self.guesser.get_next_letter_guess()
            if letter not in view.guessed_letters:
                return letter

        return self._word(self.guesser.get_word_guess(view.mask))

    def observe(self, view: RoundView) -> None:
        self.guesser.update_possible_words(view.mask, view.guessed_letters)

    def _word(self, word: str) -> str:
        logger.debug("Trying whole word %r", word)
        self._tried_words.add(word)
        return word
