from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

MAX_LIVES = 10
PLACEHOLDER = "_"


class InvalidWordError(ValueError):
    """Raised when a round is started with a missing or blank target word."""


class GuessResult(Enum):
    """
    Outcome of a single-letter guess.

    Notes
    -----
    - Only `HIT` is truthy, so callers that just want "was something revealed?"
      can write `if state.guess_letter(ch): ...`.
    - `REPEAT` is kept apart from `MISS`: a repeated letter costs nothing.
    """

    HIT = "hit"
    MISS = "miss"
    REPEAT = "repeat"

    def __bool__(self) -> bool:
        return self is GuessResult.HIT


@dataclass(frozen=True)
class RoundView:
    """
    Read-only snapshot of a round, as a player (or the presentation layer) sees it.

    `target` stays None while the round is running.
    """

    mask: str
    lives_remaining: int
    guessed_letters: Tuple[str, ...]
    won: bool
    over: bool
    target: Optional[str] = None

    @property
    def finished(self) -> bool:
        return self.won or self.over


class GameState:
    """
    Mutable state of one hangman round.

    Notes
    -----
    - The first character of the target is revealed when the round starts,
      so even a one-letter word never needs a blind opening guess.
    - State changes only through `initialize`, `guess_letter` and `guess_word`.
      Nothing stops a caller from guessing after the round ended; check
      `won` / `over` first.
    - Accessors hand out copies (strings and tuples), never internal lists.
    """

    def __init__(self, word: Optional[str]) -> None:
        self.initialize(word)

    def initialize(self, word: Optional[str]) -> "GameState":
        """
        Reset this object for a new round with `word` as the target.

        Normalization
        -------------
        - The word is stripped and lowercased.

        Validation
        ----------
        - `None`, empty and whitespace-only words raise `InvalidWordError`.
        """
        target = (word or "").strip().lower()
        if not target:
            raise InvalidWordError("Word cannot be empty or blank.")

        self._target = target
        self._reveal: List[str] = [target[0]] + [PLACEHOLDER] * (len(target) - 1)
        self._lives = MAX_LIVES
        self._guessed: List[str] = []
        self._won = False
        self._over = False
        logger.debug("Round initialized with a %d-letter word", len(target))
        return self

    # ---------
    # Accessors
    # ---------

    @property
    def target(self) -> str:
        return self._target

    @property
    def mask(self) -> str:
        return "".join(self._reveal)

    @property
    def reveal(self) -> List[str]:
        return list(self._reveal)

    @property
    def lives_remaining(self) -> int:
        return self._lives

    @property
    def guessed_letters(self) -> Tuple[str, ...]:
        return tuple(self._guessed)

    @property
    def won(self) -> bool:
        return self._won

    @property
    def over(self) -> bool:
        return self._over

    @property
    def finished(self) -> bool:
        return self._won or self._over

    def has_been_guessed(self, letter: str) -> bool:
        return (letter or "").lower() in self._guessed

    def snapshot(self) -> RoundView:
        """Return a `RoundView`; the target is only included once the round is finished."""
        return RoundView(
            mask=self.mask,
            lives_remaining=self._lives,
            guessed_letters=self.guessed_letters,
            won=self._won,
            over=self._over,
            target=self._target if self.finished else None,
        )

    # -----------
    # Transitions
    # -----------

    def guess_letter(self, letter: str) -> GuessResult:
        """
        Apply a single-letter guess.

        Behavior
        --------
        - A letter guessed before returns `REPEAT` and changes nothing.
        - Every matching position from index 1 onward is revealed. Index 0 was
          revealed up front and is not scanned again, so a letter that only
          occurs there counts as a miss.
        - A miss costs one life.
        - Afterwards `over` is set when lives hit 0 and `won` when the mask
          equals the target.
        """
        letter = (letter or "").lower()
        if letter in self._guessed:
            return GuessResult.REPEAT

        self._guessed.append(letter)
        found = False
        for i in range(1, len(self._target)):
            if self._target[i] == letter:
                self._reveal[i] = letter
                found = True

        if not found:
            self._lose_life()

        self._check_outcome()
        return GuessResult.HIT if found else GuessResult.MISS

    def guess_word(self, word: str) -> bool:
        """
        Apply a whole-word guess.

        Behavior
        --------
        - A correct guess reveals everything and wins the round at no cost.
        - Anything else (wrong letters, wrong length) costs exactly one life.
        """
        attempt = (word or "").strip().lower()
        if attempt == self._target:
            self._reveal = list(self._target)
            self._won = True
            return True

        self._lose_life()
        self._check_outcome()
        return False

    def _lose_life(self) -> None:
        self._lives = max(0, self._lives - 1)

    def _check_outcome(self) -> None:
        if self._lives <= 0:
            self._over = True
        if self.mask == self._target:
            self._won = True
