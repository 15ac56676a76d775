from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Literal, Optional

from .sources import GuessSource
from .state import GameState, GuessResult

logger = logging.getLogger(__name__)

MoveKind = Literal["letter", "word"]


@dataclass(frozen=True)
class Move:
    """One applied guess and the round state right after it."""
    kind: MoveKind
    guess: str
    outcome: GuessResult
    mask: str
    lives_remaining: int

    @property
    def hit(self) -> bool:
        return self.outcome is GuessResult.HIT


def new_game(word: Optional[str]) -> GameState:
    """
    Start a new round with `word` as the target.

    Raises
    ------
    InvalidWordError
        If `word` is None, empty or blank.
    """
    state = GameState(word)
    logger.info("New round started (%d letters)", len(state.target))
    return state


def submit_guess(state: GameState, raw: Optional[str]) -> Optional[Move]:
    """
    Route a raw guess string to the letter or whole-word operation.

    Behavior
    --------
    - Blank input is ignored and returns None.
    - A single character is a letter guess; anything longer is a word guess.
    - Word guesses are reported as `HIT` / `MISS` (there is no repeat for words).
    """
    guess = (raw or "").strip().lower()
    if not guess:
        return None

    if len(guess) == 1:
        kind: MoveKind = "letter"
        outcome = state.guess_letter(guess)
    else:
        kind = "word"
        outcome = GuessResult.HIT if state.guess_word(guess) else GuessResult.MISS

    move = Move(kind=kind, guess=guess, outcome=outcome, mask=state.mask,
                lives_remaining=state.lives_remaining)
    logger.debug("%s guess %r -> %s (%s, lives=%d)", kind, guess, outcome.value, move.mask,
                 move.lives_remaining)
    return move


def play_round(
    state: GameState,
    source: GuessSource,
    on_move: Optional[Callable[[Move], None]] = None,
    max_attempts: int = 200,
) -> List[Move]:
    """
    Drive `state` with guesses from `source` until the round is won or over.

    Parameters
    ----------
    state : GameState
        A freshly initialized round.
    source : GuessSource
        Where guesses come from. It is reset before the first guess and
        observes a snapshot after every applied move.
    on_move : Callable[[Move], None], optional
        Called after each applied move (e.g. to print it).
    max_attempts : int, optional
        Upper bound on requested guesses, so a source that keeps sending
        blanks or repeats cannot loop forever.

    Returns
    -------
    list[Move]
        The applied moves in order.
    """
    moves: List[Move] = []
    source.reset()
    view = state.snapshot()

    attempts = 0
    while not state.finished and attempts < max_attempts:
        attempts += 1
        move = submit_guess(state, source.next_guess(view))
        if move is None:
            continue
        moves.append(move)
        if on_move is not None:
            on_move(move)
        view = state.snapshot()
        source.observe(view)

    if state.finished:
        logger.info("Round %s after %d moves", "won" if state.won else "lost", len(moves))
    else:
        logger.warning("Round stopped unfinished after %d attempts", attempts)
    return moves
