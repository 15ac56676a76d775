from __future__ import annotations

import logging
import os
import random
from pathlib import Path
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

# Bundled word list; override with the GALLOWS_WORDLIST environment variable.
_DEFAULT_FILE = Path(__file__).resolve().parent.parent / "data" / "words.txt"

# Last resort when no word list can be read.
_BUILTIN_WORDS = [
    "Haus", "Baum", "Auto", "Tisch", "Buch", "Katze", "Hund", "Maus",
    "Ball", "Stuhl", "Fenster", "Garten", "Schule", "Bleistift",
    "Telefon", "Computer", "Zeitung", "Kühlschrank", "Schlüssel",
    "Brille", "Fahrrad", "Apfel", "Banane", "Schokolade", "Kaffee",
]


def _read_lines(path: Path) -> List[str]:
    """
    Read a text file (UTF-8) and return non-empty, stripped, lowercase lines.

    Notes
    -----
    - Returns an empty list if the file is missing.
    - Lines starting with '#' are comments.
    """
    if not path.is_file():
        return []
    raw = path.read_text(encoding="utf-8").splitlines()
    return [ln.strip().lower() for ln in raw if ln.strip() and not ln.strip().startswith("#")]


def wordlist_path() -> Path:
    """Path of the word list in use: `GALLOWS_WORDLIST` if set, else the bundled file."""
    env = os.getenv("GALLOWS_WORDLIST", "").strip()
    return Path(env) if env else _DEFAULT_FILE


def load_wordlist(path: Optional[str | Path] = None) -> List[str]:
    """
    Load the vocabulary (lowercase, never empty).

    Fallback strategy
    -----------------
    1) Use `path`, or `wordlist_path()` if not given.
    2) If that file is missing or empty, use the built-in list.
    """
    src = Path(path) if path is not None else wordlist_path()
    words = _read_lines(src)
    if not words:
        logger.warning("Word list %s is missing or empty, using built-in words", src)
        words = [w.lower() for w in _BUILTIN_WORDS]
    return words


def pick_local_word(seed: Optional[int] = None, words: Optional[Sequence[str]] = None) -> str:
    """
    Pick a single word from the local vocabulary.

    Parameters
    ----------
    seed : int | None
        Optional seed for reproducible picks during tests or demos.
    words : Sequence[str] | None
        Vocabulary to pick from; loaded with `load_wordlist()` when omitted.

    Returns
    -------
    str
        A lowercase word (never empty, due to fallbacks).
    """
    pool = [w for w in (words if words is not None else load_wordlist()) if w.strip()]
    if not pool:
        pool = [w.lower() for w in _BUILTIN_WORDS]
    rng = random.Random(seed)
    return rng.choice(pool).strip().lower()
