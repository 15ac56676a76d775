from __future__ import annotations

import logging
import re
from typing import Optional

from openai import OpenAIError

from gallows.core.guesser import ALPHABET
from gallows.services.llm import get_client, model_name

logger = logging.getLogger(__name__)

# Only letters the game knows, at least two of them.
_VALID_WORD = re.compile(f"^[{ALPHABET}]{{2,}}$")


def _clean(text: str) -> str:
    return text.replace('"', "").replace("'", "").replace(".", "").strip().lower()


def pick_with_llm(retries: int = 2, model: Optional[str] = None) -> Optional[str]:
    """
    Try to pick ONE valid target word via an LLM. Returns None on failure (caller should fall back).

    Safety
    ------
    - OFFLINE_MODE=true or missing OPENAI_API_KEY -> returns None immediately.
    - Prompts the model for exactly one German noun in lowercase.
    - Validates against the game alphabet; retries a few times; then gives up.
    """
    client = get_client()
    if client is None:
        return None

    prompt = (
        "Name one common German noun for a game of hangman. "
        "It should be different each time. Output only the word in lowercase, without article."
    )
    mdl = model_name(model)

    for attempt in range(retries + 1):
        try:
            resp = client.chat.completions.create(
                model=mdl,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.9,
                max_tokens=20,
            )
        except OpenAIError as exc:
            logger.warning("LLM word pick failed (attempt %d): %s", attempt + 1, exc)
            continue

        word = _clean(resp.choices[0].message.content or "")
        if _VALID_WORD.match(word):
            return word
        logger.warning("LLM returned an unusable word %r (attempt %d)", word, attempt + 1)

    return None
