from __future__ import annotations

import logging
from typing import Optional

from openai import OpenAIError

from gallows.core.state import PLACEHOLDER
from gallows.services.llm import get_client, model_name

logger = logging.getLogger(__name__)


def _contains_answer(text: str, secret: str) -> bool:
    return secret.lower() in (text or "").lower()


def _local_fallback_hint(word: str, mask: str) -> str:
    """Always-available local hint; it only restates what the mask already shows."""
    hidden = mask.count(PLACEHOLDER)
    return f"The word has {len(word)} letters and {hidden} of them are still hidden."


def llm_hint(word: str, mask: str, model: Optional[str] = None, temperature: float = 0.8) -> str:
    """
    Return ONE hint for `word` using an LLM; fall back locally on failure.

    Rules
    -----
    - Any text is accepted as long as it does NOT contain the secret word.
    - Long answers are cut to about 25 words.
    - Offline, API errors or rule violations give the deterministic local hint.
    """
    client = get_client()
    if client is None:
        return _local_fallback_hint(word, mask)

    system = "You are a helpful hangman clue-giver. The words are German nouns."
    user = (
        f"The secret word is '{word}', the player currently sees `{mask}`. "
        "Give exactly ONE short hint in English that helps the player guess the word. "
        "Do NOT include the word itself. Reply with the hint only."
    )

    try:
        resp = client.chat.completions.create(
            model=model_name(model),
            messages=[{"role": "system", "content": system},
                      {"role": "user", "content": user}],
            temperature=temperature,
            max_tokens=80,
        )
    except OpenAIError as exc:
        logger.warning("LLM hint failed: %s", exc)
        return _local_fallback_hint(word, mask)

    text = (resp.choices[0].message.content or "").strip()
    if not text or _contains_answer(text, word):
        return _local_fallback_hint(word, mask)
    words = text.split()
    if len(words) > 25:
        text = " ".join(words[:25])
    return text


__all__ = ["llm_hint"]
