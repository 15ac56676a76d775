from __future__ import annotations

import os
from typing import Optional

from openai import OpenAI

DEFAULT_MODEL = "gpt-4o-mini"


def is_offline() -> bool:
    """OFFLINE_MODE defaults to true; only the literal 'false' enables the LLM."""
    return os.getenv("OFFLINE_MODE", "true").lower() != "false"


def get_client() -> Optional[OpenAI]:
    """Return an OpenAI client, or None when offline or no API key is configured."""
    api_key = os.getenv("OPENAI_API_KEY", "")
    if is_offline() or not api_key:
        return None
    return OpenAI(api_key=api_key)


def model_name(model: Optional[str] = None) -> str:
    return model or os.getenv("MODEL_NAME", DEFAULT_MODEL)
