"""
Pytest configuration for Gallows.

Keeps every test offline and on the bundled word list.
"""

import os

import pytest

os.environ["OFFLINE_MODE"] = "true"
os.environ.pop("OPENAI_API_KEY", None)
os.environ.pop("GALLOWS_WORDLIST", None)

GERMAN_WORDS = [
    "haus", "baum", "auto", "tisch", "buch", "katze", "hund", "maus",
    "ball", "stuhl", "fenster", "garten", "schule", "bleistift",
    "telefon", "computer", "zeitung", "kühlschrank", "schlüssel",
    "brille", "fahrrad", "apfel", "banane", "schokolade", "kaffee",
]


@pytest.fixture
def vocabulary():
    return list(GERMAN_WORDS)
