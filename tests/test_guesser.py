"""
Tests for gallows.core.guesser.
"""

import random

import pytest

from gallows.core.guesser import (
    ALPHABET,
    COMMON_LETTERS,
    FALLBACK_LETTER,
    AutoGuesser,
    is_compatible,
    matches_mask,
)


def _drain(guesser):
    return [guesser.get_next_letter_guess() for _ in range(len(ALPHABET))]


def test_first_ten_letters_follow_ranked_order(vocabulary):
    guesser = AutoGuesser(vocabulary, seed=1)
    first = [guesser.get_next_letter_guess() for _ in range(10)]

    assert first == ["m", "e", "k", "a", "h", "c", "z", "i", "u", "f"]
    assert len(set(first)) == 10


def test_ranked_queue_comes_before_random_letters(vocabulary):
    guesser = AutoGuesser(vocabulary, seed=1)
    letters = _drain(guesser)
    assert tuple(letters[:len(COMMON_LETTERS)]) == COMMON_LETTERS
    assert set(letters[len(COMMON_LETTERS):]) == set(ALPHABET) - set(COMMON_LETTERS)


def test_every_letter_is_proposed_exactly_once(vocabulary):
    guesser = AutoGuesser(vocabulary, seed=5)
    letters = _drain(guesser)
    assert sorted(letters) == sorted(ALPHABET)
    assert len(set(letters)) == len(ALPHABET)


def test_exhaustion_falls_back_to_default_letter(vocabulary):
    guesser = AutoGuesser(vocabulary, seed=3)
    for _ in range(len(ALPHABET) - 1):
        guesser.get_next_letter_guess()
    assert guesser.has_more_letters()

    guesser.get_next_letter_guess()
    assert not guesser.has_more_letters()
    assert guesser.get_next_letter_guess() == FALLBACK_LETTER
    assert guesser.get_next_letter_guess() == FALLBACK_LETTER
    assert not guesser.has_more_letters()


def test_seeded_guessers_are_reproducible(vocabulary):
    a = AutoGuesser(vocabulary, seed=42)
    b = AutoGuesser(vocabulary, rng=random.Random(42))
    assert _drain(a) == _drain(b)


def test_initialize_guesser_resets_letters_and_pool(vocabulary):
    guesser = AutoGuesser(vocabulary, seed=0)
    _drain(guesser)
    guesser.update_possible_words("h___", ["h"])
    assert len(guesser.candidate_pool) < len(vocabulary)

    guesser.initialize_guesser()
    assert guesser.has_more_letters()
    assert guesser.get_next_letter_guess() == "m"
    assert guesser.candidate_pool == vocabulary


def test_vocabulary_is_normalized():
    guesser = AutoGuesser(["Haus", " Maus ", "", "  "])
    assert guesser.vocabulary == ["haus", "maus"]


def test_empty_vocabulary_is_rejected():
    with pytest.raises(ValueError):
        AutoGuesser(["", "   "])


@pytest.mark.parametrize("word,mask,expected", [
    ("haus", "h_u_", True),
    ("Haus", "H_U_", True),
    ("hund", "h_u_", False),
    ("haus", "h___", True),
    ("haus", "h____", False),
    ("hau", "h_u_", False),
    ("maus", "h___", False),
])
def test_matches_mask(word, mask, expected):
    assert matches_mask(word, mask) is expected


def test_compatibility_is_permissive():
    """A single shared guessed letter is enough, even if another guess was a miss."""
    assert is_compatible("haus", [])
    assert is_compatible("haus", ["x", "s"])
    assert not is_compatible("haus", ["x", "y"])


def test_candidate_narrowing_by_mask():
    vocab = ["Haus", "hund", "maus", "haut", "baum", "hausboot"]
    for seed in range(20):
        guesser = AutoGuesser(vocab, seed=seed)
        guesser.update_possible_words("h_u_", ["h", "u"])
        assert sorted(guesser.candidate_pool) == ["haus", "haut"]

        word = guesser.get_word_guess("h_u_")
        assert len(word) == 4
        assert word[0] == "h" and word[2] == "u"


def test_narrowing_without_guesses_only_uses_mask():
    guesser = AutoGuesser(["haus", "hund", "maus"], seed=0)
    guesser.update_possible_words("h___", [])
    assert guesser.candidate_pool == ["haus", "hund"]


def test_narrowing_keeps_words_with_missed_letters():
    """Words containing a letter already known to be absent survive the filter."""
    guesser = AutoGuesser(["haus", "hemd", "hund"], seed=0)
    # "m" was a miss for the real target "haus", yet "hemd" is kept.
    guesser.update_possible_words("h___", ["m", "s"])
    assert guesser.candidate_pool == ["haus", "hemd"]


def test_narrowing_accumulates():
    guesser = AutoGuesser(["haus", "hund", "hemd", "maus"], seed=0)
    guesser.update_possible_words("h___", ["u"])
    assert guesser.candidate_pool == ["haus", "hund"]
    guesser.update_possible_words("h___", ["u", "d"])
    assert guesser.candidate_pool == ["haus", "hund"]
    guesser.update_possible_words("h_u_", ["u", "d", "a"])
    assert guesser.candidate_pool == ["haus"]


def test_word_guess_falls_back_to_full_vocabulary():
    vocab = ["haus", "hund", "maus"]
    guesser = AutoGuesser(vocab, seed=0)
    guesser.update_possible_words("h___", ["x"])
    assert guesser.candidate_pool == []
    assert guesser.matching_words("h___") == []
    assert guesser.get_word_guess("h___") in vocab
    assert guesser.get_word_guess("zzzzzzz") in vocab


def test_candidate_pool_is_a_copy(vocabulary):
    guesser = AutoGuesser(vocabulary)
    pool = guesser.candidate_pool
    pool.clear()
    assert guesser.candidate_pool == vocabulary
