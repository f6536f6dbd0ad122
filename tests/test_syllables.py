import pytest

from lyric_assistant.syllables import (
    syllables_in_line,
    syllables_in_pronunciation,
    syllables_in_word,
)


@pytest.mark.parametrize(
    "word, expected",
    [
        ("", 0),
        ("123", 0),
        ("she", 1),
        ("walks", 1),
        ("alone", 2),
        ("hello", 2),
        ("rhythm", 1),
        ("fire", 1),
        ("the", 1),
        ("beautiful", 3),
        ("day", 1),
        ("queue", 1),
        ("Alone!", 2),
    ],
)
def test_syllables_in_word_heuristic(word, expected):
    assert syllables_in_word(word) == expected


def test_syllables_in_word_non_empty_alphabetic_is_at_least_one():
    for word in ["b", "xyz", "PSST", "e", "hmm"]:
        assert syllables_in_word(word) >= 1


def test_syllables_in_line():
    assert syllables_in_line("") == 0
    assert syllables_in_line("   ") == 0
    assert syllables_in_line("She walks alone") == 4
    # punctuation-only tokens still count once
    assert syllables_in_line("la - la") == 3


def test_syllables_in_pronunciation_counts_vowels():
    assert syllables_in_pronunciation("AH0 L OW1 N") == 2
    assert syllables_in_pronunciation(["S", "P", "AY1", "D", "ER0"]) == 2
