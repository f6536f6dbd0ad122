from __future__ import annotations

import pytest

from lyric_assistant.dictionary import PhoneticDictionary
from lyric_assistant.index import RhymeIndex
from lyric_assistant.rhymes import RhymeEngine


@pytest.fixture()
def sample_dictionary():
    data = {
        "door": ["D AO1 R"],
        "more": ["M AO1 R"],
        "floor": ["F L AO1 R"],
        "cat": ["K AE1 T"],
        "bat": ["B AE1 T"],
        "battle": ["B AE1 T AH0 L"],
        "spider": ["S P AY1 D ER0"],
        "amazing": ["AH0 M EY1 Z IH0 NG"],
        "blazing": ["B L EY1 Z IH0 NG"],
        "butterfly": ["B AH1 T ER0 F L AY2"],
        "the": ["DH AH0", "DH AH1", "DH IY0"],
    }
    dictionary = PhoneticDictionary()
    for word, pronunciations in data.items():
        for pronunciation in pronunciations:
            dictionary.add(word, pronunciation)
    return dictionary


@pytest.fixture()
def sample_index(sample_dictionary):
    return RhymeIndex.build(sample_dictionary)


@pytest.fixture()
def engine(sample_index):
    return RhymeEngine(sample_index)


@pytest.fixture()
def cmu_file(tmp_path):
    path = tmp_path / "cmudict.sample"
    path.write_text(
        ";;; sample dictionary\n"
        "DOOR  D AO1 R\n"
        "MORE  M AO1 R\n"
        "FLOOR  F L AO1 R\n"
        "FIRE  F AY1 ER0\n"
        "FIRE(1)  F AY1 R\n"
        "BROKEN-LINE\n"
        "\n",
        encoding="latin-1",
    )
    return path
