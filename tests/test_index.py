import pytest

from lyric_assistant import index as index_module
from lyric_assistant.dictionary import PhoneticDictionary
from lyric_assistant.index import RhymeIndex, load_rhyme_index


def test_candidates_exclude_query_in_insertion_order(sample_index):
    assert sample_index.candidates_for("door") == ("more", "floor")
    assert sample_index.candidates_for("DOOR") == ("more", "floor")
    assert sample_index.candidates_for("cat") == ("bat",)


def test_candidates_are_subset_of_bucket(sample_index, sample_dictionary):
    for word in sample_dictionary:
        key = sample_index.key_for(word)
        if key is None:
            continue
        candidates = sample_index.candidates_for(word)
        assert word not in candidates
        assert set(candidates) <= set(sample_index.bucket(key))
        assert word in sample_index.bucket(key)


def test_unknown_or_unkeyed_words_have_no_candidates(sample_index):
    assert sample_index.candidates_for("zyzzyva") == ()
    # "the" is keyed through its second pronunciation only
    assert sample_index.key_for("the") == ("AH",)
    assert sample_index.candidates_for("the") == ()


def test_multi_syllable_key_from_last_primary_stress(sample_index):
    assert sample_index.key_for("amazing") == ("EY", "Z", "IH", "NG")
    assert sample_index.candidates_for("amazing") == ("blazing",)
    assert sample_index.key_for("butterfly") == ("AH", "T", "ER", "F", "L", "AY")


def test_every_pronunciation_is_indexed(cmu_file):
    built = RhymeIndex.build(PhoneticDictionary.from_file(cmu_file))
    assert "fire" in built.bucket(("AY", "ER"))
    assert "fire" in built.bucket(("AY", "R"))
    assert ("AO", "R") in built
    assert len(built) == 3


def test_duplicate_insertions_are_ignored():
    dictionary = PhoneticDictionary()
    dictionary.add("read", "R IY1 D")
    dictionary.add("read", "R IY1 D")
    dictionary.add("bead", "B IY1 D")
    built = RhymeIndex.build(dictionary)
    assert built.bucket(("IY", "D")) == ("read", "bead")


def test_load_rhyme_index_from_file(cmu_file):
    loaded = load_rhyme_index(cmu_file)
    assert loaded.candidates_for("door") == ("more", "floor")
    assert "shore" not in loaded.bucket(("AO", "R"))


def test_load_rhyme_index_missing_file_uses_seed(tmp_path):
    loaded = load_rhyme_index(tmp_path / "missing.dict")
    assert "more" in loaded.candidates_for("door")
    assert "shore" in loaded.candidates_for("door")


def test_load_rhyme_index_missing_file_without_fallback(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_rhyme_index(tmp_path / "missing.dict", fallback=False)


def test_load_rhyme_index_without_usable_keys_uses_seed(tmp_path):
    path = tmp_path / "unstressed.dict"
    path.write_text("THE  DH AH0\nA  AH0\n", encoding="latin-1")
    loaded = load_rhyme_index(path)
    assert "night" in loaded.candidates_for("light")

    with pytest.raises(ValueError):
        load_rhyme_index(path, fallback=False)


def test_load_rhyme_index_without_source_uses_seed():
    assert load_rhyme_index().candidates_for("time") == ("rhyme", "climb")


def test_load_rhyme_index_nltk_failure_uses_seed(monkeypatch):
    def missing_corpus(progress=False):
        raise LookupError("cmudict not found")

    monkeypatch.setattr(index_module, "load_nltk_cmudict", missing_corpus)
    loaded = load_rhyme_index(use_nltk=True)
    assert "door" in loaded.dictionary


def test_load_rhyme_index_from_nltk(monkeypatch, sample_dictionary):
    monkeypatch.setattr(index_module, "load_nltk_cmudict", lambda progress=False: sample_dictionary)
    loaded = load_rhyme_index(use_nltk=True)
    assert loaded.dictionary is sample_dictionary
    assert loaded.candidates_for("bat") == ("cat",)
