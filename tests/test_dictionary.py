import logging

import pytest
from wordhunt.dictionary import Dictionary, read_word_list
from wordhunt.errors import DictionaryUnavailable


def test_load_normalizes_and_skips_junk(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Apple\n\n  pal  \nco-op\nR2D2\ncafé\nLAVA\n", encoding="utf-8")
    d = Dictionary.load(path)
    assert d.available
    assert sorted(d) == ["apple", "lava", "pal"]


@pytest.mark.parametrize("word,expected", [
    ("apple", True),
    ("APPLE", True),
    ("Pal", True),
    ("app", False),
    ("apples", False),
    ("", False),
])
def test_is_valid_word(dictionary, word, expected):
    assert dictionary.is_valid_word(word) is expected


@pytest.mark.parametrize("word,letters,expected", [
    ("lava", "lava", True),
    ("lava", "alav", True),
    ("lava", "lav", False),
    ("val", {"v": 1, "a": 2, "l": 1}, True),
    ("apple", {"a": 1, "p": 1, "l": 1, "e": 1}, False),
    ("al", ["a", "l"], True),
])
def test_can_form_from_letters(word, letters, expected):
    assert Dictionary.can_form_from_letters(word, letters) is expected


def test_missing_file_degrades_instead_of_raising(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        d = Dictionary.load(tmp_path / "nope.txt")
    assert not d.available
    assert "nope.txt" in d.error
    assert len(d) == 0
    assert d.is_valid_word("apple") is False
    assert "apple" not in d
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_read_word_list_raises_dictionary_unavailable(tmp_path):
    with pytest.raises(DictionaryUnavailable):
        read_word_list(tmp_path / "missing.txt")


def test_bundled_word_list_loads():
    from wordhunt import config
    d = Dictionary.load(config.WORDS_PATH)
    assert d.available
    assert d.is_valid_word("apple")


def test_from_words_keeps_only_ascii_letters():
    d = Dictionary.from_words(["café", "cafe", "naïve", " Lava "])
    assert sorted(d) == ["cafe", "lava"]
    assert d.is_valid_word("café") is False
