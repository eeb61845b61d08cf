import pytest

from gmcrypt.entropy import LanguageNotSupportedError
from gmcrypt.wordlist import Language, reversed_word_map, word_list


@pytest.mark.parametrize("language", [Language.ENGLISH, Language.SIMPLIFIED_CHINESE])
def test_word_list_addresses_eleven_bits(language):
    words = word_list(language)
    assert len(words) == 2048
    assert all(words)


def test_english_list_ends():
    words = word_list(Language.ENGLISH)
    assert words[0] == "abandon"
    assert words[2047] == "zoo"


def test_chinese_list_ends():
    words = word_list(Language.SIMPLIFIED_CHINESE)
    assert words[0] == "泊"
    assert words[-1] == "歇"
    assert all(len(word) == 1 for word in words)


def test_language_values_match_numeric_codes():
    assert word_list(2) == word_list(Language.ENGLISH)
    assert word_list(1) == word_list(Language.SIMPLIFIED_CHINESE)


def test_english_words_are_unique_and_sorted():
    words = word_list(Language.ENGLISH)
    assert len(set(words)) == len(words)
    assert list(words) == sorted(words)


def test_english_reversed_map_round_trip():
    words = word_list(Language.ENGLISH)
    mapping = reversed_word_map(Language.ENGLISH)
    assert len(mapping) == 2048
    assert all(mapping[word] == index for index, word in enumerate(words))
    assert mapping["abandon"] == 0
    assert mapping["zoo"] == 2047


def test_chinese_reversed_map_points_back_to_word():
    words = word_list(Language.SIMPLIFIED_CHINESE)
    mapping = reversed_word_map(Language.SIMPLIFIED_CHINESE)
    assert set(mapping) == set(words)
    assert all(words[mapping[word]] == word for word in words)
    assert mapping["泊"] == 0


def test_reversed_map_is_read_only():
    mapping = reversed_word_map(Language.ENGLISH)
    with pytest.raises(TypeError):
        mapping["abandon"] = 5  # type: ignore[index]
    assert mapping["abandon"] == 0


@pytest.mark.parametrize("language", [0, 3, -1, 99])
def test_unsupported_language_word_list(language):
    with pytest.raises(LanguageNotSupportedError):
        word_list(language)


@pytest.mark.parametrize("language", [0, 3])
def test_unsupported_language_reversed_map(language):
    with pytest.raises(LanguageNotSupportedError):
        reversed_word_map(language)


def test_unsupported_language_message():
    with pytest.raises(LanguageNotSupportedError, match="language has not been supported"):
        word_list(7)