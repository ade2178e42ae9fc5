import pytest

from algolab.random_string import DEFAULT_ALPHABET, random_string


def test_length_matches_size():
    assert len(random_string(4)) == 4
    assert len(random_string(100, "xy")) == 100


def test_default_alphabet_characters():
    result = random_string(500)
    assert set(result) <= set(DEFAULT_ALPHABET)


def test_custom_alphabet_characters():
    result = random_string(200, "abc")
    assert set(result) <= {"a", "b", "c"}


def test_single_letter_alphabet():
    assert random_string(5, "d") == "ddddd"


def test_zero_size():
    assert random_string(0) == ""
    assert random_string(-3, "abc") == ""


def test_empty_alphabet():
    with pytest.raises(ValueError):
        random_string(3, "")


def test_default_alphabet_is_alphanumeric():
    assert len(DEFAULT_ALPHABET) == 62
    assert DEFAULT_ALPHABET.isalnum()