import pytest

from wordget.backend.validator import (
    GuessRejected, GuessLengthError, InvalidWordError, HardModeError,
    validate_guess, check_hard_mode, confirmed_letter_counts, target_letter_counts
)

DICTIONARY = frozenset(["apple", "abbey", "brink", "ample", "maple", "plaid", "lapel", "paper", "pupal", "sweet"])

def test_accepts_dictionary_word_and_lowercases():
    assert validate_guess("APPLE", DICTIONARY) == "apple"

@pytest.mark.parametrize("guess", ["appl", "apples", ""])
def test_wrong_length(guess):
    with pytest.raises(GuessLengthError) as excinfo:
        validate_guess(guess, DICTIONARY)
    assert excinfo.value.reason == "wrong length"

def test_not_in_dictionary():
    with pytest.raises(InvalidWordError) as excinfo:
        validate_guess("xyzzy", DICTIONARY)
    assert excinfo.value.message == "Word not in dictionary!"
    assert excinfo.value.reason == "not in dictionary"
    assert isinstance(excinfo.value, GuessRejected)
    assert isinstance(excinfo.value, ValueError)

def test_dictionary_checked_before_hard_mode():
    with pytest.raises(InvalidWordError):
        validate_guess("zzzzz", DICTIONARY, revealed_letters={"a"})

def test_hard_mode_revealed_letter_missing():
    with pytest.raises(HardModeError) as excinfo:
        validate_guess("brink", DICTIONARY, revealed_letters={"a", "e"}, correct_positions={0: "a"})
    assert excinfo.value.message == "Guess must include all revealed letters in correct positions!"
    assert excinfo.value.reason == "must include revealed letters/positions"

def test_hard_mode_position_must_be_kept():
    # 'a' is still present but no longer at position 0
    with pytest.raises(HardModeError) as excinfo:
        validate_guess("maple", DICTIONARY, revealed_letters={"a", "e"}, correct_positions={0: "a"})
    assert excinfo.value.missing == "a@0"

def test_hard_mode_accepts_compliant_guess():
    assert validate_guess("ample", DICTIONARY, revealed_letters={"a", "e"}, correct_positions={0: "a"}) == "ample"

def test_hard_mode_off():
    assert validate_guess("brink", DICTIONARY, revealed_letters={"a"}, correct_positions={0: "a"},
                          hard_mode=False) == "brink"

def test_nothing_revealed_accepts_anything():
    check_hard_mode("brink", set(), {})

def test_required_counts():
    # Two p's were confirmed, so one p is not enough
    with pytest.raises(HardModeError):
        check_hard_mode("plaid", {"p", "a"}, {}, required_counts={"p": 2, "a": 1})
    check_hard_mode("paper", {"p", "a"}, {}, required_counts={"p": 2, "a": 1})

def test_confirmed_letter_counts():
    # paper vs apple: p, a, p yellow/green, e yellow
    assert confirmed_letter_counts("apple", ["paper"]) == {"p": 2, "a": 1, "e": 1}
    # Only one 'a' is ever confirmed, and the largest count across guesses wins
    assert confirmed_letter_counts("apple", ["abbey", "pupal"]) == {"a": 1, "e": 1, "p": 2, "l": 1}

def test_target_letter_counts():
    assert target_letter_counts("apple", {"p", "a"}) == {"p": 2, "a": 1}
