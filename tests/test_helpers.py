import numpy as np
import pytest
import requests

from wordget.backend import helpers
from wordget.backend.helpers import (
    Classification, get_pattern, score, pattern_to_str, get_words, load_word_lists
)

C, P, A = Classification.CORRECT, Classification.PRESENT, Classification.ABSENT

@pytest.mark.parametrize("target,guess,expected", [
    ("shade", "sames", "gy-y-"),
    ("apple", "abbey", "g--y-"),
    ("apple", "paper", "yygy-"),
    ("level", "belle", "-gyyy"),
    ("scoop", "cools", "yyg-y"),
    ("crane", "raise", "yy--g"),
    ("crane", "stare", "--gyg"),
    ("eager", "speed", "--yg-"),
])
def test_get_pattern(target, guess, expected):
    assert pattern_to_str(get_pattern(guess, target)) == expected

def test_repeated_guess_letter_single_in_target():
    # Only the first 's' counts, the trailing one is absent
    result = score("shade", "sames")
    assert result[0] == C
    assert result[4] == A

def test_green_takes_priority_over_earlier_yellow():
    # The only 'l' is claimed by the green at index 3, so the earlier ones get nothing
    assert score("world", "lolly") == [A, C, A, C, A]
    assert score("shade", "essay") == [P, P, A, P, A]

@pytest.mark.parametrize("word", ["apple", "crane", "eerie", "sweet", "mamma"])
def test_score_self_is_all_correct(word):
    assert score(word, word) == [C] * 5

def test_score_is_case_insensitive():
    assert score("APPLE", "apple") == [C] * 5

def test_get_words_reads_and_filters(tmp_path, messenger):
    words_file = tmp_path / "words.txt"
    words_file.write_text("Apple\ncrane\n\ntoolong\nab1de\nshade\n")
    words = get_words(savefile=str(words_file), url=None, messenger=messenger)
    assert isinstance(words, np.ndarray)
    assert list(words) == ["apple", "crane", "shade"]

def test_get_words_missing_file_without_url(tmp_path, messenger):
    words = get_words(savefile=str(tmp_path / "nope.txt"), url=None, messenger=messenger)
    assert len(words) == 0
    assert messenger.warnings

class FakeResponse:
    def __init__(self, text, fail=False):
        self.text = text
        self.fail = fail

    def raise_for_status(self):
        if self.fail:
            raise requests.exceptions.HTTPError("404 Client Error")

def test_get_words_downloads_and_saves(tmp_path, monkeypatch, messenger):
    monkeypatch.setattr(helpers.requests, "get", lambda url, timeout: FakeResponse("crane\nslate\nAUDIO\nxx\n"))
    savefile = tmp_path / "sub" / "fetched.txt"
    words = get_words(savefile=str(savefile), url="https://example.invalid/words.txt", messenger=messenger)
    assert list(words) == ["crane", "slate", "audio"]
    assert savefile.read_text().split() == ["crane", "slate", "audio"]

def test_get_words_download_failure(tmp_path, monkeypatch, messenger):
    monkeypatch.setattr(helpers.requests, "get", lambda url, timeout: FakeResponse("", fail=True))
    words = get_words(savefile=str(tmp_path / "x.txt"), url="https://example.invalid/words.txt",
                      refetch=True, messenger=messenger)
    assert len(words) == 0
    assert any("Error downloading" in w for w in messenger.warnings)

def test_load_word_lists_keeps_lists_disjoint(tmp_path, messenger):
    answers_file = tmp_path / "answers.txt"
    guesses_file = tmp_path / "guesses.txt"
    answers_file.write_text("store\napple\nstore\ncrane\n")
    guesses_file.write_text("abbey\napple\nbrink\n")
    config = {
        'answers': {'savefile': str(answers_file), 'url': None, 'refetch': False, 'save': False},
        'guesses': {'savefile': str(guesses_file), 'url': None, 'refetch': False, 'save': False},
    }
    answers, guesses = load_word_lists(config, messenger)
    assert list(answers) == ["store", "apple", "crane"]
    assert list(guesses) == ["abbey", "brink"]
