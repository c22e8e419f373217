from datetime import date

import pytest

from wordget.backend.helpers import get_words
from wordget.backend.selector import (
    mulberry32, browser_mulberry32, date_seed, game_seed, select_index, select_word
)
from wordget.config import ANSWERS_FILE

# Reference outputs, all arithmetic unsigned 32-bit with wraparound
@pytest.mark.parametrize("seed,expected", [
    (0, 3125536879),
    (1, 836030678),
    (20261019, 233811917),
    (40522038, 4271246735),
    (20240101, 3475625567),
    (60783057, 634433319),
])
def test_mulberry32_reference_values(seed, expected):
    assert mulberry32(seed) == expected / 4294967296

# The browser game's variant xor-assigns the third step
@pytest.mark.parametrize("seed,expected", [
    (0, 1144304738),
    (1, 2693262067),
    (20261019, 3441058295),
    (40522038, 1718759958),
    (20240101, 2167870494),
])
def test_browser_mulberry32_reference_values(seed, expected):
    assert browser_mulberry32(seed) == expected / 4294967296

def test_hash_variants_differ():
    assert mulberry32(20261019) != browser_mulberry32(20261019)

def test_mulberry32_range():
    for seed in range(0, 5000, 37):
        assert 0.0 <= mulberry32(seed) < 1.0
        assert 0.0 <= browser_mulberry32(seed) < 1.0

def test_seeds():
    day = date(2026, 10, 19)
    assert date_seed(day) == 20261019
    assert game_seed(day, 1) == 20261019
    assert game_seed(day, 3) == 60783057

def test_game_seed_rejects_round_zero():
    with pytest.raises(ValueError):
        game_seed(date(2026, 10, 19), 0)

def test_select_word_is_deterministic():
    words = ["alpha", "bravo", "charlie", "delta", "echos"]
    day = date(2025, 1, 31)
    assert select_word(day, 2, words) == select_word(day, 2, words)

def test_select_index_floor():
    day = date(2026, 10, 19)
    # 233811917 / 2**32 = 0.0544...
    assert select_index(day, 1, 486) == 26
    assert select_index(day, 1, 10) == 0
    # 4271246735 / 2**32 = 0.9944...
    assert select_index(day, 2, 486) == 483
    assert select_index(day, 2, 10) == 9
    assert select_index(day, 1, 10, browser_mulberry32) == 8

def test_select_word_empty_list():
    with pytest.raises(ValueError):
        select_word(date(2026, 10, 19), 1, [])

def test_bundled_answers_daily_sequence():
    answers = get_words(savefile=ANSWERS_FILE, url=None, refetch=False)
    assert len(answers) == 486
    day = date(2026, 10, 19)
    assert [select_word(day, r, answers) for r in (1, 2, 3)] == ["apart", "yield", "brown"]
    assert [select_word(day, r, answers, browser_mulberry32) for r in (1, 2, 3)] == ["store", "grown", "great"]
