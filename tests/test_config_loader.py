import json
from pathlib import Path

import pytest

from wordget.config import PROJECT_ROOT
from wordget.config_loader import (
    ConfigError, load_config, deep_merge, set_nested_value,
    get_abs_path, validate_config_schema, _parse_cli_value
)

def test_defaults_load():
    config = load_config([])
    assert config['game'] == {
        'hard_mode': True,
        'hard_mode_policy': 'revealed_counts',
        'streak_policy': 'calendar',
        'word_hash': 'mulberry32',
    }
    assert config['answers']['savefile'] == "data/answers.txt"
    assert config['storage']['path'] == "~/.wordget/storage.json"

def test_easy_and_storage_flags():
    config = load_config(["--easy", "--storage", "/tmp/wordget.json"])
    assert config['game']['hard_mode'] is False
    assert config['storage']['path'] == "/tmp/wordget.json"

def test_set_overrides():
    config = load_config(["--set", "game.streak_policy", "simple",
                          "--set", "answers.refetch", "true",
                          "--set", "storage.path", "none"])
    assert config['game']['streak_policy'] == "simple"
    assert config['answers']['refetch'] is True
    assert config['storage']['path'] is None

def test_custom_config_is_merged(tmp_path):
    custom = tmp_path / "custom.json"
    custom.write_text(json.dumps({'game': {'hard_mode_policy': 'target_counts'}}))
    config = load_config(["-c", str(custom)])
    assert config['game']['hard_mode_policy'] == 'target_counts'
    assert config['game']['hard_mode'] is True

def test_missing_custom_config_warns(tmp_path, capsys):
    config = load_config(["-c", str(tmp_path / "nope.json")])
    assert config['game']['hard_mode'] is True
    assert "not found" in capsys.readouterr().err

@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_bad_custom_config(tmp_path, content):
    custom = tmp_path / "custom.json"
    custom.write_text(content)
    with pytest.raises(ConfigError):
        load_config(["-c", str(custom)])

def test_unknown_policy_fails():
    with pytest.raises(ConfigError, match="game.streak_policy"):
        load_config(["--set", "game.streak_policy", "weekly"])

def test_wrong_type_fails():
    with pytest.raises(ConfigError, match="game.hard_mode"):
        load_config(["--set", "game.hard_mode", "1"])

def test_schema_reports_missing_keys():
    errors = validate_config_schema({'answers': {}, 'guesses': {}, 'storage': {}})
    assert "Schema Error: Missing required key 'answers.savefile'" in errors
    assert "Schema Error: Missing required key 'game'" in errors

@pytest.mark.parametrize("raw, expected", [
    ("None", None), ("TRUE", True), ("false", False),
    ("42", 42), ("0.5", 0.5), ("simple", "simple"),
])
def test_parse_cli_value(raw, expected):
    assert _parse_cli_value(raw) == expected

def test_deep_merge_keeps_untouched_keys():
    merged = deep_merge({'a': {'b': 2}}, {'a': {'b': 1, 'c': 3}, 'd': 4})
    assert merged == {'a': {'b': 2, 'c': 3}, 'd': 4}

def test_set_nested_value_creates_sections():
    d = {}
    set_nested_value(d, "x.y.z", "7")
    assert d == {'x': {'y': {'z': 7}}}

def test_get_abs_path():
    assert get_abs_path("data/answers.txt") == PROJECT_ROOT / "data/answers.txt"
    assert get_abs_path("/abs/file.json") == Path("/abs/file.json")
    assert get_abs_path("~/x.json") == Path.home() / "x.json"

def test_word_hash_choice():
    assert load_config(["--set", "game.word_hash", "browser"])['game']['word_hash'] == "browser"
    with pytest.raises(ConfigError, match="game.word_hash"):
        load_config(["--set", "game.word_hash", "sha1"])

def test_section_must_be_an_object():
    with pytest.raises(ConfigError, match="Section 'storage' must be an object"):
        load_config(["--set", "storage", "somewhere"])
