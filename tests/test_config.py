import pytest
from pydantic import ValidationError

from donorcheck.config.loader import (
    DEFAULT_RULES_PATH,
    load_rules,
    rules_from_mapping,
    rules_path,
)
from donorcheck.models.rules import DEFAULT_RULES

def test_packaged_rules_match_defaults(monkeypatch):
    monkeypatch.delenv("DONORCHECK_RULES", raising=False)
    monkeypatch.delenv("DONORCHECK_INFO_URL", raising=False)
    assert rules_path() == DEFAULT_RULES_PATH
    assert load_rules() == DEFAULT_RULES

def test_explicit_path_beats_env(tmp_path, monkeypatch):
    env_file = tmp_path / "env.yaml"
    cli_file = tmp_path / "cli.yaml"
    monkeypatch.setenv("DONORCHECK_RULES", str(env_file))
    assert rules_path() == env_file
    assert rules_path(str(cli_file)) == cli_file

def test_partial_file_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("DONORCHECK_INFO_URL", raising=False)
    f = tmp_path / "rules.yaml"
    f.write_text("rules:\n  max_age: 65\n  min_weight_kg: 50\n")
    rules = load_rules(str(f))
    assert rules.max_age == 65
    assert rules.min_weight_kg == 50.0
    assert rules.min_age == 18
    assert rules.high_volume_ml == 450

def test_env_overrides_info_url(monkeypatch):
    monkeypatch.delenv("DONORCHECK_RULES", raising=False)
    monkeypatch.setenv("DONORCHECK_INFO_URL", "https://example.org/donate")
    assert load_rules().info_url == "https://example.org/donate"

def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_rules(str(tmp_path / "nope.yaml"))

def test_mapping_shapes():
    assert rules_from_mapping(None) == DEFAULT_RULES
    assert rules_from_mapping({"min_age": 17}).min_age == 17
    assert rules_from_mapping({"rules": None}) == DEFAULT_RULES
    with pytest.raises(ValueError):
        rules_from_mapping(["min_age", 17])
    with pytest.raises(ValueError):
        rules_from_mapping({"rules": [1, 2]})
    with pytest.raises(ValidationError):
        rules_from_mapping({"rules": {"max_age": 10}})

def test_env_rules_file_is_loaded(tmp_path, monkeypatch):
    monkeypatch.delenv("DONORCHECK_INFO_URL", raising=False)
    f = tmp_path / "regional.yaml"
    f.write_text("rules:\n  min_age: 17\n  high_volume_ml: 470\n")
    monkeypatch.setenv("DONORCHECK_RULES", str(f))
    rules = load_rules()
    assert rules.min_age == 17
    assert rules.high_volume_ml == 470

def test_malformed_yaml_is_value_error(tmp_path):
    f = tmp_path / "rules.yaml"
    f.write_text("rules: [unclosed\n")
    with pytest.raises(ValueError):
        load_rules(str(f))

def test_keys_next_to_rules_rejected():
    with pytest.raises(ValueError):
        rules_from_mapping({"rules": {"min_age": 18}, "max_agee": 65})
