from pathlib import Path

import pytest

from ataxx.config import AtaxxConfig, config_from_dict, load_config
from ataxx.search import SearchConfig


def test_defaults_without_file(tmp_path):
    config = load_config(tmp_path / "missing.yaml")
    assert config == AtaxxConfig()
    assert config.search == SearchConfig(max_depth=1, endgame_empty_threshold=5)
    assert load_config() == AtaxxConfig()


def test_yaml_overrides(tmp_path):
    path = tmp_path / "game.yaml"
    path.write_text(
        "search:\n"
        "  max_depth: 2\n"
        "red: ai\n"
        "blue: manual\n"
        "seed: 7\n"
        "blocks: [c4, b2]\n"
        "log_level: debug\n"
    )
    config = load_config(path)
    assert config.search.max_depth == 2
    assert config.search.endgame_empty_threshold == 5
    assert config.red == "ai"
    assert config.blue == "manual"
    assert config.seed == 7
    assert config.blocks == ["c4", "b2"]
    assert config.log_level == "DEBUG"


def test_shipped_default_config_loads():
    path = Path(__file__).resolve().parents[1] / "configs" / "default.yaml"
    assert load_config(path) == AtaxxConfig()


def test_unknown_player_kind_rejected():
    with pytest.raises(ValueError):
        config_from_dict({"red": "robot"})


def test_unknown_search_key_rejected():
    with pytest.raises(TypeError):
        config_from_dict({"search": {"width": 3}})
