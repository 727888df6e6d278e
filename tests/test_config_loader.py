import json

from delve.core.config_loader import (
    RuntimeConfig, load_runtime_config, resolve_seed, save_runtime_config,
)


def write_config(path, cfg):
    path.write_text(json.dumps({"game_config": cfg}))
    return str(path)


def test_missing_file_gives_defaults(tmp_path):
    assert load_runtime_config(str(tmp_path / "nope.json")) == RuntimeConfig()


def test_malformed_json_gives_defaults(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    assert load_runtime_config(str(path)) == RuntimeConfig()


def test_valid_file_is_loaded(tmp_path):
    path = write_config(tmp_path / "cfg.json",
                        {"seed_mode": "fixed", "seed": 99, "scale": 3, "log_level": "debug"})
    assert load_runtime_config(path) == RuntimeConfig("fixed", 99, 3, "DEBUG")


def test_invalid_fields_fall_back_independently(tmp_path):
    path = write_config(tmp_path / "cfg.json",
                        {"seed_mode": "sometimes", "seed": 7, "scale": 0, "log_level": "LOUD"})
    runtime = load_runtime_config(path)
    defaults = RuntimeConfig()
    assert runtime.seed_mode == defaults.seed_mode
    assert runtime.seed == 7
    assert runtime.scale == defaults.scale
    assert runtime.log_level == defaults.log_level


def test_fixed_seed_is_used_verbatim():
    assert resolve_seed(RuntimeConfig(seed_mode="fixed", seed=4242)) == 4242


def test_random_seed_is_in_range():
    seed = resolve_seed(RuntimeConfig(seed_mode="random"))
    assert 0 <= seed < 2**31 - 1


def test_save_keeps_unknown_keys(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"other": {"keep": True}, "game_config": {"extra": 1}}))

    save_runtime_config(RuntimeConfig("fixed", 5, 4, "WARNING"), str(path))

    data = json.loads(path.read_text())
    assert data["other"] == {"keep": True}
    assert data["game_config"]["extra"] == 1
    assert load_runtime_config(str(path)) == RuntimeConfig("fixed", 5, 4, "WARNING")


def test_save_creates_missing_directory(tmp_path):
    path = tmp_path / "nested" / "cfg.json"
    save_runtime_config(RuntimeConfig(), str(path))
    assert path.exists()
