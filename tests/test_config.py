import os

import pytest
from pydantic import ValidationError

from jsoncolumn.config.loader import load_config
from jsoncolumn.types import JSONObjectType


@pytest.fixture(autouse=True)
def no_env_overrides(monkeypatch):
    for k in list(os.environ):
        if k.startswith("JSONCOLUMN__"):
            monkeypatch.delenv(k)


def test_defaults():
    cfg = load_config()
    assert cfg.codec.ensure_ascii is False
    assert cfg.codec.sort_keys is False
    assert cfg.database.url == "sqlite:///:memory:"
    assert cfg.cache.max_size == 1024


def test_yaml_env_and_cli_layering(tmp_path, monkeypatch):
    user_yaml = tmp_path / "app.yaml"
    user_yaml.write_text("codec:\n  sort_keys: true\ncache:\n  max_size: 10\n", encoding="utf-8")
    monkeypatch.setenv("JSONCOLUMN__CACHE__MAX_SIZE", "20")
    monkeypatch.setenv("JSONCOLUMN__DATABASE__ECHO", "true")

    cfg = load_config([str(user_yaml)], cli_overrides=["codec.ensure_ascii=true"])

    assert cfg.codec.sort_keys is True
    assert cfg.codec.ensure_ascii is True
    assert cfg.cache.max_size == 20
    assert cfg.database.echo is True


def test_unknown_keys_are_rejected():
    with pytest.raises(ValidationError):
        load_config(cli_overrides=["typo=1"])


def test_column_type_from_loaded_config():
    cfg = load_config(cli_overrides=["codec.sort_keys=true"])
    jt = JSONObjectType.from_config(cfg)
    assert jt.process_bind_param({"b": 1, "a": 2}, None) == '{"a":2,"b":1}'
