# jsoncolumn/config/loader.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from omegaconf import DictConfig, OmegaConf

from jsoncolumn.config.schema import AppConfig

DEFAULT_YAML = Path(__file__).with_name("default.yaml")
ENV_PREFIX = "JSONCOLUMN__"


def _env_dotlist(prefix: str) -> List[str]:
    """JSONCOLUMN__CODEC__SORT_KEYS=true -> 'codec.sort_keys=true'."""
    return [
        f"{name[len(prefix):].lower().replace('__', '.')}={value}"
        for name, value in sorted(os.environ.items())
        if name.startswith(prefix)
    ]


def _layers(yaml_paths: Iterable[str], cli_overrides: Iterable[str], env_prefix: str) -> List[DictConfig]:
    layers = [OmegaConf.create(AppConfig().model_dump()), OmegaConf.load(DEFAULT_YAML)]
    layers.extend(OmegaConf.load(p) for p in yaml_paths)
    layers.append(OmegaConf.from_dotlist(_env_dotlist(env_prefix)))
    layers.append(OmegaConf.from_dotlist(list(cli_overrides)))
    return layers


def load_config(yaml_paths: List[str] | None = None,
                cli_overrides: List[str] | None = None,
                env_prefix: str = ENV_PREFIX) -> AppConfig:
    """Merge defaults < packaged YAML < user YAML < env < CLI, then validate."""
    merged = OmegaConf.merge(*_layers(yaml_paths or [], cli_overrides or [], env_prefix))
    return AppConfig(**OmegaConf.to_container(merged, resolve=True))
