# jsoncolumn/config/schema.py
from __future__ import annotations

from pydantic import BaseModel


class CodecCfg(BaseModel):
    ensure_ascii: bool = False
    sort_keys: bool = False


class DatabaseCfg(BaseModel):
    url: str = "sqlite:///:memory:"
    echo: bool = False
    pool_pre_ping: bool = True


class CacheCfg(BaseModel):
    max_size: int = 1024


class AppConfig(BaseModel):
    version: str = "v1"
    codec: CodecCfg = CodecCfg()
    database: DatabaseCfg = DatabaseCfg()
    cache: CacheCfg = CacheCfg()

    class Config:
        extra = "forbid"  # no silent typos
