# jsoncolumn/orm/base.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base = declarative_base()


def make_engine(cfg) -> Engine:
    """Create an engine from a DatabaseCfg (or an AppConfig carrying `.database`)."""
    db = getattr(cfg, "database", cfg)
    return create_engine(db.url, echo=db.echo, pool_pre_ping=db.pool_pre_ping)


def make_session_maker(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, expire_on_commit=False, autocommit=False, autoflush=False)


@contextmanager
def session_scope(session_maker: sessionmaker) -> Iterator[Session]:
    """One unit of work: commit on success, roll back on any error."""
    with session_maker() as s:
        with s.begin():
            yield s
