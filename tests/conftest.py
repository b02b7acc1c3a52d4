import pytest
from sqlalchemy import Column, Integer, String

from jsoncolumn.config.schema import AppConfig
from jsoncolumn.orm.base import Base, make_engine, make_session_maker
from jsoncolumn.types import JSONObjectType, mutable_json_object


class DocumentORM(Base):
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=True)
    # plain: in-place edits are not tracked
    payload = Column(JSONObjectType(), nullable=True)
    # tracked: top-level key changes mark the row dirty
    attributes = Column(mutable_json_object(), nullable=True)


@pytest.fixture
def document_model():
    return DocumentORM


@pytest.fixture
def engine():
    eng = make_engine(AppConfig())
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def session_maker(engine):
    return make_session_maker(engine)


@pytest.fixture
def session(session_maker):
    s = session_maker()
    yield s
    s.close()


@pytest.fixture
def sample_doc():
    return {"a": 1, "b": [True, None, "x"]}
