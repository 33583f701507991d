"""Shared fixtures for crud unit tests"""

import pytest
from sqlalchemy import create_engine
from sqlmodel import SQLModel, Session

from distillmd.crud.database import init_db
from distillmd.crud.documents import create_document


SUMMARY = "# 강의\n\n1. 개요\n- [00:10] 시작\n- [ ] 복습하기\n\n> 💡 팁"


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine with all tables created."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False})
    init_db(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Fresh session per test; changes are not committed."""
    with Session(engine) as s:
        yield s


@pytest.fixture(name="doc")
def doc_fixture(session):
    """A minimal Document persisted to the session."""
    return create_document(session, "강의", SUMMARY, tags=["python"])
