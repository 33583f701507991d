"""Engine construction and schema creation"""

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

# Register table metadata before create_all.
from distillmd.crud import tables  # noqa: F401


def make_engine(db_url: str) -> Engine:
    connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}
    return create_engine(db_url, echo=False, connect_args=connect_args)


def init_db(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)
