"""Engine construction and schema creation"""

from sqlmodel import SQLModel, create_engine

# Registers the tables on SQLModel.metadata
from docdiff.crud import models  # noqa: F401


def make_engine(db_url: str):
    """Create an engine; SQLite URLs get check_same_thread disabled for CLI use."""
    connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}
    return create_engine(db_url, echo=False, connect_args=connect_args)


def init_db(engine) -> None:
    """Create any missing tables."""
    SQLModel.metadata.create_all(engine)


def reset_db(engine) -> None:
    """Drop and recreate all tables."""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
