"""Shared fixtures for core unit tests"""

import pytest
from sqlalchemy import create_engine
from sqlmodel import SQLModel, Session

# Registers the tables on SQLModel.metadata
from docdiff.crud import models  # noqa: F401


@pytest.fixture(name="session")
def session_fixture():
    """Session on a fresh in-memory SQLite database."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False})
    SQLModel.metadata.create_all(engine)
    with Session(engine) as s:
        yield s
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="docs_dir")
def docs_dir_fixture(tmp_path):
    """Two drafts of the same page, the second with one paragraph reworded."""
    d = tmp_path / "docs"
    d.mkdir()
    (d / "draft-one.md").write_text(
        '# Guide\n{: id="h1"}\n\nInstall the tool.\n{: id="p1"}\n\nRun it.\n'
    )
    (d / "draft-two.md").write_text(
        '# Guide\n{: id="h1"}\n\nInstall the package.\n{: id="p1"}\n\nRun it.\n'
    )
    return d
